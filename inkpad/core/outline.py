from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Heading:
    level: int
    text: str
    line_number: int  # 1-based


def extract_outline(text: str) -> list[Heading]:
    """
    Collect ``#``-style headings for the outline panel.

    More lenient than the renderer: leading indentation and a missing space
    after the hashes are accepted, but headings without text are skipped.
    """
    headings: list[Heading] = []
    for index, line in enumerate((text or "").splitlines()):
        stripped = line.strip(" \t")
        if not stripped.startswith("#"):
            continue
        level = len(stripped) - len(stripped.lstrip("#"))
        if level > 6:
            continue
        title = stripped[level:].strip(" \t")
        if title:
            headings.append(Heading(level=level, text=title, line_number=index + 1))
    return headings
