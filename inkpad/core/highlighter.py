from __future__ import annotations

import functools
import html
import logging
import re
from dataclasses import dataclass
from typing import Iterable

from inkpad.settings import APP_NAME

from .languages import Language, LanguagePattern, patterns_for
from .theme import Theme

logger = logging.getLogger(f"{APP_NAME}.highlighter")


@dataclass(frozen=True)
class StyledSpan:
    """Foreground overlay; offsets are UTF-16 code units."""

    start: int
    length: int
    color: str

    @property
    def end(self) -> int:
        return self.start + self.length


@dataclass(frozen=True)
class StyledText:
    text: str
    foreground: str
    font_family: str
    font_size: int
    spans: tuple[StyledSpan, ...]

    @property
    def length(self) -> int:
        return utf16_len(self.text)

    def runs(self) -> list[StyledSpan]:
        """
        Flatten base style + overlays into contiguous, non-overlapping runs.

        Overlays are painted in order, so the last span covering a position
        decides its colour. Adjacent runs with the same colour are merged.
        """
        n = self.length
        if n == 0:
            return []

        colors = [self.foreground] * n
        for span in self.spans:
            colors[span.start:span.end] = [span.color] * span.length

        runs: list[StyledSpan] = []
        start = 0
        for i in range(1, n + 1):
            if i == n or colors[i] != colors[start]:
                runs.append(StyledSpan(start, i - start, colors[start]))
                start = i
        return runs


def utf16_len(text: str) -> int:
    if text.isascii():
        return len(text)
    return len(text.encode("utf-16-le", "surrogatepass")) // 2


def _utf16_index(text: str) -> list[int] | None:
    """Code point index -> UTF-16 offset table, or None when both coincide."""
    if text.isascii() or max(text) <= "\uffff":
        return None
    table = [0] * (len(text) + 1)
    pos = 0
    for i, ch in enumerate(text):
        table[i] = pos
        pos += 2 if ord(ch) > 0xFFFF else 1
    table[len(text)] = pos
    return table


@functools.lru_cache(maxsize=256)
def _compile(regex: str, flags: int) -> re.Pattern:
    return re.compile(regex, flags)


def _flags(pattern: LanguagePattern) -> int:
    flags = 0
    if pattern.multiline:
        flags |= re.MULTILINE
    if pattern.ignore_case:
        flags |= re.IGNORECASE
    return flags


def highlight(
    text: str,
    language: Language,
    theme: Theme,
    *,
    patterns: Iterable[LanguagePattern] | None = None,
) -> StyledText:
    """
    Colour ``text`` for ``language``.

    Every pattern is matched over the whole text and its spans are layered in
    table order. A pattern that fails to compile is logged and skipped.
    Cost is O(len(patterns) * len(text)).
    """
    text = text or ""
    if patterns is None:
        patterns = patterns_for(language)

    index = _utf16_index(text)
    spans: list[StyledSpan] = []

    for pattern in patterns:
        try:
            rx = _compile(pattern.regex, _flags(pattern))
        except re.error as e:
            logger.warning(
                "Skipping malformed pattern: language=%s kind=%s regex=%r error=%s",
                language.name, pattern.kind.value, pattern.regex, e,
            )
            continue

        color = theme.color_for(pattern.kind)
        for m in rx.finditer(text):
            start, end = m.span()
            if start == end:
                continue
            if index is not None:
                start, end = index[start], index[end]
            spans.append(StyledSpan(start, end - start, color))

    return StyledText(
        text=text,
        foreground=theme.foreground,
        font_family=theme.font_family,
        font_size=theme.font_size,
        spans=tuple(spans),
    )


def styled_text_to_html(styled: StyledText) -> str:
    """Render flattened runs as escaped ``<span style="color:...">`` markup."""
    data = styled.text.encode("utf-16-le", "surrogatepass")
    parts = []
    for run in styled.runs():
        chunk = data[2 * run.start:2 * run.end].decode("utf-16-le", "surrogatepass")
        escaped = html.escape(chunk, quote=False)
        if run.color == styled.foreground:
            parts.append(escaped)
        else:
            parts.append(f'<span style="color:{run.color}">{escaped}</span>')
    return "".join(parts)
