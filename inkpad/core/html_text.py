from __future__ import annotations

import html
import re

BLOCK_PREFIXES = ("<h", "<ul", "<ol", "<pre", "<blockquote", "<hr")

_LIST_RUN_RE = re.compile(r"<li\b[^>]*>.*?</li>(?:\n<li\b[^>]*>.*?</li>)*")


def escape_html(text: str, *, quote: bool = False) -> str:
    """Escape ``&``, ``<``, ``>`` (and quotes when ``quote``)."""
    return html.escape(text, quote=quote)


def wrap_list_items(markup: str) -> str:
    """Wrap every run of ``<li>`` lines (one item per line) in a single ``<ul>``."""
    return _LIST_RUN_RE.sub(lambda m: f"<ul>{m.group(0)}</ul>", markup)


def convert_line_breaks(paragraph: str) -> str:
    paragraph = paragraph.replace("\n", "<br>")
    return paragraph.replace("<br><br>", "</p><p>")


def wrap_paragraphs(markup: str) -> str:
    """
    Split on blank lines and wrap non-block chunks in ``<p>``.

    Chunks already starting with a block-level tag are kept as they are;
    whitespace-only chunks are dropped so no empty ``<p></p>`` is emitted.
    """
    out = []
    for block in markup.split("\n\n"):
        block = block.strip()
        if not block:
            continue
        if block.startswith(BLOCK_PREFIXES):
            out.append(block)
        else:
            out.append(f"<p>{convert_line_breaks(block)}</p>")
    return "\n".join(out)
