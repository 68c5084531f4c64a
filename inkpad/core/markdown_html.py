from __future__ import annotations

import re
from typing import Callable

from .html_text import escape_html, wrap_list_items, wrap_paragraphs

# Stashed code content is referenced as NUL + index + NUL until the end.
_STASH_RE = re.compile(r"\x00(\d+)\x00")

_FENCE_RE = re.compile(r"```(?:([A-Za-z0-9_+#.-]+)[ \t]*\n)?([\s\S]*?)```")
_INLINE_CODE_RE = re.compile(r"`([^`]+)`")

_HEADING_RES = [
    (level, re.compile(rf"^{'#' * level} (.+)$", re.MULTILINE))
    for level in range(6, 0, -1)
]

# An opener directly followed by whitespace or another marker never opens
# emphasis, so bullets ("* item") and rules ("***") survive this pass.
_EMPHASIS_RULES = [
    (re.compile(r"\*\*\*(?![\s*])(.+?)\*\*\*"), r"<strong><em>\1</em></strong>"),
    (re.compile(r"\*\*(?![\s*])(.+?)\*\*"), r"<strong>\1</strong>"),
    (re.compile(r"\*(?![\s*])(.+?)\*"), r"<em>\1</em>"),
    (re.compile(r"__(?![\s_])(.+?)__"), r"<strong>\1</strong>"),
    (re.compile(r"_(?![\s_])(.+?)_"), r"<em>\1</em>"),
]

# "[text](" or "![alt](" followed by the target up to the closing paren
_LINK_TARGET_RE = re.compile(r"(\[[^\]]*\]\()([^)]+)\)")

_STRIKE_RE = re.compile(r"~~(.+?)~~")
_LINK_RE = re.compile(r"(?<!!)\[([^\]]+)\]\(([^)]+)\)")
_IMAGE_RE = re.compile(r"!\[([^\]]*?)\]\(([^)]+)\)")
_HR_RES = [re.compile(r"^-{3,}$", re.MULTILINE), re.compile(r"^\*{3,}$", re.MULTILINE)]
_BLOCKQUOTE_RE = re.compile(r"^&gt; (.+)$", re.MULTILINE)
_TASK_DONE_RE = re.compile(r"^- \[[xX]\] (.+)$", re.MULTILINE)
_TASK_OPEN_RE = re.compile(r"^- \[ \] (.+)$", re.MULTILINE)
_BULLET_RE = re.compile(r"^[-*] (.+)$", re.MULTILINE)
_ORDERED_RE = re.compile(r"^\d+\. (.+)$", re.MULTILINE)


class _Stash:
    """Holds code content and link targets out of reach of the later passes."""

    def __init__(self):
        self._items: list[str] = []

    def put(self, content: str) -> str:
        self._items.append(content)
        return f"\x00{len(self._items) - 1}\x00"

    def restore(self, html: str) -> str:
        if not self._items:
            return html
        # a link target may itself hold an inline code reference
        return _STASH_RE.sub(lambda m: self.restore(self._items[int(m.group(1))]), html)


def _fenced_code(text: str, stash: _Stash) -> str:
    def repl(m: re.Match) -> str:
        lang = m.group(1)
        ref = stash.put(m.group(2))
        if lang:
            return f'<pre><code class="language-{escape_html(lang, quote=True)}">{ref}</code></pre>'
        return f"<pre><code>{ref}</code></pre>"

    return _FENCE_RE.sub(repl, text)


def _inline_code(text: str, stash: _Stash) -> str:
    return _INLINE_CODE_RE.sub(lambda m: f"<code>{stash.put(m.group(1))}</code>", text)


def _link_targets(text: str, stash: _Stash) -> str:
    return _LINK_TARGET_RE.sub(lambda m: f"{m.group(1)}{stash.put(_attr(m.group(2)))})", text)


def _headings(text: str) -> str:
    for level, rx in _HEADING_RES:
        text = rx.sub(rf"<h{level}>\1</h{level}>", text)
    return text


def _emphasis(text: str) -> str:
    for rx, template in _EMPHASIS_RULES:
        text = rx.sub(template, text)
    return text


def _strikethrough(text: str) -> str:
    return _STRIKE_RE.sub(r"<del>\1</del>", text)


def _attr(value: str) -> str:
    # text is already escaped for &, <, >; only the quote is left
    return value.replace('"', "&quot;")


def _links(text: str) -> str:
    return _LINK_RE.sub(lambda m: f'<a href="{_attr(m.group(2))}">{m.group(1)}</a>', text)


def _images(text: str) -> str:
    return _IMAGE_RE.sub(
        lambda m: f'<img src="{_attr(m.group(2))}" alt="{_attr(m.group(1))}">', text
    )


def _horizontal_rules(text: str) -> str:
    for rx in _HR_RES:
        text = rx.sub("<hr>", text)
    return text


def _blockquotes(text: str) -> str:
    return _BLOCKQUOTE_RE.sub(r"<blockquote>\1</blockquote>", text)


def _task_items(text: str) -> str:
    text = _TASK_DONE_RE.sub(
        r'<li class="task-list-item"><input type="checkbox" checked disabled> \1</li>', text
    )
    return _TASK_OPEN_RE.sub(
        r'<li class="task-list-item"><input type="checkbox" disabled> \1</li>', text
    )


def _list_items(text: str) -> str:
    text = _BULLET_RE.sub(r"<li>\1</li>", text)
    return _ORDERED_RE.sub(r"<li>\1</li>", text)


# Order matters: each pass assumes the earlier substitutions have happened.
_INLINE_AND_BLOCK_PASSES: list[tuple[str, Callable[[str], str]]] = [
    ("headings", _headings),
    ("emphasis", _emphasis),
    ("strikethrough", _strikethrough),
    ("links", _links),
    ("images", _images),
    ("horizontal_rules", _horizontal_rules),
    ("blockquotes", _blockquotes),
    ("task_items", _task_items),
    ("list_items", _list_items),
    ("list_wrap", wrap_list_items),
    ("paragraphs", wrap_paragraphs),
]


def markdown_to_html(markdown: str | None) -> str:
    """
    Convert markdown to an HTML fragment with a fixed sequence of regex passes.

    Never raises: anything that matches no rule comes out as escaped text in
    paragraphs. Code content (fenced blocks and inline spans) and link or
    image targets are escaped but otherwise left untouched by the later passes.
    """
    text = (markdown or "").replace("\r\n", "\n").replace("\x00", "")
    if not text.strip():
        return ""

    stash = _Stash()
    text = escape_html(text)
    text = _fenced_code(text, stash)
    text = _inline_code(text, stash)
    text = _link_targets(text, stash)
    for _name, step in _INLINE_AND_BLOCK_PASSES:
        text = step(text)
    return stash.restore(text)
