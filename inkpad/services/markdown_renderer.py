from __future__ import annotations

import logging

from inkpad.core.document import Document
from inkpad.core.highlighter import highlight, styled_text_to_html
from inkpad.core.html_text import escape_html
from inkpad.core.markdown_html import markdown_to_html
from inkpad.core.sanitize import sanitize_rendered_html
from inkpad.core.theme import DARK, LIGHT
from inkpad.settings import APP_NAME

_PALETTES = {
    "light": {
        "text": "#1a1a1a",
        "background": "#ffffff",
        "code_background": "#f5f5f5",
        "border": "#e0e0e0",
        "link": "#0066cc",
        "muted": "#666666",
    },
    "dark": {
        "text": "#e0e0e0",
        "background": "#1e1e1e",
        "code_background": "#2d2d2d",
        "border": "#404040",
        "link": "#6db3f2",
        "muted": "#a0a0a0",
    },
}


def page_css(*, dark: bool) -> str:
    c = _PALETTES["dark" if dark else "light"]
    return f"""
    * {{ box-sizing: border-box; }}
    body {{
        font-family: -apple-system, 'Segoe UI', system-ui, sans-serif;
        font-size: 15px; line-height: 1.7;
        color: {c["text"]}; background-color: {c["background"]};
        padding: 30px 40px; margin: 0 auto; max-width: 860px;
    }}
    h1, h2, h3, h4, h5, h6 {{ font-weight: 600; margin-top: 1.5em; margin-bottom: 0.5em; line-height: 1.3; }}
    h1 {{ font-size: 2em; border-bottom: 1px solid {c["border"]}; padding-bottom: 0.3em; }}
    h2 {{ font-size: 1.5em; border-bottom: 1px solid {c["border"]}; padding-bottom: 0.3em; }}
    h3 {{ font-size: 1.25em; }}
    p {{ margin: 1em 0; }}
    a {{ color: {c["link"]}; text-decoration: none; }}
    a:hover {{ text-decoration: underline; }}
    code {{
        font-family: Menlo, Consolas, monospace; font-size: 0.9em;
        background-color: {c["code_background"]}; padding: 0.2em 0.4em; border-radius: 4px;
    }}
    pre {{ background-color: {c["code_background"]}; padding: 16px; border-radius: 8px; overflow-x: auto; }}
    pre code {{ background: none; padding: 0; }}
    blockquote {{ border-left: 4px solid {c["border"]}; margin: 1em 0; padding-left: 16px; color: {c["muted"]}; }}
    ul, ol {{ padding-left: 2em; margin: 1em 0; }}
    li {{ margin: 0.25em 0; }}
    hr {{ border: none; border-top: 1px solid {c["border"]}; margin: 2em 0; }}
    img {{ max-width: 100%; height: auto; border-radius: 8px; }}
    .task-list-item {{ list-style-type: none; margin-left: -1.5em; }}
    .task-list-item input {{ margin-right: 0.5em; }}
    .meta, footer {{ color: {c["muted"]}; font-size: 0.9em; }}
"""


def wrap_html_page(body_html: str, *, dark: bool, title: str = "") -> str:
    """Wrap safe HTML into a full HTML document."""
    return f"""<!DOCTYPE html>
<html>
<head>
  <meta charset="utf-8"/>
  <meta name="viewport" content="width=device-width, initial-scale=1.0"/>
  <title>{escape_html(title)}</title>
  <style>{page_css(dark=dark)}</style>
</head>
<body>
{body_html}
</body>
</html>
"""


class MarkdownRenderer:
    def __init__(self, *, sanitize: bool = True):
        self.sanitize = sanitize
        self.log = logging.getLogger(f"{APP_NAME}.renderer")

    def render_fragment(self, text: str) -> str:
        rendered = markdown_to_html(text)
        if self.sanitize:
            rendered = sanitize_rendered_html(rendered)
        return rendered

    def render_document_body(self, document: Document, *, dark: bool) -> str:
        """Markdown goes through the transducer, anything else becomes highlighted <pre>."""
        if document.is_markdown:
            return self.render_fragment(document.content)
        styled = highlight(document.content, document.language, DARK if dark else LIGHT)
        return f"<pre><code>{styled_text_to_html(styled)}</code></pre>"

    def render_page(self, text: str, *, dark: bool = False, title: str = "") -> str:
        """Preview page for markdown text."""
        return wrap_html_page(self.render_fragment(text), dark=dark, title=title)

    def render_document_page(self, document: Document, *, dark: bool = False) -> str:
        """Preview page for any document type."""
        if document.is_markdown:
            return self.render_page(document.content, dark=dark, title=document.title)
        return wrap_html_page(self.render_document_body(document, dark=dark), dark=dark, title=document.title)

    def render_export_page(self, document: Document, *, dark: bool = False) -> str:
        body = self.render_document_body(document, dark=dark)
        created = document.created_at.strftime("%Y-%m-%d %H:%M")
        modified = document.modified_at.strftime("%Y-%m-%d %H:%M")
        title = escape_html(document.title)
        page_body = (
            f"<h1>{title}</h1>\n"
            f'<div class="meta">Created: {created} · Modified: {modified}</div>\n'
            f"{body}\n"
            f"<footer>Exported from {APP_NAME}</footer>"
        )
        self.log.debug(
            "Export page rendered: title=%s markdown=%s chars=%d",
            document.title, document.is_markdown, len(document.content),
        )
        return wrap_html_page(page_body, dark=dark, title=document.title)
