from __future__ import annotations

import bleach

ALLOWED_TAGS = [
    "a", "p", "br", "hr", "img",
    "strong", "em", "del", "code", "pre", "blockquote",
    "ul", "ol", "li", "input",
    "h1", "h2", "h3", "h4", "h5", "h6",
]
ALLOWED_ATTRS = {
    "a": ["href", "title"],
    "img": ["src", "alt", "title"],
    "code": ["class"],
    "li": ["class"],
    "input": ["type", "checked", "disabled"],
}
ALLOWED_PROTOCOLS = ["http", "https", "mailto"]


def sanitize_rendered_html(rendered_html: str) -> str:
    """
    Sanitize HTML before it reaches the embedded browser.

    The transducer escapes raw markup, but link and image URLs are copied
    through as written, so ``javascript:`` and friends are stripped here.
    """
    return bleach.clean(
        rendered_html,
        tags=ALLOWED_TAGS,
        attributes=ALLOWED_ATTRS,
        protocols=ALLOWED_PROTOCOLS,
        strip=True,
    )
