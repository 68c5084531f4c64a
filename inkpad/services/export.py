from __future__ import annotations

import logging
from pathlib import Path

from inkpad.core.document import Document
from inkpad.infrastructure.filesystem import atomic_write_text
from inkpad.services.markdown_renderer import MarkdownRenderer
from inkpad.settings import APP_NAME

log = logging.getLogger(f"{APP_NAME}.export")


class ExportError(Exception):
    def __init__(self, path: Path, reason: str):
        super().__init__(f"Failed to export {path}: {reason}")
        self.path = path
        self.reason = reason


def default_export_name(document: Document) -> str:
    return f"{document.title or 'Untitled'}.html"


def export_html(
    document: Document,
    path: str | Path,
    *,
    dark: bool = False,
    renderer: MarkdownRenderer | None = None,
) -> Path:
    """Write ``document`` as a standalone HTML page; returns the written path."""
    path = Path(path)
    if path.suffix.lower() not in (".html", ".htm"):
        path = path.with_suffix(".html")

    renderer = renderer or MarkdownRenderer()
    page = renderer.render_export_page(document, dark=dark)

    try:
        atomic_write_text(path, page)
    except OSError as e:
        log.exception("HTML export failed: %s", path)
        raise ExportError(path, str(e)) from e

    log.info("Exported HTML: title=%s path=%s bytes=%d", document.title, path, len(page))
    return path
