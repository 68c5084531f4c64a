from __future__ import annotations

import time

from PySide6.QtCore import QObject, QRunnable, Signal

from inkpad.core.document import Document
from inkpad.services.markdown_renderer import MarkdownRenderer


class PreviewRenderSignals(QObject):
    finished = Signal(int, str, float)   # req_id, page html, time_ms
    failed = Signal(int, str)            # req_id, error


class PreviewRenderWorker(QRunnable):
    """
    Renders a preview page off the UI thread.

    ``document`` must be a snapshot the UI no longer mutates. The caller tags
    each request with an increasing req_id and ignores stale results.
    """

    def __init__(self, *, req_id: int, document: Document, dark: bool, renderer: MarkdownRenderer):
        super().__init__()
        self.req_id = req_id
        self.document = document
        self.dark = dark
        self.renderer = renderer
        self.signals = PreviewRenderSignals()

    def run(self) -> None:
        t0 = time.perf_counter()
        try:
            page = self.renderer.render_document_page(self.document, dark=self.dark)
            self.signals.finished.emit(self.req_id, page, (time.perf_counter() - t0) * 1000.0)
        except Exception as exc:
            self.signals.failed.emit(self.req_id, str(exc))
