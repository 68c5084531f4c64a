from __future__ import annotations

from PySide6.QtCore import Signal
from PySide6.QtGui import QDesktopServices
from PySide6.QtWebEngineCore import QWebEnginePage
from PySide6.QtWebEngineWidgets import QWebEngineView

from inkpad.logging_setup import log

__all__ = ["PreviewWebView"]


class _ExternalLinkPage(QWebEnginePage):
    """Clicked links open in the system browser instead of replacing the preview."""

    def __init__(self, view: "PreviewWebView"):
        super().__init__(view)
        self._view = view

    def acceptNavigationRequest(self, url, nav_type, isMainFrame):  # type: ignore[override]
        if nav_type == QWebEnginePage.NavigationType.NavigationTypeLinkClicked:
            log.info("Preview link clicked: %s", url.toString())
            self._view.linkClicked.emit(url.toString())
            QDesktopServices.openUrl(url)
            return False
        return super().acceptNavigationRequest(url, nav_type, isMainFrame)


class PreviewWebView(QWebEngineView):
    linkClicked = Signal(str)

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setPage(_ExternalLinkPage(self))
