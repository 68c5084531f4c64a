from __future__ import annotations

import dataclasses
from pathlib import Path

from PySide6.QtCore import Qt, QThreadPool, QTimer, Slot
from PySide6.QtGui import QAction, QFont, QKeySequence, QTextCursor
from PySide6.QtWidgets import (
    QFileDialog, QLabel, QListWidget, QListWidgetItem, QMainWindow,
    QMessageBox, QPlainTextEdit, QSplitter,
)

from inkpad.core.document import Document, FileType
from inkpad.core.highlighter import highlight
from inkpad.core.languages import Language
from inkpad.core.outline import extract_outline
from inkpad.core.stats import TextStatistics
from inkpad.core.theme import Theme, normalize_theme, theme_by_name
from inkpad.core.timing import compute_preview_debounce_ms
from inkpad.infrastructure.filesystem import atomic_write_text, read_text
from inkpad.logging_setup import log
from inkpad.services.export import ExportError, default_export_name, export_html
from inkpad.services.markdown_renderer import MarkdownRenderer
from inkpad.settings import (
    APP_NAME,
    EDITOR_FONT_SIZE,
    HIGHLIGHT_DEBOUNCE_MS,
    PREVIEW_DEBOUNCE_MS_CHARS_PER_STEP,
    PREVIEW_DEBOUNCE_MS_DEFAULT,
    PREVIEW_DEBOUNCE_MS_MAX_ADD,
    PREVIEW_DEBOUNCE_MS_MIN,
)
from inkpad.ui.prefs import KEYS, get_bool, get_int, get_str, open_settings
from inkpad.ui.qt_utils import blocked_signals, safe_set_setting
from inkpad.ui.syntax_highlighter import StyledTextHighlighter
from inkpad.ui.webview import PreviewWebView
from inkpad.ui.workers import PreviewRenderWorker

FILE_FILTER = (
    "Text documents (*.md *.markdown *.txt *.json *.js *.jsx *.ts *.tsx *.py *.pyw "
    "*.html *.htm *.css *.scss *.sass *.swift *.yaml *.yml *.sh *.bash *.zsh);;"
    "All files (*)"
)


class EditorWindow(QMainWindow):
    def __init__(self):
        super().__init__()
        log.info("Editor window initialized")

        self.settings = open_settings()
        self.theme: Theme = theme_by_name(get_str(self.settings, KEYS.UI_THEME, "light"))
        self.font_size = get_int(self.settings, KEYS.EDITOR_FONT_SIZE, EDITOR_FONT_SIZE)
        self.document = Document(file_type=FileType.MARKDOWN)
        self.renderer = MarkdownRenderer()

        # UI
        self.editor = QPlainTextEdit()
        self.editor.setLineWrapMode(QPlainTextEdit.LineWrapMode.WidgetWidth)
        self.highlighter = StyledTextHighlighter(self.editor.document())

        self.preview = PreviewWebView()
        self.outline = QListWidget()
        self.outline.setToolTip("Outline: headings of the current document")

        self.splitter = QSplitter(Qt.Horizontal)
        self.splitter.addWidget(self.outline)
        self.splitter.addWidget(self.editor)
        self.splitter.addWidget(self.preview)
        self.splitter.setStretchFactor(0, 1)
        self.splitter.setStretchFactor(1, 4)
        self.splitter.setStretchFactor(2, 4)
        self.setCentralWidget(self.splitter)

        self.stats_label = QLabel()
        self.language_label = QLabel()
        self.statusBar().addWidget(self.stats_label, 1)
        self.statusBar().addPermanentWidget(self.language_label)

        # Highlight debounce: re-colour the whole text shortly after typing stops
        self.highlight_timer = QTimer(self)
        self.highlight_timer.setSingleShot(True)
        self.highlight_timer.setInterval(HIGHLIGHT_DEBOUNCE_MS)
        self.highlight_timer.timeout.connect(self._apply_highlight)

        # Preview debounce is adaptive to document size
        self.preview_timer = QTimer(self)
        self.preview_timer.setSingleShot(True)
        self.preview_timer.timeout.connect(self._request_preview)

        # ---- PREVIEW RENDER (background) ----
        self._preview_pool = QThreadPool.globalInstance()
        self._preview_req_id = 0  # monotonically increasing; used to drop stale results

        # Signals
        self.editor.textChanged.connect(self._on_text_changed)
        self.outline.itemActivated.connect(self._on_outline_activated)
        self.outline.itemClicked.connect(self._on_outline_activated)
        self.preview.linkClicked.connect(self._on_preview_link_clicked)

        self._build_menu()
        self._apply_theme()
        self._restore_layout()

        last = get_str(self.settings, KEYS.LAST_FILE, "")
        if last and Path(last).is_file():
            self.open_path(Path(last))
        else:
            self._load_document(self.document)

    # ───────────────────────── menu ─────────────────────────

    def _build_menu(self):
        menubar = self.menuBar()
        filem = menubar.addMenu("File")

        act_new = QAction("New", self)
        act_new.setShortcut(QKeySequence.New)
        act_new.triggered.connect(self.new_document)

        act_open = QAction("Open…", self)
        act_open.setShortcut(QKeySequence.Open)
        act_open.triggered.connect(self.open_file_dialog)

        act_save = QAction("Save", self)
        act_save.setShortcut(QKeySequence.Save)
        act_save.triggered.connect(self.save)

        act_save_as = QAction("Save As…", self)
        act_save_as.setShortcut(QKeySequence.SaveAs)
        act_save_as.triggered.connect(self.save_as)

        act_export = QAction("Export as HTML…", self)
        act_export.setShortcut("Ctrl+Shift+E")
        act_export.triggered.connect(self.export_html_dialog)

        filem.addAction(act_new)
        filem.addAction(act_open)
        filem.addSeparator()
        filem.addAction(act_save)
        filem.addAction(act_save_as)
        filem.addSeparator()
        filem.addAction(act_export)

        viewm = menubar.addMenu("View")

        self.act_dark = QAction("Theme: Dark", self, checkable=True)
        self.act_light = QAction("Theme: Light", self, checkable=True)
        self.act_dark.triggered.connect(lambda: self.set_theme("dark"))
        self.act_light.triggered.connect(lambda: self.set_theme("light"))

        self.act_preview = QAction("Show Preview", self, checkable=True)
        self.act_preview.setShortcut("Ctrl+Shift+P")
        self.act_preview.toggled.connect(self.set_preview_visible)

        self.act_outline = QAction("Show Outline", self, checkable=True)
        self.act_outline.toggled.connect(self.outline.setVisible)

        act_bigger = QAction("Increase Font Size", self)
        act_bigger.setShortcut(QKeySequence.ZoomIn)
        act_bigger.triggered.connect(lambda: self.set_font_size(self.font_size + 1))
        act_smaller = QAction("Decrease Font Size", self)
        act_smaller.setShortcut(QKeySequence.ZoomOut)
        act_smaller.triggered.connect(lambda: self.set_font_size(self.font_size - 1))

        viewm.addAction(self.act_dark)
        viewm.addAction(self.act_light)
        viewm.addSeparator()
        viewm.addAction(self.act_preview)
        viewm.addAction(self.act_outline)
        viewm.addSeparator()
        viewm.addAction(act_bigger)
        viewm.addAction(act_smaller)

    # ───────────────────────── documents ─────────────────────────

    def new_document(self):
        if not self._confirm_discard():
            return
        log.info("New document")
        self._load_document(Document(file_type=FileType.MARKDOWN))

    def open_file_dialog(self):
        if not self._confirm_discard():
            return
        start_dir = str(self.document.file_path.parent) if self.document.file_path else str(Path.home())
        path, _ = QFileDialog.getOpenFileName(self, "Open document", start_dir, FILE_FILTER)
        if path:
            self.open_path(Path(path))

    def open_path(self, path: Path) -> None:
        try:
            text = read_text(path)
        except OSError as e:
            log.exception("Open failed: %s", path)
            QMessageBox.critical(self, "Open failed", str(e))
            return
        log.info("Opened document: path=%s chars=%d", path, len(text))
        self._load_document(Document.from_path(path, text))
        safe_set_setting(self.settings, KEYS.LAST_FILE, str(path))

    def _load_document(self, document: Document) -> None:
        self.highlight_timer.stop()
        self.preview_timer.stop()
        self.document = document

        with blocked_signals(self.editor):
            self.editor.setPlainText(document.content)

        show_preview = document.is_markdown and get_bool(self.settings, KEYS.UI_SHOW_PREVIEW, True)
        with blocked_signals(self.act_preview):
            self.act_preview.setChecked(show_preview)
        self.preview.setVisible(show_preview)
        self._apply_highlight()
        self._request_preview()
        self._refresh_outline()
        self._update_status()
        self._update_title()

    def save(self) -> bool:
        if self.document.file_path is None:
            return self.save_as()
        return self._write(self.document.file_path)

    def save_as(self) -> bool:
        suggested = self.document.file_path or Path.home() / f"{self.document.title}.{self.document.file_type.value}"
        path, _ = QFileDialog.getSaveFileName(self, "Save document", str(suggested), FILE_FILTER)
        if not path:
            return False
        path = Path(path)
        if not self._write(path):
            return False
        # the extension may have changed the language
        self._load_document(Document.from_path(path, self.document.content))
        safe_set_setting(self.settings, KEYS.LAST_FILE, str(path))
        return True

    def _write(self, path: Path) -> bool:
        log.info("Saving document: %s", path)
        try:
            atomic_write_text(path, self.document.content)
        except OSError as e:
            log.exception("Save failed: %s", path)
            QMessageBox.critical(self, "Save failed", str(e))
            return False
        self.document.is_modified = False
        self._update_title()
        return True

    def export_html_dialog(self):
        base = self.document.file_path.parent if self.document.file_path else Path.home()
        suggested = base / default_export_name(self.document)
        path, _ = QFileDialog.getSaveFileName(self, "Export as HTML", str(suggested), "HTML (*.html *.htm)")
        if not path:
            return
        try:
            written = export_html(self.document, path, dark=self.theme.is_dark, renderer=self.renderer)
        except ExportError as e:
            QMessageBox.critical(self, "Export failed", str(e))
            return
        self.statusBar().showMessage(f"Exported to {written}", 5000)

    def _confirm_discard(self) -> bool:
        if not self.document.is_modified:
            return True
        answer = QMessageBox.question(
            self,
            "Unsaved changes",
            f"Save changes to “{self.document.title}”?",
            QMessageBox.Save | QMessageBox.Discard | QMessageBox.Cancel,
        )
        if answer == QMessageBox.Save:
            return self.save()
        return answer == QMessageBox.Discard

    # ───────────────────────── editing ─────────────────────────

    def _on_text_changed(self):
        self.document.update_content(self.editor.toPlainText())
        self.highlight_timer.start()
        if self.act_preview.isChecked():
            self.preview_timer.setInterval(compute_preview_debounce_ms(
                len(self.document.content),
                min_ms=PREVIEW_DEBOUNCE_MS_MIN,
                max_add_ms=PREVIEW_DEBOUNCE_MS_MAX_ADD,
                chars_per_step=PREVIEW_DEBOUNCE_MS_CHARS_PER_STEP,
                default_ms=PREVIEW_DEBOUNCE_MS_DEFAULT,
            ))
            self.preview_timer.start()
        self._update_title()

    @Slot()
    def _apply_highlight(self):
        language = self.document.language
        if language is Language.PLAIN_TEXT:
            self.highlighter.clear_styles()
        else:
            self.highlighter.set_styled_text(highlight(self.document.content, language, self.theme))
        self._refresh_outline()
        self._update_status()

    @Slot()
    def _request_preview(self):
        """Render preview off the UI thread; apply result when ready (drops stale results)."""
        if not self.act_preview.isChecked():
            return

        self._preview_req_id += 1
        worker = PreviewRenderWorker(
            req_id=self._preview_req_id,
            document=dataclasses.replace(self.document),
            dark=self.theme.is_dark,
            renderer=self.renderer,
        )
        worker.signals.finished.connect(self._on_preview_rendered)
        worker.signals.failed.connect(self._on_preview_failed)
        self._preview_pool.start(worker)

    @Slot(int, str, float)
    def _on_preview_rendered(self, req_id: int, page: str, time_ms: float):
        # Drop stale results (user kept typing while worker was running)
        if req_id != self._preview_req_id:
            return
        self.preview.setHtml(page)
        log.debug("Preview rendered: req_id=%d time_ms=%.1f", req_id, time_ms)

    @Slot(int, str)
    def _on_preview_failed(self, req_id: int, err: str):
        if req_id != self._preview_req_id:
            return
        log.warning("Preview render failed: %s", err)

    @Slot(str)
    def _on_preview_link_clicked(self, url: str):
        self.statusBar().showMessage(f"Opened {url} in browser", 4000)

    # ───────────────────────── outline / status ─────────────────────────

    def _refresh_outline(self):
        with blocked_signals(self.outline):
            self.outline.clear()
            if not self.document.is_markdown:
                return
            for heading in extract_outline(self.document.content):
                item = QListWidgetItem(("    " * (heading.level - 1)) + heading.text)
                item.setData(Qt.UserRole, heading.line_number)
                self.outline.addItem(item)

    def _on_outline_activated(self, item: QListWidgetItem):
        line_number = item.data(Qt.UserRole)
        block = self.editor.document().findBlockByNumber(int(line_number) - 1)
        if not block.isValid():
            return
        self.editor.setTextCursor(QTextCursor(block))
        self.editor.centerCursor()
        self.editor.setFocus()

    def _update_status(self):
        self.stats_label.setText(TextStatistics(self.document.content).summary())
        self.language_label.setText(self.document.language.display_name)

    def _update_title(self):
        self.setWindowTitle(f"{self.document.display_title} — {APP_NAME}")

    # ───────────────────────── appearance ─────────────────────────

    def set_theme(self, name: str):
        name = normalize_theme(name)
        log.info("Theme switched: %s", name)
        self.theme = theme_by_name(name)
        safe_set_setting(self.settings, KEYS.UI_THEME, name)
        self._apply_theme()
        self._apply_highlight()
        self._request_preview()

    def _apply_theme(self):
        self.act_dark.setChecked(self.theme.is_dark)
        self.act_light.setChecked(not self.theme.is_dark)
        self.editor.setStyleSheet(
            f"QPlainTextEdit {{ background: {self.theme.background}; color: {self.theme.foreground}; }}"
        )
        font = QFont(self.theme.font_family, self.font_size)
        font.setStyleHint(QFont.Monospace)
        self.editor.setFont(font)

    def set_font_size(self, size: int):
        self.font_size = max(8, min(48, int(size)))
        safe_set_setting(self.settings, KEYS.EDITOR_FONT_SIZE, self.font_size)
        self._apply_theme()

    def set_preview_visible(self, visible: bool):
        self.preview.setVisible(visible)
        safe_set_setting(self.settings, KEYS.UI_SHOW_PREVIEW, visible)
        if visible:
            self._request_preview()

    def _restore_layout(self):
        geometry = self.settings.value(KEYS.UI_GEOMETRY)
        if geometry is not None:
            self.restoreGeometry(geometry)
        sizes = self.settings.value(KEYS.UI_SPLITTER)
        if sizes:
            try:
                self.splitter.setSizes([int(s) for s in sizes])
            except (TypeError, ValueError):
                log.debug("Ignoring malformed splitter sizes: %r", sizes)
        show_outline = get_bool(self.settings, KEYS.UI_SHOW_OUTLINE, True)
        self.act_outline.setChecked(show_outline)
        self.outline.setVisible(show_outline)

    def closeEvent(self, event):  # type: ignore[override]
        if not self._confirm_discard():
            event.ignore()
            return
        self.highlight_timer.stop()
        self.preview_timer.stop()
        safe_set_setting(self.settings, KEYS.UI_GEOMETRY, self.saveGeometry())
        safe_set_setting(self.settings, KEYS.UI_SPLITTER, self.splitter.sizes())
        safe_set_setting(self.settings, KEYS.UI_SHOW_OUTLINE, self.outline.isVisible())
        super().closeEvent(event)
