from __future__ import annotations

from bisect import bisect_right

from PySide6.QtGui import QColor, QSyntaxHighlighter, QTextCharFormat, QTextDocument

from inkpad.core.highlighter import StyledSpan, StyledText


class StyledTextHighlighter(QSyntaxHighlighter):
    """
    Paints a precomputed StyledText onto a QTextDocument.

    Matching happens over the whole text outside Qt (see core.highlighter);
    this class only slices the flattened runs per text block. Both sides use
    UTF-16 offsets, so run positions map onto block positions directly.
    """

    def __init__(self, document: QTextDocument):
        super().__init__(document)
        self._runs: list[StyledSpan] = []
        self._starts: list[int] = []
        self._foreground: str | None = None
        self._formats: dict[str, QTextCharFormat] = {}

    def set_styled_text(self, styled: StyledText) -> None:
        self._foreground = styled.foreground
        self._runs = [r for r in styled.runs() if r.color != styled.foreground]
        self._starts = [r.start for r in self._runs]
        self.rehighlight()

    def clear_styles(self) -> None:
        self._runs, self._starts = [], []
        self.rehighlight()

    def _format(self, color: str) -> QTextCharFormat:
        fmt = self._formats.get(color)
        if fmt is None:
            fmt = QTextCharFormat()
            fmt.setForeground(QColor(color))
            self._formats[color] = fmt
        return fmt

    def highlightBlock(self, text: str) -> None:
        if not self._runs:
            return
        block_start = self.currentBlock().position()
        block_end = block_start + self.currentBlock().length()

        i = max(0, bisect_right(self._starts, block_start) - 1)
        while i < len(self._runs):
            run = self._runs[i]
            if run.start >= block_end:
                break
            lo = max(run.start, block_start)
            hi = min(run.end, block_end)
            if hi > lo:
                self.setFormat(lo - block_start, hi - lo, self._format(run.color))
            i += 1
