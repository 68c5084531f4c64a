from __future__ import annotations

import sys
from pathlib import Path

from PySide6.QtWidgets import QApplication

from inkpad.logging_setup import SESSION_ID, install_global_exception_hooks, log, setup_logging
from inkpad.settings import APP_NAME
from inkpad.ui.main_window import EditorWindow


def main() -> int:
    setup_logging()
    install_global_exception_hooks()
    app = QApplication(sys.argv)
    app.setApplicationName(APP_NAME)
    win = EditorWindow()
    if len(sys.argv) > 1:
        win.open_path(Path(sys.argv[1]))
    win.resize(1200, 760)
    win.show()
    log.info("Application started, SID=%s", SESSION_ID)
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
