from __future__ import annotations

from contextlib import contextmanager

from PySide6.QtCore import QSettings


@contextmanager
def blocked_signals(obj):
    """Temporarily silence Qt signals of ``obj`` and always re-enable them."""
    if obj is None:
        yield
        return
    previous = obj.blockSignals(True)
    try:
        yield
    finally:
        obj.blockSignals(previous)


def safe_set_setting(settings: QSettings, key: str, value) -> None:
    """Best-effort QSettings write that never takes the UI down."""
    try:
        settings.setValue(key, value)
    except Exception:
        pass
