"""Debouncer - Coalesces rapid value changes into one delayed emission."""

from typing import Any, Optional

from PySide6.QtCore import QObject, QTimer, Signal

DEFAULT_DEBOUNCE_MS = 300


class Debouncer(QObject):
    """
    Emits `triggered` with the last pushed value once no new value has
    arrived for `interval_ms`.

    Each `push` restarts the window. `cancel` drops the pending value so it
    never fires. Requires a running Qt event loop to deliver.
    """

    triggered = Signal(object)

    def __init__(self, interval_ms: int = DEFAULT_DEBOUNCE_MS, parent: Optional[QObject] = None):
        super().__init__(parent)
        self._pending: Any = None
        self._has_pending = False

        self._timer = QTimer(self)
        self._timer.setSingleShot(True)
        self._timer.setInterval(interval_ms)
        self._timer.timeout.connect(self._fire)

    @property
    def interval_ms(self) -> int:
        return self._timer.interval()

    def is_pending(self) -> bool:
        """True while a value is waiting for the window to elapse."""
        return self._has_pending

    def push(self, value: Any) -> None:
        """Record a new value and restart the quiet window."""
        self._pending = value
        self._has_pending = True
        # start() on an active timer restarts it
        self._timer.start()

    def cancel(self) -> None:
        """Drop any pending value without emitting."""
        self._timer.stop()
        self._pending = None
        self._has_pending = False

    def flush(self) -> None:
        """Emit the pending value now, if any."""
        if self.is_pending():
            self._timer.stop()
            self._fire()

    def _fire(self) -> None:
        if not self._has_pending:
            return
        value = self._pending
        self._pending = None
        self._has_pending = False
        self.triggered.emit(value)
