# core/chrono.py
from PySide6.QtCore import QElapsedTimer


class Clock:
    """Monotonic milliseconds since the clock was created.

    Instants are plain ints so they can be stored on the session state and
    compared across threads. QElapsedTimer uses the platform's monotonic
    source, so the value never goes backwards when the wall clock changes.
    """

    def __init__(self):
        self._t = QElapsedTimer()
        self._t.start()

    def now(self) -> int:
        return self._t.elapsed()

    def since(self, instant: int) -> float:
        return max(0.0, (self._t.elapsed() - instant) / 1000.0)

    @staticmethod
    def is_monotonic() -> bool:
        return QElapsedTimer.isMonotonic()
