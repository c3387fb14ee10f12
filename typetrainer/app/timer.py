from PySide6.QtCore import QElapsedTimer


class HighResTimer:
    """Monotonic stopwatch around QElapsedTimer."""

    def __init__(self):
        self.t = QElapsedTimer()
        self._frozen = 0.0
        self._running = False

    @property
    def is_running(self) -> bool:
        return self._running

    def start(self):
        self._frozen = 0.0
        self._running = True
        self.t.start()

    def stop(self) -> float:
        if self._running:
            self._frozen = self._live()
            self._running = False
        return self._frozen

    def _live(self) -> float:
        return max(0.0, self.t.elapsed() / 1000.0)

    def elapsed_sec(self) -> float:
        return self._live() if self._running else self._frozen
