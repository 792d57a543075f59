"""
Таймер с высоким разрешением (nanosecond precision).
"""

import time

class Timer:
    """Таймер с высоким разрешением (nanosecond precision)."""
    def __init__(self, clock=time.perf_counter):
        self._clock = clock
        self._start = clock()
        self._last = self._start
        self.delta = 0.0
        self.elapsed = 0.0
        self.fps = 0.0

    def tick(self) -> float:
        """Обновить таймер, вернуть dt в секундах."""
        now = self._clock()
        self.delta = now - self._last
        self._last = now
        self.elapsed = now - self._start
        self.fps = 1.0 / self.delta if self.delta > 0.0 else 0.0
        return self.delta
