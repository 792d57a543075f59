"""
Простой FPS‑счётчик. Можно использовать в любом месте,
например, в Engine.run() или в пользовательском UI.
"""

import time
from collections import deque

class FPSCounter:
    """Скользящее среднее FPS за последние N измерений."""
    def __init__(self, window_size: int = 30, clock=time.perf_counter):
        self._clock = clock
        self._times = deque(maxlen=window_size)
        self.last = clock()
        self.fps = 0.0

    def tick(self) -> float:
        """Обновить счётчик, вернуть дельту в секундах."""
        now = self._clock()
        dt = now - self.last
        self.last = now
        self._times.append(dt)
        avg = sum(self._times) / len(self._times)
        self.fps = 1.0 / avg if avg > 0 else 0.0
        return dt
