"""
Профайлер тика – копит время повторяющегося участка (scene.update)
между выводами статистики.
"""

import time
from movingblocks.utils.logger import logger


class Profiler:
    """
    Переиспользуемый контекст‑менеджер. Каждый вход/выход – один замер;
    count/total_ms/worst_ms копятся до reset().
    """
    def __init__(self, name: str, clock=time.perf_counter):
        self.name = name
        self._clock = clock
        self._start = 0.0
        self.elapsed_ms = 0.0
        self.reset()

    def reset(self) -> None:
        self.count = 0
        self.total_ms = 0.0
        self.worst_ms = 0.0

    @property
    def average_ms(self) -> float:
        return self.total_ms / self.count if self.count else 0.0

    def __enter__(self):
        self._start = self._clock()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.elapsed_ms = (self._clock() - self._start) * 1000.0
        self.count += 1
        self.total_ms += self.elapsed_ms
        self.worst_ms = max(self.worst_ms, self.elapsed_ms)
        logger.debug(f"[Profiler] {self.name}: {self.elapsed_ms:.2f} ms")

    def summary(self) -> str:
        return (f"{self.name}: avg {self.average_ms:.2f} ms, "
                f"worst {self.worst_ms:.2f} ms over {self.count}")
