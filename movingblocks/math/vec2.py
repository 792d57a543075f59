# movingblocks/math/vec2.py
"""
Двумерный вектор (float64). Используется и как точка, и как смещение.
"""

import numpy as np
from typing import Tuple


class Vec2:
    """Короткий неизменяемый вектор‑2 на базе NumPy."""

    __slots__ = ("_v",)

    def __init__(self, x: float = 0.0, y: float = 0.0):
        self._v = np.array([x, y], dtype=np.float64)
        self._v.flags.writeable = False

    # -----------------------------------------------------------------
    # свойства (только чтение)
    # -----------------------------------------------------------------
    @property
    def x(self) -> float:
        return float(self._v[0])

    @property
    def y(self) -> float:
        return float(self._v[1])

    # -----------------------------------------------------------------
    # арифметика (операторы возвращают новый объект)
    # -----------------------------------------------------------------
    def __add__(self, other: "Vec2") -> "Vec2":
        return Vec2(*(self._v + other._v))

    def __sub__(self, other: "Vec2") -> "Vec2":
        return Vec2(*(self._v - other._v))

    def __mul__(self, scalar: float) -> "Vec2":
        return Vec2(*(self._v * scalar))

    __rmul__ = __mul__

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vec2):
            return NotImplemented
        return bool(np.array_equal(self._v, other._v))

    def __hash__(self) -> int:
        return hash(self.to_tuple())

    def is_close(self, other: "Vec2", atol: float = 1e-9) -> bool:
        """Сравнение с допуском (после обращения матриц точного равенства ждать нельзя)."""
        return bool(np.allclose(self._v, other._v, rtol=0.0, atol=atol))

    def to_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def __repr__(self) -> str:
        return f"Vec2({self.x:.3f}, {self.y:.3f})"
