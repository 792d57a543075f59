# movingblocks/math/rect.py
"""
Размер и осевой прямоугольник.

Проверка попадания полуоткрытая: [left, right) × [top, bottom).
Левая/верхняя граница входит, правая/нижняя – нет.
"""

from movingblocks.math.vec2 import Vec2


class Size:
    __slots__ = ("width", "height")

    def __init__(self, width: float, height: float):
        if width < 0 or height < 0:
            raise ValueError(f"Size must be non-negative, got {width}x{height}")
        self.width = float(width)
        self.height = float(height)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Size):
            return NotImplemented
        return self.width == other.width and self.height == other.height

    def __hash__(self) -> int:
        return hash((self.width, self.height))

    def __repr__(self):
        return f"Size({self.width:.1f}, {self.height:.1f})"


class Rect:
    """Прямоугольник, заданный левым верхним углом и размером."""
    __slots__ = ("left", "top", "width", "height")

    def __init__(self, left: float, top: float, width: float, height: float):
        self.left = float(left)
        self.top = float(top)
        self.width = float(width)
        self.height = float(height)

    @staticmethod
    def from_offset_size(offset: Vec2, size: Size) -> "Rect":
        return Rect(offset.x, offset.y, size.width, size.height)

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    def corners(self):
        """Углы по часовой стрелке (экранная ось Y вниз), начиная с левого верхнего."""
        return (
            Vec2(self.left, self.top),
            Vec2(self.right, self.top),
            Vec2(self.right, self.bottom),
            Vec2(self.left, self.bottom),
        )

    def contains(self, point: Vec2) -> bool:
        return (self.left <= point.x < self.right
                and self.top <= point.y < self.bottom)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Rect):
            return NotImplemented
        return (self.left, self.top, self.width, self.height) == \
               (other.left, other.top, other.width, other.height)

    def __repr__(self):
        return (f"Rect({self.left:.1f}, {self.top:.1f}, "
                f"{self.width:.1f}, {self.height:.1f})")
