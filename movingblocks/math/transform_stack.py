# movingblocks/math/transform_stack.py
"""
Стек трансформаций для обхода дерева сверху вниз.

На входе в узел матрица домножается справа (push), на выходе
восстанавливается прежнее значение (pop). В любой момент обхода
`current` – полная цепочка от корня до текущего узла.
"""

from contextlib import contextmanager

from movingblocks.math.mat4 import Mat4


class TransformStack:
    def __init__(self, base: Mat4 = None):
        self._current = base if base is not None else Mat4.identity()
        self._saved = []

    @property
    def current(self) -> Mat4:
        return self._current

    @property
    def depth(self) -> int:
        return len(self._saved)

    def push(self, transform: Mat4) -> Mat4:
        self._saved.append(self._current)
        self._current = self._current @ transform
        return self._current

    def pop(self) -> Mat4:
        if not self._saved:
            raise IndexError("pop from empty TransformStack")
        self._current = self._saved.pop()
        return self._current

    @contextmanager
    def scoped(self, transform: Mat4):
        """push/pop парами – состояние не утекает в соседние поддеревья."""
        self.push(transform)
        try:
            yield self._current
        finally:
            self.pop()

    def map_point(self, point):
        """Точку из текущего пространства – в пространство корня."""
        return self._current.transform_point(point)
