# -*- coding: utf-8 -*-
"""
Узел дерева – подвижный прямоугольный блок.

Каждый блок владеет своими детьми эксклюзивно (дерево, не граф).
Накопленная трансформация меняется только в advance(), флаг
попадания – только в probe(); других точек мутации нет.
"""

from typing import Iterator, Optional, Sequence, Tuple

from movingblocks.math.mat4 import Mat4, DegenerateTransformError
from movingblocks.math.rect import Rect, Size
from movingblocks.math.vec2 import Vec2
from movingblocks.utils.logger import logger

Color = Tuple[int, int, int, int]


class Block:
    """Подвижный блок, который можно hit‑тестить."""
    def __init__(self,
                 size: Size,
                 offset: Vec2,
                 color: Color,
                 delta_transform: Mat4,
                 children: Sequence["Block"] = ()):
        self._size = size
        self._offset = offset
        self._color = tuple(color)
        self._delta_transform = delta_transform
        self._transform = Mat4.identity()
        self._is_hit = False
        self._children = []
        self._parent: Optional["Block"] = None
        for child in children:
            self.add_child(child)

    # ----------------- чтение -----------------
    @property
    def size(self) -> Size:
        return self._size

    @property
    def offset(self) -> Vec2:
        return self._offset

    @property
    def color(self) -> Color:
        return self._color

    @property
    def delta_transform(self) -> Mat4:
        return self._delta_transform

    @property
    def transform(self) -> Mat4:
        """Накопленная трансформация – через неё проецируются дети."""
        return self._transform

    @property
    def is_hit(self) -> bool:
        return self._is_hit

    @property
    def children(self) -> Tuple["Block", ...]:
        return tuple(self._children)

    @property
    def parent(self) -> Optional["Block"]:
        return self._parent

    @property
    def local_rect(self) -> Rect:
        return Rect(0.0, 0.0, self._size.width, self._size.height)

    @property
    def rect(self) -> Rect:
        """Прямоугольник в пространстве родителя (после его трансформации)."""
        return Rect.from_offset_size(self._offset, self._size)

    # ----------------- иерархия -----------------
    def add_child(self, block: "Block") -> None:
        if block._parent is not None:
            raise ValueError("Block already has a parent")
        node = self
        while node is not None:
            if node is block:
                raise ValueError("Adding this block would create a cycle")
            node = node._parent
        block._parent = self
        self._children.append(block)

    def remove_child(self, block: "Block") -> None:
        if block in self._children:
            block._parent = None
            self._children.remove(block)

    def traverse(self) -> Iterator["Block"]:
        """Генератор DFS (родитель раньше детей)."""
        yield self
        for child in self._children:
            yield from child.traverse()

    def count(self) -> int:
        return sum(1 for _ in self.traverse())

    def depth(self) -> int:
        """Высота поддерева: у листа 0."""
        if not self._children:
            return 0
        return 1 + max(child.depth() for child in self._children)

    # ----------------- кадр -----------------
    def advance(self) -> None:
        """Рекурсивно применить deltaTransform справа: T ← T · Δ."""
        self._transform = self._transform @ self._delta_transform
        for child in self._children:
            child.advance()

    def probe(self, position: Vec2) -> None:
        """
        Рекурсивный hit‑test. `position` задана в пространстве родителя.

        Детям передаётся исходная точка (без вычитания offset), переведённая
        через обратную накопленную трансформацию: дети рисуются в
        трансформированном пространстве родителя без сдвига на его offset.
        """
        self._is_hit = self.local_rect.contains(position - self._offset)

        if not self._children:
            return

        try:
            child_position = self._transform.inverted().transform_point(position)
        except DegenerateTransformError as exc:
            logger.debug(f"[Block] Subtree skipped, degenerate transform: {exc}")
            for child in self._children:
                for node in child.traverse():
                    node._is_hit = False
            return

        for child in self._children:
            child.probe(child_position)

    def __repr__(self):
        return (f"Block(size={self._size}, offset={self._offset}, "
                f"children={len(self._children)}, hit={self._is_hit})")
