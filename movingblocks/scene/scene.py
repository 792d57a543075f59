"""
Сцена – дерево блоков и два покадровых алгоритма над ним (advance / probe).
"""

from typing import Callable, Iterator, List, Optional, Tuple

from movingblocks.math.mat4 import Mat4, DegenerateTransformError
from movingblocks.math.transform_stack import TransformStack
from movingblocks.math.vec2 import Vec2
from movingblocks.scene.block import Block
from movingblocks.utils.logger import logger


class Scene:
    """Корень дерева + покадровое обновление."""
    def __init__(self, root: Block):
        if root.parent is not None:
            raise ValueError("Scene root must not have a parent")
        self.root = root
        self.frame = 0
        self.elapsed = 0.0
        self._listeners: List[Callable[["Scene"], None]] = []
        logger.info(f"[Scene] Created: {root.count()} blocks, depth {root.depth()}")

    # -----------------------------------------------------------------
    def advance(self) -> None:
        self.root.advance()

    def probe(self, position: Vec2) -> None:
        """Позиция задаётся в пространстве окна (там же, где offset корня)."""
        self.root.probe(position)

    def update(self, dt: float, pointer: Optional[Vec2] = None) -> None:
        """
        Один тик: advance всего дерева, затем probe (если позиция курсора
        известна), затем единственный сигнал «дерево изменилось».
        `dt` на математику не влияет.
        """
        self.advance()
        if pointer is not None:
            self.probe(pointer)
        self.frame += 1
        self.elapsed += dt
        for listener in list(self._listeners):
            listener(self)

    # ----------------- сигнал изменения -----------------
    def add_listener(self, callback: Callable[["Scene"], None]) -> None:
        self._listeners.append(callback)

    def remove_listener(self, callback: Callable[["Scene"], None]) -> None:
        if callback in self._listeners:
            self._listeners.remove(callback)

    # ----------------- обходы -----------------
    def traverse(self) -> Iterator[Block]:
        return self.root.traverse()

    def walk(self) -> Iterator[Tuple[Block, Mat4]]:
        """
        DFS, выдаёт (блок, трансформация цепочки предков).
        Вторая матрица переводит пространство блока в пространство окна.
        """
        stack = TransformStack()
        yield from self._walk(self.root, stack)

    def _walk(self, block: Block, stack: TransformStack):
        yield block, stack.current
        with stack.scoped(block.transform):
            for child in block.children:
                yield from self._walk(child, stack)

    def hit_blocks(self) -> List[Block]:
        return [block for block in self.traverse() if block.is_hit]

    def global_offset(self, block: Block) -> Vec2:
        """Левый верхний угол блока в координатах окна."""
        chain = []
        node = block.parent
        while node is not None:
            chain.append(node.transform)
            node = node.parent
        transform = Mat4.identity()
        for t in reversed(chain):
            transform = transform @ t
        return transform.transform_point(block.offset)

    def hits_with_global_positions(self) -> List[Tuple[Block, Vec2]]:
        result = []
        for block, transform in self.walk():
            if not block.is_hit:
                continue
            try:
                result.append((block, transform.transform_point(block.offset)))
            except DegenerateTransformError:
                continue
        return result
