"""
Обход дерева для отрисовки – без единого GL‑вызова.

Рендерер получает плоский список DrawItem: для каждого блока матрицу
цепочки предков (TransformStack), прямоугольник в этом пространстве,
цвет, стиль (заливка при попадании) и, для попавших блоков, подпись
с глобальной позицией.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from movingblocks.math.mat4 import Mat4, DegenerateTransformError
from movingblocks.math.rect import Rect
from movingblocks.math.vec2 import Vec2
from movingblocks.scene.block import Block


@dataclass
class DrawItem:
    block: Block
    transform: Mat4
    rect: Rect
    color: Tuple[int, int, int, int]
    filled: bool
    label: Optional[str] = None
    label_anchor: Optional[Vec2] = None


def format_position(position: Vec2) -> str:
    return f"({position.x:.1f}, {position.y:.1f})"


def build_draw_list(scene, show_labels: bool = True) -> List[DrawItem]:
    items = []
    for block, transform in scene.walk():
        item = DrawItem(
            block=block,
            transform=transform,
            rect=block.rect,
            color=block.color,
            filled=block.is_hit,
        )
        if show_labels and block.is_hit:
            try:
                anchor = transform.transform_point(block.offset)
            except DegenerateTransformError:
                anchor = None
            if anchor is not None:
                item.label = format_position(anchor)
                item.label_anchor = anchor
        items.append(item)
    return items
