"""
Moving Blocks – дерево вложенных прямоугольников, каждый из которых
сдвигается и поворачивается относительно родителя, плюс hit‑test
по текущим накопленным трансформациям.

Окно, ввод и GL‑рендер импортируются явно (movingblocks.engine,
movingblocks.window, movingblocks.renderer.gl_renderer).
"""

from movingblocks.utils import logger
from movingblocks.scene import Block, Scene, generate_random_blocks
from movingblocks.math import (
    Vec2, Size, Rect, Mat4, DegenerateTransformError, TransformStack
)

__version__ = "1.0.0"

__all__ = [
    "Block",
    "Scene",
    "generate_random_blocks",
    "Vec2",
    "Size",
    "Rect",
    "Mat4",
    "DegenerateTransformError",
    "TransformStack",
]
