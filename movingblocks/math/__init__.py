"""
Математический суб‑пакет: Vec2, Size, Rect, Mat4, TransformStack.
"""

from movingblocks.math.vec2 import Vec2
from movingblocks.math.rect import Size, Rect
from movingblocks.math.mat4 import Mat4, DegenerateTransformError
from movingblocks.math.transform_stack import TransformStack

__all__ = ["Vec2", "Size", "Rect", "Mat4", "DegenerateTransformError",
           "TransformStack"]
