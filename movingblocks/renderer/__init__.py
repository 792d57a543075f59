"""
Рендер: обход дерева (без GL) и подписи.

GLRenderer импортируется явно из movingblocks.renderer.gl_renderer –
ему нужен OpenGL‑контекст.
"""

from movingblocks.renderer.draw_list import DrawItem, build_draw_list, format_position
from movingblocks.renderer.label import LabelBitmap, render_label

__all__ = [
    "DrawItem",
    "build_draw_list",
    "format_position",
    "LabelBitmap",
    "render_label",
]
