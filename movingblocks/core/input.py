"""
Скрывает GLFW‑callback‑механику.

Позиция курсора хранится как «последнее известное значение»:
без очереди событий, читается один раз за тик.
"""

from typing import Optional

import glfw

from movingblocks.math.vec2 import Vec2

class InputManager:
    """Скрывает GLFW‑callback‑механику."""
    def __init__(self, window):
        self.window = window
        self.keys = {}
        self.pointer: Optional[Vec2] = None
        self._setup_callbacks()

    def _setup_callbacks(self):
        glfw.set_key_callback(self.window, self._key_cb)
        glfw.set_cursor_pos_callback(self.window, self._mouse_move_cb)

    def _key_cb(self, win, key, scancode, action, mods):
        self.keys[key] = action != glfw.RELEASE

    def _mouse_move_cb(self, win, xpos, ypos):
        self.pointer = Vec2(xpos, ypos)

    def is_key_pressed(self, key) -> bool:
        return self.keys.get(key, False)
