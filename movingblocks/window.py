"""
Окно + GLFW‑контекст (OpenGL 2.1, legacy‑pipeline).
"""

import glfw
from movingblocks.core.input import InputManager

class Window:
    """Окно + GLFW‑контекст."""
    def __init__(self, width: int = 1280, height: int = 720, title: str = "Moving Blocks"):
        if not glfw.init():
            raise RuntimeError("Failed to initialize GLFW")

        glfw.window_hint(glfw.CONTEXT_VERSION_MAJOR, 2)
        glfw.window_hint(glfw.CONTEXT_VERSION_MINOR, 1)

        self.handle = glfw.create_window(width, height, title, None, None)
        if not self.handle:
            glfw.terminate()
            raise RuntimeError("Failed to create GLFW window")
        glfw.make_context_current(self.handle)

        self.width, self.height = width, height
        self.title = title
        self.input = InputManager(self.handle)

        self._resize_listeners = []
        glfw.set_window_size_callback(self.handle, self._on_resize)
        self.set_vsync(True)

    def _on_resize(self, _win, w, h):
        self.width, self.height = w, h
        for cb in self._resize_listeners:
            cb(w, h)

    def add_resize_listener(self, callback):
        self._resize_listeners.append(callback)

    @property
    def framebuffer_size(self):
        return glfw.get_framebuffer_size(self.handle)

    def set_vsync(self, enable: bool = True):
        glfw.swap_interval(1 if enable else 0)

    def should_close(self) -> bool:
        return glfw.window_should_close(self.handle)

    def swap_buffers(self):
        glfw.swap_buffers(self.handle)

    def poll_events(self):
        glfw.poll_events()

    def close(self):
        glfw.set_window_should_close(self.handle, True)

    def destroy(self):
        glfw.destroy_window(self.handle)
        glfw.terminate()
