# movingblocks/renderer/gl_renderer.py
"""
Рендерер на legacy‑pipeline OpenGL.

* Ортографическая проекция с осью Y вниз – совпадает с координатами курсора.
* Для каждого блока modelview = цепочка трансформаций предков.
* Попавший блок заливается, остальные рисуются контуром.
* Подпись с глобальной позицией попавшего блока – glDrawPixels.
"""

from OpenGL.GL import *
from OpenGL.GLU import gluErrorString

from movingblocks.renderer.draw_list import DrawItem, build_draw_list
from movingblocks.renderer.label import render_label
from movingblocks.utils.logger import logger


def gl_check_error(context: str = ""):
    """Проверить glGetError и вывести в лог, если что‑то не так."""
    err = glGetError()
    if err != GL_NO_ERROR:
        msg = gluErrorString(err)
        if isinstance(msg, bytes):
            msg = msg.decode()
        logger.error(f"OpenGL error {msg} [{context}]")


class GLRenderer:
    def __init__(self, window, show_labels: bool = True,
                 background=(0.0, 0.0, 0.0, 1.0)):
        self.window = window
        self.show_labels = show_labels
        self.background = tuple(background)
        self.width = window.width
        self.height = window.height

    # -----------------------------------------------------------------
    def resize(self, w: int, h: int) -> None:
        self.width, self.height = w, h

    # -----------------------------------------------------------------
    def render(self, scene) -> None:
        fb_w, fb_h = self.window.framebuffer_size
        glViewport(0, 0, fb_w, fb_h)
        glClearColor(*self.background)
        glClear(GL_COLOR_BUFFER_BIT)

        glMatrixMode(GL_PROJECTION)
        glLoadIdentity()
        glOrtho(0, self.width, self.height, 0, -1, 1)
        glMatrixMode(GL_MODELVIEW)

        items = build_draw_list(scene, self.show_labels)
        for item in items:
            self._draw_block(item)

        glLoadIdentity()
        for item in items:
            if item.label is not None:
                self._draw_label(item, fb_w, fb_h)

        gl_check_error("GLRenderer.render")

    # -----------------------------------------------------------------
    def _draw_block(self, item: DrawItem):
        glLoadMatrixd(item.transform.to_gl())
        glColor4ub(*item.color)
        glBegin(GL_QUADS if item.filled else GL_LINE_LOOP)
        for corner in item.rect.corners():
            glVertex2d(corner.x, corner.y)
        glEnd()

    def _draw_label(self, item: DrawItem, fb_w: int, fb_h: int):
        bitmap = render_label(item.label)
        sx = fb_w / max(self.width, 1)
        sy = fb_h / max(self.height, 1)
        # нижний край подписи – на верхнем левом углу блока
        glWindowPos2d(item.label_anchor.x * sx, fb_h - item.label_anchor.y * sy)

        glEnable(GL_BLEND)
        glBlendFunc(GL_SRC_ALPHA, GL_ONE_MINUS_SRC_ALPHA)
        glDrawPixels(bitmap.width, bitmap.height,
                     GL_RGBA, GL_UNSIGNED_BYTE, bitmap.pixels)
        glDisable(GL_BLEND)
