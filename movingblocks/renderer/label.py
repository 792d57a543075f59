"""
Растеризация подписи через Pillow → RGBA‑байты для glDrawPixels.
"""

from dataclasses import dataclass
from functools import lru_cache

import numpy as np
from PIL import Image, ImageDraw, ImageFont

TEXT_COLOR = (255, 255, 255, 255)
BACKGROUND = (0, 0, 0, 160)


@dataclass(frozen=True)
class LabelBitmap:
    width: int
    height: int
    pixels: bytes


@lru_cache(maxsize=1)
def _font():
    return ImageFont.load_default()


@lru_cache(maxsize=256)
def render_label(text: str, padding: int = 2) -> LabelBitmap:
    """
    Строки рисуются снизу вверх (как ждёт glDrawPixels),
    поэтому изображение переворачивается по вертикали.
    """
    font = _font()
    left, top, right, bottom = font.getbbox(text)
    w = max(1, int(right - left) + 2 * padding)
    h = max(1, int(bottom - top) + 2 * padding)

    img = Image.new("RGBA", (w, h), BACKGROUND)
    ImageDraw.Draw(img).text((padding - left, padding - top), text,
                             font=font, fill=TEXT_COLOR)
    img = img.transpose(Image.Transpose.FLIP_TOP_BOTTOM)
    return LabelBitmap(w, h, np.array(img, dtype=np.uint8).tobytes())
