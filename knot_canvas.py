# knot_canvas.py
# Raster drawing surface: numpy RGB buffer with fill_rect + verbatim block copies.

import math
from typing import Optional, Tuple, Union

import numpy as np
from PIL import Image, ImageColor

Color = Union[str, Tuple[int, int, int]]


def to_rgb(color: Color) -> Tuple[int, int, int]:
    if isinstance(color, str):
        rgb = ImageColor.getrgb(color)
        return tuple(rgb[:3])
    r, g, b = color[:3]
    return (int(r), int(g), int(b))


def pixel_edge(v: float) -> int:
    """First pixel whose centre lies at or right of device coordinate v."""
    return math.ceil(v - 0.5)


def _span(start: float, length: float, limit: int) -> Tuple[int, int]:
    # pixel p is covered when its centre p+0.5 lies in [start, start+length)
    lo = pixel_edge(start)
    hi = pixel_edge(start + length)
    return max(lo, 0), min(hi, limit)


class Canvas:
    """
    Opaque RGB pixel buffer, rows first (height, width, 3).

    fill_rect takes fractional device coordinates and rasterizes without
    anti-aliasing: a pixel is painted iff its centre falls inside the rect.
    """

    def __init__(self, width: int, height: int, background: Optional[Color] = None):
        if width < 0 or height < 0:
            raise ValueError(f"canvas size must be non-negative, got {width}x{height}")
        self.width = int(width)
        self.height = int(height)
        self.pixels = np.zeros((self.height, self.width, 3), dtype=np.uint8)
        if background is not None:
            self.pixels[:, :] = to_rgb(background)

    @property
    def size(self) -> Tuple[int, int]:
        return (self.width, self.height)

    def fill_rect(self, color: Color, x: float, y: float, width: float, height: float) -> None:
        if width <= 0 or height <= 0:
            return
        x0, x1 = _span(x, width, self.width)
        y0, y1 = _span(y, height, self.height)
        if x0 >= x1 or y0 >= y1:
            return
        self.pixels[y0:y1, x0:x1] = to_rgb(color)

    def read_block(self, x: int, y: int, width: int, height: int) -> np.ndarray:
        if x < 0 or y < 0 or x + width > self.width or y + height > self.height:
            raise ValueError(
                f"block ({x},{y},{width},{height}) outside {self.width}x{self.height} canvas")
        return self.pixels[y:y + height, x:x + width].copy()

    def write_block(self, block: np.ndarray, x: int, y: int) -> None:
        h, w = block.shape[:2]
        x0, y0 = max(x, 0), max(y, 0)
        x1, y1 = min(x + w, self.width), min(y + h, self.height)
        if x0 >= x1 or y0 >= y1:
            return
        self.pixels[y0:y1, x0:x1] = block[y0 - y:y1 - y, x0 - x:x1 - x]

    def pixel(self, x: int, y: int) -> Tuple[int, int, int]:
        r, g, b = self.pixels[y, x]
        return (int(r), int(g), int(b))

    def copy(self) -> "Canvas":
        out = Canvas(self.width, self.height)
        out.pixels[...] = self.pixels
        return out

    def to_image(self) -> Image.Image:
        return Image.fromarray(self.pixels)
