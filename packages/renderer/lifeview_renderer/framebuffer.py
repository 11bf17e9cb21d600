"""Flat packed-RGB pixel buffer that rendered generations are drawn into."""

from __future__ import annotations

from pathlib import Path

import numpy as np
from PIL import Image

from .colors import BLACK, WHITE, packed_to_rgb_array, validate_color

MAX_DIMENSION = 16384


class Framebuffer:
    """Row-major ``width * height`` array of ``0xRRGGBB`` pixels.

    Writes outside the buffer are ignored, so callers can project a larger
    world onto a smaller buffer without clipping first.
    """

    def __init__(self, width: int, height: int) -> None:
        if width < 1 or height < 1:
            raise ValueError(f"Framebuffer dimensions must be at least 1x1, got {width}x{height}")
        if width > MAX_DIMENSION or height > MAX_DIMENSION:
            raise ValueError(f"Framebuffer dimensions exceed {MAX_DIMENSION}: {width}x{height}")
        self.width = int(width)
        self.height = int(height)
        self.buffer = np.full(self.width * self.height, BLACK, dtype=np.uint32)
        self.background_color = BLACK
        self.current_color = WHITE

    def __len__(self) -> int:
        return int(self.buffer.size)

    def index(self, x: int, y: int) -> int:
        return y * self.width + x

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def set_background_color(self, color: int) -> None:
        self.background_color = validate_color(color)

    def set_current_color(self, color: int) -> None:
        self.current_color = validate_color(color)

    def clear(self) -> None:
        self.buffer.fill(self.background_color)

    def point(self, x: int, y: int) -> None:
        if not self.in_bounds(x, y):
            return
        self.buffer[self.index(x, y)] = self.current_color

    def get_pixel(self, x: int, y: int) -> int:
        if not self.in_bounds(x, y):
            raise IndexError(f"Pixel ({x}, {y}) outside {self.width}x{self.height} buffer")
        return int(self.buffer[self.index(x, y)])

    def to_rgb_array(self) -> np.ndarray:
        return packed_to_rgb_array(self.buffer, self.width, self.height)

    def to_image(self, scale: int = 1) -> Image.Image:
        image = Image.fromarray(self.to_rgb_array())
        if scale > 1:
            image = image.resize((self.width * scale, self.height * scale), Image.Resampling.NEAREST)
        return image

    def save_png(self, path: Path, scale: int = 1) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        self.to_image(scale=scale).save(path, format="PNG")
        return path
