"""Packed RGB color helpers and buffer conversion."""

from __future__ import annotations

import numpy as np

MAX_COLOR = 0xFFFFFF
BLACK = 0x000000
WHITE = 0xFFFFFF


def validate_color(color: int) -> int:
    value = int(color)
    if value < 0 or value > MAX_COLOR:
        raise ValueError(f"Color must be a packed 0xRRGGBB value, got {color!r}")
    return value


def pack_rgb(r: int, g: int, b: int) -> int:
    for channel in (r, g, b):
        if channel < 0 or channel > 255:
            raise ValueError("RGB channels must be in 0..255")
    return (int(r) << 16) | (int(g) << 8) | int(b)


def unpack_rgb(color: int) -> tuple[int, int, int]:
    value = validate_color(color)
    return (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF


def parse_hex_color(text: str) -> int:
    cleaned = text.strip().lstrip("#")
    if cleaned.lower().startswith("0x"):
        cleaned = cleaned[2:]
    if len(cleaned) == 3:
        cleaned = "".join(ch * 2 for ch in cleaned)
    if len(cleaned) != 6:
        raise ValueError(f"Expected #RRGGBB color, got {text!r}")
    return validate_color(int(cleaned, 16))


def format_hex_color(color: int) -> str:
    return f"#{validate_color(color):06X}"


def packed_to_rgb_array(buffer: np.ndarray, width: int, height: int) -> np.ndarray:
    """Expand a flat packed buffer into an ``(height, width, 3)`` uint8 array."""
    if buffer.size != width * height:
        raise ValueError("Buffer length must equal width * height")
    packed = np.asarray(buffer, dtype=np.uint32).reshape((height, width))
    out = np.empty((height, width, 3), dtype=np.uint8)
    out[..., 0] = (packed >> 16) & 0xFF
    out[..., 1] = (packed >> 8) & 0xFF
    out[..., 2] = packed & 0xFF
    return out


def packed_to_rgb888_bytes(buffer: np.ndarray, width: int, height: int) -> bytes:
    return packed_to_rgb_array(buffer, width, height).tobytes()
