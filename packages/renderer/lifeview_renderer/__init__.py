"""Renderer package: pixel framebuffer, colors, and palettes."""

from .colors import (
    BLACK,
    WHITE,
    format_hex_color,
    pack_rgb,
    packed_to_rgb888_bytes,
    parse_hex_color,
    unpack_rgb,
)
from .framebuffer import MAX_DIMENSION, Framebuffer
from .models import Palette
from .palettes import DEFAULT_PALETTE_NAME, get_palette, list_palettes

__all__ = [
    "BLACK",
    "DEFAULT_PALETTE_NAME",
    "Framebuffer",
    "MAX_DIMENSION",
    "Palette",
    "WHITE",
    "format_hex_color",
    "get_palette",
    "list_palettes",
    "pack_rgb",
    "packed_to_rgb888_bytes",
    "parse_hex_color",
    "unpack_rgb",
]
