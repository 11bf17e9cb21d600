import sys
import unittest
from pathlib import Path

import numpy as np

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "renderer"))

from lifeview_renderer.colors import (
    format_hex_color,
    pack_rgb,
    packed_to_rgb888_bytes,
    parse_hex_color,
    unpack_rgb,
)
from lifeview_renderer.palettes import DEFAULT_PALETTE_NAME, get_palette, list_palettes


class ColorTests(unittest.TestCase):
    def test_pack_and_unpack(self):
        self.assertEqual(pack_rgb(255, 0, 0), 0xFF0000)
        self.assertEqual(unpack_rgb(0x123456), (0x12, 0x34, 0x56))

    def test_parse_hex(self):
        self.assertEqual(parse_hex_color("#FFFFFF"), 0xFFFFFF)
        self.assertEqual(parse_hex_color("0x00ff00"), 0x00FF00)
        self.assertEqual(parse_hex_color("#f00"), 0xFF0000)
        self.assertEqual(format_hex_color(0x0A0B0C), "#0A0B0C")
        with self.assertRaises(ValueError):
            parse_hex_color("#12345")

    def test_rgb888_bytes(self):
        buffer = np.array([0xFF0000, 0x0000FF], dtype=np.uint32)
        self.assertEqual(packed_to_rgb888_bytes(buffer, 2, 1), bytes([255, 0, 0, 0, 0, 255]))
        with self.assertRaises(ValueError):
            packed_to_rgb888_bytes(buffer, 3, 1)


class PaletteTests(unittest.TestCase):
    def test_default_palette(self):
        palette = get_palette(None)
        self.assertEqual(palette.name, DEFAULT_PALETTE_NAME)
        self.assertEqual(palette.background_color, 0x000000)
        self.assertEqual(palette.foreground_color, 0xFFFFFF)

    def test_unknown_palette_falls_back(self):
        self.assertEqual(get_palette("Nope").name, DEFAULT_PALETTE_NAME)

    def test_list_is_sorted(self):
        names = list_palettes()
        self.assertEqual(names, sorted(names))
        self.assertIn("Phosphor", names)


if __name__ == "__main__":
    unittest.main()
