"""Built-in cell palettes."""

from __future__ import annotations

from .models import Palette

DEFAULT_PALETTE_NAME = "Classic"

PALETTES: dict[str, Palette] = {
    "Classic": Palette(
        name="Classic",
        background="#000000",
        foreground="#FFFFFF",
    ),
    "Phosphor": Palette(
        name="Phosphor",
        background="#031A09",
        foreground="#39FF6A",
    ),
    "Amber": Palette(
        name="Amber",
        background="#1A1000",
        foreground="#FFB000",
    ),
    "Paper": Palette(
        name="Paper",
        background="#F4F1E8",
        foreground="#1E1E24",
    ),
}


def list_palettes() -> list[str]:
    return sorted(PALETTES.keys())


def get_palette(name: str | None) -> Palette:
    if not name:
        return PALETTES[DEFAULT_PALETTE_NAME]
    return PALETTES.get(name, PALETTES[DEFAULT_PALETTE_NAME])
