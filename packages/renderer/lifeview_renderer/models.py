"""Typed renderer models."""

from __future__ import annotations

from dataclasses import dataclass

from .colors import parse_hex_color


@dataclass(frozen=True)
class Palette:
    name: str
    background: str
    foreground: str

    @property
    def background_color(self) -> int:
        return parse_hex_color(self.background)

    @property
    def foreground_color(self) -> int:
        return parse_hex_color(self.foreground)
