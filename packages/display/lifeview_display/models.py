"""Typed models for display surfaces and window options."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ScaleMode(str, Enum):
    STRETCH = "stretch"
    ASPECT = "aspect"
    CENTER = "center"
    UPPER_LEFT = "upper_left"


class Key(str, Enum):
    ESCAPE = "escape"
    Q = "q"
    SPACE = "space"


class DisplayUnavailableError(RuntimeError):
    """No display surface could be created (for example, no display server)."""


@dataclass(frozen=True)
class WindowOptions:
    title: str = "LifeView"
    width: int = 800
    height: int = 600
    borderless: bool = False
    resizable: bool = True
    scale_mode: ScaleMode = ScaleMode.STRETCH


@dataclass(frozen=True)
class Rect:
    x: int
    y: int
    w: int
    h: int
