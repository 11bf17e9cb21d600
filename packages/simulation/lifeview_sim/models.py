"""Typed models for the simulation package."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class SeedPolicy(str, Enum):
    WRAP = "wrap"
    REJECT = "reject"


class PatternKind(str, Enum):
    STILL_LIFE = "still_life"
    OSCILLATOR = "oscillator"
    SPACESHIP = "spaceship"
    GUN = "gun"


class InvalidSeedError(ValueError):
    """Raised when a seed coordinate falls outside the grid under ``SeedPolicy.REJECT``."""

    def __init__(self, x: int, y: int, width: int, height: int) -> None:
        super().__init__(f"Seed coordinate ({x}, {y}) outside {width}x{height} grid")
        self.x = x
        self.y = y


@dataclass(frozen=True)
class Pattern:
    name: str
    kind: PatternKind
    cells: tuple[tuple[int, int], ...]

    @property
    def width(self) -> int:
        return max((x for x, _ in self.cells), default=-1) + 1

    @property
    def height(self) -> int:
        return max((y for _, y in self.cells), default=-1) + 1


@dataclass(frozen=True)
class Placement:
    pattern: str
    x: int
    y: int
