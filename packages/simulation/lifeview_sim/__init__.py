"""Simulation package: toroidal Game of Life grid and pattern data."""

from .grid import NEIGHBOR_OFFSETS, LifeGrid
from .models import InvalidSeedError, Pattern, PatternKind, Placement, SeedPolicy
from .patterns import (
    DEFAULT_SCENE_NAME,
    get_pattern,
    list_patterns,
    list_scenes,
    place,
    scene_cells,
)

__all__ = [
    "DEFAULT_SCENE_NAME",
    "InvalidSeedError",
    "LifeGrid",
    "NEIGHBOR_OFFSETS",
    "Pattern",
    "PatternKind",
    "Placement",
    "SeedPolicy",
    "get_pattern",
    "list_patterns",
    "list_scenes",
    "place",
    "scene_cells",
]
