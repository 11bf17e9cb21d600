"""Named pattern table and starting scenes.

Patterns are written in plaintext art (``O`` alive, ``.`` dead) with offsets
measured from the pattern's top-left corner.
"""

from __future__ import annotations

from .models import Pattern, PatternKind, Placement


def _pattern(name: str, kind: PatternKind, *rows: str) -> Pattern:
    cells = tuple((x, y) for y, row in enumerate(rows) for x, ch in enumerate(row) if ch == "O")
    return Pattern(name=name, kind=kind, cells=cells)


_ALL = [
    # Still lifes
    _pattern("block", PatternKind.STILL_LIFE, "OO", "OO"),
    _pattern("beehive", PatternKind.STILL_LIFE, ".OO.", "O..O", ".OO."),
    _pattern("loaf", PatternKind.STILL_LIFE, ".OO.", "O..O", ".O.O", "..O."),
    _pattern("boat", PatternKind.STILL_LIFE, "OO.", "O.O", ".O."),
    _pattern("tub", PatternKind.STILL_LIFE, ".O.", "O.O", ".O."),
    # Oscillators
    _pattern("blinker", PatternKind.OSCILLATOR, "OOO"),
    _pattern("toad", PatternKind.OSCILLATOR, ".OOO", "OOO."),
    _pattern("beacon", PatternKind.OSCILLATOR, "OO..", "OO..", "..OO", "..OO"),
    _pattern(
        "pulsar",
        PatternKind.OSCILLATOR,
        "..OOO...OOO..",
        ".............",
        "O....O.O....O",
        "O....O.O....O",
        "O....O.O....O",
        "..OOO...OOO..",
        ".............",
        "..OOO...OOO..",
        "O....O.O....O",
        "O....O.O....O",
        "O....O.O....O",
        ".............",
        "..OOO...OOO..",
    ),
    # Spaceships
    _pattern("glider", PatternKind.SPACESHIP, ".O.", "..O", "OOO"),
    _pattern("lwss", PatternKind.SPACESHIP, ".O..O", "O....", "O...O", "OOOO."),
    _pattern("mwss", PatternKind.SPACESHIP, "...O..", ".O...O", "O.....", "O....O", "OOOOO."),
    _pattern("hwss", PatternKind.SPACESHIP, "...OO..", ".O....O", "O......", "O.....O", "OOOOOO."),
    # Guns
    _pattern(
        "gosper_glider_gun",
        PatternKind.GUN,
        "........................O",
        "......................O.O",
        "............OO......OO............OO",
        "...........O...O....OO............OO",
        "OO........O.....O...OO",
        "OO........O...O.OO....O.O",
        "..........O.....O.......O",
        "...........O...O",
        "............OO",
    ),
]

PATTERNS: dict[str, Pattern] = {p.name: p for p in _ALL}

DEFAULT_SCENE_NAME = "showcase"

# Layouts sized for the default 80x60 grid.
SCENES: dict[str, tuple[Placement, ...]] = {
    "showcase": (
        Placement("glider", 1, 1),
        Placement("lwss", 10, 20),
        Placement("mwss", 10, 30),
        Placement("hwss", 10, 42),
        Placement("pulsar", 30, 4),
        Placement("block", 60, 5),
        Placement("beehive", 68, 5),
        Placement("loaf", 60, 12),
        Placement("boat", 70, 12),
        Placement("tub", 66, 18),
        Placement("blinker", 40, 50),
        Placement("toad", 50, 50),
        Placement("beacon", 60, 48),
    ),
    "glider": (Placement("glider", 1, 1),),
    "gun": (
        Placement("gosper_glider_gun", 2, 2),
        Placement("block", 70, 50),
    ),
}


def list_patterns() -> list[str]:
    return sorted(PATTERNS.keys())


def get_pattern(name: str) -> Pattern:
    try:
        return PATTERNS[name]
    except KeyError:
        raise KeyError(f"Unknown pattern: {name}") from None


def place(name: str, x: int, y: int) -> list[tuple[int, int]]:
    return [(x + dx, y + dy) for dx, dy in get_pattern(name).cells]


def list_scenes() -> list[str]:
    return sorted(SCENES.keys())


def scene_cells(name: str | None = None) -> list[tuple[int, int]]:
    scene = name or DEFAULT_SCENE_NAME
    if scene not in SCENES:
        raise KeyError(f"Unknown scene: {scene}")
    cells: list[tuple[int, int]] = []
    for placement in SCENES[scene]:
        cells.extend(place(placement.pattern, placement.x, placement.y))
    return cells
