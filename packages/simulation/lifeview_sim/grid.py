"""Conway's Game of Life (B3/S23) on a toroidal grid."""

from __future__ import annotations

from typing import Iterable, Protocol

import numpy as np

from .models import InvalidSeedError, SeedPolicy

NEIGHBOR_OFFSETS: tuple[tuple[int, int], ...] = tuple(
    (dx, dy) for dy in (-1, 0, 1) for dx in (-1, 0, 1) if not (dx == 0 and dy == 0)
)


class PointSink(Protocol):
    def clear(self) -> None: ...

    def point(self, x: int, y: int) -> None: ...


class LifeGrid:
    """Row-major boolean cell array; every coordinate wraps modulo the grid size.

    ``step`` computes the next generation into a fresh array and swaps it in,
    so no cell sees a neighbor that was already updated in the same pass.
    """

    def __init__(
        self,
        width: int,
        height: int,
        initial_live_coordinates: Iterable[tuple[int, int]] = (),
        seed_policy: SeedPolicy | str = SeedPolicy.WRAP,
    ) -> None:
        if width < 1 or height < 1:
            raise ValueError(f"Grid dimensions must be at least 1x1, got {width}x{height}")
        self.width = int(width)
        self.height = int(height)
        self.seed_policy = SeedPolicy(seed_policy)
        self.generation = 0
        self._cells = np.zeros(self.width * self.height, dtype=bool)
        self._seed(initial_live_coordinates)

    def _seed(self, coordinates: Iterable[tuple[int, int]]) -> None:
        seeds = [(int(x), int(y)) for x, y in coordinates]
        if self.seed_policy == SeedPolicy.REJECT:
            for x, y in seeds:
                if not (0 <= x < self.width and 0 <= y < self.height):
                    raise InvalidSeedError(x, y, self.width, self.height)
        for x, y in seeds:
            self._cells[self.index(x % self.width, y % self.height)] = True

    def index(self, x: int, y: int) -> int:
        return y * self.width + x

    @property
    def cells(self) -> np.ndarray:
        return self._cells.copy()

    @property
    def population(self) -> int:
        return int(np.count_nonzero(self._cells))

    def is_alive(self, x: int, y: int) -> bool:
        return bool(self._cells[self.index(x % self.width, y % self.height)])

    def live_cells(self) -> list[tuple[int, int]]:
        return [(int(i) % self.width, int(i) // self.width) for i in np.flatnonzero(self._cells)]

    def count_neighbors(self, x: int, y: int) -> int:
        count = 0
        for dx, dy in NEIGHBOR_OFFSETS:
            if self._cells[self.index((x + dx) % self.width, (y + dy) % self.height)]:
                count += 1
        return count

    def neighbor_counts(self) -> np.ndarray:
        """Live-neighbor count for every cell, shaped ``(height, width)``."""
        board = self._cells.reshape((self.height, self.width))
        counts = np.zeros(board.shape, dtype=np.uint8)
        for dx, dy in NEIGHBOR_OFFSETS:
            # roll by -d so that counts[y, x] reads board[(y + dy) % h, (x + dx) % w]
            counts += np.roll(board, shift=(-dy, -dx), axis=(0, 1))
        return counts

    def step(self) -> None:
        board = self._cells.reshape((self.height, self.width))
        counts = self.neighbor_counts()
        survive = board & ((counts == 2) | (counts == 3))
        birth = ~board & (counts == 3)
        self._cells = (survive | birth).reshape(-1)
        self.generation += 1

    def render(self, framebuffer: PointSink) -> None:
        framebuffer.clear()
        for x, y in self.live_cells():
            framebuffer.point(x, y)
