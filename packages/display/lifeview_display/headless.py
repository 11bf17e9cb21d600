"""In-memory display surface for runs without a window."""

from __future__ import annotations

from typing import Sequence

import numpy as np

from .models import Key
from .surface import validate_frame


class HeadlessDisplay:
    """Keeps the last presented frame and closes itself after ``max_frames``."""

    def __init__(self, max_frames: int | None = None) -> None:
        if max_frames is not None and max_frames < 0:
            raise ValueError("max_frames must be non-negative")
        self.max_frames = max_frames
        self.frames_presented = 0
        self.last_frame: np.ndarray | None = None
        self.last_size: tuple[int, int] | None = None
        self._open = max_frames != 0
        self._pressed: set[Key] = set()

    def update_with_buffer(self, buffer: Sequence[int], width: int, height: int) -> None:
        if not self._open:
            raise RuntimeError("Display is closed")
        validate_frame(buffer, width, height)
        self.last_frame = np.array(buffer, dtype=np.uint32, copy=True)
        self.last_size = (width, height)
        self.frames_presented += 1
        if self.max_frames is not None and self.frames_presented >= self.max_frames:
            self._open = False

    def is_open(self) -> bool:
        return self._open

    def is_key_down(self, key: Key) -> bool:
        return Key(key) in self._pressed

    def press(self, key: Key) -> None:
        self._pressed.add(Key(key))

    def release(self, key: Key) -> None:
        self._pressed.discard(Key(key))

    def close(self) -> None:
        self._open = False
