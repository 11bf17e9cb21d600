"""Display collaborator contract shared by the window and headless surfaces."""

from __future__ import annotations

import os
import sys
from typing import Protocol, Sequence

from .models import Key, Rect, ScaleMode


class DisplaySurface(Protocol):
    def update_with_buffer(self, buffer: Sequence[int], width: int, height: int) -> None: ...

    def is_open(self) -> bool: ...

    def is_key_down(self, key: Key) -> bool: ...

    def close(self) -> None: ...


def display_available() -> bool:
    if os.environ.get("QT_QPA_PLATFORM"):
        return True
    if sys.platform.startswith("linux"):
        return bool(os.environ.get("DISPLAY") or os.environ.get("WAYLAND_DISPLAY"))
    return True


def validate_frame(buffer: Sequence[int], width: int, height: int) -> None:
    if width < 1 or height < 1:
        raise ValueError(f"Frame dimensions must be at least 1x1, got {width}x{height}")
    if len(buffer) != width * height:
        raise ValueError(f"Frame buffer has {len(buffer)} pixels, expected {width * height}")


def scaled_rect(mode: ScaleMode, src_w: int, src_h: int, dst_w: int, dst_h: int) -> Rect:
    """Target rectangle for drawing a ``src`` sized frame into a ``dst`` sized surface."""
    mode = ScaleMode(mode)
    if mode == ScaleMode.STRETCH:
        return Rect(x=0, y=0, w=dst_w, h=dst_h)
    if mode == ScaleMode.ASPECT:
        factor = min(dst_w / src_w, dst_h / src_h)
        w = max(1, int(src_w * factor))
        h = max(1, int(src_h * factor))
        return Rect(x=(dst_w - w) // 2, y=(dst_h - h) // 2, w=w, h=h)
    if mode == ScaleMode.CENTER:
        return Rect(x=(dst_w - src_w) // 2, y=(dst_h - src_h) // 2, w=src_w, h=src_h)
    return Rect(x=0, y=0, w=src_w, h=src_h)
