"""Display package: surface contract, window options, and headless surface.

The Qt window lives in ``lifeview_display.window`` and is imported on demand.
"""

from .headless import HeadlessDisplay
from .models import DisplayUnavailableError, Key, Rect, ScaleMode, WindowOptions
from .surface import DisplaySurface, display_available, scaled_rect, validate_frame

__all__ = [
    "DisplaySurface",
    "DisplayUnavailableError",
    "HeadlessDisplay",
    "Key",
    "Rect",
    "ScaleMode",
    "WindowOptions",
    "display_available",
    "scaled_rect",
    "validate_frame",
]
