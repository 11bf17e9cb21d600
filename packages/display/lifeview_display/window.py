"""Qt window that presents packed-RGB frames, scaled per ``ScaleMode``."""

from __future__ import annotations

import sys
import time
from typing import Sequence

import numpy as np
from PySide6.QtCore import QRect, Qt
from PySide6.QtGui import QCloseEvent, QImage, QKeyEvent, QPainter, QPaintEvent
from PySide6.QtWidgets import QApplication, QWidget

from .models import DisplayUnavailableError, Key, WindowOptions
from .surface import display_available, scaled_rect, validate_frame

_QT_KEYS: dict[Key, Qt.Key] = {
    Key.ESCAPE: Qt.Key.Key_Escape,
    Key.Q: Qt.Key.Key_Q,
    Key.SPACE: Qt.Key.Key_Space,
}


def frame_to_qimage(buffer: Sequence[int], width: int, height: int) -> QImage:
    validate_frame(buffer, width, height)
    argb = np.asarray(buffer, dtype=np.uint32) | np.uint32(0xFF000000)
    data = argb.astype("<u4").tobytes()
    # copy() detaches the image from the temporary bytes object
    return QImage(data, width, height, width * 4, QImage.Format.Format_RGB32).copy()


class _FrameWidget(QWidget):
    def __init__(self, options: WindowOptions) -> None:
        super().__init__()
        self.options = options
        self.closed = False
        self._image: QImage | None = None
        self._pressed: set[int] = set()
        self._tapped: set[int] = set()

        self.setWindowTitle(options.title)
        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)
        if options.borderless:
            self.setWindowFlag(Qt.WindowType.FramelessWindowHint, True)
        if options.resizable:
            self.resize(options.width, options.height)
        else:
            self.setFixedSize(options.width, options.height)

    def set_frame(self, image: QImage) -> None:
        self._image = image
        self.update()

    def is_pressed(self, qt_key: Qt.Key) -> bool:
        """True while the key is held, or once after a press released since the last poll."""
        code = int(qt_key)
        tapped = code in self._tapped
        self._tapped.discard(code)
        return tapped or code in self._pressed

    def paintEvent(self, event: QPaintEvent) -> None:  # noqa: N802
        painter = QPainter(self)
        painter.fillRect(self.rect(), Qt.GlobalColor.black)
        if self._image is not None:
            target = scaled_rect(
                self.options.scale_mode,
                self._image.width(),
                self._image.height(),
                self.width(),
                self.height(),
            )
            painter.setRenderHint(QPainter.RenderHint.SmoothPixmapTransform, False)
            painter.drawImage(QRect(target.x, target.y, target.w, target.h), self._image)
        painter.end()

    def keyPressEvent(self, event: QKeyEvent) -> None:  # noqa: N802
        if not event.isAutoRepeat():
            self._pressed.add(int(event.key()))
            self._tapped.add(int(event.key()))
        super().keyPressEvent(event)

    def keyReleaseEvent(self, event: QKeyEvent) -> None:  # noqa: N802
        if not event.isAutoRepeat():
            self._pressed.discard(int(event.key()))
        super().keyReleaseEvent(event)

    def closeEvent(self, event: QCloseEvent) -> None:  # noqa: N802
        self.closed = True
        event.accept()


class QtWindowDisplay:
    """Window surface backed by a PySide6 ``QWidget``.

    Qt events are pumped on every presented frame and while sleeping, so the
    caller keeps a plain blocking loop.
    """

    def __init__(self, options: WindowOptions | None = None) -> None:
        self.options = options or WindowOptions()
        if not display_available():
            raise DisplayUnavailableError("No display server available (DISPLAY/WAYLAND_DISPLAY unset)")
        self._app = QApplication.instance() or QApplication(sys.argv)
        if not self._app.screens():
            raise DisplayUnavailableError("Qt reported no screens")
        self._widget = _FrameWidget(self.options)
        self._widget.show()
        self._app.processEvents()

    def update_with_buffer(self, buffer: Sequence[int], width: int, height: int) -> None:
        image = frame_to_qimage(buffer, width, height)
        self._widget.set_frame(image)
        self._app.processEvents()

    def is_open(self) -> bool:
        return not self._widget.closed and self._widget.isVisible()

    def is_key_down(self, key: Key) -> bool:
        return self._widget.is_pressed(_QT_KEYS[Key(key)])

    def sleep(self, seconds: float) -> None:
        deadline = time.perf_counter() + max(0.0, seconds)
        while True:
            self._app.processEvents()
            remaining = deadline - time.perf_counter()
            if remaining <= 0:
                return
            time.sleep(min(remaining, 0.01))

    def close(self) -> None:
        if not self._widget.closed:
            self._widget.close()
        self._app.processEvents()
