# c1_assist/gui/window_state.py
"""
Window position/size persistence.
Geometry is stored in the persistent config as [x, y, width, height].
"""

from __future__ import annotations
from typing import Iterable, List, Optional, Tuple

from PySide6.QtCore import QRect
from PySide6.QtGui import QGuiApplication
from PySide6.QtWidgets import QWidget

from ..utils.log import setup_logger
from ..utils.persistent_config import get_persistent_value, save_persistent_config

log = setup_logger("gui.window_state")

WINDOW_FRAME_KEY = "WINDOW_FRAME"


def frame_to_list(rect: QRect) -> List[int]:
    return [rect.x(), rect.y(), rect.width(), rect.height()]


def list_to_frame(values) -> Optional[QRect]:
    """Parse a stored frame; None if it is malformed or empty."""
    if not isinstance(values, (list, tuple)) or len(values) != 4:
        return None
    try:
        x, y, w, h = (int(v) for v in values)
    except (TypeError, ValueError):
        return None
    if w <= 0 or h <= 0:
        return None
    return QRect(x, y, w, h)


def is_visible_on(frame: QRect, screens: Iterable[QRect]) -> bool:
    return any(screen.intersects(frame) for screen in screens)


def _screen_frames() -> List[QRect]:
    return [screen.availableGeometry() for screen in QGuiApplication.screens()]


def save_window_state(window: QWidget) -> None:
    save_persistent_config({WINDOW_FRAME_KEY: frame_to_list(window.geometry())})


def restore_window_state(window: QWidget) -> bool:
    """Apply the saved frame if it still lands on an available screen."""
    frame = list_to_frame(get_persistent_value(WINDOW_FRAME_KEY))
    if frame is None:
        return False
    if not is_visible_on(frame, _screen_frames()):
        log.info(f"Saved window frame {frame_to_list(frame)} is off-screen, using default")
        return False
    window.setGeometry(frame)
    return True
