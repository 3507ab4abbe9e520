from __future__ import annotations

from dataclasses import dataclass

from shapes import RGB, WHITE, DARK_GRAY


@dataclass(frozen=True)
class ViewConfig:
    width: int = 800
    height: int = 600
    x_left: float = -4.0
    x_right: float = 4.0
    y_top: float = 3.0
    y_bottom: float = -3.0  # below y_top, so positive y points up
    preserve_aspect: bool = False
    background: RGB = WHITE
    border: RGB = DARK_GRAY
    frame_interval_ms: int = 17  # about 60 frames per second
