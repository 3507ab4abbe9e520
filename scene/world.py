from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from shapes import DrawContext, DrawCommand, BLUE, PINK, GREEN, rotating_shape, bar, triangle

from .config import ViewConfig
from .limits import ViewMapping, apply_limits


@dataclass(frozen=True)
class Frame:
    frame_number: int
    mapping: ViewMapping
    commands: Tuple[DrawCommand, ...]
    width: int
    height: int


def draw_world(ctx: DrawContext, frame_number: int) -> None:
    # Paint order is z-order: later calls cover earlier ones.
    rotating_shape(ctx, 100, -1.02, -0.05, frame_number)
    rotating_shape(ctx, 100, 1.04, -0.98, frame_number)
    rotating_shape(ctx, 80, -1.379, 1.40, frame_number)
    rotating_shape(ctx, 80, -3.13, 2.23, frame_number)
    rotating_shape(ctx, 60, 0.9, 2.05, frame_number)
    rotating_shape(ctx, 60, 2.12, 1.45, frame_number)

    bar(ctx, 1, 1.05, 0, -0.5)
    bar(ctx, 0.85, 0.95, -2.65, 1.90)
    bar(ctx, 0.6, 0.70, 2.5, 2.5)

    triangle(ctx, 0.5, 0.5, 0, -2, BLUE)
    triangle(ctx, 0.35, 0.35, -2.25, 0.75, PINK)
    triangle(ctx, 0.25, 0.25, 1.5, 1, GREEN)


def render_frame(
    frame_number: int,
    config: ViewConfig = ViewConfig(),
    width: Optional[int] = None,
    height: Optional[int] = None,
) -> Frame:
    """
    Draws the world for one frame number and returns its pixel-space commands.
    width/height default to the configured viewport size.
    """
    w = config.width if width is None else int(width)
    h = config.height if height is None else int(height)
    mapping = apply_limits(
        w,
        h,
        config.x_left,
        config.x_right,
        config.y_top,
        config.y_bottom,
        preserve_aspect=config.preserve_aspect,
    )
    # default line width is one pixel
    ctx = DrawContext(base=mapping.transform, stroke_width=mapping.pixel_size)
    draw_world(ctx, frame_number)
    return Frame(frame_number=frame_number, mapping=mapping, commands=tuple(ctx.commands), width=w, height=h)
