from __future__ import annotations

from typing import List, Tuple
import math
import numpy as np

from .context import DrawContext
from .geometry import RGB, BLACK, RED, UNIT_SQUARE


NUM_VERTICES = 13
SHAPE_SCALE = 0.005
SHAPE_STROKE = 2.0

BAR_ROTATION = -math.pi / 8
BAR_SIZE = (2.3, 0.15)

TRIANGLE_VERTICES = np.array([[0, 3], [1, 0], [-1, 0]], dtype=float)


def filled_rect(ctx: DrawContext) -> None:
    """Fills a square of side 1 centered at (0, 0) in the current color."""
    ctx.fill_polygon(UNIT_SQUARE)


def rotation_angle(frame_number: int) -> float:
    """Rotation of the spinning shapes, in degrees, for a given frame."""
    return float(frame_number % 360)


def rotating_shape_vertices(radius: float) -> np.ndarray:
    """
    Builds the "flower" wireframe: every consecutive pair of outer vertices
    is joined through the origin, so the outline alternates between the rim
    and the center instead of tracing a plain 13-gon.
    Coordinates are truncated toward zero to whole units.
    """
    step = (math.pi * 2) / NUM_VERTICES
    outer: List[Tuple[int, int]] = [
        (int(radius * math.sin(i * step)), int(radius * math.cos(i * step)))
        for i in range(NUM_VERTICES)
    ]
    points: List[Tuple[int, int]] = []
    for i in range(NUM_VERTICES):
        if i != 0:
            points.append(outer[i - 1])
        points.append(outer[i])
        points.append((0, 0))
    points.append(outer[0])
    points.append(outer[NUM_VERTICES - 1])
    return np.array(points, dtype=float)


def rotating_shape(ctx: DrawContext, radius: float, offset_x: float, offset_y: float, frame_number: int) -> None:
    with ctx.saved():
        ctx.stroke_width = SHAPE_STROKE
        ctx.translate(offset_x, offset_y)
        ctx.color = BLACK
        ctx.rotate(math.radians(rotation_angle(frame_number)))
        ctx.scale(SHAPE_SCALE, SHAPE_SCALE)
        ctx.draw_polygon(rotating_shape_vertices(radius))


def bar(ctx: DrawContext, x: float, y: float, offset_x: float, offset_y: float) -> None:
    """
    Red bar: outer (x, y) scale, then offset, then a -22.5 degree tilt,
    then the 2.3 x 0.15 bar proportions applied to the unit square.
    """
    with ctx.saved():
        ctx.scale(x, y)
        ctx.color = RED
        ctx.translate(offset_x, offset_y)
        ctx.rotate(BAR_ROTATION)
        ctx.scale(*BAR_SIZE)
        filled_rect(ctx)


def triangle(ctx: DrawContext, scale_x: float, scale_y: float, offset_x: float, offset_y: float, color: RGB) -> None:
    with ctx.saved():
        ctx.color = color
        ctx.translate(offset_x, offset_y)
        ctx.scale(scale_x, scale_y)
        ctx.fill_polygon(TRIANGLE_VERTICES)
