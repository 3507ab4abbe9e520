# Re-export core geometry API for convenience
from .geometry import (
    Affine2D,
    RGB,
    BLACK,
    WHITE,
    RED,
    GREEN,
    BLUE,
    PINK,
    DARK_GRAY,
    UNIT_SQUARE,
)
from .context import (
    DrawContext,
    DrawCommand,
    FillPolygon,
    StrokePolygon,
)
from .primitives import (
    filled_rect,
    rotating_shape,
    rotating_shape_vertices,
    rotation_angle,
    bar,
    triangle,
)
