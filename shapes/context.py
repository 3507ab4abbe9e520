from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, List, Tuple, Union
import numpy as np

from .geometry import Affine2D, RGB, BLACK


@dataclass(frozen=True, eq=False)
class FillPolygon:
    points: np.ndarray  # shape (N, 2), pixel space
    color: RGB

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FillPolygon):
            return NotImplemented
        return self.color == other.color and np.array_equal(self.points, other.points)

    __hash__ = None


@dataclass(frozen=True, eq=False)
class StrokePolygon:
    points: np.ndarray  # shape (N, 2), pixel space, implicitly closed
    color: RGB
    width: float  # pixels

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StrokePolygon):
            return NotImplemented
        return (
            self.color == other.color
            and self.width == other.width
            and np.array_equal(self.points, other.points)
        )

    __hash__ = None


DrawCommand = Union[FillPolygon, StrokePolygon]


class DrawContext:
    """
    Records draw commands under a current affine transform, color and stroke width.

    Transform calls follow Graphics2D semantics: each new translate/scale/rotate
    is composed on the local side, so the most recent call is applied to
    vertices first. save()/restore() snapshot the whole drawing state.
    """

    def __init__(self, base: Affine2D | None = None, color: RGB = BLACK, stroke_width: float = 1.0):
        self.transform = base if base is not None else Affine2D.identity()
        self.color: RGB = color
        self.stroke_width = float(stroke_width)
        self._stack: List[Tuple[Affine2D, RGB, float]] = []
        self._commands: List[DrawCommand] = []

    @property
    def commands(self) -> List[DrawCommand]:
        return list(self._commands)

    @property
    def depth(self) -> int:
        return len(self._stack)

    # ---- Transform helpers ----
    def concat(self, T: Affine2D) -> None:
        self.transform = T.then(self.transform)

    def translate(self, dx: float, dy: float) -> None:
        self.concat(Affine2D.from_translate(dx, dy))

    def scale(self, sx: float, sy: float | None = None) -> None:
        self.concat(Affine2D.from_scale(sx, sy))

    def rotate(self, theta_radians: float) -> None:
        self.concat(Affine2D.from_rotation(theta_radians))

    # ---- State stack ----
    def save(self) -> None:
        self._stack.append((self.transform, self.color, self.stroke_width))

    def restore(self) -> None:
        if not self._stack:
            raise RuntimeError("restore() called without a matching save()")
        self.transform, self.color, self.stroke_width = self._stack.pop()

    @contextmanager
    def saved(self) -> Iterator["DrawContext"]:
        self.save()
        try:
            yield self
        finally:
            self.restore()

    # ---- Drawing ----
    def fill_polygon(self, vertices) -> None:
        pts = self.transform.apply_many(np.asarray(vertices, dtype=float))
        self._commands.append(FillPolygon(points=pts, color=self.color))

    def draw_polygon(self, vertices) -> None:
        pts = self.transform.apply_many(np.asarray(vertices, dtype=float))
        width = self.stroke_width * self.transform.scale_factor()
        self._commands.append(StrokePolygon(points=pts, color=self.color, width=width))
