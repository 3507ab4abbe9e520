from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple
import math
import numpy as np


RGB = Tuple[float, float, float]

BLACK: RGB = (0.0, 0.0, 0.0)
WHITE: RGB = (1.0, 1.0, 1.0)
RED: RGB = (1.0, 0.0, 0.0)
GREEN: RGB = (0.0, 1.0, 0.0)
BLUE: RGB = (0.0, 0.0, 1.0)
PINK: RGB = (1.0, 175 / 255, 175 / 255)
DARK_GRAY: RGB = (64 / 255, 64 / 255, 64 / 255)


@dataclass(frozen=True, eq=False)
class Affine2D:
    """
    2D affine transform x -> A x + t
    """
    A: np.ndarray  # shape (2, 2)
    t: np.ndarray  # shape (2,)

    def __post_init__(self):
        if self.A.shape != (2, 2):
            raise ValueError("A must be 2x2")
        if self.t.shape != (2,):
            raise ValueError("t must be length-2")

    def apply(self, point_xy: np.ndarray) -> np.ndarray:
        return self.A @ point_xy + self.t

    def apply_many(self, points_xy: np.ndarray) -> np.ndarray:
        pts = np.asarray(points_xy, dtype=float).reshape(-1, 2)
        return pts @ self.A.T + self.t

    def inverse_apply(self, point_xy: np.ndarray) -> np.ndarray:
        return np.linalg.solve(self.A, np.asarray(point_xy, dtype=float) - self.t)

    def scale_factor(self) -> float:
        """
        Average linear magnification, used to map stroke widths to pixels.
        """
        return math.sqrt(abs(float(np.linalg.det(self.A))))

    # ---- Constructors and composition ----
    @staticmethod
    def identity() -> "Affine2D":
        return Affine2D(A=np.eye(2), t=np.zeros(2))

    @staticmethod
    def from_translate(dx: float, dy: float) -> "Affine2D":
        return Affine2D(A=np.eye(2), t=np.array([dx, dy], dtype=float))

    @staticmethod
    def from_scale(sx: float, sy: float | None = None) -> "Affine2D":
        if sy is None:
            sy = sx
        return Affine2D(A=np.array([[sx, 0.0], [0.0, sy]], dtype=float), t=np.zeros(2))

    @staticmethod
    def from_rotation(theta_radians: float) -> "Affine2D":
        c = math.cos(theta_radians)
        s = math.sin(theta_radians)
        return Affine2D(A=np.array([[c, -s], [s, c]], dtype=float), t=np.zeros(2))

    def then(self, after: "Affine2D") -> "Affine2D":
        """
        First apply self, then apply 'after'.
        y = after.apply(self.apply(x))
        """
        A_new = after.A @ self.A
        t_new = after.A @ self.t + after.t
        return Affine2D(A=A_new, t=t_new)

    def same_as(self, other: "Affine2D") -> bool:
        return bool(np.array_equal(self.A, other.A) and np.array_equal(self.t, other.t))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Affine2D):
            return NotImplemented
        return self.same_as(other)

    __hash__ = None


UNIT_SQUARE = np.array(
    [
        [-0.5, -0.5],
        [0.5, -0.5],
        [0.5, 0.5],
        [-0.5, 0.5],
    ],
    dtype=float,
)
