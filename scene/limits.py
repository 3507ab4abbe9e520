from __future__ import annotations

from dataclasses import dataclass
import numpy as np

from shapes import Affine2D


@dataclass(frozen=True)
class ViewMapping:
    transform: Affine2D
    pixel_size: float
    xleft: float
    xright: float
    ytop: float
    ybottom: float

    def to_pixel(self, x: float, y: float) -> np.ndarray:
        return self.transform.apply(np.array([x, y], dtype=float))

    def to_logical(self, px: float, py: float) -> np.ndarray:
        return self.transform.inverse_apply(np.array([px, py], dtype=float))


def apply_limits(
    width: int,
    height: int,
    xleft: float,
    xright: float,
    ytop: float,
    ybottom: float,
    preserve_aspect: bool = False,
) -> ViewMapping:
    """
    Builds the transform that makes a requested rectangle visible in a
    width x height pixel viewport whose upper left corner is (0, 0).

    ybottom may be less than ytop, which flips the y axis so that positive
    values point up. If preserve_aspect is False the rectangle exactly fills
    the viewport and the horizontal and vertical units differ. If it is True,
    the limits are widened symmetrically in one direction so the displayed
    rectangle has the viewport's aspect ratio.

    The returned pixel_size is the size of one pixel in logical units.
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"viewport must have positive size, got {width}x{height}")
    if xright == xleft or ybottom == ytop:
        raise ValueError("requested limits must span a non-zero range on both axes")

    if preserve_aspect:
        display_aspect = abs(height / width)
        requested_aspect = abs((ybottom - ytop) / (xright - xleft))
        if display_aspect > requested_aspect:
            excess = (ybottom - ytop) * (display_aspect / requested_aspect - 1)
            ybottom += excess / 2
            ytop -= excess / 2
        elif display_aspect < requested_aspect:
            excess = (xright - xleft) * (requested_aspect / display_aspect - 1)
            xright += excess / 2
            xleft -= excess / 2

    pixel_width = abs((xright - xleft) / width)
    pixel_height = abs((ybottom - ytop) / height)
    pixel_size = min(pixel_width, pixel_height)

    # scale, then translate: the translation happens in the logical frame
    T = Affine2D.from_translate(-xleft, -ytop).then(
        Affine2D.from_scale(width / (xright - xleft), height / (ybottom - ytop))
    )
    return ViewMapping(
        transform=T,
        pixel_size=pixel_size,
        xleft=xleft,
        xright=xright,
        ytop=ytop,
        ybottom=ybottom,
    )
