from __future__ import annotations

from typing import Optional, Sequence
import io
import os
import matplotlib.pyplot as plt
from matplotlib.patches import Polygon as PolygonPatch
from PIL import Image

from shapes import RGB, FillPolygon, StrokePolygon
from scene import Frame

EXPORT_DPI = 100
SUPPORTED_FORMATS = ("png", "svg")


def _points_to_linewidth(width_px: float, dpi: float) -> float:
    return float(width_px) * 72.0 / float(dpi)


def draw_frame_on_axis(ax: plt.Axes, frame: Frame, background: RGB = (1.0, 1.0, 1.0), dpi: float = EXPORT_DPI) -> None:
    """
    Draws a frame's pixel-space commands onto a Matplotlib axis.
    The axis is set up with the pixel origin at the top left, like the screen.
    """
    ax.set_xlim(0, frame.width)
    ax.set_ylim(frame.height, 0)
    ax.set_aspect("equal")
    ax.set_facecolor(background)
    ax.set_xticks([])
    ax.set_yticks([])

    for cmd in frame.commands:
        if isinstance(cmd, FillPolygon):
            x, y = cmd.points[:, 0], cmd.points[:, 1]
            ax.fill(x, y, fc=cmd.color, ec="none")
        elif isinstance(cmd, StrokePolygon):
            patch = PolygonPatch(
                cmd.points,
                closed=True,
                fill=False,
                edgecolor=cmd.color,
                linewidth=_points_to_linewidth(cmd.width, dpi),
                joinstyle="miter",
            )
            ax.add_patch(patch)
        else:
            raise TypeError(f"unknown draw command: {type(cmd).__name__}")


def _frame_figure(frame: Frame, background: RGB, dpi: float):
    fig = plt.figure(figsize=(frame.width / dpi, frame.height / dpi), dpi=dpi)
    fig.patch.set_facecolor(background)
    ax = fig.add_axes((0.0, 0.0, 1.0, 1.0))
    ax.axis("off")
    draw_frame_on_axis(ax, frame, background=background, dpi=dpi)
    return fig


def render_frame_to_file(
    frame: Frame,
    out_path: str,
    format: Optional[str] = None,
    background: RGB = (1.0, 1.0, 1.0),
    dpi: float = EXPORT_DPI,
) -> str:
    """
    Saves one frame as PNG or SVG. The format defaults to the file extension
    and must agree with it when both name a supported format.
    """
    ext = os.path.splitext(out_path)[1].lstrip(".").lower()
    fmt = format or ext
    if fmt not in SUPPORTED_FORMATS:
        raise ValueError(f"unsupported export format {fmt!r}; expected one of {SUPPORTED_FORMATS}")
    if ext in SUPPORTED_FORMATS and ext != fmt:
        raise ValueError(f"export format {fmt!r} contradicts the {ext!r} extension of {out_path}")
    out_dir = os.path.dirname(out_path)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    fig = _frame_figure(frame, background, dpi)
    fig.savefig(out_path, format=fmt, dpi=dpi, facecolor=background)
    plt.close(fig)
    return out_path


def render_frame_image(frame: Frame, background: RGB = (1.0, 1.0, 1.0), dpi: float = EXPORT_DPI) -> Image.Image:
    """Renders one frame in memory and returns the PIL.Image."""
    fig = _frame_figure(frame, background, dpi)
    buffer = io.BytesIO()
    fig.savefig(buffer, format="png", dpi=dpi, facecolor=background)
    plt.close(fig)
    buffer.seek(0)
    image = Image.open(buffer)
    image.load()
    return image


def render_frame_grid(
    frames: Sequence[Frame],
    out_path: str,
    cols: int = 4,
    figsize_per_cell: tuple[float, float] = (4.0, 3.0),
    background: RGB = (1.0, 1.0, 1.0),
) -> None:
    """
    Renders a contact sheet of frames, one cell per frame, titled by frame number.
    """
    n = len(frames)
    if n == 0:
        raise ValueError("No frames provided")
    cols = max(1, cols)
    rows = (n + cols - 1) // cols
    fig_w = figsize_per_cell[0] * cols
    fig_h = figsize_per_cell[1] * rows

    fig, axes = plt.subplots(rows, cols, figsize=(fig_w, fig_h), constrained_layout=True, squeeze=False)
    fig.patch.set_facecolor("white")

    for idx, frame in enumerate(frames):
        ax = axes[idx // cols, idx % cols]
        draw_frame_on_axis(ax, frame, background=background, dpi=frame.width / figsize_per_cell[0])
        for spine in ax.spines.values():
            spine.set_visible(True)
            spine.set_color("black")
            spine.set_linewidth(1.0)
        ax.set_title(f"frame {frame.frame_number}", fontsize=10, color="black")

    for idx in range(n, rows * cols):
        axes[idx // cols, idx % cols].axis("off")

    out_dir = os.path.dirname(out_path)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    fmt = "svg" if out_path.endswith(".svg") else "png"
    fig.savefig(out_path, dpi=200, format=fmt, transparent=False, facecolor="white")
    plt.close(fig)
