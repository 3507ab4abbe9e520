from __future__ import annotations

from typing import Any, Iterable
import numpy as np

from shapes import RGB, DrawCommand, FillPolygon, StrokePolygon


def to_hex(color: RGB) -> str:
    rgb = np.clip(np.asarray(color, dtype=float).reshape(3,), 0.0, 1.0)
    r, g, b = (int(round(c * 255)) for c in rgb)
    return f"#{r:02x}{g:02x}{b:02x}"


def _flat(points: np.ndarray) -> list[float]:
    return [float(v) for v in np.asarray(points, dtype=float).reshape(-1)]


def paint_commands(canvas: Any, commands: Iterable[DrawCommand], background: RGB) -> int:
    """
    Clears a Tk canvas and replays the commands in order.
    Returns the number of canvas items created.
    """
    canvas.delete("all")
    canvas.configure(background=to_hex(background))
    created = 0
    for cmd in commands:
        if isinstance(cmd, FillPolygon):
            canvas.create_polygon(*_flat(cmd.points), fill=to_hex(cmd.color), outline="")
        elif isinstance(cmd, StrokePolygon):
            closed = np.vstack([cmd.points, cmd.points[:1]])
            canvas.create_line(
                *_flat(closed),
                fill=to_hex(cmd.color),
                width=max(1.0, float(cmd.width)),
                joinstyle="miter",
            )
        else:
            raise TypeError(f"unknown draw command: {type(cmd).__name__}")
        created += 1
    return created
