from __future__ import annotations

import math

import numpy as np
import pytest

from shapes import (
    Affine2D,
    DrawContext,
    FillPolygon,
    StrokePolygon,
    BLUE,
    PINK,
    UNIT_SQUARE,
    bar,
    filled_rect,
    rotating_shape,
    triangle,
)


def _base() -> Affine2D:
    return Affine2D.from_translate(4.0, -3.0).then(Affine2D.from_scale(100.0, -100.0))


def test_translate_is_applied_before_earlier_scale() -> None:
    ctx = DrawContext()
    ctx.scale(2.0, 2.0)
    ctx.translate(1.0, 0.0)
    ctx.fill_polygon([[0.0, 0.0]])
    np.testing.assert_allclose(ctx.commands[0].points, [[2.0, 0.0]])


def test_save_restore_round_trip() -> None:
    ctx = DrawContext(base=_base(), color=(0.1, 0.2, 0.3), stroke_width=0.01)
    before_T, before_color, before_stroke = ctx.transform, ctx.color, ctx.stroke_width
    ctx.save()
    ctx.rotate(1.0)
    ctx.scale(3.0)
    ctx.color = BLUE
    ctx.stroke_width = 2.0
    ctx.restore()
    assert ctx.transform is before_T
    assert ctx.color == before_color
    assert ctx.stroke_width == before_stroke
    assert ctx.depth == 0


@pytest.mark.parametrize(
    "draw",
    [
        lambda ctx: rotating_shape(ctx, 100, -1.02, -0.05, 37),
        lambda ctx: bar(ctx, 0.85, 0.95, -2.65, 1.90),
        lambda ctx: triangle(ctx, 0.35, 0.35, -2.25, 0.75, PINK),
    ],
)
def test_primitives_leave_state_bit_identical(draw) -> None:
    ctx = DrawContext(base=_base(), color=(0.1, 0.2, 0.3), stroke_width=0.01)
    A_before = ctx.transform.A.copy()
    t_before = ctx.transform.t.copy()
    color_before = ctx.color
    draw(ctx)
    assert np.array_equal(ctx.transform.A, A_before)
    assert np.array_equal(ctx.transform.t, t_before)
    assert ctx.color == color_before
    assert ctx.stroke_width == 0.01
    assert ctx.depth == 0
    assert len(ctx.commands) == 1


def test_restore_without_save_raises() -> None:
    with pytest.raises(RuntimeError):
        DrawContext().restore()


def test_saved_restores_on_error() -> None:
    ctx = DrawContext()
    with pytest.raises(ZeroDivisionError):
        with ctx.saved():
            ctx.translate(5.0, 5.0)
            1 / 0
    assert ctx.transform.same_as(Affine2D.identity())
    assert ctx.depth == 0


def test_filled_rect_is_unit_square() -> None:
    ctx = DrawContext()
    filled_rect(ctx)
    (cmd,) = ctx.commands
    assert isinstance(cmd, FillPolygon)
    np.testing.assert_allclose(cmd.points, UNIT_SQUARE)


def test_stroke_width_scales_with_transform() -> None:
    ctx = DrawContext(base=Affine2D.from_scale(100.0, -100.0), stroke_width=2.0)
    ctx.scale(0.005)
    ctx.draw_polygon([[0.0, 0.0], [1.0, 0.0], [0.0, 1.0]])
    (cmd,) = ctx.commands
    assert isinstance(cmd, StrokePolygon)
    assert cmd.width == pytest.approx(1.0)


def test_rotate_uses_radians() -> None:
    ctx = DrawContext()
    ctx.rotate(math.pi)
    ctx.fill_polygon([[1.0, 0.0]])
    np.testing.assert_allclose(ctx.commands[0].points, [[-1.0, 0.0]], atol=1e-12)


def test_commands_compare_by_value() -> None:
    pts = np.array([[0.0, 0.0], [1.0, 0.0], [0.0, 1.0]])
    assert FillPolygon(points=pts, color=BLUE) == FillPolygon(points=pts.copy(), color=BLUE)
    assert FillPolygon(points=pts, color=BLUE) != FillPolygon(points=pts, color=PINK)
    assert StrokePolygon(points=pts, color=BLUE, width=1.0) != StrokePolygon(points=pts, color=BLUE, width=2.0)
    assert FillPolygon(points=pts, color=BLUE) != StrokePolygon(points=pts, color=BLUE, width=1.0)
