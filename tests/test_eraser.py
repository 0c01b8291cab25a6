import math

import pytest

from notocore.eraser import (
    EraseOptions,
    Viewport,
    erase,
    erase_near,
    kept_runs,
    min_run_length,
    prepare_eraser_path,
)
from notocore.geometry import polyline_distance_sq
from notocore.ink import Drawing, Ink, Stroke, StrokePoint


def _line_stroke(count, *, spacing=1.0, y=0.0, x0=0.0, created_at=42.0):
    points = tuple(
        StrokePoint(
            (x0 + i * spacing, y),
            time_offset=i * 0.01,
            size=(2.0, 2.0),
            opacity=0.9,
            force=0.5 + i * 0.01,
            azimuth=0.3,
            altitude=1.2,
        )
        for i in range(count)
    )
    return Stroke(points, ink=Ink("pen", "#112233", 2.0), transform=(2.0, 0.0, 0.0, 2.0, 5.0, 5.0), created_at=created_at)


def _drawing(*strokes):
    return Drawing(tuple(strokes))


@pytest.mark.parametrize(
    "eraser, radius",
    [
        ([], 5.0),
        ([(0.0, 0.0)], 5.0),
        ([(0.0, 0.0), (10.0, 0.0)], 0.0),
        ([(0.0, 0.0), (10.0, 0.0)], -1.0),
        ([(0.0, 0.0), (math.inf, 0.0)], 1.0),
        ([(math.nan, 0.0), (10.0, 0.0)], 5.0),
    ],
)
def test_degenerate_eraser_returns_drawing_unchanged(eraser, radius):
    drawing = _drawing(_line_stroke(20))

    result = erase(drawing, eraser, radius)

    assert result is drawing
    assert erase_near(drawing, eraser, radius) is drawing


def test_single_crossing_splits_stroke_in_two():
    stroke = _line_stroke(51, spacing=2.0)
    drawing = _drawing(stroke)
    eraser = [(50.0, -10.0), (50.0, 10.0)]

    result = erase(drawing, eraser, 6.0)

    assert len(result.strokes) == 2
    left, right = result.strokes
    assert left.points == stroke.points[:22]
    assert right.points == stroke.points[29:]
    for piece in result.strokes:
        assert piece.ink == stroke.ink
        assert piece.transform == stroke.transform
        assert piece.created_at == stroke.created_at
        assert (polyline_distance_sq(piece.locations, eraser) > 36.0).all()


def test_full_erase_removes_stroke():
    drawing = _drawing(_line_stroke(10))

    result = erase(drawing, [(0.0, 0.0), (9.0, 0.0)], 1.0)

    assert result.strokes == ()


def test_single_leftover_point_is_dropped_as_crumb():
    drawing = _drawing(_line_stroke(20))

    # reaches x <= 18.5, leaving only x = 19
    result = erase(drawing, [(-10.0, 0.0), (12.5, 0.0)], 6.0)

    assert result.strokes == ()


def test_short_tail_below_threshold_is_dropped():
    drawing = _drawing(_line_stroke(20))

    # reaches x <= 14.5, leaving 5 points; threshold is 8
    result = erase(drawing, [(-10.0, 0.0), (8.5, 0.0)], 6.0)

    assert result.strokes == ()


def test_tail_at_threshold_survives():
    stroke = _line_stroke(40)
    drawing = _drawing(stroke)

    # reaches x <= 31.5, leaving 8 points; threshold is 8
    result = erase(drawing, [(-10.0, 0.0), (25.5, 0.0)], 6.0)

    assert len(result.strokes) == 1
    assert result.strokes[0].points == stroke.points[32:]


def test_degenerate_eraser_segment_acts_as_point():
    stroke = _line_stroke(21)

    result = erase(_drawing(stroke), [(5.0, 0.0), (5.0, 0.0)], 1.0)

    assert [piece.points for piece in result.strokes] == [stroke.points[:4], stroke.points[7:]]


def test_untouched_strokes_pass_through_even_when_short():
    short = _line_stroke(3, y=100.0)
    drawing = _drawing(short)

    result = erase(drawing, [(0.0, 0.0), (10.0, 0.0)], 2.0)

    assert result.strokes == (short,)
    assert result == drawing


def test_single_point_strokes_are_kept_or_dropped_by_distance():
    near = Stroke((StrokePoint((1.0, 1.0)),))
    far = Stroke((StrokePoint((1.0, 50.0)),))
    empty = Stroke(())

    result = erase(_drawing(near, far, empty), [(0.0, 0.0), (10.0, 0.0)], 2.0)

    assert result.strokes == (far,)


def test_single_point_strokes_use_every_eraser_segment():
    near_second = Stroke((StrokePoint((11.0, 5.0)),))
    beyond = Stroke((StrokePoint((13.0, 5.0)),))
    eraser = [(0.0, 0.0), (10.0, 0.0), (10.0, 10.0)]

    result = erase(_drawing(near_second, beyond), eraser, 2.0)

    assert result.strokes == (beyond,)
    assert polyline_distance_sq([(11.0, 5.0), (13.0, 5.0)], eraser).tolist() == pytest.approx([1.0, 9.0])


def test_output_preserves_stroke_order():
    top = _line_stroke(51, spacing=2.0, y=0.0, created_at=1.0)
    middle = _line_stroke(51, spacing=2.0, y=100.0, created_at=2.0)
    bottom = _line_stroke(51, spacing=2.0, y=200.0, created_at=3.0)

    result = erase(_drawing(top, middle, bottom), [(50.0, 90.0), (50.0, 110.0)], 6.0)

    assert [s.created_at for s in result.strokes] == [1.0, 2.0, 2.0, 3.0]
    assert result.strokes[0] is top
    assert result.strokes[-1] is bottom


def test_erase_is_referentially_transparent():
    drawing = _drawing(_line_stroke(51, spacing=2.0), _line_stroke(30, y=4.0))
    eraser = [(50.0, -10.0), (50.0, 10.0), (20.0, 10.0)]

    assert erase(drawing, eraser, 6.0) == erase(drawing, eraser, 6.0)
    assert len(drawing.strokes) == 2


def test_erase_near_matches_full_erase():
    strokes = (
        _line_stroke(51, spacing=2.0, y=0.0, created_at=1.0),
        _line_stroke(10, y=500.0, x0=500.0, created_at=2.0),
        _line_stroke(30, y=5.0, x0=40.0, created_at=3.0),
        _line_stroke(3, y=300.0, created_at=4.0),
    )
    drawing = Drawing(strokes)
    eraser = [(50.0, -10.0), (50.0, 10.0)]

    fast = erase_near(drawing, eraser, 6.0)

    assert fast == erase(drawing, eraser, 6.0)
    assert fast.strokes[2] is strokes[1]


def test_options_override_run_threshold():
    stroke = _line_stroke(40)
    eraser = [(-10.0, 0.0), (25.5, 0.0)]

    strict = erase(_drawing(stroke), eraser, 6.0, options=EraseOptions(min_run_cap=12))

    assert strict.strokes == ()


@pytest.mark.parametrize(
    "spacing, radius, expected",
    [
        (1.0, 6.0, 8),
        (1.0, 1.0, 2),
        (2.0, 5.0, 5),
        (1.0, 1.25, 3),
        (1.0, 0.1, 2),
    ],
)
def test_min_run_length(spacing, radius, expected):
    locations = [(i * spacing, 0.0) for i in range(20)]

    assert min_run_length(locations, radius) == expected


def test_min_run_length_floors_average_spacing():
    locations = [(3.0, 3.0)] * 5

    assert min_run_length(locations, 1.0) == 4
    assert min_run_length(locations[:1], 1.0) == 2


def test_kept_runs_filters_short_runs():
    keep = [True, True, False, True, False, True, True, True]

    assert kept_runs(keep, 2) == [range(0, 2), range(5, 8)]
    assert kept_runs(keep, 1) == [range(0, 2), range(3, 4), range(5, 8)]
    assert kept_runs([], 2) == []


def test_prepare_eraser_path_dedupes_and_maps_to_canvas():
    viewport = Viewport(zoom_scale=2.0, content_offset=(10.0, 0.0))
    screen = [(0.0, 0.0), (0.2, 0.0), (1.0, 0.0), (1.0, 0.1), (3.0, 4.0)]

    assert prepare_eraser_path(screen, viewport) == ((5.0, 0.0), (5.5, 0.0), (6.5, 2.0))
    assert prepare_eraser_path([(1.0, 2.0)]) == ((1.0, 2.0),)


def test_viewport_canvas_radius_has_floor():
    assert Viewport(zoom_scale=2.0).canvas_radius(12.0) == pytest.approx(6.0)
    assert Viewport(zoom_scale=100.0).canvas_radius(12.0) == 0.5
    assert Viewport(zoom_scale=0.0).to_canvas((1.0, 1.0)) == pytest.approx((1000.0, 1000.0))
