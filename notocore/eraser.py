"""Split ink strokes around a moving eraser.

Every stroke is tested point by point against the eraser polyline. Points
within ``radius`` are dropped, the surviving points are grouped into
maximal contiguous runs, and each run long enough to be visible becomes a
new stroke carrying the original points and style. Nothing is mutated;
callers get a fresh :class:`~notocore.ink.Drawing`.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from .geometry import bounds_of, polyline_distance_sq, polyline_length, segment_distance_sq
from .ink import Drawing, Point, Stroke, as_point
from .logging_utils import debug_log_call

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EraseOptions:
    min_run_floor: int = 2
    min_run_cap: int = 8
    min_average_spacing: float = 0.5
    degenerate_segment_epsilon: float = 1e-6
    bounds_padding: float = 1.0


DEFAULT_OPTIONS = EraseOptions()


@dataclass(frozen=True)
class Viewport:
    zoom_scale: float = 1.0
    content_offset: Point = (0.0, 0.0)

    @property
    def _zoom(self) -> float:
        return max(0.001, float(self.zoom_scale))

    def to_canvas(self, point: Sequence[float]) -> Point:
        x, y = as_point(point)
        return (x + self.content_offset[0]) / self._zoom, (y + self.content_offset[1]) / self._zoom

    def canvas_radius(self, radius: float) -> float:
        return max(0.5, float(radius) / self._zoom)


def prepare_eraser_path(
    screen_points: Sequence[Sequence[float]],
    viewport: Optional[Viewport] = None,
    *,
    min_spacing: float = 0.5,
) -> Tuple[Point, ...]:
    """Drop jittery samples, then map the gesture into canvas content space."""

    viewport = viewport or Viewport()
    kept: List[Point] = []
    for raw in screen_points:
        p = as_point(raw)
        if kept and math.hypot(p[0] - kept[-1][0], p[1] - kept[-1][1]) < min_spacing:
            continue
        kept.append(p)
    return tuple(viewport.to_canvas(p) for p in kept)


def _finite_path(eraser: Sequence[Sequence[float]]) -> Optional[Tuple[Point, ...]]:
    path = tuple((float(p[0]), float(p[1])) for p in eraser)
    if all(math.isfinite(x) and math.isfinite(y) for x, y in path):
        return path
    logger.warning("Ignoring eraser path with non-finite coordinates")
    return None


def min_run_length(points: Sequence[Point], radius: float, options: EraseOptions = DEFAULT_OPTIONS) -> int:
    """Shortest run of surviving points worth keeping as its own stroke.

    Roughly two radii worth of path, measured in average point spacing and
    clamped to ``[min_run_floor, min_run_cap]``.
    """

    if len(points) < 2:
        return options.min_run_floor
    avg = max(options.min_average_spacing, polyline_length(points) / max(1, len(points) - 1))
    want = int(math.floor(2.0 * radius / avg + 0.5))
    return max(options.min_run_floor, min(options.min_run_cap, want))


def kept_runs(keep: Sequence[bool], min_count: int) -> List[range]:
    runs: List[range] = []
    i = 0
    n = len(keep)
    while i < n:
        if not keep[i]:
            i += 1
            continue
        start = i
        while i < n and keep[i]:
            i += 1
        if i - start >= min_count:
            runs.append(range(start, i))
    return runs


def _erase_stroke(
    stroke: Stroke,
    eraser: Sequence[Point],
    radius: float,
    options: EraseOptions,
) -> List[Stroke]:
    locations = stroke.locations
    r2 = radius * radius
    eps = options.degenerate_segment_epsilon

    if len(locations) < 2:
        if not locations:
            return []
        nearest = min(
            segment_distance_sq(locations[0], a, b, eps=eps) for a, b in zip(eraser, eraser[1:])
        )
        return [stroke] if nearest > r2 else []

    dist2 = polyline_distance_sq(locations, eraser, eps=eps)
    keep = [bool(d > r2) for d in dist2]
    if all(keep):
        return [stroke]

    pieces: List[Stroke] = []
    for run in kept_runs(keep, min_run_length(locations, radius, options)):
        if len(run) < 2:
            continue
        pieces.append(stroke.with_points(stroke.points[run.start:run.stop]))
    return pieces


@debug_log_call(logger, log_result=True)
def erase(
    drawing: Drawing,
    eraser: Sequence[Sequence[float]],
    radius: float,
    *,
    options: EraseOptions = DEFAULT_OPTIONS,
) -> Drawing:
    """Remove the ink within ``radius`` of the ``eraser`` polyline.

    A path with fewer than two points or a non-positive radius returns
    ``drawing`` itself.
    """

    if len(eraser) < 2 or not radius > 0:
        return drawing
    path = _finite_path(eraser)
    if path is None:
        return drawing

    out: List[Stroke] = []
    touched = 0
    for stroke in drawing.strokes:
        pieces = _erase_stroke(stroke, path, radius, options)
        if len(pieces) != 1 or pieces[0] is not stroke:
            touched += 1
        out.extend(pieces)

    logger.debug(
        "erase: strokes in=%d out=%d touched=%d radius=%g",
        len(drawing.strokes),
        len(out),
        touched,
        radius,
    )
    return Drawing(strokes=tuple(out))


def erase_near(
    drawing: Drawing,
    eraser: Sequence[Sequence[float]],
    radius: float,
    *,
    options: EraseOptions = DEFAULT_OPTIONS,
) -> Drawing:
    """Same result as :func:`erase`, skipping strokes far from the eraser.

    Strokes whose render bounds miss the eraser bounds (grown by ``radius``
    plus ``options.bounds_padding``) keep their position in the output.
    """

    if len(eraser) < 2 or not radius > 0:
        return drawing
    path = _finite_path(eraser)
    if path is None:
        return drawing
    reach = bounds_of(path).expanded(radius + options.bounds_padding)

    out: List[Stroke] = []
    skipped = 0
    for stroke in drawing.strokes:
        box = stroke.render_bounds
        if box is not None and not box.intersects(reach):
            out.append(stroke)
            skipped += 1
            continue
        out.extend(_erase_stroke(stroke, path, radius, options))

    logger.debug("erase_near: skipped %d of %d strokes by bounds", skipped, len(drawing.strokes))
    return Drawing(strokes=tuple(out))
