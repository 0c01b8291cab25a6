"""Point/segment distance kernels used by the eraser."""

from __future__ import annotations

from typing import Optional, Sequence

import numpy as np

from .ink import Point, Rect

DEGENERATE_EPS = 1e-6

Coord = np.ndarray


def _as_coords(points: Sequence[Point]) -> Coord:
    arr = np.asarray(points, dtype=float)
    if arr.size == 0:
        return np.zeros((0, 2), dtype=float)
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError("coordinates must have shape (n, 2)")
    return arr


def segment_distance_sq(point: Point, a: Point, b: Point, *, eps: float = DEGENERATE_EPS) -> float:
    """Squared distance from ``point`` to segment ``a``-``b``.

    The projection parameter is clamped to [0, 1]; a segment whose squared
    length is at most ``eps`` is treated as the single point ``a``.
    """

    p = np.asarray(point, dtype=float)
    start = np.asarray(a, dtype=float)
    ab = np.asarray(b, dtype=float) - start
    ab2 = float(np.dot(ab, ab))
    if ab2 <= eps:
        diff = p - start
        return float(np.dot(diff, diff))
    t = min(max(float(np.dot(p - start, ab)) / ab2, 0.0), 1.0)
    diff = p - (start + ab * t)
    return float(np.dot(diff, diff))


def polyline_distance_sq(points: Sequence[Point], polyline: Sequence[Point], *, eps: float = DEGENERATE_EPS) -> Coord:
    """Minimum squared distance from every point to any segment of ``polyline``.

    Returns an array of shape ``(len(points),)``. A polyline with fewer than
    two vertices has no segments and yields ``inf`` everywhere.
    """

    pts = _as_coords(points)
    poly = _as_coords(polyline)
    if len(poly) < 2:
        return np.full(len(pts), np.inf)
    if len(pts) == 0:
        return np.zeros(0, dtype=float)

    starts = poly[:-1]                      # (m, 2)
    ab = poly[1:] - starts                  # (m, 2)
    ab2 = np.einsum("ij,ij->i", ab, ab)     # (m,)
    degenerate = ab2 <= eps
    safe_ab2 = np.where(degenerate, 1.0, ab2)

    rel = pts[:, None, :] - starts[None, :, :]               # (n, m, 2)
    t = np.einsum("nmk,mk->nm", rel, ab) / safe_ab2[None, :]
    t = np.clip(t, 0.0, 1.0)
    t[:, degenerate] = 0.0
    diff = rel - t[:, :, None] * ab[None, :, :]
    dist2 = np.einsum("nmk,nmk->nm", diff, diff)
    return dist2.min(axis=1)


def polyline_length(points: Sequence[Point]) -> float:
    pts = _as_coords(points)
    if len(pts) < 2:
        return 0.0
    return float(np.linalg.norm(np.diff(pts, axis=0), axis=1).sum())


def bounds_of(points: Sequence[Point]) -> Optional[Rect]:
    pts = _as_coords(points)
    if len(pts) == 0:
        return None
    lo = pts.min(axis=0)
    hi = pts.max(axis=0)
    return Rect(float(lo[0]), float(lo[1]), float(hi[0]), float(hi[1]))
