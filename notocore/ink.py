"""Immutable ink values: points, strokes, drawings and eraser paths."""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from typing import Iterable, Optional, Sequence, Tuple

Point = Tuple[float, float]
Affine = Tuple[float, float, float, float, float, float]  # (a, b, c, d, tx, ty)

IDENTITY: Affine = (1.0, 0.0, 0.0, 1.0, 0.0, 0.0)


def as_point(value: Sequence[float]) -> Point:
    if len(value) != 2:
        raise ValueError("coordinate must be length-2")
    x, y = float(value[0]), float(value[1])
    if not (math.isfinite(x) and math.isfinite(y)):
        raise ValueError(f"coordinate must be finite, got {value!r}")
    return x, y


@dataclass(frozen=True)
class Rect:
    min_x: float
    min_y: float
    max_x: float
    max_y: float

    def expanded(self, amount: float) -> "Rect":
        return Rect(self.min_x - amount, self.min_y - amount, self.max_x + amount, self.max_y + amount)

    def intersects(self, other: "Rect") -> bool:
        return (
            self.min_x <= other.max_x
            and other.min_x <= self.max_x
            and self.min_y <= other.max_y
            and other.min_y <= self.max_y
        )


@dataclass(frozen=True)
class StrokePoint:
    """One sampled pen position; every field survives erasing untouched."""

    location: Point
    time_offset: float = 0.0
    size: Tuple[float, float] = (1.0, 1.0)
    opacity: float = 1.0
    force: float = 1.0
    azimuth: float = 0.0
    altitude: float = math.pi / 2

    def __post_init__(self) -> None:
        object.__setattr__(self, "location", as_point(self.location))
        object.__setattr__(self, "size", (float(self.size[0]), float(self.size[1])))
        for name in ("time_offset", "opacity", "force", "azimuth", "altitude"):
            object.__setattr__(self, name, float(getattr(self, name)))


@dataclass(frozen=True)
class Ink:
    kind: str = "pen"
    color: str = "#000000"
    width: float = 1.0


@dataclass(frozen=True)
class Stroke:
    points: Tuple[StrokePoint, ...]
    ink: Ink = field(default_factory=Ink)
    transform: Affine = IDENTITY
    created_at: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "points", tuple(self.points))

    @property
    def locations(self) -> Tuple[Point, ...]:
        return tuple(p.location for p in self.points)

    @property
    def bounds(self) -> Optional[Rect]:
        if not self.points:
            return None
        xs = [p.location[0] for p in self.points]
        ys = [p.location[1] for p in self.points]
        return Rect(min(xs), min(ys), max(xs), max(ys))

    @property
    def render_bounds(self) -> Optional[Rect]:
        """Point bounds grown by half the widest point, so ink width counts."""

        bounds = self.bounds
        if bounds is None:
            return None
        half = max(max(p.size) for p in self.points) * 0.5
        return bounds.expanded(max(half, 0.0))

    def with_points(self, points: Iterable[StrokePoint]) -> "Stroke":
        return replace(self, points=tuple(points))

    def log_summary(self) -> str:
        return f"Stroke(points={len(self.points)}, ink={self.ink.kind})"


@dataclass(frozen=True)
class Drawing:
    strokes: Tuple[Stroke, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "strokes", tuple(self.strokes))

    def __len__(self) -> int:
        return len(self.strokes)

    def __iter__(self):
        return iter(self.strokes)

    @property
    def bounds(self) -> Optional[Rect]:
        boxes = [s.bounds for s in self.strokes if s.points]
        if not boxes:
            return None
        return Rect(
            min(b.min_x for b in boxes),
            min(b.min_y for b in boxes),
            max(b.max_x for b in boxes),
            max(b.max_y for b in boxes),
        )

    def log_summary(self) -> str:
        points = sum(len(s.points) for s in self.strokes)
        return f"Drawing(strokes={len(self.strokes)}, points={points})"


@dataclass(frozen=True)
class EraserPath:
    """Eraser polyline and radius, both in canvas content space."""

    points: Tuple[Point, ...]
    radius: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "points", tuple(as_point(p) for p in self.points))
        object.__setattr__(self, "radius", float(self.radius))

    def apply(self, drawing: Drawing) -> Drawing:
        from .eraser import erase

        return erase(drawing, self.points, self.radius)

    def log_summary(self) -> str:
        return f"EraserPath(points={len(self.points)}, radius={self.radius:g})"
