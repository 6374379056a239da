"""Polylines, bounding boxes and the interpolation helpers used by road curves."""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from collections.abc import MutableSequence, Sequence
from typing import Optional, Protocol

__all__ = [
    "wrap_radian",
    "lerp_radian",
    "calc_abcd",
    "is_uv_valid",
    "element_index",
    "point_index",
    "clamp_dist",
    "cubic_interp",
    "cubic_interp_derivative",
    "Box",
    "PolyPoint",
    "Polyline",
    "CurveOffset",
]

Vec3 = tuple[float, float, float]
Vec2 = tuple[float, float]

MAX_FLT = 3.402823466e38
KINDA_SMALL_NUMBER = 1.0e-4
SMALL_NUMBER = 1.0e-8
_UP: Vec3 = (0.0, 0.0, 1.0)


class _HasDist(Protocol):
    dist: float


def _add(a: Vec3, b: Vec3) -> Vec3:
    return (a[0] + b[0], a[1] + b[1], a[2] + b[2])


def _sub(a: Vec3, b: Vec3) -> Vec3:
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2])


def _scale(a: Vec3, s: float) -> Vec3:
    return (a[0] * s, a[1] * s, a[2] * s)


def _dot(a: Vec3, b: Vec3) -> float:
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def _cross(a: Vec3, b: Vec3) -> Vec3:
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def _safe_normal(a: Vec3) -> Vec3:
    square = _dot(a, a)
    if square == 1.0:
        return a
    if square < SMALL_NUMBER:
        return (0.0, 0.0, 0.0)
    return _scale(a, 1.0 / math.sqrt(square))


def _lerp(a: float, b: float, alpha: float) -> float:
    return a + (b - a) * alpha


def _lerp3(a: Vec3, b: Vec3, alpha: float) -> Vec3:
    return (_lerp(a[0], b[0], alpha), _lerp(a[1], b[1], alpha), _lerp(a[2], b[2], alpha))


def _equals(a: Vec3, b: Vec3, tolerance: float = KINDA_SMALL_NUMBER) -> bool:
    return all(abs(x - y) <= tolerance for x, y in zip(a, b))


def _distance(a: Vec3, b: Vec3) -> float:
    d = _sub(a, b)
    return math.sqrt(_dot(d, d))


def wrap_radian(r: float) -> float:
    """Wrap an angle into (-pi, pi]."""
    if math.isnan(r):
        raise ValueError("cannot wrap NaN angle")
    while r <= -math.pi:
        r += 2 * math.pi
    while r > math.pi:
        r -= 2 * math.pi
    return r


def lerp_radian(start: float, end: float, alpha: float) -> float:
    """Interpolate between two angles along the shorter way round."""
    diff = end - start
    if diff > math.pi:
        return _lerp(start + 2 * math.pi, end, alpha)
    if diff < -math.pi:
        return _lerp(start, end + 2 * math.pi, alpha)
    return _lerp(start, end, alpha)


def calc_abcd(p0: float, t0: float, p1: float, t1: float, d: float) -> tuple[float, float, float, float]:
    """Cubic polynomial coefficients a + b s + c s^2 + d s^3 of a Hermite span of length d."""
    d1 = 1.0 / d
    d2 = d1 * d1
    d3 = d1 * d2
    return (
        p0,
        t0 * d1,
        (3 * p1 - 3 * p0 - 2 * t0 - t1) * d2,
        (2 * p0 - 2 * p1 + t0 + t1) * d3,
    )


def is_uv_valid(uv: Sequence[float]) -> bool:
    """A UV is valid when its lateral component is below the float maximum."""
    return uv[1] < MAX_FLT


def element_index(items: Sequence[_HasDist], dist: float) -> int:
    """Index of the last element whose ``dist`` is <= ``dist`` (binary search)."""
    length = len(items)
    middle = length
    offset = 0
    while middle > 0:
        middle = length // 2
        if items[offset + middle].dist <= dist:
            offset += middle
        length -= middle
    return offset


def point_index(items: Sequence[_HasDist], dist: float) -> int:
    """Index of the segment start containing ``dist``; never the last point."""
    index = element_index(items, dist)
    if index == len(items) - 1:
        index -= 1
    return index


def clamp_dist(items: MutableSequence[_HasDist], index: int, length: float) -> None:
    """Clamp ``items[index].dist`` between its neighbours (or 0 and ``length``)."""
    low = items[index - 1].dist if index > 0 else 0.0
    if index == 0:
        high = 0.0
    elif index + 1 < len(items):
        high = items[index + 1].dist
    else:
        high = length
    items[index].dist = min(max(items[index].dist, low), high)


def cubic_interp(p0: float, t0: float, p1: float, t1: float, alpha: float) -> float:
    """Cubic Hermite interpolation."""
    a2 = alpha * alpha
    a3 = a2 * alpha
    return (
        (2 * a3 - 3 * a2 + 1) * p0
        + (a3 - 2 * a2 + alpha) * t0
        + (a3 - a2) * t1
        + (-2 * a3 + 3 * a2) * p1
    )


def cubic_interp_derivative(p0: float, t0: float, p1: float, t1: float, alpha: float) -> float:
    """Derivative of :func:`cubic_interp` with respect to ``alpha``."""
    a = 6.0 * p0 + 3.0 * t0 + 3.0 * t1 - 6.0 * p1
    b = -6.0 * p0 - 4.0 * t0 - 2.0 * t1 + 6.0 * p1
    return a * alpha * alpha + b * alpha + t0


@dataclass
class Box:
    """Axis-aligned 3D box; empty until a point is added."""

    min: Vec3 = (0.0, 0.0, 0.0)
    max: Vec3 = (0.0, 0.0, 0.0)
    is_valid: bool = False

    def add(self, point: Sequence[float]) -> Box:
        p = (float(point[0]), float(point[1]), float(point[2]))
        if self.is_valid:
            self.min = (min(self.min[0], p[0]), min(self.min[1], p[1]), min(self.min[2], p[2]))
            self.max = (max(self.max[0], p[0]), max(self.max[1], p[1]), max(self.max[2], p[2]))
        else:
            self.min = p
            self.max = p
            self.is_valid = True
        return self

    def intersects(self, other: Box) -> bool:
        return all(
            not (self.min[i] > other.max[i] or other.min[i] > self.max[i]) for i in range(3)
        )

    def size(self) -> Vec3:
        return _sub(self.max, self.min)


@dataclass
class PolyPoint:
    """A polyline vertex with heading (radian) and arc distance."""

    pos: Vec3 = (0.0, 0.0, 0.0)
    radian: float = 0.0
    dist: float = 0.0

    @staticmethod
    def lerp(start: PolyPoint, end: PolyPoint, dist: float) -> PolyPoint:
        alpha = (dist - start.dist) / (end.dist - start.dist)
        return PolyPoint(
            _lerp3(start.pos, end.pos, alpha),
            _lerp(start.radian, end.radian, alpha),
            _lerp(start.dist, end.dist, alpha),
        )

    def pos2d(self) -> Vec2:
        return (self.pos[0], self.pos[1])


@dataclass
class Polyline:
    """Sequence of :class:`PolyPoint` ordered by distance."""

    points: list[PolyPoint] = field(default_factory=list)

    def get_point(self, dist: float) -> int:
        if not self.points or not self.points[0].dist < self.points[-1].dist:
            raise ValueError("polyline distances must increase")
        return point_index(self.points, dist)

    def insert_point(self, dist: float) -> None:
        """Split the segment containing ``dist`` unless ``dist`` is at a vertex."""
        index = self.get_point(dist)
        start = self.points[index]
        end = self.points[index + 1]
        if not math.isclose(dist, start.dist, rel_tol=0.0, abs_tol=SMALL_NUMBER) and not math.isclose(
            dist, end.dist, rel_tol=0.0, abs_tol=SMALL_NUMBER
        ):
            self.points.insert(index + 1, PolyPoint.lerp(start, end, dist))

    def add_point(self, pos: Sequence[float], radian: float, dist: Optional[float] = None) -> None:
        """Append a vertex.

        Without ``dist`` the distance continues from the last vertex and
        near-coincident points are dropped; with ``dist`` it is used as given
        and a point equal to the last one is dropped.
        """
        p = (float(pos[0]), float(pos[1]), float(pos[2]))
        if dist is None:
            if self.points:
                last = self.points[-1]
                diff = _distance(last.pos, p)
                if diff < SMALL_NUMBER:
                    return
                dist = last.dist + diff
            else:
                dist = 0.0
        elif self.points and _equals(self.points[-1].pos, p):
            return
        self.points.append(PolyPoint(p, radian, dist))

    def append(self, other: Polyline) -> None:
        for point in other.points:
            self.add_point(point.pos, point.radian)

    def get_dir(self, i: int) -> Vec3:
        r = self.points[i].radian
        return (math.cos(r), math.sin(r), 0.0)

    def get_right(self, i: int) -> Vec3:
        r = self.points[i].radian
        return (-math.sin(r), math.cos(r), 0.0)

    def _prev_next(self, i: int) -> tuple[Vec3, Vec3]:
        zero: Vec3 = (0.0, 0.0, 0.0)
        prev = zero
        nxt = zero
        last = len(self.points) - 1
        if i > 0:
            prev = _safe_normal(_sub(self.points[i].pos, self.points[i - 1].pos))
        if i < last:
            nxt = _safe_normal(_sub(self.points[i + 1].pos, self.points[i].pos))
        if i == 0:
            prev = nxt
        if i == last:
            nxt = prev
        return prev, nxt

    def get_straight_dir(self, i: int) -> Vec3:
        prev, nxt = self._prev_next(i)
        return _safe_normal(_add(prev, nxt))

    def get_straight_radian(self, i: int) -> float:
        d = self.get_straight_dir(i)
        return math.atan2(d[1], d[0])

    def get_straight_right(self, i: int) -> Vec3:
        """Mitred right vector, scaled so offsets keep a constant distance."""
        prev, nxt = self._prev_next(i)
        direction = _safe_normal(_add(prev, nxt))
        right = _safe_normal(_cross(_UP, direction))
        return _scale(right, 1.0 / _dot(direction, prev))

    def bounds(self) -> Box:
        box = Box()
        for point in self.points:
            box.add(point.pos)
        return box

    def segment_bounds(self, index: int) -> Box:
        delta = KINDA_SMALL_NUMBER
        box = Box()
        start_n = self.get_right(index)
        end_n = self.get_right(index + 1)
        start = self.points[index].pos
        end = self.points[index + 1].pos
        box.add(_sub(start, _scale(start_n, delta)))
        box.add(_add(start, _scale(start_n, delta)))
        box.add(_sub(end, _scale(end_n, delta)))
        box.add(_add(end, _scale(end_n, delta)))
        box.min = (box.min[0], box.min[1], box.min[2] - delta)
        box.max = (box.max[0], box.max[1], box.max[2] + delta)
        return box

    def positions(self) -> list[Vec3]:
        return [point.pos for point in self.points]

    def redist(self) -> Polyline:
        """Copy with distances recomputed from the vertex positions."""
        result = Polyline()
        dist = 0.0
        previous: Optional[Vec3] = None
        for point in self.points:
            if previous is not None:
                dist += _distance(point.pos, previous)
            result.points.append(PolyPoint(point.pos, point.radian, dist))
            previous = point.pos
        return result

    def resample(self, num_segs: int) -> Polyline:
        """Copy with ``num_segs`` equally long segments."""
        start_dist = self.points[0].dist
        length = self.points[-1].dist - start_dist
        seg_len = length / num_segs
        result = Polyline()
        this = 0
        for i in range(num_segs + 1):
            dist = start_dist + i * seg_len
            nxt = this + 1
            while dist > self.points[nxt].dist + 0.01:
                this = nxt
                nxt += 1
            a = self.points[this]
            b = self.points[nxt]
            alpha = (dist - a.dist) / (b.dist - a.dist)
            result.points.append(
                PolyPoint(_lerp3(a.pos, b.pos, alpha), lerp_radian(a.radian, b.radian, alpha), dist)
            )
        return result

    def resample_length(self, seg_len: float) -> Polyline:
        """Copy resampled to segments close to ``seg_len`` long (at least one)."""
        length = self.points[-1].dist - self.points[0].dist
        num_segs = max(1, math.floor(length / seg_len + 0.5))
        return self.resample(num_segs)

    def sub_curve(self, start: float, end: float) -> Polyline:
        """Piece between two distances; reversed (headings turned by pi) if end <= start."""
        first = self.points[0].dist
        last = self.points[-1].dist
        start = min(max(start, first), last)
        end = min(max(end, first), last)
        start_index = self.get_point(start)
        end_index = self.get_point(end)
        pts = self.points
        new_points: list[PolyPoint] = []
        if end > start:
            new_points.append(PolyPoint.lerp(pts[start_index], pts[start_index + 1], start))
            new_points.extend(replace(p) for p in pts[start_index + 1 : end_index + 1])
            if pts[end_index].dist < end:
                new_points.append(PolyPoint.lerp(pts[end_index], pts[end_index + 1], end))
        else:
            if pts[start_index].dist < start:
                new_points.append(PolyPoint.lerp(pts[start_index], pts[start_index + 1], start))
            new_points.extend(replace(p) for p in pts[start_index:end_index:-1])
            new_points.append(PolyPoint.lerp(pts[end_index], pts[end_index + 1], end))
            for point in new_points:
                point.radian += math.pi
        return Polyline(new_points)

    def offset(self, offset: Sequence[float], straight: bool = False) -> Polyline:
        """Copy shifted by ``offset[0]`` to the right and ``offset[1]`` upward."""
        result = Polyline()
        for i, point in enumerate(self.points):
            right = self.get_straight_right(i) if straight else self.get_right(i)
            pos = _add(_add(point.pos, _scale(right, offset[0])), _scale(_UP, offset[1]))
            result.points.append(PolyPoint(pos, point.radian, point.dist))
        return result

    def has_overlapped_points(self) -> bool:
        return any(_equals(a.pos, b.pos) for a, b in zip(self.points, self.points[1:]))

    def contains_nan(self) -> bool:
        return any(math.isnan(c) for point in self.points for c in point.pos)

    def check_zig(self) -> None:
        """Drop vertices where the line turns back by more than 135 degrees."""
        i = 1
        while i < len(self.points) - 1:
            prev = _safe_normal(_sub(self.points[i].pos, self.points[i - 1].pos))
            nxt = _safe_normal(_sub(self.points[i + 1].pos, self.points[i].pos))
            if _dot(prev, nxt) < -0.7071:
                del self.points[i]
            else:
                i += 1


@dataclass
class CurveOffset:
    """Lateral offset key: value and slope at a distance along a curve."""

    dist: float = 0.0
    offset: float = 0.0
    dir: float = 0.0

    def __lt__(self, other: CurveOffset) -> bool:
        return self.dist < other.dist

    def value_at(self, end: CurveOffset, s: float) -> float:
        """Offset at ``s`` past this key, interpolating towards ``end``."""
        length = end.dist - self.dist
        return cubic_interp(self.offset, self.dir * length, end.offset, end.dir * length, s / length)

    def radian_at(self, end: CurveOffset, s: float) -> float:
        """Angle of the offset curve relative to the base at ``s`` past this key."""
        length = end.dist - self.dist
        slope = cubic_interp_derivative(
            self.offset, self.dir * length, end.offset, end.dir * length, s / length
        )
        return math.atan2(slope, length)