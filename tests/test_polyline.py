import math
from dataclasses import dataclass

import pytest

from roadkit.polyline import (
    Box,
    CurveOffset,
    PolyPoint,
    Polyline,
    calc_abcd,
    clamp_dist,
    cubic_interp,
    cubic_interp_derivative,
    element_index,
    is_uv_valid,
    lerp_radian,
    point_index,
    wrap_radian,
)


@dataclass
class Item:
    dist: float


def straight_line(n=3, step=10.0):
    line = Polyline()
    for i in range(n):
        line.add_point((i * step, 0.0, 0.0), 0.0)
    return line


def test_wrap_radian_range_and_equivalence():
    for r in (-10.0, -math.pi, 0.5, math.pi, 7.0, 20.0):
        w = wrap_radian(r)
        assert -math.pi < w <= math.pi
        k = (r - w) / (2 * math.pi)
        assert k == pytest.approx(round(k))


def test_wrap_radian_nan_raises():
    with pytest.raises(ValueError):
        wrap_radian(float("nan"))


def test_lerp_radian_takes_short_way():
    assert lerp_radian(3.0, -3.0, 0.5) == pytest.approx(math.pi)
    assert lerp_radian(0.2, 0.4, 0.5) == pytest.approx(0.3)


def test_calc_abcd_reproduces_endpoints():
    p0, t0, p1, t1, d = 1.0, 2.0, 5.0, -1.0, 4.0
    a, b, c, e = calc_abcd(p0, t0, p1, t1, d)
    assert a == p0
    assert a + b * d + c * d**2 + e * d**3 == pytest.approx(p1)
    assert b * d == pytest.approx(t0)
    assert (b + 2 * c * d + 3 * e * d**2) * d == pytest.approx(t1)


def test_cubic_interp_endpoints_and_derivative():
    assert cubic_interp(1.0, 3.0, 4.0, -2.0, 0.0) == pytest.approx(1.0)
    assert cubic_interp(1.0, 3.0, 4.0, -2.0, 1.0) == pytest.approx(4.0)
    assert cubic_interp_derivative(1.0, 3.0, 4.0, -2.0, 0.0) == pytest.approx(3.0)
    assert cubic_interp_derivative(1.0, 3.0, 4.0, -2.0, 1.0) == pytest.approx(-2.0)
    h = 1e-6
    numeric = (cubic_interp(1, 3, 4, -2, 0.3 + h) - cubic_interp(1, 3, 4, -2, 0.3 - h)) / (2 * h)
    assert cubic_interp_derivative(1, 3, 4, -2, 0.3) == pytest.approx(numeric, rel=1e-5)


def test_is_uv_valid():
    assert is_uv_valid((0.0, 10.0))
    assert not is_uv_valid((0.0, 1.0e308))


def test_element_and_point_index():
    items = [Item(0.0), Item(10.0), Item(20.0)]
    assert element_index(items, 15.0) == 1
    assert element_index(items, 25.0) == 2
    assert element_index(items, 0.0) == 0
    assert point_index(items, 25.0) == 1
    assert element_index([], 3.0) == 0


def test_clamp_dist():
    items = [Item(0.0), Item(5.0), Item(30.0)]
    clamp_dist(items, 1, 40.0)
    assert items[1].dist == 5.0
    items[2].dist = 50.0
    clamp_dist(items, 2, 40.0)
    assert items[2].dist == 40.0
    items[0].dist = 3.0
    clamp_dist(items, 0, 40.0)
    assert items[0].dist == 0.0


def test_box_add_size_and_intersects():
    box = Box()
    assert not box.is_valid
    box.add((1.0, 2.0, 3.0)).add((-1.0, 4.0, 0.0))
    assert box.min == (-1.0, 2.0, 0.0)
    assert box.max == (1.0, 4.0, 3.0)
    assert box.size() == (2.0, 2.0, 3.0)
    other = Box().add((0.0, 3.0, 1.0)).add((5.0, 5.0, 5.0))
    far = Box().add((10.0, 10.0, 10.0))
    assert box.intersects(other)
    assert not box.intersects(far)


def test_polypoint_lerp():
    a = PolyPoint((0.0, 0.0, 0.0), 0.0, 0.0)
    b = PolyPoint((10.0, 20.0, 0.0), 1.0, 10.0)
    mid = PolyPoint.lerp(a, b, 5.0)
    assert mid.pos == pytest.approx((5.0, 10.0, 0.0))
    assert mid.radian == pytest.approx(0.5)
    assert mid.dist == 5.0
    assert b.pos2d() == (10.0, 20.0)


def test_add_point_accumulates_distance_and_skips_duplicates():
    line = Polyline()
    line.add_point((0.0, 0.0, 0.0), 0.0)
    line.add_point((3.0, 4.0, 0.0), 0.0)
    line.add_point((3.0, 4.0, 0.0), 0.0)
    assert [p.dist for p in line.points] == [0.0, 5.0]
    line.add_point((3.0, 4.0, 0.0), 0.0, 99.0)
    assert len(line.points) == 2
    line.add_point((6.0, 4.0, 0.0), 0.0, 99.0)
    assert line.points[-1].dist == 99.0


def test_append_continues_distance():
    line = straight_line(2)
    other = Polyline()
    other.add_point((10.0, 0.0, 0.0), 0.0)
    other.add_point((10.0, 5.0, 0.0), 0.0)
    line.append(other)
    assert len(line.points) == 3
    assert line.points[-1].dist == pytest.approx(15.0)


def test_get_point_and_insert_point():
    line = straight_line(3)
    assert line.get_point(15.0) == 1
    line.insert_point(5.0)
    assert [p.dist for p in line.points] == [0.0, 5.0, 10.0, 20.0]
    line.insert_point(10.0)
    assert len(line.points) == 4


def test_get_point_rejects_degenerate():
    line = Polyline([PolyPoint((0.0, 0.0, 0.0), 0.0, 0.0), PolyPoint((0.0, 0.0, 0.0), 0.0, 0.0)])
    with pytest.raises(ValueError):
        line.get_point(0.0)


def test_dir_and_right_are_perpendicular_unit_vectors():
    line = Polyline([PolyPoint((0.0, 0.0, 0.0), 0.7, 0.0)])
    d = line.get_dir(0)
    r = line.get_right(0)
    assert d[0] * r[0] + d[1] * r[1] == pytest.approx(0.0)
    assert math.hypot(d[0], d[1]) == pytest.approx(1.0)
    assert math.hypot(r[0], r[1]) == pytest.approx(1.0)


def test_straight_dir_and_right_on_straight_line():
    line = straight_line(3)
    for i in range(3):
        assert line.get_straight_dir(i) == pytest.approx((1.0, 0.0, 0.0))
        assert line.get_straight_right(i) == pytest.approx((0.0, 1.0, 0.0))
        assert line.get_straight_radian(i) == pytest.approx(0.0)


def test_bounds_and_segment_bounds_contain_points():
    line = straight_line(3)
    box = line.bounds()
    assert box.min == (0.0, 0.0, 0.0)
    assert box.max == (20.0, 0.0, 0.0)
    seg = line.segment_bounds(0)
    for pos in line.positions()[:2]:
        assert all(seg.min[k] <= pos[k] <= seg.max[k] for k in range(3))
    assert seg.intersects(line.segment_bounds(1))


def test_redist_recomputes_distances():
    line = Polyline(
        [PolyPoint((0.0, 0.0, 0.0), 0.0, 7.0), PolyPoint((3.0, 4.0, 0.0), 0.0, 100.0)]
    )
    result = line.redist()
    assert [p.dist for p in result.points] == [0.0, 5.0]
    assert result.positions() == line.positions()


def test_resample_even_spacing():
    line = straight_line(3)
    result = line.resample(4)
    assert len(result.points) == 5
    dists = [p.dist for p in result.points]
    gaps = [b - a for a, b in zip(dists, dists[1:])]
    assert all(g == pytest.approx(gaps[0]) for g in gaps)
    assert result.points[-1].pos == pytest.approx(line.points[-1].pos)


def test_resample_length_at_least_one_segment():
    line = straight_line(3)
    assert len(line.resample_length(1000.0).points) == 2
    assert len(line.resample_length(5.0).points) == 5


def test_sub_curve_forward():
    line = straight_line(3)
    sub = line.sub_curve(5.0, 15.0)
    assert sub.points[0].dist == pytest.approx(5.0)
    assert sub.points[-1].dist == pytest.approx(15.0)
    assert [p.dist for p in sub.points] == pytest.approx([5.0, 10.0, 15.0])
    assert all(p.radian == 0.0 for p in sub.points)


def test_sub_curve_reversed_turns_heading():
    line = straight_line(3)
    sub = line.sub_curve(15.0, 5.0)
    assert [p.dist for p in sub.points] == pytest.approx([15.0, 10.0, 5.0])
    assert all(p.radian == pytest.approx(math.pi) for p in sub.points)
    assert line.points[1].radian == 0.0


def test_offset_moves_right_and_up():
    line = straight_line(3)
    shifted = line.offset((5.0, 2.0))
    for orig, new in zip(line.points, shifted.points):
        assert new.pos == pytest.approx((orig.pos[0], 5.0, 2.0))
        assert new.dist == orig.dist
    assert line.offset((5.0, 2.0), True).positions() == pytest.approx(shifted.positions())


def test_overlap_and_nan_detection():
    line = straight_line(3)
    assert not line.has_overlapped_points()
    assert not line.contains_nan()
    line.points.append(PolyPoint(line.points[-1].pos, 0.0, 30.0))
    assert line.has_overlapped_points()
    line.points.append(PolyPoint((float("nan"), 0.0, 0.0), 0.0, 40.0))
    assert line.contains_nan()


def test_check_zig_removes_backtracking_vertex():
    line = Polyline(
        [
            PolyPoint((0.0, 0.0, 0.0), 0.0, 0.0),
            PolyPoint((10.0, 0.0, 0.0), 0.0, 10.0),
            PolyPoint((5.0, 0.0, 0.0), 0.0, 15.0),
            PolyPoint((20.0, 0.0, 0.0), 0.0, 30.0),
        ]
    )
    line.check_zig()
    assert all(p.pos != (10.0, 0.0, 0.0) for p in line.points)
    assert line.points[0].pos == (0.0, 0.0, 0.0)
    assert line.points[-1].pos == (20.0, 0.0, 0.0)


def test_curve_offset_value_and_radian():
    start = CurveOffset(0.0, 100.0, 0.0)
    end = CurveOffset(50.0, 300.0, 0.0)
    assert start.value_at(end, 0.0) == pytest.approx(100.0)
    assert start.value_at(end, 50.0) == pytest.approx(300.0)
    assert start.radian_at(end, 0.0) == pytest.approx(0.0)
    assert start.radian_at(end, 25.0) > 0.0
    assert start < end
    assert not end < start
    flat = CurveOffset(50.0, 100.0, 0.0)
    assert start.radian_at(flat, 10.0) == pytest.approx(0.0)