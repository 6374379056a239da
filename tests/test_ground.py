import pytest

from roadkit.ground import Ground, GroundPoint


@pytest.mark.parametrize("side", [0, 1])
@pytest.mark.parametrize("index", range(6))
def test_start_and_end_are_complementary(side, index):
    point = GroundPoint(None, side, index)
    assert point.segment_start() != point.segment_end()


def test_start_alternates_with_index():
    road = object()
    starts = [GroundPoint(road, 0, i).segment_start() for i in range(4)]
    assert starts == [True, False, True, False]


def test_side_flips_start():
    road = object()
    for index in range(4):
        assert GroundPoint(road, 0, index).segment_start() == GroundPoint(road, 1, index).segment_end()


def test_points_hash_and_compare():
    road = object()
    other = object()
    visited = {GroundPoint(road, 0, 1)}
    assert GroundPoint(road, 0, 1) in visited
    assert GroundPoint(road, 1, 1) not in visited
    assert GroundPoint(other, 0, 1) not in visited


def test_is_end_point():
    road = object()
    ground = Ground(points=[GroundPoint(road, 0, i) for i in range(3)])
    assert ground.is_end_point(0)
    assert ground.is_end_point(2)
    assert not ground.is_end_point(1)


def test_expire_and_renew():
    ground = Ground()
    assert not ground.is_expired()
    ground.mark_expired()
    ground.mark_expired()
    assert ground.is_expired()
    ground.renew()
    assert not ground.is_expired()