"""Tests for the geometry helpers."""
import pytest

from staging_planner.core.geometry import (
    calculate_coverage,
    calculate_overlap_area,
    check_collision,
    floor_polygon,
    footprint_box,
    is_within_room,
    polygon_area,
)
from staging_planner.models.room import BoundingBox, Point, Size


def _box(min_x, max_x, min_y, max_y):
    return BoundingBox(min_x=min_x, max_x=max_x, min_y=min_y, max_y=max_y)


# ---------------------------------------------------------------------------
# Collision
# ---------------------------------------------------------------------------

class TestCheckCollision:
    def test_overlapping_boxes_collide(self):
        assert check_collision(_box(0, 10, 0, 10), _box(5, 15, 5, 15))

    def test_far_apart_boxes_do_not_collide(self):
        assert not check_collision(_box(0, 10, 0, 10), _box(30, 40, 0, 10))

    def test_gap_smaller_than_padding_collides(self):
        a = _box(0, 10, 0, 10)
        b = _box(11, 20, 0, 10)
        assert check_collision(a, b)
        assert not check_collision(a, b, padding=0)

    def test_gap_equal_to_padding_collides(self):
        # Strict comparison: a gap of exactly the padding is still too close
        assert check_collision(_box(0, 10, 0, 10), _box(12, 20, 0, 10))

    def test_gap_just_over_padding_is_clear(self):
        assert not check_collision(_box(0, 10, 0, 10), _box(12.5, 20, 0, 10))

    def test_touching_boxes_collide_without_padding(self):
        assert check_collision(_box(0, 10, 0, 10), _box(10, 20, 0, 10), padding=0)

    def test_vertical_separation_is_enough(self):
        # Same x range, far apart on y
        assert not check_collision(_box(0, 10, 0, 10), _box(0, 10, 40, 50))

    def test_diagonal_neighbours_within_padding_collide(self):
        # Per-axis test: both gaps are within padding, so they collide
        assert check_collision(_box(0, 10, 0, 10), _box(11, 20, 11, 20))

    @pytest.mark.parametrize("padding", [0, 1, 2, 5])
    def test_symmetric(self, padding):
        pairs = [
            (_box(0, 10, 0, 10), _box(5, 15, 5, 15)),
            (_box(0, 10, 0, 10), _box(11, 20, 0, 10)),
            (_box(0, 10, 0, 10), _box(30, 40, 30, 40)),
            (_box(-5, 5, 90, 110), _box(0, 2, 95, 96)),
        ]
        for a, b in pairs:
            assert check_collision(a, b, padding) == check_collision(b, a, padding)


# ---------------------------------------------------------------------------
# Footprints and bounds
# ---------------------------------------------------------------------------

def test_footprint_box_is_centered():
    bbox = footprint_box(Point(x=20, y=80), Size(width=30, height=15))
    assert bbox == _box(5, 35, 72.5, 87.5)


def test_is_within_room_accepts_edges():
    assert is_within_room(_box(0, 100, 0, 100))
    assert is_within_room(_box(40, 60, 40, 60))


@pytest.mark.parametrize("bbox", [
    _box(-0.5, 10, 0, 10),
    _box(90, 100.5, 0, 10),
    _box(0, 10, -1, 10),
    _box(0, 10, 95, 101),
])
def test_is_within_room_rejects_overflow(bbox):
    assert not is_within_room(bbox)


# ---------------------------------------------------------------------------
# Shapely-backed measurements
# ---------------------------------------------------------------------------

def test_overlap_area():
    assert calculate_overlap_area(_box(0, 10, 0, 10), _box(5, 15, 5, 15)) == pytest.approx(25.0)
    assert calculate_overlap_area(_box(0, 10, 0, 10), _box(20, 30, 0, 10)) == 0.0


def test_coverage_counts_overlaps_once():
    single = calculate_coverage([_box(0, 10, 0, 10)])
    doubled = calculate_coverage([_box(0, 10, 0, 10), _box(0, 10, 0, 10)])
    assert single == pytest.approx(1.0)
    assert doubled == pytest.approx(1.0)


def test_coverage_ignores_area_outside_room():
    assert calculate_coverage([_box(-10, 10, 0, 10)]) == pytest.approx(1.0)


def test_coverage_of_empty_layout():
    assert calculate_coverage([]) == 0.0


class TestFloorPolygon:
    def test_rectangular(self):
        points = floor_polygon("rectangular", 12, 8)
        assert points == [(0.0, 0.0), (12, 0.0), (12, 8), (0.0, 8)]
        assert polygon_area(points) == pytest.approx(96.0)

    def test_square_matches_rectangle(self):
        assert floor_polygon("square", 10, 10) == floor_polygon("rectangular", 10, 10)

    def test_l_shaped(self):
        points = floor_polygon("L-shaped", 10, 10)
        assert len(points) == 6
        assert points[3] == pytest.approx((6.0, 6.0))
        # 10x10 square minus the 4x4 notch
        assert polygon_area(points) == pytest.approx(84.0)

    def test_unknown_shape_falls_back_to_rectangle(self):
        assert floor_polygon("hexagonal", 5, 4) == floor_polygon("rectangular", 5, 4)
