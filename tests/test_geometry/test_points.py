"""Tests for the 2D/3D point helpers."""

from __future__ import annotations

import itertools

import pytest

from aockit.geometry.points import (
    NORTH_CLOCKWISE,
    NORTH_COUNTER_CLOCKWISE,
    Pt,
    Pt2,
    Pt3,
    abs_diff,
    manhattan_distance,
)

SAMPLE_POINTS = [Pt2(x, y) for x, y in itertools.product((-3, 0, 2, 7), (-5, 0, 4))]


class TestManhattanDistance:
    def test_known_distance(self) -> None:
        assert Pt2(1, 2).mdist(Pt2(4, -2)) == 7

    def test_symmetric(self) -> None:
        for a, b in itertools.product(SAMPLE_POINTS, repeat=2):
            assert manhattan_distance(a, b) == manhattan_distance(b, a)

    def test_zero_iff_equal(self) -> None:
        for a, b in itertools.product(SAMPLE_POINTS, repeat=2):
            assert (a.mdist(b) == 0) == (a == b)
            assert a.mdist(b) >= 0

    def test_three_dimensions(self) -> None:
        assert manhattan_distance(Pt3(0, 0, 0), Pt3(1, -2, 3)) == 6

    def test_mixed_dimensions_rejected(self) -> None:
        with pytest.raises(TypeError):
            manhattan_distance(Pt2(0, 0), Pt3(0, 0, 0))

    def test_abs_diff(self) -> None:
        assert abs_diff(3, 8) == 5
        assert abs_diff(8, 3) == 5


class TestToward:
    def test_moves_diagonally(self) -> None:
        assert Pt2(0, 0).toward(Pt2(5, -5)) == Pt2(1, -1)

    def test_no_move_on_matching_axis(self) -> None:
        assert Pt2(2, 3).toward(Pt2(2, 10)) == Pt2(2, 4)
        assert Pt2(2, 3).toward(Pt2(-4, 3)) == Pt2(1, 3)

    def test_already_there(self) -> None:
        assert Pt2(4, 4).toward(Pt2(4, 4)) == Pt2(4, 4)

    def test_at_most_one_step_per_axis(self) -> None:
        for p, target in itertools.product(SAMPLE_POINTS, repeat=2):
            moved = p.toward(target)
            assert abs(moved.x - p.x) <= 1
            assert abs(moved.y - p.y) <= 1
            if p.x == target.x:
                assert moved.x == p.x
            if p.y == target.y:
                assert moved.y == p.y

    def test_does_not_mutate(self) -> None:
        p = Pt2(0, 0)
        p.toward(Pt2(3, 3))
        assert p == Pt2(0, 0)


class TestNeighbors:
    def test_eight_distinct_offsets(self) -> None:
        centre = Pt2(10, -4)
        seen: list[Pt2] = []
        centre.for_neighbors(lambda p: seen.append(p) or True)
        assert len(seen) == 8
        assert len(set(seen)) == 8
        assert centre not in seen
        offsets = {(p.x - centre.x, p.y - centre.y) for p in seen}
        expected = set(itertools.product((-1, 0, 1), repeat=2)) - {(0, 0)}
        assert offsets == expected

    def test_row_major_order(self) -> None:
        assert Pt2(0, 0).neighbors() == [
            Pt2(-1, -1), Pt2(0, -1), Pt2(1, -1),
            Pt2(-1, 0), Pt2(1, 0),
            Pt2(-1, 1), Pt2(0, 1), Pt2(1, 1),
        ]

    def test_stops_early(self) -> None:
        seen: list[Pt2] = []

        def visit(p: Pt2) -> bool:
            seen.append(p)
            return len(seen) < 3

        Pt2(0, 0).for_neighbors(visit)
        assert len(seen) == 3


class TestDirections:
    def test_steps_with_y_down(self) -> None:
        p = Pt(5, 5)
        assert p.north() == Pt(5, 4)
        assert p.south() == Pt(5, 6)
        assert p.east() == Pt(6, 5)
        assert p.west() == Pt(4, 5)

    def test_clockwise_orders(self) -> None:
        p = Pt(0, 0)
        assert [f(p) for f in NORTH_CLOCKWISE] == [Pt(0, -1), Pt(1, 0), Pt(0, 1), Pt(-1, 0)]
        assert [f(p) for f in NORTH_COUNTER_CLOCKWISE] == [Pt(0, -1), Pt(-1, 0), Pt(0, 1), Pt(1, 0)]


class TestArithmetic:
    def test_add_and_sub(self) -> None:
        assert Pt2(1, 2) + Pt2(3, 4) == Pt2(4, 6)
        assert Pt2(1, 2) - Pt2(3, 4) == Pt2(-2, -2)
        assert Pt3(1, 2, 3) + Pt3(1, 1, 1) == Pt3(2, 3, 4)

    def test_points_are_hashable_values(self) -> None:
        assert {Pt2(1, 1), Pt2(1, 1)} == {Pt2(1, 1)}
        with pytest.raises(AttributeError):
            Pt2(1, 1).x = 5  # type: ignore[misc]
