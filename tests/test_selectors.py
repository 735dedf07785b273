"""Tests for the same-floor window search and the cross-floor heuristic."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from models.room import Room
from engine.allocator import group_by_floor
from engine.same_floor import best_window_on_floor, best_same_floor_pick
from engine.cross_floor import (
    candidate_centers,
    centered_pick,
    proximity_order,
    proximity_fallback,
    best_cross_floor_pick,
)


def make_room(num):
    return Room(floor=num // 100, pos=num % 100 - 1)


def make_by_floor(*nums):
    return group_by_floor([make_room(n) for n in nums])


def nums(rooms):
    return [r.num for r in rooms]


class TestBestWindowOnFloor:
    def test_not_enough_rooms(self):
        assert best_window_on_floor([make_room(101)], 2) is None

    def test_minimum_span_wins(self):
        floor = [make_room(n) for n in (101, 104, 105, 106)]
        assert nums(best_window_on_floor(floor, 2)) == [104, 105]

    def test_leftmost_window_on_tie(self):
        floor = [make_room(n) for n in (101, 102, 105, 106)]
        assert nums(best_window_on_floor(floor, 2)) == [101, 102]

    def test_window_over_gaps(self):
        floor = [make_room(n) for n in (101, 103, 107, 110)]
        # consecutive available entries, not consecutive positions
        assert nums(best_window_on_floor(floor, 3)) == [101, 103, 107]


class TestBestSameFloorPick:
    def test_global_minimum_span(self):
        by_floor = make_by_floor(101, 105, 108, 301, 302)
        floor, pick = best_same_floor_pick(by_floor, 2)
        assert floor == 3
        assert nums(pick) == [301, 302]

    def test_lowest_floor_on_tie(self):
        by_floor = make_by_floor(701, 702, 201, 202, 401, 402)
        floor, pick = best_same_floor_pick(by_floor, 2)
        assert floor == 2
        assert nums(pick) == [201, 202]

    def test_no_floor_has_enough(self):
        assert best_same_floor_pick(make_by_floor(101, 201, 301), 2) is None


class TestCandidateCenters:
    def test_ordered_by_availability_then_floor(self):
        by_floor = make_by_floor(
            201, 202, 203,
            501, 502, 503,
            701,
            101, 102,
            901, 902, 903,
        )
        assert candidate_centers(by_floor) == [2, 5, 9, 1]

    def test_limit(self):
        by_floor = make_by_floor(101, 201, 301)
        assert candidate_centers(by_floor, limit=2) == [1, 2]


class TestCenteredPick:
    def test_fills_below_before_above(self):
        by_floor = make_by_floor(501, 401, 601, 602)
        assert nums(centered_pick(by_floor, 3, 5)) == [501, 401, 601]

    def test_larger_window_wins_tie(self):
        # k=2 -> {501, 502, 401} and k=1 -> {501, 401, 402} both have diameter 3
        by_floor = make_by_floor(501, 502, 401, 402)
        assert nums(centered_pick(by_floor, 3, 5)) == [501, 502, 401]

    def test_smaller_window_when_cheaper(self):
        # k=2 -> {501, 510, 401} costs 11, k=1 -> {501, 401, 402} costs 3
        by_floor = make_by_floor(501, 510, 401, 402)
        assert nums(centered_pick(by_floor, 3, 5)) == [501, 401, 402]

    def test_center_without_rooms(self):
        assert centered_pick(make_by_floor(401, 601), 2, 5) is None

    def test_not_enough_rooms(self):
        assert centered_pick(make_by_floor(501, 401), 3, 5) is None


class TestProximityFallback:
    def test_proximity_order(self):
        assert proximity_order(5) == [5, 4, 6, 3, 7, 2, 8, 1, 9, 10]
        assert proximity_order(1) == list(range(1, 11))
        assert proximity_order(10) == list(range(10, 0, -1))

    def test_fills_outward(self):
        by_floor = make_by_floor(501, 401, 601, 301)
        assert nums(proximity_fallback(by_floor, 3, 5)) == [501, 401, 601]

    def test_exhausted(self):
        assert proximity_fallback(make_by_floor(501, 401, 601), 4, 5) is None


class TestBestCrossFloorPick:
    def test_scenario_two_floors(self):
        by_floor = make_by_floor(309, 310, 401, 402)
        rooms, strategy = best_cross_floor_pick(by_floor, 4)
        assert strategy == "cross_floor"
        assert sorted(nums(rooms)) == [309, 310, 401, 402]

    def test_second_center_can_win(self):
        by_floor = make_by_floor(209, 210, 601, 602, 701)
        rooms, strategy = best_cross_floor_pick(by_floor, 3)
        assert strategy == "cross_floor"
        assert nums(rooms) == [601, 602, 701]

    def test_insufficient(self):
        assert best_cross_floor_pick(make_by_floor(101, 201, 301), 4) == (None, None)

    def test_empty(self):
        assert best_cross_floor_pick({}, 1) == (None, None)


if __name__ == "__main__":
    import pytest
    pytest.main([__file__, "-v"])
