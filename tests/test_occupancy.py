"""Tests for occupancy helpers, the demo generator and request validation."""

import sys
import os
import random
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from models.room import Room
from engine.layout import build_layout
from engine.occupancy import (
    available_rooms,
    commit_booking,
    availability_by_floor,
    occupancy_summary,
)
from data.sample_data import generate_random_occupancy, generate_occupancy_df
from data.validator import clamp_room_count, validate_booking_request


class TestOccupancy:
    def test_available_rooms_excludes_occupied(self):
        layout = build_layout()
        free = available_rooms(layout, {"101", "1007"})
        assert len(free) == 95
        assert Room(1, 0) not in free
        assert free[0].num == 102

    def test_commit_booking_returns_new_set(self):
        occupied = {"101"}
        updated = commit_booking(occupied, [Room(2, 0), Room(2, 1)])
        assert updated == {"101", "201", "202"}
        assert occupied == {"101"}

    def test_commit_booking_rejects_occupied_room(self):
        with pytest.raises(ValueError):
            commit_booking({"201"}, [Room(2, 0)])

    def test_availability_by_floor(self):
        rooms = [Room(3, 1), Room(1, 0), Room(3, 4)]
        assert availability_by_floor(rooms) == {1: 1, 3: 2}
        assert list(availability_by_floor(rooms)) == [1, 3]

    def test_occupancy_summary(self):
        summary = occupancy_summary(build_layout(), {"101", "102"})
        assert summary["occupied_rooms"] == 2
        assert summary["available_rooms"] == 95


class TestRandomOccupancy:
    def test_probability_bounds(self):
        layout = build_layout()
        assert generate_random_occupancy(layout, 0.0) == set()
        assert len(generate_random_occupancy(layout, 1.0)) == 97

    def test_seeded_rng_is_reproducible(self):
        layout = build_layout()
        first = generate_random_occupancy(layout, 0.35, random.Random(42))
        second = generate_random_occupancy(layout, 0.35, random.Random(42))
        assert first == second

    def test_invalid_probability(self):
        with pytest.raises(ValueError):
            generate_random_occupancy(build_layout(), 1.5)

    def test_occupancy_df(self):
        df = generate_occupancy_df(build_layout(), {"101"})
        assert df.shape == (97, 4)
        assert df["Occupied"].sum() == 1


class TestValidator:
    @pytest.mark.parametrize("raw,expected", [
        ("3", 3), (3, 3), ("", 1), ("abc", 1), (None, 1), (0, 1), (9, 5), (-2, 1),
    ])
    def test_clamp_room_count(self, raw, expected):
        assert clamp_room_count(raw) == expected

    def test_valid_request(self):
        result = validate_booking_request(3, 50)
        assert result.is_valid
        assert result.errors == []

    def test_out_of_range(self):
        result = validate_booking_request(6, 50)
        assert not result.is_valid

    def test_shortage(self):
        result = validate_booking_request(4, 3)
        assert not result.is_valid
        assert "Not enough rooms" in result.errors[0]

    def test_low_remaining_warning(self):
        result = validate_booking_request(2, 4)
        assert result.is_valid
        assert result.warnings


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
