"""Pytest configuration and shared fixtures."""

import os
import sys

import pytest

# Ensure imports work from backend/
sys.path.insert(0, os.path.dirname(__file__))

from services.seating_engine import Guest, RoomConfig, SectionConfig, Seat, make_seat_id


class FixedRandom:
    """Stand-in for random.Random that always returns the same value."""

    def __init__(self, value: float):
        self.value = value

    def random(self) -> float:
        return self.value


def make_section(name="分区1", **overrides) -> SectionConfig:
    params = dict(
        name=name,
        rows=5,
        max_continuous_seats=10,
        seat_width=0.5,
        seat_length=0.5,
        seat_left_right_spacing=0.0,
        seat_front_back_spacing=1.0,
        aisle_width=1.2,
        left_wall_distance=1.0,
        right_wall_distance=1.0,
    )
    params.update(overrides)
    return SectionConfig(**params)


def make_seats(section: str, count: int, section_index: int = 0) -> list:
    """One row of ``count`` seats for assignment tests."""
    return [
        Seat(id=make_seat_id(section_index, 1, col), x=col * 10.0, y=0.0,
             width=10.0, height=10.0, section=section,
             section_index=section_index, row=1, col=col)
        for col in range(1, count + 1)
    ]


def make_guests(*sections: str) -> list:
    return [
        Guest(id=f"G{i}", number=str(100 + i), assigned_section=s, name=f"Guest {i}")
        for i, s in enumerate(sections, start=1)
    ]


@pytest.fixture
def room() -> RoomConfig:
    return RoomConfig(width=20, length=15)


@pytest.fixture
def section() -> SectionConfig:
    return make_section()
