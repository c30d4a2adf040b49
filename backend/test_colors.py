"""Section color map and seat shade variants."""

import pytest

from conftest import make_seats
from services.seating_engine.colors import (
    EMPTY_SEAT_COLOR,
    PALETTE,
    RGB,
    build_section_color_map,
    darken,
    lighten,
    seat_fill,
)


def test_hex_round_trip_and_shorthand():
    assert RGB.from_hex("#4e79a7") == RGB(0x4E, 0x79, 0xA7)
    assert RGB.from_hex("fff") == RGB(255, 255, 255)
    assert RGB(1, 2, 3).to_hex() == "#010203"


def test_invalid_hex():
    with pytest.raises(ValueError):
        RGB.from_hex("#12345")


def test_lighten_and_darken_clamp():
    assert lighten(RGB(0, 100, 255), 0.5) == RGB(128, 178, 255)
    assert lighten(RGB(10, 10, 10), 1.0) == RGB(255, 255, 255)
    assert darken(RGB(200, 100, 0), 0.5) == RGB(100, 50, 0)
    assert darken(RGB(200, 100, 0), 1.0) == RGB(0, 0, 0)


def test_palette_cycles():
    names = [f"S{i}" for i in range(len(PALETTE) + 1)]
    colors = build_section_color_map(names)
    assert colors[names[-1]] == PALETTE[0]


def test_seat_fill_variants():
    seat = make_seats("A", 1)[0]
    assert seat_fill(seat) == EMPTY_SEAT_COLOR

    seat.section_color = "#808080"
    assert seat_fill(seat) == "#808080"
    seat.occupied = True
    assert seat_fill(seat) == "#606060"
    seat.selected = True
    assert seat_fill(seat) == "#b3b3b3"
