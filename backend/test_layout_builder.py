"""Layout builder: seat positions, ids and vertical stacking."""

import pytest

from conftest import make_seats, make_section
from services.seating_engine import (
    RoomConfig,
    StageConfig,
    build_layout,
    check_layout,
    empty_rows,
)
from services.seating_engine.geometry_utils import (
    detect_seat_overlaps,
    seats_within_room,
    section_height,
    stage_footprint,
)


def test_hall_layout(room, section):
    seats = build_layout(room, None, [section], scale=20)

    assert len(seats) == 5 * 30
    assert len({s.id for s in seats}) == len(seats)
    assert seats[0].id == "S1-R1-1"
    assert seats[-1].id == "S1-R5-30"
    assert (seats[0].x, seats[0].y) == (20.0, 0.0)

    by_id = {s.id: s for s in seats}
    # second block starts after a 30 px aisle
    assert by_id["S1-R1-11"].x == pytest.approx(150.0)
    last = by_id["S1-R1-30"]
    assert last.x + last.width == pytest.approx(380.0)
    # rows are 10 px tall with 20 px between them
    assert by_id["S1-R5-1"].y == pytest.approx(120.0)

    assert seats_within_room(seats, room, 20)
    assert detect_seat_overlaps(seats) == []


def test_columns_reset_every_row(room, section):
    seats = build_layout(room, None, [section], scale=20)
    row2 = [s for s in seats if s.row == 2]
    assert [s.col for s in row2] == list(range(1, 31))


def test_single_block_spreads_seats_across_section():
    room = RoomConfig(width=10.5, length=5)
    section = make_section(rows=1, seat_width=1, seat_length=1, aisle_width=1,
                           max_continuous_seats=20,
                           left_wall_distance=0, right_wall_distance=0)
    seats = build_layout(room, None, [section], scale=10)

    assert len(seats) == 10
    assert seats[0].x == pytest.approx(0.0)
    assert seats[-1].x + seats[-1].width == pytest.approx(105.0)
    gaps = [b.x - (a.x + a.width) for a, b in zip(seats, seats[1:])]
    assert gaps == pytest.approx([5 / 9] * 9)


def test_lone_seat_stays_left_aligned():
    room = RoomConfig(width=1.5, length=5)
    section = make_section(rows=2, seat_width=1, seat_length=1,
                           left_wall_distance=0, right_wall_distance=0)
    seats = build_layout(room, None, [section], scale=10)
    assert [s.x for s in seats] == [0.0, 0.0]


def test_narrow_section_keeps_its_vertical_slot():
    room = RoomConfig(width=10, length=20)
    narrow = make_section("A", rows=2, seat_length=0.5, seat_front_back_spacing=0.5,
                          left_wall_distance=5, right_wall_distance=5)
    normal = make_section("B", rows=1, seat_length=0.5, previous_section_distance=1,
                          left_wall_distance=0, right_wall_distance=0)
    seats = build_layout(room, None, [narrow, normal], scale=10)

    assert all(s.section == "B" for s in seats)
    assert section_height(narrow, 10) == pytest.approx(15.0)
    assert min(s.y for s in seats) == pytest.approx(25.0)
    assert empty_rows(seats, [narrow, normal]) == [(0, 1), (0, 2)]
    assert seats[0].id.startswith("S2-R1-")


@pytest.mark.parametrize("direction, first_x, first_y", [
    ("north", 20.0, 60.0),
    ("south", 20.0, 0.0),
    ("west", 60.0, 0.0),
])
def test_stage_offsets(room, section, direction, first_x, first_y):
    stage = StageConfig(exists=True, width=8, length=3 if direction == "north" else 2,
                        direction=direction)
    seats = build_layout(room, stage, [section], scale=20)
    assert (seats[0].x, seats[0].y) == (pytest.approx(first_x), pytest.approx(first_y))


def test_east_stage_narrows_sections(room, section):
    stage = StageConfig(exists=True, width=8, length=2, direction="east")
    seats = build_layout(room, stage, [section], scale=20)
    right_edge = max(s.x + s.width for s in seats)
    assert right_edge == pytest.approx(340.0)


def test_stage_footprint_is_centered_on_its_wall(room):
    stage = StageConfig(exists=True, width=8, length=3, direction="north")
    assert stage_footprint(room, stage, 20) == (120.0, 0.0, 160.0, 60.0)
    assert stage_footprint(room, StageConfig(exists=False), 20) is None


def test_sections_stack_with_gaps(room):
    first = make_section("A", rows=2)
    second = make_section("B", rows=1, previous_section_distance=2)
    seats = build_layout(room, None, [first, second], scale=20)
    top_b = min(s.y for s in seats if s.section == "B")
    # (2 * 0.5 + 1 * 1.0) m of section A, then a 2 m gap
    assert top_b == pytest.approx(80.0)


def test_ids_stable_when_other_section_changes(room):
    before = build_layout(room, None, [make_section("A", rows=2), make_section("B", rows=3)])
    after = build_layout(room, None, [make_section("A", rows=2), make_section("B", rows=4)])

    ids_before = {s.id for s in before}
    ids_after = {s.id for s in after}
    assert {i for i in ids_before if i.startswith("S1-")} == \
        {i for i in ids_after if i.startswith("S1-")}
    assert ids_before < ids_after


def test_check_layout_clean_hall(room, section):
    assert check_layout(build_layout(room, None, [section]), room) == []


def test_check_layout_flags_rows_past_the_back_wall(room, caplog):
    seats = build_layout(room, None, [make_section(rows=20)])
    with caplog.at_level("WARNING"):
        problems = check_layout(seats, room)
    assert problems == ["seats extend outside the room"]
    assert "outside the room" in caplog.text


def test_check_layout_flags_overlapping_seats(room):
    seats = make_seats("A", 3)
    seats[1].x = seats[0].x + 5
    problems = check_layout(seats, room)
    assert len(problems) == 1
    assert problems[0].startswith("1 overlapping seat pairs")
