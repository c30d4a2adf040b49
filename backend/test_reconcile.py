"""State reconciler: per-seat state survives a rebuild keyed by seat id."""

import random

from conftest import FixedRandom, make_section
from services.seating_engine import build_layout, reconcile


def _layout(room, rows_b=3):
    return build_layout(room, None, [make_section("A", rows=2), make_section("B", rows=rows_b)])


def test_state_carried_for_matching_ids(room):
    previous = reconcile([], _layout(room), rng=FixedRandom(0.0))
    first = previous[0]
    first.occupied = True
    first.vip = True
    first.guest_id = "G1"
    first.guest_name = "张三"
    first.section_color = "#4e79a7"
    previous[5].selected = True

    merged = reconcile(previous, _layout(room, rows_b=4), rng=FixedRandom(0.0))
    by_id = {s.id: s for s in merged}

    kept = by_id[first.id]
    assert kept.occupied and kept.vip
    assert kept.guest_id == "G1"
    assert kept.guest_name == "张三"
    assert kept.section_color == "#4e79a7"
    assert by_id[previous[5].id].selected

    for seat in previous:
        assert by_id[seat.id].occupied == seat.occupied
        assert by_id[seat.id].guest_id == seat.guest_id


def test_new_seats_get_seeded_occupancy(room):
    merged = reconcile([], _layout(room), rng=FixedRandom(0.9))
    assert all(s.occupied for s in merged)
    assert all(s.guest_id is None and not s.selected for s in merged)

    merged = reconcile([], _layout(room), rng=FixedRandom(0.7))
    assert not any(s.occupied for s in merged)


def test_seeded_rng_is_reproducible(room):
    a = reconcile([], _layout(room), rng=random.Random(42))
    b = reconcile([], _layout(room), rng=random.Random(42))
    assert [s.occupied for s in a] == [s.occupied for s in b]


def test_vanished_seats_are_dropped(room):
    previous = reconcile([], _layout(room, rows_b=4), rng=FixedRandom(0.0))
    doomed = next(s for s in previous if s.id.startswith("S2-R4-"))
    doomed.guest_id = "G9"

    merged = reconcile(previous, _layout(room, rows_b=3), rng=FixedRandom(0.0))
    assert all(not s.id.startswith("S2-R4-") for s in merged)
    assert all(s.guest_id != "G9" for s in merged)


def test_geometry_comes_from_new_layout(room):
    previous = reconcile([], _layout(room), rng=FixedRandom(0.0))
    shifted = build_layout(room, None, [
        make_section("A", rows=2, previous_section_distance=1),
        make_section("B", rows=3),
    ])
    merged = reconcile(previous, shifted, rng=FixedRandom(0.0))
    assert merged[0].id == previous[0].id
    assert merged[0].y == shifted[0].y != previous[0].y


def test_new_layout_is_not_modified(room):
    previous = reconcile([], _layout(room), rng=FixedRandom(0.0))
    previous[0].guest_id = "G1"
    built = _layout(room)
    reconcile(previous, built, rng=FixedRandom(0.0))
    assert built[0].guest_id is None
