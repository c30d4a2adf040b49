"""
Roster assignment: seats guests section by section.

Sections are visited in display order. Each section takes the pending
guests that target it, in roster order, up to its seat count. A section
with no matching guests takes just the next pending guest, so guests whose
section label matches nothing still end up seated somewhere.

That single-guest pull is the only spillover. A section that has matching
guests never tops up its spare seats with unmatched ones, so a roster can
leave guests unplaced while seats stay empty; those guests come back in
``AssignmentResult.unplaced``.

Seats and guests are mutated in place; every seat's ``guest_id`` and the
linked guest's ``seat_id`` always point at each other.
"""

import logging
from collections import OrderedDict
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional, Sequence

from .colors import build_section_color_map
from .seat_model import GUEST_LINK_FIELDS, Guest, Seat

logger = logging.getLogger(__name__)


@dataclass
class AssignmentResult:
    unplaced: List[Guest]
    placed_count: int = 0
    section_colors: Dict[str, str] = field(default_factory=dict)


def group_seats_by_section(seats: Sequence[Seat]) -> "OrderedDict[str, List[Seat]]":
    """Seats keyed by section name, sections and seats in layout order."""
    grouped: "OrderedDict[str, List[Seat]]" = OrderedDict()
    for seat in seats:
        grouped.setdefault(seat.section, []).append(seat)
    return grouped


def clear_assignments(seats: Sequence[Seat], guests: Sequence[Guest]) -> None:
    """Unlink every guest from every seat."""
    for seat in seats:
        seat.clear_guest()
    for guest in guests:
        guest.seat_id = None


def assign(
    guests: Sequence[Guest],
    seats_by_section: Mapping[str, Sequence[Seat]],
    section_order: Sequence[str],
    section_colors: Optional[Mapping[str, str]] = None,
) -> AssignmentResult:
    """
    Seat *guests* into the sections of *seats_by_section*.

    Parameters
    ----------
    guests : sequence of Guest
        Roster in import order.
    seats_by_section : mapping
        ``{section_name: [Seat, ...]}`` with seats in row-major order.
    section_order : sequence of str
        Section names in configured display order.
    section_colors : mapping, optional
        Color per target section from the roster import. Built from the
        guests when omitted.

    Returns
    -------
    AssignmentResult
        Guests left without a seat, in roster order.
    """
    clear_assignments([s for seats in seats_by_section.values() for s in seats], guests)
    colors = dict(section_colors) if section_colors else \
        build_section_color_map(g.assigned_section for g in guests)

    pending: List[Guest] = list(guests)
    placed = 0
    for name in section_order:
        if not pending:
            break
        seats = seats_by_section.get(name, ())
        candidates = [g for g in pending if g.assigned_section == name]
        if not candidates:
            candidates = pending[:1]

        count = min(len(seats), len(candidates))
        for seat, guest in zip(seats[:count], candidates[:count]):
            seat.link_guest(guest, colors.get(guest.assigned_section))
        if count:
            seated = {g.id for g in candidates[:count]}
            pending = [g for g in pending if g.id not in seated]
            placed += count

    if pending:
        logger.warning("%d of %d guests could not be seated", len(pending), len(guests))
    else:
        logger.info("Seated all %d guests", placed)
    return AssignmentResult(unplaced=pending, placed_count=placed, section_colors=colors)


def swap_seats(seats: Sequence[Seat], guests: Sequence[Guest],
               seat_a: str, seat_b: str) -> bool:
    """
    Exchange the occupants of two seats, including an empty occupant.

    Unknown ids, or the same id twice, leave everything untouched and
    return ``False``.
    """
    if seat_a == seat_b:
        return False
    by_id = {s.id: s for s in seats}
    a, b = by_id.get(seat_a), by_id.get(seat_b)
    if a is None or b is None:
        return False

    link_a, link_b = a.guest_link(), b.guest_link()
    for name in GUEST_LINK_FIELDS:
        setattr(a, name, link_b[name])
        setattr(b, name, link_a[name])

    guests_by_id = {g.id: g for g in guests}
    for seat in (a, b):
        guest = guests_by_id.get(seat.guest_id) if seat.guest_id else None
        if guest is not None:
            guest.seat_id = seat.id
    return True
