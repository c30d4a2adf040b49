"""Seat-level gestures operating on the caller's seat collection."""

import random
from typing import Optional, Sequence

from .reconcile import OCCUPANCY_THRESHOLD
from .seat_model import Seat


def select_seat(seats: Sequence[Seat], seat_id: str) -> Optional[Seat]:
    """Mark *seat_id* as the only selected seat; ``None`` if it does not exist."""
    target = next((s for s in seats if s.id == seat_id), None)
    if target is None:
        return None
    for seat in seats:
        seat.selected = seat is target
    return target


def randomize_occupancy(seats: Sequence[Seat], rng: Optional[random.Random] = None,
                        threshold: float = OCCUPANCY_THRESHOLD) -> int:
    """Re-roll the demo occupancy; returns how many seats came up occupied."""
    rng = rng or random.Random()
    for seat in seats:
        seat.occupied = rng.random() > threshold
    return sum(1 for s in seats if s.occupied)


def reset_occupancy(seats: Sequence[Seat]) -> None:
    for seat in seats:
        seat.occupied = False
