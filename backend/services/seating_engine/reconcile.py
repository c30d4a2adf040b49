"""
Carry per-seat state across a layout rebuild.

Seats are matched by id. State for ids that no longer exist is dropped,
including any guest linked to them.
"""

import logging
import random
from dataclasses import replace
from typing import List, Optional, Sequence

from .seat_model import Seat

logger = logging.getLogger(__name__)

OCCUPANCY_THRESHOLD = 0.7


def reconcile(
    previous: Sequence[Seat],
    new: Sequence[Seat],
    rng: Optional[random.Random] = None,
    occupancy_threshold: float = OCCUPANCY_THRESHOLD,
) -> List[Seat]:
    """
    Merge freshly built seats with the previous collection.

    Parameters
    ----------
    previous : sequence of Seat
        The collection currently held by the caller.
    new : sequence of Seat
        Output of ``build_layout``; not modified.
    rng : random.Random, optional
        Source for the demo occupancy of seats that did not exist before.
        A seat starts occupied when ``rng.random() > occupancy_threshold``.

    Returns
    -------
    list[Seat]
        New seat objects with geometry from *new* and mutable state from
        *previous* wherever the id matches.
    """
    rng = rng or random.Random()
    state = {s.id: s.mutable_state() for s in previous}

    merged: List[Seat] = []
    carried = 0
    for seat in new:
        kept = state.get(seat.id)
        if kept is not None:
            merged.append(replace(seat, **kept))
            carried += 1
        else:
            fresh = replace(seat, occupied=rng.random() > occupancy_threshold)
            fresh.clear_guest()
            fresh.selected = False
            merged.append(fresh)

    dropped = len(state) - carried
    if dropped:
        kept_ids = {m.id for m in merged}
        lost = sum(1 for s in previous if s.guest_id and s.id not in kept_ids)
        logger.info("Reconcile dropped %d seats (%d with guests)", dropped, lost)
    return merged
