"""
Seating layout and roster assignment routes.

The server keeps no layout state: every request carries the caller's seat
(and guest) collection and gets the updated collection back.
"""

import logging
import random

from fastapi import APIRouter, HTTPException

from config import (
    OCCUPANCY_THRESHOLD,
    PACK_COARSE_STEP_FROM,
    PACK_PROBE_LIMIT,
    PIXELS_PER_METER,
)
from schemas import (
    AssignRequest,
    AssignResponse,
    CollectionsIn,
    CollectionsOut,
    EmptyRow,
    GuestModel,
    LayoutRequest,
    LayoutResponse,
    OccupancyRequest,
    OccupancyResponse,
    RosterImportRequest,
    RosterImportResponse,
    SeatModel,
    SelectRequest,
    SelectResponse,
    SwapRequest,
    SwapResponse,
)
from services.seating_engine import (
    RosterImportError,
    assign,
    build_layout,
    check_layout,
    clear_assignments,
    empty_rows,
    group_seats_by_section,
    import_roster,
    randomize_occupancy,
    reconcile,
    reset_occupancy,
    seat_fill,
    select_seat,
    swap_seats,
)
from services.seating_engine.geometry_utils import stage_footprint

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/seating", tags=["seating"])


def _seats_out(seats) -> list[SeatModel]:
    return [SeatModel(**seat.to_dict(), fill=seat_fill(seat)) for seat in seats]


def _guests_out(guests) -> list[GuestModel]:
    return [GuestModel(**g.to_dict()) for g in guests]


@router.post("/layout", response_model=LayoutResponse)
async def build_seating_layout(req: LayoutRequest):
    """
    Rebuild the seat layout from the venue configuration.

    Seats that already exist in ``previousSeats`` (same id) keep their
    occupancy, guest and selection; new seats get demo occupancy.
    """
    room = req.room.to_engine()
    stage = req.stage.to_engine() if req.stage else None
    sections = [s.to_engine() for s in req.sections]

    scale = req.scale or PIXELS_PER_METER
    built = build_layout(
        room, stage, sections,
        scale=scale,
        probe_limit=PACK_PROBE_LIMIT,
        coarse_step_from=PACK_COARSE_STEP_FROM,
    )
    rng = random.Random(req.seed) if req.seed is not None else None
    seats = reconcile([s.to_engine() for s in req.previous_seats], built,
                      rng=rng, occupancy_threshold=OCCUPANCY_THRESHOLD)

    missing = [
        EmptyRow(section_index=i, section=sections[i].name, row=r)
        for i, r in empty_rows(seats, sections)
    ]
    if missing:
        logger.warning("Layout has %d empty rows", len(missing))
    problems = check_layout(seats, room, scale)

    return LayoutResponse(seats=_seats_out(seats), seat_count=len(seats),
                          empty_rows=missing, warnings=problems,
                          stage=stage_footprint(room, stage, scale))


@router.post("/roster/import", response_model=RosterImportResponse)
async def import_guest_roster(req: RosterImportRequest):
    """Normalize roster rows into guests. Any invalid row rejects the import."""
    try:
        result = import_roster(req.rows)
    except RosterImportError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return RosterImportResponse(guests=_guests_out(result.guests),
                                section_colors=result.section_colors)


@router.post("/assign", response_model=AssignResponse)
async def assign_roster(req: AssignRequest):
    """Seat the guests section by section; leftovers come back as ``unplaced``."""
    seats = [s.to_engine() for s in req.seats]
    guests = [g.to_engine() for g in req.guests]
    by_section = group_seats_by_section(seats)
    order = req.section_order or list(by_section.keys())

    result = assign(guests, by_section, order, req.section_colors)
    return AssignResponse(
        seats=_seats_out(seats),
        guests=_guests_out(guests),
        unplaced=_guests_out(result.unplaced),
        placed_count=result.placed_count,
    )


@router.post("/swap", response_model=SwapResponse)
async def swap_seat_occupants(req: SwapRequest):
    seats = [s.to_engine() for s in req.seats]
    guests = [g.to_engine() for g in req.guests]
    swapped = swap_seats(seats, guests, req.seat_a, req.seat_b)
    return SwapResponse(seats=_seats_out(seats), guests=_guests_out(guests),
                        swapped=swapped)


@router.post("/select", response_model=SelectResponse)
async def select(req: SelectRequest):
    seats = [s.to_engine() for s in req.seats]
    seat = select_seat(seats, req.seat_id)
    selected = _seats_out([seat])[0] if seat is not None else None
    return SelectResponse(seats=_seats_out(seats), selected=selected)


@router.post("/clear", response_model=CollectionsOut)
async def clear(req: CollectionsIn):
    seats = [s.to_engine() for s in req.seats]
    guests = [g.to_engine() for g in req.guests]
    clear_assignments(seats, guests)
    return CollectionsOut(seats=_seats_out(seats), guests=_guests_out(guests))


@router.post("/occupancy/randomize", response_model=OccupancyResponse)
async def randomize(req: OccupancyRequest):
    seats = [s.to_engine() for s in req.seats]
    rng = random.Random(req.seed) if req.seed is not None else None
    count = randomize_occupancy(seats, rng=rng, threshold=OCCUPANCY_THRESHOLD)
    return OccupancyResponse(seats=_seats_out(seats), occupied_count=count)


@router.post("/occupancy/reset", response_model=OccupancyResponse)
async def reset(req: OccupancyRequest):
    seats = [s.to_engine() for s in req.seats]
    reset_occupancy(seats)
    return OccupancyResponse(seats=_seats_out(seats), occupied_count=0)
