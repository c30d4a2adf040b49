"""
Layout builder: turns the venue configuration into concrete seats.

Sections are stacked top to bottom in configuration order. A north stage
pushes the first section down once; every section then starts after its
``previous_section_distance``. Rows inside a section are ``seat_length``
tall with ``seat_front_back_spacing`` between them, and a row that cannot
hold a seat still takes its slot in the stacking.
"""

import logging
from typing import List, Optional, Sequence, Tuple

from .geometry_utils import (
    FILL_TOLERANCE,
    detect_seat_overlaps,
    seats_within_room,
    section_bounds,
    section_height,
    stage_offsets,
    to_px,
)
from .packer import COARSE_STEP_FROM, PROBE_LIMIT, RowPlan, pack_row
from .seat_model import Seat, make_seat_id
from .venue_model import RoomConfig, SectionConfig, StageConfig

logger = logging.getLogger(__name__)

DEFAULT_SCALE = 20.0  # px per meter


def _block_positions(block_sizes: Sequence[int], left: float, seat_width: float,
                     seat_spacing: float, aisle_widths: Sequence[float]) -> List[float]:
    """Left x of every seat, block by block."""
    xs = []
    x = left
    for b, size in enumerate(block_sizes):
        for i in range(size):
            xs.append(x)
            x += seat_width
            if i < size - 1:
                x += seat_spacing
        if b < len(aisle_widths):
            x += aisle_widths[b]
    return xs


def _row_positions(plan: RowPlan, left: float, right: float,
                   seat_width: float, seat_spacing: float) -> List[float]:
    """
    Seat x positions for one row, stretched so the row meets ``right``.

    Multiple blocks absorb the residual in their aisles, a single block
    spreads its seats evenly across the section, and a lone seat stays
    left-aligned.
    """
    aisles = list(plan.aisle_widths)
    xs = _block_positions(plan.block_sizes, left, seat_width, seat_spacing, aisles)
    residual = right - (xs[-1] + seat_width)
    if abs(residual) < FILL_TOLERANCE:
        return xs

    if plan.num_blocks > 1:
        share = residual / len(aisles)
        aisles = [a + share for a in aisles]
        return _block_positions(plan.block_sizes, left, seat_width, seat_spacing, aisles)

    n = plan.seat_count
    if n > 1:
        spacing = (right - left - n * seat_width) / (n - 1)
        return [left + i * (seat_width + spacing) for i in range(n)]

    return xs


def build_section(
    room: RoomConfig,
    stage: Optional[StageConfig],
    section: SectionConfig,
    section_index: int,
    top: float,
    scale: float = DEFAULT_SCALE,
    probe_limit: int = PROBE_LIMIT,
    coarse_step_from: int = COARSE_STEP_FROM,
) -> List[Seat]:
    """Seats for one section whose first row starts at pixel ``top``."""
    left, right = section_bounds(room, stage, section, scale)
    width = right - left
    seat_w = to_px(section.seat_width, scale)
    seat_l = to_px(section.seat_length, scale)
    spacing = to_px(section.seat_left_right_spacing, scale)
    row_pitch = seat_l + to_px(section.seat_front_back_spacing, scale)

    if width <= 0:
        logger.warning("Section %r has no usable width (%.2f px), skipping",
                       section.name, width)
        return []

    plan = pack_row(
        width, seat_w, spacing, to_px(section.aisle_width, scale),
        section.max_continuous_seats,
        probe_limit=probe_limit, coarse_step_from=coarse_step_from,
    )
    if plan.seat_count == 0:
        logger.warning("Section %r is too narrow for a seat, %d rows left empty",
                       section.name, section.rows)
        return []

    seats: List[Seat] = []
    xs = _row_positions(plan, left, right, seat_w, spacing)
    for r in range(section.rows):
        y = top + r * row_pitch
        row_seats = [
            Seat(
                id=make_seat_id(section_index, r + 1, col),
                x=x, y=y, width=seat_w, height=seat_l,
                section=section.name, section_index=section_index,
                row=r + 1, col=col,
            )
            for col, x in enumerate(xs, start=1)
        ]
        seats.extend(row_seats)
    return seats


def build_layout(
    room: RoomConfig,
    stage: Optional[StageConfig],
    sections: Sequence[SectionConfig],
    scale: float = DEFAULT_SCALE,
    probe_limit: int = PROBE_LIMIT,
    coarse_step_from: int = COARSE_STEP_FROM,
) -> List[Seat]:
    """
    Build every seat for the venue.

    Returns seats in section order, row-major within a section. Seat ids
    are ``S{section}-R{row}-{col}`` (all 1-based) and stay the same as
    long as the section and row counts do not change.
    """
    top, _, _ = stage_offsets(stage, scale)
    cursor = top
    seats: List[Seat] = []

    for index, section in enumerate(sections):
        cursor += to_px(section.previous_section_distance, scale)
        seats.extend(build_section(room, stage, section, index, cursor, scale,
                                   probe_limit, coarse_step_from))
        cursor += section_height(section, scale)

    logger.info("Built layout: %d sections, %d seats", len(sections), len(seats))
    return seats


def expected_rows(sections: Sequence[SectionConfig]) -> List[Tuple[int, int]]:
    """Every ``(section_index, row)`` slot the configuration asks for."""
    return [(i, r + 1) for i, s in enumerate(sections) for r in range(s.rows)]


def empty_rows(seats: Sequence[Seat], sections: Sequence[SectionConfig]) -> List[Tuple[int, int]]:
    """Row slots that ended up without a single seat."""
    filled = {(s.section_index, s.row) for s in seats}
    return [slot for slot in expected_rows(sections) if slot not in filled]


def check_layout(seats: Sequence[Seat], room: RoomConfig,
                 scale: float = DEFAULT_SCALE) -> List[str]:
    """
    Sanity-check a finished layout and log what is wrong with it.

    Returns a list of human-readable problems: overlapping seats and
    seats reaching outside the room. An empty list means the layout is
    clean.
    """
    if not seats:
        return []
    problems = []
    overlaps = detect_seat_overlaps(list(seats))
    if overlaps:
        problems.append(f"{len(overlaps)} overlapping seat pairs, first {overlaps[0]}")
    if not seats_within_room(list(seats), room, scale):
        problems.append("seats extend outside the room")
    for problem in problems:
        logger.warning("Layout check: %s", problem)
    return problems
