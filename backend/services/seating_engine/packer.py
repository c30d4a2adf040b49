"""
Row packing: how many seats fit one row and how they split into blocks.

A row holds ``n`` seats split into ``ceil(n / max_continuous_seats)``
blocks with one aisle between consecutive blocks. The search starts at the
count that would fit with no aisles at all and walks downward until the
seats plus the required aisles fit the row. Whatever width is left over is
shared evenly by the aisles.

Very wide rows are scanned with a step above 1; once a fitting count is
found, the counts skipped just above it are bisected so the row still
gets the largest count that fits.

The packer only fixes counts and aisle widths; the layout builder turns a
plan into seat positions.
"""

import logging
import math
from dataclasses import dataclass
from typing import Tuple

from .geometry_utils import FILL_TOLERANCE, row_width

logger = logging.getLogger(__name__)

# Maximum number of candidate counts tried per row.
PROBE_LIMIT = 50
# Above this starting count the downward scan skips candidates.
COARSE_STEP_FROM = 100

_EPS = 1e-9


@dataclass(frozen=True)
class RowPlan:
    """Outcome of packing one row."""

    seat_count: int
    aisle_widths: Tuple[float, ...]
    block_sizes: Tuple[int, ...]
    section_width: float
    seat_width: float
    seat_spacing: float

    @property
    def num_blocks(self) -> int:
        return len(self.block_sizes)

    @property
    def used_width(self) -> float:
        return row_width(self.seat_count, self.seat_width, self.seat_spacing,
                         list(self.aisle_widths))

    @property
    def residual(self) -> float:
        """Unused width at the right end of the row."""
        return self.section_width - self.used_width

    @property
    def fills_row(self) -> bool:
        return abs(self.residual) < FILL_TOLERANCE


def split_blocks(seat_count: int, max_continuous_seats: int) -> Tuple[int, ...]:
    """Full blocks of ``max_continuous_seats`` followed by the remainder."""
    if seat_count <= 0:
        return ()
    full, rest = divmod(seat_count, max_continuous_seats)
    blocks = [max_continuous_seats] * full
    if rest:
        blocks.append(rest)
    return tuple(blocks)


def _required_width(n: int, unit: float, seat_spacing: float,
                    aisle_width: float, max_continuous_seats: int) -> float:
    num_aisles = math.ceil(n / max_continuous_seats) - 1
    return n * unit - seat_spacing + num_aisles * aisle_width


def pack_row(
    section_width: float,
    seat_width: float,
    seat_spacing: float,
    aisle_width: float,
    max_continuous_seats: int,
    probe_limit: int = PROBE_LIMIT,
    coarse_step_from: int = COARSE_STEP_FROM,
) -> RowPlan:
    """
    Pack one row of a section.

    Parameters
    ----------
    section_width : float
        Width available to the row.
    seat_width, seat_spacing, aisle_width : float
        Seat footprint, gap between neighbouring seats and minimum aisle
        width, all in the same units as ``section_width``.
    max_continuous_seats : int
        Most seats allowed in one block before an aisle is required.
    probe_limit : int
        Maximum number of candidate counts tried.
    coarse_step_from : int
        Starting counts above this are scanned with a step > 1.

    Returns
    -------
    RowPlan
        Seat count, block sizes and aisle widths. A row too narrow for a
        single seat yields ``seat_count == 0``.
    """

    def plan(count: int, aisles=()) -> RowPlan:
        return RowPlan(
            seat_count=count,
            aisle_widths=tuple(aisles),
            block_sizes=split_blocks(count, max_continuous_seats),
            section_width=section_width,
            seat_width=seat_width,
            seat_spacing=seat_spacing,
        )

    if section_width <= 0 or seat_width <= 0 or max_continuous_seats < 1:
        return plan(0)

    unit = seat_width + seat_spacing
    max_seats_no_aisle = math.floor((section_width + seat_spacing) / unit + _EPS)

    def fits(count: int) -> bool:
        required = _required_width(count, unit, seat_spacing, aisle_width,
                                   max_continuous_seats)
        return required <= section_width + _EPS

    step = 1
    if max_seats_no_aisle > coarse_step_from:
        step = max(2, math.ceil(max_seats_no_aisle / probe_limit))

    n = max_seats_no_aisle
    probes = 0
    found = False
    while n >= 1 and probes < probe_limit:
        probes += 1
        if fits(n):
            found = True
            break
        n -= step

    if found:
        # Required width grows with the count, so the skipped counts just
        # above ``n`` can be bisected.
        lo, hi = n, min(n + step - 1, max_seats_no_aisle)
        while lo < hi and probes < probe_limit:
            probes += 1
            mid = (lo + hi + 1) // 2
            if fits(mid):
                lo = mid
            else:
                hi = mid - 1
        n = lo
        num_aisles = math.ceil(n / max_continuous_seats) - 1
        if num_aisles == 0:
            return plan(n)
        leftover = section_width - _required_width(n, unit, seat_spacing,
                                                   aisle_width, max_continuous_seats)
        widened = aisle_width + leftover / num_aisles
        return plan(n, [widened] * num_aisles)

    if seat_width <= section_width + _EPS:
        logger.debug(
            "No block layout within %d probes for width %.2f, using a single seat",
            probes, section_width,
        )
        return plan(1)
    return plan(0)
