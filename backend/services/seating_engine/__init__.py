"""
Seating Engine for venue layouts.

Packs rectangular seating sections into rows of seat blocks separated by
aisles, keeps per-seat state across rebuilds, and seats an imported guest
roster section by section.
"""

from .venue_model import RoomConfig, StageConfig, StageDirection, SectionConfig
from .seat_model import Seat, Guest, make_seat_id
from .packer import RowPlan, pack_row
from .builder import build_layout, check_layout, empty_rows, expected_rows
from .reconcile import reconcile
from .roster import RosterImport, RosterImportError, import_roster
from .assignment import (
    AssignmentResult,
    assign,
    clear_assignments,
    group_seats_by_section,
    swap_seats,
)
from .interactions import randomize_occupancy, reset_occupancy, select_seat
from .colors import build_section_color_map, seat_fill

__all__ = [
    "RoomConfig",
    "StageConfig",
    "StageDirection",
    "SectionConfig",
    "Seat",
    "Guest",
    "make_seat_id",
    "RowPlan",
    "pack_row",
    "build_layout",
    "check_layout",
    "empty_rows",
    "expected_rows",
    "reconcile",
    "RosterImport",
    "RosterImportError",
    "import_roster",
    "AssignmentResult",
    "assign",
    "clear_assignments",
    "group_seats_by_section",
    "swap_seats",
    "randomize_occupancy",
    "reset_occupancy",
    "select_seat",
    "build_section_color_map",
    "seat_fill",
]
