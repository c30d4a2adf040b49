"""
Roster import: normalizes spreadsheet rows into guests.

Rows come in as plain dicts keyed by column header. Each row needs a guest
number and a target section; a single bad row rejects the whole import.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Mapping, Optional

from .colors import build_section_color_map
from .seat_model import Guest

logger = logging.getLogger(__name__)

# Accepted column headers for each guest field, checked in order.
COLUMN_ALIASES = {
    "number": ("number", "guest_number", "guestNumber", "编号", "序号"),
    "assigned_section": ("assigned_section", "assignedSection", "section", "分区"),
    "name": ("name", "guest_name", "guestName", "姓名"),
    "unit": ("unit", "guest_unit", "guestUnit", "单位"),
}

REQUIRED_FIELDS = ("number", "assigned_section")


class RosterImportError(ValueError):
    """Raised when a roster cannot be imported; nothing is imported."""

    def __init__(self, message: str, row: Optional[int] = None,
                 missing: Iterable[str] = ()):
        super().__init__(message)
        self.row = row
        self.missing = tuple(missing)


@dataclass
class RosterImport:
    """Guests from one import plus the section colors fixed for it."""

    guests: List[Guest]
    section_colors: Dict[str, str] = field(default_factory=dict)


def _cell(row: Mapping, key: str) -> Optional[str]:
    for alias in COLUMN_ALIASES[key]:
        value = row.get(alias)
        if value is None:
            continue
        if isinstance(value, float) and value.is_integer():
            value = int(value)
        text = str(value).strip()
        if text:
            return text
    return None


def import_roster(rows: Iterable[Mapping]) -> RosterImport:
    """
    Build guests ``G1..Gn`` from *rows* in their original order.

    Raises
    ------
    RosterImportError
        If the roster is empty or any row lacks a number or section.
    """
    guests: List[Guest] = []
    for index, row in enumerate(rows, start=1):
        values = {key: _cell(row, key) for key in COLUMN_ALIASES}
        missing = [key for key in REQUIRED_FIELDS if values[key] is None]
        if missing:
            raise RosterImportError(
                f"Row {index} is missing {', '.join(missing)}",
                row=index, missing=missing,
            )
        guests.append(Guest(
            id=f"G{index}",
            number=values["number"],
            assigned_section=values["assigned_section"],
            name=values["name"],
            unit=values["unit"],
        ))

    if not guests:
        raise RosterImportError("Roster contains no guests")

    colors = build_section_color_map(g.assigned_section for g in guests)
    logger.info("Imported roster: %d guests across %d sections", len(guests), len(colors))
    return RosterImport(guests=guests, section_colors=colors)
