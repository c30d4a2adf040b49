"""
Seat and guest records shared by the builder, reconciler and assignment engine.

The seat collection is the source of truth for who sits where; each guest's
``seat_id`` mirrors the seat's ``guest_id`` and must be kept in step.
"""

from dataclasses import asdict, dataclass, fields
from typing import Optional


# Fields that travel with the occupant when seats are swapped or cleared.
GUEST_LINK_FIELDS = (
    "guest_id",
    "guest_number",
    "guest_name",
    "guest_unit",
    "assigned_section",
    "section_color",
)

# Per-seat state carried across a layout rebuild.
MUTABLE_FIELDS = ("occupied", "vip", "selected") + GUEST_LINK_FIELDS


def make_seat_id(section_index: int, row: int, col: int) -> str:
    """Stable seat id; ``section_index`` is 0-based, ``row`` and ``col`` 1-based."""
    return f"S{section_index + 1}-R{row}-{col}"


@dataclass
class Seat:
    """A single placed seat. Geometry is in pixels, origin at the room's top-left."""

    id: str
    x: float
    y: float
    width: float
    height: float
    section: str
    section_index: int
    row: int                    # 1-based
    col: int                    # 1-based, resets every row
    occupied: bool = False
    vip: bool = False
    selected: bool = False
    guest_id: Optional[str] = None
    guest_number: Optional[str] = None
    guest_name: Optional[str] = None
    guest_unit: Optional[str] = None
    assigned_section: Optional[str] = None
    section_color: Optional[str] = None

    def clear_guest(self):
        for name in GUEST_LINK_FIELDS:
            setattr(self, name, None)

    def link_guest(self, guest: "Guest", color: Optional[str] = None):
        """Attach *guest* to this seat and point the guest back at it."""
        self.guest_id = guest.id
        self.guest_number = guest.number
        self.guest_name = guest.name
        self.guest_unit = guest.unit
        self.assigned_section = guest.assigned_section
        self.section_color = color
        guest.seat_id = self.id

    def guest_link(self) -> dict:
        return {name: getattr(self, name) for name in GUEST_LINK_FIELDS}

    def mutable_state(self) -> dict:
        return {name: getattr(self, name) for name in MUTABLE_FIELDS}

    def to_dict(self) -> dict:
        data = asdict(self)
        for key in ("x", "y", "width", "height"):
            data[key] = round(data[key], 4)
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "Seat":
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})

    def __repr__(self) -> str:
        return (
            f"Seat(id={self.id}, pos=({self.x:.1f},{self.y:.1f}), "
            f"guest={self.guest_id})"
        )


@dataclass
class Guest:
    """A roster entry. ``number`` is the external identifier."""

    id: str
    number: str
    assigned_section: str
    name: Optional[str] = None
    unit: Optional[str] = None
    seat_id: Optional[str] = None

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "Guest":
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})
