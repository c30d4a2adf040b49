"""
Venue configuration: room, optional stage and the ordered seating sections.

All lengths are in meters. Pixel conversion happens in the layout builder.
"""

import enum
from dataclasses import dataclass


class StageDirection(enum.Enum):
    NORTH = "north"
    SOUTH = "south"
    EAST = "east"
    WEST = "west"


@dataclass
class RoomConfig:
    """Rectangular room footprint."""

    width: float
    length: float

    def __post_init__(self):
        if self.width <= 0 or self.length <= 0:
            raise ValueError("Room width and length must be positive")


@dataclass
class StageConfig:
    """
    Optional stage against one wall.

    ``length`` is the stage depth measured away from its wall, ``width``
    runs along the wall.
    """

    exists: bool = False
    width: float = 0.0
    length: float = 0.0
    direction: StageDirection = StageDirection.NORTH

    def __post_init__(self):
        if isinstance(self.direction, str):
            self.direction = StageDirection(self.direction.lower())


@dataclass
class SectionConfig:
    """One rectangular seating section; ``name`` is a display label only."""

    name: str
    rows: int
    max_continuous_seats: int
    seat_width: float
    seat_length: float
    seat_left_right_spacing: float
    seat_front_back_spacing: float
    aisle_width: float
    left_wall_distance: float = 0.0
    right_wall_distance: float = 0.0
    previous_section_distance: float = 0.0

    def __post_init__(self):
        if self.rows < 1:
            raise ValueError(f"Section {self.name!r}: rows must be >= 1")
        if self.max_continuous_seats < 1:
            raise ValueError(f"Section {self.name!r}: max_continuous_seats must be >= 1")
        if self.seat_width <= 0 or self.seat_length <= 0:
            raise ValueError(f"Section {self.name!r}: seat size must be positive")

    def usable_width(self, room: RoomConfig) -> float:
        """Width between the wall offsets in meters (may be <= 0)."""
        return room.width - self.left_wall_distance - self.right_wall_distance
