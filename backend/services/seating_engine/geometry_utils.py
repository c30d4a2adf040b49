"""
Scalar conversions, row arithmetic and seat-geometry validation.

Lengths enter in meters and leave in pixels (``scale`` px per meter).
The shapely helpers are used to sanity-check a finished layout.
"""

from typing import List, Optional, Tuple

from shapely.geometry import Polygon, box
from shapely.strtree import STRtree

from .venue_model import RoomConfig, SectionConfig, StageConfig, StageDirection

# Right-edge tolerance when checking that a row fills its section (px).
FILL_TOLERANCE = 0.01


def to_px(meters: float, scale: float) -> float:
    """Convert a metric length to pixels."""
    return meters * scale


def row_width(seat_count: int, seat_width: float, seat_spacing: float,
              aisle_widths: Optional[List[float]] = None) -> float:
    """Width taken by ``seat_count`` seats at the given spacing plus aisles."""
    if seat_count <= 0:
        return 0.0
    unit = seat_width + seat_spacing
    return seat_count * unit - seat_spacing + sum(aisle_widths or ())


def section_height(section: SectionConfig, scale: float) -> float:
    """Vertical extent of a section: all rows plus the gaps between them."""
    rows = section.rows
    return to_px(rows * section.seat_length
                 + (rows - 1) * section.seat_front_back_spacing, scale)


def stage_footprint(room: RoomConfig, stage: Optional[StageConfig],
                    scale: float) -> Optional[Tuple[float, float, float, float]]:
    """
    Stage rectangle ``(x, y, w, h)`` in pixels, or ``None`` without a stage.

    The stage sits against the wall named by its direction and is centered
    along that wall.
    """
    if stage is None or not stage.exists:
        return None
    room_w, room_l = to_px(room.width, scale), to_px(room.length, scale)
    depth, span = to_px(stage.length, scale), to_px(stage.width, scale)

    if stage.direction in (StageDirection.NORTH, StageDirection.SOUTH):
        x = (room_w - span) / 2
        y = 0.0 if stage.direction is StageDirection.NORTH else room_l - depth
        return (x, y, span, depth)

    y = (room_l - span) / 2
    x = 0.0 if stage.direction is StageDirection.WEST else room_w - depth
    return (x, y, depth, span)


def stage_offsets(stage: Optional[StageConfig], scale: float) -> Tuple[float, float, float]:
    """
    Space the stage takes from the seating area as ``(top, left, right)``.

    A north stage pushes the first section down, west/east stages narrow
    every section. A south stage sits behind the seating and takes nothing.
    """
    if stage is None or not stage.exists:
        return (0.0, 0.0, 0.0)
    depth = to_px(stage.length, scale)
    if stage.direction is StageDirection.NORTH:
        return (depth, 0.0, 0.0)
    if stage.direction is StageDirection.WEST:
        return (0.0, depth, 0.0)
    if stage.direction is StageDirection.EAST:
        return (0.0, 0.0, depth)
    return (0.0, 0.0, 0.0)


def section_bounds(room: RoomConfig, stage: Optional[StageConfig],
                   section: SectionConfig, scale: float) -> Tuple[float, float]:
    """Left and right pixel boundaries of a section (right may be <= left)."""
    _, left_off, right_off = stage_offsets(stage, scale)
    left = to_px(section.left_wall_distance, scale) + left_off
    right = to_px(room.width - section.right_wall_distance, scale) - right_off
    return left, right


# ----------------------------------------------------------------------
# Validation
# ----------------------------------------------------------------------

def seat_box(seat) -> Polygon:
    """Seat rectangle as a shapely polygon."""
    return box(seat.x, seat.y, seat.x + seat.width, seat.y + seat.height)


def detect_seat_overlaps(seats: list, tolerance: float = 1e-6) -> List[Tuple[str, str]]:
    """
    Return ``(id_a, id_b)`` pairs of seats whose rectangles overlap.

    Seats that merely touch (zero-area intersection) are not reported.
    """
    boxes = [seat_box(s) for s in seats]
    tree = STRtree(boxes)
    overlaps = []
    for i, b in enumerate(boxes):
        for j in tree.query(b):
            j = int(j)
            if j <= i:
                continue
            if b.intersection(boxes[j]).area > tolerance:
                overlaps.append((seats[i].id, seats[j].id))
    return overlaps


def seats_within_room(seats: list, room: RoomConfig, scale: float,
                      tolerance: float = FILL_TOLERANCE) -> bool:
    """True when every seat rectangle lies inside the room rectangle."""
    outline = box(-tolerance, -tolerance,
                  to_px(room.width, scale) + tolerance,
                  to_px(room.length, scale) + tolerance)
    return all(outline.contains(seat_box(s)) for s in seats)
