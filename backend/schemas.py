"""Pydantic schemas for API request/response validation."""

from typing import Annotated, Literal, Optional

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from services.seating_engine import Guest, RoomConfig, Seat, SectionConfig, StageConfig


HexColor = Annotated[str, Field(pattern=r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")]


class CamelModel(BaseModel):
    """Accepts and emits camelCase keys, also accepts snake_case input."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True


# ---------- Venue ----------
class RoomIn(CamelModel):
    width: float = Field(..., gt=0, description="meters")
    length: float = Field(..., gt=0, description="meters")

    def to_engine(self) -> RoomConfig:
        return RoomConfig(width=self.width, length=self.length)


class StageIn(CamelModel):
    exists: bool = False
    width: float = Field(0.0, ge=0)
    length: float = Field(0.0, ge=0)
    direction: Literal["north", "south", "east", "west"] = "north"

    def to_engine(self) -> StageConfig:
        return StageConfig(exists=self.exists, width=self.width,
                           length=self.length, direction=self.direction)


class SectionIn(CamelModel):
    name: str
    left_wall_distance: float = Field(0.0, ge=0)
    right_wall_distance: float = Field(0.0, ge=0)
    previous_section_distance: float = Field(0.0, ge=0)
    rows: int = Field(..., gt=0)
    max_continuous_seats: int = Field(..., gt=0)
    seat_width: float = Field(..., gt=0)
    seat_length: float = Field(..., gt=0)
    seat_left_right_spacing: float = Field(0.0, ge=0)
    seat_front_back_spacing: float = Field(0.0, ge=0)
    aisle_width: float = Field(0.0, ge=0)

    def to_engine(self) -> SectionConfig:
        return SectionConfig(**self.model_dump())


# ---------- Seats & guests ----------
class SeatModel(CamelModel):
    id: str
    x: float
    y: float
    width: float
    height: float
    section: str
    section_index: int
    row: int
    col: int
    occupied: bool = False
    vip: bool = False
    selected: bool = False
    guest_id: Optional[str] = None
    guest_number: Optional[str] = None
    guest_name: Optional[str] = None
    guest_unit: Optional[str] = None
    assigned_section: Optional[str] = None
    section_color: Optional[HexColor] = None
    fill: Optional[str] = None

    def to_engine(self) -> Seat:
        return Seat.from_dict(self.model_dump())


class GuestModel(CamelModel):
    id: str
    number: str
    assigned_section: str
    name: Optional[str] = None
    unit: Optional[str] = None
    seat_id: Optional[str] = None

    def to_engine(self) -> Guest:
        return Guest.from_dict(self.model_dump())


class EmptyRow(CamelModel):
    section_index: int
    section: str
    row: int


# ---------- Layout ----------
class LayoutRequest(CamelModel):
    room: RoomIn
    stage: Optional[StageIn] = None
    sections: list[SectionIn] = []
    previous_seats: list[SeatModel] = []
    seed: Optional[int] = Field(None, description="Seed for demo occupancy of new seats")
    scale: Optional[float] = Field(None, gt=0, description="Pixels per meter")


class LayoutResponse(CamelModel):
    seats: list[SeatModel]
    seat_count: int
    empty_rows: list[EmptyRow] = []
    warnings: list[str] = []
    stage: Optional[tuple[float, float, float, float]] = Field(None, description="Stage rectangle x, y, w, h in px")


# ---------- Roster ----------
class RosterImportRequest(CamelModel):
    rows: list[dict]


class RosterImportResponse(CamelModel):
    guests: list[GuestModel]
    section_colors: dict[str, str]


# ---------- Assignment & gestures ----------
class CollectionsIn(CamelModel):
    seats: list[SeatModel]
    guests: list[GuestModel] = []


class CollectionsOut(CamelModel):
    seats: list[SeatModel]
    guests: list[GuestModel] = []


class AssignRequest(CollectionsIn):
    section_order: Optional[list[str]] = None
    section_colors: Optional[dict[str, HexColor]] = None


class AssignResponse(CollectionsOut):
    unplaced: list[GuestModel] = []
    placed_count: int = 0


class SwapRequest(CollectionsIn):
    seat_a: str
    seat_b: str


class SwapResponse(CollectionsOut):
    swapped: bool = False


class SelectRequest(CamelModel):
    seats: list[SeatModel]
    seat_id: str


class SelectResponse(CamelModel):
    seats: list[SeatModel]
    selected: Optional[SeatModel] = None


class OccupancyRequest(CamelModel):
    seats: list[SeatModel]
    seed: Optional[int] = None


class OccupancyResponse(CamelModel):
    seats: list[SeatModel]
    occupied_count: int
