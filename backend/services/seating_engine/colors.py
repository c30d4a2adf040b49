"""
Section colors for assigned guests and the shade variants used for display.
"""

from typing import Dict, Iterable, NamedTuple, Optional

PALETTE = (
    "#4e79a7",
    "#f28e2b",
    "#e15759",
    "#76b7b2",
    "#59a14f",
    "#edc948",
    "#b07aa1",
    "#ff9da7",
    "#9c755f",
    "#bab0ac",
)

EMPTY_SEAT_COLOR = "#d9d9d9"


class RGB(NamedTuple):
    r: int
    g: int
    b: int

    @classmethod
    def from_hex(cls, value: str) -> "RGB":
        value = value.lstrip("#")
        if len(value) == 3:
            value = "".join(ch * 2 for ch in value)
        if len(value) != 6:
            raise ValueError(f"Not a hex color: {value!r}")
        return cls(int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16))

    def to_hex(self) -> str:
        return "#{:02x}{:02x}{:02x}".format(*self)


def _clamp(v: float) -> int:
    return max(0, min(255, int(round(v))))


def lighten(color: RGB, amount: float) -> RGB:
    """Move each channel ``amount`` (0..1) of the way towards white."""
    return RGB(*(_clamp(c + (255 - c) * amount) for c in color))


def darken(color: RGB, amount: float) -> RGB:
    """Scale each channel down by ``amount`` (0..1)."""
    return RGB(*(_clamp(c * (1 - amount)) for c in color))


def build_section_color_map(section_names: Iterable[str],
                            palette=PALETTE) -> Dict[str, str]:
    """Distinct names in first-seen order, colored cyclically from *palette*."""
    colors: Dict[str, str] = {}
    for name in section_names:
        if name not in colors:
            colors[name] = palette[len(colors) % len(palette)]
    return colors


def seat_fill(seat, occupied_shade: float = 0.25, selected_tint: float = 0.4) -> str:
    """Display color for a seat: its guest's section color, or the empty color."""
    base: Optional[str] = seat.section_color or EMPTY_SEAT_COLOR
    rgb = RGB.from_hex(base)
    if seat.selected:
        rgb = lighten(rgb, selected_tint)
    elif seat.occupied:
        rgb = darken(rgb, occupied_shade)
    return rgb.to_hex()
