import re
from collections.abc import Mapping
from dataclasses import dataclass
from dataclasses import replace

from rich.color import Color

from gitcal.errors import InvalidColorError
from gitcal.errors import UnknownPaletteSlotError
from gitcal.models import IntensityLevel


HEX_COLOR_PATTERN = re.compile(r"#?([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})")

PALETTE_SLOTS = ("text", "base", "color0", "color1", "color2", "color3", "color4")

LEVEL_SLOTS: dict[IntensityLevel, str] = {
    IntensityLevel.NONE: "color0",
    IntensityLevel.FIRST_QUARTILE: "color1",
    IntensityLevel.SECOND_QUARTILE: "color2",
    IntensityLevel.THIRD_QUARTILE: "color3",
    IntensityLevel.FOURTH_QUARTILE: "color4",
}


def parse_hex_color(text: str) -> Color:
    """Parse a ``RRGGBB`` or ``#RRGGBB`` string into a truecolor value.

    Raises:
        InvalidColorError: If the string is not six hex digits.
    """

    match = HEX_COLOR_PATTERN.fullmatch(text.strip())
    if match is None:
        raise InvalidColorError(text)

    red, green, blue = (int(part, 16) for part in match.groups())
    return Color.from_rgb(red, green, blue)


@dataclass(frozen=True)
class Palette:
    """Colors used by the calendar: text, background and five levels."""

    text: Color = Color.parse("white")
    base: Color = Color.from_rgb(14, 17, 33)
    color0: Color = Color.from_rgb(23, 27, 33)
    color1: Color = Color.from_rgb(31, 67, 43)
    color2: Color = Color.from_rgb(46, 108, 56)
    color3: Color = Color.from_rgb(81, 163, 78)
    color4: Color = Color.from_rgb(108, 208, 99)

    def with_text(self, hex_color: str) -> "Palette":
        return replace(self, text=parse_hex_color(hex_color))

    def with_base(self, hex_color: str) -> "Palette":
        return replace(self, base=parse_hex_color(hex_color))

    def with_color0(self, hex_color: str) -> "Palette":
        return replace(self, color0=parse_hex_color(hex_color))

    def with_color1(self, hex_color: str) -> "Palette":
        return replace(self, color1=parse_hex_color(hex_color))

    def with_color2(self, hex_color: str) -> "Palette":
        return replace(self, color2=parse_hex_color(hex_color))

    def with_color3(self, hex_color: str) -> "Palette":
        return replace(self, color3=parse_hex_color(hex_color))

    def with_color4(self, hex_color: str) -> "Palette":
        return replace(self, color4=parse_hex_color(hex_color))

    def with_overrides(self, overrides: Mapping[str, str | None]) -> "Palette":
        """Apply hex overrides keyed by slot name, skipping unset slots."""

        changes: dict[str, Color] = {}
        for slot, hex_color in overrides.items():
            if slot not in PALETTE_SLOTS:
                raise UnknownPaletteSlotError(slot)
            if hex_color is not None:
                changes[slot] = parse_hex_color(hex_color)
        return replace(self, **changes)

    def level_color(self, level: IntensityLevel) -> Color:
        return getattr(self, LEVEL_SLOTS[level])
