from dataclasses import dataclass
from enum import Enum

from gitcal.errors import StyleConflictError


WEEKDAYS = 7


class IntensityLevel(str, Enum):
    """Contribution level of a single day, as reported by GitHub."""

    NONE = "NONE"
    FIRST_QUARTILE = "FIRST_QUARTILE"
    SECOND_QUARTILE = "SECOND_QUARTILE"
    THIRD_QUARTILE = "THIRD_QUARTILE"
    FOURTH_QUARTILE = "FOURTH_QUARTILE"


class TileStyle(Enum):
    """Glyph and column width used for one grid cell."""

    SMALL_SQUARE = (" ■", 2)
    FULL_BLOCK = (" █", 2)
    HALF_BLOCK = ("█", 1)
    CIRCLE = (" ●", 2)

    @property
    def tile(self) -> str:
        return self.value[0]

    @property
    def width(self) -> int:
        return self.value[1]

    @property
    def endcap(self) -> bool:
        return self is TileStyle.CIRCLE

    @classmethod
    def from_flags(
        cls, block: bool = False, half: bool = False, circle: bool = False
    ) -> "TileStyle":
        """Resolve the mutually exclusive style flags to a single style.

        Raises:
            StyleConflictError: If more than one flag is set.
        """

        requested = [
            name
            for name, enabled in (("block", block), ("half", half), ("circle", circle))
            if enabled
        ]
        if len(requested) > 1:
            raise StyleConflictError(requested)

        if block:
            return cls.FULL_BLOCK
        if half:
            return cls.HALF_BLOCK
        if circle:
            return cls.CIRCLE
        return cls.SMALL_SQUARE


class TimeWindow(str, Enum):
    YEAR = "year"
    YEAR_TO_DATE = "ytd"
    MONTH = "month"


@dataclass(frozen=True)
class MonthLabel:
    name: str
    week_span: int


@dataclass(frozen=True)
class DisplayOptions:
    show_weekday_labels: bool = True
    show_month_header: bool = True


@dataclass(frozen=True)
class ActivityGrid:
    """Intensity levels indexed as ``rows[weekday][week]``, Sunday first."""

    rows: tuple[tuple[IntensityLevel, ...], ...]

    def __post_init__(self) -> None:
        if len(self.rows) != WEEKDAYS:
            raise ValueError(f"activity grid needs {WEEKDAYS} rows, got {len(self.rows)}")
        widths = {len(row) for row in self.rows}
        if len(widths) != 1:
            raise ValueError("activity grid rows must have equal length")

    @classmethod
    def from_rows(cls, rows: list[list[IntensityLevel]]) -> "ActivityGrid":
        return cls(rows=tuple(tuple(row) for row in rows))

    @classmethod
    def filled(cls, weeks: int, level: IntensityLevel = IntensityLevel.NONE) -> "ActivityGrid":
        return cls.from_rows([[level] * weeks for _ in range(WEEKDAYS)])

    @property
    def week_count(self) -> int:
        return len(self.rows[0])
