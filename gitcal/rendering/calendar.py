"""Colorized text layout of a contribution calendar.

The renderer is a pure function of its inputs. Callers must pass a grid with
seven rows of equal length (``ActivityGrid`` enforces the shape) and a month
list whose week spans add up to the grid's week count; a mismatch in the spans
only misaligns the header, it is not detected here.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from dataclasses import field
from dataclasses import replace
from typing import TextIO

from rich.color import ColorSystem
from rich.console import Console
from rich.style import Style

from gitcal.models import ActivityGrid
from gitcal.models import DisplayOptions
from gitcal.models import IntensityLevel
from gitcal.models import MonthLabel
from gitcal.models import TileStyle
from gitcal.rendering.palette import Palette


GUTTER_WIDTH = 4
WEEKDAY_LABELS = {1: " Mon", 3: " Wed", 5: " Fri"}
COLOR_SYSTEMS = {
    "standard": ColorSystem.STANDARD,
    "256": ColorSystem.EIGHT_BIT,
    "truecolor": ColorSystem.TRUECOLOR,
    "windows": ColorSystem.WINDOWS,
}


def detect_color_system(file: TextIO) -> ColorSystem | None:
    """Return the color system a stream supports, or None for plain text.

    Honors ``NO_COLOR`` and ``FORCE_COLOR``; streams that are not terminals get
    no escape codes.
    """

    console = Console(file=file)
    if console.no_color or console.color_system is None:
        return None
    return COLOR_SYSTEMS[console.color_system]


def render(
    grid: ActivityGrid,
    months: Sequence[MonthLabel],
    palette: Palette,
    style: TileStyle = TileStyle.SMALL_SQUARE,
    options: DisplayOptions = DisplayOptions(),
    color_system: ColorSystem | None = ColorSystem.TRUECOLOR,
) -> str:
    """Render the grid as lines of colored tiles.

    With ``color_system=None`` the same layout is produced without ANSI codes.
    """

    background = Style(bgcolor=palette.base)
    label_style = Style(color=palette.text, bgcolor=palette.base)

    def fill(width: int) -> str:
        return background.render(" " * width, color_system=color_system)

    def label(text: str) -> str:
        return label_style.render(text, color_system=color_system)

    tiles = {
        level: Style(color=palette.level_color(level), bgcolor=palette.base).render(
            style.tile, color_system=color_system
        )
        for level in IntensityLevel
    }

    lines: list[str] = []

    if options.show_month_header:
        parts = []
        if options.show_weekday_labels:
            parts.append(fill(GUTTER_WIDTH))
        parts.append(fill(1))
        for month in months:
            span = month.week_span * style.width
            if span > len(month.name):
                parts.append(label(month.name))
                parts.append(fill(span - len(month.name)))
            else:
                # Labels that do not fit are dropped, never truncated.
                parts.append(fill(span))
        if style.endcap:
            parts.append(fill(1))
        lines.append("".join(parts))

    for weekday, row in enumerate(grid.rows):
        parts = []
        if options.show_weekday_labels:
            if weekday in WEEKDAY_LABELS:
                parts.append(label(WEEKDAY_LABELS[weekday]))
            else:
                parts.append(fill(GUTTER_WIDTH))
        if style.endcap:
            parts.append(fill(1))
        parts.extend(tiles[level] for level in row)
        parts.append(fill(1))
        lines.append("".join(parts))

    if options.show_month_header:
        # Gutter (or the header's leading space) plus every row's trailing space.
        width = grid.week_count * style.width
        width += GUTTER_WIDTH + 1 if options.show_weekday_labels else 1
        width += 1 if style.endcap else 0
        lines.append(fill(width))

    return "".join(f"{line}\n" for line in lines)


@dataclass(frozen=True)
class Calendar:
    """Everything needed for one render pass, built with ``with_*`` calls."""

    grid: ActivityGrid = field(default_factory=lambda: ActivityGrid.filled(0))
    months: tuple[MonthLabel, ...] = ()
    palette: Palette = field(default_factory=Palette)
    style: TileStyle = TileStyle.SMALL_SQUARE
    options: DisplayOptions = DisplayOptions()

    def with_grid(self, grid: ActivityGrid) -> "Calendar":
        return replace(self, grid=grid)

    def with_months(self, months: Sequence[MonthLabel]) -> "Calendar":
        return replace(self, months=tuple(months))

    def with_palette(self, palette: Palette) -> "Calendar":
        return replace(self, palette=palette)

    def with_style(self, style: TileStyle) -> "Calendar":
        return replace(self, style=style)

    def with_show_days(self, show_days: bool) -> "Calendar":
        return replace(self, options=replace(self.options, show_weekday_labels=show_days))

    def with_show_months(self, show_months: bool) -> "Calendar":
        return replace(self, options=replace(self.options, show_month_header=show_months))

    def render(self, color_system: ColorSystem | None = ColorSystem.TRUECOLOR) -> str:
        return render(
            self.grid,
            self.months,
            self.palette,
            style=self.style,
            options=self.options,
            color_system=color_system,
        )

    def __str__(self) -> str:
        return self.render()
