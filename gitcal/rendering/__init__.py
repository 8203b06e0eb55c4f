from gitcal.rendering.calendar import Calendar
from gitcal.rendering.calendar import render
from gitcal.rendering.palette import Palette
from gitcal.rendering.palette import parse_hex_color

__all__ = ["Calendar", "Palette", "parse_hex_color", "render"]
