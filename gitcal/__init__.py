"""Terminal rendering of GitHub contribution calendars."""

__version__ = "0.1.0"
