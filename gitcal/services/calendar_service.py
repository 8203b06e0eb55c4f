import logging
from collections.abc import Mapping
from datetime import UTC
from datetime import datetime
from typing import Any

import httpx
from pydantic import ValidationError

from gitcal.github_api import fetch_contribution_calendar
from gitcal.models import WEEKDAYS
from gitcal.models import ActivityGrid
from gitcal.models import IntensityLevel
from gitcal.models import MonthLabel
from gitcal.models import TimeWindow
from gitcal.schemas.calendar import ContributionCalendar


logger = logging.getLogger(__name__)


class InvalidGitHubTokenError(Exception):
    """Raised when GitHub rejects the provided token."""


class GitHubAPIError(Exception):
    """Raised when GitHub requests fail for non-auth reasons."""


def window_start(now: datetime, window: TimeWindow) -> datetime:
    """Return the first instant of the requested history window."""

    if window is TimeWindow.YEAR_TO_DATE:
        return now.replace(month=1, day=1, hour=0, minute=0, second=0, microsecond=0)
    if window is TimeWindow.MONTH:
        return now.replace(day=1, hour=0, minute=0, second=0, microsecond=0)

    try:
        return now.replace(year=now.year - 1)
    except ValueError:
        # Feb 29 has no counterpart in the previous year.
        return now.replace(year=now.year - 1, day=28)


def build_grid(calendar: ContributionCalendar) -> ActivityGrid:
    """Place every contribution day at ``[weekday][week]``.

    Days missing from a partial first or last week stay at ``NONE``.
    """

    rows = [[IntensityLevel.NONE] * len(calendar.weeks) for _ in range(WEEKDAYS)]
    for week_index, week in enumerate(calendar.weeks):
        for day in week.contribution_days:
            rows[day.weekday][week_index] = day.contribution_level
    return ActivityGrid.from_rows(rows)


def build_month_labels(calendar: ContributionCalendar) -> list[MonthLabel]:
    return [
        MonthLabel(name=month.name, week_span=month.total_weeks)
        for month in calendar.months
    ]


def parse_calendar(raw_calendar: Mapping[str, Any]) -> tuple[ActivityGrid, list[MonthLabel]]:
    """Validate a raw GraphQL calendar and convert it to renderer inputs."""

    calendar = ContributionCalendar.model_validate(raw_calendar)
    if not calendar.weeks:
        raise ValueError("GitHub contribution calendar has no weeks")

    grid = build_grid(calendar)
    months = build_month_labels(calendar)

    spanned = sum(month.week_span for month in months)
    if spanned != grid.week_count:
        logger.warning(
            "Month header spans %d weeks but the calendar has %d; header may be misaligned",
            spanned,
            grid.week_count,
        )
    return grid, months


def get_contribution_calendar(
    token: str,
    graphql_url: str,
    window: TimeWindow = TimeWindow.YEAR,
    username: str | None = None,
    now: datetime | None = None,
) -> tuple[ActivityGrid, list[MonthLabel]]:
    """Fetch a contribution calendar and build the grid and month labels."""

    end = now or datetime.now(UTC)
    start = window_start(end, window)

    try:
        raw_calendar = fetch_contribution_calendar(
            token=token,
            graphql_url=graphql_url,
            start=start,
            end=end,
            username=username,
        )
    except httpx.HTTPStatusError as exc:
        if exc.response.status_code in {401, 403}:
            raise InvalidGitHubTokenError from exc
        raise GitHubAPIError(
            f"GitHub responded with status {exc.response.status_code}"
        ) from exc
    except Exception as exc:
        raise GitHubAPIError(str(exc)) from exc

    try:
        return parse_calendar(raw_calendar)
    except (ValidationError, ValueError) as exc:
        raise GitHubAPIError("GitHub contribution calendar is invalid") from exc
