from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field

from gitcal.models import IntensityLevel


class ContributionDay(BaseModel):
    """Single day of the GraphQL contribution calendar."""

    model_config = ConfigDict(populate_by_name=True)

    weekday: int = Field(ge=0, le=6)
    contribution_level: IntensityLevel = Field(alias="contributionLevel")


class ContributionWeek(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    contribution_days: list[ContributionDay] = Field(alias="contributionDays")


class CalendarMonth(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str
    total_weeks: int = Field(alias="totalWeeks", ge=1)


class ContributionCalendar(BaseModel):
    """Weeks and month headers of a user's contribution calendar."""

    weeks: list[ContributionWeek]
    months: list[CalendarMonth]
