import pytest


def make_day(weekday: int, level: str = "NONE") -> dict[str, object]:
    return {"weekday": weekday, "contributionLevel": level}


@pytest.fixture
def raw_calendar() -> dict[str, object]:
    """Three-week calendar starting on a Wednesday and ending on a Monday."""

    return {
        "weeks": [
            {"contributionDays": [make_day(day, "FIRST_QUARTILE") for day in range(3, 7)]},
            {
                "contributionDays": [
                    make_day(0),
                    make_day(1, "SECOND_QUARTILE"),
                    make_day(2, "THIRD_QUARTILE"),
                    make_day(3, "FOURTH_QUARTILE"),
                    make_day(4),
                    make_day(5),
                    make_day(6),
                ]
            },
            {"contributionDays": [make_day(0), make_day(1, "FOURTH_QUARTILE")]},
        ],
        "months": [
            {"name": "Jan", "totalWeeks": 1},
            {"name": "Feb", "totalWeeks": 2},
        ],
    }
