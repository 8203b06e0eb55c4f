import logging
from collections.abc import Mapping
from datetime import datetime
from typing import Any

import httpx


logger = logging.getLogger(__name__)

CALENDAR_FIELDS = """
        contributionsCollection(from: $from, to: $to) {
          contributionCalendar {
            weeks {
              contributionDays {
                weekday
                contributionLevel
              }
            }
            months {
              name
              totalWeeks
            }
          }
        }
"""

VIEWER_QUERY = (
    "query($from: DateTime!, $to: DateTime!) {\n  viewer {"
    + CALENDAR_FIELDS
    + "  }\n}\n"
)

USER_QUERY = (
    "query($login: String!, $from: DateTime!, $to: DateTime!) {\n  user(login: $login) {"
    + CALENDAR_FIELDS
    + "  }\n}\n"
)


def fetch_contribution_calendar(
    token: str,
    graphql_url: str,
    start: datetime,
    end: datetime,
    username: str | None = None,
) -> Mapping[str, Any]:
    """Fetch the contribution calendar of a user, or of the token owner.

    Raises:
        httpx.HTTPStatusError: If GitHub answers with an error status.
        ValueError: If the GraphQL payload is missing expected fields.
    """

    if not token:
        raise ValueError("GITHUB_TOKEN is required for GraphQL requests")

    variables: dict[str, str] = {"from": start.isoformat(), "to": end.isoformat()}
    if username:
        query = USER_QUERY
        variables["login"] = username
        root_field = "user"
    else:
        query = VIEWER_QUERY
        root_field = "viewer"

    headers = {
        "Authorization": f"Bearer {token}",
        "Accept": "application/json",
        "Content-Type": "application/json",
        "User-Agent": "gitcal",
    }

    logger.debug("Requesting %s contribution calendar from %s", root_field, graphql_url)
    response = httpx.post(
        graphql_url,
        json={"query": query, "variables": variables},
        headers=headers,
        timeout=20.0,
    )
    response.raise_for_status()

    payload = response.json()
    if not isinstance(payload, Mapping):
        raise ValueError("GitHub GraphQL response is invalid")

    if payload.get("errors"):
        raise ValueError("GitHub GraphQL returned errors")

    data = payload.get("data")
    if not isinstance(data, Mapping):
        raise ValueError("GitHub GraphQL data is missing")

    owner = data.get(root_field)
    if not isinstance(owner, Mapping):
        raise ValueError("GitHub user not found")

    collection = owner.get("contributionsCollection")
    if not isinstance(collection, Mapping):
        raise ValueError("GitHub contributionsCollection is missing")

    calendar = collection.get("contributionCalendar")
    if not isinstance(calendar, Mapping):
        raise ValueError("GitHub contributionCalendar is missing")

    return calendar
