import argparse
import logging
import sys
from collections.abc import Sequence

from pydantic import ValidationError

from gitcal.core.observability import configure_logging
from gitcal.core.observability import init_sentry
from gitcal.errors import ConfigError
from gitcal.models import TileStyle
from gitcal.models import TimeWindow
from gitcal.rendering.calendar import Calendar
from gitcal.rendering.calendar import detect_color_system
from gitcal.rendering.palette import PALETTE_SLOTS
from gitcal.rendering.palette import Palette
from gitcal.services.calendar_service import GitHubAPIError
from gitcal.services.calendar_service import InvalidGitHubTokenError
from gitcal.services.calendar_service import get_contribution_calendar
from gitcal.settings import Settings


logger = logging.getLogger(__name__)

COLOR_HELP = {
    "base": "Set base color",
    "text": "Set text color",
    "color0": "Set color for no contributions",
    "color1": "Set color for first quartile",
    "color2": "Set color for second quartile",
    "color3": "Set color for third quartile",
    "color4": "Set color for fourth quartile",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gitcal",
        description="A CLI tool for calendar visualization",
    )
    parser.add_argument("--username", help="GitHub username (defaults to token owner)")
    parser.add_argument(
        "--token",
        help="GitHub PAT token (uses $GITHUB_TOKEN if not specified)",
    )

    shape = parser.add_mutually_exclusive_group()
    shape.add_argument("--block", action="store_true", help="Use block icons")
    shape.add_argument(
        "--half", action="store_true", help="Use block icons without spaces"
    )
    shape.add_argument("--circle", action="store_true", help="Use circle icons")

    for slot in PALETTE_SLOTS:
        parser.add_argument(f"--{slot}", metavar="HEX", help=COLOR_HELP[slot])

    window = parser.add_mutually_exclusive_group()
    window.add_argument(
        "--ytd",
        dest="window",
        action="store_const",
        const=TimeWindow.YEAR_TO_DATE,
        help="Display data since the start of the year",
    )
    window.add_argument(
        "--month",
        dest="window",
        action="store_const",
        const=TimeWindow.MONTH,
        help="Display the past month's worth of data",
    )
    parser.set_defaults(window=TimeWindow.YEAR)

    parser.add_argument(
        "--hide-days", action="store_true", help="Hide day-of-the-week string"
    )
    parser.add_argument(
        "--hide-months", action="store_true", help="Hide months in header"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log debug output to stderr"
    )
    return parser


def build_calendar_config(args: argparse.Namespace) -> Calendar:
    """Resolve style and palette flags before anything is fetched.

    Raises:
        ConfigError: If a color is malformed or styles conflict.
    """

    style = TileStyle.from_flags(block=args.block, half=args.half, circle=args.circle)
    palette = Palette().with_overrides({slot: getattr(args, slot) for slot in PALETTE_SLOTS})
    return (
        Calendar()
        .with_style(style)
        .with_palette(palette)
        .with_show_days(not args.hide_days)
        .with_show_months(not args.hide_months)
    )


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        calendar = build_calendar_config(args)
    except ConfigError as exc:
        parser.error(str(exc))

    try:
        settings = Settings()
    except ValidationError as exc:
        fields = ", ".join(
            ".".join(str(part) for part in error["loc"]) for error in exc.errors()
        )
        print(f"Invalid environment configuration: {fields}", file=sys.stderr)
        return 2

    configure_logging(settings.log_level, verbose=args.verbose)
    init_sentry(settings)

    token = args.token or settings.github_token
    if not token:
        print("Set $GITHUB_TOKEN or use the --token argument!", file=sys.stderr)
        return 1

    try:
        grid, months = get_contribution_calendar(
            token=token,
            graphql_url=settings.github_graphql_url,
            window=args.window,
            username=args.username,
        )
    except InvalidGitHubTokenError:
        print("GitHub token is invalid", file=sys.stderr)
        return 1
    except GitHubAPIError as exc:
        logger.debug("Calendar fetch failed", exc_info=exc)
        print(f"GitHub API request failed: {exc}", file=sys.stderr)
        return 1

    calendar = calendar.with_grid(grid).with_months(months)
    sys.stdout.write(calendar.render(color_system=detect_color_system(sys.stdout)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
