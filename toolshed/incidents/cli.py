"""Command-line entry point for the incident log scraper."""

import sys
from pathlib import Path

from toolshed.config.settings import Settings
from toolshed.incidents.exceptions import IncidentLogError, InvalidPeriodError
from toolshed.incidents.models import ReportPeriod
from toolshed.incidents.scraper import build_scraper
from toolshed.logging.logger import Log
from toolshed.usage import EXIT_FATAL, UsageArgumentParser


def build_parser() -> UsageArgumentParser:
    parser = UsageArgumentParser(
        prog="umd-incident-logs",
        usage="%(prog)s <month> <year>",
        description="Fetch UMD crime and incident logs for a month and dump them as JSON.",
    )
    parser.add_argument("month", type=int)
    parser.add_argument("year", type=int)
    parser.add_argument(
        "-o",
        "--output-dir",
        type=Path,
        default=Path("."),
        help="Directory to write <month>-<year>.json into",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="Fail on a table with an unpaired trailing row instead of dropping it",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable verbose logging")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Entry point: validate period -> fetch -> parse -> write JSON."""
    parser = build_parser()
    args = parser.parse_args(argv)

    settings = Settings()
    Log.configure(settings.log_level, verbose=args.verbose)

    try:
        period = ReportPeriod.create(
            args.month, args.year, min_year=settings.incidents_min_year
        )
    except InvalidPeriodError as exc:
        parser.error(str(exc))

    scraper = build_scraper(settings, output_dir=args.output_dir, strict=args.strict)
    try:
        scraper.scrape(period)
    except IncidentLogError as exc:
        Log.fatal(str(exc))
        sys.exit(EXIT_FATAL)


if __name__ == "__main__":
    main()
