"""Command-line entry point for the artwork batch applier."""

import argparse
import sys
from pathlib import Path

from toolshed.artwork.discovery import resolve_artwork, resolve_target_directory
from toolshed.artwork.exceptions import ArtworkError
from toolshed.artwork.runner import build_artwork_runner
from toolshed.config.settings import Settings
from toolshed.encoder.exceptions import EncoderError
from toolshed.logging.logger import Log
from toolshed.usage import EXIT_FATAL, EXIT_JOBS_FAILED, UsageArgumentParser


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid job count: '{value}'") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"job count must be positive, got {number}")
    return number


def build_parser() -> UsageArgumentParser:
    parser = UsageArgumentParser(
        prog="mp3art",
        description="Add album artwork to MP3 files in bulk.",
        add_help=False,
    )
    parser.add_argument(
        "-f",
        dest="artfile",
        type=Path,
        help="Use <file> as artwork instead of looking for common artwork files",
    )
    parser.add_argument(
        "-s",
        dest="sequential",
        action="store_true",
        help="Convert files sequentially instead of using a worker pool",
    )
    parser.add_argument("-v", dest="verbose", action="store_true", help="Be verbose")
    parser.add_argument(
        "-j",
        dest="jobs",
        type=_positive_int,
        help="Number of files to encode at once (default: CPU count)",
    )
    parser.add_argument(
        "-h", dest="help", action="store_true", help="Print this usage information"
    )
    parser.add_argument("directory", nargs="?", type=Path, default=Path("."))
    return parser


def main(argv: list[str] | None = None) -> None:
    """Entry point: parse args -> resolve encoder, directory, artwork -> run batch."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.help:
        parser.print_help_and_exit()

    settings = Settings()
    Log.configure(settings.log_level, verbose=args.verbose)

    try:
        runner = build_artwork_runner(settings, job_count=args.jobs)
        directory = resolve_target_directory(args.directory)
        artwork = resolve_artwork(directory, args.artfile, settings.artwork_candidates)
    except (ArtworkError, EncoderError) as exc:
        Log.fatal(str(exc))
        sys.exit(EXIT_FATAL)

    report = runner.run(directory, artwork, sequential=args.sequential)
    if not report.ok:
        sys.exit(EXIT_JOBS_FAILED)


if __name__ == "__main__":
    main()
