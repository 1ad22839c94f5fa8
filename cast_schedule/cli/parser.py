"""Command-line argument parsing for Cast Schedule."""

import argparse
from datetime import date
from pathlib import Path

from .. import __version__


def parse_date(value: str) -> date:
    """Parse an ISO ``YYYY-MM-DD`` date for argparse.

    Raises:
        argparse.ArgumentTypeError: If the value is not an ISO date
    """
    try:
        return date.fromisoformat(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"Invalid date '{value}', expected YYYY-MM-DD") from e


def positive_int(value: str) -> int:
    """Parse a positive integer for argparse."""
    try:
        number = int(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"Expected an integer, got '{value}'") from e
    if number <= 0:
        raise argparse.ArgumentTypeError(f"Expected a positive integer, got {number}")
    return number


def create_parser() -> argparse.ArgumentParser:
    """Create command line argument parser.

    Returns:
        argparse.ArgumentParser: Configured parser

    Example:
        >>> parser = create_parser()
        >>> args = parser.parse_args(["--events", "week.yaml", "--days", "5"])
        >>> args.days
        5
    """
    parser = argparse.ArgumentParser(
        prog="cast-schedule",
        description="Cast Schedule - render calendar events as a multi-day image",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s --sample                        # Preview today's sample events
  %(prog)s --events week.yaml --days 5     # Five day columns from a YAML events file
  %(prog)s --events week.yaml --start-date 2022-09-01 --output week.png
        """,
    )

    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}", help="Show version information"
    )

    parser.add_argument(
        "--config", type=Path, default=None, metavar="FILE", help="YAML configuration file"
    )

    # Event input
    input_group = parser.add_argument_group("events", "Where events come from")
    source = input_group.add_mutually_exclusive_group()
    source.add_argument(
        "--events", type=Path, default=None, metavar="FILE", help="YAML file with events to draw"
    )
    source.add_argument(
        "--sample", action="store_true", help="Draw a couple of sample events for today"
    )

    # Calendar view
    view_group = parser.add_argument_group("view", "Calendar view options")
    view_group.add_argument(
        "--start-date", type=parse_date, default=None, help="First day shown (default: today)"
    )
    view_group.add_argument(
        "--days", type=positive_int, default=None, help="Number of day columns"
    )
    view_group.add_argument(
        "--time-zone", default=None, help="IANA time zone of the view (e.g. Europe/Berlin)"
    )

    # Output
    output_group = parser.add_argument_group("output", "Image output options")
    output_group.add_argument(
        "--output", "-o", type=Path, default=None, help="PNG file to write"
    )
    output_group.add_argument("--width", type=positive_int, default=None, help="Image width")
    output_group.add_argument("--height", type=positive_int, default=None, help="Image height")

    # Logging
    logging_group = parser.add_argument_group("logging", "Logging options")
    verbosity = logging_group.add_mutually_exclusive_group()
    verbosity.add_argument(
        "--verbose", "-v", action="store_true", help="Enable verbose logging"
    )
    verbosity.add_argument("--debug", action="store_true", help="Enable debug logging")

    return parser
