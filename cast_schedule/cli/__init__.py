"""Command-line entry point: lay out events and write a preview image."""

import argparse
import asyncio
import logging
import sys
from datetime import date, datetime, time, tzinfo
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from ..config.settings import CastScheduleSettings
from ..layout.calendar_layout import CalendarLayout
from ..layout.exceptions import LayoutConfigurationError
from ..models.event import CalendarEvent, CurrentStatus, ScheduleModel
from ..render.canvas import RenderError
from ..render.frame import compose_frame
from ..sources.protocol import CalendarError
from ..sources.static import StaticCalendarSource, load_events_file
from ..timezone.service import localize
from ..utils.logging import setup_logging
from .parser import create_parser

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_CONFIG_ERROR = 2


def sample_events(day: date, zone: tzinfo) -> List[CalendarEvent]:
    """A brunch and a reading session on ``day``."""
    return [
        CalendarEvent.create("Brunch", localize(day, time(9, 0), zone), localize(day, time(10, 30), zone)),
        CalendarEvent.create("Reading", localize(day, time(13, 0), zone), localize(day, time(13, 45), zone)),
    ]


def _apply_overrides(settings: CastScheduleSettings, args: argparse.Namespace) -> None:
    """Let command line options win over configured values."""
    view_updates: Dict[str, Any] = {}
    if args.days is not None:
        view_updates["num_days"] = args.days
    if args.time_zone is not None:
        view_updates["time_zone"] = args.time_zone
    if view_updates:
        settings.calendar_view = settings.calendar_view.model_copy(update=view_updates)

    updates: Dict[str, Any] = {}
    if args.width is not None:
        updates["width"] = args.width
    if args.height is not None:
        updates["height"] = args.height
    if args.output is not None:
        updates["output_path"] = str(args.output)
    if updates:
        settings.display = settings.display.model_copy(update=updates)


def build_layout(settings: CastScheduleSettings, start_date: Optional[date]) -> CalendarLayout:
    """Build the calendar layout described by the settings.

    Raises:
        LayoutConfigurationError: If the view cannot be laid out
    """
    view = settings.calendar_view
    try:
        config = view.to_view_config(start_date or date.today())
    except ValidationError as e:
        raise LayoutConfigurationError(f"Invalid calendar view configuration: {e}") from e

    if start_date is None:
        # "Today" is the date in the view's zone, not the machine's
        today = datetime.now(config.time_zone).date()
        config = config.model_copy(update={"start_date": today})
    return CalendarLayout(config)


def main(argv: Optional[List[str]] = None) -> int:
    """Run the command line interface.

    Args:
        argv: Arguments without the program name (defaults to ``sys.argv[1:]``)

    Returns:
        Process exit code: 0 on success, 2 for configuration errors, 1 otherwise
    """
    args = create_parser().parse_args(argv)

    try:
        settings = CastScheduleSettings(config_file_path=args.config)
    except (ValidationError, FileNotFoundError) as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    _apply_overrides(settings, args)
    console_level = "DEBUG" if args.debug else "VERBOSE" if args.verbose else None
    setup_logging(settings, console_level=console_level)

    try:
        layout = build_layout(settings, args.start_date)
    except LayoutConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    zone = layout.config.time_zone
    try:
        if args.events is not None:
            events = load_events_file(args.events, zone)
        elif args.sample:
            events = sample_events(layout.config.start_date, zone)
        else:
            events = []
        source = StaticCalendarSource(events)
        visible = asyncio.run(source.get_events_on(layout.visible_range()))
    except CalendarError as e:
        logger.error(f"Could not load events: {e}")
        return EXIT_ERROR

    model = ScheduleModel(events=visible, status=CurrentStatus(has_meeting=bool(visible)))
    canvas = compose_frame(model, layout, settings.display)

    try:
        output = canvas.save(settings.display.output_path)
    except RenderError as e:
        logger.error(f"Could not render image: {e}")
        return EXIT_ERROR

    print(output)
    return EXIT_OK


__all__ = ["build_layout", "create_parser", "main", "sample_events"]
