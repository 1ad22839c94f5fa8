"""In-memory calendar source and YAML events files."""

import logging
from datetime import datetime, tzinfo
from pathlib import Path
from typing import Iterable, List, Optional, Union

import yaml
from pydantic import BaseModel, ValidationError

from ..models.event import CalendarEvent
from ..models.time_range import DefiniteTimeRange
from .protocol import EventFileError

logger = logging.getLogger(__name__)


class EventRecord(BaseModel):
    """One entry of an events file; ``start``/``end`` may be omitted."""

    name: str
    start: Optional[datetime] = None
    end: Optional[datetime] = None

    def to_event(self, default_zone: tzinfo) -> CalendarEvent:
        return CalendarEvent.create(
            self.name,
            start=_aware(self.start, default_zone),
            end=_aware(self.end, default_zone),
        )


def _aware(instant: Optional[datetime], default_zone: tzinfo) -> Optional[datetime]:
    # Naive times are taken to be wall-clock times in the default zone
    if instant is None or instant.tzinfo is not None:
        return instant
    if hasattr(default_zone, "localize"):
        return default_zone.localize(instant)  # type: ignore[attr-defined]
    return instant.replace(tzinfo=default_zone)


class StaticCalendarSource:
    """Calendar source backed by a fixed list of events."""

    def __init__(self, events: Iterable[CalendarEvent] = ()) -> None:
        self._events = list(events)

    def __len__(self) -> int:
        return len(self._events)

    async def get_events_on(self, window: DefiniteTimeRange) -> List[CalendarEvent]:
        """Return stored events overlapping ``[window.start, window.end)`` in stored order."""
        matching = [event for event in self._events if event.times.overlaps(window)]
        logger.debug(
            f"{len(matching)} of {len(self._events)} event(s) overlap "
            f"{window.start.isoformat()} - {window.end.isoformat()}"
        )
        return matching


def parse_events(data: object, default_zone: tzinfo) -> List[CalendarEvent]:
    """Turn loaded YAML data into events.

    Accepts either a list of event mappings or a mapping with an ``events``
    list.

    Raises:
        EventFileError: If the data has the wrong shape or an entry is invalid
    """
    if isinstance(data, dict):
        data = data.get("events", [])
    if data is None:
        return []
    if not isinstance(data, list):
        raise EventFileError("Expected a list of events")

    events = []
    for index, entry in enumerate(data):
        try:
            record = EventRecord.model_validate(entry)
        except ValidationError as e:
            raise EventFileError(f"Invalid event at index {index}: {e}") from e
        events.append(record.to_event(default_zone))
    return events


def load_events_file(path: Union[str, Path], default_zone: tzinfo) -> List[CalendarEvent]:
    """Load events from a YAML file.

    Example file::

        events:
          - name: Brunch
            start: 2022-09-01T09:00:00-07:00
            end: 2022-09-01T10:30:00-07:00
          - name: Out of office
            start: 2022-09-02T12:00:00

    Args:
        path: YAML file to read
        default_zone: Zone for times written without an offset

    Returns:
        Events in file order

    Raises:
        EventFileError: If the file cannot be read or parsed
    """
    events_path = Path(path)
    try:
        with events_path.open(encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise EventFileError(f"Could not read events from {events_path}: {e}") from e

    events = parse_events(data, default_zone)
    logger.info(f"Loaded {len(events)} event(s) from {events_path}")
    return events
