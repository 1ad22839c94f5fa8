"""Definite and indefinite time ranges over time-zone-aware instants.

Instants are compared and subtracted as absolute points in time. Python
compares two datetimes sharing one tzinfo by their wall-clock values, which
is wrong across a DST transition, so every comparison and every piece of
arithmetic here goes through UTC first.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone, tzinfo
from typing import Optional, Union


def as_utc(instant: datetime) -> datetime:
    """Return the absolute UTC form of an aware instant.

    Raises:
        ValueError: If the instant is timezone-naive
    """
    if instant.tzinfo is None or instant.utcoffset() is None:
        raise ValueError(f"Expected a timezone-aware datetime, got {instant!r}")
    return instant.astimezone(timezone.utc)


def earliest(first: datetime, second: datetime) -> datetime:
    return first if as_utc(first) <= as_utc(second) else second


def latest(first: datetime, second: datetime) -> datetime:
    return first if as_utc(first) >= as_utc(second) else second


def shift(instant: datetime, delta: timedelta) -> datetime:
    """Move an instant by an absolute duration, keeping its time zone."""
    return (as_utc(instant) + delta).astimezone(instant.tzinfo)


@dataclass(frozen=True)
class Unbounded:
    """An open end of a time range."""


@dataclass(frozen=True)
class BoundedAt:
    """A known end of a time range."""

    instant: datetime

    def with_timezone(self, zone: tzinfo) -> BoundedAt:
        return BoundedAt(self.instant.astimezone(zone))


Bound = Union[Unbounded, BoundedAt]

UNBOUNDED = Unbounded()


def bound_from(instant: Optional[datetime]) -> Bound:
    """Wrap an optional instant in the matching bound variant."""
    if instant is None:
        return UNBOUNDED
    return BoundedAt(instant)


@dataclass(frozen=True)
class DefiniteTimeRange:
    """A closed interval with both endpoints known.

    ``start <= end`` is assumed by consumers but not enforced.
    """

    start: datetime
    end: datetime

    def duration(self) -> timedelta:
        """Absolute length of the range; negative when ``start > end``."""
        return as_utc(self.end) - as_utc(self.start)

    def with_timezone(self, zone: tzinfo) -> DefiniteTimeRange:
        """Re-express both endpoints in another zone without moving them."""
        return DefiniteTimeRange(
            start=self.start.astimezone(zone),
            end=self.end.astimezone(zone),
        )

    def to_indefinite(self) -> IndefiniteTimeRange:
        return IndefiniteTimeRange(start=BoundedAt(self.start), end=BoundedAt(self.end))

    def contains(self, instant: datetime) -> bool:
        """Half-open membership test: ``start <= instant < end``."""
        return as_utc(self.start) <= as_utc(instant) < as_utc(self.end)


@dataclass(frozen=True)
class IndefiniteTimeRange:
    """An interval whose start and/or end may be unbounded."""

    start: Bound = UNBOUNDED
    end: Bound = UNBOUNDED

    @classmethod
    def between(
        cls, start: Optional[datetime] = None, end: Optional[datetime] = None
    ) -> IndefiniteTimeRange:
        """Build a range from optional instants; ``None`` means unbounded."""
        return cls(start=bound_from(start), end=bound_from(end))

    @property
    def start_instant(self) -> Optional[datetime]:
        return self.start.instant if isinstance(self.start, BoundedAt) else None

    @property
    def end_instant(self) -> Optional[datetime]:
        return self.end.instant if isinstance(self.end, BoundedAt) else None

    def is_open(self) -> bool:
        return isinstance(self.start, Unbounded) or isinstance(self.end, Unbounded)

    def clamp_to(self, bounds: DefiniteTimeRange) -> DefiniteTimeRange:
        """Restrict this range to ``bounds``.

        A missing start becomes ``bounds.start`` and a missing end becomes
        ``bounds.end``; known endpoints are pulled inside the bounds.
        """
        if isinstance(self.start, BoundedAt):
            start = latest(self.start.instant, bounds.start)
        else:
            start = bounds.start

        if isinstance(self.end, BoundedAt):
            end = earliest(self.end.instant, bounds.end)
        else:
            end = bounds.end

        return DefiniteTimeRange(start=start, end=end)

    def with_timezone(self, zone: tzinfo) -> IndefiniteTimeRange:
        """Re-express the known endpoints in another zone."""
        start = self.start.with_timezone(zone) if isinstance(self.start, BoundedAt) else self.start
        end = self.end.with_timezone(zone) if isinstance(self.end, BoundedAt) else self.end
        return IndefiniteTimeRange(start=start, end=end)

    def overlaps(self, window: DefiniteTimeRange) -> bool:
        """Check whether any part of this range falls inside ``[window.start, window.end)``.

        An open end always reaches the window on that side.
        """
        if isinstance(self.start, BoundedAt) and as_utc(self.start.instant) >= as_utc(window.end):
            return False
        if isinstance(self.end, BoundedAt) and as_utc(self.end.instant) <= as_utc(window.start):
            return False
        return True
