"""
datekit - Clock Module.

This module provides the source of "now" and of the local UTC offset for
every helper that depends on ambient time. Helpers accept an optional
clock and fall back to the system clock, so callers that need
deterministic results inject a FixedClock.

Classes:
    Clock: Abstract provider of the current time and local offset.
    SystemClock: Reads the operating system clock and timezone.
    FixedClock: Returns a pinned moment and offset.
"""

from abc import ABC, abstractmethod
from datetime import datetime, timedelta
from typing import Optional


class Clock(ABC):
    """Abstract provider of the current local time and local UTC offset."""

    @abstractmethod
    def now(self) -> datetime:
        """
        Returns the current local wall-clock time.

        Returns:
            Naive datetime in local time.
        """

    @abstractmethod
    def local_offset(self, moment: datetime) -> timedelta:
        """
        Returns the UTC offset of local time at the given moment.

        Positive east of Greenwich, so UTC+02:00 is timedelta(hours=2).

        Args:
            moment: Naive local or aware datetime.

        Returns:
            Offset of local time from UTC.
        """


class SystemClock(Clock):
    """Clock backed by the operating system time and timezone."""

    def now(self) -> datetime:
        return datetime.now()

    def local_offset(self, moment: datetime) -> timedelta:
        # astimezone() treats naive values as local time
        return moment.astimezone().utcoffset()


class FixedClock(Clock):
    """
    Clock pinned to one moment and one UTC offset.

    Example:
        >>> clock = FixedClock(datetime(2024, 6, 1, 12, 0), timedelta(hours=2))
        >>> clock.now()
        datetime.datetime(2024, 6, 1, 12, 0)
    """

    def __init__(self, moment: datetime, utc_offset: Optional[timedelta] = None):
        """
        Initialises the FixedClock.

        Args:
            moment: Local wall-clock time returned by now().
            utc_offset: Local UTC offset. Defaults to zero (UTC).
        """
        self._moment = moment
        self._utc_offset = utc_offset if utc_offset is not None else timedelta(0)

    def now(self) -> datetime:
        return self._moment

    def local_offset(self, moment: datetime) -> timedelta:
        return self._utc_offset


def resolve_clock(clock: Optional[Clock]) -> Clock:
    """Returns the given clock, or a SystemClock when None."""
    return clock if clock is not None else SystemClock()
