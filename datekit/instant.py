"""
datekit - Instant Module.

This module defines what the library treats as a date instant: a
datetime.datetime, or the INVALID_DATE sentinel produced by bad calendar
input. It also holds the two string parsers and the conversions to epoch
milliseconds shared by the other modules.

Naive datetimes are local wall-clock time, aware datetimes carry their
own offset. Nothing here raises for bad calendar input; callers check
is_valid_date() before trusting a derived instant.

Classes:
    InvalidDate: Type of the INVALID_DATE sentinel.
"""

import logging
from datetime import date, datetime, timedelta, timezone
from typing import Optional, Union

from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

from datekit.clock import Clock, resolve_clock

logger = logging.getLogger(__name__)

UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
ONE_MILLISECOND = timedelta(milliseconds=1)


class InvalidDate:
    """
    Sentinel for an instant built from unparseable or out-of-range input.

    There is a single instance, INVALID_DATE. It is falsy and renders as
    "Invalid Date".
    """

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "INVALID_DATE"

    def __str__(self) -> str:
        return "Invalid Date"


INVALID_DATE = InvalidDate()

Instant = Union[datetime, InvalidDate]
DateSource = Union[datetime, date, str, InvalidDate, None]


def is_valid_date(moment: Instant) -> bool:
    """
    Checks whether an instant is a usable datetime.

    Args:
        moment: Instant to check.

    Returns:
        True unless the instant is INVALID_DATE.
    """
    return isinstance(moment, datetime)


def get_current_date(clock: Optional[Clock] = None) -> datetime:
    """
    Returns the current local time.

    Args:
        clock: Time source. Defaults to the system clock.

    Returns:
        Naive local datetime.
    """
    return resolve_clock(clock).now()


def parse_date(date_str: str) -> Instant:
    """
    Parses a "YYYY-MM-DD" string into a local midnight datetime.

    Components are not range-checked: they are normalised the way
    calendar arithmetic would, so "2023-01-32" is 1 February 2023 and
    "2023-00-15" is 15 December 2022. Components beyond the third are
    ignored.

    Args:
        date_str: Dash-separated year, month and day.

    Returns:
        Parsed datetime, or INVALID_DATE if a component is missing,
        non-numeric, or the result falls outside datetime's range.

    Example:
        >>> parse_date("2023-07-26")
        datetime.datetime(2023, 7, 26, 0, 0)
    """
    parts = date_str.split("-")
    try:
        year, month, day = (int(part) for part in parts[:3])
    except ValueError:
        logger.debug("Unparseable YYYY-MM-DD string: %r", date_str)
        return INVALID_DATE

    try:
        return (
            datetime(year, 1, 1)
            + relativedelta(months=month - 1)
            + timedelta(days=day - 1)
        )
    except (ValueError, OverflowError):
        logger.debug("Date out of range: %r", date_str)
        return INVALID_DATE


def to_date_object(date_str: str, clock: Optional[Clock] = None) -> Instant:
    """
    Parses a free-form date string with dateutil.

    Interpretation of ambiguous strings (field order) is dateutil's.
    Missing fields are filled from midnight of the clock's current day,
    so "June 15" falls in the clock's year. Strings without an offset
    produce naive local datetimes.

    Args:
        date_str: Any date or date-time string.
        clock: Time source for missing fields. Defaults to the system clock.

    Returns:
        Parsed datetime, or INVALID_DATE if dateutil cannot parse it.

    Example:
        >>> to_date_object("June 15", FixedClock(datetime(2000, 1, 1)))
        datetime.datetime(2000, 6, 15, 0, 0)
    """
    default = resolve_clock(clock).now().replace(
        hour=0, minute=0, second=0, microsecond=0, tzinfo=None
    )
    try:
        return date_parser.parse(date_str, default=default)
    except (ValueError, OverflowError):
        logger.debug("Unparseable date string: %r", date_str)
        return INVALID_DATE


def coerce_instant(source: DateSource, clock: Optional[Clock] = None) -> Instant:
    """
    Turns any accepted date source into an instant.

    Args:
        source: datetime (used as-is), date (local midnight), string
            (free-form parse), INVALID_DATE, or None for the current time.
        clock: Time source used when source is None, and for fields
            a string leaves out.

    Returns:
        The resolved instant.

    Raises:
        TypeError: If source is of an unsupported type.
    """
    if source is None:
        return get_current_date(clock)
    if isinstance(source, (datetime, InvalidDate)):
        return source
    if isinstance(source, date):
        return datetime(source.year, source.month, source.day)
    if isinstance(source, str):
        return to_date_object(source, clock)
    raise TypeError(f"Unsupported date source: {type(source).__name__}")


def clone_date(moment: Instant) -> Instant:
    """
    Returns an equal but distinct copy of an instant.

    Args:
        moment: Instant to copy.

    Returns:
        New datetime with identical fields, or INVALID_DATE.
    """
    if not is_valid_date(moment):
        return INVALID_DATE
    return datetime(
        moment.year, moment.month, moment.day,
        moment.hour, moment.minute, moment.second, moment.microsecond,
        tzinfo=moment.tzinfo, fold=moment.fold,
    )


def to_epoch_millis(moment: datetime) -> int:
    """
    Returns whole milliseconds since the Unix epoch, floored.

    Naive datetimes are interpreted as local time.
    """
    aware = moment if moment.tzinfo is not None else moment.astimezone()
    return (aware - UNIX_EPOCH) // ONE_MILLISECOND
