"""
datekit - Date Logic Module.

This module provides day arithmetic, day and week boundaries, and derived
calendar facts (leap years, days in month, ages). Arithmetic works on
wall-clock fields, so adding a day keeps the time of day across daylight
saving changes.

Instant-returning helpers give INVALID_DATE for an invalid input or a
result outside datetime's range; integer-returning helpers give None.
"""

import calendar
import logging
from datetime import date, timedelta
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional, Union

from datekit.clock import Clock, resolve_clock
from datekit.formatter import DateFormatter
from datekit.instant import (
    INVALID_DATE,
    Instant,
    coerce_instant,
    is_valid_date,
    to_epoch_millis,
)
from datekit.locale_text import LocaleText
from datekit.schema import DayTimeYear

logger = logging.getLogger(__name__)

MILLISECONDS_PER_DAY = 24 * 60 * 60 * 1000

HUMAN_READABLE_PATTERN = "MMMM D, YYYY hh:mm:ss"
LONG_DATE_PATTERN = "DDDD, MMMM D, YYYY"


def add_days(moment: Instant, days: int) -> Instant:
    """
    Shifts an instant by whole days, keeping the time of day.

    Args:
        moment: Instant to shift.
        days: Number of days, may be negative.

    Returns:
        New shifted datetime, or INVALID_DATE.
    """
    if not is_valid_date(moment):
        return INVALID_DATE
    try:
        return moment + timedelta(days=days)
    except OverflowError:
        logger.debug("Adding %s days to %s overflows", days, moment)
        return INVALID_DATE


def subtract_days(moment: Instant, days: int) -> Instant:
    """Shifts an instant back by whole days. See add_days()."""
    return add_days(moment, -days)


def get_start_of_day(moment: Instant) -> Instant:
    """Returns midnight of the instant's day."""
    if not is_valid_date(moment):
        return INVALID_DATE
    return moment.replace(hour=0, minute=0, second=0, microsecond=0)


def get_end_of_day(moment: Instant) -> Instant:
    """
    Returns the last representable moment of the instant's day.

    That is 23:59:59.999999, which renders as 23:59:59.999 at
    millisecond precision.
    """
    if not is_valid_date(moment):
        return INVALID_DATE
    return moment.replace(hour=23, minute=59, second=59, microsecond=999999)


def get_start_of_week(moment: Instant) -> Instant:
    """
    Returns midnight of the Monday starting the instant's week.

    Sunday belongs to the week that started six days earlier.
    """
    if not is_valid_date(moment):
        return INVALID_DATE
    return subtract_days(get_start_of_day(moment), moment.weekday())


def get_end_of_week(moment: Instant) -> Instant:
    """Returns the end of the Sunday closing the instant's week."""
    return get_end_of_day(add_days(get_start_of_week(moment), 6))


def diff_in_days(start: Instant, end: Instant) -> Optional[int]:
    """
    Calculates the number of days from start to end.

    Uses a fixed 86,400,000 ms day, so spans crossing a daylight saving
    change are off by an hour before rounding. Halves round away from
    zero, keeping diff_in_days(a, b) == -diff_in_days(b, a).

    Args:
        start: Earlier instant for a positive result.
        end: Later instant for a positive result.

    Returns:
        Rounded whole days, or None if either instant is invalid.

    Example:
        >>> diff_in_days(datetime(2023, 7, 26), datetime(2023, 8, 2))
        7
    """
    if not (is_valid_date(start) and is_valid_date(end)):
        return None

    elapsed = Decimal(to_epoch_millis(end) - to_epoch_millis(start))
    days = elapsed / Decimal(MILLISECONDS_PER_DAY)
    return int(days.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def get_unix_timestamp(moment: Instant) -> Optional[int]:
    """
    Returns whole seconds since the Unix epoch, floored.

    Naive instants are interpreted as local time.
    """
    if not is_valid_date(moment):
        return None
    return to_epoch_millis(moment) // 1000


def is_leap_year(year: int) -> bool:
    """
    Determines if the specified year is a leap year.

    A year is a leap year if it is divisible by 4, except for
    century years which must be divisible by 400.

    Args:
        year: Year to check.

    Returns:
        True if the year is a leap year, False otherwise.
    """
    return calendar.isleap(year)


def get_days_in_month(year: int, month: int) -> int:
    """
    Returns the total number of days in the specified month.

    Months are 0-based (0 is January). Values outside 0-11 carry into
    neighbouring years, so month 12 is January of the next year and
    month -1 is December of the previous one.

    Args:
        year: Year.
        month: 0-based month.

    Returns:
        Number of days in the month.

    Example:
        >>> get_days_in_month(2024, 1)
        29
    """
    year_offset, month_index = divmod(month, 12)
    if month_index == 1 and calendar.isleap(year + year_offset):
        return 29
    return calendar.mdays[month_index + 1]


def human_readable_format(
    moment: Instant,
    locale_text: Optional[LocaleText] = None
) -> str:
    """
    Renders an instant as e.g. "July 26, 2023 14:05:09".

    Args:
        moment: Instant to render.
        locale_text: Source of the month name. Defaults to English.

    Returns:
        Rendered text, or "Invalid Date".
    """
    if not is_valid_date(moment):
        return str(INVALID_DATE)
    return DateFormatter(moment, locale_text=locale_text).format(HUMAN_READABLE_PATTERN)


def long_date_format(
    moment: Instant,
    locale_text: Optional[LocaleText] = None
) -> str:
    """Renders an instant as e.g. "Wednesday, July 26, 2023", without time."""
    if not is_valid_date(moment):
        return str(INVALID_DATE)
    return DateFormatter(moment, locale_text=locale_text).format(LONG_DATE_PATTERN)


def get_current_day_time_year(clock: Optional[Clock] = None) -> DayTimeYear:
    """
    Returns the fields of the current local time.

    Args:
        clock: Time source. Defaults to the system clock.

    Returns:
        DayTimeYear with a 1-based month.
    """
    return DayTimeYear.from_datetime(resolve_clock(clock).now())


def calculate_age(
    date_of_birth: Union[str, date],
    clock: Optional[Clock] = None
) -> Optional[int]:
    """
    Calculates age in completed years as of today.

    Subtracts one from the year difference until the birthday has
    occurred in the current year.

    Args:
        date_of_birth: Free-form date string or date.
        clock: Time source for "today" and for fields the birth date
            string leaves out. Defaults to the system clock.

    Returns:
        Age in years, or None if the birth date cannot be parsed.

    Example:
        >>> calculate_age("1990-06-15", FixedClock(datetime(2024, 6, 14)))
        33
    """
    birth = coerce_instant(date_of_birth, clock)
    if not is_valid_date(birth):
        return None

    today = resolve_clock(clock).now()
    age = today.year - birth.year
    if (today.month, today.day) < (birth.month, birth.day):
        age -= 1

    return age
