"""
datekit - Timezone Module.

Shifts between local and UTC wall-clock time, and renderings of the
current time in a named IANA zone. Zones are resolved with zoneinfo;
the local offset comes from the injected clock.

Classes:
    InvalidTimeZoneError: Raised for an unknown zone identifier.
"""

import logging
from datetime import datetime, timezone
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from datekit.clock import Clock, resolve_clock
from datekit.instant import INVALID_DATE, Instant, is_valid_date
from datekit.locale_text import LocaleText, resolve_locale_text

logger = logging.getLogger(__name__)


class InvalidTimeZoneError(ValueError):
    """Raised when a timezone identifier is not in the tz database."""

    def __init__(self, time_zone: str):
        self.time_zone = time_zone
        super().__init__(f"Unknown time zone: {time_zone!r}")


def load_time_zone(time_zone: str) -> ZoneInfo:
    """
    Resolves an IANA identifier such as "Africa/Johannesburg".

    Raises:
        InvalidTimeZoneError: If the identifier is unknown or malformed.
    """
    try:
        return ZoneInfo(time_zone)
    except (ZoneInfoNotFoundError, ValueError) as err:
        raise InvalidTimeZoneError(time_zone) from err


def convert_local_to_utc(moment: Instant, clock: Optional[Clock] = None) -> Instant:
    """
    Shifts local wall-clock time to the matching UTC wall-clock time.

    Subtracts the local UTC offset, so 14:00 at UTC+02:00 becomes 12:00.
    The tzinfo of the input is kept unchanged.

    Args:
        moment: Local wall-clock instant.
        clock: Source of the local offset. Defaults to the system clock.

    Returns:
        Shifted datetime, or INVALID_DATE.
    """
    if not is_valid_date(moment):
        return INVALID_DATE
    offset = resolve_clock(clock).local_offset(moment)
    try:
        return moment - offset
    except OverflowError:
        logger.debug("Local to UTC shift of %s overflows", moment)
        return INVALID_DATE


def convert_utc_to_local(moment: Instant, clock: Optional[Clock] = None) -> Instant:
    """Shifts UTC wall-clock time to local wall-clock time. See convert_local_to_utc()."""
    if not is_valid_date(moment):
        return INVALID_DATE
    offset = resolve_clock(clock).local_offset(moment)
    try:
        return moment + offset
    except OverflowError:
        logger.debug("UTC to local shift of %s overflows", moment)
        return INVALID_DATE


def _now_in_zone(time_zone: str, clock: Optional[Clock]) -> datetime:
    zone = load_time_zone(time_zone)
    clock = resolve_clock(clock)
    now = clock.now()
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone(clock.local_offset(now)))
    return now.astimezone(zone)


def get_time_in_time_zone(
    time_zone: str,
    clock: Optional[Clock] = None,
    locale_text: Optional[LocaleText] = None
) -> str:
    """
    Renders the current time as seen in a named zone.

    Args:
        time_zone: IANA identifier, e.g. "Asia/Tokyo".
        clock: Time source. Defaults to the system clock.
        locale_text: Renderer of the numeric date-time. Defaults to
            English, e.g. "07/26/2023, 14:05:09".

    Returns:
        Rendered date and 24-hour time.

    Raises:
        InvalidTimeZoneError: If the identifier is unknown.
    """
    wall_clock = _now_in_zone(time_zone, clock).replace(tzinfo=None)
    return resolve_locale_text(locale_text).numeric_datetime(wall_clock)


def get_time_in_time_zone_as_date_object(
    time_zone: str,
    clock: Optional[Clock] = None
) -> datetime:
    """
    Returns the current wall-clock time of a named zone as a naive datetime.

    The fields match the zone's local time to the second, but the result
    is naive and therefore read as local time by the rest of the library.
    It is a relabelled wall-clock reading, not the same instant.

    Raises:
        InvalidTimeZoneError: If the identifier is unknown.
    """
    return _now_in_zone(time_zone, clock).replace(tzinfo=None, microsecond=0)
