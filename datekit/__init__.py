"""
datekit - Date manipulation, comparison and formatting helpers.

Works on plain datetime.datetime values: naive values are local time,
aware values carry their own offset. Helpers never raise for bad
calendar input. Unparseable or out-of-range input yields INVALID_DATE,
and everything derived from it degrades (False, None, "NaN" or
"Invalid Date"). Call is_valid_date() before trusting a derived instant.

Version: 0.1.0
"""

import logging

__version__ = "0.1.0"

from datekit.clock import Clock, FixedClock, SystemClock
from datekit.comparison import (
    is_after_date,
    is_before_date,
    is_same_date,
    is_same_or_after_date,
    is_same_or_before_date,
)
from datekit.date_logic import (
    add_days,
    calculate_age,
    diff_in_days,
    get_current_day_time_year,
    get_days_in_month,
    get_end_of_day,
    get_end_of_week,
    get_start_of_day,
    get_start_of_week,
    get_unix_timestamp,
    human_readable_format,
    is_leap_year,
    long_date_format,
    subtract_days,
)
from datekit.formatter import DateFormatter, format_date, get_ordinal_suffix
from datekit.instant import (
    INVALID_DATE,
    InvalidDate,
    clone_date,
    get_current_date,
    is_valid_date,
    parse_date,
    to_date_object,
)
from datekit.locale_text import BabelLocaleText, EnglishLocaleText, LocaleText
from datekit.schema import DayTimeYear
from datekit.timezones import (
    InvalidTimeZoneError,
    convert_local_to_utc,
    convert_utc_to_local,
    get_time_in_time_zone,
    get_time_in_time_zone_as_date_object,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "INVALID_DATE",
    "BabelLocaleText",
    "Clock",
    "DateFormatter",
    "DayTimeYear",
    "EnglishLocaleText",
    "FixedClock",
    "InvalidDate",
    "InvalidTimeZoneError",
    "LocaleText",
    "SystemClock",
    "add_days",
    "calculate_age",
    "clone_date",
    "convert_local_to_utc",
    "convert_utc_to_local",
    "diff_in_days",
    "format_date",
    "get_current_date",
    "get_current_day_time_year",
    "get_days_in_month",
    "get_end_of_day",
    "get_end_of_week",
    "get_ordinal_suffix",
    "get_start_of_day",
    "get_start_of_week",
    "get_time_in_time_zone",
    "get_time_in_time_zone_as_date_object",
    "get_unix_timestamp",
    "human_readable_format",
    "is_after_date",
    "is_before_date",
    "is_leap_year",
    "is_same_date",
    "is_same_or_after_date",
    "is_same_or_before_date",
    "is_valid_date",
    "long_date_format",
    "parse_date",
    "subtract_days",
    "to_date_object",
]
