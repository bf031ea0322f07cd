"""
datekit - Locale Text Module.

This module supplies locale-dependent text (month names, weekday names,
meridiem markers and numeric date-time renderings) to the formatter and
the rendering helpers. English is bundled and used by default; other
locales are served from Babel's CLDR data.

Classes:
    LocaleText: Abstract locale text provider.
    EnglishLocaleText: Bundled English provider.
    BabelLocaleText: CLDR-backed provider for any Babel locale.
"""

import re
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional, Union

from babel import Locale
from babel.dates import (
    format_datetime,
    format_skeleton,
    get_day_names,
    get_month_names,
    match_skeleton,
)


class LocaleText(ABC):
    """
    Narrow interface for locale-dependent date text.

    Months are numbered 1-12 and weekdays 0-6 starting on Monday,
    matching datetime.month and datetime.weekday().
    """

    @abstractmethod
    def long_month_name(self, month: int) -> str:
        """Returns the full name of a month (1-12)."""

    @abstractmethod
    def long_weekday_name(self, weekday: int) -> str:
        """Returns the full name of a weekday (0=Monday)."""

    @abstractmethod
    def meridiem_marker(self, hour: int) -> str:
        """
        Returns the AM/PM style marker for a 24-hour clock hour.

        Returns an empty string when the locale has no separable marker.
        """

    @abstractmethod
    def numeric_datetime(self, moment: datetime) -> str:
        """Renders a wall-clock moment as 2-digit numeric date and 24-hour time."""


class EnglishLocaleText(LocaleText):
    """
    Bundled English locale text.

    Renders numeric date-times in the US layout "MM/DD/YYYY, HH:mm:ss".
    """

    MONTH_NAMES = (
        "January", "February", "March", "April", "May", "June",
        "July", "August", "September", "October", "November", "December",
    )
    WEEKDAY_NAMES = (
        "Monday", "Tuesday", "Wednesday", "Thursday",
        "Friday", "Saturday", "Sunday",
    )

    def long_month_name(self, month: int) -> str:
        return self.MONTH_NAMES[month - 1]

    def long_weekday_name(self, weekday: int) -> str:
        return self.WEEKDAY_NAMES[weekday]

    def meridiem_marker(self, hour: int) -> str:
        return "AM" if hour < 12 else "PM"

    def numeric_datetime(self, moment: datetime) -> str:
        return (
            f"{moment.month:02d}/{moment.day:02d}/{moment.year}, "
            f"{moment.hour:02d}:{moment.minute:02d}:{moment.second:02d}"
        )


class BabelLocaleText(LocaleText):
    """
    Locale text backed by Babel's CLDR data.

    Month and weekday names use the stand-alone wide forms. The meridiem
    marker is the trailing whitespace-separated segment of the locale's
    12-hour hour rendering, so locales that attach the marker without a
    space (e.g. Japanese) yield an empty string, and locales that put the
    marker first (e.g. Korean "오전 9시") yield the trailing hour text "9시".

    Numeric dates use the locale's year-month-day pattern with month and
    day widened to two digits, so en_US renders "07/06/2023".

    Example:
        >>> text = BabelLocaleText("de_DE")
        >>> text.long_month_name(3)
        'März'

    Raises:
        babel.UnknownLocaleError: If the locale identifier is unknown.
    """

    # Trailing segment after the first whitespace of a 12-hour rendering
    MERIDIEM_PATTERN = re.compile(r"\s(.*)$")
    # Quoted literals, or a lone month or day field
    NARROW_FIELD_PATTERN = re.compile(r"'[^']*'|(?<![MLd])[MLd](?![MLd])")

    def __init__(self, locale: Union[str, Locale] = "en_US"):
        """
        Initialises the BabelLocaleText.

        Args:
            locale: Babel locale or identifier such as "fr_FR".
        """
        self._locale = locale if isinstance(locale, Locale) else Locale.parse(locale)
        self._date_pattern = self._two_digit_date_pattern()

    @property
    def locale(self) -> Locale:
        """The Babel locale in use."""
        return self._locale

    def long_month_name(self, month: int) -> str:
        names = get_month_names("wide", context="stand-alone", locale=self._locale)
        return names[month]

    def long_weekday_name(self, weekday: int) -> str:
        names = get_day_names("wide", context="stand-alone", locale=self._locale)
        return names[weekday]

    def meridiem_marker(self, hour: int) -> str:
        rendering = format_skeleton(
            "h", datetime(2000, 1, 1, hour), locale=self._locale
        )
        match = self.MERIDIEM_PATTERN.search(rendering)
        return match.group(1) if match else ""

    def numeric_datetime(self, moment: datetime) -> str:
        # Naive moments are rendered with their own wall-clock fields
        date_text = format_datetime(moment, self._date_pattern, locale=self._locale)
        time_text = format_skeleton("Hms", moment, locale=self._locale)
        return (
            self._locale.datetime_formats["short"]
            .replace("'", "")
            .replace("{0}", time_text)
            .replace("{1}", date_text)
        )

    def _two_digit_date_pattern(self) -> str:
        """Returns the locale's numeric date pattern with 2-digit month and day."""
        skeletons = self._locale.datetime_skeletons
        key = match_skeleton("yMd", skeletons) or "yMd"
        return self.NARROW_FIELD_PATTERN.sub(
            lambda match: match.group(0) * 2 if match.group(0) in "MLd" else match.group(0),
            skeletons[key].pattern,
        )


DEFAULT_LOCALE_TEXT = EnglishLocaleText()


def resolve_locale_text(locale_text: Optional[LocaleText]) -> LocaleText:
    """Returns the given provider, or the bundled English one when None."""
    return locale_text if locale_text is not None else DEFAULT_LOCALE_TEXT
