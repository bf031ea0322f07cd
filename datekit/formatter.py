"""
datekit - Token Formatter Module.

This module renders format patterns such as "MMM Do, YYYY" against one
date instant. The token table is computed once when the formatter is
built; format() then makes a single regular-expression pass over the
pattern, replacing every token occurrence with its value.

Tokens are matched in TOKENS order, which lists every token before any
shorter token it starts with ("MMMM" before "MM", "Do" before "D").
There is no escape syntax: literal text that spells a token, including
single letters such as "a" or "s", is always replaced.

Classes:
    DateFormatter: Pattern renderer bound to a single instant.
"""

import re
from types import MappingProxyType
from typing import Dict, Mapping, Optional

from datekit.clock import Clock
from datekit.instant import DateSource, coerce_instant, is_valid_date
from datekit.locale_text import LocaleText, resolve_locale_text

TOKENS = (
    "MMMM", "MMM", "MM", "M",
    "DDDD", "DD", "Do", "D",
    "YYYY", "YY",
    "hh", "h",
    "mm", "m",
    "ss", "s",
    "a",
)

TOKEN_PATTERN = re.compile("|".join(re.escape(token) for token in TOKENS))

SHORT_MONTH_NAMES = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

# Rendered for numeric tokens of an invalid instant
INVALID_NUMBER = "NaN"

# Tokens derived from names or markers; rendered empty for an invalid instant
TEXT_TOKENS = frozenset({"MMMM", "MMM", "DDDD", "a"})


def get_ordinal_suffix(day: int) -> str:
    """
    Returns the English ordinal suffix for a day of the month.

    11, 12 and 13 take "th"; otherwise the last digit decides.

    Args:
        day: Day of the month.

    Returns:
        One of "st", "nd", "rd" or "th".

    Example:
        >>> get_ordinal_suffix(22)
        'nd'
    """
    if 11 <= day <= 13:
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")


class DateFormatter:
    """
    Renders token patterns against one instant.

    Attributes:
        format_tokens: Read-only mapping of token to rendered value, in
            matching order.

    Example:
        >>> formatter = DateFormatter(datetime(2023, 7, 26))
        >>> formatter.format("MMM Do, YYYY")
        'Jul 26th, 2023'
    """

    def __init__(
        self,
        source: DateSource = None,
        locale_text: Optional[LocaleText] = None,
        clock: Optional[Clock] = None
    ):
        """
        Initialises the DateFormatter and computes its token table.

        Args:
            source: datetime, date, free-form date string, INVALID_DATE,
                or None for the current time.
            locale_text: Provider of month/weekday names and meridiem
                markers. Defaults to English.
            clock: Time source used when source is None.

        Raises:
            TypeError: If source is of an unsupported type.
        """
        self._moment = coerce_instant(source, clock)
        self._locale_text = resolve_locale_text(locale_text)
        self._tokens = self._build_tokens()

    @property
    def moment(self):
        """The instant being formatted (a datetime or INVALID_DATE)."""
        return self._moment

    @property
    def format_tokens(self) -> Mapping[str, str]:
        return MappingProxyType(self._tokens)

    def _build_tokens(self) -> Dict[str, str]:
        if not is_valid_date(self._moment):
            return {
                token: "" if token in TEXT_TOKENS else INVALID_NUMBER
                for token in TOKENS
            }

        moment = self._moment
        text = self._locale_text
        year = str(moment.year)

        return {
            "MMMM": text.long_month_name(moment.month),
            "MMM": SHORT_MONTH_NAMES[moment.month - 1],
            "MM": f"{moment.month:02d}",
            "M": str(moment.month),
            "DDDD": text.long_weekday_name(moment.weekday()),
            "DD": f"{moment.day:02d}",
            "Do": f"{moment.day}{get_ordinal_suffix(moment.day)}",
            "D": str(moment.day),
            "YYYY": year,
            "YY": year[-2:],
            "hh": f"{moment.hour:02d}",
            "h": str(moment.hour),
            "mm": f"{moment.minute:02d}",
            "m": str(moment.minute),
            "ss": f"{moment.second:02d}",
            "s": str(moment.second),
            "a": text.meridiem_marker(moment.hour) or "",
        }

    def format(self, pattern: str) -> str:
        """
        Renders a pattern by substituting every token occurrence.

        Args:
            pattern: Literal text mixed with tokens.

        Returns:
            The rendered string.
        """
        return TOKEN_PATTERN.sub(lambda match: self._tokens[match.group(0)], pattern)


def format_date(
    source: DateSource = None,
    locale_text: Optional[LocaleText] = None,
    clock: Optional[Clock] = None
) -> DateFormatter:
    """
    Builds a DateFormatter for a date source.

    Example:
        >>> format_date("2023-12-25").format("MMM D, YYYY")
        'Dec 25, 2023'
    """
    return DateFormatter(source, locale_text=locale_text, clock=clock)
