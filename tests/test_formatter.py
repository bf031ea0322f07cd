"""
datekit - Token Formatter Tests.

Property-based and unit tests for DateFormatter. Tests cover token
rendering, longest-token-first matching, ordinal suffixes and the
degraded output for invalid instants.
"""

from datetime import date, datetime

import pytest
from hypothesis import given, settings
from hypothesis.strategies import dates, integers

from datekit.clock import FixedClock
from datekit.formatter import (
    TOKENS,
    DateFormatter,
    format_date,
    get_ordinal_suffix,
)
from datekit.instant import INVALID_DATE, parse_date
from datekit.locale_text import BabelLocaleText


class TestDateFormatterUnit:
    """Unit tests for pattern rendering."""

    def test_iso_like_pattern(self) -> None:
        """Verify YYYY-MM-DD renders a zero-padded date."""
        assert format_date(datetime(2023, 7, 26)).format("YYYY-MM-DD") == "2023-07-26"

    def test_short_month_with_ordinal(self) -> None:
        """Verify MMM Do, YYYY renders "Jul 26th, 2023"."""
        assert format_date(datetime(2023, 7, 26)).format("MMM Do, YYYY") == "Jul 26th, 2023"

    def test_long_month_name(self) -> None:
        """Verify MMMM is not consumed as MM followed by MM."""
        formatter = format_date(datetime(2023, 9, 15))
        assert formatter.format("MMMM DD, YYYY") == "September 15, 2023"

    def test_unpadded_day(self) -> None:
        """Verify D renders the day without padding."""
        assert format_date(datetime(2023, 12, 25)).format("MMM D, YYYY") == "Dec 25, 2023"

    def test_time_tokens_padded(self) -> None:
        """Verify hh:mm:ss pads each field to two digits."""
        formatter = format_date(datetime(2023, 7, 26, 9, 5, 3))
        assert formatter.format("hh:mm:ss") == "09:05:03"

    def test_time_tokens_unpadded(self) -> None:
        """Verify h:m:s renders raw values."""
        formatter = format_date(datetime(2023, 7, 26, 9, 5, 3))
        assert formatter.format("h:m:s") == "9:5:3"

    def test_hours_are_24_hour(self) -> None:
        """Verify hh is a 24-hour clock value with a separate marker."""
        formatter = format_date(datetime(2023, 7, 26, 14, 0))
        assert formatter.format("hh a") == "14 PM"

    def test_morning_meridiem(self) -> None:
        """Verify hours before noon render AM."""
        assert format_date(datetime(2023, 7, 26, 0, 30)).format("a") == "AM"

    def test_two_digit_year(self) -> None:
        """Verify YY renders the last two digits of the year."""
        assert format_date(datetime(2023, 7, 26)).format("YY") == "23"

    def test_unpadded_month(self) -> None:
        """Verify M renders the 1-based month without padding."""
        assert format_date(datetime(2023, 3, 1)).format("M/D") == "3/1"

    def test_weekday_name(self) -> None:
        """Verify DDDD renders the full weekday name."""
        assert format_date(datetime(2023, 7, 26)).format("DDDD") == "Wednesday"

    def test_ordinal_token_matched_before_day(self) -> None:
        """Verify Do is a token, not D followed by a literal o."""
        assert format_date(datetime(2023, 7, 1)).format("Do") == "1st"

    def test_three_d_is_two_tokens(self) -> None:
        """Verify DDD splits into DD followed by D."""
        assert format_date(datetime(2023, 7, 6)).format("DDD") == "066"

    def test_literal_text_passes_through(self) -> None:
        """Verify punctuation and non-token letters are kept."""
        formatter = format_date(datetime(2023, 7, 26))
        assert formatter.format("[YYYY] / (MM) | DD!") == "[2023] / (07) | 26!"

    def test_literal_letters_matching_tokens_are_replaced(self) -> None:
        """Verify there is no escape: the "a" in "Year" is a meridiem token."""
        formatter = format_date(datetime(2023, 7, 26, 0, 0))
        assert formatter.format("Year YYYY") == "YeAMr 2023"

    def test_string_source_is_parsed(self) -> None:
        """Verify free-form strings are parsed before formatting."""
        assert format_date("2023-12-25").format("MMM D, YYYY") == "Dec 25, 2023"

    def test_date_source_is_midnight(self) -> None:
        """Verify a date source is formatted at midnight."""
        formatter = format_date(date(2024, 2, 29))
        assert formatter.format("YYYY-MM-DD hh:mm") == "2024-02-29 00:00"

    def test_absent_source_uses_clock(self) -> None:
        """Verify a missing source formats the clock's current time."""
        clock = FixedClock(datetime(2030, 1, 2, 3, 4, 5))
        assert format_date(clock=clock).format("YYYY-MM-DD hh:mm:ss") == "2030-01-02 03:04:05"

    def test_unsupported_source_raises_type_error(self) -> None:
        """Verify a non-date source is rejected."""
        with pytest.raises(TypeError):
            format_date(20230726)

    def test_format_tokens_follow_token_order(self) -> None:
        """Verify the token table keeps the matching order."""
        formatter = DateFormatter(datetime(2023, 7, 26))
        assert tuple(formatter.format_tokens) == TOKENS

    def test_format_tokens_are_read_only(self) -> None:
        """Verify the exposed token table cannot be modified."""
        formatter = DateFormatter(datetime(2023, 7, 26))
        with pytest.raises(TypeError):
            formatter.format_tokens["YYYY"] = "1999"

    def test_longer_tokens_precede_their_prefixes(self) -> None:
        """Verify every token comes before any shorter token it starts with."""
        for index, token in enumerate(TOKENS):
            for later in TOKENS[index + 1:]:
                assert not later.startswith(token), (
                    f"{later!r} is obscured by earlier token {token!r}"
                )

    def test_moment_is_not_mutated(self) -> None:
        """Verify the formatter keeps the instant it was given."""
        moment = datetime(2023, 7, 26, 10, 30)
        formatter = DateFormatter(moment)
        formatter.format("YYYY")
        assert formatter.moment is moment
        assert moment == datetime(2023, 7, 26, 10, 30)


class TestDateFormatterInvalid:
    """Tests for formatting an invalid instant."""

    def test_unparseable_string_renders_nan(self) -> None:
        """Verify numeric tokens of an unparseable string render NaN."""
        formatter = format_date("garbage")
        assert formatter.format("YYYY-MM-DD") == "NaN-NaN-NaN"

    def test_invalid_names_render_empty(self) -> None:
        """Verify name and meridiem tokens render empty."""
        formatter = format_date(INVALID_DATE)
        assert formatter.format("[MMMM|MMM|DDDD|a]") == "[|||]"

    def test_invalid_does_not_raise(self) -> None:
        """Verify every token renders for an invalid instant."""
        formatter = format_date(INVALID_DATE)
        assert set(formatter.format_tokens) == set(TOKENS)


class TestDateFormatterLocale:
    """Tests for locale-dependent tokens through Babel."""

    def test_german_month_name(self) -> None:
        """Verify MMMM uses the German month name."""
        formatter = format_date(datetime(2023, 3, 1), locale_text=BabelLocaleText("de_DE"))
        assert formatter.format("D. MMMM YYYY") == "1. März 2023"

    def test_french_weekday_name(self) -> None:
        """Verify DDDD uses the French weekday name."""
        formatter = format_date(datetime(2023, 7, 26), locale_text=BabelLocaleText("fr_FR"))
        assert formatter.format("DDDD") == "mercredi"

    def test_short_month_stays_english(self) -> None:
        """Verify MMM comes from the fixed English table in any locale."""
        formatter = format_date(datetime(2023, 3, 1), locale_text=BabelLocaleText("de_DE"))
        assert formatter.format("MMM") == "Mar"


class TestOrdinalSuffix:
    """Unit tests for get_ordinal_suffix."""

    @pytest.mark.parametrize("day, suffix", [
        (1, "st"), (2, "nd"), (3, "rd"), (4, "th"),
        (11, "th"), (12, "th"), (13, "th"),
        (21, "st"), (22, "nd"), (23, "rd"), (24, "th"),
        (30, "th"), (31, "st"),
    ])
    def test_suffix(self, day: int, suffix: str) -> None:
        """Verify suffixes including the 11-13 exception."""
        assert get_ordinal_suffix(day) == suffix


class TestDateFormatterProperty:
    """Property-based tests for DateFormatter."""

    @given(dates(min_value=date(1000, 1, 1), max_value=date(9999, 12, 31)))
    @settings(max_examples=200)
    def test_parse_then_format_round_trip(self, test_date: date) -> None:
        """
        Property: formatting a parsed YYYY-MM-DD string reproduces it.
        """
        text = test_date.isoformat()
        assert format_date(parse_date(text)).format("YYYY-MM-DD") == text

    @given(integers(min_value=1, max_value=31))
    @settings(max_examples=50)
    def test_ordinal_day_starts_with_day(self, day: int) -> None:
        """
        Property: Do is the plain day followed by a two-letter suffix.
        """
        formatter = format_date(datetime(2023, 1, day))
        rendered = formatter.format("Do")
        assert rendered[:-2] == formatter.format("D")
        assert rendered[-2:] in {"st", "nd", "rd", "th"}
