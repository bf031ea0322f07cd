"""
datekit - Comparison Module.

Ordering checks between two instants, all made on whole epoch
milliseconds, so instants differing by less than a millisecond count as
the same. Any check involving INVALID_DATE is False.
"""

from datekit.instant import Instant, is_valid_date, to_epoch_millis


def _both_valid(first: Instant, second: Instant) -> bool:
    return is_valid_date(first) and is_valid_date(second)


def is_before_date(first: Instant, second: Instant) -> bool:
    """Returns True if first is strictly earlier than second."""
    if not _both_valid(first, second):
        return False
    return to_epoch_millis(first) < to_epoch_millis(second)


def is_after_date(first: Instant, second: Instant) -> bool:
    """Returns True if first is strictly later than second."""
    if not _both_valid(first, second):
        return False
    return to_epoch_millis(first) > to_epoch_millis(second)


def is_same_date(first: Instant, second: Instant) -> bool:
    """
    Returns True if both instants denote the same millisecond.

    Compares full instants, not calendar days: two times on the same
    day are not the same date.
    """
    if not _both_valid(first, second):
        return False
    return to_epoch_millis(first) == to_epoch_millis(second)


def is_same_or_before_date(first: Instant, second: Instant) -> bool:
    if not _both_valid(first, second):
        return False
    return to_epoch_millis(first) <= to_epoch_millis(second)


def is_same_or_after_date(first: Instant, second: Instant) -> bool:
    if not _both_valid(first, second):
        return False
    return to_epoch_millis(first) >= to_epoch_millis(second)
