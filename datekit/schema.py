"""
datekit - Data Schema Module.

Record types returned by the helpers.

Classes:
    DayTimeYear: Calendar and clock fields of one moment.
"""

from dataclasses import asdict, dataclass
from datetime import datetime
from typing import Dict


@dataclass(frozen=True)
class DayTimeYear:
    """
    Calendar and clock fields of one moment, split out for display.

    Attributes:
        day: Day of the month (1-31).
        month: Month (1-12).
        year: Full year, e.g. 2023.
        hours: Hour (0-23).
        minutes: Minute (0-59).
        seconds: Second (0-59).
        milliseconds: Millisecond (0-999).
    """

    day: int
    month: int
    year: int
    hours: int
    minutes: int
    seconds: int
    milliseconds: int

    @classmethod
    def from_datetime(cls, moment: datetime) -> "DayTimeYear":
        """Splits a datetime into its fields, truncating to milliseconds."""
        return cls(
            day=moment.day,
            month=moment.month,
            year=moment.year,
            hours=moment.hour,
            minutes=moment.minute,
            seconds=moment.second,
            milliseconds=moment.microsecond // 1000,
        )

    def to_dict(self) -> Dict[str, int]:
        """Returns the fields as a plain dictionary."""
        return asdict(self)
