"""Era-aware calendar dates and day-index arithmetic.

Dates are stored the way catalogue records talk about them: an era (AD/BC)
plus a positive, era-relative year. Arithmetic runs on astronomical years
(1 BC == year 0, 2 BC == year -1), so subtracting 100 years from AD 50 lands
in 51 BC.

Day indices count days from 0001-01-01 (day 0). Dates before 15 October 1582
are reckoned on the Julian calendar, later dates on the Gregorian one; the ten
days 5-14 October 1582 do not exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from time_parsing.errors import CalendarValidationError


class Era(Enum):
    """Era of a date."""
    AD = "AD"
    BC = "BC"


GREGORIAN_CUTOVER = (1582, 10, 15)
_LAST_JULIAN_DAY = (1582, 10, 4)

_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
_DAYS_BEFORE_MONTH = (0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)


def _is_julian(year: int, month: int, day: int) -> bool:
    return (year, month, day) < GREGORIAN_CUTOVER


def is_leap_year(year: int) -> bool:
    """Return True if the astronomical year has a 29 February.

    Years before the cutover follow the Julian rule (every fourth year).
    """
    if year < GREGORIAN_CUTOVER[0]:
        return year % 4 == 0
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Number of days in a month of an astronomical year."""
    if month == 2 and is_leap_year(year):
        return 29
    return _DAYS_IN_MONTH[month - 1]


def _days_before_month(year: int, month: int) -> int:
    days = _DAYS_BEFORE_MONTH[month - 1]
    if month > 2 and is_leap_year(year):
        days += 1
    return days


def validate_fields(year: int, month: int, day: int) -> None:
    """Reject month/day combinations that do not exist.

    Args:
        year: Astronomical year
        month: Month (1-12)
        day: Day of month

    Raises:
        CalendarValidationError: If the date does not exist
    """
    if not 1 <= month <= 12:
        raise CalendarValidationError(f"Invalid month {month} in year {year}")
    if not 1 <= day <= days_in_month(year, month):
        raise CalendarValidationError(f"Invalid day {day} for month {month} in year {year}")
    if _LAST_JULIAN_DAY < (year, month, day) < GREGORIAN_CUTOVER:
        raise CalendarValidationError(
            f"Date {year:04d}-{month:02d}-{day:02d} falls into the Gregorian calendar gap"
        )


def to_day_index(year: int, month: int, day: int) -> int:
    """Convert an astronomical date to its day index (0001-01-01 is day 0)."""
    validate_fields(year, month, day)
    y = year - 1
    if _is_julian(year, month, day):
        return 365 * y + y // 4 + _days_before_month(year, month) + day - 1
    # Gregorian ordinal (0001-01-01 == 1) is two days behind the Julian count
    ordinal = 365 * y + y // 4 - y // 100 + y // 400 + _days_before_month(year, month) + day
    return ordinal + 1


@dataclass(frozen=True)
class EraDate:
    """An immutable calendar date with an explicit era.

    Attributes:
        era: AD or BC
        year: Era-relative year, always >= 1
        month: Month (1-12)
        day: Day of month
    """
    era: Era
    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        if self.year < 1:
            raise CalendarValidationError(f"Invalid era year {self.year}")
        validate_fields(self.astronomical_year, self.month, self.day)

    @classmethod
    def of(cls, year: int, month: int, day: int, is_bc: bool = False) -> EraDate:
        """Build a date from an era-relative year.

        Year 0 is read as 1 BC in both eras and negative AD years roll into
        BC; month and day are validated strictly.
        """
        if is_bc:
            astronomical = 1 - year if year > 0 else 0
        else:
            astronomical = year
        return cls.from_astronomical(astronomical, month, day)

    @classmethod
    def from_astronomical(cls, year: int, month: int, day: int) -> EraDate:
        """Build a date from an astronomical year (0 == 1 BC)."""
        if year >= 1:
            return cls(Era.AD, year, month, day)
        return cls(Era.BC, 1 - year, month, day)

    @property
    def is_bc(self) -> bool:
        return self.era is Era.BC

    @property
    def astronomical_year(self) -> int:
        return 1 - self.year if self.is_bc else self.year

    @property
    def signed_year(self) -> int:
        """Year with BC as negative numbers (500 BC == -500)."""
        return -self.year if self.is_bc else self.year

    def shift_years(self, years: int) -> EraDate:
        """Move the date by whole years, keeping month and day.

        Raises:
            CalendarValidationError: If the day does not exist in the target year
        """
        return EraDate.from_astronomical(self.astronomical_year + years, self.month, self.day)

    def previous_day(self) -> EraDate:
        """Return the calendar day before this one."""
        year, month, day = self.astronomical_year, self.month, self.day
        if (year, month, day) == GREGORIAN_CUTOVER:
            return EraDate.from_astronomical(*_LAST_JULIAN_DAY)
        if day > 1:
            return EraDate.from_astronomical(year, month, day - 1)
        if month > 1:
            return EraDate.from_astronomical(year, month - 1, days_in_month(year, month - 1))
        return EraDate.from_astronomical(year - 1, 12, 31)

    def day_index(self) -> int:
        return to_day_index(self.astronomical_year, self.month, self.day)

    def __str__(self) -> str:
        text = f"{self.year:04d}-{self.month:02d}-{self.day:02d}"
        return f"{text} BC" if self.is_bc else text
