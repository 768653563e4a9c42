"""Gregorian calendar arithmetic."""

from typing import Tuple

from .defs import DAYS_IN_MONTH, DAYS_IN_QUARTER


def is_leap_year(year: int) -> bool:
    """Whether the proleptic Gregorian year has a February 29."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_year(year: int) -> int:
    """Number of days in the year."""
    return 366 if is_leap_year(year) else 365


def days_in_month(year: int, month: int) -> int:
    """Number of days in the calendar month of the year."""
    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


def days_in_quarter(year: int, quarter: int) -> int:
    """Number of days in the quarter of the year.

    The leap day always falls in the first quarter.
    """
    if quarter == 1 and is_leap_year(year):
        return 91
    return DAYS_IN_QUARTER[quarter]


def jan1_weekday(year: int) -> int:
    """Day of the week of January 1st, 0 for Monday through 6 for Sunday."""
    # The weekday cycle repeats every 400 years.
    if year < 1:
        year += 400 * (1 - year // 400)
    p = year - 1
    return (p + p // 4 - p // 100 + p // 400) % 7


def weeks_in_year(year: int) -> int:
    """Number of ISO weeks in the week-numbering year.

    A year has 53 weeks when it starts on a Thursday, or on a Wednesday in a
    leap year, and 52 otherwise.
    """
    weekday = jan1_weekday(year)
    if weekday == 3 or (weekday == 2 and is_leap_year(year)):
        return 53
    return 52


def date_from_year_offset(year: int, offset: int) -> Tuple[int, int, int]:
    """Resolve a day offset from January 1st of a year into (year, month, day).

    ``offset`` is 0-based and may point before or past the given year.
    """
    while offset < 0:
        year -= 1
        offset += days_in_year(year)
    while offset >= days_in_year(year):
        offset -= days_in_year(year)
        year += 1

    month = 1
    while offset >= days_in_month(year, month):
        offset -= days_in_month(year, month)
        month += 1
    return year, month, offset + 1
