"""Main module for ISO 8601 date representations and parsing."""

import logging
from abc import abstractmethod
from datetime import date
from typing import Dict, Tuple, Type, Union

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic_core import core_schema

from .arithmetic import (
    date_from_year_offset,
    days_in_month,
    days_in_quarter,
    days_in_year,
    jan1_weekday,
    weeks_in_year,
)
from .defs import CALENDAR, MAX_YEAR, MIN_YEAR, ORDINAL, QUARTER, WEEK
from .errors import ISO8601Error, RangeError, UnexpectedTokenError
from .parsed import RegExpParsedDate, ScannedDate

logger = logging.getLogger(__name__)


def _check_range(element: str, value: int, year: int, low: int, high: int) -> None:
    if value < low or value > high:
        raise RangeError(element=element, value=value, year=year, min=low, max=high)


def _calendar_date(year: int, offset: int) -> "CalendarDate":
    # Not validated: week-year 9999 ends in calendar year 10000.
    year, month, day = date_from_year_offset(year, offset)
    return CalendarDate.model_construct(year=year, month=month, day=day)


class _DateLike(BaseModel):
    """Behaviour shared by every date representation.

    Instances are immutable and validated on construction. Fields must be
    ints, nothing is coerced. ``model_construct`` skips validation, which is
    what ``validate`` and ``is_valid`` are for.
    """

    model_config = ConfigDict(frozen=True, strict=True)

    year: int
    """Year in the range 0-9999."""

    @model_validator(mode="after")
    def fields_in_range(self):
        """Reject out of range fields with a RangeError."""
        self.validate()
        return self

    def validate(self) -> None:
        """Check every field and raise a RangeError for the first invalid one."""
        _check_range("year", self.year, self.year, MIN_YEAR, MAX_YEAR)

    def is_valid(self) -> bool:
        """Whether every field is in its valid range."""
        try:
            self.validate()
        except RangeError:
            return False
        return True

    @abstractmethod
    def to_calendar_date(self) -> "CalendarDate":
        """Convert into the equivalent calendar date."""


class CalendarDate(_DateLike):
    """Calendar date, e.g. 2012-12-24."""

    month: int
    """Month of the year, 1-12."""
    day: int
    """Day of the month, 1-31."""

    def __str__(self):
        """ISO 8601 representation of the format YYYY-MM-DD."""
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

    def validate(self) -> None:
        """Check the year, month and day of month."""
        super().validate()
        _check_range("month", self.month, self.year, 1, 12)
        _check_range(
            "day of month", self.day, self.year, 1, days_in_month(self.year, self.month)
        )

    def to_calendar_date(self) -> "CalendarDate":
        """Return itself, a calendar date is already canonical."""
        return self

    def to_date(self) -> date:
        """Convert into a standard library date.

        Year 0 has no ``datetime.date`` counterpart and raises a RangeError.
        """
        self.validate()
        _check_range("year", self.year, self.year, date.min.year, MAX_YEAR)
        return date(self.year, self.month, self.day)

    @classmethod
    def from_date(cls, value: date) -> "CalendarDate":
        """Create a calendar date from a standard library date."""
        return cls(year=value.year, month=value.month, day=value.day)


class OrdinalDate(_DateLike):
    """Ordinal date, e.g. 2012-359."""

    day: int
    """Day of the year, 1-365 or 1-366 in a leap year."""

    def __str__(self):
        """ISO 8601 representation of the format YYYY-DDD."""
        return f"{self.year:04d}-{self.day:03d}"

    def validate(self) -> None:
        """Check the year and day of year."""
        super().validate()
        _check_range("day of year", self.day, self.year, 1, days_in_year(self.year))

    def to_calendar_date(self) -> CalendarDate:
        """Advance from January 1st by the day of year."""
        return _calendar_date(self.year, self.day - 1)


class WeekDate(_DateLike):
    """ISO week date, e.g. 2012-W52-1.

    The year is the week-numbering year, which differs from the calendar year
    for days around January 1st.
    """

    week: int
    """Week of the year, 1-52 or 1-53 in long years."""
    day: int
    """Day of the week, 1 for Monday through 7 for Sunday."""

    def __str__(self):
        """ISO 8601 representation of the format YYYY-Www-D."""
        return f"{self.year:04d}-W{self.week:02d}-{self.day}"

    def validate(self) -> None:
        """Check the year, day of week and week."""
        super().validate()
        _check_range("day of week", self.day, self.year, 1, 7)
        _check_range("week", self.week, self.year, 1, weeks_in_year(self.year))

    def to_calendar_date(self) -> CalendarDate:
        """Count from the Monday of week 1, which may be in the previous year.

        Week 1 is the week holding the first Thursday of the year.
        """
        first_thursday = (3 - jan1_weekday(self.year)) % 7
        first_monday = first_thursday - 3
        return _calendar_date(
            self.year, first_monday + (self.week - 1) * 7 + self.day - 1
        )


class QuarterDate(_DateLike):
    """Quarter date, e.g. 2012-Q4-85."""

    quarter: int
    """Quarter of the year, 1-4."""
    day: int
    """Day of the quarter, 1-92."""

    def __str__(self):
        """Representation of the format YYYY-Qq-DD."""
        return f"{self.year:04d}-Q{self.quarter}-{self.day:02d}"

    def validate(self) -> None:
        """Check the year, quarter and day of quarter."""
        super().validate()
        _check_range("quarter", self.quarter, self.year, 1, 4)
        _check_range(
            "day of quarter",
            self.day,
            self.year,
            1,
            days_in_quarter(self.year, self.quarter),
        )

    def to_calendar_date(self) -> CalendarDate:
        """Add the days of the previous quarters and count from January 1st."""
        _check_range("quarter", self.quarter, self.year, 1, 4)
        offset = self.day - 1
        for quarter in range(1, self.quarter):
            offset += days_in_quarter(self.year, quarter)
        return _calendar_date(self.year, offset)


DateLike = Union[CalendarDate, OrdinalDate, WeekDate, QuarterDate]

_DATE_CLASSES: Dict[str, Type[_DateLike]] = {
    CALENDAR: CalendarDate,
    ORDINAL: OrdinalDate,
    WEEK: WeekDate,
    QUARTER: QuarterDate,
}


def _decode(value: Union[str, bytes]) -> str:
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return value


def parse_date_prefix(value: Union[str, bytes]) -> Tuple[int, DateLike]:
    """Parse the date at the start of a string.

    Supported formats:

        Basic       Extended
        20121224    2012-12-24    Calendar date
        2012359     2012-359      Ordinal date
        2012W521    2012-W52-1    Week date
        2012Q485    2012-Q4-85    Quarter date

    Each may be preceded by a ``+`` sign.

    :param value: Text starting with a date, as ``str`` or UTF-8 ``bytes``.
    :return: The number of characters making up the date, and the date.
    :raises UnexpectedTokenError: The text does not start with a supported format.
    :raises RangeError: The format is recognised but a field is out of range.
    """
    scanned = ScannedDate(_decode(value))
    return scanned.consumed, _DATE_CLASSES[scanned.kind](**scanned.fields)


def parse_date(value: Union[str, bytes], regex: bool = False) -> DateLike:
    """Parse a string holding exactly one date.

    See ``parse_date_prefix`` for the supported formats. Any text after the
    date is rejected.

    :param value: The date as ``str`` or UTF-8 ``bytes``.
    :param regex: Use the regex parser instead of the scanner. It accepts the
    same formats but reports malformed input less precisely.
    :return: A CalendarDate, OrdinalDate, WeekDate or QuarterDate.
    :raises UnexpectedTokenError: The input is not a supported format.
    :raises RangeError: The format is recognised but a field is out of range.
    """
    text = _decode(value)
    try:
        if regex:
            parsed = RegExpParsedDate(text)
        else:
            parsed = ScannedDate(text)
        result = _DATE_CLASSES[parsed.kind](**parsed.fields)
        if parsed.consumed != len(text):
            prefix = text[: parsed.consumed]
            raise UnexpectedTokenError(
                value=text,
                token=text[parsed.consumed :],
                after_token=prefix,
                expected=prefix,
            )
    except ISO8601Error as e:
        logger.debug("Rejected date %r: %s", text, e)
        raise

    logger.debug("Parsed %r as %s %s", text, type(result).__name__, result)
    return result


# NOTE: Keeps the original string, only checks that it parses
class ISO8601Date(str):
    """A special field class used to denote ISO 8601 date strings."""

    def __init__(self, val: str):
        """Validate ISO 8601 date string."""
        parse_date(val)

    @classmethod
    def _validate(cls, value: str) -> "ISO8601Date":
        try:
            return cls(value)
        except ISO8601Error as e:
            raise ValueError(str(e)) from e

    @classmethod
    def __get_pydantic_core_schema__(cls, source, handler):
        """Create valid pydantic schema object for this type."""
        return core_schema.no_info_after_validator_function(
            cls._validate, core_schema.str_schema()
        )

    @classmethod
    def from_date(cls, value: DateLike) -> "ISO8601Date":
        """Create the canonical string of a date representation."""
        return ISO8601Date(str(value))

    @property
    def date(self) -> DateLike:
        """The parsed date."""
        return parse_date(self)
