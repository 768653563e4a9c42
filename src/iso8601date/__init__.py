"""Library for parsing and validating ISO 8601 dates."""

# flake8: noqa: F401
from .arithmetic import (
    days_in_month,
    days_in_quarter,
    days_in_year,
    is_leap_year,
    weeks_in_year,
)
from .date import (
    CalendarDate,
    DateLike,
    ISO8601Date,
    OrdinalDate,
    QuarterDate,
    WeekDate,
    parse_date,
    parse_date_prefix,
)
from .errors import ISO8601Error, RangeError, UnexpectedTokenError
