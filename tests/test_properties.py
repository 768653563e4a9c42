"""Hypothesis property-based tests for date representations."""

from datetime import date, timedelta

from hypothesis import given
from hypothesis import strategies as st

from iso8601date import (
    CalendarDate,
    OrdinalDate,
    QuarterDate,
    WeekDate,
    days_in_month,
    days_in_quarter,
    days_in_year,
    is_leap_year,
    parse_date,
    weeks_in_year,
)

years = st.integers(min_value=0, max_value=9999)


@st.composite
def calendar_dates(draw, years=years):
    year = draw(years)
    month = draw(st.integers(min_value=1, max_value=12))
    day = draw(st.integers(min_value=1, max_value=days_in_month(year, month)))
    return CalendarDate(year=year, month=month, day=day)


@st.composite
def ordinal_dates(draw, years=years):
    year = draw(years)
    day = draw(st.integers(min_value=1, max_value=days_in_year(year)))
    return OrdinalDate(year=year, day=day)


@st.composite
def week_dates(draw, years=years):
    year = draw(years)
    week = draw(st.integers(min_value=1, max_value=weeks_in_year(year)))
    day = draw(st.integers(min_value=1, max_value=7))
    return WeekDate(year=year, week=week, day=day)


@st.composite
def quarter_dates(draw, years=years):
    year = draw(years)
    quarter = draw(st.integers(min_value=1, max_value=4))
    day = draw(st.integers(min_value=1, max_value=days_in_quarter(year, quarter)))
    return QuarterDate(year=year, quarter=quarter, day=day)


date_likes = st.one_of(calendar_dates(), ordinal_dates(), week_dates(), quarter_dates())
# Week-year 9999 ends in calendar year 10000.
convertible = st.one_of(
    ordinal_dates(),
    quarter_dates(),
    week_dates(years=st.integers(min_value=0, max_value=9998)),
)
# Years the standard library can represent.
std_years = st.integers(min_value=1, max_value=9998)


class TestRoundTrip:
    @given(date_likes)
    def test_parse_canonical_string(self, value):
        assert parse_date(str(value)) == value

    @given(date_likes)
    def test_parse_signed_canonical_string(self, value):
        assert parse_date("+" + str(value)) == value

    @given(date_likes)
    def test_regex_parser_agrees(self, value):
        assert parse_date(str(value), regex=True) == parse_date(str(value))

    @given(date_likes)
    def test_parse_basic_format(self, value):
        assert parse_date(str(value).replace("-", "")) == value


class TestConversion:
    @given(convertible)
    def test_conversion_is_valid(self, value):
        assert value.to_calendar_date().is_valid()

    @given(ordinal_dates(years=std_years))
    def test_ordinal_date(self, value):
        expected = date(value.year, 1, 1) + timedelta(days=value.day - 1)
        assert value.to_calendar_date().to_date() == expected

    @given(week_dates(years=std_years))
    def test_week_date(self, value):
        expected = date.fromisocalendar(value.year, value.week, value.day)
        assert value.to_calendar_date().to_date() == expected

    @given(quarter_dates(years=std_years))
    def test_quarter_date(self, value):
        first_day = date(value.year, 3 * value.quarter - 2, 1)
        expected = first_day + timedelta(days=value.day - 1)
        assert value.to_calendar_date().to_date() == expected

    @given(st.one_of(ordinal_dates(), quarter_dates()), st.one_of(ordinal_dates(), quarter_dates()))
    def test_order_preserving(self, a, b):
        # Ordinal and quarter dates never leave their year.
        ca, cb = a.to_calendar_date(), b.to_calendar_date()
        assert ((a.year, _year_day(a)) < (b.year, _year_day(b))) == (
            (ca.year, ca.month, ca.day) < (cb.year, cb.month, cb.day)
        )


def _year_day(value):
    if isinstance(value, OrdinalDate):
        return value.day
    return value.day + sum(days_in_quarter(value.year, q) for q in range(1, value.quarter))


class TestLeapYearLaws:
    @given(years)
    def test_leap_year_laws(self, year):
        leap = is_leap_year(year)
        assert (days_in_year(year) == 366) == leap
        assert (days_in_month(year, 2) == 29) == leap
        assert (days_in_quarter(year, 1) == 91) == leap
