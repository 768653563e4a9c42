import calendar
from datetime import date

import pytest

from iso8601date import (
    days_in_month,
    days_in_quarter,
    days_in_year,
    is_leap_year,
    weeks_in_year,
)
from iso8601date.arithmetic import date_from_year_offset, jan1_weekday


class TestLeapYears:
    @pytest.mark.parametrize(
        "year,leap",
        [(0, True), (4, True), (100, False), (1900, False), (2000, True), (2011, False),
         (2012, True), (2100, False), (2400, True), (9996, True), (9999, False)],
    )
    def test_is_leap_year(self, year, leap):
        assert is_leap_year(year) is leap

    def test_matches_standard_library(self):
        for year in range(1, 10000):
            assert is_leap_year(year) == calendar.isleap(year)

    @pytest.mark.parametrize("year", [1900, 2000, 2011, 2012])
    def test_days(self, year):
        leap = is_leap_year(year)
        assert (days_in_year(year) == 366) is leap
        assert (days_in_month(year, 2) == 29) is leap
        assert (days_in_quarter(year, 1) == 91) is leap


class TestDaysIn:
    def test_days_in_month(self):
        assert [days_in_month(2011, m) for m in range(1, 13)] == [
            31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31,
        ]
        assert days_in_month(2012, 2) == 29

    def test_days_in_quarter(self):
        assert [days_in_quarter(2011, q) for q in range(1, 5)] == [90, 91, 92, 92]
        assert [days_in_quarter(2012, q) for q in range(1, 5)] == [91, 91, 92, 92]

    @pytest.mark.parametrize("year", [0, 2011, 2012])
    def test_quarters_add_up_to_year(self, year):
        assert sum(days_in_quarter(year, q) for q in range(1, 5)) == days_in_year(year)


class TestWeeks:
    def test_jan1_weekday_matches_standard_library(self):
        for year in range(1, 10000):
            assert jan1_weekday(year) == date(year, 1, 1).weekday()

    def test_weeks_in_year_matches_standard_library(self):
        for year in range(1, 10000):
            assert weeks_in_year(year) == date(year, 12, 28).isocalendar()[1]

    @pytest.mark.parametrize(
        "year,weeks",
        [(0, 52), (2004, 53), (2009, 53), (2012, 52), (2015, 53), (2020, 53), (9999, 52)],
    )
    def test_weeks_in_year(self, year, weeks):
        assert weeks_in_year(year) == weeks

    @pytest.mark.parametrize("year", [0, -1, -399, -400, -401, -2000])
    def test_years_below_one_repeat_every_400_years(self, year):
        assert weeks_in_year(year) == weeks_in_year(year + 400 * 10)
        assert jan1_weekday(year) == jan1_weekday(year + 400 * 10)


class TestYearOffset:
    @pytest.mark.parametrize(
        "year,offset,expected",
        [
            (2012, 0, (2012, 1, 1)),
            (2011, 59, (2011, 3, 1)),
            (2012, 59, (2012, 2, 29)),
            (2012, 365, (2012, 12, 31)),
            (2012, 366, (2013, 1, 1)),
            (2012, -1, (2011, 12, 31)),
            (2012, -366, (2010, 12, 31)),
            (0, -1, (-1, 12, 31)),
            (9999, 365, (10000, 1, 1)),
        ],
    )
    def test_date_from_year_offset(self, year, offset, expected):
        assert date_from_year_offset(year, offset) == expected
