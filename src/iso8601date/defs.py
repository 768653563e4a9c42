"""Constants and regexes for the supported date formats."""

MIN_YEAR = 0
MAX_YEAR = 9999

# Days per calendar month and per quarter in a non-leap year, 1-indexed.
DAYS_IN_MONTH = (0, 31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
DAYS_IN_QUARTER = (0, 90, 91, 92, 92)

CALENDAR = "calendar"
ORDINAL = "ordinal"
WEEK = "week"
QUARTER = "quarter"

SIGN = "\\+?"
# A date never runs into a further digit.
END = "(?![0-9])"
YEAR = "(?P<year>[0-9]{4})"
MONTH = "(?P<month>[0-9]{2})"
DAY_OF_MONTH = "(?P<day>[0-9]{2})"
DAY_OF_YEAR = "(?P<day>[0-9]{3})"
WEEK_NUMBER = "W(?P<week>[0-9]{2})"
DAY_OF_WEEK = "(?P<day>[0-9])"
QUARTER_NUMBER = "Q(?P<quarter>[0-9])"
DAY_OF_QUARTER = "(?P<day>[0-9]{2})"

REGEX_CALENDAR_BASIC = f"{SIGN}{YEAR}{MONTH}{DAY_OF_MONTH}{END}"
REGEX_CALENDAR_EXTENDED = f"{SIGN}{YEAR}-{MONTH}-{DAY_OF_MONTH}{END}"
REGEX_ORDINAL_BASIC = f"{SIGN}{YEAR}{DAY_OF_YEAR}{END}"
REGEX_ORDINAL_EXTENDED = f"{SIGN}{YEAR}-{DAY_OF_YEAR}{END}"
REGEX_WEEK_BASIC = f"{SIGN}{YEAR}{WEEK_NUMBER}{DAY_OF_WEEK}{END}"
REGEX_WEEK_EXTENDED = f"{SIGN}{YEAR}-{WEEK_NUMBER}-{DAY_OF_WEEK}{END}"
REGEX_QUARTER_BASIC = f"{SIGN}{YEAR}{QUARTER_NUMBER}{DAY_OF_QUARTER}{END}"
REGEX_QUARTER_EXTENDED = f"{SIGN}{YEAR}-{QUARTER_NUMBER}-{DAY_OF_QUARTER}{END}"

REGEX_FORMATS = (
    (CALENDAR, REGEX_CALENDAR_BASIC),
    (CALENDAR, REGEX_CALENDAR_EXTENDED),
    (ORDINAL, REGEX_ORDINAL_BASIC),
    (ORDINAL, REGEX_ORDINAL_EXTENDED),
    (WEEK, REGEX_WEEK_BASIC),
    (WEEK, REGEX_WEEK_EXTENDED),
    (QUARTER, REGEX_QUARTER_BASIC),
    (QUARTER, REGEX_QUARTER_EXTENDED),
)
