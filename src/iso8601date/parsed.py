"""ISO 8601 date parsers."""

import re
from typing import Dict, Optional

from .defs import CALENDAR, ORDINAL, QUARTER, REGEX_FORMATS, WEEK
from .errors import UnexpectedTokenError


def count_digits(text: str, start: int) -> int:
    """Length of the run of ASCII digits at ``start``."""
    end = start
    while end < len(text) and "0" <= text[end] <= "9":
        end += 1
    return end - start


def humanize_digits(n: int) -> str:
    """Describe a digit count, e.g. "1-digit" or "3-digits"."""
    if n <= 1:
        return f"{n}-digit"
    return f"{n}-digits"


def _number(text: str, start: int, width: int) -> int:
    return int(text[start : start + width])


class ScannedDate:
    """Date scanned in a single forward pass.

    The scan only checks the shape of the input. It records which
    representation was found (``kind``), its integer fields (``fields``) and
    how many characters of the input it covers (``consumed``). Anything after
    the date is left for the caller to deal with.
    """

    def __init__(self, value: str):
        """Scan the date at the start of ``value``."""
        self.value = value
        self.kind: Optional[str] = None
        self.fields: Dict[str, int] = {}

        # A leading sign only shifts the offsets.
        signed = 1 if value[:1] == "+" else 0
        self.consumed = signed + self._scan(value[signed:])

    def _found(self, kind: str, consumed: int, **fields: int) -> int:
        self.kind = kind
        self.fields = fields
        return consumed

    def _unexpected(self, token: str, after_token: str, expected: str):
        return UnexpectedTokenError(
            value=self.value, token=token, after_token=after_token, expected=expected
        )

    def _scan(self, b: str) -> int:
        n = count_digits(b, 0)
        if n == 7:  # 2012359
            return self._found(ORDINAL, 7, year=_number(b, 0, 4), day=_number(b, 4, 3))
        if n == 8:  # 20121224
            return self._found(
                CALENDAR,
                8,
                year=_number(b, 0, 4),
                month=_number(b, 4, 2),
                day=_number(b, 6, 2),
            )
        if n != 4:
            raise self._unexpected(humanize_digits(n), "", "date format")

        year = b[:4]
        if len(b) < 8:
            raise self._unexpected(b[4:], year, "8 or more characters")

        n = count_digits(b, 5)
        if b[4] == "Q":  # 2012Q485
            if n != 3:
                raise self._unexpected(humanize_digits(n), "Q", humanize_digits(3))
            return self._found(
                QUARTER,
                8,
                year=int(year),
                quarter=_number(b, 5, 1),
                day=_number(b, 6, 2),
            )
        if b[4] == "W":  # 2012W521
            if n != 3:
                raise self._unexpected(humanize_digits(n), "W", humanize_digits(3))
            return self._found(
                WEEK, 8, year=int(year), week=_number(b, 5, 2), day=_number(b, 7, 1)
            )
        if b[4] != "-":
            raise self._unexpected(b[4:], year, "- or Q or W")

        if n == 2:  # 2012-12-24
            month = _number(b, 5, 2)
            if b[7] != "-":
                raise self._unexpected(b[7], f"-{month:02d}", "-")
            n = count_digits(b, 8)
            if n != 2:
                raise self._unexpected(
                    humanize_digits(n), f"-{month:02d}-", humanize_digits(2)
                )
            return self._found(
                CALENDAR, 10, year=int(year), month=month, day=_number(b, 8, 2)
            )
        if n == 3:  # 2012-359
            return self._found(ORDINAL, 8, year=int(year), day=_number(b, 5, 3))
        if n == 0:  # 2012-Q4-85 | 2012-W52-1
            return self._scan_extended_letter(b, year)
        raise self._unexpected(
            humanize_digits(n), f"{year}-", "like -Q4-85 or -W52-1 or -359"
        )

    def _scan_extended_letter(self, b: str, year: str) -> int:
        letter = b[5]
        if letter != "Q" and letter != "W":
            raise self._unexpected(letter, f"{year}-", "Q or W")
        if len(b) < 10:
            raise self._unexpected(b[5:], f"{year}-", "10 or more characters")

        n = count_digits(b, 6)
        if letter == "Q":
            if n != 1:
                raise self._unexpected(humanize_digits(n), "Q", humanize_digits(1))
            quarter = _number(b, 6, 1)
            if b[7] != "-":
                raise self._unexpected(b[7], f"Q{quarter}", "-")
            n = count_digits(b, 8)
            if n != 2:
                raise self._unexpected(
                    humanize_digits(n), f"Q{quarter}-", humanize_digits(2)
                )
            return self._found(
                QUARTER, 10, year=int(year), quarter=quarter, day=_number(b, 8, 2)
            )

        if n != 2:
            raise self._unexpected(humanize_digits(n), "W", humanize_digits(2))
        week = _number(b, 6, 2)
        if b[8] != "-":
            raise self._unexpected(b[8], f"W{week:02d}", "-")
        n = count_digits(b, 9)
        if n != 1:
            raise self._unexpected(
                humanize_digits(n), f"W{week:02d}-", humanize_digits(1)
            )
        return self._found(WEEK, 10, year=int(year), week=week, day=_number(b, 9, 1))


class RegExpParsedDate:
    """Regex parsed date.

    Like ScannedDate, only the date at the start of the input is matched and
    ``consumed`` tells where it ends. An input that does not start with any
    supported format is reported without pointing at the offending part.
    """

    def __init__(self, value: str):
        """Match ``value`` against every supported format."""
        for kind, regex in REGEX_FORMATS:
            match = re.match(regex, value)
            if match:
                break
        else:
            raise UnexpectedTokenError(
                value=value, token=value, after_token="", expected="date format"
            )

        self.value = value
        self.kind = kind
        self.fields = {name: int(group) for name, group in match.groupdict().items()}
        self.consumed = match.end()
