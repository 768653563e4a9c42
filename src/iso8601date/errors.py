"""Exceptions raised while parsing and validating dates."""


class ISO8601Error(Exception):
    """Top-level parsing and validation exception."""

    _fields = ()

    def _key(self):
        return (type(self),) + tuple(getattr(self, name) for name in self._fields)

    def __eq__(self, other):
        """Errors are equal when their type and every field match."""
        if not isinstance(other, ISO8601Error):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        """Hash consistent with equality."""
        return hash(self._key())

    def __repr__(self):
        """Show every field of the error."""
        args = ", ".join(f"{name}={getattr(self, name)!r}" for name in self._fields)
        return f"{type(self).__name__}({args})"


class UnexpectedTokenError(ISO8601Error):
    """The input does not have the shape of any supported date format."""

    _fields = ("value", "token", "after_token", "expected")

    def __init__(self, value: str, token: str, after_token: str, expected: str):
        """Construct the exception.

        :param value: The whole input being parsed.
        :param token: The offending part of the input, or a description of it
        such as "3-digits".
        :param after_token: The part of the input matched right before the token.
        :param expected: What the grammar expected in place of the token.
        """
        super().__init__(value, token, after_token, expected)
        self.value = value
        self.token = token
        self.after_token = after_token
        self.expected = expected

    def __str__(self):
        """Human readable description of the mismatch."""
        if self.after_token:
            return (
                f'iso8601: unexpected token "{self.token}" after "{self.after_token}" '
                f'in "{self.value}", expected {self.expected}'
            )
        return (
            f'iso8601: unexpected token "{self.token}" in "{self.value}", '
            f"expected {self.expected}"
        )


class RangeError(ISO8601Error):
    """A date field is outside of its valid range."""

    _fields = ("element", "value", "year", "min", "max")

    def __init__(self, element: str, value: int, year: int, min: int, max: int):
        """Construct the exception with the offending field and its bounds."""
        super().__init__(element, value, year, min, max)
        self.element = element
        self.value = value
        self.year = year
        self.min = min
        self.max = max

    def __str__(self):
        """Human readable description of the violated range."""
        return (
            f"iso8601: {self.value} {self.element} is not in range "
            f"{self.min}-{self.max} in {self.year}"
        )
