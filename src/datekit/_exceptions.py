from __future__ import annotations


class CalendarError(Exception):
    """Base exception for all datekit errors."""


class InvalidDateFormat(CalendarError, ValueError):
    """A date string could not be parsed."""

    def __init__(self, value: object, expected: str = "a date/time string") -> None:
        self.value = value
        self.expected = expected
        super().__init__(f"Cannot parse {value!r} as {expected}.")
