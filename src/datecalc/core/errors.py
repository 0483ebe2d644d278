"""Exceptions raised by the calendar utilities."""


class DatecalcError(ValueError):
    """Base class for all datecalc errors."""


class ParseError(DatecalcError):
    """Text does not resolve to a valid calendar date or time."""


class InvalidArgument(DatecalcError):
    """Numeric input is outside its allowed range."""
