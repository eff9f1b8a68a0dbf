"""Exceptions raised by the polynomial classes."""


class DivisionByZero(ZeroDivisionError):
    """Division (or remainder) of a polynomial by the zero polynomial or a zero scalar."""


class ParseError(ValueError):
    """The text given to parse() is not a polynomial in the rendered form."""
