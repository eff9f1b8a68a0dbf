"""
Rendering polynomials as text, and parsing that text back.

Both representations render through fmt(), so they agree exactly: terms go from the highest power down, a '+' separates
non-negative terms after the first, a coefficient of magnitude one is left out except on the constant term, and the
zero polynomial is '0'. For example 2x^3 - x^2 + 1 renders as '2*x^3-x^2+1'.
"""
from __future__ import annotations

import re
from typing import Any, Callable, Literal

from .errors import ParseError

DEFAULT_VAR = 'x'

Mode = Literal[None, 'latex']

# An unsigned int, float (possibly in exponent notation), or fraction p/q, as printed by str().
_NUMBER = r'(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?(?:/\d+)?'


def fmt(poly, var: str = DEFAULT_VAR, mode: Mode = None) -> str:
    """
    >>> from unipoly import DensePoly
    >>> fmt(DensePoly([1, 0, -1]))
    '-x^2+1'
    >>> fmt(DensePoly([-1]))
    '-1'
    >>> fmt(DensePoly([2, 0, -3, 1]), var='t')
    't^3-3*t^2+2'
    >>> fmt(DensePoly([2, 0, -3, 1]), mode='latex')
    'x^{3}-3x^{2}+2'
    """
    terms = list(poly.terms())
    if not terms:
        return '0'

    power_fmt = '{var}^{e}' if mode is None else '{var}^{{{e}}}'
    times = '*' if mode is None else ''

    parts: list[str] = []
    for e, c in reversed(terms):
        sign = '-' if c < 0 else '+' if parts else ''
        term = '' if e == 0 else var if e == 1 else power_fmt.format(var=var, e=e)
        coeff = f'{abs(c)}' if e == 0 else '' if abs(c) == 1 else f'{abs(c)}{times}'
        parts += [sign + coeff + term]

    return ''.join(parts)


def parse_terms(text: str, coeff: Callable[[str], Any] = int, var: str = DEFAULT_VAR) -> list[tuple[int, Any]]:
    """
    Split the text form of a polynomial into (exponent, coefficient) pairs, building each coefficient by calling
    coeff on its digits. Whitespace is ignored, the '*' between a coefficient and the variable is optional, and
    repeated powers are allowed (the caller sums them).

    >>> parse_terms('2*x^3-3*x^2+x+2')
    [(3, 2), (2, -3), (1, 1), (0, 2)]
    >>> from fractions import Fraction
    >>> parse_terms('-x + 1/2', coeff=Fraction)
    [(1, Fraction(-1, 1)), (0, Fraction(1, 2))]
    """
    term_re = re.compile(
        rf'(?P<sign>[+-])?(?:(?P<num>{_NUMBER})(?P<times>\*)?)?(?P<var>{re.escape(var)}(?:\^(?P<exp>\d+))?)?'
    )
    text = ''.join(text.split())
    if not text:
        raise ParseError("Cannot parse an empty string as a polynomial.")

    terms = []
    pos = 0
    while pos < len(text):
        m = term_re.match(text, pos)
        if (
            m.end() == pos
            or (terms and m['sign'] is None)
            or (m['num'] is None and m['var'] is None)
            or (m['times'] is not None and m['var'] is None)
        ):
            raise ParseError(f"Cannot parse {text!r} as a polynomial in {var}: bad term at position {pos}.")

        try:
            c = coeff(m['num'] if m['num'] is not None else '1')
        except (ValueError, ArithmeticError) as exc:
            raise ParseError(f"Bad coefficient {m['num']!r} in {text!r}.") from exc

        e = 0 if m['var'] is None else int(m['exp']) if m['exp'] is not None else 1
        terms += [(e, -c if m['sign'] == '-' else c)]
        pos = m.end()

    return terms
