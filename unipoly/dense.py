"""
Dense polynomials.

In this module a polynomial is represented by the list of its coefficients starting with the constant term, so for
instance 1 - 2x + x^3 is the list [1, -2, 0, 1]. The list never ends in a zero, so the zero polynomial is the empty list.
"""
from __future__ import annotations

import dataclasses
import itertools
from typing import Any, Iterable

from .base import PolyBase, Term, check_exponent, coeff_div, is_scalar


@dataclasses.dataclass(init=False, eq=False, repr=False)
class DensePoly(PolyBase):
    """
    A polynomial stored as a dense list of coefficients by position. DensePoly(5) is the constant 5, and
    DensePoly([0, 1]) is the variable x. Any iterable of coefficients is accepted.

    >>> DensePoly([1, 0, -3, 2])
    DensePoly('2*x^3-3*x^2+1')
    >>> DensePoly([1, 0, -3, 2]) + DensePoly([1, 1])
    DensePoly('2*x^3-3*x^2+x+2')
    >>> DensePoly([0, 0, 0]).degree(), DensePoly(0).size()
    (-1, 0)
    """
    coeffs: list[Any]

    def __init__(self, coeffs: Any | Iterable[Any] = ()):
        if isinstance(coeffs, str):
            raise TypeError("Use DensePoly.parse() to build a polynomial from text.")
        self.coeffs = [coeffs] if is_scalar(coeffs) else list(coeffs)
        self._trim()

    def _trim(self):
        # Trim trailing zeros.
        while self.coeffs and self.coeffs[-1] == 0:
            self.coeffs.pop()

    def degree(self) -> int:
        return len(self.coeffs) - 1

    def size(self) -> int:
        return len(self.coeffs)

    def __getitem__(self, exponent: int):
        """
        The coefficient of x^exponent, which is zero for any exponent outside 0..degree.

        >>> p = DensePoly([4, 5])
        >>> p[0], p[1], p[2], p[-1]
        (4, 5, 0, 0)
        """
        return self.coeffs[exponent] if 0 <= exponent < len(self.coeffs) else 0

    def terms(self):
        return ((i, c) for i, c in enumerate(self.coeffs) if c != 0)

    def copy(self) -> DensePoly:
        return type(self)(self.coeffs)

    def evaluate(self, x):
        """
        Evaluate the polynomial at x by Horner's method. x may also be a numpy array, which is evaluated elementwise.

        >>> DensePoly([1, 0, -3, 2]).evaluate(2)
        5
        """
        result = 0
        for c in reversed(self.coeffs):
            result = result * x + c
        return result

    @classmethod
    def _from_terms(cls, terms: Iterable[Term]) -> DensePoly:
        terms = [(check_exponent(e), c) for e, c in terms]
        coeffs = [0] * (max((e for e, _ in terms), default=-1) + 1)
        for e, c in terms:
            coeffs[e] += c
        return cls(coeffs)

    def _add_terms(self, terms: Iterable[Term], subtract: bool):
        for e, c in terms:
            if e >= len(self.coeffs):
                self.coeffs.extend([0] * (e + 1 - len(self.coeffs)))
            self.coeffs[e] = self.coeffs[e] - c if subtract else self.coeffs[e] + c
        self._trim()

    def _mul_poly(self, other: PolyBase):
        if self.is_zero() or other.is_zero():
            self.coeffs = []
            return

        result = [0] * (len(self.coeffs) + other.degree())
        for (i, c), (j, d) in itertools.product(enumerate(self.coeffs), list(other.terms())):
            result[i+j] += c*d
        self.coeffs = result
        self._trim()

    def _scale(self, c):
        self.coeffs = [a * c for a in self.coeffs]
        self._trim()

    def _div_scalar(self, c):
        self.coeffs = [coeff_div(a, c) for a in self.coeffs]
        self._trim()

    def _clear(self):
        self.coeffs = []

    def _assign(self, other: DensePoly):
        self.coeffs = list(other.coeffs)
