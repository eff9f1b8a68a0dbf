"""
Sparse polynomials, stored as a dictionary from exponents to non-zero coefficients. Multiplication costs one
coefficient product per pair of stored terms, independent of the degrees involved, so polynomials like x^1000 + 1 are
cheap to work with.
"""
from __future__ import annotations

import collections
import dataclasses
from typing import Any, Iterable, Mapping

from .base import PolyBase, Term, check_exponent, coeff_div, is_scalar, power


@dataclasses.dataclass(init=False, eq=False, repr=False)
class SparsePoly(PolyBase):
    """
    A polynomial stored as a mapping {exponent: coefficient} with only non-zero coefficients kept. It can be built from
    a scalar, a mapping, or a sequence of coefficients by position.

    >>> SparsePoly({1000: 1, 0: -1})
    SparsePoly('x^1000-1')
    >>> SparsePoly([1, 0, 3])
    SparsePoly('3*x^2+1')
    >>> SparsePoly({5: 0}).degree(), SparsePoly({5: 0}).size()
    (-1, 0)
    """
    coeffs: dict[int, Any]

    def __init__(self, coeffs: Any | Mapping[int, Any] | Iterable[Any] = ()):
        if isinstance(coeffs, str):
            raise TypeError("Use SparsePoly.parse() to build a polynomial from text.")
        if is_scalar(coeffs):
            coeffs = {0: coeffs}
        elif isinstance(coeffs, Mapping):
            coeffs = {check_exponent(e): c for e, c in coeffs.items()}
        else:
            coeffs = dict(enumerate(coeffs))

        self.coeffs = {e: c for e, c in coeffs.items() if c != 0}

    def degree(self) -> int:
        return max(self.coeffs, default=-1)

    def size(self) -> int:
        return len(self.coeffs)

    def __getitem__(self, exponent: int):
        return self.coeffs.get(exponent, 0)

    def terms(self):
        return iter(sorted(self.coeffs.items()))

    def copy(self) -> SparsePoly:
        return type(self)(self.coeffs)

    def evaluate(self, x):
        """
        Evaluate the polynomial at x, computing each power by repeated squaring.

        >>> SparsePoly({0: 1, 2: -3, 3: 2}).evaluate(2)
        5
        >>> SparsePoly({100: 1}).evaluate(-1)
        1
        """
        return sum(c * power(x, e) for e, c in self.terms())

    @classmethod
    def _from_terms(cls, terms: Iterable[Term]) -> SparsePoly:
        coeffs = {}
        for e, c in terms:
            e = check_exponent(e)
            coeffs[e] = coeffs[e] + c if e in coeffs else c
        return cls(coeffs)

    def _add_terms(self, terms: Iterable[Term], subtract: bool):
        for e, c in terms:
            new = self[e] - c if subtract else self[e] + c
            if new == 0:
                self.coeffs.pop(e, None)
            else:
                self.coeffs[e] = new

    def _mul_poly(self, other: PolyBase):
        theirs = list(other.terms())
        result = collections.defaultdict(int)
        for i, c in list(self.coeffs.items()):
            for j, d in theirs:
                result[i+j] += c*d
        self.coeffs = {e: c for e, c in result.items() if c != 0}

    def _scale(self, c):
        products = ((e, a * c) for e, a in self.coeffs.items())
        self.coeffs = {e: p for e, p in products if p != 0}

    def _div_scalar(self, c):
        quotients = ((e, coeff_div(a, c)) for e, a in self.coeffs.items())
        self.coeffs = {e: q for e, q in quotients if q != 0}

    def _clear(self):
        self.coeffs = {}

    def _assign(self, other: SparsePoly):
        self.coeffs = dict(other.coeffs)
