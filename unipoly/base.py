"""
Machinery shared by the dense and sparse polynomial classes.

A polynomial here is anything with a degree, total element access p[e], an ordered stream of its non-zero terms, and
in-place addition and multiplication. PolyBase implements the whole operator set on top of a handful of storage hooks,
and the free functions compose(), equals() and gcd() only use that capability set, so DensePoly and SparsePoly can be
mixed freely: the result of a binary operation always takes the representation of its left operand.

Coefficients can be of any numeric type (int, float, Fraction, Decimal, numpy scalars, ...). The additive and
multiplicative identities are taken to be the literals 0 and 1.
"""
from __future__ import annotations

import abc
import itertools
import logging
import numbers
from typing import Any, Callable, Iterable, Iterator, Optional, Tuple, TypeVar

from . import fmt as _fmt
from .errors import DivisionByZero

logger = logging.getLogger(__name__)

P = TypeVar('P', bound='PolyBase')
Term = Tuple[int, Any]


def is_scalar(x) -> bool:
    """Whether x should be treated as a bare coefficient rather than a polynomial."""
    return isinstance(x, numbers.Number)


def check_exponent(e) -> int:
    if not isinstance(e, numbers.Integral) or e < 0:
        raise ValueError(f"Exponents must be non-negative integers, got {e!r}.")
    return int(e)


def coeff_div(a, b):
    """
    Divide one coefficient by another. Integers use floor division, so that integer polynomials stay integer
    polynomials; everything else uses true division.

    >>> coeff_div(7, 2)
    3
    >>> coeff_div(7.0, 2)
    3.5
    """
    if isinstance(a, numbers.Integral) and isinstance(b, numbers.Integral):
        return a // b
    return a / b


def power(x, n: int):
    """
    Raise x to the non-negative integer power n by repeated squaring, using O(log n) multiplications.

    >>> power(3, 5)
    243
    >>> power(7, 0)
    1
    """
    result = 1
    while n:
        if n % 2 == 1:
            result = result * x
        n //= 2
        if n:
            x = x * x
    return result


class PolyBase(abc.ABC):
    """
    A univariate polynomial in canonical form. Subclasses store the coefficients and keep them canonical after every
    constructor and every mutation; everything else is implemented here.
    """

    # Stop numpy from treating a polynomial as a sequence when it appears on the right of a numpy scalar, so that
    # np.int64(2) * p reaches __rmul__.
    __array_ufunc__ = None

    @abc.abstractmethod
    def degree(self) -> int:
        """The highest exponent with a non-zero coefficient, or -1 for the zero polynomial."""

    @abc.abstractmethod
    def size(self) -> int:
        """The number of stored coefficients."""

    @abc.abstractmethod
    def __getitem__(self, exponent: int): ...

    def __iter__(self) -> Iterator[Term]:
        """Iterate over the non-zero terms, as terms() does."""
        return self.terms()

    @abc.abstractmethod
    def terms(self) -> Iterator[Term]:
        """The (exponent, coefficient) pairs of the non-zero terms, in increasing exponent order."""

    @abc.abstractmethod
    def copy(self: P) -> P: ...

    @abc.abstractmethod
    def evaluate(self, x): ...

    @classmethod
    @abc.abstractmethod
    def _from_terms(cls: type[P], terms: Iterable[Term]) -> P:
        """Build a polynomial from (exponent, coefficient) pairs. Repeated exponents are summed."""

    @abc.abstractmethod
    def _add_terms(self, terms: Iterable[Term], subtract: bool) -> None: ...

    @abc.abstractmethod
    def _mul_poly(self, other: PolyBase) -> None: ...

    @abc.abstractmethod
    def _scale(self, c) -> None: ...

    @abc.abstractmethod
    def _div_scalar(self, c) -> None: ...

    @abc.abstractmethod
    def _clear(self) -> None: ...

    @abc.abstractmethod
    def _assign(self: P, other: P) -> None: ...

    # Construction

    @classmethod
    def monomial(cls: type[P], coeff, exponent: int) -> P:
        """Return coeff * x^exponent."""
        return cls._from_terms([(check_exponent(exponent), coeff)])

    @classmethod
    def from_iter(cls: type[P], iterable: Iterable, start: int = 0, stop: Optional[int] = None) -> P:
        """Build a polynomial from the coefficients iterable[start:stop], which need not support slicing."""
        return cls(itertools.islice(iterable, start, stop))

    @classmethod
    def parse(cls: type[P], text: str, coeff: Callable[[str], Any] = int, var: str = _fmt.DEFAULT_VAR) -> P:
        """Parse the text produced by str(), with coefficients built by coeff."""
        return cls._from_terms(_fmt.parse_terms(text, coeff=coeff, var=var))

    # Queries

    def is_zero(self) -> bool:
        return self.degree() == -1

    def leading(self):
        """The coefficient of the highest power, or 0 for the zero polynomial."""
        return self[self.degree()] if not self.is_zero() else 0

    def is_monic(self) -> bool:
        return self.leading() == 1

    def __len__(self) -> int:
        return self.size()

    def __bool__(self) -> bool:
        return not self.is_zero()

    def map(self: P, f: Callable[[Any], Any]) -> P:
        """Map a function over the non-zero coefficients, taking a + bx + cx^2 to f(a) + f(b)x + f(c)x^2."""
        return type(self)._from_terms((e, f(c)) for e, c in self.terms())

    def shift(self: P, n: int) -> P:
        """Return the polynomial multiplied by x^n."""
        n = check_exponent(n)
        return type(self)._from_terms((e + n, c) for e, c in self.terms())

    # Rendering

    def fmt(self, var: str = _fmt.DEFAULT_VAR, mode: _fmt.Mode = None) -> str:
        return _fmt.fmt(self, var=var, mode=mode)

    def __str__(self):
        return self.fmt()

    def __repr__(self):
        return f"{type(self).__name__}('{self.fmt()}')"

    def _repr_latex_(self):
        return f"${self.fmt(mode='latex')}$"

    # Conversion

    def to_dense(self):
        from .convert import to_dense
        return to_dense(self)

    def to_sparse(self):
        from .convert import to_sparse
        return to_sparse(self)

    # Comparison. Polynomials are mutable, and so unhashable.

    def __eq__(self, other) -> bool:
        if isinstance(other, PolyBase) or is_scalar(other):
            return equals(self, other)
        return NotImplemented

    # Addition and subtraction

    def __iadd__(self: P, other) -> P:
        if isinstance(other, PolyBase):
            self._add_terms(list(other.terms()), subtract=False)
        elif is_scalar(other):
            self._add_terms([(0, other)], subtract=False)
        else:
            return NotImplemented
        return self

    def __isub__(self: P, other) -> P:
        if isinstance(other, PolyBase):
            self._add_terms(list(other.terms()), subtract=True)
        elif is_scalar(other):
            self._add_terms([(0, other)], subtract=True)
        else:
            return NotImplemented
        return self

    def __add__(self: P, other) -> P:
        return self.copy().__iadd__(other)

    def __sub__(self: P, other) -> P:
        return self.copy().__isub__(other)

    def __radd__(self: P, other) -> P:
        if not is_scalar(other):
            return NotImplemented
        return type(self)(other).__iadd__(self)

    def __rsub__(self: P, other) -> P:
        if not is_scalar(other):
            return NotImplemented
        return type(self)(other).__isub__(self)

    def __neg__(self: P) -> P:
        return self.map(lambda c: -c)

    def __pos__(self: P) -> P:
        return self.copy()

    # Multiplication

    def __imul__(self: P, other) -> P:
        if isinstance(other, PolyBase):
            self._mul_poly(other)
        elif is_scalar(other):
            if other == 0:
                self._clear()
            else:
                self._scale(other)
        else:
            return NotImplemented
        return self

    def __mul__(self: P, other) -> P:
        return self.copy().__imul__(other)

    def __rmul__(self: P, other) -> P:
        if not is_scalar(other):
            return NotImplemented
        if other == 0:
            return type(self)()
        # Keep the scalar on the left of every coefficient product.
        return type(self)(other).__imul__(self)

    def __pow__(self: P, n: int) -> P:
        if n < 0:
            raise ValueError("Cannot invert a polynomial.")
        if n == 0:
            return type(self)(1)
        if n == 1:
            return self.copy()

        sqrt = self ** (n // 2)
        return sqrt * sqrt if n % 2 == 0 else sqrt * sqrt * self

    # Division

    def _divmod(self: P, other) -> Optional[Tuple[P, P]]:
        """Return the quotient and remainder, or None if other is not something we can divide by."""
        if is_scalar(other):
            if other == 0:
                raise DivisionByZero(f"Cannot divide {self} by zero.")
            quo = self.copy()
            quo._div_scalar(other)
            # Only integer coefficients leave a remainder; true division is taken to be exact.
            rem = type(self)._from_terms(
                (e, c - quo[e] * other) for e, c in self.terms()
                if isinstance(c, numbers.Integral) and isinstance(other, numbers.Integral)
            )
            return quo, rem

        if not isinstance(other, PolyBase):
            return None
        if other.is_zero():
            raise DivisionByZero(f"Cannot divide {self} by the zero polynomial.")
        if other.degree() == 0:
            return self._divmod(other[0])

        return self._long_divide(other)

    def _long_divide(self: P, divisor: PolyBase) -> Tuple[P, P]:
        """
        Schoolbook long division. The loop stops early if a leading quotient comes out as zero, which happens for
        integer coefficients when the divisor's leading coefficient does not divide the remainder's.
        """
        quotient = {}
        rem = self.copy()
        d_deg, d_lead = divisor.degree(), divisor.leading()
        d_terms = list(divisor.terms())

        while not rem.is_zero() and rem.degree() >= d_deg:
            gap = rem.degree() - d_deg
            lead = rem.leading()
            coef = coeff_div(lead, d_lead)
            if coef == 0:
                logger.debug("Long division by %s stopped at degree %d: leading quotient is zero.", divisor, rem.degree())
                break

            quotient[gap] = coef
            step = [(e + gap, coef * c) for e, c in d_terms]
            if not isinstance(coef, numbers.Integral):
                # Cancel the leading term exactly, whatever rounding coef * d_lead suffered.
                step[-1] = (rem.degree(), lead)
            rem._add_terms(step, subtract=True)

        return type(self)._from_terms(quotient.items()), rem

    def __divmod__(self: P, other) -> Tuple[P, P]:
        """
        Return (q, r) such that self == q * other + r.

        >>> from unipoly import DensePoly
        >>> divmod(DensePoly([-1, 0, 1]), DensePoly([-1, 1]))      # x^2 - 1 / x - 1
        (DensePoly('x+1'), DensePoly('0'))
        >>> divmod(DensePoly([1, 0, 1]), DensePoly([0, 1]))        # x^2 + 1 / x
        (DensePoly('x'), DensePoly('1'))
        """
        result = self._divmod(other)
        return NotImplemented if result is None else result

    def __truediv__(self: P, other) -> P:
        result = self._divmod(other)
        return NotImplemented if result is None else result[0]

    def __mod__(self: P, other) -> P:
        result = self._divmod(other)
        return NotImplemented if result is None else result[1]

    def __itruediv__(self: P, other) -> P:
        result = self._divmod(other)
        if result is None:
            return NotImplemented
        self._assign(result[0])
        return self

    def __imod__(self: P, other) -> P:
        result = self._divmod(other)
        if result is None:
            return NotImplemented
        self._assign(result[1])
        return self

    # Evaluation and composition

    def __call__(self, x):
        """Evaluate at a scalar (or numpy array) x, or compose with x if it is a polynomial."""
        if isinstance(x, PolyBase):
            return compose(self, x)
        return self.evaluate(x)

    def compose(self: P, other: PolyBase) -> P:
        return compose(self, other)

    def gcd(self: P, other: PolyBase, precision=None) -> P:
        return gcd(self, other, precision=precision)

    add = __add__
    subtract = __sub__
    multiply = __mul__
    divide = __truediv__
    modulo = __mod__
    equals = __eq__


def equals(a: PolyBase, b) -> bool:
    """
    Structural equality of a polynomial with another polynomial (of either representation) or with a scalar.

    >>> from unipoly import DensePoly, SparsePoly
    >>> equals(DensePoly([1, 0, 2]), SparsePoly({0: 1, 2: 2}))
    True
    >>> equals(DensePoly([]), 0), equals(DensePoly([3]), 3), equals(DensePoly([3, 1]), 3)
    (True, True, False)
    """
    if isinstance(b, PolyBase):
        return a.degree() == b.degree() and list(a.terms()) == list(b.terms())
    return bool((a.degree() == 0 and a[0] == b) or (a.is_zero() and b == 0))


def compose(lhs: P, rhs: PolyBase) -> P:
    """
    Substitute rhs for the indeterminate of lhs. The powers of rhs are built up incrementally, jumping straight over
    the zero coefficients of lhs.

    >>> from unipoly import DensePoly
    >>> compose(DensePoly([0, 0, 1]), DensePoly([1, 1]))      # x^2 after x + 1
    DensePoly('x^2+2*x+1')
    """
    cls = type(lhs)
    if lhs.is_zero():
        return cls(0)

    result = cls(lhs[0])
    acc, last = cls(1), 0
    for e, c in lhs.terms():
        if e == 0:
            continue
        acc *= rhs ** (e - last)
        last = e
        result += c * acc

    return result


def gcd(a: P, b: PolyBase, precision=None) -> P:
    """
    The monic greatest common divisor of a and b, by the Euclidean algorithm. The result has the representation of a.

    This is only exact when the coefficients form a field (Fraction, or float up to rounding). With a precision, the
    loop also stops once the remainder is a constant of absolute value at most precision, which is how floating point
    remainders usually end up instead of at exactly zero. Integer coefficients work as long as every remainder drops in
    degree and the leading coefficient of the result divides all of its coefficients. Otherwise there is no exact monic
    answer over the integers, and ValueError is raised.

    >>> from fractions import Fraction
    >>> from unipoly import DensePoly
    >>> gcd(DensePoly([-1, 0, 1]), DensePoly([-1, 1]))
    DensePoly('x-1')
    >>> gcd(DensePoly([Fraction(2), Fraction(2)]), DensePoly([Fraction(3), Fraction(6), Fraction(3)]))
    DensePoly('x+1')
    """
    a, b = a.copy(), type(a)._from_terms(b.terms())

    while not b.is_zero():
        if precision is not None and b.degree() == 0 and abs(b[0]) <= precision:
            logger.debug("gcd: remainder %s is within precision %s, treating it as zero.", b, precision)
            break

        logger.debug("gcd: dividing degree %d by degree %d.", a.degree(), b.degree())
        r = a % b
        if r.degree() >= b.degree():
            raise ValueError(f"gcd({a}, {b}) does not converge: the coefficients do not form a field.")
        a, b = b, r

    if not a.is_zero():
        lead = a.leading()
        if isinstance(lead, numbers.Integral) and any(
            isinstance(c, numbers.Integral) and c % lead for _, c in a.terms()
        ):
            raise ValueError(f"gcd is {a}, which has no monic form over the integers.")
        a._div_scalar(lead)
    return a
