"""Properties that every polynomial value should have, checked over both representations."""
import itertools
from fractions import Fraction

import pytest

from unipoly import DensePoly, SparsePoly, to_dense, to_sparse

REPS = [DensePoly, SparsePoly]

SAMPLES = [
    [],
    [0],
    [7],
    [0, 1],
    [-1, 1],
    [1, 0, -3, 2],
    [2, 1, -3, 2],
    [0, 0, 0, 5],
    [1, 0, 0, 0, 0, -1],
    [3, -4, 0, 1, 2],
]


def assert_canonical(p):
    if isinstance(p, DensePoly):
        assert not p.coeffs or p.coeffs[-1] != 0
    else:
        assert all(c != 0 for c in p.coeffs.values())


@pytest.mark.parametrize("rep", REPS)
def test_canonical_form(rep):
    for a, b in itertools.product(SAMPLES, repeat=2):
        p, q = rep(a), rep(b)
        for result in [p, p + q, p - q, p * q, q - p, p * 0, -p, p(q)]:
            assert_canonical(result)
        if not q.is_zero():
            quo, rem = divmod(p, q)
            assert_canonical(quo)
            assert_canonical(rem)


@pytest.mark.parametrize("rep", REPS)
def test_zero_polynomial(rep):
    for zero in [rep(), rep(0), rep([0, 0, 0]), rep([1, 2]) - rep([1, 2])]:
        assert zero.degree() == -1
        assert zero.size() == 0
        assert zero == 0
        assert str(zero) == '0'


@pytest.mark.parametrize("rep", REPS)
@pytest.mark.parametrize("field", [int, Fraction])
def test_division_identity(rep, field):
    for a, b in itertools.product(SAMPLES, repeat=2):
        p, q = rep([field(c) for c in a]), rep([field(c) for c in b])
        if q.is_zero():
            continue
        assert p == (p / q) * q + p % q


@pytest.mark.parametrize("rep", REPS)
def test_fraction_remainder_degree(rep):
    for a, b in itertools.product(SAMPLES, repeat=2):
        p, q = rep([Fraction(c) for c in a]), rep([Fraction(c) for c in b])
        if q.is_zero():
            continue
        assert (p % q).degree() < q.degree() or q.degree() == 0


def test_representation_equivalence():
    for a in SAMPLES:
        assert to_sparse(to_dense(SparsePoly(a))) == SparsePoly(a)
        assert to_dense(to_sparse(DensePoly(a))) == DensePoly(a)
        assert to_dense(SparsePoly(a)).coeffs == DensePoly(a).coeffs
        assert to_sparse(DensePoly(a)).coeffs == SparsePoly(a).coeffs


def test_evaluation_consistency():
    for a in SAMPLES:
        for x in [-3, -1, 0, 1, 2, 10, Fraction(1, 3)]:
            assert DensePoly(a)(x) == SparsePoly(a)(x)


@pytest.mark.parametrize("rep", REPS)
def test_composition_agrees_with_evaluation(rep):
    for a, b in itertools.product(SAMPLES, repeat=2):
        p, q = rep(a), rep(b)
        for x in [-2, 0, 3]:
            assert p(q)(x) == p(q(x))


@pytest.mark.parametrize("rep", REPS)
def test_ring_laws(rep):
    for a, b in itertools.product(SAMPLES, repeat=2):
        p, q = rep(a), rep(b)
        assert p + q == q + p
        assert p * q == q * p
        assert (p - q) + q == p
        assert (p + q) * q == p * q + q * q


@pytest.mark.parametrize("rep", REPS)
def test_scenarios(rep):
    assert rep([1, 0, -3, 2]) + rep([1, 1]) == rep([2, 1, -3, 2])

    quo, rem = divmod(rep([-1, 0, 1]), rep([-1, 1]))
    assert quo == rep([1, 1])
    assert rem.is_zero()

    assert rep([1, 0, 1]) % rep([0, 1]) == 1
    assert rep([-1, 0, 1]).gcd(rep([-1, 1])) == rep([-1, 1])
    assert rep([0, 0, 1])(rep([1, 1])) == rep([1, 2, 1])
    assert str(rep([1, 0, -1])) == '-x^2+1'
