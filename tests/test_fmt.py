from decimal import Decimal
from fractions import Fraction

import pytest

from unipoly import DensePoly, ParseError, SparsePoly

RENDERINGS = [
    ([], '0'),
    ([1], '1'),
    ([-1], '-1'),
    ([0, 1], 'x'),
    ([0, -1], '-x'),
    ([1, 0, -1], '-x^2+1'),
    ([-1, 0, 1], 'x^2-1'),
    ([1, 0, -3, 2], '2*x^3-3*x^2+1'),
    ([2, 1, -3, 2], '2*x^3-3*x^2+x+2'),
    ([0, 0, 2], '2*x^2'),
    ([0, 1, 1], 'x^2+x'),
    ([5, -1], '-x+5'),
    ([0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, -12], '-12*x^11'),
]


@pytest.mark.parametrize("rep", [DensePoly, SparsePoly])
@pytest.mark.parametrize("coeffs, text", RENDERINGS)
def test_render(rep, coeffs, text):
    assert str(rep(coeffs)) == text
    assert repr(rep(coeffs)) == f"{rep.__name__}('{text}')"


@pytest.mark.parametrize("rep", [DensePoly, SparsePoly])
@pytest.mark.parametrize("coeffs, text", RENDERINGS)
def test_parse_round_trip(rep, coeffs, text):
    assert rep.parse(text) == rep(coeffs)
    assert rep.parse(str(rep(coeffs))) == rep(coeffs)


def test_render_other_coefficients():
    assert str(DensePoly([0.5, -1.0, 1.0])) == 'x^2-x+0.5'
    assert str(DensePoly([Fraction(-1, 2), Fraction(3, 4)])) == '3/4*x-1/2'
    assert str(SparsePoly({2: Decimal('1.5')})) == '1.5*x^2'
    assert str(DensePoly([1e-05, 1.0])) == 'x+1e-05'


def test_parse_other_coefficients():
    assert DensePoly.parse('x^2-x+0.5', coeff=float) == DensePoly([0.5, -1.0, 1.0])
    assert DensePoly.parse('3/4*x-1/2', coeff=Fraction) == DensePoly([Fraction(-1, 2), Fraction(3, 4)])
    assert DensePoly.parse('x+1e-05', coeff=float) == DensePoly([1e-05, 1.0])
    assert SparsePoly.parse('1.5*x^2', coeff=Decimal) == SparsePoly({2: Decimal('1.5')})


def test_parse_is_lenient():
    assert DensePoly.parse(' 2x + 3 ') == DensePoly([3, 2])
    assert DensePoly.parse('x + x') == DensePoly([0, 2])
    assert DensePoly.parse('x^2 - x^2') == DensePoly()
    assert DensePoly.parse('0') == 0
    assert SparsePoly.parse('x^1000+1') == SparsePoly({1000: 1, 0: 1})


@pytest.mark.parametrize("text", ['', '+', 'x^', '2**x', '3x2', 'x y', 'x+-1', '1.5', 'y'])
def test_parse_errors(text):
    with pytest.raises(ParseError):
        DensePoly.parse(text)


def test_variable_name():
    p = DensePoly([-1, 0, 1])
    assert p.fmt(var='t') == 't^2-1'
    assert DensePoly.parse('t^2-1', var='t') == p


def test_latex():
    p = DensePoly([1, 0, -3, 2])
    assert p.fmt(mode='latex') == '2x^{3}-3x^{2}+1'
    assert p._repr_latex_() == '$2x^{3}-3x^{2}+1$'
