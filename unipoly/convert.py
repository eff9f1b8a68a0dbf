"""
Conversions between the two polynomial representations, and to and from numpy arrays and pandas frames.

A numpy array holds the dense coefficient list [c_0, c_1, ..., c_d], exactly like DensePoly.coeffs. A frame holds one
row per non-zero term, with columns 'exponent' and 'coefficient', exactly like SparsePoly.terms().
"""
from __future__ import annotations

import numpy as np
import numpy.typing as npt
import pandas as pd

from .base import PolyBase
from .dense import DensePoly
from .sparse import SparsePoly

FRAME_COLUMNS = ['exponent', 'coefficient']


def to_sparse(poly: PolyBase) -> SparsePoly:
    """
    >>> to_sparse(DensePoly([1, 0, 0, 4]))
    SparsePoly('4*x^3+1')
    """
    return SparsePoly({e: c for e, c in poly.terms()})


def to_dense(poly: PolyBase) -> DensePoly:
    """
    >>> to_dense(SparsePoly({3: 4, 0: 1})).coeffs
    [1, 0, 0, 4]
    """
    coeffs = [0] * (poly.degree() + 1)
    for e, c in poly.terms():
        coeffs[e] = c
    return DensePoly(coeffs)


def to_array(poly: PolyBase, dtype: npt.DTypeLike = None) -> npt.NDArray:
    """
    The coefficients c_0, ..., c_d as a 1-D array of length degree + 1. The zero polynomial gives an empty array.

    >>> to_array(SparsePoly({2: 3, 0: 1}))
    array([1, 0, 3])
    """
    return np.array(to_dense(poly).coeffs, dtype=dtype)


def trim(A: npt.NDArray) -> npt.NDArray:
    """Trim trailing zeros from a 1-D coefficient array."""
    last = A.shape[-1]
    while last > 0 and A[last - 1] == 0:
        last -= 1

    return A[:last] if last < A.shape[-1] else A


def from_array(A: npt.ArrayLike, sparse: bool = False) -> PolyBase:
    """
    Build a polynomial from a 1-D array of coefficients c_0, ..., c_d. Coefficients come out as Python scalars.

    >>> from_array(np.array([1, 0, 3, 0, 0]))
    DensePoly('3*x^2+1')
    >>> from_array([0, 2.5], sparse=True)
    SparsePoly('2.5*x')
    """
    A = np.asarray(A)
    if A.ndim != 1:
        raise ValueError(f"Expected a 1-D array of coefficients, got shape {A.shape}.")

    coeffs = trim(A).tolist()
    return SparsePoly(coeffs) if sparse else DensePoly(coeffs)


def to_frame(poly: PolyBase) -> pd.DataFrame:
    """One row per non-zero term, in increasing exponent order."""
    return pd.DataFrame(columns=FRAME_COLUMNS, data=list(poly.terms()))


def from_frame(df: pd.DataFrame, sparse: bool = True) -> PolyBase:
    """Inverse of to_frame(). Rows may come in any order, and repeated exponents are summed."""
    missing = set(FRAME_COLUMNS) - set(df.columns)
    if missing:
        raise ValueError(f"Frame is missing the columns {sorted(missing)}.")

    terms = zip(df['exponent'].tolist(), df['coefficient'].tolist())
    return SparsePoly._from_terms(terms) if sparse else DensePoly._from_terms(terms)
