from .base import PolyBase, compose, equals, gcd
from .convert import from_array, from_frame, to_array, to_dense, to_frame, to_sparse
from .dense import DensePoly
from .errors import DivisionByZero, ParseError
from .sparse import SparsePoly

__all__ = [
    "DensePoly",
    "DivisionByZero",
    "ParseError",
    "PolyBase",
    "SparsePoly",
    "compose",
    "equals",
    "from_array",
    "from_frame",
    "gcd",
    "to_array",
    "to_dense",
    "to_frame",
    "to_sparse",
]
