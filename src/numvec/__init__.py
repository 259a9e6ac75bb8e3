"""
numvec — Owned numeric vector with statistics and linear algebra.

Single-process numeric container: index-addressed insert/erase, reductions,
order statistics with tie reporting, dot/cross product and normalization.
"""

from src.numvec.domain import ExtremumResult, SingleExtremum, TiedExtremum
from src.numvec.errors import (
    ElementTypeError,
    EmptyOperand,
    InvalidArgument,
    OutOfRange,
    VectorError,
)
from src.numvec.logging_config import setup_logging
from src.numvec.render import render_extremum, render_sequence
from src.numvec.vector import NumericVector, concat, cross_product, dot_product

__all__ = [
    # Vector
    "NumericVector",
    "concat",
    "cross_product",
    "dot_product",
    # Extremum results
    "ExtremumResult",
    "SingleExtremum",
    "TiedExtremum",
    # Errors
    "VectorError",
    "OutOfRange",
    "InvalidArgument",
    "EmptyOperand",
    "ElementTypeError",
    # Rendering
    "render_sequence",
    "render_extremum",
    # Logging
    "setup_logging",
]
