"""
Core math modules для numvec

Политика dtype и численные ядра, на которых построен NumericVector.
"""

# Elements (dtype policy)
from src.numvec.math.elements import (
    DEFAULT_DTYPE,
    DTYPE_NAMES,
    FLOATING_DTYPES,
    SUPPORTED_DTYPES,
    coerce_element,
    coerce_elements,
    decode_element,
    dtype_from_name,
    dtype_name,
    encode_element,
    is_floating,
    is_valid_float,
    unit_of,
    validate_count,
    validate_dtype,
    zero_of,
)

# Linalg kernels
from src.numvec.math.linalg import cross, inner, sqrt

# Selection
from src.numvec.math.selection import INSERTION_SORT_THRESHOLD, median, select_kth

__all__ = [
    # Elements — Constants
    "DEFAULT_DTYPE",
    "DTYPE_NAMES",
    "FLOATING_DTYPES",
    "SUPPORTED_DTYPES",
    # Elements — Functions
    "coerce_element",
    "coerce_elements",
    "decode_element",
    "dtype_from_name",
    "dtype_name",
    "encode_element",
    "is_floating",
    "is_valid_float",
    "unit_of",
    "validate_count",
    "validate_dtype",
    "zero_of",
    # Linalg
    "cross",
    "inner",
    "sqrt",
    # Selection
    "INSERTION_SORT_THRESHOLD",
    "median",
    "select_kth",
]
