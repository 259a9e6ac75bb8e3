"""
Domain models and value objects.

Contains the ExtremumResult tagged union returned by max()/min().
"""

from src.numvec.domain.extremum import (
    ExtremumResult,
    SingleExtremum,
    TiedExtremum,
    extremum_from_payload,
    extremum_from_positions,
    parse_extremum,
)

__all__ = [
    "ExtremumResult",
    "SingleExtremum",
    "TiedExtremum",
    "extremum_from_payload",
    "extremum_from_positions",
    "parse_extremum",
]
