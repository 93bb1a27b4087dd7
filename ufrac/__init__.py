"""Exact fractions over unsigned 64-bit integers."""

from .arrays import as_fraction_array, evaluate_array, product, sum_fractions
from .factors import U64_MAX, gcd, lcm, lcm_by_scan
from .fraction import (
    Fraction,
    FractionOverflowError,
    InvalidFraction,
    convert_to_common_denominator,
)

__all__ = [
    "Fraction",
    "FractionOverflowError",
    "InvalidFraction",
    "convert_to_common_denominator",
    "gcd",
    "lcm",
    "lcm_by_scan",
    "U64_MAX",
    "as_fraction_array",
    "evaluate_array",
    "sum_fractions",
    "product",
]
