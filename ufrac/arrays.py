"""NumPy helpers for collections of :class:`~ufrac.fraction.Fraction` values."""
from __future__ import annotations

from functools import reduce
from typing import Any, Iterable

import numpy as np

from .fraction import Fraction


def _coerce_fraction(item: Any) -> Fraction:
    if isinstance(item, Fraction):
        return item
    if isinstance(item, (tuple, list)) and len(item) == 2:
        return Fraction(item[0], item[1])
    raise TypeError(f"Cannot interpret {type(item)!r} as Fraction")


def as_fraction_array(values: Any, *, copy: bool = True) -> np.ndarray:
    """Return a ``numpy.ndarray`` of :class:`Fraction` values.

    ``values`` can be an iterable of fractions or ``(numerator, denominator)``
    pairs, or an existing object array. When ``copy`` is ``False`` and
    ``values`` is an object array that already holds only fractions, the
    original array is returned.
    """

    if isinstance(values, np.ndarray):
        if values.dtype == object and all(isinstance(item, Fraction) for item in values.flat):
            return values.copy() if copy else values
        if values.dtype != object:
            raise TypeError(
                f"Cannot build fractions from a {values.dtype} array; pass Fraction objects"
            )
        flat = [_coerce_fraction(item) for item in values.flat]
        array = np.empty(len(flat), dtype=object)
        array[:] = flat
        return array.reshape(values.shape)

    # Filled element by element so that numpy does not unpack the fractions.
    coerced = [_coerce_fraction(item) for item in values]
    array = np.empty(len(coerced), dtype=object)
    array[:] = coerced
    return array


def evaluate_array(values: Any) -> np.ndarray:
    """Return the ``float64`` evaluation of every fraction in ``values``."""

    array = as_fraction_array(values, copy=False)
    evaluated = np.fromiter((item.evaluate() for item in array.flat), dtype=np.float64, count=array.size)
    return evaluated.reshape(array.shape)


def sum_fractions(values: Iterable[Fraction]) -> Fraction:
    """Add fractions left to right; an empty input sums to ``0/1``."""

    return reduce(Fraction.add_fraction, (_coerce_fraction(v) for v in values), Fraction(0, 1))


def product(values: Iterable[Fraction]) -> Fraction:
    """Multiply fractions left to right; an empty input gives ``1/1``."""

    return reduce(Fraction.multiply, (_coerce_fraction(v) for v in values), Fraction(1, 1))


__all__ = ["as_fraction_array", "evaluate_array", "sum_fractions", "product"]
