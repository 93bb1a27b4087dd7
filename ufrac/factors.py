"""Greatest common divisor and least common multiple over unsigned 64-bit integers."""
from __future__ import annotations

import logging
import numbers
from typing import Final

logger = logging.getLogger(__name__)

U64_MAX: Final[int] = 2**64 - 1


def ensure_u64(value: numbers.Integral, *, name: str) -> int:
    """Convert *value* to ``int`` when it is an unsigned 64-bit integer."""
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise TypeError(f"{name} must be an integer, got {type(value)!r}")
    result = int(value)
    if result < 0:
        raise ValueError(f"{name} must be non-negative, got {result}")
    if result > U64_MAX:
        raise OverflowError(f"{name} does not fit in 64 bits: {result}")
    return result


def _ensure_result(result: int, a: int, b: int) -> int:
    if result > U64_MAX:
        raise OverflowError(f"lcm({a}, {b}) does not fit in 64 bits")
    return result


def gcd(a: int, b: int) -> int:
    """Return the greatest common divisor of *a* and *b*.

    Euclid's algorithm. ``gcd(a, 0) == a`` for every ``a``, so ``gcd(0, 0)``
    is ``0`` rather than an error.

    >>> gcd(120, 40)
    40
    """
    a = ensure_u64(a, name="a")
    b = ensure_u64(b, name="b")
    while b != 0:
        a, b = b, a % b
    return a


def lcm(a: int, b: int) -> int:
    """Return the least common multiple of *a* and *b*.

    Either argument being zero gives ``0``. Raises :class:`OverflowError` when
    the result does not fit in 64 bits.

    >>> lcm(8, 5)
    40
    >>> lcm(2, 4)
    4
    """
    a = ensure_u64(a, name="a")
    b = ensure_u64(b, name="b")
    if a == 0 or b == 0:
        return 0
    # Divide before multiplying: the result fits whenever the true LCM does.
    return _ensure_result(a // gcd(a, b) * b, a, b)


def lcm_by_scan(a: int, b: int) -> int:
    """Least common multiple found by scanning multiples of the larger argument.

    Cost grows with ``min(a, b)``; prefer :func:`lcm`. The scan stops at the
    product ``a * b``, which is always a common multiple, and raises
    :class:`OverflowError` when the result does not fit in 64 bits.
    """
    a = ensure_u64(a, name="a")
    b = ensure_u64(b, name="b")
    if a == 0 or b == 0:
        return 0
    if a == b:
        return a

    low, high = min(a, b), max(a, b)
    bound = a * b
    for candidate in range(high, min(bound, U64_MAX + 1), high):
        if candidate % low == 0:
            return candidate
    logger.debug("lcm_by_scan(%d, %d) reached the product bound", a, b)
    return _ensure_result(bound, a, b)


__all__ = ["U64_MAX", "ensure_u64", "gcd", "lcm", "lcm_by_scan"]
