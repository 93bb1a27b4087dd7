"""Fractions of unsigned 64-bit integers with on-demand simplification."""
from __future__ import annotations

import logging
import numbers
from typing import Any, Tuple, Union

from .factors import U64_MAX, ensure_u64, gcd, lcm

logger = logging.getLogger(__name__)

Scalar = numbers.Real


class InvalidFraction(ZeroDivisionError):
    """Raised when a fraction would get a zero denominator."""


class FractionOverflowError(OverflowError):
    """Raised when a numerator or denominator leaves the unsigned 64-bit range."""


def _checked_u64(value: int, *, name: str) -> int:
    if value > U64_MAX:
        raise FractionOverflowError(f"{name} overflows 64 bits: {value}")
    return value


def _is_scalar(value: Any) -> bool:
    return isinstance(value, numbers.Real)


class Fraction:
    """Immutable ratio ``numerator / denominator`` of unsigned 64-bit integers.

    Values are stored as given; ``Fraction(2, 4)`` keeps its representation
    and :meth:`simplify` returns the reduced copy. Equality compares values,
    so ``Fraction(2, 4) == Fraction(1, 2)``.
    """

    __slots__ = ("_numerator", "_denominator")
    __array_ufunc__ = None  # NumPy scalars defer to the reflected operators.

    def __init__(self, numerator: numbers.Integral, denominator: numbers.Integral) -> None:
        try:
            num = ensure_u64(numerator, name="numerator")
            den = ensure_u64(denominator, name="denominator")
        except OverflowError as exc:
            raise FractionOverflowError(str(exc)) from exc
        if den == 0:
            raise InvalidFraction(f"denominator must be non-zero (numerator={num})")

        object.__setattr__(self, "_numerator", num)
        object.__setattr__(self, "_denominator", den)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    # ------------------------------------------------------------------
    # Properties
    @property
    def numerator(self) -> int:
        return self._numerator

    @property
    def denominator(self) -> int:
        return self._denominator

    # ------------------------------------------------------------------
    # Normalisation
    def is_simplified(self) -> bool:
        """Return ``True`` when numerator and denominator are coprime."""
        return gcd(self._numerator, self._denominator) == 1

    def simplify(self) -> "Fraction":
        """Return the reduced form of this fraction."""
        divisor = gcd(self._numerator, self._denominator)
        if divisor == 1:
            return self
        # 0/n reduces to 0/1 since gcd(0, n) == n.
        return Fraction(self._numerator // divisor, self._denominator // divisor)

    def multiply_by_unity_fraction(self, n: int) -> "Fraction":
        """Scale numerator and denominator by *n*, keeping the value."""
        n = ensure_u64(n, name="n")
        if n == 0:
            raise InvalidFraction("cannot scale a fraction by 0/0")
        return self.multiply(Fraction(n, n))

    # ------------------------------------------------------------------
    # Arithmetic
    def multiply(self, other: "Fraction") -> "Fraction":
        """Return the unsimplified product ``self * other``."""
        return Fraction(
            _checked_u64(self._numerator * other._numerator, name="numerator"),
            _checked_u64(self._denominator * other._denominator, name="denominator"),
        )

    def add_fraction(self, other: "Fraction") -> "Fraction":
        """Return the unsimplified sum over a common denominator."""
        if self._denominator == other._denominator:
            left, right = self, other
        else:
            left, right = convert_to_common_denominator(self, other)
        return Fraction(
            _checked_u64(left._numerator + right._numerator, name="numerator"),
            left._denominator,
        )

    def add_scalar(self, value: Scalar) -> float:
        """Return ``evaluate() + value`` as a float."""
        if not _is_scalar(value):
            raise TypeError(f"cannot add {type(value)!r} to Fraction")
        return self.evaluate() + float(value)

    def add(self, other: Any) -> Union["Fraction", float]:
        if isinstance(other, Fraction):
            return self.add_fraction(other)
        if _is_scalar(other):
            return self.add_scalar(other)
        raise TypeError(f"cannot add {type(other)!r} to Fraction")

    def evaluate(self) -> float:
        return self._numerator / self._denominator

    # ------------------------------------------------------------------
    # Comparisons
    def equals_fraction(self, other: "Fraction") -> bool:
        left, right = self.simplify(), other.simplify()
        return (
            left._numerator == right._numerator
            and left._denominator == right._denominator
        )

    def equals_scalar(self, value: Scalar) -> bool:
        """Exact comparison of the float value; callers wanting a tolerance apply their own."""
        if not _is_scalar(value):
            raise TypeError(f"cannot compare Fraction with {type(value)!r}")
        # Mixed int/float comparison is exact; converting value first is not.
        return self.evaluate() == value

    # ------------------------------------------------------------------
    # Operators
    def __add__(self, other: Any) -> Any:
        if isinstance(other, Fraction):
            return self.add_fraction(other)
        if _is_scalar(other):
            return self.add_scalar(other)
        return NotImplemented

    def __radd__(self, other: Any) -> Any:
        if _is_scalar(other):
            return self.add_scalar(other)
        return NotImplemented

    def __mul__(self, other: Any) -> Any:
        if isinstance(other, Fraction):
            return self.multiply(other)
        return NotImplemented

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, Fraction):
            return self.equals_fraction(other)
        if _is_scalar(other):
            return self.equals_scalar(other)
        return NotImplemented

    def __hash__(self) -> int:
        # Equal fractions share a float value, and so does any scalar they equal.
        return hash(self.evaluate())

    def __float__(self) -> float:
        return self.evaluate()

    def __bool__(self) -> bool:  # pragma: no cover - trivial mapping
        return self._numerator != 0

    def __reduce__(self):
        return (Fraction, (self._numerator, self._denominator))

    def __copy__(self) -> "Fraction":
        return self

    def __deepcopy__(self, memo) -> "Fraction":
        return self

    # ------------------------------------------------------------------
    # Representation
    def __repr__(self) -> str:
        return f"Fraction({self._numerator}, {self._denominator})"

    def __str__(self) -> str:
        text = f"{self._numerator}/{self._denominator}"
        if self.is_simplified():
            return text
        return f"{text} (<==> {self.simplify()})"

    def __format__(self, format_spec: str) -> str:
        if format_spec in ("", "r"):
            return str(self)
        return format(self.evaluate(), format_spec)


def convert_to_common_denominator(
    fraction1: Fraction, fraction2: Fraction
) -> Tuple[Fraction, Fraction]:
    """Rewrite two fractions over their least common denominator.

    Both inputs are simplified first, so the shared denominator is the LCM of
    the reduced denominators. Values are preserved.

    >>> convert_to_common_denominator(Fraction(1, 3), Fraction(1, 4))
    (Fraction(4, 12), Fraction(3, 12))
    """
    fraction1, fraction2 = fraction1.simplify(), fraction2.simplify()
    if fraction1.denominator == fraction2.denominator:
        return fraction1, fraction2

    try:
        pcm = lcm(fraction1.denominator, fraction2.denominator)
    except OverflowError as exc:
        raise FractionOverflowError(str(exc)) from exc
    logger.debug(
        "common denominator of %r and %r is %d", fraction1, fraction2, pcm
    )
    return (
        fraction1.multiply_by_unity_fraction(pcm // fraction1.denominator),
        fraction2.multiply_by_unity_fraction(pcm // fraction2.denominator),
    )


__all__ = [
    "Fraction",
    "FractionOverflowError",
    "InvalidFraction",
    "convert_to_common_denominator",
]
