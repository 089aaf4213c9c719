# semantium.core.exponents

"""
Rational exponent arithmetic.

Exponents are ``fractions.Fraction`` values, which are always stored in lowest
terms with a positive denominator. The helpers here are the only place that
builds them from raw numerator/denominator pairs.
"""

from __future__ import annotations

from fractions import Fraction
from math import gcd
from typing import Tuple

from semantium.core.exceptions import InvalidExponent
from semantium.core.utils import rationalize

ExponentLike = int | float | Fraction


def _check_int(name: str, value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidExponent(f"{name} must be an int, got {type(value).__name__}")
    return value


def reduce_ratio(num: int, den: int = 1) -> Tuple[int, int]:
    """Divide ``num/den`` by their gcd and move the sign onto the numerator."""
    num = _check_int("numerator", num)
    den = _check_int("denominator", den)
    if den == 0:
        raise InvalidExponent("Exponent denominator must be non-zero")

    div = gcd(num, den)
    num, den = num // div, den // div
    if den < 0:
        num, den = -num, -den
    return num, den


def reduce_exponent(num: int, den: int = 1) -> Fraction:
    """Return ``num/den`` in lowest terms with a positive denominator."""
    return Fraction(*reduce_ratio(num, den))


def is_reduced(num: int, den: int) -> bool:
    return den > 0 and gcd(abs(num), den) == 1


def add_exponents(a: Fraction, b: Fraction) -> Fraction:
    # (n1*d2 + n2*d1) / (d1*d2)
    return reduce_exponent(
        a.numerator * b.denominator + b.numerator * a.denominator,
        a.denominator * b.denominator,
    )


def multiply_exponents(a: Fraction, b: Fraction) -> Fraction:
    return reduce_exponent(a.numerator * b.numerator, a.denominator * b.denominator)


def negate_exponent(e: Fraction) -> Fraction:
    return Fraction(-e.numerator, e.denominator)


def as_exponent(value: ExponentLike) -> Fraction:
    """
    Coerce an int, Fraction or exactly-rational float into a Fraction.

    Raises ``InvalidExponent`` for anything else, including floats such as
    ``math.pi`` that have no exact small rational form.
    """
    if isinstance(value, Fraction):
        return value
    if isinstance(value, bool):
        raise InvalidExponent("Exponent must be int, float, or Fraction, got bool")
    if isinstance(value, int):
        return Fraction(value, 1)
    if isinstance(value, float):
        try:
            return rationalize(value, as_fraction=True)  # type: ignore[return-value]
        except ValueError as exc:
            raise InvalidExponent(str(exc)) from exc
    raise InvalidExponent(f"Exponent must be int, float, or Fraction, got {type(value).__name__}")


__all__ = [
    "ExponentLike",
    "reduce_ratio",
    "reduce_exponent",
    "is_reduced",
    "add_exponents",
    "multiply_exponents",
    "negate_exponent",
    "as_exponent",
]
