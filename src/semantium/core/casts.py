# semantium.core.casts

"""
Transforms that build a Unit with different packs: reciprocal, rational
powers, and the two reinterpretation casts.
"""

from __future__ import annotations

import math
from fractions import Fraction
from typing import Any

from semantium.core.algebra import canonicalize, negate_all, raise_pack
from semantium.core.dimensions import Pack
from semantium.core.exponents import reduce_exponent
from semantium.core.unit import Number, Unit, _check_pack, _is_scalar


def reciprocal(u: Unit) -> Unit:
    """
    ``1 / u``: every exponent negated, value inverted.

    The result is stored in the base scale, since ``1/scale`` is not an
    integer scale.
    """
    return Unit(
        1 / u.to_base_scale(),
        1,
        canonicalize(negate_all(u.semantic)),
        canonicalize(negate_all(u.units)),
    )


def _pow_value(base: Any, exp: Fraction) -> Any:
    if exp.denominator == 1:
        return base ** exp.numerator
    if base < 0:
        raise ValueError(
            f"Cannot raise negative value {base!r} to fractional power {exp}"
        )
    return math.pow(float(base), exp.numerator / exp.denominator)


def raise_to_power(u: Unit, num: int, den: int = 1) -> Unit:
    """
    Raise ``u`` to the rational power ``num/den``.

    Both packs have every exponent multiplied by ``num/den``. The value is
    computed in the base scale and the result has scale 1. Whole powers keep
    exact payloads (ints, Fractions); fractional powers give floats and
    raise ``ValueError`` for a negative base.
    """
    exp = reduce_exponent(num, den)
    return Unit(
        _pow_value(u.to_base_scale(), exp),
        1,
        canonicalize(raise_pack(u.semantic, exp)),
        canonicalize(raise_pack(u.units, exp)),
    )


def semantic_cast(u: Unit, target_semantic: Pack) -> Unit:
    """
    Reinterpret ``u`` under another semantic pack.

    Unchecked: the caller vouches that the reinterpretation is meaningful.
    Only the canonical form of ``target_semantic`` is validated.
    """
    _check_pack("semantic", target_semantic)
    return Unit(u.value, u.scale, target_semantic, u.units)


def unit_cast(u: Unit, target_units: Pack, *, factor: Number) -> Unit:
    """
    Re-express ``u`` over another unit pack.

    ``factor`` is how many of the target units make one of ``u``'s units
    (e.g. ``factor=100`` from Meters to Centimeters); the value is multiplied
    by it. Scale and semantic pack are kept.
    """
    _check_pack("units", target_units)
    if isinstance(factor, bool) or not _is_scalar(factor):
        raise TypeError(f"factor must be a number, got {type(factor).__name__}")
    if factor == 0:
        raise ValueError("factor must be non-zero")
    return Unit(u.value * factor, u.scale, u.semantic, target_units)


__all__ = ["reciprocal", "raise_to_power", "semantic_cast", "unit_cast"]
