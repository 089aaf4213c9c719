"""
semantium.core.utils
====================

Helpers for turning floats into exact exponents and for displaying packs.

Packs are printed in the 'Grams·Meters/Seconds²' style: positive powers in the
numerator, negative powers in the denominator, unicode superscripts for
integer exponents and ``^(p/q)`` for fractional ones.
"""

from __future__ import annotations

import math
from fractions import Fraction
from typing import TYPE_CHECKING, List

if TYPE_CHECKING:  # pragma: no cover - typing aid only
    from semantium.core.dimensions import Pack

_SUPERSCRIPTS = str.maketrans("0123456789-", "⁰¹²³⁴⁵⁶⁷⁸⁹⁻")


def _sup(n: int) -> str:
    return "" if n == 1 else str(n).translate(_SUPERSCRIPTS)


def rationalize(
    value: int | float,
    *,
    as_fraction: bool = False,
    max_denominator: int = 1_000_000,
) -> int | Fraction:
    """
    Convert an int or float into an exact rational.

    A float is accepted only when the closest fraction with a bounded
    denominator converts back to exactly the same float, so ``0.5`` becomes
    ``1/2`` while ``math.pi`` is rejected.

    Returns an ``int`` when the result is whole, unless ``as_fraction`` is set.

    Raises
    ------
    TypeError
        If ``value`` is not an int or float (``bool`` is rejected too).
    ValueError
        If ``value`` is not finite or has no exact small rational form.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"Cannot rationalize value of type {type(value).__name__}")

    if isinstance(value, int):
        return Fraction(value, 1) if as_fraction else value

    if not math.isfinite(value):
        raise ValueError(f"Cannot rationalize non-finite value {value!r}")

    frac = Fraction(value).limit_denominator(max_denominator)
    if float(frac) != value:
        raise ValueError(f"{value!r} is not an exact rational with denominator <= {max_denominator}")

    if frac.denominator == 1 and not as_fraction:
        return frac.numerator
    return frac


def format_exponent(exp: Fraction) -> str:
    """Superscript for whole exponents, '^(p/q)' for fractional ones. '' for 1."""
    if exp.denominator == 1:
        return _sup(exp.numerator)
    return f"^({exp.numerator}/{exp.denominator})"


def format_pack(pack: "Pack") -> str:
    """
    Turn a pack into 'Grams·Meters/Seconds²' style.

    Entries keep the order they have in the pack, so a canonical pack prints
    in base id order. The empty pack prints as '1'.
    """
    num: List[str] = []
    den: List[str] = []
    for entry in pack:
        exp = entry.exponent
        if exp > 0:
            num.append(entry.base.name + format_exponent(exp))
        elif exp < 0:
            den.append(entry.base.name + format_exponent(-exp))

    numerator = "·".join(num) if num else "1"
    denominator = "·".join(den)
    return f"{numerator}/{denominator}" if denominator else numerator


__all__ = ["rationalize", "format_exponent", "format_pack"]
