# semantium.core.dimensions

"""
Base units, power entries and packs.

A *pack* is a product of base units raised to rational powers, e.g.
``Meters^2 · Seconds^-1``. Its canonical form lists at most one entry per
base unit, sorted ascending by base id, with no zero exponents; two packs
describe the same dimension iff their canonical forms are equal.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from fractions import Fraction
from typing import Any, Iterable, Literal

from semantium.core.exceptions import InvalidExponent
from semantium.core.exponents import ExponentLike, as_exponent, is_reduced
from semantium.core.utils import format_exponent, format_pack

BaseKind = Literal["unit", "semantic"]


@dataclass(frozen=True, slots=True, order=True)
class BaseUnit:
    """
    An atomic unit of measure (Meters) or semantic tag (Width).

    Only ``id`` takes part in equality, hashing and ordering. Ids are handed
    out by :class:`semantium.units.registry.BaseUnitRegistry`; build base units
    through a registry rather than directly.
    """

    id: int
    name: str = field(compare=False)
    kind: BaseKind = field(default="unit", compare=False)

    def __pow__(self, n: ExponentLike, modulo: Any | None = None) -> "PowerEntry":
        if modulo is not None:
            raise TypeError("Modulo exponentiation is not supported for BaseUnit.")
        return PowerEntry(self, as_exponent(n))

    def __repr__(self) -> str:
        return f"BaseUnit({self.name!r}, id={self.id})"


@dataclass(frozen=True, slots=True)
class PowerEntry:
    """``base ** exponent`` with an exact rational exponent."""

    base: BaseUnit
    exponent: Fraction = Fraction(1)

    def __post_init__(self) -> None:
        if not isinstance(self.base, BaseUnit):
            raise TypeError(f"PowerEntry base must be a BaseUnit, got {type(self.base).__name__}")
        exp = self.exponent
        if isinstance(exp, bool) or not isinstance(exp, (int, Fraction)):
            raise InvalidExponent(
                f"PowerEntry exponent must be int or Fraction, got {type(exp).__name__}"
            )
        if not isinstance(exp, Fraction):
            object.__setattr__(self, "exponent", Fraction(exp))

    @property
    def is_zero(self) -> bool:
        return self.exponent.numerator == 0

    def __repr__(self) -> str:
        exp = self.exponent
        if exp.denominator == 1:
            return f"[{self.base.name}^{exp.numerator}]"
        return f"[{self.base.name}^({exp.numerator}/{exp.denominator})]"

    def __str__(self) -> str:
        return self.base.name + format_exponent(self.exponent)


def power(base: BaseUnit, num: int = 1, den: int = 1) -> PowerEntry:
    """
    Strict entry constructor: ``num/den`` must already be in lowest terms.

    >>> power(meters, 2, 3)     # Meters^(2/3)
    >>> power(meters, 2, 4)     # raises InvalidExponent
    """
    for label, v in (("numerator", num), ("denominator", den)):
        if isinstance(v, bool) or not isinstance(v, int):
            raise InvalidExponent(f"Power {label} must be an int, got {type(v).__name__}")
    if not is_reduced(num, den):
        raise InvalidExponent(
            f"Power exponent {num}/{den} must have a positive denominator and be in lowest terms"
        )
    return PowerEntry(base, Fraction(num, den))


class Pack(tuple):
    """
    Immutable sequence of :class:`PowerEntry` describing a product of base units.

    A pack may be non-canonical while it passes through the algebra in
    :mod:`semantium.core.algebra`; :attr:`is_canonical` tells whether it is.
    The operators below always return canonical packs.
    """

    __slots__ = ()

    def __new__(cls, entries: Iterable[PowerEntry] = ()) -> "Pack":
        if isinstance(entries, Pack):
            return tuple.__new__(cls, entries)
        t = tuple(entries)
        for e in t:
            if not isinstance(e, PowerEntry):
                raise TypeError(f"Pack entries must be PowerEntry, got {type(e).__name__}")
        return tuple.__new__(cls, t)

    @classmethod
    def of(cls, *entries: PowerEntry | BaseUnit) -> "Pack":
        """Canonical pack from entries in any order; bare base units mean power 1."""
        from semantium.core.algebra import canonicalize

        items = [PowerEntry(e) if isinstance(e, BaseUnit) else e for e in entries]
        return canonicalize(cls(items))

    # --- Algebra (operator overloads) ---
    def __mul__(self, other: "Pack") -> "Pack":  # type: ignore[override]
        if not isinstance(other, Pack):
            return NotImplemented
        from semantium.core.algebra import multiply_packs

        return multiply_packs(self, other)

    def __truediv__(self, other: "Pack") -> "Pack":
        if not isinstance(other, Pack):
            return NotImplemented
        from semantium.core.algebra import divide_packs

        return divide_packs(self, other)

    def __pow__(self, n: ExponentLike, modulo: Any | None = None) -> "Pack":
        if modulo is not None:
            raise TypeError("Modulo exponentiation is not supported for Pack.")
        from semantium.core.algebra import canonicalize, raise_pack

        return canonicalize(raise_pack(self, as_exponent(n)))

    def __rmul__(self, other: Any) -> "Pack":
        """Block ``int * pack`` from falling back to tuple repetition."""
        return NotImplemented

    def __add__(self, other: Any) -> "Pack":
        """Block tuple concatenation; use ``algebra.concat`` explicitly."""
        return NotImplemented

    def __radd__(self, other: Any) -> "Pack":
        return NotImplemented

    # --- Helpers ---
    @property
    def is_canonical(self) -> bool:
        from semantium.core.algebra import is_ordered

        return is_ordered(self) and not any(e.is_zero for e in self)

    @property
    def is_dimensionless(self) -> bool:
        return len(self) == 0

    @property
    def bases(self) -> tuple[BaseUnit, ...]:
        return tuple(e.base for e in self)

    def exponent_of(self, base: BaseUnit) -> Fraction:
        """Exponent of ``base`` in this pack, 0 when absent."""
        for e in self:
            if e.base == base:
                return e.exponent
        return Fraction(0)

    def __repr__(self) -> str:
        if not self:
            return "Pack()"
        return "Pack(" + "".join(repr(e) for e in self) + ")"

    def __str__(self) -> str:
        return format_pack(self)


EMPTY_PACK = Pack()

__all__ = ["BaseKind", "BaseUnit", "PowerEntry", "power", "Pack", "EMPTY_PACK"]
