"""
semantium.core.unit
===================

Defines the `Unit` value type and `UnitType`, the description of a fully
specified unit (scale, semantic pack, unit pack).

A `Unit` stores
- ``value``: the numeric payload, in multiples of ``scale`` base units;
- ``scale``: a positive integer, e.g. 1000 for kilometers over a meter base;
- ``semantic``: a canonical pack of semantic tags (Width, Depth, ...), or the
  empty pack when the quantity carries no subcategory;
- ``units``: a canonical pack of physical base units (Meters^2, ...).

Arithmetic derives the resulting packs and rejects incompatible operands:
``DimensionMismatch`` when the unit packs differ where they must match,
``IncompatibleSemantics`` when two non-empty semantic packs differ. The empty
semantic pack converts with any semantic pack over the same units.
"""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from math import isclose
from typing import TYPE_CHECKING, Any, Union

from semantium.core.algebra import multiply_packs, semantic_convertible
from semantium.core.dimensions import EMPTY_PACK, Pack
from semantium.core.exceptions import (
    DimensionMismatch,
    IncompatibleSemantics,
    IncompatibleUnits,
    NonCanonicalDimension,
)
from semantium.core.exponents import ExponentLike, as_exponent
from semantium.core.utils import format_pack

if TYPE_CHECKING:  # pragma: no cover - imported only for type checking
    from decimal import Decimal
    from fractions import Fraction

Number = Union[int, float, "Fraction", "Decimal"]

REL_TOL = 1e-12
MAX_SCALE = 2**64


def _is_scalar(x: object) -> bool:
    return isinstance(x, numbers.Number)


def _check_scale(scale: object) -> int:
    if isinstance(scale, bool) or not isinstance(scale, int):
        raise ValueError(f"scale must be an int, got {type(scale).__name__}")
    if not (1 <= scale < MAX_SCALE):
        raise ValueError(f"scale must be in [1, 2**64), got {scale}")
    return scale


def _check_pack(label: str, pack: object) -> Pack:
    if not isinstance(pack, Pack):
        raise TypeError(f"{label} must be a Pack, got {type(pack).__name__}")
    if not pack.is_canonical:
        raise NonCanonicalDimension(
            f"{label} pack {pack!r} must be sorted by base id, "
            "without duplicate bases or zero exponents"
        )
    return pack


def _require_compatible(
    units: Pack,
    semantic: Pack,
    other: "Unit",
    op: str,
    units_error: type[DimensionMismatch] = DimensionMismatch,
) -> None:
    if units != other.units:
        raise units_error(
            f"Cannot {op} units of different dimensions: "
            f"'{format_pack(units)}' and '{format_pack(other.units)}'"
        )
    if not semantic_convertible(semantic, other.semantic):
        raise IncompatibleSemantics(
            f"Cannot {op} quantities of different semantic subcategories: "
            f"'{format_pack(semantic)}' and '{format_pack(other.semantic)}'"
        )


def _rescale(value: Any, from_scale: int, to_scale: int) -> Any:
    if from_scale == to_scale:
        return value
    return value * from_scale / to_scale


@dataclass(frozen=True, slots=True)
class UnitType:
    """
    A fully specified unit: scale, semantic pack and unit pack.

    Calling a UnitType builds a Unit; ``convert`` builds one from another Unit
    after checking that the conversion is legal.

    >>> area_t = UnitType(1, Pack.of(length, width), Pack.of(meters ** 2))
    >>> a = area_t(12.5)
    >>> area_t.convert(volume / depth)
    """

    scale: int = 1
    semantic: Pack = EMPTY_PACK
    units: Pack = EMPTY_PACK

    def __post_init__(self) -> None:
        _check_scale(self.scale)
        _check_pack("semantic", self.semantic)
        _check_pack("units", self.units)

    def __call__(self, value: Number) -> "Unit":
        return Unit(value, self.scale, self.semantic, self.units)

    def accepts(self, other: "Unit") -> bool:
        return other.units == self.units and semantic_convertible(self.semantic, other.semantic)

    def convert(self, other: "Unit") -> "Unit":
        _require_compatible(self.units, self.semantic, other, "convert", IncompatibleUnits)
        return self(_rescale(other.value, other.scale, self.scale))

    def __str__(self) -> str:
        text = format_pack(self.units)
        if self.semantic:
            text += f" [{format_pack(self.semantic)}]"
        if self.scale != 1:
            text += f" ×{self.scale}"
        return text


class Unit:
    """
    A numeric value carrying a scale, a semantic pack and a unit pack.

    Only ``value`` is mutable, through ``assign``/``convert_from``, the
    compound-assignment operators and ``increment``/``decrement``. ``scale``,
    ``semantic`` and ``units`` are fixed at construction.
    """

    __slots__ = ("value", "_scale", "_semantic", "_units")

    def __init__(
        self,
        value: Number,
        scale: int = 1,
        semantic: Pack = EMPTY_PACK,
        units: Pack = EMPTY_PACK,
    ) -> None:
        self._scale = _check_scale(scale)
        self._semantic = _check_pack("semantic", semantic)
        self._units = _check_pack("units", units)
        if not _is_scalar(value):
            raise TypeError(f"Unit value must be a number, got {type(value).__name__}")
        self.value = value

    @property
    def scale(self) -> int:
        return self._scale

    @property
    def semantic(self) -> Pack:
        return self._semantic

    @property
    def units(self) -> Pack:
        return self._units

    @property
    def unit_type(self) -> UnitType:
        return UnitType(self._scale, self._semantic, self._units)

    def _like(self, value: Any) -> "Unit":
        return Unit(value, self._scale, self._semantic, self._units)

    def copy(self) -> "Unit":
        return self._like(self.value)

    # --- conversion & assignment ---
    def convert_from(self, other: "Unit") -> "Unit":
        """
        Take ``other``'s quantity, rescaled into this unit's scale.

        Requires identical unit packs (``IncompatibleUnits``) and convertible
        semantic packs (``IncompatibleSemantics``).
        """
        _require_compatible(self._units, self._semantic, other, "convert", IncompatibleUnits)
        self.value = _rescale(other.value, other.scale, self._scale)
        return self

    def assign(self, other: "Unit | Number") -> "Unit":
        if isinstance(other, Unit):
            return self.convert_from(other)
        if _is_scalar(other):
            self.value = other
            return self
        raise TypeError(f"Cannot assign {type(other).__name__} to a Unit")

    def to_base_scale(self) -> Any:
        """The value expressed with scale 1."""
        return self.value * self._scale

    def strip_semantic(self) -> "Unit":
        """Same quantity without a semantic subcategory."""
        return Unit(self.value, self._scale, EMPTY_PACK, self._units)

    def increment(self, step: Number = 1) -> "Unit":
        self.value += step
        return self

    def decrement(self, step: Number = 1) -> "Unit":
        self.value -= step
        return self

    # --- compound assignment (mutates value only) ---
    def __iadd__(self, other: "Unit | Number") -> "Unit":
        if isinstance(other, Unit):
            _require_compatible(self._units, self._semantic, other, "add", IncompatibleUnits)
            self.value += _rescale(other.value, other.scale, self._scale)
            return self
        if _is_scalar(other):
            self.value += other
            return self
        return NotImplemented

    def __isub__(self, other: "Unit | Number") -> "Unit":
        if isinstance(other, Unit):
            _require_compatible(self._units, self._semantic, other, "subtract", IncompatibleUnits)
            self.value -= _rescale(other.value, other.scale, self._scale)
            return self
        if _is_scalar(other):
            self.value -= other
            return self
        return NotImplemented

    def __imul__(self, other: Number) -> "Unit":
        if isinstance(other, Unit):
            raise TypeError("In-place multiplication by a Unit would change its dimension")
        if not _is_scalar(other):
            return NotImplemented
        self.value *= other
        return self

    def __itruediv__(self, other: Number) -> "Unit":
        if isinstance(other, Unit):
            raise TypeError("In-place division by a Unit would change its dimension")
        if not _is_scalar(other):
            return NotImplemented
        self.value /= other
        return self

    # --- arithmetic ---
    def __add__(self, other: "Unit | Number") -> "Unit":
        if isinstance(other, Unit):
            # result in left operand's scale and semantic
            _require_compatible(self._units, self._semantic, other, "add")
            return self._like(self.value + _rescale(other.value, other.scale, self._scale))
        if _is_scalar(other):
            # raw offset on the payload, dimension unchecked
            return self._like(self.value + other)
        return NotImplemented

    def __radd__(self, other: Number) -> "Unit":
        if not _is_scalar(other):
            return NotImplemented
        return self._like(other + self.value)

    def __sub__(self, other: "Unit | Number") -> "Unit":
        if isinstance(other, Unit):
            _require_compatible(self._units, self._semantic, other, "subtract")
            return self._like(self.value - _rescale(other.value, other.scale, self._scale))
        if _is_scalar(other):
            return self._like(self.value - other)
        return NotImplemented

    def __rsub__(self, other: Number) -> "Unit":
        if not _is_scalar(other):
            return NotImplemented
        return self._like(other - self.value)

    def __mul__(self, other: "Unit | Number") -> "Unit | Any":
        if isinstance(other, Unit):
            units = multiply_packs(self._units, other.units)
            if not units:
                # dimensions cancelled: plain number in base scale
                return self.value * self._scale * other.value * other.scale
            semantic = multiply_packs(self._semantic, other.semantic)
            scale = self._scale * other.scale
            if scale >= MAX_SCALE:
                # product scale out of range: express in base scale
                return Unit(self.to_base_scale() * other.to_base_scale(), 1, semantic, units)
            return Unit(self.value * other.value, scale, semantic, units)
        if _is_scalar(other):
            return self._like(self.value * other)
        return NotImplemented

    def __rmul__(self, other: Number) -> "Unit":
        if not _is_scalar(other):
            return NotImplemented
        return self._like(other * self.value)

    def __truediv__(self, other: "Unit | Number") -> "Unit | Any":
        if isinstance(other, Unit):
            from semantium.core.casts import reciprocal

            return self * reciprocal(other)
        if _is_scalar(other):
            return self._like(self.value / other)
        return NotImplemented

    def __rtruediv__(self, other: Number) -> "Unit":
        if not _is_scalar(other):
            return NotImplemented
        from semantium.core.casts import reciprocal

        return reciprocal(self) * other

    def __pow__(self, n: ExponentLike, modulo: Any | None = None) -> "Unit":
        if modulo is not None:
            raise TypeError("Modulo exponentiation is not supported for Unit.")
        from semantium.core.casts import raise_to_power

        exp = as_exponent(n)
        return raise_to_power(self, exp.numerator, exp.denominator)

    def __neg__(self) -> "Unit":
        return self._like(-self.value)

    def __pos__(self) -> "Unit":
        return self._like(+self.value)

    def __abs__(self) -> "Unit":
        return self._like(abs(self.value))

    # --- comparisons ---
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Unit):
            return NotImplemented
        if self._units != other.units or not semantic_convertible(self._semantic, other.semantic):
            return False
        return isclose(self.to_base_scale(), other.to_base_scale(), rel_tol=REL_TOL, abs_tol=0.0)

    def __ne__(self, other: object) -> bool:
        eq = self.__eq__(other)
        if eq is NotImplemented:
            return NotImplemented
        return not eq

    __hash__ = None  # type: ignore[assignment]

    def _compare_base(self, other: object, op: str) -> tuple[Any, Any] | None:
        if not isinstance(other, Unit):
            return None
        _require_compatible(self._units, self._semantic, other, op)
        return self.to_base_scale(), other.to_base_scale()

    def __lt__(self, other: object) -> bool:
        pair = self._compare_base(other, "compare")
        if pair is None:
            return NotImplemented
        a, b = pair
        return a < b and not isclose(a, b, rel_tol=REL_TOL, abs_tol=0.0)

    def __le__(self, other: object) -> bool:
        pair = self._compare_base(other, "compare")
        if pair is None:
            return NotImplemented
        a, b = pair
        return a < b or isclose(a, b, rel_tol=REL_TOL, abs_tol=0.0)

    def __gt__(self, other: object) -> bool:
        pair = self._compare_base(other, "compare")
        if pair is None:
            return NotImplemented
        a, b = pair
        return a > b and not isclose(a, b, rel_tol=REL_TOL, abs_tol=0.0)

    def __ge__(self, other: object) -> bool:
        pair = self._compare_base(other, "compare")
        if pair is None:
            return NotImplemented
        a, b = pair
        return a > b or isclose(a, b, rel_tol=REL_TOL, abs_tol=0.0)

    def as_key(self, precision: int = 12) -> tuple:
        """
        Hashable key of (units, base-scale value rounded to ``precision``).

        ``__hash__`` is disabled because ``__eq__`` compares with a tolerance
        and treats the empty semantic pack as a wildcard. The key leaves the
        semantic pack out for the same reason.
        """
        rounded = round(float(self.to_base_scale()), precision)
        if rounded == 0.0:
            rounded = 0.0  # -0.0 and 0.0 must share a key
        return (self._units, rounded)

    def __repr__(self) -> str:
        return (
            f"Unit({self.value!r}, scale={self._scale}, "
            f"semantic={self._semantic!r}, units={self._units!r})"
        )

    def __str__(self) -> str:
        text = f"{self.value:.15g}" if isinstance(self.value, float) else str(self.value)
        if self._units:
            text += f" {format_pack(self._units)}"
        if self._semantic:
            text += f" [{format_pack(self._semantic)}]"
        if self._scale != 1:
            text += f" ×{self._scale}"
        return text


__all__ = ["Number", "REL_TOL", "MAX_SCALE", "Unit", "UnitType"]
