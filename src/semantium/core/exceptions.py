"""
semantium.core.exceptions
=========================

Error taxonomy for dimension and unit algebra.

Every error mixes in the builtin Python would raise for the same mistake
(``ValueError`` for a malformed input, ``TypeError`` for an operation between
incompatible quantities) so callers catching builtins keep working.
"""

from __future__ import annotations


class SemantiumError(Exception):
    """Base class for every error raised by semantium."""


class InvalidExponent(SemantiumError, ValueError):
    """A rational exponent with a zero denominator, or not in lowest terms."""


class NonCanonicalDimension(SemantiumError, ValueError):
    """A pack that is unsorted, has duplicate bases, or holds a zero exponent."""


class DimensionMismatch(SemantiumError, TypeError):
    """Arithmetic between units whose physical unit packs differ."""


class IncompatibleUnits(DimensionMismatch):
    """Conversion between units whose physical unit packs differ."""


class IncompatibleSemantics(SemantiumError, TypeError):
    """Arithmetic between units with unequal, non-empty semantic packs."""


__all__ = [
    "SemantiumError",
    "InvalidExponent",
    "NonCanonicalDimension",
    "DimensionMismatch",
    "IncompatibleUnits",
    "IncompatibleSemantics",
]
