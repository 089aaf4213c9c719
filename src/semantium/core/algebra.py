"""
semantium.core.algebra
======================

Operations over packs. Every function returns a new :class:`Pack` and leaves
its inputs untouched.

Only :func:`canonicalize` (and the helpers built on it) guarantees canonical
output; :func:`cons_combine`, :func:`merge`, :func:`raise_pack` and
:func:`negate_all` may leave a pack unsorted or holding zero exponents, so
their results must be canonicalized before being used as a dimension.
"""

from __future__ import annotations

from fractions import Fraction
from typing import Callable, Dict, List

from semantium.core.dimensions import EMPTY_PACK, BaseUnit, Pack, PowerEntry
from semantium.core.exponents import add_exponents, multiply_exponents, negate_exponent

Combiner = Callable[[Fraction, Fraction], Fraction]


def same_base(a: PowerEntry, b: PowerEntry) -> bool:
    """True if both entries share a base unit; exponents may differ."""
    return a.base == b.base


def cons_combine(entry: PowerEntry, vector: Pack, combiner: Combiner) -> Pack:
    """
    Add ``entry`` to ``vector``.

    If ``vector`` already holds the same base unit, that entry is replaced in
    place by ``combiner(entry.exponent, existing.exponent)``; otherwise
    ``entry`` is appended at the end.
    """
    out: List[PowerEntry] = list(vector)
    for i, existing in enumerate(out):
        if same_base(entry, existing):
            out[i] = PowerEntry(entry.base, combiner(entry.exponent, existing.exponent))
            return Pack(out)
    out.append(entry)
    return Pack(out)


def concat(a: Pack, b: Pack) -> Pack:
    return Pack(tuple(a) + tuple(b))


def remove(base: BaseUnit | PowerEntry, vector: Pack) -> Pack:
    """Drop the first entry for ``base``; no-op if it is absent."""
    if isinstance(base, PowerEntry):
        base = base.base
    out = list(vector)
    for i, e in enumerate(out):
        if e.base == base:
            del out[i]
            return Pack(out)
    return vector


def remove_all(a: Pack, b: Pack) -> Pack:
    """Remove from ``b`` one entry per entry of ``a`` sharing its base."""
    for e in a:
        b = remove(e, b)
    return b


def merge(a: Pack, b: Pack, combiner: Combiner) -> Pack:
    """
    Fold every entry of ``a`` into ``b`` with :func:`cons_combine`.

    Entries of ``a`` are folded last to first, so bases only found in ``a``
    end up after ``b``'s entries.
    """
    out = b
    for entry in reversed(a):
        out = cons_combine(entry, out, combiner)
    return out


def raise_pack(vector: Pack, exponent: Fraction) -> Pack:
    """Multiply every exponent of ``vector`` by ``exponent``."""
    return Pack(PowerEntry(e.base, multiply_exponents(e.exponent, exponent)) for e in vector)


def negate_all(vector: Pack) -> Pack:
    return Pack(PowerEntry(e.base, negate_exponent(e.exponent)) for e in vector)


def prune(vector: Pack) -> Pack:
    """Remove every entry with a zero exponent."""
    return Pack(e for e in vector if not e.is_zero)


def canonicalize(vector: Pack) -> Pack:
    """
    Sort by base id, coalesce repeated bases by adding exponents, drop zeros.

    ``canonicalize(canonicalize(v)) == canonicalize(v)`` for every pack.
    """
    combined: Dict[BaseUnit, Fraction] = {}
    for e in sorted(vector, key=lambda entry: entry.base):
        prev = combined.get(e.base)
        combined[e.base] = e.exponent if prev is None else add_exponents(prev, e.exponent)
    out = prune(Pack(PowerEntry(base, exp) for base, exp in combined.items()))
    return out if out else EMPTY_PACK


def is_ordered(vector: Pack) -> bool:
    """True if base ids are strictly ascending (which also rules out duplicates)."""
    return all(a.base.id < b.base.id for a, b in zip(vector, vector[1:]))


def pack_min(vector: Pack) -> PowerEntry:
    """Entry with the smallest base id."""
    if not vector:
        raise ValueError("pack_min() of an empty pack")
    return min(vector, key=lambda entry: entry.base)


def multiply_packs(a: Pack, b: Pack) -> Pack:
    """Dimension of a product: exponents of shared bases add."""
    return canonicalize(merge(a, b, add_exponents))


def divide_packs(a: Pack, b: Pack) -> Pack:
    return canonicalize(merge(a, negate_all(b), add_exponents))


def semantic_convertible(a: Pack, b: Pack) -> bool:
    """
    Equal semantic packs convert freely; the empty pack converts with anything.
    """
    return a == b or not a or not b


__all__ = [
    "Combiner",
    "same_base",
    "cons_combine",
    "concat",
    "remove",
    "remove_all",
    "merge",
    "raise_pack",
    "negate_all",
    "prune",
    "canonicalize",
    "is_ordered",
    "pack_min",
    "multiply_packs",
    "divide_packs",
    "semantic_convertible",
]
