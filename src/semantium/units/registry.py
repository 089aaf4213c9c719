"""
semantium.units.registry
========================

Thread-safe registry of base units.

Each distinct base unit kind (a physical unit such as "Meters" or a semantic
tag such as "Width") is registered once and receives an integer id that is
unique for the whole process and never changes. Registration is idempotent:
asking for the same name again returns the very same :class:`BaseUnit`.

Ids come from one module-level counter shared by every registry, so base
units from separate registries (tests use isolated ones) never compare equal.
"""
from __future__ import annotations

import itertools
import logging
import threading
import unicodedata
from typing import Dict, Mapping, Optional

from semantium.core.dimensions import BaseKind, BaseUnit

logger = logging.getLogger(__name__)

_ID_LOCK = threading.Lock()
_ID_COUNTER = itertools.count(1)


def _next_id() -> int:
    with _ID_LOCK:
        return next(_ID_COUNTER)


def normalize_name(s: str) -> str:
    """Strip surrounding whitespace and Unicode-normalize to NFC."""
    return unicodedata.normalize("NFC", s.strip())


class BaseUnitRegistry:
    """Maps base unit names to their :class:`BaseUnit`."""

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._units: Dict[str, BaseUnit] = {}
        self._by_id: Dict[int, BaseUnit] = {}

    def __contains__(self, name: str) -> bool:
        return self.has(name)

    def __len__(self) -> int:
        with self._lock:
            return len(self._units)

    # -------------------------- public API ---------------------------------
    def register(self, name: str, kind: BaseKind = "unit") -> BaseUnit:
        """Return the base unit for ``name``, creating it on first use.

        Raises ``ValueError`` for an empty name, a name that clashes with the
        namespace API, or a name already registered under another kind.
        """
        if not isinstance(name, str):
            raise TypeError(f"Base unit name must be a str, got {type(name).__name__}")
        if kind not in ("unit", "semantic"):
            raise ValueError(f"Unknown base unit kind {kind!r}; use 'unit' or 'semantic'")

        key = normalize_name(name)
        if not key:
            raise ValueError("Base unit name must be non-empty")
        if key in BaseUnitNamespace._reserved_names:
            raise ValueError(
                f"Cannot register base unit '{key}': "
                "name conflicts with BaseUnitNamespace attribute/method."
            )

        # The whole check-and-set runs under the lock so concurrent first use
        # of one name yields one object.
        with self._lock:
            existing = self._units.get(key)
            if existing is not None:
                if existing.kind != kind:
                    raise ValueError(
                        f"Base unit '{key}' is already registered as {existing.kind!r}, "
                        f"not {kind!r}"
                    )
                return existing

            unit = BaseUnit(_next_id(), key, kind)
            self._units[key] = unit
            self._by_id[unit.id] = unit

        logger.debug("Registered %s base unit %r with id %d", kind, key, unit.id)
        return unit

    def register_semantic(self, name: str) -> BaseUnit:
        return self.register(name, kind="semantic")

    def get(self, name: str) -> BaseUnit:
        """Lookup a base unit by name. Raises ``ValueError`` if unknown."""
        with self._lock:
            u = self._units.get(normalize_name(name))
        if u is None:
            raise ValueError(f"Unknown base unit: {name}")
        return u

    def has(self, name: str) -> bool:
        try:
            self.get(name)
            return True
        except ValueError:
            return False

    def by_id(self, id: int) -> Optional[BaseUnit]:
        with self._lock:
            return self._by_id.get(id)

    def all(self) -> Mapping[str, BaseUnit]:
        with self._lock:
            return dict(self._units)

    def as_namespace(self) -> "BaseUnitNamespace":
        return BaseUnitNamespace(self)


class BaseUnitNamespace:
    """Attribute access to registered base units: ``b.Meters``."""

    __slots__ = ("_reg",)

    _reserved_names = frozenset({"_reg", "_reserved_names"})

    def __init__(self, reg: BaseUnitRegistry) -> None:
        self._reg = reg

    def __getattr__(self, name: str) -> BaseUnit:
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self._reg.get(name)
        except ValueError as exc:
            raise AttributeError(f"No base unit named {name!r}") from exc

    def __getitem__(self, name: str) -> BaseUnit:
        return self._reg.get(name)

    def __dir__(self) -> list[str]:
        return sorted(self._reg.all().keys())


DEFAULT_REGISTRY = BaseUnitRegistry()


# Convenience functions bound to the default registry ------------------------

def register_base_unit(name: str) -> BaseUnit:
    """Register (or fetch) a physical base unit in the default registry."""
    return DEFAULT_REGISTRY.register(name)


def register_semantic(name: str) -> BaseUnit:
    """Register (or fetch) a semantic tag in the default registry."""
    return DEFAULT_REGISTRY.register_semantic(name)


def get_base_unit(name: str) -> BaseUnit:
    return DEFAULT_REGISTRY.get(name)


__all__ = [
    "BaseUnitRegistry",
    "BaseUnitNamespace",
    "DEFAULT_REGISTRY",
    "normalize_name",
    "register_base_unit",
    "register_semantic",
    "get_base_unit",
]
