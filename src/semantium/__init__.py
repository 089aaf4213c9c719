"""
Semantium: dimensional analysis with semantic subcategories.

Values carry a pack of physical base units (Meters^2, Meters/Seconds, ...)
and an orthogonal pack of semantic tags (Width vs Depth, both Meters).
Arithmetic that mixes incompatible quantities raises a typed error, while
compatible arithmetic derives the resulting packs and converts scales.
"""

import logging
from importlib import metadata as _metadata

from semantium.core.casts import raise_to_power, reciprocal, semantic_cast, unit_cast
from semantium.core.dimensions import EMPTY_PACK, BaseUnit, Pack, PowerEntry, power
from semantium.core.exceptions import (
    DimensionMismatch,
    IncompatibleSemantics,
    IncompatibleUnits,
    InvalidExponent,
    NonCanonicalDimension,
    SemantiumError,
)
from semantium.core.unit import Unit, UnitType
from semantium.units.registry import (
    DEFAULT_REGISTRY,
    BaseUnitRegistry,
    get_base_unit,
    register_base_unit,
    register_semantic,
)

__author__ = "Semantium developers"
__license__ = "MIT"

# Library stays silent unless the application configures logging.
logging.getLogger(__name__).addHandler(logging.NullHandler())

# Try to read the installed package version first; fall back to a default for local dev.
try:
    __version__ = _metadata.version("semantium")
except _metadata.PackageNotFoundError:
    import tomllib
    with open("pyproject.toml", "rb") as f:
        __version__ = tomllib.load(f)["project"]["version"]

# Public names exposed by the package. Keep this minimal and stable.
__all__ = [
    "__version__",
    "__author__",
    "__license__",
    "BaseUnit",
    "PowerEntry",
    "power",
    "Pack",
    "EMPTY_PACK",
    "Unit",
    "UnitType",
    "reciprocal",
    "raise_to_power",
    "semantic_cast",
    "unit_cast",
    "BaseUnitRegistry",
    "DEFAULT_REGISTRY",
    "register_base_unit",
    "register_semantic",
    "get_base_unit",
    "SemantiumError",
    "InvalidExponent",
    "NonCanonicalDimension",
    "DimensionMismatch",
    "IncompatibleUnits",
    "IncompatibleSemantics",
]
