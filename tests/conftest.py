# tests/conftest.py
import pytest

from semantium.core.dimensions import Pack, PowerEntry
from semantium.core.unit import UnitType
from semantium.units.registry import BaseUnitRegistry


@pytest.fixture()
def reg():
    """Fresh registry per test; ids stay unique because the counter is shared."""
    return BaseUnitRegistry()


# Physical base units, registered in this order so meters < seconds < grams.
@pytest.fixture()
def meters(reg):
    return reg.register("Meters")

@pytest.fixture()
def seconds(reg, meters):
    return reg.register("Seconds")

@pytest.fixture()
def grams(reg, seconds):
    return reg.register("Grams")


# Semantic tags, registered after the physical units.
@pytest.fixture()
def length(reg, grams):
    return reg.register_semantic("Length")

@pytest.fixture()
def width(reg, length):
    return reg.register_semantic("Width")

@pytest.fixture()
def depth(reg, width):
    return reg.register_semantic("Depth")


@pytest.fixture()
def dist_t(meters):
    """dist_t(tag, scale=1) -> UnitType of Meters^1 tagged with `tag` (or untagged)."""
    def make(tag=None, scale=1):
        semantic = Pack() if tag is None else Pack([PowerEntry(tag)])
        return UnitType(scale, semantic, Pack([PowerEntry(meters)]))
    return make
