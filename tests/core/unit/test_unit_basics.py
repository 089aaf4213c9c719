from fractions import Fraction

import pytest

from semantium.core.dimensions import EMPTY_PACK, Pack, PowerEntry
from semantium.core.exceptions import NonCanonicalDimension
from semantium.core.unit import MAX_SCALE, Unit, UnitType


def test_construct_and_read_back(meters, width):
    u = Unit(2.5, 1000, Pack.of(width), Pack.of(meters))
    assert u.value == 2.5
    assert u.scale == 1000
    assert u.semantic == Pack.of(width)
    assert u.units == Pack.of(meters)


def test_defaults_are_dimensionless_and_untagged():
    u = Unit(3)
    assert u.scale == 1
    assert u.semantic == EMPTY_PACK
    assert u.units == EMPTY_PACK


@pytest.mark.parametrize("bad", ["unsorted", "duplicate", "zero"])
def test_non_canonical_units_rejected(meters, seconds, bad):
    packs = {
        "unsorted": Pack([PowerEntry(seconds), PowerEntry(meters)]),
        "duplicate": Pack([PowerEntry(meters), PowerEntry(meters)]),
        "zero": Pack([PowerEntry(meters, 0)]),
    }
    with pytest.raises(NonCanonicalDimension):
        Unit(1.0, 1, EMPTY_PACK, packs[bad])


def test_non_canonical_semantic_rejected(length, width):
    with pytest.raises(NonCanonicalDimension):
        Unit(1.0, 1, Pack([PowerEntry(width), PowerEntry(length)]), EMPTY_PACK)


def test_non_pack_rejected(meters):
    with pytest.raises(TypeError):
        Unit(1.0, 1, EMPTY_PACK, (PowerEntry(meters),))  # type: ignore[arg-type]


@pytest.mark.parametrize("scale", [0, -1, MAX_SCALE, 1.5, True, "1"])
def test_bad_scale_rejected(scale):
    with pytest.raises(ValueError):
        Unit(1.0, scale)


def test_largest_scale_accepted():
    assert Unit(1, MAX_SCALE - 1).scale == MAX_SCALE - 1


def test_scale_and_packs_are_read_only(meters):
    u = Unit(1.0, 1, EMPTY_PACK, Pack.of(meters))
    with pytest.raises(AttributeError):
        u.scale = 2  # type: ignore[misc]
    with pytest.raises(AttributeError):
        u.units = EMPTY_PACK  # type: ignore[misc]
    with pytest.raises(AttributeError):
        u.semantic = EMPTY_PACK  # type: ignore[misc]


def test_to_base_scale():
    assert Unit(3, 1000).to_base_scale() == 3000
    assert Unit(Fraction(1, 4), 8).to_base_scale() == 2


def test_strip_semantic_keeps_everything_else(meters, width):
    u = Unit(4.0, 10, Pack.of(width), Pack.of(meters))
    s = u.strip_semantic()
    assert s.semantic == EMPTY_PACK
    assert (s.value, s.scale, s.units) == (4.0, 10, Pack.of(meters))
    assert u.semantic == Pack.of(width)


def test_copy_is_independent(meters):
    u = Unit(1.0, 1, EMPTY_PACK, Pack.of(meters))
    c = u.copy()
    c += 1.0
    assert u.value == 1.0
    assert c.value == 2.0


def test_unit_type_roundtrip(meters, width):
    t = UnitType(100, Pack.of(width), Pack.of(meters))
    u = t(3)
    assert isinstance(u, Unit)
    assert u.unit_type == t


def test_unit_type_validates(meters, seconds):
    with pytest.raises(NonCanonicalDimension):
        UnitType(1, EMPTY_PACK, Pack([PowerEntry(seconds), PowerEntry(meters)]))
    with pytest.raises(ValueError):
        UnitType(0)


def test_repr_and_str(meters, seconds, width):
    u = Unit(2.5, 1000, Pack.of(width), Pack.of(meters, seconds ** -1))
    assert repr(u) == (
        "Unit(2.5, scale=1000, semantic=Pack([Width^1]), "
        "units=Pack([Meters^1][Seconds^-1]))"
    )
    assert str(u) == "2.5 Meters/Seconds [Width] ×1000"
    assert str(Unit(7)) == "7"


def test_unit_type_str(meters, width):
    assert str(UnitType(1, Pack.of(width), Pack.of(meters ** 2))) == "Meters² [Width]"


@pytest.mark.parametrize("value", ["abc", None, [1.0]])
def test_non_numeric_value_rejected(value):
    with pytest.raises(TypeError):
        Unit(value)
