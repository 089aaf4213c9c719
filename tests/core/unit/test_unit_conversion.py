import math

import pytest

from semantium.core.dimensions import EMPTY_PACK, Pack
from semantium.core.exceptions import (
    DimensionMismatch,
    IncompatibleSemantics,
    IncompatibleUnits,
)
from semantium.core.unit import Unit, UnitType


def test_convert_from_rescales(dist_t):
    m = dist_t()(0.0)
    m.convert_from(dist_t(scale=1000)(2.5))
    assert math.isclose(m.value, 2500.0)
    assert m.scale == 1


def test_convert_from_returns_self(dist_t):
    m = dist_t()(0.0)
    assert m.convert_from(dist_t()(1.0)) is m


@pytest.mark.parametrize("target,source", [
    ("width", "width"),
    ("width", None),
    (None, "width"),
    (None, None),
])
def test_semantically_convertible_pairs(dist_t, width, target, source):
    tags = {"width": width, None: None}
    t = dist_t(tags[target])(0.0)
    t.convert_from(dist_t(tags[source])(4.0))
    assert t.value == 4.0


def test_convert_from_different_subcategory_fails(dist_t, width, depth):
    with pytest.raises(IncompatibleSemantics):
        dist_t(width)(0.0).convert_from(dist_t(depth)(1.0))


def test_convert_from_different_units_fails(dist_t, seconds):
    s = UnitType(1, EMPTY_PACK, Pack.of(seconds))(1.0)
    with pytest.raises(IncompatibleUnits):
        dist_t()(0.0).convert_from(s)


def test_units_are_checked_before_semantics(dist_t, width, depth, seconds):
    other = UnitType(1, Pack.of(depth), Pack.of(seconds))(1.0)
    with pytest.raises(IncompatibleUnits) as exc:
        dist_t(width)(0.0).convert_from(other)
    assert isinstance(exc.value, DimensionMismatch)


def test_assign_unit_or_number(dist_t):
    m = dist_t()(0.0)
    m.assign(dist_t(scale=10)(3.0))
    assert m.value == 30.0
    m.assign(7)
    assert m.value == 7
    with pytest.raises(TypeError):
        m.assign("7")  # type: ignore[arg-type]


def test_unit_type_convert_builds_new_unit(dist_t, width):
    km_t = dist_t(width, scale=1000)
    src = dist_t()(1500.0)
    out = km_t.convert(src)
    assert isinstance(out, Unit)
    assert out.unit_type == km_t
    assert math.isclose(out.value, 1.5)
    assert src.value == 1500.0


def test_unit_type_accepts(dist_t, width, depth, seconds):
    t = dist_t(width)
    assert t.accepts(dist_t(width)(1.0))
    assert t.accepts(dist_t()(1.0))
    assert not t.accepts(dist_t(depth)(1.0))
    assert not t.accepts(UnitType(1, Pack.of(width), Pack.of(seconds))(1.0))


def test_error_messages_name_the_packs(dist_t, width, depth):
    with pytest.raises(IncompatibleSemantics, match="Width.*Depth"):
        dist_t(width)(1.0) + dist_t(depth)(1.0)
