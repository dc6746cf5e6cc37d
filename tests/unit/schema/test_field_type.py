"""Tests for fieldschema.field_type."""

import pytest

from fieldschema import FieldType, UnknownTypeError
from fieldschema.field_type import is_primitive, primitive_types


@pytest.mark.parametrize(
    ("field_type", "expected"),
    [(FieldType.BOOL, False), (FieldType.INT, 0), (FieldType.STRING, ""), (FieldType.MAP, {})],
)
def test_zero_values(field_type, expected):
    zero = field_type.zero()
    assert zero == expected
    assert type(zero) is type(expected)


def test_map_zero_is_fresh_each_call():
    assert FieldType.MAP.zero() is not FieldType.MAP.zero()


def test_invalid_has_no_zero():
    with pytest.raises(UnknownTypeError, match="field type invalid has no zero value"):
        FieldType.INVALID.zero()


@pytest.mark.parametrize(
    ("tag", "expected"),
    [
        ("bool", FieldType.BOOL),
        ("INT", FieldType.INT),
        (" string ", FieldType.STRING),
        ("Map", FieldType.MAP),
        (FieldType.INT, FieldType.INT),
    ],
)
def test_from_tag(tag, expected):
    assert FieldType.from_tag(tag) is expected


@pytest.mark.parametrize("tag", ["float", "duration", 3, None])
def test_from_tag_keeps_unrecognized_tags(tag):
    assert FieldType.from_tag(tag) == tag


def test_primitive_membership():
    assert primitive_types() == (FieldType.BOOL, FieldType.INT, FieldType.STRING, FieldType.MAP)
    assert all(is_primitive(kind) for kind in primitive_types())
    assert not is_primitive(FieldType.INVALID)
    assert not is_primitive("int")
    assert str(FieldType.MAP) == "map"
