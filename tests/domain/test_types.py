"""Tests for shape kinds."""

from shapekit.domain.types import DEFAULT_FILL_COLOR, SUPPORTED_SHAPES, ShapeKind


def test_shape_kind_members() -> None:
    assert {k.value for k in ShapeKind} == {"circle", "rectangle", "triangle"}
    # StrEnum members compare equal to their string value
    for member in ShapeKind:
        assert member == member.value
        assert isinstance(member, str)


def test_supported_shapes_follow_enum_order() -> None:
    assert SUPPORTED_SHAPES == tuple(ShapeKind)


def test_default_fill_color() -> None:
    assert DEFAULT_FILL_COLOR == "blue"
