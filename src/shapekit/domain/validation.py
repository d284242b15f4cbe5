"""Geometry validator: checked construction, aggregation, and kind lookup.

Every function here is pure. Failures are raised as
:class:`~shapekit.domain.errors.GeometryError` subclasses on the first
violated precondition; no partial results are produced.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from shapekit.domain.errors import InvalidDimensionError, NegativeValueError, UnknownShapeError
from shapekit.domain.shapes import Drawable, Rectangle
from shapekit.domain.types import DEFAULT_FILL_COLOR, ShapeKind

_NUMBER = r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?"
_RECT_SPEC = re.compile(rf"^\s*({_NUMBER})\s*[xX]\s*({_NUMBER})\s*$")


def validate_and_build_rectangle(
    width: float,
    height: float,
    fill_color: str = DEFAULT_FILL_COLOR,
) -> Rectangle:
    """Build a rectangle, rejecting a non-positive width.

    Only the width is guarded; height passes through unchecked.

    Raises:
        NegativeValueError: If *width* is not strictly positive (NaN included).
    """
    if not width > 0:
        raise NegativeValueError(float(width))
    return Rectangle(width, height, fill_color)


def total_area(shapes: Iterable[Drawable]) -> float:
    """Sum the area of every shape. An empty iterable yields ``0.0``."""
    return sum((shape.area for shape in shapes), 0.0)


def lookup_shape_kind(name: str) -> ShapeKind:
    """Resolve *name* to a supported :class:`ShapeKind` (exact match).

    Raises:
        UnknownShapeError: If *name* is not a supported kind.
    """
    try:
        return ShapeKind(name)
    except ValueError:
        raise UnknownShapeError(name) from None


def parse_rectangle_spec(spec: str) -> tuple[float, float]:
    """Parse a ``WIDTHxHEIGHT`` string into a ``(width, height)`` pair.

    Examples:
        >>> parse_rectangle_spec("10x5")
        (10.0, 5.0)
        >>> parse_rectangle_spec("2.5 X 4")
        (2.5, 4.0)

    Raises:
        InvalidDimensionError: If *spec* is not of the form ``WxH``.
    """
    match = _RECT_SPEC.match(spec)
    if match is None:
        raise InvalidDimensionError()
    return float(match.group(1)), float(match.group(2))
