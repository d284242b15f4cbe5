"""GeometryService: shape construction, validation, and aggregation.

Wraps the domain layer for interfaces: every method returns a
ServiceResult, and GeometryError becomes a failed result carrying a
ServiceError. Any other exception propagates.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from shapekit.domain.errors import GeometryError
from shapekit.domain.shapes import Rectangle, Shape
from shapekit.domain.validation import (
    lookup_shape_kind,
    parse_rectangle_spec,
    total_area as aggregate_area,
    validate_and_build_rectangle,
)
from shapekit.services.base import BaseService
from shapekit.services.result import ServiceResult
from shapekit.services.telemetry import traced


def rectangle_summary(rect: Rectangle) -> dict[str, Any]:
    """Flatten a rectangle and its derived properties into result data."""
    return {
        "width": rect.width,
        "height": rect.height,
        "fill_color": rect.fill_color,
        "area": rect.area,
        "perimeter": rect.perimeter(),
        "is_square": rect.is_square,
        "description": rect.describe(),
    }


def _negative_warnings(rect: Rectangle) -> list[str]:
    return [
        f"{key} is negative ({value}); use 'validate' to reject invalid dimensions"
        for key, value in (("width", rect.width), ("height", rect.height))
        if value < 0
    ]


class GeometryService(BaseService):
    """Stateless facade over the shape model and geometry validator."""

    @property
    def _fill_color(self) -> str:
        return self._settings.shapes.default_fill_color

    @traced
    def build_rectangle(self, width: float, height: float) -> ServiceResult:
        """Build a rectangle without validation; negative sides only warn."""
        rect = Rectangle(width, height, self._fill_color)
        return self._ok("build_rectangle", rectangle_summary(rect), _negative_warnings(rect))

    @traced
    def build_square(self, side: float) -> ServiceResult:
        rect = Rectangle.square(side, self._fill_color)
        return self._ok("build_square", rectangle_summary(rect), _negative_warnings(rect))

    @traced
    def validate_rectangle(self, width: float, height: float) -> ServiceResult:
        """Build a rectangle through the validated entry point."""
        try:
            rect = validate_and_build_rectangle(width, height, self._fill_color)
        except GeometryError as exc:
            return self._fail("validate_rectangle", exc)
        return self._ok("validate_rectangle", rectangle_summary(rect))

    @traced
    def total_area(self, rectangles: Sequence[str]) -> ServiceResult:
        """Sum the area of rectangles given as ``WxH`` specs."""
        try:
            shapes = [
                Rectangle(*parse_rectangle_spec(spec), self._fill_color) for spec in rectangles
            ]
        except GeometryError as exc:
            return self._fail("total_area", exc)
        warnings = [w for rect in shapes for w in _negative_warnings(rect)]
        return self._ok(
            "total_area",
            {"count": len(shapes), "total_area": aggregate_area(shapes)},
            warnings,
        )

    @traced
    def lookup_kind(self, name: str) -> ServiceResult:
        try:
            kind = lookup_shape_kind(name)
        except GeometryError as exc:
            return self._fail("lookup_kind", exc)
        return self._ok("lookup_kind", {"kind": kind.value})

    @traced
    def dimension(self, width: float, height: float, key: str) -> ServiceResult:
        """Read one dimension of a rectangle by name (unknown keys give 0.0)."""
        rect = Rectangle(width, height, self._fill_color)
        return self._ok("dimension", {"key": key, "value": rect[key]})

    @traced
    def describe_shape(self, name: str, color: str | None = None) -> ServiceResult:
        shape = Shape(name, color if color is not None else self._fill_color)
        return self._ok(
            "describe_shape",
            {
                "name": shape.name,
                "color": shape.color,
                "area": shape.area,
                "description": shape.describe(),
            },
        )

    @traced
    def process_geometry(self) -> ServiceResult:
        """Run the reference scenario: a rectangle, a square, one width check.

        Dimensions come from the ``[demo]`` config section.
        """
        demo = self._settings.demo
        rectangle = Rectangle(demo.width, demo.height, self._fill_color)
        square = Rectangle.square(demo.square_side, self._fill_color)
        try:
            validate_and_build_rectangle(rectangle.width, rectangle.height)
        except GeometryError as exc:
            return self._fail("process_geometry", exc)
        return self._ok(
            "process_geometry",
            {
                "rectangle_area": rectangle.area,
                "square_area": square.area,
                "rectangle_perimeter": rectangle.perimeter(),
                "total_area": aggregate_area([rectangle, square]),
            },
        )
