"""Shape kinds and color constants."""

from __future__ import annotations

from enum import StrEnum

DEFAULT_FILL_COLOR = "blue"


class ShapeKind(StrEnum):
    """Shape kinds recognized by :func:`lookup_shape_kind`."""

    CIRCLE = "circle"
    RECTANGLE = "rectangle"
    TRIANGLE = "triangle"


SUPPORTED_SHAPES: tuple[str, ...] = tuple(kind.value for kind in ShapeKind)
