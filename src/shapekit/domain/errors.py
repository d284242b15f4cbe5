"""GeometryError: the typed failure taxonomy of the geometry layer.

Three variants, each with a stable ``code`` and a fixed message:

- ``InvalidDimensionError``: no payload.
- ``NegativeValueError``: carries the offending value.
- ``UnknownShapeError``: carries the unrecognized shape name.

INVARIANT: Domain functions raise these on the first violated
precondition. They never log, retry, or suppress them.
"""

from __future__ import annotations

from typing import Any, ClassVar


class GeometryError(Exception):
    """Base class for all geometry failures."""

    code: ClassVar[str] = "GEOMETRY_ERROR"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    @property
    def detail(self) -> dict[str, Any]:
        """Variant payload, keyed by field name."""
        return {}


class InvalidDimensionError(GeometryError):
    code = "INVALID_DIMENSION"

    def __init__(self) -> None:
        super().__init__("Invalid dimension provided")


class NegativeValueError(GeometryError):
    code = "NEGATIVE_VALUE"

    def __init__(self, value: float) -> None:
        self.value = value
        super().__init__(f"Negative value not allowed: {value}")

    @property
    def detail(self) -> dict[str, Any]:
        return {"value": self.value}


class UnknownShapeError(GeometryError):
    code = "UNKNOWN_SHAPE"

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown shape: {name}")

    @property
    def detail(self) -> dict[str, Any]:
        return {"name": self.name}
