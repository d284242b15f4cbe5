"""Shape model: the Drawable capability and its two implementations.

- ``Shape``: reference-identity base shape (name, color) with zero area.
- ``Rectangle``: frozen value type with derived perimeter and square test.

The ``Rectangle`` constructor is total: it accepts any dimensions,
including negative ones. Validation is a separate, explicit step
(see :mod:`shapekit.domain.validation`).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Self, runtime_checkable

from shapekit.domain.types import DEFAULT_FILL_COLOR


@runtime_checkable
class Drawable(Protocol):
    """Anything with a computed area and a rendering description."""

    @property
    def area(self) -> float: ...

    def describe(self) -> str: ...


@dataclass(eq=False)
class Shape:
    """Abstract base shape carrying identity only.

    Compared by identity: two shapes with the same name and color are
    still distinct objects.
    """

    name: str
    color: str

    @property
    def area(self) -> float:
        """No geometry is defined, so the area is always zero."""
        return 0.0

    def describe(self) -> str:
        return f"Drawing {self.name} with color {self.color}"


@dataclass(frozen=True)
class Rectangle:
    """Immutable axis-aligned rectangle.

    Attributes:
        width: Horizontal extent. Not sign-checked here.
        height: Vertical extent. Not sign-checked here.
        fill_color: Opaque color identifier.
    """

    width: float
    height: float
    fill_color: str = DEFAULT_FILL_COLOR

    def __post_init__(self) -> None:
        # Frozen dataclass: normalize ints to float via object.__setattr__
        object.__setattr__(self, "width", float(self.width))
        object.__setattr__(self, "height", float(self.height))

    @classmethod
    def square(cls, side: float, fill_color: str = DEFAULT_FILL_COLOR) -> Self:
        """Build a rectangle whose width and height are both *side*."""
        return cls(side, side, fill_color)

    @property
    def area(self) -> float:
        return self.width * self.height

    @property
    def is_square(self) -> bool:
        return self.width == self.height

    def perimeter(self) -> float:
        return 2 * (self.width + self.height)

    def describe(self) -> str:
        return f"Drawing rectangle: {self.width} x {self.height}"

    def dimension(self, key: str) -> float:
        """Look up a dimension by name.

        Examples:
            >>> Rectangle(10, 5).dimension("width")
            10.0
            >>> Rectangle(10, 5).dimension("depth")
            0.0
        """
        if key == "width":
            return self.width
        if key == "height":
            return self.height
        return 0.0

    def __getitem__(self, key: str) -> float:
        return self.dimension(key)
