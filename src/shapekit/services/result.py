"""ServiceResult and ServiceError: the uniform service contract.

INVARIANT: Every GeometryService method returns ServiceResult.
The CLI and output formatters consume only this type.
"""

from __future__ import annotations

from typing import Any, Self

from pydantic import BaseModel, Field

from shapekit.domain.errors import GeometryError


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult.

    ``code`` and ``message`` mirror the originating GeometryError;
    ``detail`` carries its payload (offending value or shape name).
    """

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_geometry_error(cls, exc: GeometryError) -> Self:
        return cls(code=exc.code, message=exc.message, detail=exc.detail)


class ServiceResult(BaseModel):
    """Return type for all service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"validate_rectangle"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal issues encountered during the operation.
        error: Structured error if ``ok`` is False.
        meta: Optional metadata (timing spans when verbose).
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None
