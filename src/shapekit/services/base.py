"""BaseService: shared foundation for shapekit services.

Services receive the resolved :class:`ShapekitSettings` at construction
time and build their results through :meth:`_ok` and :meth:`_fail`.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from shapekit.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from shapekit.config.settings import ShapekitSettings
    from shapekit.domain.errors import GeometryError

logger = logging.getLogger(__name__)


class BaseService:
    """Base for service-layer classes.

    Usage::

        class GeometryService(BaseService):
            def lookup_kind(self, name: str) -> ServiceResult:
                try:
                    kind = lookup_shape_kind(name)
                except GeometryError as exc:
                    return self._fail("lookup_kind", exc)
                return self._ok("lookup_kind", {"kind": str(kind)})
    """

    def __init__(self, settings: ShapekitSettings) -> None:
        self._settings = settings

    def _ok(
        self,
        op: str,
        data: dict[str, Any],
        warnings: list[str] | None = None,
    ) -> ServiceResult:
        logger.debug("%s succeeded", op)
        return ServiceResult(ok=True, op=op, data=data, warnings=warnings or [])

    def _fail(self, op: str, exc: GeometryError) -> ServiceResult:
        """Convert a GeometryError into a failed result.

        INVARIANT: Geometry failures are returned, never logged as errors.
        """
        logger.debug("%s failed with %s", op, exc.code)
        return ServiceResult(ok=False, op=op, error=ServiceError.from_geometry_error(exc))
