"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, shapekit.toml only contains
overrides. An empty (or missing) file is a valid configuration.
"""

from __future__ import annotations

from pydantic import BaseModel

from shapekit.domain.types import DEFAULT_FILL_COLOR


class ShapesConfig(BaseModel):
    """[shapes] section."""

    model_config = {"frozen": True}

    default_fill_color: str = DEFAULT_FILL_COLOR


class DemoConfig(BaseModel):
    """[demo] section: inputs of ``shapekit demo``."""

    model_config = {"frozen": True}

    width: float = 10.0
    height: float = 5.0
    square_side: float = 7.0
