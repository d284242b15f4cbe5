"""Shared pytest fixtures for shapekit tests."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest
from click.testing import CliRunner

from shapekit.config.settings import ShapekitSettings
from shapekit.services.geometry import GeometryService
from shapekit.services.telemetry import disable_telemetry


@pytest.fixture(autouse=True)
def _restore_runtime_state() -> Iterator[None]:
    """Undo logging and telemetry changes made by CLI invocations."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    pkg = logging.getLogger("shapekit")
    pkg_level = pkg.level
    yield
    disable_telemetry()
    root.handlers = original_handlers
    root.setLevel(original_level)
    pkg.setLevel(pkg_level)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("SHAPEKIT_CONFIG", raising=False)
    monkeypatch.delenv("SHAPEKIT_SHAPES__DEFAULT_FILL_COLOR", raising=False)
    monkeypatch.delenv("SHAPEKIT_DEMO__WIDTH", raising=False)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def settings(tmp_path: Path) -> ShapekitSettings:
    """Settings with no shapekit.toml in reach."""
    return ShapekitSettings.from_cli(search_root=tmp_path)


@pytest.fixture
def service(settings: ShapekitSettings) -> GeometryService:
    return GeometryService(settings)


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run CLI tests from an empty temp directory.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")``.
    """
    monkeypatch.chdir(tmp_path)
