"""Tests for GeometryService."""

from pathlib import Path

import pytest

from shapekit.config.settings import ShapekitSettings
from shapekit.domain.shapes import Rectangle
from shapekit.services.geometry import GeometryService, rectangle_summary


class TestBuild:
    def test_build_rectangle(self, service: GeometryService) -> None:
        result = service.build_rectangle(10.0, 5.0)
        assert result.ok
        assert result.op == "build_rectangle"
        assert result.data["area"] == 50.0
        assert result.data["perimeter"] == 30.0
        assert result.data["is_square"] is False
        assert result.data["fill_color"] == "blue"
        assert result.data["description"] == "Drawing rectangle: 10.0 x 5.0"
        assert result.warnings == []

    def test_build_rectangle_negative_warns(self, service: GeometryService) -> None:
        result = service.build_rectangle(-1.0, 2.0)
        assert result.ok
        assert len(result.warnings) == 1
        assert "width is negative" in result.warnings[0]

    def test_build_square(self, service: GeometryService) -> None:
        result = service.build_square(7.0)
        assert result.ok
        assert result.op == "build_square"
        assert result.data["area"] == 49.0
        assert result.data["is_square"] is True

    def test_summary_matches_rectangle(self) -> None:
        summary = rectangle_summary(Rectangle(2, 3, "red"))
        assert summary == {
            "width": 2.0,
            "height": 3.0,
            "fill_color": "red",
            "area": 6.0,
            "perimeter": 10.0,
            "is_square": False,
            "description": "Drawing rectangle: 2.0 x 3.0",
        }


class TestValidateRectangle:
    def test_valid(self, service: GeometryService) -> None:
        result = service.validate_rectangle(10.0, 5.0)
        assert result.ok
        assert result.data["area"] == 50.0

    def test_negative_width(self, service: GeometryService) -> None:
        result = service.validate_rectangle(-3.0, 5.0)
        assert not result.ok
        assert result.op == "validate_rectangle"
        assert result.error is not None
        assert result.error.code == "NEGATIVE_VALUE"
        assert result.error.message == "Negative value not allowed: -3.0"
        assert result.error.detail == {"value": -3.0}

    def test_zero_width(self, service: GeometryService) -> None:
        result = service.validate_rectangle(0.0, 5.0)
        assert not result.ok
        assert result.error is not None
        assert result.error.detail["value"] == 0.0

    def test_negative_height_passes(self, service: GeometryService) -> None:
        assert service.validate_rectangle(1.0, -5.0).ok

    def test_nan_width(self, service: GeometryService) -> None:
        result = service.validate_rectangle(float("nan"), 5.0)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "NEGATIVE_VALUE"


class TestTotalArea:
    def test_empty(self, service: GeometryService) -> None:
        result = service.total_area([])
        assert result.ok
        assert result.data == {"count": 0, "total_area": 0.0}

    def test_sum(self, service: GeometryService) -> None:
        result = service.total_area(["10x5", "7x7"])
        assert result.data == {"count": 2, "total_area": 99.0}

    def test_negative_spec_warns(self, service: GeometryService) -> None:
        result = service.total_area(["-3x2", "2x-1", "4x4"])
        assert result.ok
        assert result.data["total_area"] == -6.0 - 2.0 + 16.0
        assert len(result.warnings) == 2
        assert result.warnings[0].startswith("width is negative (-3.0)")
        assert result.warnings[1].startswith("height is negative (-1.0)")

    def test_no_warnings_for_positive_specs(self, service: GeometryService) -> None:
        assert service.total_area(["1x1"]).warnings == []

    def test_malformed_spec(self, service: GeometryService) -> None:
        result = service.total_area(["10x5", "seven"])
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_DIMENSION"
        assert result.error.message == "Invalid dimension provided"


class TestLookupKind:
    def test_supported(self, service: GeometryService) -> None:
        result = service.lookup_kind("triangle")
        assert result.ok
        assert result.data == {"kind": "triangle"}

    def test_unknown(self, service: GeometryService) -> None:
        result = service.lookup_kind("hexagon")
        assert not result.ok
        assert result.error is not None
        assert result.error.message == "Unknown shape: hexagon"


class TestDimensionAndDescribe:
    @pytest.mark.parametrize("key,value", [("width", 10.0), ("height", 5.0), ("depth", 0.0)])
    def test_dimension(self, service: GeometryService, key: str, value: float) -> None:
        result = service.dimension(10.0, 5.0, key)
        assert result.ok
        assert result.data == {"key": key, "value": value}

    def test_describe_shape(self, service: GeometryService) -> None:
        result = service.describe_shape("widget", "red")
        assert result.data == {
            "name": "widget",
            "color": "red",
            "area": 0.0,
            "description": "Drawing widget with color red",
        }

    def test_describe_shape_default_color(self, service: GeometryService) -> None:
        assert service.describe_shape("widget").data["color"] == "blue"

    def test_describe_shape_empty_color_is_kept(self, service: GeometryService) -> None:
        result = service.describe_shape("widget", "")
        assert result.data["color"] == ""
        assert result.data["description"] == "Drawing widget with color "


class TestProcessGeometry:
    def test_reference_scenario(self, service: GeometryService) -> None:
        result = service.process_geometry()
        assert result.ok
        assert result.data == {
            "rectangle_area": 50.0,
            "square_area": 49.0,
            "rectangle_perimeter": 30.0,
            "total_area": 99.0,
        }

    def test_configured_zero_width_fails(self, tmp_path: Path) -> None:
        (tmp_path / "shapekit.toml").write_text("[demo]\nwidth = 0\n")
        settings = ShapekitSettings.from_cli(search_root=tmp_path)
        result = GeometryService(settings).process_geometry()
        assert not result.ok
        assert result.error is not None
        assert result.error.message == "Negative value not allowed: 0.0"


class TestConfiguredFillColor:
    def test_fill_color_from_toml(self, tmp_path: Path) -> None:
        (tmp_path / "shapekit.toml").write_text('[shapes]\ndefault_fill_color = "green"\n')
        settings = ShapekitSettings.from_cli(search_root=tmp_path)
        result = GeometryService(settings).build_square(2.0)
        assert result.data["fill_color"] == "green"
