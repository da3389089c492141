"""Tests for the configuration schema, loader and CLI merge."""

from __future__ import annotations

import json
import os
from pathlib import Path

import pytest
from pydantic import ValidationError

from boxmaker.application.config import (
    BoxConfiguration,
    ConfigError,
    config_to_input,
    config_to_laser,
    load_config,
    load_config_from_dict,
    merge_config_with_cli,
)
from boxmaker.application.config.loader import _format_json_path
from boxmaker.domain import BoxType, FingerStyle


def _write(tmp_path: Path, data, name: str = "box.json") -> Path:
    path = tmp_path / name
    path.write_text(json.dumps(data) if not isinstance(data, str) else data)
    return path


# =============================================================================
# Schema
# =============================================================================


class TestSchema:
    def test_defaults(self) -> None:
        config = BoxConfiguration()

        assert config.schema_version == "1.0"
        assert (config.box.x, config.box.y, config.box.h) == (100.0, 100.0, 100.0)
        assert config.box.box_type is BoxType.FULL_BOX
        assert config.finger_joint.style is FingerStyle.RECTANGULAR
        assert config.layout.spacing == 5.0
        assert config.laser.passes == 3
        assert config.output.formats == ["gcode"]
        assert config.output.project_name == "box"

    def test_enum_names(self) -> None:
        config = BoxConfiguration.model_validate(
            {"box": {"box_type": "no_top"}, "finger_joint": {"style": "dogbone"}}
        )

        assert config.box.box_type is BoxType.NO_TOP
        assert config.finger_joint.style is FingerStyle.DOGBONE

    def test_integer_codes(self) -> None:
        config = BoxConfiguration.model_validate(
            {"box": {"box_type": 3}, "finger_joint": {"style": 4}}
        )

        assert config.box.box_type is BoxType.NO_SIDES
        assert config.finger_joint.style is FingerStyle.DOGBONE

    @pytest.mark.parametrize(
        "data",
        [
            {"box": {"box_type": 9}},
            {"box": {"box_type": "sideways"}},
            {"finger_joint": {"style": 7}},
            {"box": {"x": -5}},
            {"box": {"burn": -0.1}},
            {"box": {"dividers_x": -1}},
            {"laser": {"passes": 0}},
            {"output": {"formats": ["stl"]}},
            {"output": {"project_name": ""}},
            {"schema_version": "2.0"},
            {"box": {"colour": "red"}},
            {"extras": True},
        ],
    )
    def test_rejected(self, data: dict) -> None:
        with pytest.raises(ValidationError):
            BoxConfiguration.model_validate(data)


# =============================================================================
# Loader
# =============================================================================


class TestLoadConfig:
    def test_load_valid_file(self, tmp_path: Path) -> None:
        path = _write(tmp_path, {"box": {"x": 150, "thickness": 4}})
        config = load_config(path)

        assert config.box.x == 150.0
        assert config.box.thickness == 4.0

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config(tmp_path / "missing.json")

        assert exc_info.value.error_type == "file_not_found"
        assert "not found" in str(exc_info.value)

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = _write(tmp_path, '{"box": {"x": 100,}}')
        with pytest.raises(ConfigError) as exc_info:
            load_config(path)

        error = exc_info.value
        assert error.error_type == "json_parse"
        assert error.path == path
        assert error.details[0]["line"] == 1

    def test_validation_error_details(self, tmp_path: Path) -> None:
        path = _write(tmp_path, {"box": {"x": -1}, "output": {"formats": ["svg", "stl"]}})
        with pytest.raises(ConfigError) as exc_info:
            load_config(path)

        error = exc_info.value
        assert error.error_type == "validation"
        paths = [d["path"] for d in error.details]
        assert "box.x" in paths
        assert "output.formats" in paths
        assert "Configuration validation failed" in error.message

    @pytest.mark.skipif(
        not hasattr(os, "geteuid") or os.geteuid() == 0,
        reason="root can read any file",
    )
    def test_unreadable_file(self, tmp_path: Path) -> None:
        path = _write(tmp_path, {})
        path.chmod(0)
        try:
            with pytest.raises(ConfigError) as exc_info:
                load_config(path)
            assert exc_info.value.error_type == "permission_denied"
        finally:
            path.chmod(0o644)

    def test_load_from_dict(self) -> None:
        config = load_config_from_dict({"layout": {"spacing": 2}})
        assert config.layout.spacing == 2.0

    def test_load_from_dict_error(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict({"layout": {"spacing": -2}})

        assert exc_info.value.error_type == "validation"
        assert exc_info.value.path is None

    @pytest.mark.parametrize(
        "loc, expected",
        [
            (("box", "x"), "box.x"),
            (("output", "formats", 1), "output.formats[1]"),
            ((), ""),
        ],
    )
    def test_format_json_path(self, loc: tuple, expected: str) -> None:
        assert _format_json_path(loc) == expected


# =============================================================================
# Adapter
# =============================================================================


class TestAdapter:
    def test_config_to_input(self) -> None:
        config = BoxConfiguration.model_validate(
            {
                "box": {"x": 120, "y": 80, "h": 50, "thickness": 4, "box_type": 1, "dividers_x": 2},
                "finger_joint": {"finger": 3, "play": 0.05, "style": "dogbone"},
                "layout": {"spacing": 8, "optimize": True},
            }
        )
        box_input = config_to_input(config)

        assert (box_input.x, box_input.y, box_input.h) == (120.0, 80.0, 50.0)
        assert box_input.thickness == 4.0
        assert box_input.box_type is BoxType.NO_TOP
        assert box_input.dividers_x == 2
        assert box_input.finger == 3.0
        assert box_input.play == 0.05
        assert box_input.style is FingerStyle.DOGBONE
        assert box_input.spacing == 8.0
        assert box_input.optimize_layout is True
        assert box_input.validate() == []

    def test_config_to_laser(self) -> None:
        config = BoxConfiguration.model_validate(
            {"laser": {"passes": 2, "power": 800, "feed_rate": 300, "home": False}}
        )
        laser = config_to_laser(config)

        assert (laser.passes, laser.power, laser.feed_rate) == (2, 800, 300.0)
        assert laser.home is False


class TestMergeConfigWithCli:
    def test_overrides_replace_values(self) -> None:
        merged = merge_config_with_cli(
            BoxConfiguration(), x=150.0, style="dogbone", output_formats=["svg", "dxf"]
        )

        assert merged.box.x == 150.0
        assert merged.finger_joint.style is FingerStyle.DOGBONE
        assert merged.output.formats == ["svg", "dxf"]

    def test_none_keeps_file_value(self) -> None:
        config = BoxConfiguration.model_validate({"box": {"burn": 0.2}})
        merged = merge_config_with_cli(config, burn=None, thickness=None)

        assert merged.box.burn == 0.2
        assert merged.box.thickness == 3.0

    def test_original_untouched(self) -> None:
        config = BoxConfiguration()
        merge_config_with_cli(config, x=150.0)

        assert config.box.x == 100.0

    def test_integer_code_override(self) -> None:
        merged = merge_config_with_cli(BoxConfiguration(), box_type=2, style=4)

        assert merged.box.box_type is BoxType.NO_BOTTOM
        assert merged.finger_joint.style is FingerStyle.DOGBONE

    def test_invalid_override_revalidated(self) -> None:
        with pytest.raises(ValidationError):
            merge_config_with_cli(BoxConfiguration(), passes=0)

    def test_unknown_override(self) -> None:
        with pytest.raises(TypeError, match="Unknown override"):
            merge_config_with_cli(BoxConfiguration(), colour="red")
