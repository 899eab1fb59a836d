"""Tests for loading, validating and adapting packing job files."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from maxrects.application.config import (
    ConfigError,
    PackingJobConfig,
    config_to_bins,
    config_to_boxes,
    load_config,
    load_config_from_dict,
)
from maxrects.application.config.loader import _format_json_path
from maxrects.domain import Box


# =============================================================================
# Schema Tests
# =============================================================================


class TestPackingJobSchema:
    """Tests for the job schema itself."""

    def test_minimal_job(self) -> None:
        config = load_config_from_dict({"bins": [{"width": 10, "height": 10}]})
        assert config.schema_version == "1.0"
        assert config.heuristic == "best_area_fit"
        assert config.boxes == []

    def test_integer_sizes_stay_integers(self, job_data: dict[str, Any]) -> None:
        config = load_config_from_dict(job_data)
        assert config.boxes[0].width == 5
        assert isinstance(config.boxes[0].width, int)

    def test_float_sizes_accepted(self) -> None:
        config = load_config_from_dict(
            {"boxes": [{"width": 2.5, "height": 1.5}], "bins": [{"width": 10, "height": 10}]}
        )
        assert config.boxes[0].width == 2.5

    def test_heuristic_is_normalized(self) -> None:
        config = load_config_from_dict(
            {"heuristic": "Bottom-Left", "bins": [{"width": 1, "height": 1}]}
        )
        assert config.heuristic == "bottom_left"


class TestSchemaValidationErrors:
    """Invalid jobs raise ConfigError with JSON-path details."""

    def _error_for(self, data: dict[str, Any]) -> ConfigError:
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict(data)
        assert exc_info.value.error_type == "validation"
        return exc_info.value

    def test_missing_bins(self) -> None:
        error = self._error_for({"boxes": []})
        assert error.details[0]["path"] == "bins"

    def test_empty_bins(self) -> None:
        error = self._error_for({"bins": []})
        assert error.details[0]["path"] == "bins"

    def test_non_positive_box_width(self) -> None:
        error = self._error_for(
            {"boxes": [{"width": 0, "height": 5}], "bins": [{"width": 10, "height": 10}]}
        )
        assert error.details[0]["path"] == "boxes[0].width"
        assert "greater than 0" in error.details[0]["message"]
        assert "boxes[0].width" in error.message

    def test_negative_bin_height(self) -> None:
        error = self._error_for({"bins": [{"width": 10, "height": 10}, {"width": 1, "height": -1}]})
        assert error.details[0]["path"] == "bins[1].height"

    @pytest.mark.parametrize("value", [float("nan"), float("inf")])
    def test_non_finite_box_width(self, value: float) -> None:
        error = self._error_for(
            {"boxes": [{"width": value, "height": 5}], "bins": [{"width": 10, "height": 10}]}
        )
        assert error.details[0]["path"] == "boxes[0].width"
        assert "finite" in error.details[0]["message"]

    @pytest.mark.parametrize("value", [float("nan"), float("inf")])
    def test_non_finite_bin_height(self, value: float) -> None:
        error = self._error_for({"bins": [{"width": 10, "height": value}]})
        assert error.details[0]["path"] == "bins[0].height"

    def test_non_finite_offset(self) -> None:
        error = self._error_for({"bins": [{"width": 10, "height": 10, "offset_x": float("nan")}]})
        assert error.details[0]["path"] == "bins[0].offset_x"

    def test_non_finite_values_reported_as_json_safe_text(self) -> None:
        error = self._error_for({"bins": [{"width": float("inf"), "height": float("nan")}]})
        assert [d["value"] for d in error.details] == ["inf", "nan"]
        json.dumps(error.details, allow_nan=False)

    def test_unknown_field(self) -> None:
        error = self._error_for({"bins": [{"width": 1, "height": 1, "depth": 3}]})
        assert error.details[0]["path"] == "bins[0].depth"

    def test_unknown_heuristic(self) -> None:
        error = self._error_for({"heuristic": "guess", "bins": [{"width": 1, "height": 1}]})
        assert error.details[0]["path"] == "heuristic"
        assert "Unknown heuristic" in error.details[0]["message"]

    def test_unsupported_version(self) -> None:
        error = self._error_for({"schema_version": "2.0", "bins": [{"width": 1, "height": 1}]})
        assert "Unsupported schema version" in error.message

    def test_zero_quantity(self) -> None:
        error = self._error_for(
            {"boxes": [{"width": 1, "height": 1, "quantity": 0}], "bins": [{"width": 1, "height": 1}]}
        )
        assert error.details[0]["path"] == "boxes[0].quantity"

    def test_duplicate_bin_ids(self) -> None:
        error = self._error_for(
            {"bins": [{"width": 1, "height": 1, "id": 4}, {"width": 2, "height": 2, "id": 4}]}
        )
        assert "Bin ids must be unique" in error.message


# =============================================================================
# File Loading Tests
# =============================================================================


class TestLoadConfig:
    """Tests for loading job files from disk."""

    def test_valid_file(self, job_file: Path) -> None:
        config = load_config(job_file)
        assert isinstance(config, PackingJobConfig)
        assert len(config.bins) == 2

    def test_missing_file(self, tmp_path: Path) -> None:
        path = tmp_path / "missing.json"
        with pytest.raises(ConfigError) as exc_info:
            load_config(path)
        assert exc_info.value.error_type == "file_not_found"
        assert exc_info.value.path == path

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.json"
        path.write_text('{"bins": [', encoding="utf-8")
        with pytest.raises(ConfigError) as exc_info:
            load_config(path)
        assert exc_info.value.error_type == "json_parse"
        assert exc_info.value.details[0]["line"] == 1

    def test_nan_literal_in_file(self, tmp_path: Path) -> None:
        """The JSON reader accepts NaN literals; the schema must reject them."""
        path = tmp_path / "nan.json"
        path.write_text('{"bins": [{"width": NaN, "height": 5}]}', encoding="utf-8")
        with pytest.raises(ConfigError) as exc_info:
            load_config(path)
        assert exc_info.value.error_type == "validation"
        assert exc_info.value.details[0]["path"] == "bins[0].width"

    def test_validation_error_keeps_path(self, tmp_path: Path) -> None:
        path = tmp_path / "invalid.json"
        path.write_text(json.dumps({"bins": []}), encoding="utf-8")
        with pytest.raises(ConfigError) as exc_info:
            load_config(path)
        assert exc_info.value.error_type == "validation"
        assert exc_info.value.path == path

    def test_accepts_string_path(self, job_file: Path) -> None:
        assert load_config(str(job_file)).heuristic == "best_area_fit"  # type: ignore[arg-type]


class TestFormatJsonPath:
    """Tests for rendering error locations."""

    def test_nested_path(self) -> None:
        assert _format_json_path(("bins", 0, "width")) == "bins[0].width"

    def test_leading_index(self) -> None:
        assert _format_json_path((2, "width")) == "[2].width"


# =============================================================================
# Adapter Tests
# =============================================================================


class TestConfigAdapters:
    """Tests for turning a job into domain objects."""

    def test_quantity_expands_with_numbered_labels(self, job_data: dict[str, Any]) -> None:
        boxes = config_to_boxes(load_config_from_dict(job_data))
        assert boxes == [
            Box(5, 6, "Large"),
            Box(4, 4, "Small #1"),
            Box(4, 4, "Small #2"),
        ]

    def test_unlabelled_quantity_keeps_empty_labels(self) -> None:
        config = load_config_from_dict(
            {"boxes": [{"width": 1, "height": 2, "quantity": 3}], "bins": [{"width": 5, "height": 5}]}
        )
        assert config_to_boxes(config) == [Box(1, 2)] * 3

    def test_bins_keep_ids_and_offsets(self, job_data: dict[str, Any]) -> None:
        bins = config_to_bins(load_config_from_dict(job_data))
        assert [(b.bin_id, b.width, b.height) for b in bins] == [(1, 10, 20), (2, 8, 8)]
        assert (bins[1].offset_x, bins[1].offset_y) == (0, 5)

    def test_missing_ids_default_to_position(self) -> None:
        config = load_config_from_dict(
            {"bins": [{"width": 1, "height": 1}, {"width": 2, "height": 2}]}
        )
        assert [b.bin_id for b in config_to_bins(config)] == [0, 1]
