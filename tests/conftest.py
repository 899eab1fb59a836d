"""Pytest configuration and shared fixtures for maxrects tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from maxrects.domain import Bin, Box, MaxRectsPacker, PlacementResult


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


# =============================================================================
# Shared packing fixtures
# =============================================================================


@pytest.fixture
def scenario_a_boxes() -> list[Box]:
    """A 5x6 box and a 4x4 box."""
    return [Box(5, 6), Box(4, 4)]


@pytest.fixture
def scenario_a_bins() -> list[Bin]:
    """A single 10x20 bin with id 1."""
    return [Bin(10, 20, bin_id=1)]


@pytest.fixture
def scenario_a_result(
    scenario_a_boxes: list[Box], scenario_a_bins: list[Bin]
) -> PlacementResult:
    """Result of packing the 5x6 and 4x4 boxes into the 10x20 bin."""
    return MaxRectsPacker(scenario_a_boxes, scenario_a_bins).run()


# =============================================================================
# Job file fixtures
# =============================================================================


@pytest.fixture
def job_data() -> dict[str, Any]:
    """A valid packing job as a dictionary."""
    return {
        "schema_version": "1.0",
        "heuristic": "best_area_fit",
        "boxes": [
            {"width": 5, "height": 6, "label": "Large"},
            {"width": 4, "height": 4, "quantity": 2, "label": "Small"},
        ],
        "bins": [
            {"width": 10, "height": 20, "id": 1},
            {"width": 8, "height": 8, "offset_y": 5, "id": 2},
        ],
    }


@pytest.fixture
def job_file(tmp_path: Path, job_data: dict[str, Any]) -> Path:
    """The valid packing job written to a temporary file."""
    path = tmp_path / "job.json"
    path.write_text(json.dumps(job_data), encoding="utf-8")
    return path
