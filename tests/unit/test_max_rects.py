"""Tests for MaxRectsPacker and PlacementResult.

Tests cover:
- The reference scenarios (fit, no fit, no bins, exact fill)
- Largest-area-first ordering and its stability
- Deterministic tie-breaking across bins and free rectangles
- Ownership of bins passed to the packer
- Pluggable scorers
"""

from __future__ import annotations

import logging

import pytest

from maxrects.domain import (
    Bin,
    BottomLeftScorer,
    Box,
    MaxRectsPacker,
    NoBinsError,
    PlacementResult,
    Rectangle,
    calculate_packed_percentage,
)


# =============================================================================
# Reference scenarios
# =============================================================================


class TestScenarios:
    """The four reference packing scenarios."""

    def test_scenario_a_places_both_boxes(self, scenario_a_result: PlacementResult) -> None:
        placed, remaining, bins = scenario_a_result
        assert remaining == ()
        assert [p.rect for p in placed] == [Rectangle(0, 0, 5, 6), Rectangle(5, 0, 4, 4)]
        assert all(p.bin_id == 1 for p in placed)
        assert not placed[0].rect.intersects(placed[1].rect)
        assert len(bins) == 1

    def test_scenario_a_final_free_rectangles(self, scenario_a_result: PlacementResult) -> None:
        assert scenario_a_result.bins[0].free_rectangles == [
            Rectangle(0, 6, 10, 14),
            Rectangle(5, 4, 5, 16),
            Rectangle(9, 0, 1, 20),
        ]

    def test_scenario_b_box_too_large(self) -> None:
        result = MaxRectsPacker([Box(100, 100)], [Bin(10, 10, bin_id=1)]).run()
        assert result.placed == ()
        assert result.remaining == (Box(100, 100),)
        assert result.bins[0].free_rectangles == [Rectangle(0, 0, 10, 10)]

    def test_scenario_c_no_bins(self) -> None:
        with pytest.raises(NoBinsError, match="At least one bin"):
            MaxRectsPacker([Box(1, 1)], [])

    def test_empty_bin_iterator_raises(self) -> None:
        """An exhausted iterator counts as no bins, not as a truthy object."""
        with pytest.raises(NoBinsError):
            MaxRectsPacker([Box(1, 1)], iter([]))

    def test_bins_from_generator(self) -> None:
        bins = (Bin(10, 10, bin_id=i) for i in range(2))
        result = MaxRectsPacker(iter([Box(10, 10), Box(10, 10)]), bins).run()
        assert [p.bin_id for p in result.placed] == [0, 1]
        assert result.remaining == ()

    def test_scenario_d_exact_fill_then_next_bin(self) -> None:
        bins = [Bin(10, 10, bin_id=1), Bin(5, 5, bin_id=2)]
        placed, remaining, result_bins = MaxRectsPacker([Box(10, 10), Box(1, 1)], bins).run()
        assert remaining == ()
        assert (placed[0].bin_id, placed[0].rect) == (1, Rectangle(0, 0, 10, 10))
        assert (placed[1].bin_id, placed[1].rect) == (2, Rectangle(0, 0, 1, 1))
        assert result_bins[0].free_rectangles == []


# =============================================================================
# Ordering and tie-breaking
# =============================================================================


class TestOrdering:
    """Tests for the order in which boxes are processed."""

    def test_largest_area_first(self) -> None:
        boxes = [Box(1, 1, "small"), Box(5, 5, "big"), Box(2, 2, "medium")]
        result = MaxRectsPacker(boxes, [Bin(100, 100)]).run()
        assert [p.box.label for p in result.placed] == ["big", "medium", "small"]

    def test_equal_areas_keep_input_order(self) -> None:
        boxes = [Box(2, 3, "a"), Box(3, 2, "b"), Box(6, 1, "c"), Box(1, 6, "d")]
        result = MaxRectsPacker(boxes, [Bin(100, 100)]).run()
        assert [p.box.label for p in result.placed] == ["a", "b", "c", "d"]

    def test_remaining_in_processing_order(self) -> None:
        boxes = [Box(20, 20, "first"), Box(30, 30, "second"), Box(1, 1, "fits")]
        result = MaxRectsPacker(boxes, [Bin(5, 5)]).run()
        assert [b.label for b in result.remaining] == ["second", "first"]
        assert [p.box.label for p in result.placed] == ["fits"]


class TestTieBreaking:
    """Equal scores go to the earliest candidate."""

    def test_identical_bins_prefer_first(self) -> None:
        bins = [Bin(10, 10, bin_id=1), Bin(10, 10, bin_id=2)]
        result = MaxRectsPacker([Box(3, 3)], bins).run()
        assert result.placed[0].bin_id == 1

    def test_equal_free_rectangles_prefer_first_in_list(self) -> None:
        """After a 4x4 box the two 8x4 and 4x8 strips score the same for 2x2."""
        result = MaxRectsPacker([Box(4, 4), Box(2, 2)], [Bin(8, 8)]).run()
        assert result.placed[1].rect == Rectangle(0, 4, 2, 2)

    def test_better_score_in_later_bin_wins(self) -> None:
        bins = [Bin(10, 10, bin_id=1), Bin(3, 3, bin_id=2)]
        result = MaxRectsPacker([Box(3, 3)], bins).run()
        assert result.placed[0].bin_id == 2


# =============================================================================
# Ownership and repeatability
# =============================================================================


class TestOwnership:
    """The packer never shares bin state with its caller."""

    def test_caller_bins_unchanged_by_run(self) -> None:
        caller_bin = Bin(10, 10, bin_id=1)
        MaxRectsPacker([Box(4, 4)], [caller_bin]).run()
        assert caller_bin.placements == []
        assert caller_bin.free_rectangles == [Rectangle(0, 0, 10, 10)]

    def test_caller_mutation_after_construction_has_no_effect(self) -> None:
        caller_bin = Bin(10, 10)
        packer = MaxRectsPacker([Box(4, 4)], [caller_bin])
        caller_bin.commit(Rectangle(0, 0, 10, 10), Box(10, 10))
        result = packer.run()
        assert result.placed[0].rect == Rectangle(0, 0, 4, 4)

    def test_bins_property_returns_copies(self) -> None:
        packer = MaxRectsPacker([Box(4, 4)], [Bin(10, 10)])
        packer.bins[0].commit(Rectangle(0, 0, 10, 10), Box(10, 10))
        assert packer.run().placed[0].rect == Rectangle(0, 0, 4, 4)

    def test_repeated_runs_are_identical(self) -> None:
        boxes = [Box(w, h) for w, h in [(3, 7), (5, 5), (2, 9), (6, 1), (4, 4), (8, 3)]]
        packer = MaxRectsPacker(boxes, [Bin(10, 10, bin_id=0), Bin(8, 6, bin_id=1)])
        first = packer.run()
        second = packer.run()
        assert first.placed == second.placed
        assert first.remaining == second.remaining
        assert [b.free_rectangles for b in first.bins] == [
            b.free_rectangles for b in second.bins
        ]

    def test_result_bins_hold_placements(self, scenario_a_result: PlacementResult) -> None:
        assert list(scenario_a_result.bins[0].placements) == list(scenario_a_result.placed)

    def test_boxes_property(self) -> None:
        boxes = [Box(1, 2), Box(3, 4)]
        assert MaxRectsPacker(boxes, [Bin(5, 5)]).boxes == (Box(1, 2), Box(3, 4))


# =============================================================================
# Scorers and edge cases
# =============================================================================


class WidestFreeRectScorer:
    """Test scorer that prefers the widest free rectangle."""

    name = "widest"

    def score(self, box_width, box_height, free_rect):
        return (-free_rect.width,)


class TestScorerSelection:
    """Tests for choosing the placement heuristic."""

    def test_custom_scorer_is_used(self) -> None:
        bins = [Bin(5, 5, bin_id=1), Bin(10, 10, bin_id=2)]
        result = MaxRectsPacker([Box(2, 2)], bins, scorer=WidestFreeRectScorer()).run()
        assert result.placed[0].bin_id == 2

    def test_bottom_left_scorer(self) -> None:
        """Bottom-left fills the top row before starting a new one."""
        boxes = [Box(4, 4), Box(4, 4)]
        result = MaxRectsPacker(boxes, [Bin(10, 20)], scorer=BottomLeftScorer()).run()
        assert [p.rect for p in result.placed] == [
            Rectangle(0, 0, 4, 4),
            Rectangle(4, 0, 4, 4),
        ]

    def test_non_scorer_rejected(self) -> None:
        with pytest.raises(TypeError):
            MaxRectsPacker([Box(1, 1)], [Bin(1, 1)], scorer=object())  # type: ignore[arg-type]

    def test_default_scorer(self) -> None:
        assert MaxRectsPacker([], [Bin(1, 1)]).scorer.name == "best_area_fit"


class TestEdgeCases:
    """Inputs at the boundaries."""

    def test_no_boxes(self) -> None:
        result = MaxRectsPacker([], [Bin(10, 10)]).run()
        assert result.placed == ()
        assert result.remaining == ()
        assert result.packed_percentage == 0.0

    def test_float_dimensions(self) -> None:
        result = MaxRectsPacker([Box(2.5, 2.5), Box(2.5, 2.5)], [Bin(5, 2.5)]).run()
        assert [p.rect for p in result.placed] == [
            Rectangle(0, 0, 2.5, 2.5),
            Rectangle(2.5, 0, 2.5, 2.5),
        ]
        assert result.bins[0].free_rectangles == []

    def test_duplicate_bin_ids_log_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="maxrects.domain.services.max_rects"):
            MaxRectsPacker([], [Bin(5, 5, bin_id=3), Bin(5, 5, bin_id=3)])
        assert "Duplicate bin ids [3]" in caplog.text


# =============================================================================
# PlacementResult
# =============================================================================


class TestPlacementResult:
    """Tests for result accessors."""

    def test_packed_percentage(self, scenario_a_result: PlacementResult) -> None:
        assert scenario_a_result.placed_area == 46
        assert scenario_a_result.total_bin_area == 200
        assert scenario_a_result.packed_percentage == pytest.approx(23.0)

    def test_placements_for(self, scenario_a_result: PlacementResult) -> None:
        assert len(scenario_a_result.placements_for(1)) == 2
        assert scenario_a_result.placements_for(99) == ()

    def test_calculate_packed_percentage_without_bins(self) -> None:
        assert calculate_packed_percentage([], []) == 0.0
