"""Tests for the configuration reducer."""

import dataclasses

import pytest

from span_layout.layout.edits import (
    AdjustElementCount,
    SetBoardWidth,
    SetDiameter,
    SetDistanceMode,
    SetDistanceValue,
    SetDistributionMode,
    SetElementCount,
    SetElementType,
    SetMaxEndGap,
    SetMaxEndGapLocked,
    SetRulerMarkMode,
    SetShowDimensions,
    SetTargetGap,
    apply_edit,
    apply_edits,
)
from span_layout.parser.model import (
    DEFAULT_CONFIG,
    DistanceMode,
    DistributionMode,
    ElementType,
    RulerMarkMode,
)

CALCULATED = apply_edit(DEFAULT_CONFIG, SetElementType(ElementType.CALCULATED))


def test_switching_to_calculated_derives_width():
    # (10500 - 6 * 400) / 5
    assert CALCULATED.board_width == 1620


def test_target_gap_rederives_width():
    config = apply_edit(CALCULATED, SetTargetGap(500))
    # (10500 - 6 * 500) / 5
    assert config.board_width == 1500


def test_count_rederives_width():
    config = apply_edit(CALCULATED, SetElementCount(8))
    # (10500 - 9 * 400) / 8 = 862.5
    assert config.board_width == 863


def test_span_edits_rederive_width():
    config = apply_edits(CALCULATED, [
        SetDistanceMode(DistanceMode.EDGE_TO_EDGE),
        SetDistanceValue(10000),
        SetTargetGap(500),
        SetElementCount(8),
    ])
    assert config.board_width == 688

    wider = apply_edit(config, SetDiameter(1200))
    # Edge to edge distance does not depend on the diameter
    assert wider.board_width == 688


def test_diameter_rederives_width_center_to_center():
    config = apply_edit(CALCULATED, SetDiameter(1800))
    # (10200 - 6 * 400) / 5
    assert config.board_width == 1560


def test_board_width_is_overridden_when_calculated():
    config = apply_edit(CALCULATED, SetBoardWidth(10))
    assert config.board_width == 1620


def test_board_width_for_boards():
    config = apply_edit(DEFAULT_CONFIG, SetBoardWidth(200))
    assert config.board_width == 200


def test_width_unchanged_outside_calculated_mode():
    config = apply_edit(DEFAULT_CONFIG, SetTargetGap(500))
    assert config.board_width == DEFAULT_CONFIG.board_width


def test_set_element_count_switches_to_by_count():
    config = apply_edit(DEFAULT_CONFIG, SetElementCount(9))
    assert config.distribution_mode is DistributionMode.BY_COUNT
    assert config.element_count == 9


def test_set_element_count_clamps_at_zero():
    assert apply_edit(DEFAULT_CONFIG, SetElementCount(-4)).element_count == 0


def test_adjust_count_starts_from_derived_count():
    # The default by-gap layout derives 26 elements
    config = apply_edit(DEFAULT_CONFIG, AdjustElementCount(1))
    assert config.distribution_mode is DistributionMode.BY_COUNT
    assert config.element_count == 27


def test_adjust_count_clamps_at_zero():
    assert apply_edit(DEFAULT_CONFIG, AdjustElementCount(-100)).element_count == 0


def test_max_end_gap_unlocks():
    locked = apply_edit(DEFAULT_CONFIG, SetMaxEndGapLocked(True))
    assert locked.is_max_end_gap_locked is True
    config = apply_edit(locked, SetMaxEndGap(250))
    assert config.max_end_gap == 250
    assert config.is_max_end_gap_locked is False


def test_simple_setters():
    config = apply_edits(DEFAULT_CONFIG, [
        SetDistributionMode(DistributionMode.BY_COUNT),
        SetRulerMarkMode(RulerMarkMode.CENTER),
        SetShowDimensions(False),
    ])
    assert config.distribution_mode is DistributionMode.BY_COUNT
    assert config.ruler_mark_mode is RulerMarkMode.CENTER
    assert config.show_dimensions is False


def test_edits_do_not_mutate():
    apply_edit(DEFAULT_CONFIG, SetDistanceValue(5000))
    assert DEFAULT_CONFIG.distance_value == 12000
    with pytest.raises(dataclasses.FrozenInstanceError):
        DEFAULT_CONFIG.distance_value = 1


def test_unknown_edit_raises():
    with pytest.raises(ValueError, match="Unknown edit"):
        apply_edit(DEFAULT_CONFIG, "not an edit")
