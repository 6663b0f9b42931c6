"""Tests for the layout engine."""

import pytest

from span_layout.layout.constants import (
    WARNING_DISTANCE_TOO_SMALL,
    WARNING_ELEMENTS_DO_NOT_FIT,
)
from span_layout.layout.engine import compute_layout, marking_sequence, ruler_marks
from span_layout.layout.measure import with_derived_width
from span_layout.parser.model import (
    DEFAULT_CONFIG,
    DistanceMode,
    DistributionMode,
    ElementType,
    RulerMarkMode,
)


def _by_count(count, **changes):
    return DEFAULT_CONFIG.replace(
        distribution_mode=DistributionMode.BY_COUNT,
        element_count=count,
        **changes,
    )


def test_default_layout_clamps_end_gap():
    """12000 centre to centre with 1500 platforms: 26 points, 300 mm ends."""
    result = compute_layout(DEFAULT_CONFIG)
    assert result.edge_to_edge == 10500
    assert result.center_to_center == 12000
    assert result.element_count == 26
    assert result.first_element_offset == 300
    assert result.actual_gap == pytest.approx(396.0)
    assert result.element_positions[0] == 300
    assert result.element_positions[-1] == pytest.approx(10200.0)
    assert result.warnings == ()


def test_edge_to_edge_span():
    config = DEFAULT_CONFIG.replace(
        distance_mode=DistanceMode.EDGE_TO_EDGE, distance_value=12000
    )
    result = compute_layout(config)
    assert result.edge_to_edge == 12000
    assert result.center_to_center == 13500


def test_cap_clamp_recomputes_inner_gap():
    """Uniform gap 12000/31 exceeds the 300 mm cap, so ends clamp to 300."""
    config = DEFAULT_CONFIG.replace(
        distance_mode=DistanceMode.EDGE_TO_EDGE, distance_value=12000
    )
    result = compute_layout(config)
    assert result.element_count == 30
    assert 12000 / 31 > 300.1
    assert result.first_element_offset == 300
    assert result.actual_gap == pytest.approx(11400 / 29)
    assert result.warnings == ()
    # Last element ends exactly one end gap before the far platform
    assert result.element_positions[-1] + 300 == pytest.approx(12000)


def test_count_rounds_half_up():
    """An ideal count of 28.5 rounds to 29, not to the even 28."""
    config = DEFAULT_CONFIG.replace(
        distance_mode=DistanceMode.EDGE_TO_EDGE, distance_value=11600
    )
    assert compute_layout(config).element_count == 29


def test_board_width_shifts_positions():
    config = DEFAULT_CONFIG.replace(element_type=ElementType.BOARD, board_width=145)
    result = compute_layout(config)
    assert result.element_count == 19
    assert result.element_width == 145
    inner = (10500 - 600 - 19 * 145) / 18
    assert result.actual_gap == pytest.approx(inner)
    assert result.element_positions[1] - result.element_positions[0] == pytest.approx(145 + inner)


def test_point_ignores_board_width():
    config = DEFAULT_CONFIG.replace(board_width=5000)
    assert compute_layout(config) == compute_layout(DEFAULT_CONFIG)


def test_by_count_uniform_within_cap():
    """Enough elements to bring the uniform gap under the cap."""
    result = compute_layout(_by_count(40))
    uniform = 10500 / 41
    assert result.first_element_offset == pytest.approx(uniform)
    assert result.actual_gap == pytest.approx(uniform)
    assert result.warnings == ()


def test_single_element_is_centred():
    result = compute_layout(_by_count(1))
    assert result.element_count == 1
    assert result.first_element_offset == 5250
    assert result.actual_gap == result.first_element_offset
    assert result.element_positions == (5250,)


def test_single_element_reports_exceeded_cap():
    result = compute_layout(_by_count(1))
    assert result.warnings == ("first offset (5250 mm) exceeds max end gap (300 mm)",)


def test_single_board_is_centred():
    result = compute_layout(_by_count(1, element_type=ElementType.BOARD, board_width=500))
    assert result.element_positions == (5000,)


def test_locked_by_gap_uses_target_gap_for_ends():
    config = DEFAULT_CONFIG.replace(is_max_end_gap_locked=True)
    result = compute_layout(config)
    # (10500 - 800 + 400) / 400 = 25.25
    assert result.element_count == 25
    assert result.first_element_offset == pytest.approx(10500 / 26)
    assert result.actual_gap == pytest.approx(result.first_element_offset)
    assert result.warnings == ()


def test_locked_never_warns_about_cap():
    result = compute_layout(_by_count(1, is_max_end_gap_locked=True))
    assert result.first_element_offset == 5250
    assert result.warnings == ()


def test_calculated_uses_target_gap_everywhere():
    config = with_derived_width(DEFAULT_CONFIG.replace(
        distance_mode=DistanceMode.EDGE_TO_EDGE,
        distance_value=10000,
        element_type=ElementType.CALCULATED,
        target_gap=500,
        element_count=8,
    ))
    assert config.board_width == 688
    result = compute_layout(config)
    assert result.element_count == 8
    assert result.first_element_offset == 500
    assert result.actual_gap == 500
    assert result.element_positions == tuple(500 + i * 1188 for i in range(8))
    # End offset above the cap is expected here, not reported
    assert result.warnings == ()


def test_calculated_ignores_distribution_mode():
    config = DEFAULT_CONFIG.replace(
        element_type=ElementType.CALCULATED,
        distribution_mode=DistributionMode.BY_GAP,
        element_count=3,
    )
    assert compute_layout(config).element_count == 3


def test_overfull_span_warns():
    result = compute_layout(_by_count(100, element_type=ElementType.BOARD))
    assert result.first_element_offset < 0
    assert result.warnings == (WARNING_ELEMENTS_DO_NOT_FIT,)
    assert len(result.element_positions) == 100


def test_negative_span_warns_and_keeps_count():
    config = DEFAULT_CONFIG.replace(distance_value=1000)
    result = compute_layout(config)
    assert result.edge_to_edge == -500
    assert result.warnings == (WARNING_DISTANCE_TOO_SMALL,)
    assert result.element_count == DEFAULT_CONFIG.element_count
    assert result.actual_gap == 0
    assert result.first_element_offset == 0
    assert result.element_positions == (0, 0, 0, 0, 0)


def test_zero_span_has_no_warnings():
    result = compute_layout(DEFAULT_CONFIG.replace(distance_value=1500))
    assert result.edge_to_edge == 0
    assert result.warnings == ()
    assert len(result.element_positions) == result.element_count


def test_zero_count():
    result = compute_layout(_by_count(0))
    assert result.element_count == 0
    assert result.element_positions == ()
    assert result.actual_gap == 0


def test_negative_count_is_treated_as_zero():
    result = compute_layout(_by_count(-3))
    assert result.element_count == 0
    assert result.element_positions == ()


def test_zero_target_gap_for_points_keeps_count():
    result = compute_layout(DEFAULT_CONFIG.replace(target_gap=0))
    assert result.element_count == DEFAULT_CONFIG.element_count
    assert len(result.element_positions) == result.element_count


def test_ruler_marks_edge_and_center():
    config = _by_count(2, element_type=ElementType.BOARD, board_width=100)
    result = compute_layout(config)
    assert ruler_marks(config, result) == result.element_positions

    centred = config.replace(ruler_mark_mode=RulerMarkMode.CENTER)
    marks = ruler_marks(centred, compute_layout(centred))
    assert marks == tuple(pos + 50 for pos in result.element_positions)


def test_marking_sequence():
    result = compute_layout(DEFAULT_CONFIG)
    sequence = marking_sequence(DEFAULT_CONFIG, result)
    assert sequence[0] == "platform edge"
    assert sequence[1] == "300"
    assert sequence[2] == "696"
    assert sequence[-2] == "10500"
    assert sequence[-1] == "platform edge"
    assert len(sequence) == result.element_count + 3


def test_marking_sequence_custom_label():
    result = compute_layout(_by_count(1))
    sequence = marking_sequence(_by_count(1), result, "Край платформы")
    assert sequence == ["Край платформы", "5250", "10500", "Край платформы"]
