"""Span conversion, element width and millimetre rounding helpers."""

from __future__ import annotations

import math

from span_layout.parser.model import Configuration, DistanceMode, ElementType


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties toward positive infinity.

    Python's round() is banker's rounding; millimetre readouts follow the
    schoolbook rule instead, so 687.5 becomes 688.
    """
    return math.floor(value + 0.5)


def format_mm(value: float) -> str:
    """Format a length as whole millimetres."""
    return str(round_half_up(value))


def edge_to_edge(config: Configuration) -> float:
    """Clear working span between the inner edges of the two platforms."""
    if config.distance_mode is DistanceMode.CENTER_TO_CENTER:
        return config.distance_value - config.diameter
    return config.distance_value


def center_to_center(config: Configuration) -> float:
    """Span between the platform centres."""
    if config.distance_mode is DistanceMode.CENTER_TO_CENTER:
        return config.distance_value
    return config.distance_value + config.diameter


def element_width(config: Configuration) -> float:
    """Width every element occupies along the span (0 for points)."""
    if config.element_type is ElementType.POINT:
        return 0
    return config.board_width


def derive_width(span: float, gap: float, count: int) -> int:
    """Width that makes ``count`` elements with ``gap`` everywhere fill ``span``.

    The gap applies at both ends as well as between elements, hence the
    ``count + 1`` gaps. Never negative; 0 when there are no elements.
    """
    if count <= 0:
        return 0
    return max(0, round_half_up((span - (count + 1) * gap) / count))


def with_derived_width(config: Configuration) -> Configuration:
    """Return ``config`` with its board width re-derived if it is calculated.

    Other element types are returned unchanged.
    """
    if config.element_type is not ElementType.CALCULATED:
        return config
    width = derive_width(edge_to_edge(config), config.target_gap, config.element_count)
    if width == config.board_width:
        return config
    return config.replace(board_width=width)
