"""Data model for span layouts."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from enum import Enum
from typing import Union


class DistanceMode(Enum):
    """Which of the two spans the operator measured."""

    CENTER_TO_CENTER = "center-to-center"
    EDGE_TO_EDGE = "edge-to-edge"


class ElementType(Enum):
    """Kind of element placed inside the span."""

    POINT = "point"
    BOARD = "board"
    CALCULATED = "calculated"


class DistributionMode(Enum):
    """Whether the count follows from a target gap or is fixed."""

    BY_GAP = "by-gap"
    BY_COUNT = "by-count"


class RulerMarkMode(Enum):
    """Which point of an element the construction ruler marks."""

    EDGE = "edge"
    CENTER = "center"


@dataclass(frozen=True)
class Configuration:
    """Complete input of one layout computation.

    All lengths are millimetres. Instances are immutable; use
    :meth:`replace` to derive an edited copy.
    """

    diameter: float = 1500
    distance_mode: DistanceMode = DistanceMode.CENTER_TO_CENTER
    distance_value: float = 12000
    element_type: ElementType = ElementType.POINT
    board_width: float = 145
    distribution_mode: DistributionMode = DistributionMode.BY_GAP
    target_gap: float = 400
    element_count: int = 5
    max_end_gap: float = 300
    is_max_end_gap_locked: bool = False
    # Display-only settings
    ruler_mark_mode: RulerMarkMode = RulerMarkMode.EDGE
    show_dimensions: bool = True

    def replace(self, **changes) -> Configuration:
        return dataclasses.replace(self, **changes)


DEFAULT_CONFIG = Configuration()


@dataclass(frozen=True)
class LayoutResult:
    """Solver output.

    ``element_positions`` holds the leading edge of every element,
    measured from the inner edge of the first platform.
    """

    edge_to_edge: float
    center_to_center: float
    element_count: int
    actual_gap: float
    first_element_offset: float
    element_positions: tuple[float, ...] = field(default_factory=tuple)
    warnings: tuple[str, ...] = field(default_factory=tuple)
    element_width: float = 0.0


# ---------------------------------------------------------------------------
# Placement strategies
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class FixedWidthByGap:
    """Element count follows from the target gap; width is an input."""

    width: float
    target_gap: float
    max_end_gap: float
    locked: bool = False


@dataclass(frozen=True)
class FixedWidthByCount:
    """Element count is an input; gaps are resolved to fit the span."""

    width: float
    count: int
    max_end_gap: float
    locked: bool = False


@dataclass(frozen=True)
class DerivedWidthByCount:
    """Count and gap are inputs; width was derived to fill the span exactly."""

    width: float
    count: int
    gap: float


PlacementStrategy = Union[FixedWidthByGap, FixedWidthByCount, DerivedWidthByCount]


def placement_strategy(config: Configuration) -> PlacementStrategy:
    """Map the flat configuration onto the strategy it actually describes.

    A calculated element type always places a fixed count, whatever the
    distribution mode says, and a point never has width.
    """
    if config.element_type is ElementType.CALCULATED:
        return DerivedWidthByCount(
            width=config.board_width,
            count=config.element_count,
            gap=config.target_gap,
        )

    width = 0 if config.element_type is ElementType.POINT else config.board_width
    if config.distribution_mode is DistributionMode.BY_COUNT:
        return FixedWidthByCount(
            width=width,
            count=config.element_count,
            max_end_gap=config.max_end_gap,
            locked=config.is_max_end_gap_locked,
        )
    return FixedWidthByGap(
        width=width,
        target_gap=config.target_gap,
        max_end_gap=config.max_end_gap,
        locked=config.is_max_end_gap_locked,
    )
