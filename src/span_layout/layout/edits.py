"""Configuration reducer.

Every user action is an immutable edit value. ``apply_edit`` turns the
current configuration and one edit into the next configuration, applying
the side effects that couple fields together:

- any edit leaves a calculated element width consistent with the span,
  the target gap and the count;
- entering a count switches to by-count distribution;
- typing a max end gap unlocks it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Union

from span_layout.layout.engine import compute_layout
from span_layout.layout.measure import with_derived_width
from span_layout.parser.model import (
    Configuration,
    DistanceMode,
    DistributionMode,
    ElementType,
    RulerMarkMode,
)


@dataclass(frozen=True)
class SetDiameter:
    value: float


@dataclass(frozen=True)
class SetDistanceMode:
    mode: DistanceMode


@dataclass(frozen=True)
class SetDistanceValue:
    value: float


@dataclass(frozen=True)
class SetElementType:
    element_type: ElementType


@dataclass(frozen=True)
class SetBoardWidth:
    """Set the board width. Overridden while the width is calculated."""

    value: float


@dataclass(frozen=True)
class SetDistributionMode:
    mode: DistributionMode


@dataclass(frozen=True)
class SetTargetGap:
    value: float


@dataclass(frozen=True)
class SetElementCount:
    """Fix the element count (switches to by-count distribution)."""

    value: int


@dataclass(frozen=True)
class AdjustElementCount:
    """Add ``delta`` to the count currently shown by the solver."""

    delta: int


@dataclass(frozen=True)
class SetMaxEndGap:
    """Set the end gap cap. Typing a cap re-enables it."""

    value: float


@dataclass(frozen=True)
class SetMaxEndGapLocked:
    locked: bool


@dataclass(frozen=True)
class SetRulerMarkMode:
    mode: RulerMarkMode


@dataclass(frozen=True)
class SetShowDimensions:
    show: bool


Edit = Union[
    SetDiameter,
    SetDistanceMode,
    SetDistanceValue,
    SetElementType,
    SetBoardWidth,
    SetDistributionMode,
    SetTargetGap,
    SetElementCount,
    AdjustElementCount,
    SetMaxEndGap,
    SetMaxEndGapLocked,
    SetRulerMarkMode,
    SetShowDimensions,
]


def apply_edit(config: Configuration, edit: Edit) -> Configuration:
    """Return the configuration that results from applying ``edit``."""
    return with_derived_width(_apply(config, edit))


def apply_edits(config: Configuration, edits: Iterable[Edit]) -> Configuration:
    """Apply a sequence of edits in order."""
    for edit in edits:
        config = apply_edit(config, edit)
    return config


def _apply(config: Configuration, edit: Edit) -> Configuration:
    if isinstance(edit, SetDiameter):
        return config.replace(diameter=edit.value)
    if isinstance(edit, SetDistanceMode):
        return config.replace(distance_mode=edit.mode)
    if isinstance(edit, SetDistanceValue):
        return config.replace(distance_value=edit.value)
    if isinstance(edit, SetElementType):
        return config.replace(element_type=edit.element_type)
    if isinstance(edit, SetBoardWidth):
        return config.replace(board_width=edit.value)
    if isinstance(edit, SetDistributionMode):
        return config.replace(distribution_mode=edit.mode)
    if isinstance(edit, SetTargetGap):
        return config.replace(target_gap=edit.value)
    if isinstance(edit, SetElementCount):
        return config.replace(
            distribution_mode=DistributionMode.BY_COUNT,
            element_count=max(0, edit.value),
        )
    if isinstance(edit, AdjustElementCount):
        # Relative to what the user sees, which in by-gap mode is derived
        shown = compute_layout(config).element_count
        return config.replace(
            distribution_mode=DistributionMode.BY_COUNT,
            element_count=max(0, shown + edit.delta),
        )
    if isinstance(edit, SetMaxEndGap):
        return config.replace(max_end_gap=edit.value, is_max_end_gap_locked=False)
    if isinstance(edit, SetMaxEndGapLocked):
        return config.replace(is_max_end_gap_locked=edit.locked)
    if isinstance(edit, SetRulerMarkMode):
        return config.replace(ruler_mark_mode=edit.mode)
    if isinstance(edit, SetShowDimensions):
        return config.replace(show_dimensions=edit.show)
    raise ValueError(f"Unknown edit: {edit!r}")
