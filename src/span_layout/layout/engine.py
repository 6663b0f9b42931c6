"""Layout engine: places elements between two platforms.

The engine is a pure function of the configuration. It never raises on
nonsensical input; infeasible layouts are reported through the result's
warnings instead.

Algorithm:
1. Convert the measured distance into the working span (edge to edge).
2. Pick the element width (zero for points).
3. Derive the element count from the target gap, unless it is fixed.
4. Resolve the end gap and the inner gap, preferring uniform spacing and
   clamping the end gap to its cap when uniform spacing would exceed it.
5. Collect warnings and emit the leading edge of every element.
"""

from __future__ import annotations

from span_layout.layout.constants import (
    CAP_TOLERANCE,
    CAP_WARNING_TOLERANCE,
    WARNING_DISTANCE_TOO_SMALL,
    WARNING_ELEMENTS_DO_NOT_FIT,
    WARNING_END_GAP_EXCEEDED,
)
from span_layout.layout.measure import (
    center_to_center,
    edge_to_edge,
    format_mm,
    round_half_up,
)
from span_layout.parser.model import (
    Configuration,
    DerivedWidthByCount,
    FixedWidthByGap,
    LayoutResult,
    PlacementStrategy,
    RulerMarkMode,
    placement_strategy,
)


def compute_layout(config: Configuration) -> LayoutResult:
    """Compute element positions and gaps for a configuration."""
    span = edge_to_edge(config)
    strategy = placement_strategy(config)

    warnings: list[str] = []
    if span < 0:
        warnings.append(WARNING_DISTANCE_TOO_SMALL)

    count = _element_count(strategy, span, config.element_count)
    edge_gap, inner_gap = _resolve_gaps(strategy, span, count)

    if edge_gap < 0 or (count > 1 and inner_gap < 0):
        warnings.append(WARNING_ELEMENTS_DO_NOT_FIT)

    if (
        not isinstance(strategy, DerivedWidthByCount)
        and not strategy.locked
        and edge_gap > strategy.max_end_gap + CAP_WARNING_TOLERANCE
    ):
        warnings.append(WARNING_END_GAP_EXCEEDED.format(
            offset=format_mm(edge_gap),
            cap=format_mm(strategy.max_end_gap),
        ))

    # A lone element has no neighbour, so the inner gap never applies
    step = strategy.width + (inner_gap if count > 1 else 0)
    positions = tuple(edge_gap + i * step for i in range(count))

    return LayoutResult(
        edge_to_edge=span,
        center_to_center=center_to_center(config),
        element_count=count,
        actual_gap=inner_gap if count > 1 else edge_gap,
        first_element_offset=edge_gap,
        element_positions=positions,
        warnings=tuple(warnings),
        element_width=strategy.width,
    )


def _element_count(
    strategy: PlacementStrategy,
    span: float,
    given_count: int,
) -> int:
    """Return the number of elements to place.

    Only the by-gap strategy derives a count. It solves the uniform layout
    equation ``span = 2*edge + n*width + (n-1)*gap`` for n, with the end
    gap capped unless the cap is locked. When no derivation is possible
    (empty span, non-positive pitch) the given count is kept.
    """
    if isinstance(strategy, FixedWidthByGap):
        gap = strategy.target_gap
        pitch = gap + strategy.width
        if span > 0 and pitch > 0:
            edge = gap if strategy.locked else min(strategy.max_end_gap, gap)
            n_ideal = (span - 2 * edge + gap) / pitch
            return max(1, round_half_up(n_ideal))
        return max(0, given_count)
    return max(0, strategy.count)


def _resolve_gaps(
    strategy: PlacementStrategy,
    span: float,
    count: int,
) -> tuple[float, float]:
    """Return ``(edge_gap, inner_gap)`` for ``count`` elements in ``span``."""
    if span <= 0 or count <= 0:
        return 0.0, 0.0

    if isinstance(strategy, DerivedWidthByCount):
        # Width was derived so the gap fits exactly
        return strategy.gap, strategy.gap

    width = strategy.width
    cap = strategy.max_end_gap
    uniform = (span - count * width) / (count + 1)
    if strategy.locked or uniform <= cap + CAP_TOLERANCE:
        return uniform, uniform

    if count > 1:
        return cap, (span - 2 * cap - count * width) / (count - 1)
    # Single element: centre it
    return (span - width) / 2, 0.0


def ruler_marks(config: Configuration, result: LayoutResult) -> tuple[float, ...]:
    """Offsets marked on the construction ruler, one per element.

    Leading edges in edge mode, element centres in center mode.
    """
    if config.ruler_mark_mode is RulerMarkMode.CENTER:
        half = result.element_width / 2
        return tuple(pos + half for pos in result.element_positions)
    return result.element_positions


def marking_sequence(
    config: Configuration,
    result: LayoutResult,
    edge_label: str = "platform edge",
) -> list[str]:
    """Marking order from the first platform edge to the second.

    Every mark is measured from the first platform edge (0 mm).
    """
    marks = [format_mm(pos) for pos in ruler_marks(config, result)]
    return [edge_label, *marks, format_mm(result.edge_to_edge), edge_label]
