"""SVG generation for span layouts using drawsvg."""

from __future__ import annotations

import drawsvg as draw

from span_layout.layout.measure import format_mm
from span_layout.parser.model import Configuration, ElementType, LayoutResult
from span_layout.render.constants import (
    BLOCK_GAP,
    CANVAS_PADDING,
    CANVAS_WIDTH,
    DIAGRAM_CENTER_Y,
    DIAGRAM_HEIGHT,
    DIMENSION_FONT_SIZE,
    DIMENSION_LABEL_ABOVE,
    DIMENSION_LABEL_BELOW,
    DIMENSION_TICK,
    DIMENSION_Y_OFFSET,
    DIMENSION_Y_STEP,
    DIMENSION_Y_TOTAL,
    DIMENSION_Y_WIDTH,
    ELEMENT_HEIGHT,
    LABELS,
    PLATFORM_HEIGHT,
    PLATFORM_WIDTH,
    POINT_RADIUS,
    SIDE_MARGIN,
    STAT_BOX_GAP,
    STAT_BOX_HEIGHT,
    STAT_LABEL_FONT_SIZE,
    STAT_VALUE_FONT_SIZE,
    WARNING_FONT_SIZE,
    WARNING_LINE_HEIGHT,
    WARNING_PADDING,
)
from span_layout.render.ruler import compute_ruler_height, render_ruler
from span_layout.render.style import Theme


def render_svg(
    config: Configuration,
    result: LayoutResult,
    theme: Theme,
    lang: str = "en",
    width: int | None = None,
) -> str:
    """Render a layout to an SVG string.

    Blocks are stacked top to bottom: headline numbers, warnings (if
    any), the main diagram and the construction ruler.
    """
    if lang not in LABELS:
        raise ValueError(f"Unsupported language {lang!r}; expected one of {sorted(LABELS)}")

    svg_width = width or int(CANVAS_WIDTH)
    inner_width = svg_width - CANVAS_PADDING * 2

    warnings_height = _warnings_height(result)
    ruler_height = compute_ruler_height(config, result, inner_width, lang)

    stats_y = CANVAS_PADDING
    warnings_y = stats_y + STAT_BOX_HEIGHT + BLOCK_GAP
    diagram_y = warnings_y + (warnings_height + BLOCK_GAP if warnings_height else 0)
    ruler_y = diagram_y + DIAGRAM_HEIGHT + BLOCK_GAP
    svg_height = int(ruler_y + ruler_height + CANVAS_PADDING)

    d = draw.Drawing(svg_width, svg_height)

    # Background
    d.append(draw.Rectangle(0, 0, svg_width, svg_height, fill=theme.background_color))

    _render_stats(d, result, theme, CANVAS_PADDING, stats_y, inner_width, lang)
    if warnings_height:
        _render_warnings(d, result, theme, CANVAS_PADDING, warnings_y, inner_width)
    _render_diagram(d, config, result, theme, CANVAS_PADDING, diagram_y, inner_width, lang)
    render_ruler(d, config, result, theme, CANVAS_PADDING, ruler_y, inner_width, lang)

    svg = d.as_svg()
    if not svg.endswith("\n"):
        svg += "\n"
    return svg


def _warnings_height(result: LayoutResult) -> float:
    if not result.warnings:
        return 0.0
    return WARNING_PADDING * 2 + WARNING_LINE_HEIGHT * len(result.warnings)


def _render_stats(
    d: draw.Drawing,
    result: LayoutResult,
    theme: Theme,
    x: float,
    y: float,
    width: float,
    lang: str,
) -> None:
    """Render the four headline numbers as a row of boxes."""
    labels = LABELS[lang]
    stats = [
        (labels["working_span"], format_mm(result.edge_to_edge), labels["mm"], False),
        (labels["elements"], str(result.element_count), labels["pcs"], False),
        (labels["gap"], format_mm(result.actual_gap), labels["mm"], True),
        (labels["first_offset"], format_mm(result.first_element_offset), labels["mm"], False),
    ]
    box_w = (width - STAT_BOX_GAP * (len(stats) - 1)) / len(stats)

    for i, (label, value, unit, highlight) in enumerate(stats):
        bx = x + i * (box_w + STAT_BOX_GAP)
        cx = bx + box_w / 2
        d.append(draw.Rectangle(
            bx, y, box_w, STAT_BOX_HEIGHT,
            rx=8, ry=8,
            fill=theme.stat_fill,
            stroke=theme.stat_highlight_color if highlight else theme.stat_stroke,
            stroke_width=2.0 if highlight else 1.0,
        ))
        d.append(draw.Text(
            label.upper(),
            STAT_LABEL_FONT_SIZE,
            cx, y + 20,
            fill=theme.muted_text_color,
            font_family=theme.font_family,
            font_weight="bold",
            text_anchor="middle",
        ))
        d.append(draw.Text(
            f"{value} {unit}",
            STAT_VALUE_FONT_SIZE,
            cx, y + 48,
            fill=theme.stat_highlight_color if highlight else theme.text_color,
            font_family=theme.font_family,
            font_weight="bold",
            text_anchor="middle",
        ))


def _render_warnings(
    d: draw.Drawing,
    result: LayoutResult,
    theme: Theme,
    x: float,
    y: float,
    width: float,
) -> None:
    d.append(draw.Rectangle(
        x, y, width, _warnings_height(result),
        rx=8, ry=8,
        fill=theme.warning_fill,
        stroke=theme.warning_stroke,
        stroke_width=1.0,
    ))
    for i, warning in enumerate(result.warnings):
        d.append(draw.Text(
            warning,
            WARNING_FONT_SIZE,
            x + WARNING_PADDING,
            y + WARNING_PADDING + (i + 0.5) * WARNING_LINE_HEIGHT,
            fill=theme.warning_text_color,
            font_family=theme.font_family,
            font_weight="bold",
            dominant_baseline="central",
        ))


def _render_diagram(
    d: draw.Drawing,
    config: Configuration,
    result: LayoutResult,
    theme: Theme,
    x: float,
    y: float,
    width: float,
    lang: str,
) -> None:
    """Render platforms, the working span, elements and dimension lines."""
    labels = LABELS[lang]
    center_y = y + DIAGRAM_CENTER_Y
    start_x = x + SIDE_MARGIN + PLATFORM_WIDTH
    end_x = x + width - SIDE_MARGIN - PLATFORM_WIDTH
    usable = end_x - start_x
    span = result.edge_to_edge
    scale = usable / span if span > 0 else 1

    d.append(draw.Text(
        f"{labels['diagram']} ({labels['mm']})",
        STAT_LABEL_FONT_SIZE,
        x, y + 12,
        fill=theme.muted_text_color,
        font_family=theme.font_family,
        font_weight="bold",
    ))

    # Base axis
    d.append(draw.Line(
        x, center_y, x + width, center_y,
        stroke=theme.axis_color,
        stroke_width=1,
        stroke_dasharray="10,5",
    ))

    _render_platform(d, start_x, center_y, theme, left=True)
    _render_platform(d, end_x, center_y, theme, left=False)

    # Working span
    d.append(draw.Line(
        start_x, center_y, end_x, center_y,
        stroke=theme.span_line_color,
        stroke_width=1,
        stroke_dasharray="8,4",
    ))

    _render_elements(d, config, result, theme, start_x, center_y, scale)

    if config.show_dimensions:
        _render_dimensions(d, result, theme, start_x, end_x, y, scale, labels)


def _render_platform(
    d: draw.Drawing,
    edge_x: float,
    center_y: float,
    theme: Theme,
    left: bool,
) -> None:
    """Render the visible half of a round platform whose inner edge is at edge_x."""
    half_h = PLATFORM_HEIGHT / 2
    outer_x = edge_x - PLATFORM_WIDTH if left else edge_x + PLATFORM_WIDTH
    sweep = 0 if left else 1

    path = draw.Path(
        fill=theme.platform_fill,
        stroke=theme.platform_stroke,
        stroke_width=theme.platform_stroke_width,
    )
    path.M(outer_x, center_y - half_h)
    path.L(outer_x, center_y + half_h)
    path.A(PLATFORM_WIDTH, half_h, 0, 0, sweep, edge_x, center_y)
    path.A(PLATFORM_WIDTH, half_h, 0, 0, sweep, outer_x, center_y - half_h)
    path.Z()
    d.append(path)


def _render_elements(
    d: draw.Drawing,
    config: Configuration,
    result: LayoutResult,
    theme: Theme,
    start_x: float,
    center_y: float,
    scale: float,
) -> None:
    """Render points as circles and boards as rectangles."""
    for pos in result.element_positions:
        ex = start_x + pos * scale
        if config.element_type is ElementType.POINT:
            d.append(draw.Circle(
                ex, center_y, POINT_RADIUS,
                fill=theme.element_fill,
                stroke=theme.element_stroke,
                stroke_width=3,
            ))
        else:
            d.append(draw.Rectangle(
                ex, center_y - ELEMENT_HEIGHT / 2,
                max(result.element_width * scale, 0), ELEMENT_HEIGHT,
                rx=3,
                fill=theme.element_fill,
                stroke=theme.element_stroke,
                stroke_width=2,
            ))


def _render_dimensions(
    d: draw.Drawing,
    result: LayoutResult,
    theme: Theme,
    start_x: float,
    end_x: float,
    y: float,
    scale: float,
    labels: dict[str, str],
) -> None:
    width = result.element_width
    offset = result.first_element_offset
    placed = len(result.element_positions)

    if placed > 1:
        step_start = start_x + (offset + width) * scale
        _render_dimension(
            d, step_start, step_start + result.actual_gap * scale,
            y + DIMENSION_Y_STEP,
            f"{labels['step']}: {format_mm(result.actual_gap)}",
            theme.step_color, theme,
        )

    _render_dimension(
        d, start_x, start_x + offset * scale,
        y + DIMENSION_Y_OFFSET,
        f"{labels['offset']}: {format_mm(offset)}",
        theme.offset_color, theme,
    )

    if width > 0 and placed > 0:
        _render_dimension(
            d, start_x + offset * scale, start_x + (offset + width) * scale,
            y + DIMENSION_Y_WIDTH,
            f"{labels['width']}: {format_mm(width)}",
            theme.width_color, theme, below=True,
        )

    _render_dimension(
        d, start_x, end_x,
        y + DIMENSION_Y_TOTAL,
        f"{labels['total']}: {format_mm(result.edge_to_edge)} {labels['mm']}",
        theme.total_color, theme, below=True,
    )


def _render_dimension(
    d: draw.Drawing,
    x1: float,
    x2: float,
    y: float,
    label: str,
    color: str,
    theme: Theme,
    below: bool = False,
) -> None:
    """Render a dimension line with end ticks and a centred label."""
    group = draw.Group(stroke=color, stroke_width=2)
    group.append(draw.Line(x1, y, x2, y))
    group.append(draw.Line(x1, y - DIMENSION_TICK, x1, y + DIMENSION_TICK))
    group.append(draw.Line(x2, y - DIMENSION_TICK, x2, y + DIMENSION_TICK))
    d.append(group)

    d.append(draw.Text(
        label,
        DIMENSION_FONT_SIZE,
        (x1 + x2) / 2,
        y + (DIMENSION_LABEL_BELOW if below else DIMENSION_LABEL_ABOVE),
        fill=color,
        font_family=theme.font_family,
        text_anchor="middle",
        paint_order="stroke",
        stroke=theme.dimension_halo,
        stroke_width=4,
    ))
