"""Construction ruler: scaled marks plus the marking sequence."""

from __future__ import annotations

import drawsvg as draw

from span_layout.layout.engine import marking_sequence, ruler_marks
from span_layout.layout.measure import format_mm
from span_layout.parser.model import Configuration, LayoutResult
from span_layout.render.constants import (
    LABELS,
    RULER_DENSE_LABEL_FONT_SIZE,
    RULER_DENSE_MARKS,
    RULER_EDGE_FONT_SIZE,
    RULER_HEIGHT,
    RULER_LABEL_ANGLE,
    RULER_LABEL_FONT_SIZE,
    RULER_MARGIN,
    SEQUENCE_CHAR_WIDTH_RATIO,
    SEQUENCE_FONT_SIZE,
    SEQUENCE_LINE_HEIGHT,
)
from span_layout.render.style import Theme


def _wrap_sequence(items: list[str], width: float) -> list[str]:
    """Break bracketed sequence items into lines that fit ``width``."""
    max_chars = max(1, int(width / (SEQUENCE_FONT_SIZE * SEQUENCE_CHAR_WIDTH_RATIO)))
    lines: list[str] = []
    current = ""
    for item in items:
        token = f"[{item}]"
        candidate = f"{current} {token}" if current else token
        if current and len(candidate) > max_chars:
            lines.append(current)
            current = token
        else:
            current = candidate
    if current:
        lines.append(current)
    return lines


def compute_ruler_height(
    config: Configuration,
    result: LayoutResult,
    width: float,
    lang: str = "en",
) -> float:
    """Height of the ruler block without rendering it."""
    labels = LABELS[lang]
    sequence = marking_sequence(config, result, labels["platform_edge"])
    lines = _wrap_sequence(sequence, width)
    # Heading line plus one line per wrapped row
    return RULER_HEIGHT + SEQUENCE_LINE_HEIGHT * (len(lines) + 1)


def render_ruler(
    drawing: draw.Drawing,
    config: Configuration,
    result: LayoutResult,
    theme: Theme,
    x: float,
    y: float,
    width: float,
    lang: str = "en",
) -> None:
    """Render the construction ruler at (x, y), drawing downward.

    Mark labels are measured from the first platform edge (0 mm) and the
    ruler is scaled so the working span fills ``width``.
    """
    labels = LABELS[lang]
    span = result.edge_to_edge
    usable = width - RULER_MARGIN * 2
    left = x + RULER_MARGIN
    right = left + usable
    base_y = y + RULER_HEIGHT - 40

    def to_x(pos: float) -> float:
        ratio = pos / span if span > 0 else 0
        return left + ratio * usable

    drawing.append(draw.Text(
        labels["ruler"],
        RULER_LABEL_FONT_SIZE,
        x, y + 12,
        fill=theme.muted_text_color,
        font_family=theme.font_family,
        font_weight="bold",
    ))

    drawing.append(draw.Line(
        left, base_y, right, base_y,
        stroke=theme.ruler_line_color,
        stroke_width=theme.ruler_stroke_width,
    ))

    # Platform edges
    for edge_x, text in ((left, "0"), (right, format_mm(span))):
        drawing.append(draw.Line(
            edge_x, base_y - 20, edge_x, base_y,
            stroke=theme.ruler_edge_color,
            stroke_width=theme.ruler_stroke_width,
        ))
        drawing.append(draw.Text(
            text,
            RULER_EDGE_FONT_SIZE,
            edge_x, base_y + 20,
            fill=theme.ruler_edge_color,
            font_family=theme.font_family,
            font_weight="bold",
            text_anchor="middle",
        ))

    marks = ruler_marks(config, result)
    font_size = (
        RULER_DENSE_LABEL_FONT_SIZE if len(marks) > RULER_DENSE_MARKS
        else RULER_LABEL_FONT_SIZE
    )
    label_y = base_y - 45
    for pos in marks:
        mark_x = to_x(pos)
        drawing.append(draw.Line(
            mark_x, base_y - 35, mark_x, base_y,
            stroke=theme.ruler_mark_color,
            stroke_width=1.5,
        ))
        drawing.append(draw.Text(
            format_mm(pos),
            font_size,
            mark_x, label_y,
            fill=theme.text_color,
            font_family=theme.font_family,
            font_weight="bold",
            transform=f"rotate({RULER_LABEL_ANGLE}, {mark_x}, {label_y})",
        ))

    # Marking sequence below the drawing
    sequence = marking_sequence(config, result, labels["platform_edge"])
    text_y = y + RULER_HEIGHT + SEQUENCE_LINE_HEIGHT
    drawing.append(draw.Text(
        f"{labels['sequence']}:",
        SEQUENCE_FONT_SIZE,
        x, text_y,
        fill=theme.muted_text_color,
        font_family=theme.font_family,
        font_weight="bold",
    ))
    for line in _wrap_sequence(sequence, width):
        text_y += SEQUENCE_LINE_HEIGHT
        drawing.append(draw.Text(
            line,
            SEQUENCE_FONT_SIZE,
            x, text_y,
            fill=theme.text_color,
            font_family=theme.font_family,
            font_weight="bold",
        ))
