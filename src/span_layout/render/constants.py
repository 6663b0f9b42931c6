"""Render constants used across render modules.

Centralizes magic numbers from svg.py and ruler.py.
Theme-dependent values remain in style.py.
"""

# ---------------------------------------------------------------------------
# Canvas
# ---------------------------------------------------------------------------
CANVAS_WIDTH: float = 1000.0
"""Default SVG width; every block is laid out in this coordinate space."""

CANVAS_PADDING: float = 20.0
"""Padding around the stacked blocks."""

BLOCK_GAP: float = 16.0
"""Vertical gap between the stats row, warnings, diagram and ruler."""

# ---------------------------------------------------------------------------
# Headline numbers
# ---------------------------------------------------------------------------
STAT_BOX_HEIGHT: float = 64.0
"""Height of one headline number box."""

STAT_BOX_GAP: float = 10.0
"""Horizontal gap between headline number boxes."""

STAT_LABEL_FONT_SIZE: float = 11.0
STAT_VALUE_FONT_SIZE: float = 22.0

# ---------------------------------------------------------------------------
# Warnings
# ---------------------------------------------------------------------------
WARNING_LINE_HEIGHT: float = 20.0
WARNING_PADDING: float = 10.0
WARNING_FONT_SIZE: float = 13.0

# ---------------------------------------------------------------------------
# Main diagram
# ---------------------------------------------------------------------------
DIAGRAM_HEIGHT: float = 500.0
"""Height of the main diagram block."""

DIAGRAM_CENTER_Y: float = 250.0
"""Span axis, relative to the top of the diagram block."""

SIDE_MARGIN: float = 80.0
"""Horizontal space outside each platform."""

PLATFORM_WIDTH: float = 50.0
"""Drawn width of the visible half of each platform."""

PLATFORM_HEIGHT: float = 120.0
ELEMENT_HEIGHT: float = 50.0
POINT_RADIUS: float = 10.0

DIMENSION_Y_STEP: float = 90.0
DIMENSION_Y_OFFSET: float = 165.0
DIMENSION_Y_WIDTH: float = 335.0
DIMENSION_Y_TOTAL: float = 410.0
"""Rows of the step, offset, width and total dimension lines."""

DIMENSION_TICK: float = 10.0
"""Half height of the end ticks on a dimension line."""

DIMENSION_FONT_SIZE: float = 22.0
DIMENSION_LABEL_ABOVE: float = -18.0
DIMENSION_LABEL_BELOW: float = 32.0

# ---------------------------------------------------------------------------
# Construction ruler
# ---------------------------------------------------------------------------
RULER_HEIGHT: float = 140.0
"""Height of the scaled ruler drawing, excluding the marking sequence."""

RULER_MARGIN: float = 50.0
"""Horizontal inset of the ruler's 0 mark."""

RULER_DENSE_MARKS: int = 20
"""Above this many marks, mark labels use the small font."""

RULER_LABEL_FONT_SIZE: float = 10.0
RULER_DENSE_LABEL_FONT_SIZE: float = 8.0
RULER_EDGE_FONT_SIZE: float = 12.0
RULER_LABEL_ANGLE: float = -60.0

SEQUENCE_FONT_SIZE: float = 11.0
SEQUENCE_LINE_HEIGHT: float = 18.0
SEQUENCE_CHAR_WIDTH_RATIO: float = 0.62
"""Character width as a fraction of font size for sequence wrapping."""

# ---------------------------------------------------------------------------
# Localised labels
# ---------------------------------------------------------------------------
LABELS: dict[str, dict[str, str]] = {
    "en": {
        "diagram": "Diagram",
        "step": "Step",
        "offset": "Offset",
        "width": "Width",
        "total": "Total",
        "working_span": "Working span",
        "elements": "Elements",
        "gap": "Between elements",
        "first_offset": "1st offset",
        "ruler": "Marking ruler (mm)",
        "sequence": "Marking sequence",
        "platform_edge": "platform edge",
        "mm": "mm",
        "pcs": "pcs",
    },
    "ru": {
        "diagram": "Схема",
        "step": "Шаг",
        "offset": "Отступ",
        "width": "Ширина",
        "total": "Всего",
        "working_span": "Раб. зона",
        "elements": "Элементов",
        "gap": "Между элементами",
        "first_offset": "1-й отступ",
        "ruler": "Линейка разметки (мм)",
        "sequence": "Последовательность разметки",
        "platform_edge": "Край платформы",
        "mm": "мм",
        "pcs": "шт",
    },
}
"""Display strings by language code."""
