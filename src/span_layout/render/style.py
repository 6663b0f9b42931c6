"""Theme and style constants for layout rendering."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Theme:
    """Visual theme for a layout drawing."""

    name: str
    background_color: str
    font_family: str
    text_color: str
    muted_text_color: str
    # Platforms and span
    platform_fill: str
    platform_stroke: str
    platform_stroke_width: float
    axis_color: str
    span_line_color: str
    # Elements
    element_fill: str
    element_stroke: str
    # Dimension lines
    step_color: str
    offset_color: str
    width_color: str
    total_color: str
    dimension_halo: str
    # Headline numbers
    stat_fill: str
    stat_stroke: str
    stat_highlight_color: str
    # Warnings
    warning_fill: str
    warning_stroke: str
    warning_text_color: str
    # Ruler
    ruler_line_color: str = "#e2e8f0"
    ruler_edge_color: str = "#2563eb"
    ruler_mark_color: str = "#ef4444"
    ruler_stroke_width: float = 2.0
