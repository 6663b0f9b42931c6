"""Light theme (white sheet, slate lines)."""

from span_layout.render.style import Theme

LIGHT_THEME = Theme(
    name="light",
    background_color="#ffffff",
    font_family="'Helvetica Neue', Helvetica, Arial, sans-serif",
    text_color="#0f172a",
    muted_text_color="#94a3b8",
    platform_fill="#f8fafc",
    platform_stroke="#94a3b8",
    platform_stroke_width=3.0,
    axis_color="#f1f5f9",
    span_line_color="#0f172a",
    element_fill="#ef4444",
    element_stroke="#ffffff",
    step_color="#dc2626",
    offset_color="#2563eb",
    width_color="#7c3aed",
    total_color="#0f172a",
    dimension_halo="#ffffff",
    stat_fill="#ffffff",
    stat_stroke="#e2e8f0",
    stat_highlight_color="#2563eb",
    warning_fill="#fffbeb",
    warning_stroke="#fde68a",
    warning_text_color="#92400e",
)
