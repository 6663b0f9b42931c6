"""Dark theme for on-screen viewing."""

from span_layout.render.style import Theme

DARK_THEME = Theme(
    name="dark",
    background_color="#1e293b",
    font_family="'Helvetica Neue', Helvetica, Arial, sans-serif",
    text_color="#e2e8f0",
    muted_text_color="#64748b",
    platform_fill="#334155",
    platform_stroke="#94a3b8",
    platform_stroke_width=3.0,
    axis_color="#334155",
    span_line_color="#cbd5e1",
    element_fill="#f87171",
    element_stroke="#1e293b",
    step_color="#f87171",
    offset_color="#60a5fa",
    width_color="#a78bfa",
    total_color="#e2e8f0",
    dimension_halo="#1e293b",
    stat_fill="#0f172a",
    stat_stroke="#334155",
    stat_highlight_color="#60a5fa",
    warning_fill="rgba(251, 191, 36, 0.12)",
    warning_stroke="#b45309",
    warning_text_color="#fbbf24",
    ruler_line_color="#475569",
    ruler_edge_color="#60a5fa",
    ruler_mark_color="#f87171",
)
