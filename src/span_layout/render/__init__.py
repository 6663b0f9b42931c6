"""SVG rendering of layout diagrams."""

from span_layout.render.svg import render_svg

__all__ = ["render_svg"]
