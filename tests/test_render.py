"""Tests for SVG rendering."""

import xml.etree.ElementTree as ET

import pytest

from span_layout.layout.engine import compute_layout
from span_layout.parser.model import (
    DEFAULT_CONFIG,
    DistributionMode,
    ElementType,
)
from span_layout.render.svg import render_svg
from span_layout.themes import DARK_THEME, LIGHT_THEME

SVG_NS = "{http://www.w3.org/2000/svg}"


def _render(config=DEFAULT_CONFIG, theme=LIGHT_THEME, **kwargs):
    return render_svg(config, compute_layout(config), theme, **kwargs)


def test_render_produces_valid_svg():
    svg = _render()
    root = ET.fromstring(svg)
    assert root.tag.endswith("svg") or "svg" in root.tag


def test_render_contains_headline_numbers():
    svg = _render()
    assert "10500 mm" in svg
    assert "26 pcs" in svg
    assert "396 mm" in svg
    assert "300 mm" in svg


def test_render_one_circle_per_point():
    root = ET.fromstring(_render())
    circles = list(root.iter(f"{SVG_NS}circle"))
    assert len(circles) == 26


def test_render_boards_as_rectangles():
    config = DEFAULT_CONFIG.replace(element_type=ElementType.BOARD)
    svg = _render(config)
    root = ET.fromstring(svg)
    assert not list(root.iter(f"{SVG_NS}circle"))
    assert "Width: 145" in svg


def test_render_dimensions():
    svg = _render()
    assert "Step: 396" in svg
    assert "Offset: 300" in svg
    assert "Total: 10500 mm" in svg


def test_render_without_dimensions():
    svg = _render(DEFAULT_CONFIG.replace(show_dimensions=False))
    assert "Step:" not in svg
    assert "Offset:" not in svg


def test_render_single_element_has_no_step():
    config = DEFAULT_CONFIG.replace(
        distribution_mode=DistributionMode.BY_COUNT, element_count=1
    )
    svg = _render(config)
    assert "Step:" not in svg
    assert "exceeds max end gap" in svg


def test_render_warnings():
    svg = _render(DEFAULT_CONFIG.replace(distance_value=1000))
    assert "distance too small" in svg


def test_render_marking_sequence():
    svg = _render()
    assert "[platform edge] [300] [696]" in svg
    assert "Marking sequence" in svg


def test_render_russian_labels():
    svg = _render(lang="ru")
    assert "Шаг: 396" in svg
    assert "Край платформы" in svg


def test_render_unknown_language():
    with pytest.raises(ValueError, match="Unsupported language"):
        _render(lang="de")


def test_render_empty_layout():
    config = DEFAULT_CONFIG.replace(
        distribution_mode=DistributionMode.BY_COUNT, element_count=0
    )
    root = ET.fromstring(_render(config))
    assert not list(root.iter(f"{SVG_NS}circle"))


def test_render_themes():
    assert LIGHT_THEME.background_color in _render()
    assert DARK_THEME.background_color in _render(theme=DARK_THEME)


def test_render_custom_width():
    root = ET.fromstring(_render(width=1400))
    assert root.get("width") == "1400"


def test_render_ends_with_newline():
    assert _render().endswith("\n")
