"""Tests for the drawsvg-backed drawing surface."""

import xml.etree.ElementTree as ET

import pytest

from chart_canvas.render.surface import DrawingSurface, measure_with_font, saver
from chart_canvas.render.svg import SvgSurface, parse_font

SVG_NS = "{http://www.w3.org/2000/svg}"


def _elements(surface, tag):
    root = ET.fromstring(surface.as_svg())
    return root.findall(f".//{SVG_NS}{tag}")


def test_is_a_drawing_surface():
    assert isinstance(SvgSurface(10, 10), DrawingSurface)


def test_empty_surface_is_valid_svg():
    root = ET.fromstring(SvgSurface(200, 100).as_svg())
    assert root.tag == f"{SVG_NS}svg"
    assert float(root.get("width")) == 200
    assert float(root.get("height")) == 100


def test_background():
    surface = SvgSurface(200, 100, background="#2b2b2b")
    (rect,) = _elements(surface, "rect")
    assert rect.get("fill") == "#2b2b2b"


def test_stroke_path():
    surface = SvgSurface(200, 100)
    surface.stroke_style = "red"
    surface.line_width = 2
    surface.line_cap = "square"
    surface.begin_path()
    surface.move_to(0, 0)
    surface.line_to(50, 0)
    surface.move_to(0, 0)
    surface.line_to(0, 40)
    surface.stroke()

    (path,) = _elements(surface, "path")
    assert path.get("stroke") == "red"
    assert float(path.get("stroke-width")) == 2
    assert path.get("stroke-linecap") == "square"
    assert path.get("fill") == "none"
    assert path.get("d").count("M") == 2
    assert path.get("d").count("L") == 2


def test_stroke_without_path_draws_nothing():
    surface = SvgSurface(200, 100)
    surface.begin_path()
    surface.stroke()
    assert surface.elements == []


def test_transform_applied_to_elements():
    surface = SvgSurface(200, 100)
    surface.translate(10, 90)
    surface.scale(1, -1)
    surface.stroke_rect(0, 0, 5, 5)
    (rect,) = _elements(surface, "rect")
    assert rect.get("transform") == "translate(10,90) scale(1,-1)"


def test_save_restore_state():
    surface = SvgSurface(200, 100)
    surface.stroke_style = "red"
    with saver(surface):
        surface.translate(10, 10)
        surface.stroke_style = "blue"
        surface.font = "20px Courier"
        assert surface.transform == "translate(10,10)"
    assert surface.transform == ""
    assert surface.stroke_style == "red"
    assert surface.font == "10px sans-serif"


def test_saver_restores_on_error():
    surface = SvgSurface(200, 100)
    with pytest.raises(RuntimeError):
        with saver(surface):
            surface.translate(5, 5)
            raise RuntimeError("boom")
    assert surface.transform == ""


def test_unbalanced_restore_is_ignored():
    surface = SvgSurface(200, 100)
    surface.stroke_style = "red"
    surface.restore()
    assert surface.stroke_style == "red"


def test_clear_whole_surface_discards_elements():
    surface = SvgSurface(200, 100)
    surface.stroke_rect(0, 0, 10, 10)
    surface.clear_rect(0, 0, 200, 100)
    assert surface.elements == []


def test_partial_clear_paints_background():
    surface = SvgSurface(200, 100, background="black")
    surface.clear_rect(0, 0, 20, 20)
    (bg, cleared) = _elements(surface, "rect")
    assert cleared.get("fill") == "black"
    assert float(cleared.get("width")) == 20


def test_fill_text():
    surface = SvgSurface(200, 100)
    surface.font = "18px Arial"
    surface.fill_style = "green"
    surface.text_align = "center"
    surface.text_baseline = "top"
    surface.fill_text("Hello", 100, 0)

    (text,) = _elements(surface, "text")
    assert text.text == "Hello"
    assert float(text.get("font-size")) == 18
    assert text.get("font-family") == "Arial"
    assert text.get("fill") == "green"
    assert text.get("text-anchor") == "middle"
    assert text.get("dominant-baseline") == "text-before-edge"


def test_fill_empty_text_draws_nothing():
    surface = SvgSurface(200, 100)
    surface.fill_text("", 0, 0)
    assert surface.elements == []


@pytest.mark.parametrize(
    "align, left, right",
    [("left", 0.0, 55.0), ("center", 27.5, 27.5), ("right", 55.0, 0.0)],
)
def test_measure_text_follows_alignment(align, left, right):
    surface = SvgSurface(200, 100)
    surface.font = "20px Arial"
    surface.text_align = align
    metrics = surface.measure_text("abcde")
    assert metrics.width == pytest.approx(55.0)
    assert metrics.left == pytest.approx(left)
    assert metrics.right == pytest.approx(right)
    assert metrics.height == pytest.approx(20.0)


def test_measure_empty_text():
    surface = SvgSurface(200, 100)
    assert surface.measure_text("").width == 0


def test_measure_with_font_leaves_state():
    surface = SvgSurface(200, 100)
    metrics = measure_with_font(surface, "ab", "40px Arial")
    assert metrics.width == pytest.approx(44.0)
    assert surface.font == "10px sans-serif"


def test_parse_font():
    assert parse_font("18px Arial") == (18.0, "Arial")
    assert parse_font("bold 12.5px 'Helvetica Neue', sans-serif") == (12.5, "'Helvetica Neue', sans-serif")
    assert parse_font("garbage") == (10.0, "sans-serif")


def test_save_svg_trailing_newline(tmp_path):
    out = tmp_path / "chart.svg"
    SvgSurface(20, 20).save_svg(out)
    assert out.read_text().endswith("\n")
