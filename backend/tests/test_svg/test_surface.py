"""Tests for the recording SVG surface and serializer."""

import pytest

from snowchart.engine.coordinates import Point
from snowchart.svg.primitives import spokes_path, wedge_path
from snowchart.svg.serializer import serialize_svg
from snowchart.svg.surface import SvgSurface, acquire_surface


def test_saved_restores_on_exception():
    surface = SvgSurface(100, 100)
    with pytest.raises(ValueError):
        with surface.saved():
            surface.set_alpha(0.3)
            surface.clip("M 0,0 L 10,0 L 10,10 Z")
            surface.set_shadow()
            raise ValueError("boom")
    assert surface.depth == 0
    assert surface.state.alpha == 1.0
    assert surface.state.clip_id is None
    assert surface.state.filter_id is None


def test_state_applies_only_inside_scope():
    surface = SvgSurface(100, 100)
    with surface.saved():
        surface.set_alpha(0.5)
        surface.fill_path("M 0,0 L 1,1 Z", "#ff0000")
    surface.fill_path("M 0,0 L 1,1 Z", "#00ff00")
    inside, outside = surface.elements
    assert inside["opacity"] == 0.5
    assert "opacity" not in outside


def test_nested_clips_intersect():
    surface = SvgSurface(100, 100)
    with surface.saved():
        surface.clip("M 0,0 L 50,0 L 50,50 Z")
        with surface.saved():
            surface.clip("M 0,0 L 20,0 L 20,20 Z")
            surface.fill_circle(Point(10, 10), 5, "#fff")
        surface.fill_circle(Point(10, 10), 5, "#fff")
    outer, inner = surface.defs
    assert "clip-path" not in outer
    assert inner["clip-path"] == f"url(#{outer['id']})"
    first, second = surface.elements
    assert first["clip-path"] == f"url(#{inner['id']})"
    assert second["clip-path"] == f"url(#{outer['id']})"


def test_identical_shadows_share_a_filter():
    surface = SvgSurface(100, 100)
    surface.set_shadow("#000000", 0.5, 20)
    surface.set_shadow("#000000", 0.5, 20)
    surface.set_shadow("#000000", 0.7, 20)
    filters = [d for d in surface.defs if d["tag"] == "filter"]
    assert len(filters) == 2
    assert filters[0]["children"][0]["stdDeviation"] == 10.0


def test_alpha_is_clamped():
    surface = SvgSurface(100, 100)
    surface.set_alpha(3.0)
    assert surface.state.alpha == 1.0
    surface.set_alpha(-1.0)
    assert surface.state.alpha == 0.0


def test_acquire_surface_closes_on_exit():
    with acquire_surface(120, 80, 2.0) as surface:
        surface.fill_rect(0, 0, 120, 80, "#000")
        assert not surface.closed
    assert surface.closed
    with pytest.raises(RuntimeError):
        surface.fill_rect(0, 0, 1, 1, "#000")


def test_serializer_writes_defs_children_and_text():
    svg = serialize_svg(
        [{"tag": "text", "x": 1.5, "y": 2.0, "text": "A & B"}],
        canvas_w=50,
        canvas_h=40,
        title="Chart",
        defs=[{"tag": "clipPath", "id": "c", "children": [{"tag": "path", "d": "M 0,0 Z"}]}],
        pixel_w=100,
        pixel_h=80,
    )
    assert 'viewBox="0 0 50 40" width="100" height="80"' in svg
    assert "<title>Chart</title>" in svg
    assert '<clipPath id="c">' in svg
    assert '<path d="M 0,0 Z" />' in svg
    assert '<text x="1.5" y="2">A &amp; B</text>' in svg
    assert svg.rstrip().endswith("</svg>")


def test_wedge_path_small_arc():
    d = wedge_path(Point(0, 0), 10, 0.0, 1.0)
    assert d.startswith("M 0,0 L 10,0 A 10 10 0 0 1 ")
    assert d.endswith(" Z")


def test_spokes_path():
    d = spokes_path(Point(5, 5), [Point(5, 0), Point(10, 5)])
    assert d == "M 5,5 L 5,0 M 5,5 L 10,5"
