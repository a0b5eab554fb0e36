"""Tests for the smooth closed curve builder."""

import numpy as np
import pytest
from svgpathtools import CubicBezier, parse_path

from snowchart.engine.constants import MIN_VERTEX_RADIUS
from snowchart.engine.coordinates import Point, compute_vertices
from snowchart.engine.curve import DEFAULT_TENSION, build_curve, build_score_curve, control_points
from snowchart.utils.geometry import radial_distances, signed_area
from tests.conftest import MAX_RADIUS

CENTER = Point(200.0, 200.0)


def _sample_curve():
    vertices = compute_vertices([3, 7, 5, 7, 1], CENTER, MAX_RADIUS)
    return vertices, build_curve(vertices, CENTER)


def test_five_segments_closed_loop():
    vertices, curve = _sample_curve()
    assert len(curve) == 5
    assert curve.is_closed
    assert np.allclose(curve.segments[0, 0], curve.segments[4, 3])
    # Segment i runs from vertex i to vertex i+1
    for i in range(5):
        assert np.allclose(curve.segments[i, 0], vertices[i])
        assert np.allclose(curve.segments[i, 3], vertices[(i + 1) % 5])


def test_tangents_perpendicular_to_radius():
    _, curve = _sample_curve()
    origin = np.array(CENTER)
    for p1, cp1, cp2, p2 in curve.segments:
        assert np.dot(cp1 - p1, p1 - origin) == pytest.approx(0.0, abs=1e-6)
        assert np.dot(cp2 - p2, p2 - origin) == pytest.approx(0.0, abs=1e-6)


def test_control_distance_scales_with_chord():
    p1 = np.array([200.0, 100.0])
    p2 = np.array([295.1, 169.1])
    cp1, cp2 = control_points(p1, p2, CENTER, tension=0.35)
    chord = np.linalg.norm(p2 - p1)
    assert np.linalg.norm(cp1 - p1) == pytest.approx(chord * 0.35)
    assert np.linalg.norm(cp2 - p2) == pytest.approx(chord * 0.35)


def test_outgoing_tangent_is_clockwise():
    # Top vertex: radius points up, +90 degrees points right (toward the next axis).
    p1 = np.array([200.0, 100.0])
    p2 = np.array([295.1, 169.1])
    cp1, _ = control_points(p1, p2, CENTER)
    assert cp1[0] > p1[0]
    assert cp1[1] == pytest.approx(p1[1])


def test_popped_curve_passes_through_scaled_vertices():
    _, curve = _sample_curve()
    popped = build_score_curve([3, 7, 5, 7, 1], CENTER, MAX_RADIUS, scale=1.05)
    base_r = radial_distances(curve.segments[:, 0], CENTER)
    pop_r = radial_distances(popped.segments[:, 0], CENTER)
    assert np.allclose(pop_r, base_r * 1.05)
    assert popped.is_closed


def test_equal_scores_make_near_circle():
    vertices = compute_vertices([7] * 5, CENTER, MAX_RADIUS)
    curve = build_curve(vertices, CENTER, tension=DEFAULT_TENSION)
    dists = radial_distances(curve.sample(24), CENTER)
    assert np.allclose(dists, MAX_RADIUS, rtol=0.02)


def test_curve_runs_clockwise_on_screen():
    _, curve = _sample_curve()
    assert signed_area(curve.sample()) > 0


def test_path_data_parses_as_closed_cubic_chain():
    _, curve = _sample_curve()
    d = curve.to_path_data()
    assert d.startswith("M ")
    assert d.endswith("Z")
    path = parse_path(d)
    cubics = [seg for seg in path if isinstance(seg, CubicBezier)]
    assert len(cubics) == 5
    assert path.isclosed()


def test_bounds_contain_vertices():
    vertices, curve = _sample_curve()
    xmin, ymin, xmax, ymax = curve.bounds
    assert xmin <= vertices[:, 0].min() and xmax >= vertices[:, 0].max()
    assert ymin <= vertices[:, 1].min() and ymax >= vertices[:, 1].max()


def test_popped_zero_score_stays_at_minimum_radius():
    popped = build_score_curve([0, 7, 5, 7, 1], CENTER, MAX_RADIUS, scale=1.05)
    radii = radial_distances(popped.segments[:, 0], CENTER)
    assert radii[0] == pytest.approx(MIN_VERTEX_RADIUS)
    assert radii[1] == pytest.approx(MAX_RADIUS * 1.05)
