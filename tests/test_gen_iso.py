"""Tests for drawings/gen_iso.py projection, shading and SVG output."""
import math
import numpy as np
import pytest
from drawings.gen_iso import (
    iso_matrix, project, classify_edge, build_iso_drawing, render_iso_svg,
)


@pytest.fixture(scope="module")
def chamfer_iso(chamfer_section, chamfer_params):
    return build_iso_drawing(chamfer_section, chamfer_params)


@pytest.fixture(scope="module")
def bullnose_iso(bullnose_section, bullnose_params):
    return build_iso_drawing(bullnose_section, bullnose_params)


# --- projection ---

def test_iso_matrix_shape():
    m = iso_matrix(2.0)
    assert m.shape == (2, 3)
    np.testing.assert_allclose(m[:, 1], [0.0, -2.0])


def test_project_origin():
    m = iso_matrix(1.0)
    assert project([(0.0, 0.0)], 0.0, m, (10.0, 20.0)) == [(10.0, 20.0)]


def test_project_axes():
    c, s = math.cos(math.radians(30)), math.sin(math.radians(30))
    m = iso_matrix(2.0)
    (x_pt,) = project([(1.0, 0.0)], 0.0, m, (0.0, 0.0))
    (y_pt,) = project([(0.0, 1.0)], 0.0, m, (0.0, 0.0))
    (z_pt,) = project([(0.0, 0.0)], 1.0, m, (0.0, 0.0))
    assert x_pt == pytest.approx((2 * c, 2 * s))
    assert y_pt == pytest.approx((0.0, -2.0))
    assert z_pt == pytest.approx((-2 * c, 2 * s))


def test_project_returns_floats():
    (pt,) = project([(1, 2)], 3, iso_matrix(1.0), (0, 0))
    assert all(type(v) is float for v in pt)


# --- face classification ---

@pytest.mark.parametrize("dx,dy,tone", [
    (10.0, 0.0, "top"),
    (0.0, -10.0, "side"),
    (0.0, 10.0, "inner"),
    (-10.0, 0.0, "bottom"),
    (5.0, -5.0, "edge"),
    (-5.0, 5.0, "other"),
    (10.0, 0.005, "top"),
])
def test_classify_edge(dx, dy, tone):
    assert classify_edge(dx, dy) == tone


# --- drawing ---

def test_scale_from_largest_dimension(chamfer_iso):
    assert chamfer_iso.scale == pytest.approx(180 / 1000)


def test_face_count(chamfer_iso, bullnose_iso, chamfer_section, bullnose_section):
    assert len(chamfer_iso.faces) == len(chamfer_section.polygon) - 1
    assert len(bullnose_iso.faces) == 17


def test_chamfer_tones(chamfer_iso):
    assert [f.tone for f in chamfer_iso.faces] == [
        "top", "edge", "side", "bottom", "inner", "bottom"]


def test_bullnose_facets_are_edge_tone(bullnose_iso):
    tones = [f.tone for f in bullnose_iso.faces]
    assert tones[0] == "top"
    assert tones[1:13] == ["edge"] * 12
    assert tones[13:] == ["side", "bottom", "inner", "bottom"]


def test_sharp_tones(sharp_section, sharp_params):
    data = build_iso_drawing(sharp_section, sharp_params)
    assert [f.tone for f in data.faces] == ["top", "side", "bottom", "inner", "bottom"]


def test_face_quads_join_front_and_back(chamfer_iso):
    face = chamfer_iso.faces[0]
    assert face.points[0] == chamfer_iso.front_cap[0]
    assert face.points[1] == chamfer_iso.front_cap[1]
    assert face.edge_index == 0


def test_front_cap_origin(chamfer_iso, chamfer_section):
    assert len(chamfer_iso.front_cap) == len(chamfer_section.polygon)
    # BL = (0, 0) lands on the projection origin
    assert chamfer_iso.front_cap[-1] == pytest.approx((350.0, 270.0))


def test_labels(chamfer_iso):
    texts = [l.text for l in chamfer_iso.labels]
    assert texts == ["L = 1000", "W = 700", "T = 100", "Lh = 200",
                     "Lw = 150", "Tᵣ = 50"]


def test_no_edge_label_without_depth(sharp_section, sharp_params):
    data = build_iso_drawing(sharp_section, sharp_params)
    assert not any(l.text.startswith("Tᵣ") for l in data.labels)


@pytest.mark.parametrize("field", ["width", "thickness", "length"])
def test_not_drawn_without_positive_size(chamfer_section, chamfer_params, field):
    assert build_iso_drawing(chamfer_section, chamfer_params._replace(**{field: 0.0})) is None


# --- render ---

def test_render(chamfer_iso):
    svg = render_iso_svg(chamfer_iso)
    assert svg.startswith("<svg") and svg.endswith("</svg>")
    assert svg.count('data-tone="') == 6
    assert 'data-tone="edge"' in svg
    assert "L = 1000" in svg


def test_front_cap_drawn_after_faces(chamfer_iso):
    svg = render_iso_svg(chamfer_iso)
    last_face = svg.rindex("data-tone=")
    assert svg.index('stroke-width="1.5"') > last_face
