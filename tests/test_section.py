"""Tests for stone/section.py cross-section boundary."""
import math
import pytest
from shared.geometry import poly_area, signed_area
from stone.edges import EdgeType, removed_area
from stone.section import build_cross_section, build_segments, profile_points


def _tail(p):
    """Expected last four vertices: LR, LL, LI, BL."""
    return [(p.width, -p.lip_height),
            (p.width - p.lip_width, -p.lip_height),
            (p.width - p.lip_width, 0.0),
            (0.0, 0.0)]


class TestVertexCounts:
    def test_sharp_has_six(self, sharp_section):
        assert len(sharp_section.polygon) == 6

    def test_chamfer_has_seven(self, chamfer_section):
        assert len(chamfer_section.polygon) == 7

    def test_bullnose_has_six_plus_arc(self, bullnose_section):
        assert len(bullnose_section.polygon) == 18

    @pytest.mark.parametrize("n_arc", [1, 4, 30])
    def test_bullnose_arc_resolution(self, bullnose_params, n_arc):
        s = build_cross_section(bullnose_params, n_arc=n_arc)
        assert len(s.polygon) == 6 + n_arc

    def test_zero_depth_bullnose_is_sharp(self, sharp_params):
        s = build_cross_section(sharp_params._replace(edge_type=EdgeType.BULLNOSE))
        assert len(s.polygon) == 6

    def test_tiny_depth_keeps_edge_topology(self, chamfer_params):
        """Any Tr > 0 builds the edge, however small."""
        s = build_cross_section(chamfer_params._replace(edge_depth=1e-6))
        assert len(s.polygon) == 7

    def test_bad_arc_count_raises(self, bullnose_params):
        with pytest.raises(ValueError):
            build_cross_section(bullnose_params, n_arc=0)


class TestOrdering:
    @pytest.mark.parametrize("name", ["sharp_section", "chamfer_section", "bullnose_section"])
    def test_starts_top_left_ends_with_lip(self, request, name):
        s = request.getfixturevalue(name)
        p_name = name.replace("_section", "_params")
        p = request.getfixturevalue(p_name)
        assert s.polygon[0] == (0.0, p.thickness)
        assert s.polygon[-4:] == _tail(p)

    @pytest.mark.parametrize("name", ["sharp_section", "chamfer_section", "bullnose_section"])
    def test_clockwise(self, request, name):
        s = request.getfixturevalue(name)
        assert signed_area(s.polygon) < 0

    def test_chamfer_points(self, chamfer_section):
        assert chamfer_section.polygon[1] == (650.0, 100.0)
        assert chamfer_section.polygon[2] == (700.0, 50.0)

    def test_bullnose_arc_on_circle(self, bullnose_section):
        cx, cy = bullnose_section.pts["EC"]
        arc = bullnose_section.polygon[bullnose_section.edge_slice]
        assert arc[0] == (650.0, 100.0)
        assert arc[-1] == (700.0, 50.0)
        for x, y in arc:
            assert math.hypot(x - cx, y - cy) == pytest.approx(50.0)
            # Arc stays in the corner square, bulging outward
            assert x >= 650.0 - 1e-9 and y >= 50.0 - 1e-9


class TestEdgeSlice:
    def test_sharp(self, sharp_section):
        assert sharp_section.polygon[sharp_section.edge_slice] == [(700.0, 100.0)]
        assert not sharp_section.has_edge

    def test_chamfer(self, chamfer_section):
        assert len(chamfer_section.polygon[chamfer_section.edge_slice]) == 2

    def test_bullnose(self, bullnose_section):
        assert len(bullnose_section.polygon[bullnose_section.edge_slice]) == 13


class TestArea:
    def test_sharp_area_exact(self, sharp_section):
        assert poly_area(sharp_section.polygon) == pytest.approx(100_000.0)

    def test_chamfer_area_exact(self, chamfer_section):
        assert poly_area(chamfer_section.polygon) == pytest.approx(100_000.0 - 1250.0)

    def test_bullnose_area_close_to_closed_form(self, bullnose_section):
        exact = 100_000.0 - removed_area(EdgeType.BULLNOSE, 50.0)
        # Chords cut inside the arc, so the polygon is slightly smaller
        area = poly_area(bullnose_section.polygon)
        assert area < exact
        assert area == pytest.approx(exact, abs=10.0)


def test_profile_points_named(chamfer_params):
    pts = profile_points(chamfer_params)
    assert pts["TK"] == (700.0, 100.0)
    assert pts["EC"] == (650.0, 50.0)
    assert pts["LI"] == (550.0, 0.0)


def test_build_segments_closed(bullnose_params):
    segs = build_segments(bullnose_params)
    assert segs[0].start == "TL"
    assert segs[-1].end == "TL"
    for a, b in zip(segs, segs[1:]):
        assert a.end == b.start
