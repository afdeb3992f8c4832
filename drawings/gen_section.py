"""Generate the dimensioned cross-section drawing of the L-profile.

The profile is scaled uniformly to fit the canvas, centred, and annotated
with W, T, Lw, Lh and (when visible at this scale) the edge depth Tᵣ.
Primitives are built first (build_section_drawing) and rendered to SVG
separately (render_section_svg).
"""
import logging
import math
from typing import NamedTuple

from shared.types import Point, Label
from shared.geometry import left_norm, off_pt, fmt_mm
from shared.svg import make_svg_transform, svg_points, svg_document, W, H
from stone.edges import EdgeType
from stone.params import ParameterSet
from stone.section import CrossSection
from drawings.constants import (
    PAD, FIT_FRACTION, DIM_OFFSET, ARROW, DIM_TEXT_GAP, DIM_TEXT_GAP_V,
    EDGE_EPS_PX, CORNER_MARK,
    DIM_COLOR, EDGE_COLOR, PROFILE_FILL, PROFILE_STROKE, HATCH_STROKE,
)

log = logging.getLogger(__name__)


# ============================================================
# Drawing primitives
# ============================================================

class DimLine(NamedTuple):
    """One dimension: extension lines, offset leader, arrowheads, label."""
    name: str
    ext1: tuple[Point, Point]
    ext2: tuple[Point, Point]
    leader: tuple[Point, Point]
    arrows: tuple[list[Point], list[Point]]
    label: Label


class EdgeMark(NamedTuple):
    """Edge-treatment annotation at the top-outer corner (SVG coords)."""
    edge_type: EdgeType
    start: Point           # E0, tangent point on the top face
    corner: Point          # TK, the removed sharp corner
    end: Point             # E1, tangent point on the side face
    center: Point | None   # bullnose circle centre
    radius: float          # scaled Tr
    marker: list[Point]    # right-angle marker polyline at the corner
    labels: list[Label]


class SectionDrawing(NamedTuple):
    """Everything needed to draw the section view."""
    width: float
    height: float
    scale: float           # px per mm
    outline: list[Point]
    dims: list[DimLine]
    edge: EdgeMark | None


# ============================================================
# Primitive builders
# ============================================================

def dim_line(name: str, text: str, p1: Point, p2: Point, offset: float) -> DimLine:
    """Dimension between SVG points p1 and p2.

    The leader sits *offset* px along the left normal of p1 → p2 (negative
    offsets go right). The label goes on the far side of the leader.
    """
    n = left_norm(p1, p2)
    l1 = off_pt(p1, n, offset)
    l2 = off_pt(p2, n, offset)

    dx, dy = l2[0] - l1[0], l2[1] - l1[1]
    ln = math.hypot(dx, dy)
    ux, uy = dx / ln, dy / ln
    px, py = -uy * ARROW / 2, ux * ARROW / 2
    a1 = [l1,
          (l1[0] + ux * ARROW + px, l1[1] + uy * ARROW + py),
          (l1[0] + ux * ARROW - px, l1[1] + uy * ARROW - py)]
    a2 = [l2,
          (l2[0] - ux * ARROW + px, l2[1] - uy * ARROW + py),
          (l2[0] - ux * ARROW - px, l2[1] - uy * ARROW - py)]

    out_n = n if offset > 0 else (-n[0], -n[1])
    mid = ((l1[0] + l2[0]) / 2, (l1[1] + l2[1]) / 2)
    if abs(out_n[1]) >= abs(out_n[0]):
        label = Label(text, off_pt(mid, out_n, DIM_TEXT_GAP), "middle")
    else:
        anchor = "end" if out_n[0] < 0 else "start"
        label = Label(text, off_pt(mid, out_n, DIM_TEXT_GAP_V), anchor)

    return DimLine(name=name, ext1=(p1, l1), ext2=(p2, l2),
                   leader=(l1, l2), arrows=(a1, a2), label=label)


def edge_mark(section: CrossSection, to_svg, scale: float) -> EdgeMark | None:
    """Chamfer/bullnose annotation, or None when Tᵣ is too small to show."""
    s_tr = section.edge_depth * scale
    if not section.has_edge or s_tr <= EDGE_EPS_PX:
        return None
    pts = section.pts
    cut = section.polygon[section.edge_slice]
    start = to_svg(*cut[0])
    corner = to_svg(*pts["TK"])
    end = to_svg(*cut[-1])
    center = to_svg(*pts["EC"]) if section.edge_type == EdgeType.BULLNOSE else None

    sq = min(CORNER_MARK, s_tr * 0.25)
    marker = [(corner[0] - sq, corner[1]),
              (corner[0] - sq, corner[1] + sq),
              (corner[0], corner[1] + sq)]

    text = f"Tᵣ = {fmt_mm(section.edge_depth)}"
    labels = [
        Label(text, ((start[0] + corner[0]) / 2, start[1] - 8), "middle"),
        Label(text, (end[0] + 10, (corner[1] + end[1]) / 2), "start"),
    ]
    return EdgeMark(edge_type=section.edge_type, start=start, corner=corner,
                    end=end, center=center, radius=s_tr,
                    marker=marker, labels=labels)


def build_section_drawing(section: CrossSection, p: ParameterSet,
                          width: float = W, height: float = H) -> SectionDrawing | None:
    """Scale, centre and dimension the cross-section. None if W or T is not positive."""
    total_h = p.total_height
    if p.width <= 0 or p.thickness <= 0 or total_h <= 0:
        return None

    draw_w = width - PAD * 2
    draw_h = height - PAD * 2
    scale = min(draw_w / p.width, draw_h / total_h) * FIT_FRACTION

    ox = (width - p.width * scale) / 2
    oy = (height - total_h * scale) / 2
    to_svg = make_svg_transform(ox, oy, scale, p.thickness)

    outline = [to_svg(*v) for v in section.polygon]
    pts = section.pts

    # (name, label, p1, p2, offset): W above, T left, Lw below, Lh right
    specs = [
        ("W", f"W = {fmt_mm(p.width)}", pts["TL"], pts["TK"], -DIM_OFFSET),
        ("T", f"T = {fmt_mm(p.thickness)}", pts["TL"], pts["BL"], DIM_OFFSET),
        ("Lw", f"Lw = {fmt_mm(p.lip_width)}", pts["LL"], pts["LR"], DIM_OFFSET),
        ("Lh", f"Lh = {fmt_mm(p.lip_height)}", (p.width, 0.0), pts["LR"], -DIM_OFFSET),
    ]
    dims = []
    for name, text, a, b, off in specs:
        s1, s2 = to_svg(*a), to_svg(*b)
        if math.hypot(s2[0] - s1[0], s2[1] - s1[1]) < 1e-6:
            continue
        dims.append(dim_line(name, text, s1, s2, off))

    edge = edge_mark(section, to_svg, scale)
    log.debug("Section drawing: scale %.4f px/mm, %d dims, edge mark %s",
              scale, len(dims), "yes" if edge else "no")
    return SectionDrawing(width=width, height=height, scale=scale,
                          outline=outline, dims=dims, edge=edge)


# ============================================================
# SVG rendering
# ============================================================

def _svg_label(out, label: Label, color, font_size=12):
    x, y = label.pos
    out.append(f'<text x="{x:.1f}" y="{y:.1f}" text-anchor="{label.anchor}"'
               f' dominant-baseline="central" font-family="Arial"'
               f' font-size="{font_size}" fill="{color}">{label.text}</text>')


def _svg_line(out, a, b, stroke, width, extra=""):
    out.append(f'<line x1="{a[0]:.2f}" y1="{a[1]:.2f}" x2="{b[0]:.2f}" y2="{b[1]:.2f}"'
               f' stroke="{stroke}" stroke-width="{width}"{extra}/>')


def render_dim(out, dim: DimLine):
    """Render one dimension into the SVG output list."""
    _svg_line(out, *dim.ext1, DIM_COLOR, "0.8", ' opacity="0.4"')
    _svg_line(out, *dim.ext2, DIM_COLOR, "0.8", ' opacity="0.4"')
    _svg_line(out, *dim.leader, DIM_COLOR, "1")
    for arrow in dim.arrows:
        out.append(f'<polygon points="{svg_points(arrow)}" fill="{DIM_COLOR}"/>')
    _svg_label(out, dim.label, DIM_COLOR)


def render_edge(out, mark: EdgeMark):
    """Render the chamfer or bullnose annotation."""
    (ax, ay), (bx, by), (cx, cy) = mark.start, mark.corner, mark.end
    if mark.edge_type == EdgeType.BULLNOSE:
        ox, oy = mark.center
        r = mark.radius
        out.append(f'<circle cx="{ox:.2f}" cy="{oy:.2f}" r="{r:.2f}" fill="none"'
                   f' stroke="{EDGE_COLOR}" stroke-width="1.5" stroke-dasharray="4 3"'
                   f' opacity="0.6"/>')
        out.append(f'<circle cx="{ox:.2f}" cy="{oy:.2f}" r="2.5" fill="{EDGE_COLOR}"'
                   f' opacity="0.7"/>')
        out.append(f'<path d="M {ax:.2f} {ay:.2f} A {r:.2f} {r:.2f} 0 0 1 {cx:.2f} {cy:.2f}"'
                   f' fill="none" stroke="{EDGE_COLOR}" stroke-width="2.5"/>')
    else:
        _svg_line(out, mark.start, mark.end, EDGE_COLOR, "2",
                  ' stroke-dasharray="4 3"')

    # Construction legs from the removed corner
    _svg_line(out, mark.start, mark.corner, EDGE_COLOR, "1",
              ' stroke-dasharray="2 2" opacity="0.5"')
    _svg_line(out, mark.corner, mark.end, EDGE_COLOR, "1",
              ' stroke-dasharray="2 2" opacity="0.5"')
    out.append(f'<polyline points="{svg_points(mark.marker)}" fill="none"'
               f' stroke="{EDGE_COLOR}" stroke-width="1" opacity="0.6"/>')
    for label in mark.labels:
        _svg_label(out, label, EDGE_COLOR, font_size=11)


def render_section_svg(data: SectionDrawing) -> str:
    """Render the section view. Returns SVG string."""
    defs = [
        '<pattern id="hatch" width="8" height="8" patternUnits="userSpaceOnUse"'
        ' patternTransform="rotate(45)">'
        f'<line x1="0" y1="0" x2="0" y2="8" stroke="{HATCH_STROKE}" stroke-width="1"/>'
        '</pattern>',
    ]
    out = []
    poly = svg_points(data.outline)
    out.append(f'<polygon points="{poly}" fill="{PROFILE_FILL}"'
               f' stroke="{PROFILE_STROKE}" stroke-width="1.5"/>')
    out.append(f'<polygon points="{poly}" fill="url(#hatch)" stroke="none"/>')
    for dim in data.dims:
        render_dim(out, dim)
    if data.edge is not None:
        render_edge(out, data.edge)
    return svg_document(out, data.width, data.height, defs=defs)
