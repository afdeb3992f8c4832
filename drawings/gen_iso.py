"""Generate the isometric view of the extruded L-profile.

The cross-section (x right, y up) is extruded along z = 0..L and projected
with a fixed axonometric transform:

    sx = cx + (x - z) · s·cos30°
    sy = cy - y · s + (x + z) · s·sin30°

There is no depth sorting. Lateral faces are shaded by the direction of
their defining cross-section edge, which is only valid for this one fixed
viewing angle: every classified face is front-facing from here. A
configurable camera would need per-face normals and visibility instead.
"""
import logging
import math
from typing import NamedTuple

import numpy as np

from shared.types import Point, Label
from shared.geometry import fmt_mm
from shared.svg import svg_points, svg_document, W, H
from stone.constants import FACE_EPS
from stone.params import ParameterSet
from stone.section import CrossSection
from drawings.constants import (
    ISO_EXTENT, ISO_ANGLE_DEG, ISO_CENTER_DY, ISO_LABEL_GAP,
    FACE_STYLES, FRONT_FILL, ISO_STROKE, EDGE_COLOR, TEXT_COLOR,
)

log = logging.getLogger(__name__)


class IsoFace(NamedTuple):
    """Lateral face (front_i, front_i+1, back_i+1, back_i) with its shading tone."""
    points: list[Point]
    tone: str
    edge_index: int        # i, the cross-section edge i -> i+1


class IsoDrawing(NamedTuple):
    """Everything needed to draw the isometric view."""
    width: float
    height: float
    scale: float           # px per mm along y
    faces: list[IsoFace]
    front_cap: list[Point]
    labels: list[Label]


# ============================================================
# Projection
# ============================================================

def iso_matrix(scale: float) -> np.ndarray:
    """2x3 matrix taking (x, y, z) mm to SVG px offsets from the origin."""
    a = math.radians(ISO_ANGLE_DEG)
    ax, ay = math.cos(a) * scale, math.sin(a) * scale
    return np.array([[ax, 0.0, -ax],
                     [ay, -scale, ay]])


def project(xy: list[Point], z: float, matrix: np.ndarray, origin: Point) -> list[Point]:
    """Project cross-section points lying in the plane at depth z."""
    pts = np.asarray(xy, dtype=float).reshape(-1, 2)
    pts3 = np.column_stack([pts, np.full(len(pts), z)])
    screen = pts3 @ matrix.T + np.asarray(origin)
    return [(float(x), float(y)) for x, y in screen]


def classify_edge(dx: float, dy: float, eps: float = FACE_EPS) -> str:
    """Shading tone for the lateral face swept by a cross-section edge (dx, dy)."""
    if abs(dy) < eps and dx > 0:
        return "top"
    if abs(dx) < eps and dy < 0:
        return "side"
    if abs(dx) < eps and dy > 0:
        return "inner"
    if abs(dy) < eps and dx < 0:
        return "bottom"
    if dx > 0 and dy < 0:
        return "edge"   # chamfer cut or bullnose facet
    return "other"


# ============================================================
# Drawing builder
# ============================================================

def build_iso_drawing(section: CrossSection, p: ParameterSet,
                      width: float = W, height: float = H) -> IsoDrawing | None:
    """Extrude and project the cross-section. None unless W, T and L are positive."""
    if p.width <= 0 or p.thickness <= 0 or p.length <= 0:
        return None

    max_dim = max(p.width, p.length, p.total_height)
    scale = ISO_EXTENT / max_dim
    origin = (width / 2, height / 2 + ISO_CENTER_DY)
    m = iso_matrix(scale)

    poly = section.polygon
    front = project(poly, 0.0, m, origin)
    back = project(poly, p.length, m, origin)

    faces = []
    for i in range(len(poly) - 1):
        dx = poly[i + 1][0] - poly[i][0]
        dy = poly[i + 1][1] - poly[i][1]
        faces.append(IsoFace(points=[front[i], front[i + 1], back[i + 1], back[i]],
                             tone=classify_edge(dx, dy), edge_index=i))

    labels = _iso_labels(p, scale, m, origin)
    log.debug("Iso drawing: scale %.4f px/mm, %d faces", scale, len(faces))
    return IsoDrawing(width=width, height=height, scale=scale,
                      faces=faces, front_cap=front, labels=labels)


def _iso_labels(p: ParameterSet, scale, m, origin) -> list[Label]:
    """Floating dimension labels next to the solid."""
    g = ISO_LABEL_GAP / scale   # label gap in mm

    def at(x, y, z, dx=0.0, dy=0.0):
        sx, sy = project([(x, y)], z, m, origin)[0]
        return (sx + dx, sy + dy)

    W_, T, Lw, Lh, L = p.width, p.thickness, p.lip_width, p.lip_height, p.length
    labels = [
        Label(f"L = {fmt_mm(L)}", at(W_ + g, T, L / 2, dx=15), "start"),
        Label(f"W = {fmt_mm(W_)}", at(W_ / 2, T + g, 0, dy=-10), "middle"),
        Label(f"T = {fmt_mm(T)}", at(-g * 2 / 3, T / 2, 0, dx=-10), "end"),
        Label(f"Lh = {fmt_mm(Lh)}", at(W_ + g * 2 / 3, -Lh / 2, 0, dx=10), "start"),
        Label(f"Lw = {fmt_mm(Lw)}", at(W_ - Lw / 2, -Lh - g * 4 / 5, 0, dy=16), "middle"),
    ]
    if p.edge_depth > 0:
        Tr = p.edge_depth
        labels.append(Label(f"Tᵣ = {fmt_mm(Tr)}",
                            at(W_ - Tr / 2, T - Tr / 2, 0, dx=16, dy=-8), "start"))
    return labels


# ============================================================
# SVG rendering
# ============================================================

def render_iso_svg(data: IsoDrawing) -> str:
    """Render the isometric view. Returns SVG string."""
    out = []
    for face in data.faces:
        fill, opacity = FACE_STYLES[face.tone]
        out.append(f'<polygon points="{svg_points(face.points)}" fill="{fill}"'
                   f' stroke="{ISO_STROKE}" stroke-width="1" opacity="{opacity}"'
                   f' data-tone="{face.tone}"/>')

    # Front cap last so it closes the silhouette
    out.append(f'<polygon points="{svg_points(data.front_cap)}" fill="{FRONT_FILL}"'
               f' stroke="{ISO_STROKE}" stroke-width="1.5"/>')

    for label in data.labels:
        x, y = label.pos
        color = EDGE_COLOR if label.text.startswith("Tᵣ") else TEXT_COLOR
        out.append(f'<text x="{x:.1f}" y="{y:.1f}" text-anchor="{label.anchor}"'
                   f' dominant-baseline="central" font-family="Arial"'
                   f' font-size="12" fill="{color}">{label.text}</text>')
    return svg_document(out, data.width, data.height)
