"""Cross-section boundary of the L-profile for display.

Traversal is clockwise (y up), starting at the top-left slab corner:

    TL ───────────── E0 ╮             (E0..E1: chamfer or bullnose,
    │                    E1            or a single sharp corner TK)
    │                    │
    BL ──────── LI       │
                │        │
                LL ───── LR

Vertex 0 is always TL and the last four vertices are always LR, LL, LI, BL,
whatever the edge treatment.
"""
import logging
from typing import NamedTuple

from shared.types import Point, LineSeg, ArcSeg, Segment
from shared.geometry import path_polygon, poly_area
from stone.constants import ARC_SEGMENTS
from stone.edges import EdgeType
from stone.params import ParameterSet

log = logging.getLogger(__name__)


class CrossSection(NamedTuple):
    """Named profile points, the closed segment path, and its polygon."""
    pts: dict[str, Point]
    segs: list[Segment]
    polygon: list[Point]
    edge_type: EdgeType
    edge_depth: float
    n_arc: int

    @property
    def has_edge(self) -> bool:
        return self.edge_depth > 0

    @property
    def edge_slice(self) -> slice:
        """Polygon indices of the top-edge vertices (E0..E1, or TK alone)."""
        if not self.has_edge:
            return slice(1, 2)
        if self.edge_type == EdgeType.BULLNOSE:
            return slice(1, 2 + self.n_arc)
        return slice(1, 3)


def profile_points(p: ParameterSet) -> dict[str, Point]:
    """Named points of the L-profile (sharp corner TK and edge points E0/E1/EC)."""
    W, T, Lw, Lh, Tr = p.width, p.thickness, p.lip_width, p.lip_height, p.edge_depth
    return {
        "TL": (0.0, T),
        "TK": (W, T),            # uncut sharp corner
        "E0": (W - Tr, T),       # edge start on the top face
        "E1": (W, T - Tr),       # edge end on the outer side face
        "EC": (W - Tr, T - Tr),  # bullnose circle centre
        "LR": (W, -Lh),
        "LL": (W - Lw, -Lh),
        "LI": (W - Lw, 0.0),     # inner lip corner
        "BL": (0.0, 0.0),
    }


def build_segments(p: ParameterSet, n_arc: int = ARC_SEGMENTS) -> list[Segment]:
    """Closed clockwise segment path for the profile's edge treatment."""
    if p.edge_depth > 0:
        if p.edge_type == EdgeType.BULLNOSE:
            top = [LineSeg("TL", "E0"),
                   ArcSeg("E0", "E1", "EC", p.edge_depth, "CW", n_arc)]
        else:
            top = [LineSeg("TL", "E0"), LineSeg("E0", "E1")]
        corner = "E1"
    else:
        top = [LineSeg("TL", "TK")]
        corner = "TK"
    return top + [
        LineSeg(corner, "LR"),
        LineSeg("LR", "LL"),
        LineSeg("LL", "LI"),
        LineSeg("LI", "BL"),
        LineSeg("BL", "TL"),
    ]


def build_cross_section(p: ParameterSet, n_arc: int = ARC_SEGMENTS) -> CrossSection:
    """Build the display boundary for a validated ParameterSet.

    Topology depends only on edge_depth > 0: 6 vertices sharp, 7 chamfered,
    6 + n_arc bullnosed.
    """
    if n_arc < 1:
        raise ValueError(f"n_arc must be at least 1, got {n_arc}")
    pts = profile_points(p)
    segs = build_segments(p, n_arc)
    polygon = path_polygon(segs, pts)
    log.debug("Cross-section %s Tr=%g: %d vertices, %.1f mm²",
              EdgeType(p.edge_type).value, p.edge_depth, len(polygon), poly_area(polygon))
    return CrossSection(pts=pts, segs=segs, polygon=polygon,
                        edge_type=EdgeType(p.edge_type), edge_depth=p.edge_depth,
                        n_arc=n_arc)
