"""Shared types, geometry, formatting, and SVG utilities."""

from .types import Point, LineSeg, ArcSeg, Segment, Label
from .geometry import (
    GeometryError,
    left_norm, off_pt, arc_poly,
    poly_area, signed_area, segment_polyline, path_polygon,
    fmt_mm, fmt_volume,
)
from .svg import make_svg_transform, svg_points, svg_document, W, H
