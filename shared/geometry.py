"""Plane geometry for profile paths, polygon measures, and value formatting."""
import math
from .types import Point, LineSeg, Segment

# ============================================================
# Errors
# ============================================================
class GeometryError(ValueError):
    """A geometric construction has no solution for the given inputs."""

# ============================================================
# Vectors
# ============================================================
def left_norm(p1: Point, p2: Point) -> Point:
    """Unit vector 90° counter-clockwise from the direction p1 → p2."""
    dx, dy = p2[0] - p1[0], p2[1] - p1[1]
    ln = math.hypot(dx, dy)
    if ln < 1e-12:
        raise GeometryError(f"Zero-length direction: {p1} -> {p2}")
    return (-dy / ln, dx / ln)

def off_pt(p: Point, n: Point, d: float) -> Point:
    """p moved d along n."""
    return (p[0] + n[0] * d, p[1] + n[1] * d)

# ============================================================
# Arcs and polygons
# ============================================================
def arc_poly(cx: float, cy: float, r: float, sa: float, ea: float, n: int = 12) -> list[Point]:
    """n chords (n + 1 points) on the circle (cx, cy, r) from angle sa to ea."""
    pts = []
    for i in range(n + 1):
        a = sa + (ea - sa) * i / n
        pts.append((cx + r * math.cos(a), cy + r * math.sin(a)))
    return pts

def signed_area(verts: list[Point]) -> float:
    """Shoelace area, positive when the vertices run counter-clockwise (y up)."""
    total = 0.0
    for (x0, y0), (x1, y1) in zip(verts, verts[1:] + verts[:1]):
        total += x0 * y1 - x1 * y0
    return total / 2

def poly_area(verts: list[Point]) -> float:
    """Unsigned polygon area."""
    return abs(signed_area(verts))

# ============================================================
# Segment paths
# ============================================================
def segment_polyline(seg: Segment, pts: dict[str, Point]) -> list[Point]:
    """Sample one path segment; an arc yields n_seg + 1 points."""
    a, b = pts[seg.start], pts[seg.end]
    if isinstance(seg, LineSeg):
        return [a, b]
    cx, cy = pts[seg.center]
    start = math.atan2(a[1] - cy, a[0] - cx)
    stop = math.atan2(b[1] - cy, b[0] - cx)
    turn = 2 * math.pi
    if seg.direction == "CW":
        stop = start - (start - stop) % turn
    else:
        stop = start + (stop - start) % turn
    poly = arc_poly(cx, cy, seg.radius, start, stop, seg.n_seg)
    # Tangent points are exact so the neighbouring edges stay axis-aligned
    poly[0], poly[-1] = a, b
    return poly

def path_polygon(segments: list[Segment], pts: dict[str, Point]) -> list[Point]:
    """Vertices of a closed segment path, each shared endpoint listed once."""
    polygon = []
    for seg in segments:
        polygon.extend(segment_polyline(seg, pts)[1:])
    # The last endpoint is the first start point, now at the end
    polygon.insert(0, polygon.pop())
    return polygon

# ============================================================
# Formatting
# ============================================================
MM3_PER_M3 = 1e9
SCI_THRESHOLD_M3 = 1e-4
PLACEHOLDER = "—"

def fmt_mm(v: float) -> str:
    """Millimetre value as entered, without a trailing ".0", e.g. '700', '1234.5678'."""
    s = repr(float(v))
    return s[:-2] if s.endswith(".0") else s

def fmt_volume(mm3: float) -> str:
    """Volume in mm³ as a m³ string, e.g. '0.098750 m³'.

    Exact zero renders as a dash; tiny volumes switch to scientific notation.
    """
    m3 = mm3 / MM3_PER_M3
    if m3 == 0:
        return PLACEHOLDER
    if m3 < SCI_THRESHOLD_M3:
        return f"{m3:.4e} m³"
    return f"{m3:.6f} m³"
