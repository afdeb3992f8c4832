"""Auto-fit bullnose radius through the inner lip corner.

The bullnose circle is tangent to the top face (y = T) and the outer side
(x = W), so its centre sits at (W - r, T - r). Requiring it to pass through
the inner lip corner (W - Lw, 0):

    (Lw - r)² + (T - r)² = r²
    r² - 2(Lw + T) r + Lw² + T² = 0
    r = Lw + T - √(2 Lw T)          (smaller root; the larger exceeds both)
"""
import logging
import math

from shared.geometry import GeometryError
from stone.params import ParameterSet

log = logging.getLogger(__name__)


def autofit_radius(lip_width: float, thickness: float) -> float:
    """Bullnose radius whose circle passes through the inner lip corner."""
    if not (lip_width > 0 and thickness > 0):
        raise GeometryError(
            f"Auto-fit needs positive Lw and T: Lw={lip_width}, T={thickness}")
    return lip_width + thickness - math.sqrt(2 * lip_width * thickness)


def inner_corner_distance(p: ParameterSet) -> float:
    """Distance from the bullnose centre (W - Tr, T - Tr) to the inner lip corner."""
    cx = p.width - p.edge_depth
    cy = p.thickness - p.edge_depth
    return math.hypot(cx - (p.width - p.lip_width), cy - 0.0)


def apply_autofit(p: ParameterSet, *, rounded: bool = True) -> ParameterSet:
    """Copy of p with edge_depth set to the auto-fit radius (whole mm by default)."""
    r = autofit_radius(p.lip_width, p.thickness)
    if rounded:
        r = float(math.floor(r + 0.5))
    log.debug("Auto-fit radius for Lw=%g T=%g: %g", p.lip_width, p.thickness, r)
    return p._replace(edge_depth=r)
