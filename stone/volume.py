"""Closed-form volume of the L-profile stone.

    V = L × (W × T + Lw × Lh) − A_edge(Tr) × L

with A_edge = ½ Tr² for a chamfer and Tr² (1 − π/4) for a bullnose.
Never derived from the display polygon.
"""
from typing import NamedTuple

from stone.edges import removed_area
from stone.params import ParameterSet


class VolumeResult(NamedTuple):
    """Volumes in mm³."""
    base: float          # slab + lip, before the edge cut
    edge_removal: float  # material cut away by the edge treatment
    unit: float          # one piece
    total: float         # unit × quantity


def base_volume(p: ParameterSet) -> float:
    """Slab rectangle plus lip rectangle, extruded along L."""
    return p.length * (p.width * p.thickness + p.lip_width * p.lip_height)


def edge_removal_volume(p: ParameterSet) -> float:
    return removed_area(p.edge_type, p.edge_depth) * p.length


def compute_volume(p: ParameterSet) -> VolumeResult:
    """Volume of one piece and of the batch. Expects a validated ParameterSet."""
    base = base_volume(p)
    removal = edge_removal_volume(p)
    # Floor at zero so roundoff near Tr -> T cannot go negative
    unit = max(0.0, base - removal)
    return VolumeResult(base=base, edge_removal=removal,
                        unit=unit, total=unit * p.quantity)
