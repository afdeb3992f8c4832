"""Top-edge treatment variants: chamfer and bullnose.

Each variant is one row of EDGE_PROFILES; volume, section and UI text all
read from the same row instead of branching on the variant name.
"""
import math
from enum import Enum
from typing import NamedTuple


class EdgeType(str, Enum):
    CHAMFER = "chamfer"
    BULLNOSE = "bullnose"


class EdgeProfile(NamedTuple):
    """Per-variant geometry coefficient and presentation text."""
    removed_coeff: float   # removed cross-section area / Tr²
    label: str
    hint: str
    formula: str
    description: str
    autofit: bool          # auto-fit radius applies


EDGE_PROFILES: dict[EdgeType, EdgeProfile] = {
    # Right isosceles triangle, both legs Tr
    EdgeType.CHAMFER: EdgeProfile(
        removed_coeff=0.5,
        label="Chamfer Depth (Tᵣ)",
        hint="45° chamfer leg length on top edge (0 = no edge). Must be less than T.",
        formula="V = L × [ W × T + Lw × Lh ] − ½ × Tᵣ² × L",
        description=("The L-shape is decomposed into a flat slab (W × T) plus a vertical"
                     " lip (Lw × Lh), extruded along L. A 45° chamfer removes a"
                     " right-isosceles triangular prism with legs = Tᵣ."),
        autofit=False,
    ),
    # Tr × Tr square minus its quarter circle
    EdgeType.BULLNOSE: EdgeProfile(
        removed_coeff=1 - math.pi / 4,
        label="Radius (Tᵣ)",
        hint="Quarter-circle radius on top edge (0 = no edge). Must be less than T.",
        formula="V = L × [ W × T + Lw × Lh ] − Tᵣ² × (1 − π/4) × L",
        description=("The L-shape is decomposed into a flat slab (W × T) plus a vertical"
                     " lip (Lw × Lh), extruded along L. A bullnose removes a square"
                     " minus a quarter-circle with radius = Tᵣ."),
        autofit=True,
    ),
}


def edge_profile(edge_type: EdgeType | str) -> EdgeProfile:
    """Look up the profile row for an edge type or its string value."""
    return EDGE_PROFILES[EdgeType(edge_type)]


def removed_area(edge_type: EdgeType | str, depth: float) -> float:
    """Cross-section area (mm²) cut away by the edge treatment."""
    return edge_profile(edge_type).removed_coeff * depth * depth
