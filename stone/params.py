"""Parameter set for the L-profile stone and raw form-field parsing."""
import math
import re
from typing import Mapping, NamedTuple

from stone.constants import DEFAULT_QUANTITY
from stone.edges import EdgeType


class ParameterSet(NamedTuple):
    """Stone dimensions in millimetres plus edge treatment and piece count.

    Cross-section coordinates used throughout: x to the right, y up, origin
    at the bottom-left of the slab. The slab spans y in [0, thickness], the
    lip hangs below the right end down to y = -lip_height.
    """
    length: float        # L, extrusion length
    width: float         # W, total slab width
    thickness: float     # T, flat slab thickness
    lip_width: float     # Lw
    lip_height: float    # Lh, lip drop below the slab
    edge_depth: float = 0.0   # Tr, chamfer leg or bullnose radius
    edge_type: EdgeType = EdgeType.CHAMFER
    quantity: int = DEFAULT_QUANTITY

    @property
    def total_height(self) -> float:
        return self.thickness + self.lip_height


# Raw field name -> ParameterSet field
FIELD_NAMES = {
    "length": "length",
    "width": "width",
    "flatThickness": "thickness",
    "lipWidth": "lip_width",
    "lipHeight": "lip_height",
    "chamfer": "edge_depth",
}

_FLOAT_PREFIX = re.compile(r"\s*[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")
_INT_PREFIX = re.compile(r"\s*[+-]?\d+")


def parse_length(raw: str | None) -> float:
    """Leading decimal number of a field value; unusable input reads as 0."""
    if raw is None:
        return 0.0
    m = _FLOAT_PREFIX.match(str(raw))
    if not m:
        return 0.0
    v = float(m.group(0))
    return v if math.isfinite(v) else 0.0


def parse_quantity(raw: str | None) -> int:
    """Leading integer of a field value; unusable or zero input reads as 1."""
    if raw is None:
        return DEFAULT_QUANTITY
    m = _INT_PREFIX.match(str(raw))
    if not m:
        return DEFAULT_QUANTITY
    return int(m.group(0)) or DEFAULT_QUANTITY


def parse_params(fields: Mapping[str, str]) -> ParameterSet:
    """Build a ParameterSet from raw form fields.

    Keys are either the form ids ("flatThickness", "lipWidth", "chamfer", ...)
    or the ParameterSet field names. Missing lengths read as 0, a missing
    quantity as 1, and any edge other than "bullnose" as chamfer.
    """
    values = {}
    for raw_name, name in FIELD_NAMES.items():
        raw = fields.get(raw_name, fields.get(name))
        values[name] = parse_length(raw)
    edge = str(fields.get("edge", fields.get("edge_type", ""))).strip().lower()
    values["edge_type"] = EdgeType.BULLNOSE if edge == EdgeType.BULLNOSE.value else EdgeType.CHAMFER
    values["quantity"] = parse_quantity(fields.get("quantity"))
    return ParameterSet(**values)
