"""Invariant checks over a ParameterSet.

Every check runs independently so the caller can report all problems at
once. Invalid input is an expected outcome, reported as a list rather
than raised.
"""
import logging
from typing import NamedTuple

from stone.params import ParameterSet

log = logging.getLogger(__name__)


class Violation(NamedTuple):
    field: str
    message: str


# (field, label) for the strictly-positive dimensions, in report order
_POSITIVE = [
    ("length", "Length (L)"),
    ("width", "Total Width (W)"),
    ("thickness", "Flat Thickness (T)"),
    ("lip_width", "Lip Width (Lw)"),
    ("lip_height", "Lip Drop Height (Lh)"),
]


def validate(p: ParameterSet) -> list[Violation]:
    """Return every invariant violation; an empty list means valid."""
    errors = []

    # `not v > 0` also rejects NaN
    for field, label in _POSITIVE:
        if not getattr(p, field) > 0:
            errors.append(Violation(field, f"{label} must be greater than 0."))
    if not p.edge_depth >= 0:
        errors.append(Violation("edge_depth", "Tᵣ cannot be negative."))
    if not p.quantity >= 1:
        errors.append(Violation("quantity", "Quantity must be at least 1."))

    # Relationship constraints, only once both sides are meaningful
    if p.edge_depth > 0 and p.thickness > 0 and p.edge_depth >= p.thickness:
        errors.append(Violation("edge_depth",
                                "Tᵣ must be less than Flat Thickness (T)."))
    if p.lip_width > 0 and p.width > 0 and p.lip_width >= p.width:
        errors.append(Violation("lip_width",
                                "Lip Width (Lw) must be less than Total Width (W)."))

    if errors:
        log.warning("Rejected parameters: %s", "; ".join(e.message for e in errors))
    return errors


def invalid_fields(violations: list[Violation]) -> set[str]:
    """Field names implicated by a violation list."""
    return {v.field for v in violations}
