"""One atomic recompute: validate → volume → cross-section → active view.

Run on every field edit or mode toggle. Nothing is carried over between
calls; an invalid ParameterSet stops the pipeline after validation and the
volumes read as the placeholder dash.
"""
import logging
from enum import Enum
from typing import NamedTuple

from shared.geometry import fmt_volume, PLACEHOLDER
from stone.constants import ARC_SEGMENTS
from stone.params import ParameterSet
from stone.validate import Violation, validate
from stone.volume import VolumeResult, compute_volume
from stone.section import CrossSection, build_cross_section
from drawings.gen_section import SectionDrawing, build_section_drawing, render_section_svg
from drawings.gen_iso import IsoDrawing, build_iso_drawing, render_iso_svg

log = logging.getLogger(__name__)


class ViewMode(str, Enum):
    CROSS = "cross"
    ISO = "iso"


class Recompute(NamedTuple):
    """Result of one pipeline run."""
    params: ParameterSet
    view: ViewMode
    violations: list[Violation]
    volume: VolumeResult | None
    unit_text: str
    total_text: str
    section: CrossSection | None
    drawing: SectionDrawing | IsoDrawing | None

    @property
    def valid(self) -> bool:
        return not self.violations

    @property
    def messages(self) -> list[str]:
        return [v.message for v in self.violations]

    def svg(self) -> str | None:
        """Rendered SVG for the active view, or None when nothing is drawn."""
        if self.drawing is None:
            return None
        if self.view == ViewMode.ISO:
            return render_iso_svg(self.drawing)
        return render_section_svg(self.drawing)


def recompute(params: ParameterSet, view: ViewMode | str = ViewMode.CROSS,
              *, n_arc: int = ARC_SEGMENTS) -> Recompute:
    """Run the full pipeline for the current parameters and view."""
    view = ViewMode(view)
    violations = validate(params)
    if violations:
        return Recompute(params=params, view=view, violations=violations,
                         volume=None, unit_text=PLACEHOLDER, total_text=PLACEHOLDER,
                         section=None, drawing=None)

    volume = compute_volume(params)
    section = build_cross_section(params, n_arc)
    if view == ViewMode.ISO:
        drawing = build_iso_drawing(section, params)
    else:
        drawing = build_section_drawing(section, params)

    log.debug("Recomputed %s view: unit %.1f mm³, total %.1f mm³",
              view.value, volume.unit, volume.total)
    return Recompute(params=params, view=view, violations=[],
                     volume=volume, unit_text=fmt_volume(volume.unit),
                     total_text=fmt_volume(volume.total),
                     section=section, drawing=drawing)
