"""Section and isometric drawings of the L-profile stone."""

from .gen_section import SectionDrawing, build_section_drawing, render_section_svg
from .gen_iso import IsoDrawing, build_iso_drawing, render_iso_svg
