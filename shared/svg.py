"""SVG transform factory, canvas constants, and element formatting."""
from typing import Callable
from .types import Point

# Drawing canvas in CSS px
W, H = 700, 500


def make_svg_transform(ox: float, oy: float, scale: float,
                       top: float) -> Callable[[float, float], tuple[float, float]]:
    """Create to_svg closure mapping profile (x right, y up) mm to SVG px.

    (0, top) lands on SVG point (ox, oy); SVG y grows downward.
    """
    def to_svg(x: float, y: float) -> tuple[float, float]:
        return (ox + x * scale, oy + (top - y) * scale)
    return to_svg


def svg_points(poly: list[Point]) -> str:
    """Format a point list for a points="" attribute."""
    return " ".join(f"{x:.2f},{y:.2f}" for x, y in poly)


def svg_document(body: list[str], width: float = W, height: float = H,
                 defs: list[str] | None = None) -> str:
    """Wrap body elements in an SVG envelope with a white background."""
    out = [f'<svg xmlns="http://www.w3.org/2000/svg" width="{width}" height="{height}"'
           f' viewBox="0 0 {width} {height}">']
    if defs:
        out.append('<defs>')
        out.extend(f'  {d}' for d in defs)
        out.append('</defs>')
    out.append(f'<rect x="0" y="0" width="{width}" height="{height}" fill="white"/>')
    out.extend(body)
    out.append('</svg>')
    return "\n".join(out)
