"""Compute the stone volume and write both drawings.

Field values are taken as raw text, the way a form delivers them, so an
empty or malformed value reads as 0 (or 1 for quantity) and is then
reported by the validator.

    python gen_all.py --length 1000 --width 700 --thickness 100 \\
        --lip-width 150 --lip-height 200 --edge-depth 50 --edge bullnose
"""
import argparse
import logging
import os
import sys

from shared.geometry import fmt_mm
from shared.logging_config import setup_logging
from stone.constants import ARC_SEGMENTS
from stone.edges import EdgeType, EDGE_PROFILES, edge_profile
from stone.params import parse_params
from stone.validate import invalid_fields
from stone.autofit import apply_autofit
from recompute import ViewMode, recompute

log = logging.getLogger(__name__)

_OUTPUTS = [
    (ViewMode.CROSS, "section.svg"),
    (ViewMode.ISO, "iso.svg"),
]

# ParameterSet field -> command line flag
FIELD_FLAGS = {
    "length": "--length",
    "width": "--width",
    "thickness": "--thickness",
    "lip_width": "--lip-width",
    "lip_height": "--lip-height",
    "edge_depth": "--edge-depth",
    "quantity": "--quantity",
}


def build_parser() -> argparse.ArgumentParser:
    epilog = "edge depth (Tr):\n" + "\n".join(
        f"  {t.value}: {p.hint}" for t, p in EDGE_PROFILES.items())
    ap = argparse.ArgumentParser(description=__doc__.splitlines()[0], epilog=epilog,
                                 formatter_class=argparse.RawDescriptionHelpFormatter)
    ap.add_argument("--length", default="", help="L, extrusion length (mm)")
    ap.add_argument("--width", default="", help="W, total slab width (mm)")
    ap.add_argument("--thickness", default="", help="T, flat slab thickness (mm)")
    ap.add_argument("--lip-width", default="", help="Lw, lip width (mm)")
    ap.add_argument("--lip-height", default="", help="Lh, lip drop height (mm)")
    ap.add_argument("--edge-depth", default="0", help="Tr, chamfer leg or bullnose radius (mm)")
    ap.add_argument("--edge", choices=[e.value for e in EdgeType],
                    default=EdgeType.CHAMFER.value)
    ap.add_argument("--quantity", default="1")
    ap.add_argument("--autofit", action="store_true",
                    help="bullnose only: set Tr to the radius through the inner lip corner")
    ap.add_argument("--arc-segments", type=int, default=ARC_SEGMENTS,
                    help="bullnose arc subdivisions in the drawings")
    ap.add_argument("--out", default=".", help="output directory for the SVG files")
    ap.add_argument("-v", "--verbose", action="store_true")
    return ap


def _pieces(n: int) -> str:
    return f"{n} pc" if n == 1 else f"{n} pcs"


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    params = parse_params({
        "length": args.length, "width": args.width,
        "flatThickness": args.thickness, "lipWidth": args.lip_width,
        "lipHeight": args.lip_height, "chamfer": args.edge_depth,
        "edge": args.edge, "quantity": args.quantity,
    })
    profile = edge_profile(params.edge_type)
    if args.autofit:
        if not profile.autofit:
            print(f"Auto-fit applies to bullnose only; keeping Tr = {fmt_mm(params.edge_depth)} mm")
        elif params.lip_width > 0 and params.thickness > 0:
            params = apply_autofit(params)
            print(f"Auto-fit Tr = {fmt_mm(params.edge_depth)} mm")

    print(profile.description)
    print(profile.formula)
    print(f"{profile.label} = {fmt_mm(params.edge_depth)} mm")

    # Validation runs once; the isometric view is only built for valid input
    first = recompute(params, _OUTPUTS[0][0], n_arc=args.arc_segments)
    if not first.valid:
        for msg in first.messages:
            print(f"⚠ {msg}")
        flags = [flag for field, flag in FIELD_FLAGS.items()
                 if field in invalid_fields(first.violations)]
        print(f"Check: {' '.join(flags)}")
        print(f"Volume (1 pc): {first.unit_text}")
        print(f"Volume (total): {first.total_text}")
        return 1

    print(f"Volume (1 pc): {first.unit_text}")
    print(f"Volume ({_pieces(params.quantity)}): {first.total_text}")

    results = [first] + [recompute(params, view, n_arc=args.arc_segments)
                         for view, _ in _OUTPUTS[1:]]
    os.makedirs(args.out, exist_ok=True)
    for (_, name), result in zip(_OUTPUTS, results):
        svg = result.svg()
        if svg is None:
            continue
        path = os.path.join(args.out, name)
        with open(path, "w", encoding="utf-8") as f:
            f.write(svg)
        log.info("%s written to %s", result.view.value, path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
