"""Drawing constants for the section and isometric views.

Sizes in SVG px.
"""

# Section view
PAD = 80                  # canvas padding on every side
FIT_FRACTION = 0.75       # share of the padded area used by the profile
DIM_OFFSET = 35           # leader line offset from the measured edge
ARROW = 6                 # arrowhead length
DIM_TEXT_GAP = 10         # label distance beyond a horizontal leader
DIM_TEXT_GAP_V = 12       # label distance beside a vertical leader
EDGE_EPS_PX = 0.5         # scaled Tr below this gets no edge annotation
CORNER_MARK = 8           # right-angle marker size, capped at Tr/4

# Isometric view
ISO_EXTENT = 180          # largest of W, L, T+Lh maps to this many px
ISO_ANGLE_DEG = 30        # axis angle from horizontal
ISO_CENTER_DY = 20        # origin shift below canvas centre
ISO_LABEL_GAP = 15        # label offset from the solid

# Colours
DIM_COLOR = "#48E0E4"
EDGE_COLOR = "#f0a040"
PROFILE_FILL = "rgba(120,135,150,0.35)"
PROFILE_STROKE = "#556"
HATCH_STROKE = "rgba(120,135,150,0.6)"
TEXT_COLOR = "#333"

# Isometric face tones: (fill, opacity)
FACE_STYLES = {
    "top":    ("rgba(158,170,185,0.75)", 1.0),
    "side":   ("rgba(100,115,130,0.80)", 1.0),
    "inner":  ("rgba(120,135,150,0.8)", 0.5),
    "bottom": ("rgba(158,170,185,0.75)", 0.4),
    "edge":   ("rgba(180,140,170,0.7)", 1.0),
    "other":  ("rgba(120,135,150,0.8)", 0.6),
}
FRONT_FILL = "rgba(120,135,150,0.8)"
ISO_STROKE = "#556"
