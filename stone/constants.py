"""Modeling constants for the L-profile stone.

All lengths in millimetres unless noted.
"""

ARC_SEGMENTS = 12          # bullnose quarter-circle subdivisions (display only)
FACE_EPS = 0.01            # mm, |dx| or |dy| below this counts as zero
DEFAULT_QUANTITY = 1       # pieces, used when the quantity field is unusable
