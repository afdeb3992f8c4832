"""L-profile stone model: parameters, validation, volume, cross-section, auto-fit."""

from .edges import EdgeType, EdgeProfile, EDGE_PROFILES, edge_profile, removed_area
from .params import ParameterSet, parse_params
from .validate import Violation, validate, invalid_fields
from .volume import VolumeResult, compute_volume, base_volume, edge_removal_volume
from .section import CrossSection, build_cross_section
from .autofit import autofit_radius, apply_autofit, inner_corner_distance
