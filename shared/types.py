"""Shared type definitions: points, profile path segments, text labels."""
from typing import Literal, NamedTuple

Point = tuple[float, float]


class LineSeg(NamedTuple):
    """Straight edge between two named profile points."""
    start: str
    end: str


class ArcSeg(NamedTuple):
    """Circular edge between two named points around a named centre."""
    start: str
    end: str
    center: str
    radius: float
    direction: Literal["CW", "CCW"]
    n_seg: int          # chords used when sampled into a polygon


Segment = LineSeg | ArcSeg


class Label(NamedTuple):
    """Text placed at an SVG position."""
    text: str
    pos: Point
    anchor: str         # SVG text-anchor
