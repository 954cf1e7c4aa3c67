# miter_sketch/osnap.py
"""
Snap helpers: grid intersections and existing segment endpoints.

``snap_point`` first tries the nearest grid intersection (one centimetre cell)
and then lets any endpoint that is strictly closer take over. The pick radius
is ``SNAP_DIST / zoom`` so it stays constant on screen.
"""

from __future__ import annotations

from typing import Iterable, Optional, Tuple

from .dimensions import PIXELS_PER_CM, DrawingConfig, round_half_up
from .geometry import Point, euclid_len
from .segments import Segment


def grid_point(p: Point, spacing: float = PIXELS_PER_CM) -> Point:
    return (round_half_up(p[0] / spacing) * spacing, round_half_up(p[1] / spacing) * spacing)


def snap_pick(p: Point, segments: Iterable[Segment], tol: float) -> Tuple[Point, Optional[str]]:
    """
    Return the snapped point and the kind of target it landed on
    (``"grid"``, ``"end"`` or ``None`` when nothing was in range).
    """
    px, py = float(p[0]), float(p[1])
    best_point: Point = (px, py)
    best_dist = float(tol)
    best_kind: Optional[str] = None

    def consider(candidate: Point, kind: str) -> None:
        nonlocal best_point, best_dist, best_kind
        dist = euclid_len((px, py), candidate)
        if dist < best_dist:
            best_point = candidate
            best_dist = dist
            best_kind = kind

    consider(grid_point((px, py)), "grid")
    for seg in segments:
        consider(seg.start, "end")
        consider(seg.end, "end")
    return best_point, best_kind


def snap_point(p: Point, segments: Iterable[Segment], config: DrawingConfig) -> Point:
    if not config.snap_enabled:
        return p
    snapped, _ = snap_pick(p, segments, config.snap_radius)
    return snapped


def touching_segment(p: Point, segments: Iterable[Segment], tol: float) -> Optional[Segment]:
    """First segment with an endpoint within ``tol`` of ``p``."""
    for seg in segments:
        if euclid_len(seg.start, p) < tol or euclid_len(seg.end, p) < tol:
            return seg
    return None

