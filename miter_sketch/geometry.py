"""Planar geometry helpers for the miter sketch.

Everything works on plain ``(x, y)`` tuples in logical units; numpy is used
where a whole outline is produced at once.
"""
from __future__ import annotations

import math
from typing import Tuple

import numpy as np

Point = Tuple[float, float]
EPS = 1e-9


def euclid_len(a: Point, b: Point) -> float:
    """Straight-line distance; also accepts numpy rows."""
    return math.hypot(b[0] - a[0], b[1] - a[1])


def sub(a: Point, b: Point) -> Point:
    return (a[0] - b[0], a[1] - b[1])


def dot(a: Point, b: Point) -> float:
    return a[0] * b[0] + a[1] * b[1]


def direction(a: Point, b: Point) -> float:
    """Heading of the ray a->b in radians."""
    return math.atan2(b[1] - a[1], b[0] - a[0])


def normalize_angle_deg(deg: float) -> float:
    """Fold an angle into the half-open range (-180, 180]."""
    d = math.fmod(deg, 360.0)
    if d > 180.0:
        d -= 360.0
    if d <= -180.0:
        d += 360.0
    return d


def project_point_to_segment(p: Point, a: Point, b: Point) -> Tuple[Point, float]:
    ab = sub(b, a)
    ab2 = dot(ab, ab)
    if ab2 < EPS:
        return a, 0.0
    t = dot(sub(p, a), ab) / ab2
    t = max(0.0, min(1.0, t))
    return (a[0] + ab[0] * t, a[1] + ab[1] * t), t


def point_to_segment_distance(p: Point, a: Point, b: Point) -> float:
    """Distance from ``p`` to the closed segment a-b (degenerate segments act as points)."""
    proj, _ = project_point_to_segment(p, a, b)
    return euclid_len(p, proj)


def point_along(origin: Point, heading: float, length: float) -> Point:
    return (origin[0] + length * math.cos(heading), origin[1] + length * math.sin(heading))


def regular_polygon(center: Point, radius: float, sides: int) -> np.ndarray:
    """Vertices of a regular polygon, first vertex on the +x axis."""
    angle = np.arange(sides) * (2.0 * math.pi / sides)
    cx, cy = float(center[0]), float(center[1])
    return np.column_stack((cx + radius * np.cos(angle), cy + radius * np.sin(angle)))


def rotate_translate(points: np.ndarray, heading: float, origin: Point) -> np.ndarray:
    """Rotate local ``(u, v)`` rows by ``heading`` and move them to ``origin``."""
    c, s = math.cos(heading), math.sin(heading)
    rot = np.array([[c, -s], [s, c]])
    return points @ rot.T + np.asarray(origin, dtype=float)
