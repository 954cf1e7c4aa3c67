"""Board outlines reconstructed from a centerline and its two miter cuts."""
from __future__ import annotations

import math
from typing import Sequence, Tuple

import numpy as np

from .dimensions import DrawingConfig, Side, thickness_to_logical
from .geometry import Point, euclid_len, rotate_translate
from .miter import JointAngles, MiterResult, calculate_angles
from .segments import Segment

SHEAR_EPS = 1e-6
PROFILE_LENGTH = 70.0
PROFILE_CENTER: Point = (50.0, 0.0)


def edge_band(width: float, side: Side) -> Tuple[float, float]:
    """Offsets (reference edge, far edge) of the material from the centerline."""
    if Side(side) is Side.NEAR:
        return 0.0, width
    return -width, 0.0


def shear(offset: float, miter: MiterResult) -> float:
    """Along-axis shift of the cut face at ``offset`` from the centerline."""
    rad = math.radians(miter.bisect_rel)
    if abs(math.sin(rad)) < SHEAR_EPS:
        return 0.0
    return offset / math.tan(rad)


def local_outline(
    length: float, width: float, side: Side, m_start: MiterResult, m_end: MiterResult
) -> np.ndarray:
    """Four corners in (along-axis, across-axis) space, start end first."""
    y0, y1 = edge_band(width, side)
    return np.array(
        [
            (shear(y0, m_start), y0),
            (length + shear(y0, m_end), y0),
            (length + shear(y1, m_end), y1),
            (shear(y1, m_start), y1),
        ],
        dtype=float,
    )


def board_points(
    seg: Segment, m_start: MiterResult, m_end: MiterResult, config: DrawingConfig
) -> np.ndarray:
    """World-space quadrilateral for ``seg``."""
    width = thickness_to_logical(seg.thickness_or(config.thickness))
    pts = local_outline(seg.length, width, seg.side, m_start, m_end)
    return rotate_translate(pts, seg.heading, seg.start)


def profile_points(
    seg: Segment,
    m_start: MiterResult,
    m_end: MiterResult,
    config: DrawingConfig,
    length: float = PROFILE_LENGTH,
    center: Point = PROFILE_CENTER,
) -> np.ndarray:
    """Outline of the board laid flat on a fixed reference line, for a cut-list thumbnail."""
    width = thickness_to_logical(seg.thickness_or(config.thickness))
    pts = local_outline(length, width, seg.side, m_start, m_end)
    y0, y1 = edge_band(width, seg.side)
    mid_x = (pts[:, 0].min() + pts[:, 0].max()) / 2.0
    return pts - np.array([mid_x - center[0], (y0 + y1) / 2.0 - center[1]])


def edge_lengths(points: np.ndarray) -> Tuple[float, float]:
    """(outside, inside) lengths of the two long edges of a board outline."""
    first = euclid_len(points[0], points[1])
    second = euclid_len(points[3], points[2])
    return max(first, second), min(first, second)


def board_outlines(segments: Sequence[Segment], config: DrawingConfig) -> list[np.ndarray]:
    """Outline of every board; recomputed from scratch each call."""
    out = []
    for i, seg in enumerate(segments):
        angles: JointAngles = calculate_angles(segments, i, config)
        out.append(board_points(seg, angles.start, angles.end, config))
    return out
