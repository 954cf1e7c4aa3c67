"""Shape construction and hit testing for the board sketch (line / rect / polygon)."""
from __future__ import annotations

import math
from typing import List, Optional, Sequence, Tuple

from .board import board_points, edge_lengths
from .dimensions import DrawingConfig, Side
from .geometry import Point, euclid_len, point_to_segment_distance, regular_polygon
from .miter import MiterResult
from .segments import End, Segment


def _board(p1: Point, p2: Point, config: DrawingConfig, side: Optional[Side] = None) -> Segment:
    return Segment(start=p1, end=p2, thickness=config.thickness, side=side or config.side)


def line_segments(p1: Point, p2: Point, config: DrawingConfig, side: Optional[Side] = None) -> List[Segment]:
    return [_board(p1, p2, config, side)]


def rectangle_segments(p1: Point, p2: Point, config: DrawingConfig, side: Optional[Side] = None) -> List[Segment]:
    """Four boards from the drag corners, each starting where the previous ends."""
    (x1, y1), (x2, y2) = p1, p2
    corners = [(x1, y1), (x2, y1), (x2, y2), (x1, y2)]
    return [_board(corners[i], corners[(i + 1) % 4], config, side) for i in range(4)]


def polygon_segments(
    p1: Point, p2: Point, sides: int, config: DrawingConfig, side: Optional[Side] = None
) -> List[Segment]:
    """Regular polygon inscribed in the circle whose diameter is the drag p1-p2."""
    sides = max(3, int(sides))
    radius = euclid_len(p1, p2) / 2.0
    center = ((p1[0] + p2[0]) / 2.0, (p1[1] + p2[1]) / 2.0)
    pts = [(float(x), float(y)) for x, y in regular_polygon(center, radius, sides)]
    return [_board(pts[i], pts[(i + 1) % sides], config, side) for i in range(sides)]


def outside_inside_lengths(
    seg: Segment, m_start: MiterResult, m_end: MiterResult, config: DrawingConfig
) -> Tuple[float, float]:
    return edge_lengths(board_points(seg, m_start, m_end, config))


def inside_to_centerline(new_inside: Optional[float], outside: float, inside: float) -> Optional[float]:
    """Centerline length that gives the requested inside length; ``None`` rejects the edit."""
    if new_inside is None or not math.isfinite(new_inside) or new_inside <= 0:
        return None
    return new_inside + (outside - inside)


def find_segment_at(point: Point, segments: Sequence[Segment], radius: float) -> Optional[int]:
    for i, seg in enumerate(segments):
        if point_to_segment_distance(point, seg.start, seg.end) < radius:
            return i
    return None


def find_endpoint_at(point: Point, segments: Sequence[Segment], radius: float) -> Optional[Tuple[int, End]]:
    for i, seg in enumerate(segments):
        if euclid_len(point, seg.start) < radius:
            return i, End.START
        if euclid_len(point, seg.end) < radius:
            return i, End.END
    return None
