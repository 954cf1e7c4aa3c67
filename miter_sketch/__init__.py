"""Board sketch geometry: segments, snapping, joints, miter cuts and board outlines."""
from .board import board_outlines, board_points, edge_lengths, profile_points
from .connectivity import Connection, find_connections, first_connection
from .dimensions import DrawingConfig, MetricSubUnit, Side, UnitSystem
from .miter import JointAngles, MiterResult, calculate_angles, calculate_miter
from .osnap import snap_point
from .segments import End, MiterOverrides, Segment, SegmentStore
from .tools import DrawingSession, Mode

__all__ = [
    "Connection",
    "DrawingConfig",
    "DrawingSession",
    "End",
    "JointAngles",
    "MetricSubUnit",
    "MiterOverrides",
    "MiterResult",
    "Mode",
    "Segment",
    "SegmentStore",
    "Side",
    "UnitSystem",
    "board_outlines",
    "board_points",
    "calculate_angles",
    "calculate_miter",
    "edge_lengths",
    "find_connections",
    "first_connection",
    "profile_points",
    "snap_point",
]
