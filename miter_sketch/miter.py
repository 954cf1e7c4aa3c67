"""Miter saw settings for every board end.

For one end of one board the neighbour sharing that point (if any) fixes the
angle ``theta`` between the two boards, each measured pointing away from the
joint. With thicknesses ``t_self`` and ``t_other`` the cut line runs at

    miter = atan2(t_self * sin(theta), t_other + t_self * cos(theta))

to the board axis, which is ``theta / 2`` for equal boards. The saw is set to
``|90 - miter|`` degrees. A manual override replaces the saw setting for that
end only and the cut line is back-derived from it so the outline stays
consistent with the number shown.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

from .connectivity import first_connection
from .dimensions import LABEL_PUSH_DIST, DrawingConfig, format_angle, round_angle
from .geometry import Point, direction, normalize_angle_deg
from .segments import End, Segment

SQUARE = 90.0


@dataclass(frozen=True)
class MiterResult:
    label: str
    saw_angle: float            # degrees, rounded to the drawing precision
    bisect_rel: float           # signed cut-line angle in degrees, drives the outline shear
    label_direction: float      # radians, where the readout sits relative to the joint


@dataclass(frozen=True)
class JointAngles:
    start: MiterResult
    end: MiterResult

    def get(self, end: End) -> MiterResult:
        return self.start if End(end) is End.START else self.end


def miter_angle(theta: float, t_self: float, t_other: float) -> float:
    """Cut-line angle in radians for boards meeting at ``theta`` radians."""
    return math.atan2(t_self * math.sin(theta), t_other + t_self * math.cos(theta))


def saw_setting(miter_rad: float) -> float:
    return abs(SQUARE - math.degrees(miter_rad))


def open_end(seg: Segment, end: End, config: DrawingConfig) -> MiterResult:
    heading = seg.heading if End(end) is End.START else seg.heading + math.pi
    return MiterResult(
        label=format_angle(SQUARE, config.precision),
        saw_angle=SQUARE,
        bisect_rel=0.0,
        label_direction=heading + math.pi / 2,
    )


def calculate_miter(segments: Sequence[Segment], index: int, end: End, config: DrawingConfig) -> MiterResult:
    end = End(end)
    seg = segments[index]
    joint = seg.point(end)
    conn = first_connection(joint, segments, exclude=index)
    if conn is None:
        return open_end(seg, end, config)

    other = conn.segment
    a1 = direction(joint, seg.other(end))
    if conn.end is End.START:
        a2 = direction(other.start, other.end)
    else:
        a2 = direction(other.end, other.start)

    diff = normalize_angle_deg(math.degrees(a2 - a1))
    theta = math.radians(abs(diff))
    t_self = seg.thickness_or(config.thickness)
    t_other = other.thickness_or(config.thickness)

    miter_rad = miter_angle(theta, t_self, t_other)
    saw = saw_setting(miter_rad)

    override = seg.overrides.get(end)
    if override is not None:
        saw = float(override)
        miter_rad = math.radians(SQUARE - saw)

    saw = round_angle(saw, config.precision)
    miter_deg = math.degrees(miter_rad)
    return MiterResult(
        label=format_angle(saw, config.precision),
        saw_angle=saw,
        bisect_rel=miter_deg if diff > 0 else -miter_deg,
        label_direction=a1 + math.radians(diff / 2.0) + math.pi,
    )


def calculate_angles(segments: Sequence[Segment], index: int, config: DrawingConfig) -> JointAngles:
    return JointAngles(
        start=calculate_miter(segments, index, End.START, config),
        end=calculate_miter(segments, index, End.END, config),
    )


def label_anchor(joint: Point, result: MiterResult, zoom: float = 1.0) -> Point:
    push = LABEL_PUSH_DIST / zoom
    return (
        joint[0] + push * math.cos(result.label_direction),
        joint[1] + push * math.sin(result.label_direction),
    )


def can_stand(saw_angle: float) -> bool:
    """Steep cuts can be made with the board standing on edge against the fence."""
    return saw_angle > 45.0


def blade_display(saw_angle: float, standing: bool) -> float:
    return SQUARE - saw_angle if standing else saw_angle
