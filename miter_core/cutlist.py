"""Cut list: per-board lengths and saw settings, plus sketch file I/O."""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Sequence

from miter_sketch.board import board_points, edge_lengths, profile_points
from miter_sketch.dimensions import (
    DrawingConfig,
    format_length,
    length_decimals,
    logical_to_display,
    round_half_up,
    thickness_to_display,
    unit_suffix,
)
from miter_sketch.edit_ops import polygon_segments, rectangle_segments
from miter_sketch.miter import calculate_angles
from miter_sketch.segments import Segment

logger = logging.getLogger(__name__)


@dataclass
class BoardReport:
    """One row of the cut list.

    Board width is drawn at its physical size (12 mm is 24 logical units, the
    same 1.2 cm scale as the centerlines). Older sketches drew 1 mm as one
    logical unit, so their inside lengths come out longer than these.
    """

    number: int
    thickness: float            # display units
    outside: float              # display units
    inside: float
    start_cut: float
    end_cut: float
    start_label: str
    end_label: str
    units: str
    profile: List[List[float]]

    def asdict(self) -> Dict[str, Any]:
        return {
            "number": self.number,
            "thickness": self.thickness,
            "outside": self.outside,
            "inside": self.inside,
            "start_cut": self.start_cut,
            "end_cut": self.end_cut,
            "start_label": self.start_label,
            "end_label": self.end_label,
            "units": self.units,
            "profile": self.profile,
        }


def build_cut_list(segments: Sequence[Segment], config: DrawingConfig) -> List[BoardReport]:
    segments = list(segments)
    decimals = length_decimals(config)
    reports: List[BoardReport] = []
    for i, seg in enumerate(segments):
        angles = calculate_angles(segments, i, config)
        outside, inside = edge_lengths(board_points(seg, angles.start, angles.end, config))
        profile = profile_points(seg, angles.start, angles.end, config)
        reports.append(
            BoardReport(
                number=i + 1,
                thickness=round_half_up(thickness_to_display(seg.thickness_or(config.thickness), config), 2),
                outside=round_half_up(logical_to_display(outside, config), decimals),
                inside=round_half_up(logical_to_display(inside, config), decimals),
                start_cut=angles.start.saw_angle,
                end_cut=angles.end.saw_angle,
                start_label=angles.start.label,
                end_label=angles.end.label,
                units=unit_suffix(config),
                profile=profile.round(3).tolist(),
            )
        )
    logger.debug("Built cut list for %d boards", len(reports))
    return reports


def format_cut_list(reports: Sequence[BoardReport]) -> str:
    header = f"{'#':>3}  {'THICK':>7}  {'OUTSIDE':>9}  {'INSIDE':>9}  {'START':>7}  {'END':>7}"
    lines = [header, "-" * len(header)]
    for r in reports:
        lines.append(
            f"{r.number:>3}  {r.thickness:>7g}  {r.outside:>9g}  {r.inside:>9g}  {r.start_label:>7}  {r.end_label:>7}"
        )
    if reports:
        lines.append(f"lengths in {reports[0].units}")
    return "\n".join(lines)


def total_length(segments: Sequence[Segment], config: DrawingConfig) -> str:
    """Sum of outside lengths, formatted in display units."""
    segments = list(segments)
    total = 0.0
    for i, seg in enumerate(segments):
        angles = calculate_angles(segments, i, config)
        total += edge_lengths(board_points(seg, angles.start, angles.end, config))[0]
    return f"{format_length(total, config)} {unit_suffix(config)}"


# ---- Sketch files ----------------------------------------------------------

def segments_from_json(data: Any) -> List[Segment]:
    if isinstance(data, dict):
        data = data.get("segments", [])
    if not isinstance(data, list):
        raise ValueError("Sketch must be a list of segments or an object with a 'segments' list.")
    out: List[Segment] = []
    for item in data:
        if not isinstance(item, dict):
            raise ValueError("Each segment must be a JSON object.")
        try:
            out.append(Segment.from_dict(item))
        except (KeyError, TypeError, IndexError) as exc:
            raise ValueError(f"Malformed segment {item!r}") from exc
    return out


def load_sketch(path: Path) -> List[Segment]:
    with path.open("r", encoding="utf-8") as handle:
        data = json.load(handle)
    return segments_from_json(data)


def dump_sketch(path: Path, segments: Sequence[Segment]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as handle:
        json.dump({"segments": [s.to_dict() for s in segments]}, handle, indent=2)


def canonical_frames(config: DrawingConfig) -> Dict[str, List[Segment]]:
    """Named demo sketches used by the CLI and docs."""
    return {
        "picture_frame": rectangle_segments((0.0, 0.0), (400.0, 300.0), config),
        "hexagon": polygon_segments((0.0, 0.0), (400.0, 0.0), 6, config),
        "octagon": polygon_segments((0.0, 0.0), (400.0, 0.0), 8, config),
        "mixed_thickness": [
            Segment(start=(0.0, 0.0), end=(200.0, 0.0), thickness=config.thickness * 2.0),
            Segment(start=(200.0, 0.0), end=(200.0, 200.0), thickness=config.thickness),
        ],
    }
