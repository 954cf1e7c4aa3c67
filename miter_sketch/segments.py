"""In-memory segment store with bounded snapshot history."""
from __future__ import annotations

import json
import logging
import math
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional
from uuid import uuid4

from .dimensions import HISTORY_LIMIT, Side
from .geometry import Point, direction, euclid_len, point_along

logger = logging.getLogger(__name__)


class End(str, Enum):
    START = "start"
    END = "end"


@dataclass(frozen=True)
class MiterOverrides:
    start: Optional[float] = None
    end: Optional[float] = None

    def get(self, end: End) -> Optional[float]:
        return self.start if End(end) is End.START else self.end

    def with_value(self, end: End, value: Optional[float]) -> "MiterOverrides":
        if End(end) is End.START:
            return replace(self, start=value)
        return replace(self, end=value)


@dataclass
class Segment:
    """One board centerline."""

    start: Point
    end: Point
    thickness: Optional[float] = None       # mm; ``None`` falls back to the drawing default
    side: Side = Side.NEAR
    overrides: MiterOverrides = field(default_factory=MiterOverrides)
    id: str = field(default_factory=lambda: str(uuid4()))

    def __post_init__(self) -> None:
        self.start = (float(self.start[0]), float(self.start[1]))
        self.end = (float(self.end[0]), float(self.end[1]))
        self.side = Side(self.side)

    @property
    def length(self) -> float:
        return euclid_len(self.start, self.end)

    @property
    def heading(self) -> float:
        return direction(self.start, self.end)

    def point(self, end: End) -> Point:
        return self.start if End(end) is End.START else self.end

    def other(self, end: End) -> Point:
        return self.end if End(end) is End.START else self.start

    def thickness_or(self, default: float) -> float:
        # Unset and zero thickness both fall back.
        return self.thickness if self.thickness else default

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "start": list(self.start),
            "end": list(self.end),
            "thickness": self.thickness,
            "side": self.side.value,
            "overrides": {"start": self.overrides.start, "end": self.overrides.end},
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Segment":
        if "start" in data:
            start, end = tuple(data["start"]), tuple(data["end"])
        else:
            start, end = (data["x1"], data["y1"]), (data["x2"], data["y2"])
        raw_overrides = data.get("overrides") or {}
        kwargs: Dict[str, Any] = {}
        if data.get("id"):
            kwargs["id"] = str(data["id"])
        thickness = data.get("thickness")
        return cls(
            start=start,
            end=end,
            thickness=float(thickness) if thickness is not None else None,
            side=Side(data.get("side", Side.NEAR.value)),
            overrides=MiterOverrides(
                start=_opt_float(raw_overrides.get("start")),
                end=_opt_float(raw_overrides.get("end")),
            ),
            **kwargs,
        )


def _opt_float(value: Any) -> Optional[float]:
    return None if value is None else float(value)


class HistoryStack:
    """FIFO-bounded list of serialized store snapshots."""

    def __init__(self, limit: int = HISTORY_LIMIT) -> None:
        self.limit = limit
        self._entries: List[str] = []

    def push(self, snapshot: str) -> None:
        self._entries.append(snapshot)
        if len(self._entries) > self.limit:
            self._entries.pop(0)

    def pop(self) -> Optional[str]:
        if not self._entries:
            return None
        return self._entries.pop()

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)


class SegmentStore:
    """Ordered segments plus the undo log.

    Every public mutator snapshots the current state before changing it.
    ``replace`` is the exception: it serves live previews (endpoint or object
    drags) whose single snapshot was taken when the gesture began.
    """

    def __init__(self, segments: Optional[List[Segment]] = None, history_limit: int = HISTORY_LIMIT) -> None:
        self._segments: List[Segment] = list(segments or [])
        self.history = HistoryStack(history_limit)

    # ------------------------------------------------------------------
    # Read access
    @property
    def segments(self) -> List[Segment]:
        return list(self._segments)

    def __len__(self) -> int:
        return len(self._segments)

    def __iter__(self) -> Iterator[Segment]:
        return iter(list(self._segments))

    def __getitem__(self, index: int) -> Segment:
        return self._segments[index]

    def _valid(self, index: int) -> bool:
        return 0 <= index < len(self._segments)

    # ------------------------------------------------------------------
    # History
    def snapshot(self) -> str:
        return json.dumps([s.to_dict() for s in self._segments], sort_keys=True)

    def restore(self, snap: str) -> None:
        self._segments = [Segment.from_dict(item) for item in json.loads(snap)]

    def save(self) -> None:
        self.history.push(self.snapshot())

    def undo(self) -> bool:
        state = self.history.pop()
        if state is None:
            return False
        self.restore(state)
        logger.debug("Undo restored %d segments", len(self._segments))
        return True

    def can_undo(self) -> bool:
        return len(self.history) > 0

    # ------------------------------------------------------------------
    # Mutations
    def add(self, *segments: Segment) -> None:
        if not segments:
            return
        self.save()
        self._segments.extend(segments)
        logger.debug("Added %d segment(s); store size %d", len(segments), len(self._segments))

    def delete(self, index: int) -> Optional[Segment]:
        if not self._valid(index):
            return None
        self.save()
        removed = self._segments.pop(index)
        logger.debug("Deleted segment %d (%s)", index, removed.id)
        return removed

    def clear(self) -> None:
        self.save()
        self._segments = []

    def replace(self, index: int, segment: Segment) -> None:
        if self._valid(index):
            self._segments[index] = segment

    def set_length(self, index: int, length: Optional[float]) -> bool:
        """Move the end point along the current heading; start stays put."""
        if not self._valid(index) or length is None or not math.isfinite(length) or length <= 0:
            logger.debug("Rejected length edit %r for segment %d", length, index)
            return False
        self.save()
        seg = self._segments[index]
        self._segments[index] = replace(seg, end=point_along(seg.start, seg.heading, length))
        return True

    def set_thickness(self, index: int, thickness: Optional[float]) -> bool:
        if not self._valid(index) or thickness is None or not math.isfinite(thickness) or thickness <= 0:
            logger.debug("Rejected thickness edit %r for segment %d", thickness, index)
            return False
        self.save()
        self._segments[index] = replace(self._segments[index], thickness=float(thickness))
        return True

    def set_side(self, index: int, side: Side) -> bool:
        if not self._valid(index):
            return False
        self.save()
        self._segments[index] = replace(self._segments[index], side=Side(side))
        return True

    def set_miter_override(self, index: int, end: End, value: Optional[float]) -> bool:
        if not self._valid(index):
            return False
        if value is not None and not math.isfinite(value):
            return False
        self.save()
        seg = self._segments[index]
        self._segments[index] = replace(seg, overrides=seg.overrides.with_value(End(end), value))
        return True

    def move_endpoint(self, index: int, end: End, point: Point) -> bool:
        if not self._valid(index):
            return False
        self.save()
        self.replace(index, with_point(self._segments[index], End(end), point))
        return True

    def translate(self, index: int, dx: float, dy: float) -> bool:
        if not self._valid(index):
            return False
        self.save()
        self.replace(index, translated(self._segments[index], dx, dy))
        return True


def with_point(seg: Segment, end: End, point: Point) -> Segment:
    if End(end) is End.START:
        return replace(seg, start=point)
    return replace(seg, end=point)


def translated(seg: Segment, dx: float, dy: float) -> Segment:
    return replace(seg, start=(seg.start[0] + dx, seg.start[1] + dy), end=(seg.end[0] + dx, seg.end[1] + dy))
