"""Joint lookup: which other boards share an endpoint."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence

from .dimensions import CONNECT_TOL
from .geometry import Point, euclid_len
from .segments import End, Segment


@dataclass(frozen=True)
class Connection:
    index: int
    segment: Segment
    end: End            # which end of ``segment`` sits on the shared point

    @property
    def away_point(self) -> Point:
        """The far end of the neighbour, seen from the joint."""
        return self.segment.other(self.end)


def find_connections(
    point: Point, segments: Sequence[Segment], exclude: Optional[int] = None, tol: float = CONNECT_TOL
) -> List[Connection]:
    """Every other segment with an endpoint within ``tol`` of ``point``, in store order.

    The start point is tested before the end point, so a zero-length neighbour
    always reports ``End.START``.
    """
    out: List[Connection] = []
    for i, seg in enumerate(segments):
        if i == exclude:
            continue
        if euclid_len(seg.start, point) < tol:
            out.append(Connection(i, seg, End.START))
        elif euclid_len(seg.end, point) < tol:
            out.append(Connection(i, seg, End.END))
    return out


def first_connection(
    point: Point, segments: Sequence[Segment], exclude: Optional[int] = None, tol: float = CONNECT_TOL
) -> Optional[Connection]:
    # Multi-way joints resolve to the first neighbour in store order.
    found = find_connections(point, segments, exclude, tol)
    return found[0] if found else None
