"""
Shared fixtures for the miter sketch tests.

Coordinates are logical units (20 per cm); thickness is in mm, so a 12 mm
board is 24 logical units wide.
"""
import pytest

from miter_sketch.dimensions import DrawingConfig
from miter_sketch.segments import Segment, SegmentStore


@pytest.fixture
def config() -> DrawingConfig:
    return DrawingConfig()


@pytest.fixture
def corner() -> list[Segment]:
    """Two equal boards meeting at a right angle at (100, 0)."""
    return [
        Segment(start=(0.0, 0.0), end=(100.0, 0.0), thickness=12.0),
        Segment(start=(100.0, 0.0), end=(100.0, 100.0), thickness=12.0),
    ]


@pytest.fixture
def frame() -> list[Segment]:
    """A 200 x 100 closed rectangle drawn clockwise (y grows downward)."""
    corners = [(0.0, 0.0), (200.0, 0.0), (200.0, 100.0), (0.0, 100.0)]
    return [Segment(start=corners[i], end=corners[(i + 1) % 4], thickness=12.0) for i in range(4)]


@pytest.fixture
def store(frame) -> SegmentStore:
    return SegmentStore(frame)
