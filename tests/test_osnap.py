"""Tests for grid and endpoint snapping."""
import pytest

from miter_sketch.osnap import grid_point, snap_pick, snap_point, touching_segment
from miter_sketch.segments import Segment


def _seg(start, end) -> Segment:
    return Segment(start=start, end=end)


class TestGrid:
    def test_nearest_intersection(self) -> None:
        assert grid_point((21.0, 39.0)) == (20.0, 40.0)

    def test_halfway_rounds_up(self) -> None:
        assert grid_point((30.0, -30.0)) == (40.0, -20.0)


class TestSnapPoint:
    def test_disabled_returns_input(self, config) -> None:
        p = (21.3, 39.7)
        assert snap_point(p, [_seg((22.0, 40.0), (80.0, 40.0))], config.with_changes(snap_enabled=False)) == p

    def test_grid_within_radius(self, config) -> None:
        assert snap_point((21.0, 39.0), [], config) == (20.0, 40.0)

    def test_nothing_in_range(self, config) -> None:
        assert snap_point((30.0, 30.0), [], config) == (30.0, 30.0)

    def test_endpoint_when_grid_is_too_far(self, config) -> None:
        segments = [_seg((33.0, 30.0), (100.0, 30.0))]
        assert snap_point((31.0, 30.0), segments, config) == (33.0, 30.0)

    def test_closer_endpoint_beats_grid(self, config) -> None:
        segments = [_seg((0.0, 50.0), (24.0, 20.0))]
        assert snap_pick((23.0, 20.0), segments, config.snap_radius) == ((24.0, 20.0), "end")

    def test_equidistant_endpoint_loses_to_grid(self, config) -> None:
        segments = [_seg((0.0, 50.0), (26.0, 20.0))]
        assert snap_pick((23.0, 20.0), segments, config.snap_radius) == ((20.0, 20.0), "grid")

    def test_first_endpoint_wins_ties(self, config) -> None:
        segments = [_seg((33.0, 30.0), (90.0, 90.0)), _seg((27.0, 30.0), (90.0, 0.0))]
        assert snap_point((30.0, 30.0), segments, config) == (33.0, 30.0)

    def test_radius_shrinks_with_zoom(self, config) -> None:
        zoomed = config.with_changes(zoom=4.0)
        assert zoomed.snap_radius == pytest.approx(2.5)
        assert snap_point((23.0, 20.0), [], zoomed) == (23.0, 20.0)
        assert snap_point((23.0, 20.0), [], config) == (20.0, 20.0)

    @pytest.mark.parametrize(
        "p",
        [(21.0, 39.0), (31.0, 30.0), (23.0, 20.0), (30.0, 30.0), (47.5, 12.25), (-3.0, 118.0)],
    )
    def test_snapping_is_idempotent(self, config, p) -> None:
        segments = [_seg((33.0, 30.0), (100.0, 30.0)), _seg((24.0, 20.0), (47.0, 13.0))]
        once = snap_point(p, segments, config)
        assert snap_point(once, segments, config) == once


class TestTouchingSegment:
    def test_finds_first_touching(self) -> None:
        a = _seg((0.0, 0.0), (100.0, 0.0))
        b = _seg((100.0, 0.0), (100.0, 100.0))
        assert touching_segment((101.0, 0.0), [a, b], 10.0) is a

    def test_none_when_clear(self) -> None:
        assert touching_segment((50.0, 50.0), [_seg((0.0, 0.0), (100.0, 0.0))], 10.0) is None
