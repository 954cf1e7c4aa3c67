"""Tests for the segment store and its undo history."""
import math

import pytest

from miter_sketch.segments import End, HistoryStack, MiterOverrides, Segment, SegmentStore, Side


class TestSegment:
    def test_coerces_points_and_side(self) -> None:
        seg = Segment(start=[0, 0], end=[3, 4], side="far")
        assert seg.start == (0.0, 0.0)
        assert seg.side is Side.FAR
        assert seg.length == pytest.approx(5.0)

    def test_zero_thickness_falls_back(self) -> None:
        assert Segment(start=(0, 0), end=(1, 0), thickness=0.0).thickness_or(12.0) == 12.0
        assert Segment(start=(0, 0), end=(1, 0), thickness=6.0).thickness_or(12.0) == 6.0

    def test_dict_round_trip(self) -> None:
        seg = Segment(start=(1, 2), end=(3, 4), thickness=9.0, side=Side.FAR, overrides=MiterOverrides(end=30.0))
        assert Segment.from_dict(seg.to_dict()) == seg

    def test_from_flat_coordinates(self) -> None:
        seg = Segment.from_dict({"x1": 0, "y1": 0, "x2": 10, "y2": 0})
        assert seg.end == (10.0, 0.0)
        assert seg.thickness is None
        assert seg.overrides == MiterOverrides()


class TestHistoryStack:
    def test_drops_oldest_beyond_limit(self) -> None:
        stack = HistoryStack(limit=3)
        for i in range(5):
            stack.push(str(i))
        assert len(stack) == 3
        assert [stack.pop(), stack.pop(), stack.pop(), stack.pop()] == ["4", "3", "2", None]


class TestUndo:
    def test_undo_restores_previous_state(self, store) -> None:
        before = store.segments
        store.delete(1)
        assert store.undo()
        assert store.segments == before

    def test_undo_on_empty_history(self) -> None:
        store = SegmentStore()
        assert not store.can_undo()
        assert store.undo() is False

    def test_history_keeps_last_fifty(self) -> None:
        store = SegmentStore()
        for i in range(51):
            store.add(Segment(start=(0.0, 20.0 * i), end=(100.0, 20.0 * i)))
        assert len(store.history) == 50
        for _ in range(50):
            assert store.undo()
        assert len(store) == 1
        assert store[0].start == (0.0, 0.0)
        assert store.undo() is False
        assert len(store) == 1

    def test_clear_then_undo(self, store) -> None:
        before = store.segments
        store.clear()
        assert len(store) == 0
        store.undo()
        assert store.segments == before


class TestMutations:
    def test_add_many_is_one_step(self) -> None:
        store = SegmentStore()
        store.add(Segment(start=(0, 0), end=(1, 0)), Segment(start=(1, 0), end=(1, 1)))
        assert len(store) == 2
        assert len(store.history) == 1

    def test_delete_removes_exactly_one(self, store) -> None:
        before = store.segments
        removed = store.delete(2)
        assert removed == before[2]
        assert store.segments == before[:2] + before[3:]

    def test_delete_out_of_range(self, store) -> None:
        assert store.delete(10) is None
        assert len(store.history) == 0

    def test_set_length_keeps_start_and_heading(self, store) -> None:
        assert store.set_length(1, 250.0)
        seg = store[1]
        assert seg.start == (200.0, 0.0)
        assert seg.end == pytest.approx((200.0, 250.0))

    @pytest.mark.parametrize("value", [None, 0.0, -5.0, math.nan, math.inf])
    def test_invalid_length_is_ignored(self, store, value) -> None:
        before = store.segments
        assert store.set_length(0, value) is False
        assert store.segments == before
        assert len(store.history) == 0

    def test_set_thickness(self, store) -> None:
        assert store.set_thickness(0, 18.0)
        assert store[0].thickness == 18.0
        assert store.set_thickness(0, 0.0) is False
        assert len(store.history) == 1

    def test_set_side(self, store) -> None:
        assert store.set_side(3, "far")
        assert store[3].side is Side.FAR

    def test_miter_override_set_and_clear(self, store) -> None:
        store.set_miter_override(0, End.END, 30.0)
        assert store[0].overrides.end == 30.0
        assert store[0].overrides.start is None
        store.set_miter_override(0, "end", None)
        assert store[0].overrides.end is None
        assert store.set_miter_override(0, End.START, math.nan) is False

    def test_move_endpoint_and_translate(self, store) -> None:
        store.move_endpoint(0, End.START, (-20.0, 0.0))
        assert store[0].start == (-20.0, 0.0)
        store.translate(1, 10.0, 5.0)
        assert store[1].start == (210.0, 5.0)
        assert store[1].end == (210.0, 105.0)
        assert len(store.history) == 2

    def test_replace_takes_no_snapshot(self, store) -> None:
        store.replace(0, Segment(start=(0, 0), end=(50, 0)))
        assert store[0].end == (50.0, 0.0)
        assert len(store.history) == 0

    def test_segments_is_a_copy(self, store) -> None:
        store.segments.clear()
        assert len(store) == 4
