"""Pointer/keyboard gesture handling for the board sketch.

The session is framework-free: a host canvas forwards press/move/release and
key events in logical coordinates and renders from ``store`` plus
``preview_segments()``.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from .dimensions import (
    CHAIN_CLOSE_DIST,
    MAX_ZOOM,
    MIN_SEGMENT_LENGTH,
    MIN_ZOOM,
    SELECT_OBJECT_DIST,
    SELECT_POINT_DIST,
    ZOOM_STEP,
    DrawingConfig,
    Side,
)
from .edit_ops import find_endpoint_at, find_segment_at, line_segments, polygon_segments, rectangle_segments
from .geometry import Point, euclid_len
from .miter import MiterResult, calculate_miter
from .osnap import snap_point, touching_segment
from .segments import End, Segment, SegmentStore, with_point

logger = logging.getLogger(__name__)


class Mode(str, Enum):
    LINE = "line"
    RECT = "rect"
    POLYGON = "polygon"
    SELECT_OBJECT = "select-obj"
    SELECT_POINT = "select-point"
    PAN = "pan"


DRAWING_MODES = {Mode.LINE, Mode.RECT, Mode.POLYGON}


@dataclass
class Preview:
    start: Point
    end: Point
    mode: Mode

    @property
    def length(self) -> float:
        return euclid_len(self.start, self.end)


class DrawingSession:
    """Editor state around a ``SegmentStore``."""

    def __init__(self, store: Optional[SegmentStore] = None, config: Optional[DrawingConfig] = None) -> None:
        self.store = store if store is not None else SegmentStore()
        self.config = config or DrawingConfig()
        self.mode = Mode.LINE
        self.preview: Optional[Preview] = None
        self.chain_origin: Optional[Point] = None
        self._hover: Optional[Point] = None
        self.selected: Optional[int] = None
        self.selected_point: Optional[Tuple[int, End]] = None
        self.active_cut: Optional[Tuple[int, End]] = None
        self.undo_clear_active = False
        self.panning = False
        self.pan_offset: Point = (0.0, 0.0)
        self._drag_offset: Optional[Tuple[Point, Point]] = None

    # ------------------------------------------------------------------
    # Settings
    def configure(self, **changes) -> DrawingConfig:
        self.config = self.config.with_changes(**changes)
        return self.config

    def set_mode(self, mode: Mode | str) -> None:
        self.mode = Mode(mode)
        self.cancel_drawing()

    def flip(self) -> None:
        side = Side.FAR if self.config.side is Side.NEAR else Side.NEAR
        self.configure(side=side)

    def zoom_in(self) -> float:
        self.configure(zoom=min(MAX_ZOOM, self.config.zoom + ZOOM_STEP))
        self.cancel_drawing()
        return self.config.zoom

    def zoom_out(self) -> float:
        self.configure(zoom=max(MIN_ZOOM, self.config.zoom - ZOOM_STEP))
        self.cancel_drawing()
        return self.config.zoom

    # ------------------------------------------------------------------
    # Pointer events
    @property
    def hover_point(self) -> Optional[Point]:
        """Last snapped cursor position, where the host draws the snap marker."""
        return self._hover

    def snapped(self, raw: Point) -> Point:
        return snap_point(raw, self.store.segments, self.config)

    def press(self, raw: Point) -> None:
        pos = self.snapped(raw)
        segments = self.store.segments

        if self.config.snap_enabled and self.mode in DRAWING_MODES:
            attached = touching_segment(pos, segments, self.config.snap_radius)
            if attached is not None:
                self.configure(side=attached.side)

        if self.mode is Mode.PAN:
            self.panning = True
            return

        if self.mode is Mode.SELECT_POINT:
            found = find_endpoint_at(raw, segments, SELECT_POINT_DIST)
            if found is not None:
                self.undo_clear_active = False
                self.store.save()
                self.selected_point = found
            return

        if self.mode is Mode.SELECT_OBJECT:
            idx = find_segment_at(raw, segments, SELECT_OBJECT_DIST)
            if idx is None:
                self.selected = None
                return
            self.undo_clear_active = False
            self.store.save()
            self.selected = idx
            seg = segments[idx]
            self._drag_offset = (
                (seg.start[0] - raw[0], seg.start[1] - raw[1]),
                (seg.end[0] - raw[0], seg.end[1] - raw[1]),
            )
            return

        self.undo_clear_active = False
        if self.preview is None:
            self.preview = Preview(pos, pos, self.mode)
            if self.mode is Mode.LINE:
                self.chain_origin = pos
            return

        preview = self.preview
        if preview.length > MIN_SEGMENT_LENGTH:
            self.store.add(*self._build(preview))
            if preview.mode is Mode.LINE:
                closes = self.chain_origin is not None and euclid_len(preview.end, self.chain_origin) < CHAIN_CLOSE_DIST
                if not closes:
                    self.preview = Preview(preview.end, preview.end, Mode.LINE)
                    return
        self.cancel_drawing()

    def move(self, raw: Point, delta: Point = (0.0, 0.0)) -> None:
        pos = self.snapped(raw)
        self._hover = pos
        if self.panning:
            zoom = self.config.zoom
            self.pan_offset = (self.pan_offset[0] + delta[0] / zoom, self.pan_offset[1] + delta[1] / zoom)
            return

        if self.selected_point is not None:
            idx, end = self.selected_point
            self.store.replace(idx, with_point(self.store[idx], end, pos))
            return

        if self.preview is not None:
            self.preview.end = pos
        elif self.mode is Mode.SELECT_OBJECT and self.selected is not None and self._drag_offset is not None:
            (sx, sy), (ex, ey) = self._drag_offset
            seg = self.store[self.selected]
            moved = with_point(with_point(seg, End.START, (raw[0] + sx, raw[1] + sy)), End.END, (raw[0] + ex, raw[1] + ey))
            self.store.replace(self.selected, moved)

    def release(self) -> None:
        self.panning = False
        self._drag_offset = None
        self.selected_point = None

    # ------------------------------------------------------------------
    # Keyboard and commands
    def cancel_drawing(self) -> None:
        self.preview = None
        self.chain_origin = None

    def key(self, name: str, ctrl: bool = False) -> None:
        lowered = name.lower()
        if lowered == "escape":
            self.cancel_drawing()
        elif lowered in ("delete", "backspace"):
            if self.selected is not None:
                self.delete_selected()
            elif self.preview is not None:
                self.cancel_drawing()
        elif lowered == "z" and ctrl:
            self.undo()

    def delete_selected(self) -> None:
        if self.selected is None:
            return
        self.store.delete(self.selected)
        self.selected = None
        self.preview = None

    def undo(self) -> bool:
        return self.store.undo()

    def clear(self) -> None:
        self.store.clear()
        self.selected = None
        self.preview = None
        self.active_cut = None
        self.undo_clear_active = True
        logger.debug("Sketch cleared")

    def undo_clear(self) -> bool:
        restored = self.store.undo()
        self.undo_clear_active = False
        return restored

    def select_cut(self, index: int, end: End) -> MiterResult:
        """Make one board end the active cut, e.g. after clicking its readout."""
        self.selected = index
        self.active_cut = (index, End(end))
        return calculate_miter(self.store.segments, index, End(end), self.config)

    # ------------------------------------------------------------------
    # Rendering support
    def preview_segments(self) -> List[Segment]:
        if self.preview is None:
            return []
        return self._build(self.preview)

    def _build(self, preview: Preview) -> List[Segment]:
        side = self.config.side
        if preview.mode is Mode.RECT:
            return rectangle_segments(preview.start, preview.end, self.config, side)
        if preview.mode is Mode.POLYGON:
            return polygon_segments(preview.start, preview.end, self.config.polygon_sides, self.config, side)
        return line_segments(preview.start, preview.end, self.config, side)
