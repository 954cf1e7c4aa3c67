# miter_sketch/dimensions.py
"""
Units, drawing defaults and label formatting.

All stored coordinates are logical units: 20 per real centimetre. Board
thickness is kept in millimetres. Everything here is a pure conversion so the
geometry modules can take a ``DrawingConfig`` and stay free of ambient state.

Public API (minimal):
- DrawingConfig, UnitSystem, MetricSubUnit
- logical_to_display(value, config), display_to_logical(value, config)
- parse_length(text, config), format_length(value, config)
- thickness_to_display / thickness_from_display / thickness_to_logical
- round_angle(value, precision), format_angle(value, precision)
"""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass, replace
from enum import Enum
from typing import Any, Dict, Optional

PIXELS_PER_CM = 20.0
CM_TO_INCH = 0.393701
MM_PER_INCH = 25.4

SNAP_DIST = 10.0            # on-screen pick radius, divided by zoom
CONNECT_TOL = 2.0           # endpoint coincidence for joints
MIN_SEGMENT_LENGTH = 5.0
CHAIN_CLOSE_DIST = 5.0
HISTORY_LIMIT = 50
SELECT_OBJECT_DIST = 20.0
SELECT_POINT_DIST = 15.0
LABEL_PUSH_DIST = 24.0

MIN_ZOOM = 0.2
MAX_ZOOM = 4.0
ZOOM_STEP = 0.4


class UnitSystem(str, Enum):
    METRIC = "metric"
    IMPERIAL = "imperial"


class MetricSubUnit(str, Enum):
    CM = "cm"
    MM = "mm"


class Side(str, Enum):
    """Perpendicular side of the centerline the board material occupies."""

    NEAR = "near"
    FAR = "far"


# ---- Drawing defaults ------------------------------------------------------

@dataclass(frozen=True)
class DrawingConfig:
    thickness: float = 12.0                 # mm
    unit: UnitSystem = UnitSystem.METRIC
    metric_sub_unit: MetricSubUnit = MetricSubUnit.CM
    precision: int = 0                      # angle decimals: 0, 1 or 2
    snap_enabled: bool = True
    zoom: float = 1.0
    side: Side = Side.NEAR
    polygon_sides: int = 6

    def __post_init__(self) -> None:
        # Accept plain strings from JSON/CLI callers.
        object.__setattr__(self, "unit", UnitSystem(self.unit))
        object.__setattr__(self, "metric_sub_unit", MetricSubUnit(self.metric_sub_unit))
        if self.precision not in (0, 1, 2):
            raise ValueError(f"Unsupported precision {self.precision!r}")
        object.__setattr__(self, "side", Side(self.side))
        object.__setattr__(self, "polygon_sides", max(3, int(self.polygon_sides)))

    def with_changes(self, **changes: Any) -> "DrawingConfig":
        return replace(self, **changes)

    def asdict(self) -> Dict[str, Any]:
        d = asdict(self)
        d["unit"] = self.unit.value
        d["metric_sub_unit"] = self.metric_sub_unit.value
        d["side"] = self.side.value
        return d

    @property
    def snap_radius(self) -> float:
        return SNAP_DIST / self.zoom


# ---- Lengths ---------------------------------------------------------------

def logical_to_display(value: float, config: DrawingConfig) -> float:
    cm = value / PIXELS_PER_CM
    if config.unit is UnitSystem.IMPERIAL:
        return cm * CM_TO_INCH
    return cm * 10.0 if config.metric_sub_unit is MetricSubUnit.MM else cm


def display_to_logical(value: float, config: DrawingConfig) -> float:
    cm = value
    if config.unit is UnitSystem.IMPERIAL:
        cm = value / CM_TO_INCH
    elif config.metric_sub_unit is MetricSubUnit.MM:
        cm = value / 10.0
    return cm * PIXELS_PER_CM


def parse_length(text: Any, config: DrawingConfig) -> Optional[float]:
    """Parse a user-entered length into logical units, ``None`` when unusable."""
    try:
        num = float(str(text).strip())
    except (TypeError, ValueError):
        return None
    if not math.isfinite(num):
        return None
    return display_to_logical(num, config)


def length_decimals(config: DrawingConfig) -> int:
    if config.unit is UnitSystem.METRIC and config.metric_sub_unit is MetricSubUnit.MM:
        return 1
    return 2


def unit_suffix(config: DrawingConfig) -> str:
    if config.unit is UnitSystem.IMPERIAL:
        return "in"
    return config.metric_sub_unit.value


def format_length(value: float, config: DrawingConfig) -> str:
    shown = round_half_up(logical_to_display(value, config), length_decimals(config))
    return _trim(shown)


# ---- Thickness (millimetres) -----------------------------------------------

def thickness_to_display(mm: float, config: DrawingConfig) -> float:
    if config.unit is UnitSystem.IMPERIAL:
        return mm / MM_PER_INCH
    return mm if config.metric_sub_unit is MetricSubUnit.MM else mm / 10.0


def thickness_from_display(value: float, config: DrawingConfig) -> float:
    if config.unit is UnitSystem.IMPERIAL:
        return value * MM_PER_INCH
    return value if config.metric_sub_unit is MetricSubUnit.MM else value * 10.0


def thickness_to_logical(mm: float) -> float:
    return mm / 10.0 * PIXELS_PER_CM


# ---- Angles ----------------------------------------------------------------

def round_half_up(value: float, decimals: int = 0) -> float:
    scale = 10 ** decimals
    return math.floor(value * scale + 0.5) / scale


def round_angle(value: float, precision: int) -> float:
    if precision == 0:
        return float(round_half_up(value))
    return round_half_up(value, precision)


def format_angle(value: float, precision: int) -> str:
    return f"{round_angle(value, precision):.{precision}f}°"


def _trim(value: float) -> str:
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return "0" if text in ("-0", "") else text
