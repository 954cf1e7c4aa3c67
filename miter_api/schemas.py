"""Pydantic request/response models for the miter service."""
from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, Field

from miter_sketch.dimensions import DrawingConfig
from miter_sketch.segments import MiterOverrides, Segment


class MessageResponse(BaseModel):
    message: str = Field(..., description="Human readable confirmation.")


class FeedbackRequest(BaseModel):
    message: str = Field("", description="Feedback text; must not be blank.")
    name: Optional[str] = Field(default=None, description="Optional sender name.")
    email: Optional[str] = Field(default=None, description="Optional reply address.")


class SubscribeRequest(BaseModel):
    email: str = Field("", description="Address to add to the mailing list.")


class OverridesModel(BaseModel):
    start: Optional[float] = Field(default=None, description="Forced saw angle at the start point.")
    end: Optional[float] = Field(default=None, description="Forced saw angle at the end point.")


class SegmentModel(BaseModel):
    start: tuple[float, float] = Field(..., description="Centerline start in logical units (20 per cm).")
    end: tuple[float, float] = Field(..., description="Centerline end in logical units.")
    thickness: Optional[float] = Field(default=None, gt=0.0, description="Board thickness in mm.")
    side: Literal["near", "far"] = Field("near", description="Side of the centerline holding the material.")
    overrides: OverridesModel = Field(default_factory=OverridesModel)

    def to_segment(self) -> Segment:
        return Segment(
            start=self.start,
            end=self.end,
            thickness=self.thickness,
            side=self.side,
            overrides=MiterOverrides(start=self.overrides.start, end=self.overrides.end),
        )


class ConfigModel(BaseModel):
    thickness: float = Field(12.0, gt=0.0, description="Default thickness in mm for boards without one.")
    unit: Literal["metric", "imperial"] = Field("metric")
    metric_sub_unit: Literal["cm", "mm"] = Field("cm")
    precision: Literal[0, 1, 2] = Field(0, description="Decimals shown on saw angles.")

    def to_config(self) -> DrawingConfig:
        return DrawingConfig(
            thickness=self.thickness,
            unit=self.unit,
            metric_sub_unit=self.metric_sub_unit,
            precision=self.precision,
        )


class CutListRequest(BaseModel):
    segments: list[SegmentModel] = Field(default_factory=list)
    config: ConfigModel = Field(default_factory=ConfigModel)


class BoardModel(BaseModel):
    number: int
    thickness: float
    outside: float
    inside: float
    start_cut: float
    end_cut: float
    start_label: str
    end_label: str
    units: str
    profile: list[list[float]]


class CutListResponse(BaseModel):
    boards: list[BoardModel]
    total: str = Field(..., description="Sum of outside lengths with unit suffix.")
