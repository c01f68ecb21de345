# app/schemas/layout.py
from enum import Enum

from pydantic import BaseModel, Field


class LayoutKind(str, Enum):
    """
    Rendering template for a group of overlapping meetings.
    """

    SINGLE = "single"
    DUAL_HORIZONTAL = "dual-horizontal"
    TRIPLE = "triple"
    QUAD = "quad"


class MeetingPlacement(BaseModel):
    """
    Where a single meeting goes in its day column.

    Horizontal values are shares of the column width; vertical values are
    in slot-height units (one unit = one 15-minute row).
    """

    meeting_id: str = Field(..., description="Id of the placed meeting.", examples=["import-5f2c1a9e-0"])
    group_index: int = Field(
        ...,
        ge=0,
        description="Index of the overlap group within the day, in start order.",
        examples=[0],
    )
    group_size: int = Field(
        ...,
        ge=1,
        description="Number of meetings in the overlap group.",
        examples=[3],
    )
    position: int = Field(
        ...,
        ge=0,
        description="Horizontal position within the group; 0 is the earliest start.",
        examples=[1],
    )
    layout_kind: LayoutKind = Field(
        ...,
        description="Template chosen from the group size.",
        examples=["triple"],
    )
    width_share: float = Field(
        ...,
        gt=0,
        le=1,
        description="Share of the column width given to this meeting.",
        examples=[0.3333],
    )
    left_share: float = Field(
        ...,
        ge=0,
        lt=1,
        description="Left offset as a share of the column width.",
        examples=[0.3333],
    )
    top_offset_units: float = Field(
        ...,
        description="Distance from the top of the grid, in slot heights.",
        examples=[2.0],
    )
    height_units: float = Field(
        ...,
        description="Block height, in slot heights.",
        examples=[4.0],
    )
