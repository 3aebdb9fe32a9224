"""Pydantic schemas for the stored path record wire format."""

from pydantic import BaseModel, ConfigDict, Field


class PointPathRecord(BaseModel):
    """Schema for a persisted PointPath: {"rootIndex": n, "textOffset": m}."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    block_index: int = Field(..., ge=0, alias="rootIndex", strict=True)
    char_offset: int = Field(..., ge=0, alias="textOffset", strict=True)
