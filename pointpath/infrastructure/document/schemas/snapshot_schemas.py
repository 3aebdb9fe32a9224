"""Pydantic schemas for the JSON document snapshot."""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, Field


class TextNodeSchema(BaseModel):
    type: Literal["text"] = "text"
    text: str = ""


class LineBreakNodeSchema(BaseModel):
    type: Literal["linebreak"] = "linebreak"


class ElementNodeSchema(BaseModel):
    type: Literal["element"] = "element"
    tag: str = "paragraph"
    inline: bool = False
    children: list[NodeSchema] = Field(default_factory=list)


NodeSchema = Annotated[
    TextNodeSchema | ElementNodeSchema | LineBreakNodeSchema,
    Field(discriminator="type"),
]

ElementNodeSchema.model_rebuild()


class RootSchema(BaseModel):
    children: list[NodeSchema] = Field(default_factory=list)


class DocumentSnapshotSchema(BaseModel):
    """Schema for a whole-document snapshot: {"version": 1, "root": {...}}."""

    version: Literal[1] = 1
    root: RootSchema
