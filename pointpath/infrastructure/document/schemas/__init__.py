from .snapshot_schemas import (
    DocumentSnapshotSchema,
    ElementNodeSchema,
    LineBreakNodeSchema,
    NodeSchema,
    RootSchema,
    TextNodeSchema,
)

__all__ = [
    "DocumentSnapshotSchema",
    "ElementNodeSchema",
    "LineBreakNodeSchema",
    "NodeSchema",
    "RootSchema",
    "TextNodeSchema",
]
