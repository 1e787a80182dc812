"""
Schema AST module.

Contains the input data model and the structural walker used for reference
collection and schema transformation.
"""

from __future__ import annotations

from .nodes import (
    Definition,
    GroupVersionKind,
    InlineRef,
    OutputFile,
    Ref,
    Schema,
    SchemaTransformer,
    read_ref,
)
from .walker import child_slots, collect_refs, map_children, transform_schema, walk

__all__ = [
    "Schema",
    "SchemaTransformer",
    "Ref",
    "InlineRef",
    "read_ref",
    "GroupVersionKind",
    "Definition",
    "OutputFile",
    "child_slots",
    "walk",
    "collect_refs",
    "map_children",
    "transform_schema",
]
