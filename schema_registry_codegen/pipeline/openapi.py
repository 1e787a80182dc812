"""
Definition extraction from OpenAPI documents.
"""

from __future__ import annotations

from typing import Any

from .schema_ast.nodes import Definition, GroupVersionKind

GVK_EXTENSION = "x-kubernetes-group-version-kind"


def _read_gvk(schema: dict[str, Any]) -> tuple[GroupVersionKind, ...]:
    return tuple(
        GroupVersionKind(group=entry.get("group", ""), version=entry.get("version", ""), kind=entry.get("kind", ""))
        for entry in schema.get(GVK_EXTENSION, [])
    )


def extract_definitions(document: dict[str, Any]) -> list[Definition]:
    """
    Build definitions from an OpenAPI v2 or v3 document.

    Args:
        document: Parsed OpenAPI document

    Returns:
        One Definition per schema, in document order

    Raises:
        ValueError: If the document has no schema definitions section
    """
    if "definitions" in document:
        schemas = document["definitions"]
    elif "schemas" in document.get("components", {}):
        schemas = document["components"]["schemas"]
    else:
        raise ValueError("OpenAPI document has neither 'definitions' nor 'components.schemas'")

    return [Definition(schema_id=schema_id, schema=schema, gvk=_read_gvk(schema)) for schema_id, schema in schemas.items()]
