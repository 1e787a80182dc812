"""
Structural traversal of schema trees.

``child_slots`` is the only place that knows where nested schemas live.
Reference collection and schema transformation are both built on it, so
they always cover the same positions.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

from .nodes import Ref, Schema, SchemaTransformer, read_ref

# Fields holding one nested schema, in traversal order
SINGLE_CHILD_FIELDS = ("items", "additionalProperties")
LIST_CHILD_FIELDS = ("allOf", "oneOf", "anyOf")

# (field, property name or list index or None, child schema)
ChildSlot = tuple[str, str | int | None, Schema]


def _single_child(schema: Schema, field: str) -> Schema | None:
    value = schema.get(field)
    if value is None:
        return None
    # additionalProperties: true/false is a leaf, not a schema
    if field == "additionalProperties" and isinstance(value, bool):
        return None
    if not isinstance(value, dict):
        raise TypeError(f"Expected a schema object for '{field}', got {type(value).__name__}")
    return value


def child_slots(schema: Schema) -> list[ChildSlot]:
    """
    List the nested schemas of a node in a fixed order.

    Order: properties, items, additionalProperties, allOf, oneOf, anyOf, not.
    ``$ref`` values are never descended into.

    Args:
        schema: A schema node

    Returns:
        List of (field, key, child) slots
    """
    slots: list[ChildSlot] = []

    for name, child in schema.get("properties", {}).items():
        slots.append(("properties", name, child))

    for field in SINGLE_CHILD_FIELDS:
        child = _single_child(schema, field)
        if child is not None:
            slots.append((field, None, child))

    for field in LIST_CHILD_FIELDS:
        for index, child in enumerate(schema.get(field, [])):
            slots.append((field, index, child))

    child = _single_child(schema, "not")
    if child is not None:
        slots.append(("not", None, child))

    return slots


def walk(schema: Schema) -> list[Schema]:
    """Return every node of the tree in depth-first pre-order."""
    nodes: list[Schema] = []
    stack = [schema]
    while stack:
        node = stack.pop()
        nodes.append(node)
        stack.extend(reversed([child for _, _, child in child_slots(node)]))
    return nodes


def collect_refs(schema: Schema, normalize: Callable[[str], str] | None = None) -> list[str]:
    """
    Collect the distinct schema ids referenced anywhere in a tree.

    Args:
        schema: Root schema
        normalize: Optional mapping applied to each ref before deduplication

    Returns:
        Referenced ids in order of first occurrence
    """
    targets = []
    for node in walk(schema):
        ref = read_ref(node)
        if isinstance(ref, Ref):
            targets.append(normalize(ref.target) if normalize else ref.target)
    return list(dict.fromkeys(targets))


def map_children(schema: Schema, fn: Callable[[Schema], Schema]) -> Schema:
    """
    Copy a node, replacing each nested schema with ``fn(child)``.

    Containers that hold children (``properties`` and the composition lists)
    are copied before being written to, so the input is left untouched.
    """
    result = dict(schema)
    for field, key, child in child_slots(schema):
        if key is None:
            result[field] = fn(child)
            continue
        container: Any = result[field]
        if container is schema[field]:
            container = result[field] = container.copy()
        container[key] = fn(child)
    return result


def transform_schema(schema: Schema, transformers: Sequence[SchemaTransformer]) -> Schema:
    """
    Apply rewrite functions to every node of a schema tree.

    Children are transformed first, then each rewrite runs on the rebuilt
    node in the given order.

    Args:
        schema: Root schema, not modified
        transformers: Rewrites applied to each node

    Returns:
        The transformed tree
    """
    node = map_children(schema, lambda child: transform_schema(child, transformers))
    for transformer in transformers:
        node = transformer(node)
    return node
