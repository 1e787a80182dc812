"""
Input data model for the generator.

Schemas stay plain JSON objects so that every key the generator does not
understand is carried through untouched. The only field read structurally
is ``$ref``, and it is read through ``read_ref`` which turns the raw value
into a tagged reference.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable

Schema = dict[str, Any]

# A rewrite applied to every node of a schema tree
SchemaTransformer = Callable[[Schema], Schema]


@dataclass(frozen=True)
class Ref:
    """A ``$ref`` pointing at another schema by id."""

    target: str


@dataclass(frozen=True)
class InlineRef:
    """A ``$ref`` holding an embedded schema rather than a pointer."""

    schema: Schema


def read_ref(schema: Schema) -> Ref | InlineRef | None:
    """
    Read the ``$ref`` of a node as a tagged value.

    Args:
        schema: A schema node

    Returns:
        Ref for a string pointer, InlineRef for an embedded schema,
        None when the node has no ``$ref``

    Raises:
        TypeError: If ``$ref`` is neither a string nor an object
    """
    if "$ref" not in schema:
        return None
    value = schema["$ref"]
    if isinstance(value, str):
        return Ref(value)
    if isinstance(value, dict):
        return InlineRef(value)
    raise TypeError(f"Unexpected $ref value of type {type(value).__name__}: {value!r}")


@dataclass(frozen=True)
class GroupVersionKind:
    """The API resource a schema represents."""

    group: str = ""
    version: str = ""
    kind: str = ""


@dataclass(frozen=True)
class Definition:
    """One unit of generation: a schema and its globally unique id."""

    schema_id: str
    schema: Schema = field(default_factory=dict)
    gvk: tuple[GroupVersionKind, ...] = ()


@dataclass(frozen=True)
class OutputFile:
    """A generated file, relative to the output directory."""

    path: str
    content: str
