"""
Python output backend.

Generates Python modules exposing an ``add_schema()`` registration function.
"""

from __future__ import annotations

import json

from ...utils import trim_suffix
from ..analyzer.ir_nodes import Import
from ..schema_ast.nodes import Schema
from .base import RegistryBackend

INDENT = "  "

# JSON constants spelled as Python literals
_CONSTANTS = {True: "True", False: "False", None: "None"}


def to_python_literal(value, level: int = 0) -> str:
    """Render a JSON value as a Python literal in ``json.dumps(indent=2)`` layout.

    Strings use JSON escapes, which Python reads back unchanged. Dict order is
    kept.
    """
    if value is None or isinstance(value, bool):
        return _CONSTANTS[value]
    if isinstance(value, str):
        return json.dumps(value, ensure_ascii=False)
    if isinstance(value, (int, float)):
        return repr(value)

    inner = INDENT * (level + 1)
    if isinstance(value, dict):
        if not value:
            return "{}"
        items = [f"{inner}{json.dumps(str(k), ensure_ascii=False)}: {to_python_literal(v, level + 1)}" for k, v in value.items()]
        return "{\n" + ",\n".join(items) + "\n" + INDENT * level + "}"
    if isinstance(value, list):
        if not value:
            return "[]"
        items = [f"{inner}{to_python_literal(v, level + 1)}" for v in value]
        return "[\n" + ",\n".join(items) + "\n" + INDENT * level + "]"
    raise TypeError(f"Cannot serialize {type(value).__name__} in a schema")


class PythonBackend(RegistryBackend):
    """Python output backend."""

    TEMPLATE_LANG = "python"
    FILE_EXTENSION = "py"
    REGISTER_FUNCTION = "add_schema"

    def local_module(self, class_name: str) -> str:
        return f".{class_name}"

    def external_module(self, package: str, schema_path: str) -> str:
        module = trim_suffix(schema_path, ".py").replace("/", ".")
        return f"{package}.{module}"

    def render_import(self, path: str, imports: list[Import]) -> str:
        names = ", ".join(f"{imp.name} as {imp.alias}" if imp.alias else imp.name for imp in imports)
        return f"from {path} import {names}"

    def serialize_schema(self, schema: Schema) -> str:
        return to_python_literal(schema)
