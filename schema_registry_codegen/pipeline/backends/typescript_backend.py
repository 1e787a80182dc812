"""
TypeScript output backend.

Generates ES modules for the @kubernetes-models validate registry.
"""

from __future__ import annotations

import json

from ...utils import trim_suffix
from ..analyzer.ir_nodes import Import
from ..schema_ast.nodes import Schema
from .base import RegistryBackend


class TypeScriptBackend(RegistryBackend):
    """TypeScript output backend."""

    TEMPLATE_LANG = "typescript"
    FILE_EXTENSION = "ts"
    REGISTER_FUNCTION = "addSchema"

    def local_module(self, class_name: str) -> str:
        return f"./{class_name}"

    def external_module(self, package: str, schema_path: str) -> str:
        return f"{package}/{trim_suffix(schema_path, '.ts')}"

    def render_import(self, path: str, imports: list[Import]) -> str:
        names = ", ".join(f"{imp.name} as {imp.alias}" if imp.alias else imp.name for imp in imports)
        return f"import {{ {names} }} from {json.dumps(path)};"

    def serialize_schema(self, schema: Schema) -> str:
        return json.dumps(schema, indent=2, ensure_ascii=False)
