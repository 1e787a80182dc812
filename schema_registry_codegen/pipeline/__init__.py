"""
Pipeline - OpenAPI schema definitions to validator registry modules.

1. Extract definitions from an OpenAPI document
2. Collect and classify the references of each schema
3. Rewrite references and render one module per definition
4. Optionally write the modules to disk atomically
"""

from __future__ import annotations

from .config import GeneratorConfig, OutputConfig, OutputMode
from .errors import GenerationError
from .generator import SCHEMA_OVERRIDES, SchemaGenerator, replace_ref
from .openapi import extract_definitions
from .schema_ast import Definition, GroupVersionKind, OutputFile
from .writer import AtomicWriter

__all__ = [
    "SchemaGenerator",
    "SCHEMA_OVERRIDES",
    "replace_ref",
    "GeneratorConfig",
    "OutputConfig",
    "OutputMode",
    "GenerationError",
    "Definition",
    "GroupVersionKind",
    "OutputFile",
    "extract_definitions",
    "AtomicWriter",
]
