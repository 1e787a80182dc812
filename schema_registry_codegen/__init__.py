"""Schema Registry Code Generator

Generates one module per OpenAPI schema definition. Each module embeds the
schema with rewritten references and registers it, along with everything it
references, in a runtime validator registry. Supports TypeScript and Python
output.
"""

__version__ = "1.0.0"

from .pipeline import (
    AtomicWriter,
    Definition,
    GenerationError,
    GeneratorConfig,
    GroupVersionKind,
    OutputConfig,
    OutputFile,
    OutputMode,
    SchemaGenerator,
    extract_definitions,
)

__all__ = [
    "SchemaGenerator",
    "GeneratorConfig",
    "OutputConfig",
    "OutputMode",
    "Definition",
    "GroupVersionKind",
    "OutputFile",
    "GenerationError",
    "extract_definitions",
    "AtomicWriter",
]
