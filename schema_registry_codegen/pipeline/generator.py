"""
Schema registry module generator.

Turns each Definition into one module holding the rewritten schema and an
``addSchema`` function that registers the schema and everything it
references:

1. Collect references from the original schema and classify them
2. Rewrite ``$ref`` values to registry ids (or substitute a fixed schema)
3. Render imports, the schema constant and the registration function
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Sequence

from ..utils import trim_ref_prefix
from .analyzer.classifier import DependencyClassifier
from .analyzer.ir_nodes import Dependency, DependencyDomain, Import, SchemaModule
from .backends import create_backend
from .config import GeneratorConfig
from .errors import GenerationError
from .schema_ast.nodes import Definition, OutputFile, Ref, Schema, read_ref
from .schema_ast.walker import collect_refs, transform_schema

logger = logging.getLogger(__name__)

INT_OR_STRING_ID = "io.k8s.apimachinery.pkg.util.intstr.IntOrString"
JSON_V1BETA1_ID = "io.k8s.apiextensions-apiserver.pkg.apis.apiextensions.v1beta1.JSON"
JSON_V1_ID = "io.k8s.apiextensions-apiserver.pkg.apis.apiextensions.v1.JSON"

# Schemas emitted in place of the definition's own schema
SCHEMA_OVERRIDES: dict[str, Schema] = {
    INT_OR_STRING_ID: {"oneOf": [{"type": "string"}, {"type": "integer", "format": "int32"}]},
    # Arbitrary JSON: no constraint at all
    JSON_V1BETA1_ID: {},
    JSON_V1_ID: {},
}


def replace_ref(schema: Schema) -> Schema:
    """Point a string ``$ref`` at the registry id of its target."""
    ref = read_ref(schema)
    if isinstance(ref, Ref):
        return {**schema, "$ref": trim_ref_prefix(ref.target) + "#"}
    return schema


class SchemaGenerator:
    """Generates one registration module per definition."""

    def __init__(self, config: GeneratorConfig | None = None):
        """
        Initialize the generator.

        Args:
            config: Generation configuration, defaults to TypeScript output
                with no external packages
        """
        self.config = config or GeneratorConfig()
        self.backend = create_backend(self.config)
        self.classifier = DependencyClassifier(self.config, self.backend)

    async def __call__(self, definitions: Sequence[Definition]) -> list[OutputFile]:
        """Generate all files; completes once every file is built."""
        return self.generate(definitions)

    def generate(self, definitions: Sequence[Definition]) -> list[OutputFile]:
        """
        Generate one file per definition.

        Args:
            definitions: Definitions to generate, ids unique

        Returns:
            Output files in input order

        Raises:
            GenerationError: If two definitions map to the same output path
        """
        self.check_paths(definitions)
        return [self.generate_file(definition) for definition in definitions]

    def check_paths(self, definitions: Sequence[Definition]) -> None:
        """Fail before generating anything if two ids share an output path."""
        owners: dict[str, str] = {}
        for definition in definitions:
            path = self.backend.schema_path(definition.schema_id)
            other = owners.setdefault(path, definition.schema_id)
            if other != definition.schema_id:
                raise GenerationError(f"{other} and {definition.schema_id} both map to {path}")

    def build_schema(self, definition: Definition) -> Schema:
        """Return the schema to embed in the generated module."""
        override = SCHEMA_OVERRIDES.get(definition.schema_id)
        if override is not None:
            return copy.deepcopy(override)
        return transform_schema(definition.schema, [replace_ref])

    def compile_schema(self, definition: Definition) -> str:
        return self.backend.serialize_schema(self.build_schema(definition))

    def collect_dependencies(self, definition: Definition) -> list[Dependency]:
        """
        Classify the schemas a definition references.

        References are read from the original schema, so overrides do not
        change the dependency list. A reference to the definition itself is
        dropped.
        """
        refs = collect_refs(definition.schema, trim_ref_prefix)
        return [self.classifier.classify(ref) for ref in refs if ref != definition.schema_id]

    def build_module(self, definition: Definition) -> SchemaModule:
        dependencies = self.collect_dependencies(definition)
        path = self.backend.schema_path(definition.schema_id)
        self.check_dependencies(definition, path, dependencies)

        imports = [self.backend.register_import()]
        for dep in dependencies:
            imports.append(Import(name=self.backend.REGISTER_FUNCTION, path=dep.import_path, alias=dep.alias))

        return SchemaModule(
            schema_id=definition.schema_id,
            path=path,
            imports=imports,
            schema=self.compile_schema(definition),
            dependencies=dependencies,
        )

    def check_dependencies(self, definition: Definition, path: str, dependencies: Sequence[Dependency]) -> None:
        """
        Reject dependencies that would not resolve to distinct modules.

        Raises:
            GenerationError: If two dependencies share an alias, or a local
                dependency would import the module being generated
        """
        aliases: dict[str, str] = {}
        for dep in dependencies:
            other = aliases.setdefault(dep.alias, dep.schema_id)
            if other != dep.schema_id:
                raise GenerationError(f"{definition.schema_id}: {other} and {dep.schema_id} share the alias {dep.alias}")
            if dep.domain is DependencyDomain.LOCAL and self.backend.schema_path(dep.schema_id) == path:
                raise GenerationError(f"{definition.schema_id}: {dep.schema_id} would import {path} from itself")

    def generate_file(self, definition: Definition) -> OutputFile:
        module = self.build_module(definition)
        logger.debug(
            "Generated %s (%d dependencies, %d external)",
            definition.schema_id,
            len(module.dependencies),
            sum(1 for dep in module.dependencies if dep.is_external),
        )
        return OutputFile(path=module.path, content=self.backend.generate(module))
