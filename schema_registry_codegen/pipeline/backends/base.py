"""
Base class for output backends.

Defines the interface that all language-specific backends must implement.
"""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from pathlib import Path

import jinja2

from ...utils import get_schema_path
from ..analyzer.ir_nodes import Import, SchemaModule
from ..config import GeneratorConfig
from ..schema_ast.nodes import Schema


class RegistryBackend(ABC):
    """Abstract base class for output backends."""

    # Template directory name
    TEMPLATE_LANG: str = ""

    # File extension, without the dot
    FILE_EXTENSION: str = ""

    # Name of the registration function every generated module exports
    REGISTER_FUNCTION: str = ""

    def __init__(self, config: GeneratorConfig):
        """
        Initialize the backend.

        Args:
            config: Code generation configuration
        """
        self.config = config
        self._setup_templates()

    def _setup_templates(self) -> None:
        """Set up Jinja2 templates."""
        template_dir = Path(__file__).parent.parent.parent / "templates" / self.TEMPLATE_LANG
        self.jinja_env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(template_dir)),
            lstrip_blocks=True,
            trim_blocks=True,
            keep_trailing_newline=True,
        )
        self.jinja_env.filters["quote"] = json.dumps
        self.module_template = self.jinja_env.get_template(f"schema.{self.FILE_EXTENSION}.jinja2")

    @abstractmethod
    def local_module(self, class_name: str) -> str:
        """Module path of a schema generated next to the current one."""

    @abstractmethod
    def external_module(self, package: str, schema_path: str) -> str:
        """
        Module path of a schema published in an external package.

        Args:
            package: Package root (e.g. "kubernetes-models")
            schema_path: Schema file path inside the package

        Returns:
            Importable module path
        """

    @abstractmethod
    def render_import(self, path: str, imports: list[Import]) -> str:
        """Render one import statement for all names imported from ``path``."""

    @abstractmethod
    def serialize_schema(self, schema: Schema) -> str:
        """Serialize a schema as a literal of the target language."""

    def schema_path(self, schema_id: str) -> str:
        return get_schema_path(schema_id, f".{self.FILE_EXTENSION}", self.config.qualified_class_names)

    def register_import(self) -> Import:
        return Import(name="register", path=self.config.register_module)

    def render_imports(self, imports: list[Import]) -> str:
        """
        Render imports grouped by module path.

        Paths keep the order they first appear in; a name imported twice
        under the same alias from the same path is rendered once.
        """
        grouped: dict[str, list[Import]] = {}
        for imp in imports:
            names = grouped.setdefault(imp.path, [])
            if imp not in names:
                names.append(imp)
        return "\n".join(self.render_import(path, names) for path, names in grouped.items())

    def generate(self, module: SchemaModule) -> str:
        """
        Render a generated module.

        Args:
            module: The module IR

        Returns:
            File content
        """
        return self.module_template.render(
            imports=self.render_imports(module.imports),
            schema=module.schema,
            schema_id=module.schema_id,
            dependencies=[dep.alias for dep in module.dependencies],
            register_function=self.REGISTER_FUNCTION,
        )
