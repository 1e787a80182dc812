"""
IR (Intermediate Representation) node definitions.

These nodes describe one generated module after references have been
collected and classified, ready for a backend to render.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class DependencyDomain(Enum):
    """Where a referenced schema's registration code lives."""

    APIMACHINERY = "apimachinery"  # Published apimachinery package
    KUBERNETES_MODELS = "kubernetes_models"  # Published kubernetes-models package
    LOCAL = "local"  # Generated in this run


@dataclass(frozen=True)
class Import:
    """A named import, optionally renamed locally."""

    name: str
    path: str
    alias: str | None = None


@dataclass(frozen=True)
class Dependency:
    """A classified reference to another schema."""

    schema_id: str
    domain: DependencyDomain
    alias: str  # Local name the registration function is imported as
    import_path: str

    @property
    def is_external(self) -> bool:
        return self.domain is not DependencyDomain.LOCAL


@dataclass
class SchemaModule:
    """Everything a backend needs to render one generated file."""

    schema_id: str = ""
    path: str = ""

    # Register import first, then one per dependency
    imports: list[Import] = field(default_factory=list)

    # Serialized schema constant
    schema: str = ""

    # Dependency registration calls, in collected order
    dependencies: list[Dependency] = field(default_factory=list)
