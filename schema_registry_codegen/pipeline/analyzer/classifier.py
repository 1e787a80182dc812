"""
Dependency classification for referenced schema ids.

Decides whether a referenced schema is provided by one of the published
packages or generated locally, and where to import its registration
function from.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ...utils import get_class_name, is_apimachinery_id, is_kubernetes_id
from ..config import GeneratorConfig
from .ir_nodes import Dependency, DependencyDomain

if TYPE_CHECKING:
    from ..backends.base import RegistryBackend


class DependencyClassifier:
    """Classifies schema ids into dependency domains."""

    def __init__(self, config: GeneratorConfig, backend: RegistryBackend):
        """
        Initialize the classifier.

        Args:
            config: Generation configuration (enabled external domains, package roots)
            backend: Output backend, used for module path syntax
        """
        self.config = config
        self.backend = backend

    def domain_of(self, schema_id: str) -> DependencyDomain:
        """Return the domain of a schema id. Apimachinery is checked first."""
        if self.config.external_apimachinery and is_apimachinery_id(schema_id):
            return DependencyDomain.APIMACHINERY
        if self.config.external_kubernetes_models and is_kubernetes_id(schema_id):
            return DependencyDomain.KUBERNETES_MODELS
        return DependencyDomain.LOCAL

    def package_for(self, domain: DependencyDomain) -> str:
        if domain is DependencyDomain.APIMACHINERY:
            return self.config.apimachinery_package
        if domain is DependencyDomain.KUBERNETES_MODELS:
            return self.config.kubernetes_models_package
        raise ValueError(f"Domain {domain.value} has no package")

    def classify(self, schema_id: str) -> Dependency:
        """
        Classify a referenced schema id.

        Args:
            schema_id: Normalized schema id

        Returns:
            Dependency with its domain, alias and import path
        """
        domain = self.domain_of(schema_id)
        alias = get_class_name(schema_id, self.config.qualified_class_names)

        if domain is DependencyDomain.LOCAL:
            import_path = self.backend.local_module(alias)
        else:
            import_path = self.backend.external_module(self.package_for(domain), self.backend.schema_path(schema_id))

        return Dependency(
            schema_id=schema_id,
            domain=domain,
            alias=alias,
            import_path=import_path,
        )
