"""
Output backends for generated registration modules.
"""

from __future__ import annotations

from ..config import GeneratorConfig
from .base import RegistryBackend
from .python_backend import PythonBackend
from .typescript_backend import TypeScriptBackend

BACKENDS: dict[str, type[RegistryBackend]] = {
    "typescript": TypeScriptBackend,
    "python": PythonBackend,
}


def create_backend(config: GeneratorConfig) -> RegistryBackend:
    """Instantiate the backend for the configured language."""
    return BACKENDS[config.language](config)


__all__ = [
    "RegistryBackend",
    "TypeScriptBackend",
    "PythonBackend",
    "BACKENDS",
    "create_backend",
]
