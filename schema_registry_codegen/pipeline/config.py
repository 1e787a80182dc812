"""
Configuration for the schema registry generator.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

LANGUAGES = ("typescript", "python")

# Package defaults per language: (apimachinery, kubernetes-models, register module)
DEFAULT_PACKAGES = {
    "typescript": (
        "@kubernetes-models/apimachinery",
        "kubernetes-models",
        "@kubernetes-models/validate",
    ),
    "python": (
        "kubernetes_models.apimachinery",
        "kubernetes_models",
        "kubernetes_models.validate",
    ),
}


class OutputMode(str, Enum):
    """Behavior when an output file already exists."""

    ERROR_IF_EXISTS = "error"  # Default: raise error if file exists
    FORCE = "force"  # Overwrite


@dataclass
class OutputConfig:
    """Configuration for output file handling.

    Attributes:
        mode: How to handle existing output files
        validate_before_write: Whether to validate code before writing
        atomic_write: Whether to use atomic file writes
    """

    mode: OutputMode = OutputMode.ERROR_IF_EXISTS
    validate_before_write: bool = True
    atomic_write: bool = True


@dataclass
class GeneratorConfig:
    """Configuration options for code generation."""

    # Output language: "typescript" or "python"
    language: str = "typescript"

    # Import io.k8s.apimachinery.* schemas from the apimachinery package
    external_apimachinery: bool = False

    # Import io.k8s.* schemas from the kubernetes-models package
    external_kubernetes_models: bool = False

    # Package roots and registry module; None means the language default
    apimachinery_package: str | None = None
    kubernetes_models_package: str | None = None
    register_module: str | None = None

    # Derive class names from the whole schema id; False uses its last segment
    qualified_class_names: bool = True

    output: OutputConfig = field(default_factory=OutputConfig)

    def __post_init__(self):
        if self.language not in LANGUAGES:
            raise ValueError(f"Language not supported: {self.language}")
        apimachinery, kubernetes_models, register = DEFAULT_PACKAGES[self.language]
        if self.apimachinery_package is None:
            self.apimachinery_package = apimachinery
        if self.kubernetes_models_package is None:
            self.kubernetes_models_package = kubernetes_models
        if self.register_module is None:
            self.register_module = register

    @staticmethod
    def from_dict(d: dict) -> GeneratorConfig:
        """Create a config from a dictionary, ignoring unknown keys."""
        kwargs = {}
        for k, v in d.items():
            if k == "output" and isinstance(v, dict):
                mode = v.get("mode", OutputMode.ERROR_IF_EXISTS)
                if isinstance(mode, str):
                    mode = OutputMode(mode)
                kwargs["output"] = OutputConfig(
                    mode=mode,
                    validate_before_write=v.get("validate_before_write", True),
                    atomic_write=v.get("atomic_write", True),
                )
            elif k in GeneratorConfig.__dataclass_fields__:
                kwargs[k] = v
        return GeneratorConfig(**kwargs)

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "language": self.language,
            "external_apimachinery": self.external_apimachinery,
            "external_kubernetes_models": self.external_kubernetes_models,
            "apimachinery_package": self.apimachinery_package,
            "kubernetes_models_package": self.kubernetes_models_package,
            "register_module": self.register_module,
            "qualified_class_names": self.qualified_class_names,
            "output": {
                "mode": self.output.mode.value,
                "validate_before_write": self.output.validate_before_write,
                "atomic_write": self.output.atomic_write,
            },
        }
