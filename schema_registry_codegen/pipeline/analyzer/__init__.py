"""
Analyzer module.

Contains dependency classification and the IR handed to backends.
"""

from __future__ import annotations

from .classifier import DependencyClassifier
from .ir_nodes import Dependency, DependencyDomain, Import, SchemaModule

__all__ = [
    "Dependency",
    "DependencyDomain",
    "Import",
    "SchemaModule",
    "DependencyClassifier",
]
