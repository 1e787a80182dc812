"""
Writer module.

Writes generated files to disk atomically, validating them first.
"""

from __future__ import annotations

from .atomic_writer import AtomicWriter, validate_content

__all__ = [
    "AtomicWriter",
    "validate_content",
]
