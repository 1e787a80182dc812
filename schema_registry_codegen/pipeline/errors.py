"""
Errors raised by the generator.
"""

from __future__ import annotations


class GenerationError(Exception):
    """Raised when generated output fails validation before it is written.

    Errors in the input schemas are not wrapped: they propagate as the
    TypeError, KeyError or AttributeError raised where the bad value is read.
    """
