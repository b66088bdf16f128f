"""
Writer module.

Persists generated builders under the output root.
"""

from __future__ import annotations

from .atomic_writer import AtomicWriter, validate_python

__all__ = [
    "AtomicWriter",
    "validate_python",
]
