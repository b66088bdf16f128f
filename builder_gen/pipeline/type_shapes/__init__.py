"""
Type shapes module.

Host-agnostic description of target fields and their types.
"""

from __future__ import annotations

from .nodes import (
    ArrayShape,
    DeclaredShape,
    ElementKind,
    FieldElement,
    PrimitiveKind,
    PrimitiveShape,
    TypeShape,
)

__all__ = [
    "TypeShape",
    "PrimitiveShape",
    "PrimitiveKind",
    "ArrayShape",
    "DeclaredShape",
    "FieldElement",
    "ElementKind",
]
