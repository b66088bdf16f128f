"""
Type shape node definitions.

These nodes describe the type of a target field as handed over by a host,
before any ecosystem-specific translation. Shapes are immutable and
hashable so they can be used as cache keys.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class PrimitiveKind(str, Enum):
    """Kinds of primitive (unboxed) types a host can report."""

    BOOLEAN = "boolean"
    BYTE = "byte"
    SHORT = "short"
    INT = "int"
    LONG = "long"
    CHAR = "char"
    FLOAT = "float"
    DOUBLE = "double"


class ElementKind(str, Enum):
    """Kind of a discovered element."""

    CLASS = "class"
    INTERFACE = "interface"
    ENUM = "enum"
    FUNCTION = "function"
    MODULE = "module"
    VARIABLE = "variable"
    OTHER = "other"


@dataclass(frozen=True)
class TypeShape:
    """Base class for all type shapes."""


@dataclass(frozen=True)
class PrimitiveShape(TypeShape):
    """A primitive type such as ``int`` or ``boolean``."""

    kind: PrimitiveKind


@dataclass(frozen=True)
class ArrayShape(TypeShape):
    """An array with exactly one element shape."""

    element: TypeShape


@dataclass(frozen=True)
class DeclaredShape(TypeShape):
    """A declared (class) type, optionally parameterized."""

    qualified_name: str
    type_arguments: tuple[TypeShape, ...] = ()

    @property
    def is_generic(self) -> bool:
        return bool(self.type_arguments)


@dataclass(frozen=True)
class FieldElement:
    """A field as extracted from host metadata, before classification."""

    name: str
    declared_type: TypeShape
    markers: frozenset[str] = frozenset()
