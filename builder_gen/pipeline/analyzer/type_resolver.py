"""
Type resolver.

Maps a host-reported type shape to the canonical type reference used in
generated builders.
"""

from __future__ import annotations

from collections.abc import Mapping

from ...utils import is_valid_qualified_name
from ..errors import TypeResolutionError
from ..type_shapes import ArrayShape, DeclaredShape, PrimitiveShape, TypeShape
from .ir_nodes import TypeRef
from .known_types import ARRAY_TYPE_NAME, BOXED_PRIMITIVES, DEFAULT_KNOWN_TYPES


def generic_array(element: TypeRef) -> TypeRef:
    """Reference to the generic array construct holding ``element``."""
    return TypeRef(ARRAY_TYPE_NAME, (element,))


class TypeResolver:
    """Resolves type shapes into canonical type references."""

    def __init__(self, known_types: Mapping[str, str] | None = None):
        """
        Initialize the resolver.

        Args:
            known_types: Mapping from host type names to canonical Python
                names. Defaults to the built-in standard-library table.
        """
        self.known_types = DEFAULT_KNOWN_TYPES if known_types is None else known_types
        self._cache: dict[TypeShape, TypeRef] = {}

    def resolve(self, shape: TypeShape) -> TypeRef:
        """
        Resolve a type shape.

        Args:
            shape: The shape to resolve

        Returns:
            The canonical type reference. Primitives come back boxed, arrays
            as ``list[T]`` and declared types canonicalized where known.

        Raises:
            TypeResolutionError: If a declared name is not a dotted identifier
        """
        cached = self._cache.get(shape)
        if cached is not None:
            return cached

        match shape:
            case PrimitiveShape(kind=kind):
                resolved = TypeRef(BOXED_PRIMITIVES[kind])
            case ArrayShape(element=element):
                resolved = generic_array(self.resolve(element))
            case DeclaredShape(qualified_name=qualified_name, type_arguments=type_arguments):
                resolved = TypeRef(
                    self.canonical_name(qualified_name),
                    tuple(self.resolve(arg) for arg in type_arguments),
                )
            case _:
                raise TypeResolutionError(f"Unsupported type shape: {shape!r}")

        self._cache[shape] = resolved
        return resolved

    def canonical_name(self, qualified_name: str) -> str:
        """Return the canonical spelling of ``qualified_name``.

        Unknown names are returned unchanged: they usually live next to the
        target class and have no standard-library equivalent.
        """
        known = self.known_types.get(qualified_name)
        if known is not None:
            return known
        if not is_valid_qualified_name(qualified_name):
            raise TypeResolutionError(f"Invalid type name: {qualified_name!r}")
        return qualified_name
