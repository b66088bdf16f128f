"""
Element interface the processor consumes.

Hosts translate whatever they discover (Python classes, descriptor
entries) into ``TargetElement`` instances. Field extraction is deferred to
``fields()`` so that a failure is confined to the element it belongs to.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from .type_shapes import ElementKind, FieldElement


class TargetElement(ABC):
    """A discovered element marked for builder generation."""

    qualified_name: str = ""
    kind: ElementKind = ElementKind.OTHER

    @property
    def is_type_like(self) -> bool:
        return self.kind is ElementKind.CLASS

    @abstractmethod
    def fields(self) -> list[FieldElement]:
        """
        Extract the element's fields in constructor order.

        Raises:
            ElementShapeError: If a field cannot be described as a type shape
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.qualified_name!r}, kind={self.kind.value})"
