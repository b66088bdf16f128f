"""
IR (Intermediate Representation) node definitions.

These nodes represent the analyzed targets, ready for builder assembly:
every field is classified and every type is canonical.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ...utils import pascal_to_snake_case, split_qualified_name
from ..type_shapes import TypeShape

BUILDER_SUFFIX = "Builder"


@dataclass(frozen=True)
class TypeRef:
    """A canonical type reference.

    ``name`` is either a builtin (``"str"``), a dotted importable name
    (``"decimal.Decimal"``) or a name kept as reported by the host.
    """

    name: str
    args: tuple[TypeRef, ...] = ()

    @property
    def module(self) -> str:
        """Module to import the type from, empty for builtins and bare names."""
        return split_qualified_name(self.name)[0]

    @property
    def simple_name(self) -> str:
        return split_qualified_name(self.name)[1]

    @property
    def is_generic(self) -> bool:
        return bool(self.args)

    def walk(self):
        """Yield this reference and every nested type argument, depth first."""
        yield self
        for arg in self.args:
            yield from arg.walk()

    def __str__(self) -> str:
        if not self.args:
            return self.name
        return f"{self.name}[{', '.join(str(arg) for arg in self.args)}]"


@dataclass(frozen=True)
class FieldDescriptor:
    """A classified field of a target type."""

    name: str
    declared_type: TypeShape
    required: bool


@dataclass(frozen=True)
class TargetType:
    """The class a builder is generated for, e.g. ``shop.models.Order``."""

    qualified_name: str

    @property
    def name(self) -> str:
        return split_qualified_name(self.qualified_name)[1]

    @property
    def module(self) -> str:
        """Module the target class is imported from."""
        return split_qualified_name(self.qualified_name)[0]

    @property
    def package(self) -> str:
        """Package the generated builder module is placed in."""
        return split_qualified_name(self.module)[0]

    @property
    def builder_name(self) -> str:
        return f"{self.name}{BUILDER_SUFFIX}"

    @property
    def builder_module_name(self) -> str:
        return f"{pascal_to_snake_case(self.name)}_builder"


@dataclass
class BuilderModel:
    """A target together with its ordered, classified fields."""

    target_type: TargetType
    fields: list[FieldDescriptor] = field(default_factory=list)

    @property
    def package_name(self) -> str:
        return self.target_type.package
