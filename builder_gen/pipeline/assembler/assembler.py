"""
Builder model assembler.

Turns a target and its classified fields into the structure of the
generated builder.
"""

from __future__ import annotations

from collections.abc import Sequence

from ..analyzer.ir_nodes import BuilderModel, FieldDescriptor, TargetType
from ..analyzer.type_resolver import TypeResolver
from .nodes import (
    BUILD_FUNCTION_NAME,
    CHECK_REQUIRED_FIELDS_FUNCTION_NAME,
    BuildArgument,
    BuildDef,
    GeneratedType,
    PropertyDef,
    RequiredFieldCheck,
    SetterDef,
    ValidatorDef,
)

# Field names that would shadow members of the generated builder
RESERVED_MEMBER_NAMES = frozenset({BUILD_FUNCTION_NAME, CHECK_REQUIRED_FIELDS_FUNCTION_NAME})


def attribute_name(field_name: str) -> str:
    return f"_{field_name}"


class BuilderAssembler:
    """Assembles ``GeneratedType`` instances.

    Field order is preserved everywhere: it is the order of the properties,
    the setters, the validator checks and the constructor arguments.
    """

    def __init__(self, resolver: TypeResolver | None = None):
        self.resolver = resolver or TypeResolver()

    def assemble(self, target: TargetType, fields: Sequence[FieldDescriptor]) -> GeneratedType:
        """
        Assemble the builder for ``target``.

        Args:
            target: The class being built
            fields: Classified fields in constructor order

        Returns:
            The generated type
        """
        generated = GeneratedType(name=target.builder_name, target=target)

        for field in fields:
            type_ref = self.resolver.resolve(field.declared_type)
            attribute = attribute_name(field.name)

            generated.properties.append(PropertyDef(name=field.name, attribute=attribute, type_ref=type_ref))
            generated.setters.append(
                SetterDef(
                    name=field.name,
                    attribute=attribute,
                    parameter_type=type_ref,
                    nullable=not field.required,
                )
            )
            if field.required:
                generated.validator.checks.append(RequiredFieldCheck(name=field.name, attribute=attribute))
            generated.build.arguments.append(
                BuildArgument(
                    name=field.name,
                    attribute=attribute,
                    type_ref=type_ref,
                    unwrap=field.required,
                )
            )

        return generated

    def assemble_model(self, model: BuilderModel) -> GeneratedType:
        return self.assemble(model.target_type, model.fields)
