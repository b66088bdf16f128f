"""
Generated type node definitions.

These nodes describe a builder class before it is rendered as source.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ..analyzer.ir_nodes import TargetType, TypeRef

CHECK_REQUIRED_FIELDS_FUNCTION_NAME = "_check_required_fields"
BUILD_FUNCTION_NAME = "build"


@dataclass
class PropertyDef:
    """A private builder attribute holding one field value, ``None`` while unset."""

    name: str = ""
    attribute: str = ""
    type_ref: TypeRef | None = None


@dataclass
class SetterDef:
    """A fluent setter named after its field."""

    name: str = ""
    attribute: str = ""
    parameter_type: TypeRef | None = None
    # Optional fields accept None explicitly
    nullable: bool = False


@dataclass
class RequiredFieldCheck:
    name: str = ""
    attribute: str = ""


@dataclass
class ValidatorDef:
    name: str = CHECK_REQUIRED_FIELDS_FUNCTION_NAME
    checks: list[RequiredFieldCheck] = field(default_factory=list)

    @property
    def required_fields(self) -> list[str]:
        return [check.name for check in self.checks]


@dataclass
class BuildArgument:
    """A keyword argument passed to the target constructor."""

    name: str = ""
    attribute: str = ""
    type_ref: TypeRef | None = None
    # Required values are unwrapped: validation has proven they are set
    unwrap: bool = False


@dataclass
class BuildDef:
    name: str = BUILD_FUNCTION_NAME
    validator_name: str = CHECK_REQUIRED_FIELDS_FUNCTION_NAME
    arguments: list[BuildArgument] = field(default_factory=list)


@dataclass
class GeneratedType:
    """The complete structure of one generated builder."""

    name: str = ""
    target: TargetType | None = None
    properties: list[PropertyDef] = field(default_factory=list)
    setters: list[SetterDef] = field(default_factory=list)
    validator: ValidatorDef = field(default_factory=ValidatorDef)
    build: BuildDef = field(default_factory=BuildDef)

    @property
    def package(self) -> str:
        return self.target.package if self.target else ""

    @property
    def module_name(self) -> str:
        return self.target.builder_module_name if self.target else ""

    def type_refs(self) -> list[TypeRef]:
        """All type references used by properties, setters and build arguments."""
        refs: list[TypeRef] = []
        for prop in self.properties:
            if prop.type_ref is not None:
                refs.append(prop.type_ref)
        for setter in self.setters:
            if setter.parameter_type is not None:
                refs.append(setter.parameter_type)
        for argument in self.build.arguments:
            if argument.type_ref is not None:
                refs.append(argument.type_ref)
        return refs
