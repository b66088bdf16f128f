"""
Assembler module.

Builds the structure of generated builders from analyzed targets.
"""

from __future__ import annotations

from .assembler import RESERVED_MEMBER_NAMES, BuilderAssembler, attribute_name
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

__all__ = [
    "BuilderAssembler",
    "attribute_name",
    "RESERVED_MEMBER_NAMES",
    "GeneratedType",
    "PropertyDef",
    "SetterDef",
    "ValidatorDef",
    "RequiredFieldCheck",
    "BuildDef",
    "BuildArgument",
    "BUILD_FUNCTION_NAME",
    "CHECK_REQUIRED_FIELDS_FUNCTION_NAME",
]
