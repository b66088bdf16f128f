"""
Python rendering backend.

Renders generated builders as Python modules.
"""

from __future__ import annotations

import collections
import sys
from typing import Any

from ..analyzer.ir_nodes import TypeRef
from ..assembler.nodes import BuildArgument, GeneratedType
from ..config import GeneratorConfig
from .base import CodeBackend

FUTURE_MODULE = "__future__"


class PythonBackend(CodeBackend):
    """Python rendering backend."""

    TEMPLATE_LANG = "python"
    FILE_EXTENSION = "py"

    def __init__(self, config: GeneratorConfig):
        super().__init__(config)
        self.python_imports: set[tuple[str, str]] = set()
        self.module_imports: set[str] = set()
        self.type_names: dict[str, str] = {}

    def generate(self, generated: GeneratedType) -> str:
        """Render Python source for one builder."""
        self.python_imports = set()
        self.module_imports = set()
        self.type_names = self._plan_type_names(generated)

        target = generated.target
        if self.config.use_future_annotations:
            self.python_imports.add((FUTURE_MODULE, "annotations"))
        self.python_imports.add((target.module, target.name))

        properties = [
            {"attribute": prop.attribute, "type": self.translate_type(prop.type_ref, nullable=True)}
            for prop in generated.properties
        ]
        setters = [
            {
                "name": setter.name,
                "attribute": setter.attribute,
                "type": self.translate_type(setter.parameter_type, nullable=setter.nullable),
            }
            for setter in generated.setters
        ]
        arguments = [{"name": arg.name, "value": self._argument_value(arg)} for arg in generated.build.arguments]
        checks = [{"name": check.name, "attribute": check.attribute} for check in generated.validator.checks]

        if checks:
            self.python_imports.add((self.config.validation_error_module, "ValidationError"))

        context: dict[str, Any] = {
            "generation_comment": self._generate_command_comment(),
            "import_groups": self._assemble_imports(),
            "BUILDER_NAME": generated.name,
            # Setters annotate with the builder itself, undefined while its class body runs
            "BUILDER_TYPE": generated.name if self.config.use_future_annotations else f'"{generated.name}"',
            "TARGET_NAME": target.name,
            "BUILD_NAME": generated.build.name,
            "VALIDATOR_NAME": generated.validator.name,
            "properties": properties,
            "setters": setters,
            "arguments": arguments,
            "checks": checks,
        }
        return self.builder_template.render(context)

    def translate_type(self, type_ref: TypeRef, nullable: bool = False) -> str:
        result = self.type_names.get(type_ref.name, type_ref.name)
        if type_ref.args:
            result = f"{result}[{', '.join(self.translate_type(arg) for arg in type_ref.args)}]"
        if nullable:
            result = f"{result} | None"
        return result

    def _argument_value(self, argument: BuildArgument) -> str:
        value = f"self.{argument.attribute}"
        if not argument.unwrap:
            return value
        self.python_imports.add(("typing", "cast"))
        return f'cast("{self.translate_type(argument.type_ref)}", {value})'

    def _plan_type_names(self, generated: GeneratedType) -> dict[str, str]:
        """Decide how each dotted type name is spelled and imported.

        Names are imported with ``from module import Name`` unless their
        simple name is claimed by another module, by the target or by a
        generated helper; those fall back to ``import module``.
        """
        target = generated.target
        claimed = {
            target.name: target.qualified_name,
            generated.name: "",
            "ValidationError": f"{self.config.validation_error_module}.ValidationError",
            "cast": "typing.cast",
        }

        modules_by_simple_name: dict[str, set[str]] = collections.defaultdict(set)
        qualified_names: set[str] = set()
        for type_ref in generated.type_refs():
            for ref in type_ref.walk():
                if ref.module:
                    qualified_names.add(ref.name)
                    modules_by_simple_name[ref.simple_name].add(ref.name)

        names: dict[str, str] = {}
        for qualified_name in sorted(qualified_names):
            module, _, simple_name = qualified_name.rpartition(".")
            owner = claimed.get(simple_name, qualified_name)
            if len(modules_by_simple_name[simple_name]) == 1 and owner == qualified_name:
                self.python_imports.add((module, simple_name))
                names[qualified_name] = simple_name
            else:
                self.module_imports.add(module)
                names[qualified_name] = qualified_name
        return names

    def _assemble_imports(self) -> list[list[str]]:
        """Group imports as future, standard library, then everything else."""
        from_imports: dict[str, set[str]] = collections.defaultdict(set)
        for module, name in self.python_imports:
            from_imports[module].add(name)

        groups: dict[str, list[str]] = {"future": [], "stdlib": [], "other": []}

        def section(module: str) -> str:
            if module == FUTURE_MODULE:
                return "future"
            if module.partition(".")[0] in sys.stdlib_module_names:
                return "stdlib"
            return "other"

        for module in sorted(self.module_imports):
            groups[section(module)].append(f"import {module}")
        for module in sorted(from_imports):
            groups[section(module)].append(f"from {module} import {', '.join(sorted(from_imports[module]))}")

        return [lines for lines in groups.values() if lines]
