import ast
from pathlib import Path

import pytest

from builder_gen.pipeline.analyzer import FieldDescriptor, TargetType
from builder_gen.pipeline.assembler import BuilderAssembler
from builder_gen.pipeline.backends import PythonBackend
from builder_gen.pipeline.config import GeneratorConfig
from builder_gen.pipeline.type_shapes import ArrayShape, DeclaredShape, PrimitiveKind, PrimitiveShape

REFERENCE_DIR = Path(__file__).parent / "test_data" / "reference"

STRING = DeclaredShape("java.lang.String")


def render(target, fields, **config):
    config.setdefault("add_generation_comment", False)
    generated = BuilderAssembler().assemble(TargetType(target), fields)
    return PythonBackend(GeneratorConfig(**config)).generate(generated)


def test_person_builder_matches_reference():
    code = render(
        "shop.models.Person",
        [
            FieldDescriptor("name", STRING, True),
            FieldDescriptor("age", PrimitiveShape(PrimitiveKind.INT), True),
            FieldDescriptor("nickname", STRING, False),
        ],
    )
    assert code == (REFERENCE_DIR / "person_builder.py").read_text()


def test_generated_code_parses():
    code = render(
        "shop.models.Order",
        [
            FieldDescriptor("lines", DeclaredShape("java.util.List", (DeclaredShape("shop.models.OrderLine"),)), True),
            FieldDescriptor("scores", ArrayShape(PrimitiveShape(PrimitiveKind.DOUBLE)), False),
            FieldDescriptor("total", DeclaredShape("java.math.BigDecimal"), True),
        ],
    )
    tree = ast.parse(code)
    builder = next(node for node in tree.body if isinstance(node, ast.ClassDef))
    assert builder.name == "OrderBuilder"
    methods = [node.name for node in builder.body if isinstance(node, ast.FunctionDef)]
    assert methods == ["__init__", "lines", "scores", "total", "build", "_check_required_fields"]


def test_imports_are_grouped_and_merged():
    code = render(
        "shop.models.Order",
        [
            FieldDescriptor("lines", DeclaredShape("java.util.List", (DeclaredShape("shop.models.OrderLine"),)), True),
            FieldDescriptor("total", DeclaredShape("java.math.BigDecimal"), True),
            FieldDescriptor("placed", DeclaredShape("java.time.LocalDate"), False),
        ],
    )
    lines = code.splitlines()
    assert lines[:9] == [
        "from __future__ import annotations",
        "",
        "from datetime import date",
        "from decimal import Decimal",
        "from typing import cast",
        "",
        "from builder_gen.runtime import ValidationError",
        "from shop.models import Order, OrderLine",
        "",
    ]
    assert "    def lines(self, value: list[OrderLine]) -> OrderBuilder:" in lines
    assert "    def placed(self, value: date | None) -> OrderBuilder:" in lines
    assert '            total=cast("Decimal", self._total),' in lines


def test_colliding_simple_names_fall_back_to_module_imports():
    code = render(
        "shop.models.Event",
        [
            FieldDescriptor("local", DeclaredShape("shop.calendar.Date"), True),
            FieldDescriptor("remote", DeclaredShape("partner.calendar.Date"), True),
        ],
    )
    assert "import partner.calendar" in code
    assert "import shop.calendar" in code
    assert "from shop.calendar" not in code
    assert "    def local(self, value: shop.calendar.Date) -> EventBuilder:" in code
    assert "    def remote(self, value: partner.calendar.Date) -> EventBuilder:" in code


def test_type_named_like_target_is_not_shadowed():
    code = render("shop.models.Person", [FieldDescriptor("legacy", DeclaredShape("crm.Person"), True)])
    assert "from shop.models import Person" in code
    assert "import crm" in code
    assert "    def legacy(self, value: crm.Person) -> PersonBuilder:" in code


def test_self_referencing_target_imports_once():
    code = render(
        "shop.models.Category",
        [FieldDescriptor("parent", DeclaredShape("shop.models.Category"), False)],
    )
    assert code.count("from shop.models import Category") == 1
    assert "    def parent(self, value: Category | None) -> CategoryBuilder:" in code


def test_bare_names_are_not_imported():
    code = render("shop.models.Order", [FieldDescriptor("line", DeclaredShape("OrderLine"), False)])
    assert "OrderLine" not in "\n".join(line for line in code.splitlines() if line.startswith(("from", "import")))
    assert "    def line(self, value: OrderLine | None) -> OrderBuilder:" in code


def test_no_required_fields_skips_runtime_imports():
    code = render("shop.models.Note", [FieldDescriptor("text", STRING, False)])
    assert "ValidationError" not in code
    assert "cast" not in code
    assert "    def _check_required_fields(self) -> None:\n        pass\n" in code


def test_empty_target():
    code = render("shop.models.Marker", [])
    assert "    def __init__(self) -> None:\n        pass\n" in code
    assert "        return Marker()\n" in code
    ast.parse(code)


def test_generation_comment():
    code = render("shop.models.Note", [FieldDescriptor("text", STRING, False)], add_generation_comment=True)
    assert code.startswith("# Generated by builder_gen v")


def test_without_future_annotations(sample_package):
    sample_package.write_module(
        "geometry",
        """
        from dataclasses import dataclass

        from builder_gen import builder


        @builder
        @dataclass
        class Point:
            x: int
            label: str | None
        """,
    )
    processor, result = sample_package.generate(
        "geometry", GeneratorConfig(add_generation_comment=False, use_future_annotations=False)
    )

    assert not processor.diagnostics.has_errors
    content = result.artifacts[0].content
    assert "__future__" not in content
    assert content.startswith("from typing import cast")
    assert '    def x(self, value: int) -> "PointBuilder":' in content

    PointBuilder = sample_package.import_module("point_builder").PointBuilder
    point = PointBuilder().x(3).label("origin").build()
    assert point == sample_package.import_module("geometry").Point(3, "origin")


def test_custom_validation_error_module():
    code = render("shop.models.Note", [FieldDescriptor("text", STRING, True)], validation_error_module="shop.errors")
    assert "from shop.errors import ValidationError" in code


@pytest.mark.parametrize(
    "shape, expected",
    [
        (PrimitiveShape(PrimitiveKind.BOOLEAN), "bool"),
        (ArrayShape(ArrayShape(PrimitiveShape(PrimitiveKind.BYTE))), "list[list[int]]"),
        (DeclaredShape("java.util.Map", (STRING, DeclaredShape("java.util.UUID"))), "dict[str, UUID]"),
        (DeclaredShape("typing.Union", (STRING, PrimitiveShape(PrimitiveKind.INT))), "Union[str, int]"),
    ],
)
def test_setter_parameter_types(shape, expected):
    code = render("shop.models.Holder", [FieldDescriptor("value", shape, True)])
    assert f"    def value(self, value: {expected}) -> HolderBuilder:" in code
