import logging

import pytest

from builder_gen.pipeline import (
    OUTPUT_ROOT_OPTION,
    AtomicWriter,
    BuilderProcessor,
    DeclaredShape,
    DiagnosticKind,
    ElementKind,
    FieldElement,
    GeneratorConfig,
    OutputMode,
    PrimitiveKind,
    PrimitiveShape,
    ProcessingRound,
    TargetElement,
)
from builder_gen.pipeline.errors import ElementShapeError


class StaticElement(TargetElement):
    """Element with a fixed field list."""

    def __init__(self, qualified_name, fields=(), kind=ElementKind.CLASS):
        self.qualified_name = qualified_name
        self.kind = kind
        self._fields = list(fields)

    def fields(self):
        return list(self._fields)


class BrokenElement(StaticElement):
    def fields(self):
        raise ElementShapeError("Field 'x': unsupported", self.qualified_name)


class FailingWriter(AtomicWriter):
    def write(self, path, content, validate=True):
        raise OSError("disk full")


def person():
    return StaticElement(
        "shop.models.Person",
        [
            FieldElement("name", DeclaredShape("builtins.str")),
            FieldElement("age", PrimitiveShape(PrimitiveKind.INT)),
            FieldElement("nickname", DeclaredShape("builtins.str"), frozenset({"NotNull"})),
        ],
    )


@pytest.fixture
def processor():
    return BuilderProcessor(GeneratorConfig(add_generation_comment=False))


def run(processor, elements, root):
    return processor.process(ProcessingRound(elements, {OUTPUT_ROOT_OPTION: str(root)}))


def test_empty_round_is_not_handled(processor, tmp_path):
    result = run(processor, [], tmp_path)

    assert not result.handled
    assert result.written == []
    assert not processor.diagnostics.has_errors
    assert [d.message for d in processor.diagnostics.notes] == ["No classes annotated with @builder in this round"]


def test_missing_output_root_is_an_error(processor):
    result = processor.process(ProcessingRound([person()]))

    assert not result.handled
    assert [d.message for d in processor.diagnostics.errors] == [
        "Can't find the target directory for generated builders."
    ]


def test_config_output_root_is_used_without_round_option(tmp_path):
    processor = BuilderProcessor(GeneratorConfig(output_root=str(tmp_path), add_generation_comment=False))
    result = processor.process(ProcessingRound([person()]))

    assert result.handled
    assert result.written == [tmp_path / "shop" / "person_builder.py"]


def test_round_option_overrides_config(tmp_path):
    config = GeneratorConfig(output_root=str(tmp_path / "unused"), add_generation_comment=False)
    processor = BuilderProcessor(config)
    result = run(processor, [person()], tmp_path / "generated")

    assert result.written == [tmp_path / "generated" / "shop" / "person_builder.py"]
    assert not (tmp_path / "unused").exists()


def test_writes_builder_under_package_directory(processor, tmp_path):
    result = run(processor, [person()], tmp_path)

    path = tmp_path / "shop" / "person_builder.py"
    assert result.handled
    assert result.written == [path]
    assert path.read_text() == result.artifacts[0].content
    assert "class PersonBuilder:" in path.read_text()


def test_notes_fields_and_written_builder(processor, tmp_path):
    run(processor, [person()], tmp_path)

    messages = [(d.element, d.message) for d in processor.diagnostics.notes]
    assert ("shop.models.Person", "Adding field: name") in messages
    assert ("shop.models.Person", "Adding field: age") in messages
    assert ("shop.models.Person", "Adding field: nickname") in messages
    assert ("shop.models.Person", "Writing shop.PersonBuilder") in messages


def test_non_class_element_does_not_stop_round(processor, tmp_path):
    function = StaticElement("shop.models.make_person", kind=ElementKind.FUNCTION)
    result = run(processor, [function, person()], tmp_path)

    assert result.handled
    assert result.failed == ["shop.models.make_person"]
    assert result.written == [tmp_path / "shop" / "person_builder.py"]
    [error] = processor.diagnostics.errors
    assert error.element == "shop.models.make_person"
    assert error.message == "Invalid element type, expected a class"


@pytest.mark.parametrize("kind", [ElementKind.INTERFACE, ElementKind.ENUM, ElementKind.VARIABLE, ElementKind.OTHER])
def test_only_classes_get_builders(processor, tmp_path, kind):
    result = run(processor, [StaticElement("shop.models.Thing", kind=kind)], tmp_path)

    assert result.failed == ["shop.models.Thing"]
    assert result.written == []


def test_field_errors_are_confined_to_their_element(processor, tmp_path):
    result = run(processor, [BrokenElement("shop.models.Broken"), person()], tmp_path)

    assert result.failed == ["shop.models.Broken"]
    assert len(result.written) == 1
    assert processor.diagnostics.errors[0].message == "Field 'x': unsupported"


def test_unqualified_name_is_rejected(processor, tmp_path):
    result = run(processor, [StaticElement("Person")], tmp_path)

    assert result.failed == ["Person"]
    assert "module-qualified" in processor.diagnostics.errors[0].message


def test_reserved_field_name_is_rejected(processor, tmp_path):
    element = StaticElement("shop.models.Job", [FieldElement("build", DeclaredShape("builtins.str"))])
    result = run(processor, [element], tmp_path)

    assert result.failed == ["shop.models.Job"]
    assert "build" in processor.diagnostics.errors[0].message


def test_class_without_fields_gets_a_warning(processor, tmp_path):
    result = run(processor, [StaticElement("shop.models.Marker")], tmp_path)

    assert result.written == [tmp_path / "shop" / "marker_builder.py"]
    kinds = [d.kind for d in processor.diagnostics.messages if d.element == "shop.models.Marker"]
    assert DiagnosticKind.WARNING in kinds


def test_write_failure_is_reported(tmp_path):
    processor = BuilderProcessor(GeneratorConfig(add_generation_comment=False), writer=FailingWriter())
    result = run(processor, [person()], tmp_path)

    assert result.handled
    assert result.failed == ["shop.models.Person"]
    assert result.written == []
    assert processor.diagnostics.errors[0].message == "Could not write builder: disk full"


def test_force_mode_overwrites(processor, tmp_path):
    path = tmp_path / "shop" / "person_builder.py"
    path.parent.mkdir(parents=True)
    path.write_text("stale\n")

    run(processor, [person()], tmp_path)

    assert "class PersonBuilder:" in path.read_text()


def test_error_if_exists_mode_keeps_existing_file(tmp_path):
    config = GeneratorConfig(add_generation_comment=False)
    config.output.mode = OutputMode.ERROR_IF_EXISTS
    processor = BuilderProcessor(config)
    path = tmp_path / "shop" / "person_builder.py"
    path.parent.mkdir(parents=True)
    path.write_text("kept\n")

    result = run(processor, [person()], tmp_path)

    assert path.read_text() == "kept\n"
    assert result.failed == ["shop.models.Person"]
    assert "already exists" in processor.diagnostics.errors[0].message


def test_regeneration_is_deterministic(processor, tmp_path):
    first = run(processor, [person()], tmp_path).artifacts[0].content
    second = run(processor, [person()], tmp_path).artifacts[0].content
    assert first == second


def test_diagnostics_are_logged(processor, tmp_path, caplog):
    with caplog.at_level(logging.INFO, logger="builder_gen"):
        run(processor, [StaticElement("shop.models.make", kind=ElementKind.FUNCTION)], tmp_path)

    assert "error: shop.models.make: Invalid element type, expected a class" in caplog.messages


class CrashingElement(StaticElement):
    def fields(self):
        raise RuntimeError("host exploded")


def test_unexpected_errors_are_confined_to_their_element(processor, tmp_path):
    result = run(processor, [CrashingElement("shop.models.Crash"), person()], tmp_path)

    assert result.failed == ["shop.models.Crash"]
    assert result.written == [tmp_path / "shop" / "person_builder.py"]
    assert processor.diagnostics.errors[0].message == "Unexpected error: RuntimeError: host exploded"


def test_unresolvable_annotations_do_not_stop_round(sample_package):
    module_name = sample_package.write_module(
        "models",
        """
        import typing
        from dataclasses import dataclass

        from builder_gen import builder


        @builder
        @dataclass
        class Malformed:
            x: "list[int"


        @builder
        @dataclass
        class MissingAttribute:
            y: "typing.NoSuchThing"


        @builder
        @dataclass
        class Good:
            z: str
        """,
    )

    processor, result = sample_package.generate("models")

    assert result.failed == [f"{module_name}.Malformed", f"{module_name}.MissingAttribute"]
    assert result.written == [sample_package.path / "good_builder.py"]
    assert all("Cannot resolve annotations" in d.message for d in processor.diagnostics.errors)


def test_builders_sharing_a_path_are_reported(processor, tmp_path):
    first = StaticElement("shop.a.Order", [FieldElement("id", PrimitiveShape(PrimitiveKind.LONG))])
    second = StaticElement("shop.b.Order", [FieldElement("code", DeclaredShape("builtins.str"))])

    result = run(processor, [first, second], tmp_path)

    path = tmp_path / "shop" / "order_builder.py"
    assert result.written == [path]
    assert result.failed == ["shop.b.Order"]
    [error] = processor.diagnostics.errors
    assert error.element == "shop.b.Order"
    assert "shop.a.Order" in error.message
    assert "id=cast(" in path.read_text()


def test_output_root_that_is_a_file_is_an_error(processor, tmp_path):
    output_root = tmp_path / "generated"
    output_root.write_text("not a directory\n")

    result = run(processor, [person()], output_root)

    assert not result.handled
    assert result.written == []
    [error] = processor.diagnostics.errors
    assert error.message.startswith("Can't create the target directory for generated builders:")


@pytest.mark.parametrize("name", ["__init__", "__class__", "class", "not-a-name", "2nd", ""])
def test_unusable_field_names_are_rejected(processor, tmp_path, name):
    element = StaticElement("shop.models.Job", [FieldElement(name, DeclaredShape("builtins.str"))])

    result = run(processor, [element, person()], tmp_path)

    assert result.failed == ["shop.models.Job"]
    assert result.written == [tmp_path / "shop" / "person_builder.py"]
    assert "not usable as a builder setter" in processor.diagnostics.errors[0].message
