"""
Known standard-library type names and their canonical Python equivalents.

Hosts report type names the way their own toolchain spells them: Python
introspection gives ``builtins.str`` or ``typing.List``, JVM extractors give
``java.lang.String``. Names found here are rewritten to the idiomatic Python
spelling; everything else is kept as reported.
"""

from __future__ import annotations

from ..type_shapes import PrimitiveKind

BOXED_PRIMITIVES: dict[PrimitiveKind, str] = {
    PrimitiveKind.BOOLEAN: "bool",
    PrimitiveKind.BYTE: "int",
    PrimitiveKind.SHORT: "int",
    PrimitiveKind.INT: "int",
    PrimitiveKind.LONG: "int",
    PrimitiveKind.CHAR: "str",
    PrimitiveKind.FLOAT: "float",
    PrimitiveKind.DOUBLE: "float",
}

# Generic array construct used for array shapes
ARRAY_TYPE_NAME = "list"

_BUILTINS = {
    f"builtins.{name}": name
    for name in (
        "bool",
        "bytearray",
        "bytes",
        "complex",
        "dict",
        "float",
        "frozenset",
        "int",
        "list",
        "object",
        "set",
        "str",
        "tuple",
        "type",
    )
}

_TYPING_ALIASES = {
    "typing.List": "list",
    "typing.Dict": "dict",
    "typing.Set": "set",
    "typing.FrozenSet": "frozenset",
    "typing.Tuple": "tuple",
    "typing.Type": "type",
    "typing.Text": "str",
    "typing.Sequence": "collections.abc.Sequence",
    "typing.MutableSequence": "collections.abc.MutableSequence",
    "typing.Mapping": "collections.abc.Mapping",
    "typing.MutableMapping": "collections.abc.MutableMapping",
    "typing.Iterable": "collections.abc.Iterable",
    "typing.Iterator": "collections.abc.Iterator",
    "typing.Collection": "collections.abc.Collection",
    "typing.AbstractSet": "collections.abc.Set",
    "typing.DefaultDict": "collections.defaultdict",
    "typing.OrderedDict": "collections.OrderedDict",
    "typing.Deque": "collections.deque",
    "typing.Counter": "collections.Counter",
}

_JAVA = {
    "java.lang.Object": "object",
    "java.lang.String": "str",
    "java.lang.CharSequence": "str",
    "java.lang.Character": "str",
    "java.lang.Boolean": "bool",
    "java.lang.Byte": "int",
    "java.lang.Short": "int",
    "java.lang.Integer": "int",
    "java.lang.Long": "int",
    "java.lang.Float": "float",
    "java.lang.Double": "float",
    "java.math.BigInteger": "int",
    "java.math.BigDecimal": "decimal.Decimal",
    "java.util.Collection": "collections.abc.Collection",
    "java.util.List": "list",
    "java.util.ArrayList": "list",
    "java.util.LinkedList": "list",
    "java.util.Set": "set",
    "java.util.HashSet": "set",
    "java.util.LinkedHashSet": "set",
    "java.util.Map": "dict",
    "java.util.HashMap": "dict",
    "java.util.LinkedHashMap": "dict",
    "java.util.UUID": "uuid.UUID",
    "java.util.Date": "datetime.datetime",
    "java.time.Instant": "datetime.datetime",
    "java.time.LocalDate": "datetime.date",
    "java.time.LocalDateTime": "datetime.datetime",
    "java.time.LocalTime": "datetime.time",
    "java.time.Duration": "datetime.timedelta",
    "java.net.URI": "str",
    "java.nio.file.Path": "pathlib.Path",
}

_KOTLIN = {
    "kotlin.Any": "object",
    "kotlin.String": "str",
    "kotlin.Char": "str",
    "kotlin.Boolean": "bool",
    "kotlin.Byte": "int",
    "kotlin.Short": "int",
    "kotlin.Int": "int",
    "kotlin.Long": "int",
    "kotlin.Float": "float",
    "kotlin.Double": "float",
    "kotlin.Array": "list",
    "kotlin.collections.Collection": "collections.abc.Collection",
    "kotlin.collections.List": "list",
    "kotlin.collections.MutableList": "list",
    "kotlin.collections.Set": "set",
    "kotlin.collections.MutableSet": "set",
    "kotlin.collections.Map": "dict",
    "kotlin.collections.MutableMap": "dict",
}

DEFAULT_KNOWN_TYPES: dict[str, str] = {**_BUILTINS, **_TYPING_ALIASES, **_JAVA, **_KOTLIN}


def build_known_types(overrides: dict[str, str] | None = None) -> dict[str, str]:
    """Return the default table with ``overrides`` merged on top."""
    known_types = dict(DEFAULT_KNOWN_TYPES)
    if overrides:
        known_types.update(overrides)
    return known_types
