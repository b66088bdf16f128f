"""
Utility functions for the builder generator.
"""

import keyword
import re

# Regex pattern to split text into words, handling camelCase and acronym boundaries
_WORD_PATTERN = re.compile(r"[A-Z]+(?=[A-Z][a-z])|[A-Z]?[a-z]+|[A-Z]+|[0-9]+")


def _normalize_separators(text: str) -> str:
    """Normalize separators (underscores, hyphens) to spaces."""
    return text.replace("_", " ").replace("-", " ")


def pascal_to_snake_case(text: str) -> str:
    """Convert PascalCase or camelCase text to snake_case.

    Examples:
        "Person" -> "person"
        "PostalAddress" -> "postal_address"
        "HTTPRequest" -> "http_request"
        "Vector3" -> "vector_3"

    Args:
        text: The text to convert

    Returns:
        snake_case string
    """
    if not text:
        return ""
    words = _WORD_PATTERN.findall(_normalize_separators(text))
    return "_".join(word.lower() for word in words)


def is_valid_qualified_name(name: str) -> bool:
    """Check that every dotted segment of ``name`` is a usable identifier."""
    if not name:
        return False
    return all(part.isidentifier() and not keyword.iskeyword(part) for part in name.split("."))


def split_qualified_name(name: str) -> tuple[str, str]:
    """Split ``pkg.module.Name`` into ``("pkg.module", "Name")``."""
    module, _, simple_name = name.rpartition(".")
    return module, simple_name
