"""NatSpec doc-comment normalization and tag parsing."""

from .normalize import normalize_docblock
from .tags import (
    parse_author,
    parse_contract_tags,
    parse_enum_tags,
    parse_function_tags,
    parse_struct_tags,
    parse_tags,
    parse_variable_tags,
)

__all__ = [
    "normalize_docblock",
    "parse_author",
    "parse_contract_tags",
    "parse_enum_tags",
    "parse_function_tags",
    "parse_struct_tags",
    "parse_tags",
    "parse_variable_tags",
]
