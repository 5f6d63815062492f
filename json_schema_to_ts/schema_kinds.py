"""
Schema classification.

Decides which TypeScript construct a schema node maps to. Rules are tried in
order and the first match wins: structural hints ($ref, unions, arrays, maps,
structs) take priority over a missing or generic "type" keyword.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from typing import Any

PRIMITIVE_TYPES = ("string", "number", "integer", "boolean")


class SchemaKind(str, Enum):
    """The construct a schema node is emitted as."""

    REF = "ref"
    UNION = "union"
    DATE = "date"
    BOOLEAN = "boolean"
    ARRAY = "array"
    ANY = "any"
    NUMERIC = "numeric"
    ENUM_STRING = "enum_string"
    PLAIN_STRING = "plain_string"
    MAP = "map"
    STRUCT = "struct"
    FALLBACK = "fallback"


def union_options(schema: dict[str, Any]) -> list[Any]:
    """Return the oneOf (or else anyOf) branches of a schema."""
    return schema.get("oneOf") or schema.get("anyOf") or []


def is_supported_union_option(option: Any) -> bool:
    return isinstance(option, dict) and isinstance(option.get("type"), str) and option["type"] in PRIMITIVE_TYPES


def is_primitive_union(schema: dict[str, Any]) -> bool:
    """True when every oneOf/anyOf branch is a string, number, integer or boolean."""
    options = union_options(schema)
    return bool(options) and all(is_supported_union_option(option) for option in options)


def is_string_enum(schema: dict[str, Any]) -> bool:
    values = schema.get("enum")
    return isinstance(values, list) and len(values) > 0 and all(isinstance(v, str) for v in values)


def is_map(schema: dict[str, Any]) -> bool:
    return schema.get("properties") is None and isinstance(schema.get("additionalProperties"), dict)


# Ordered (kind, predicate) pairs, first match wins
CLASSIFICATION_RULES: list[tuple[SchemaKind, Callable[[dict[str, Any]], bool]]] = [
    (SchemaKind.REF, lambda s: "$ref" in s),
    (SchemaKind.UNION, is_primitive_union),
    (SchemaKind.DATE, lambda s: s.get("type") == "string" and s.get("format") == "date-time"),
    (SchemaKind.BOOLEAN, lambda s: s.get("type") == "boolean"),
    (SchemaKind.ARRAY, lambda s: s.get("type") == "array"),
    (SchemaKind.ANY, lambda s: s.get("type") in ("any", "null")),
    (SchemaKind.NUMERIC, lambda s: s.get("type") in ("number", "integer")),
    (SchemaKind.ENUM_STRING, lambda s: s.get("type") == "string" and is_string_enum(s)),
    (SchemaKind.PLAIN_STRING, lambda s: s.get("type") == "string"),
    (SchemaKind.MAP, is_map),
    (SchemaKind.STRUCT, lambda s: isinstance(s.get("properties"), dict)),
]


def classify(schema: dict[str, Any]) -> SchemaKind:
    """Classify a schema node into the construct it is emitted as."""
    if not isinstance(schema, dict):
        # Boolean schemas (true/false) carry no structure
        return SchemaKind.FALLBACK
    for kind, matches in CLASSIFICATION_RULES:
        if matches(schema):
            return kind
    return SchemaKind.FALLBACK
