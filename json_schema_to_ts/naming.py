"""
Type name normalization.

Schema keys are often acronym-heavy ("VPC", "IPAddress"). TypeScript type
names are emitted in PascalCase, so all-caps runs are folded to a capital
followed by lowercase letters without touching the rest of the word.
"""

from __future__ import annotations

import re

from .utils import pascal_case, snake_case

# An all-caps run followed by anything that is not a lowercase letter (or the end)
_ACRONYM_RUN = re.compile(r"([A-Z]+)(?:[^a-z]|$)")


def normalize_type_name(type_name: str) -> str:
    """Convert all-caps acronyms to PascalCase.

    Examples:
        "VPC" -> "Vpc"
        "FooBARZooFIGoo" -> "FooBarZooFiGoo"
        "foo" -> "Foo"
        "aB" -> "Ab"

    Idempotent: normalizing an already normalized name returns it unchanged.
    """
    if not type_name:
        return type_name

    # Capitalized first, since a leading capital can start a run ("aB" -> "AB")
    capitalized = type_name[0].upper() + type_name[1:]

    result = capitalized
    for match in _ACRONYM_RUN.finditer(capitalized):
        cap = match.group(1)
        start = match.start(1)
        pascal = cap[0] + cap[1:].lower()
        result = result[:start] + pascal + result[start + len(pascal) :]

    return result


def type_name_from_fqn(fqn: str) -> str:
    """Compose a dotted FQN ("Parent.child.grandchild") into a single type name."""
    return normalize_type_name("".join(pascal_case(segment) for segment in fqn.split(".")))


def enum_member_name(value: str) -> str:
    """Derive an UPPER_SNAKE_CASE enum member identifier from a literal.

    Examples:
        "OK" -> "OK"
        "not-ok" -> "NOT_OK"
        "fooBar baz" -> "FOO_BAR_BAZ"
    """
    slug = re.sub(r"[^a-zA-Z0-9]", "_", value)
    name = "_".join(segment for segment in snake_case(slug).split("_") if segment).upper()
    if not name:
        return "EMPTY"
    if name[0].isdigit():
        return f"VALUE_{name}"
    return name
