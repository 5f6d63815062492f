"""
Errors raised while mapping JSON schemas to TypeScript types.
"""

from __future__ import annotations


class TypeGenerationError(Exception):
    """Base class for all type generation failures."""

    pass


class UnknownType(TypeGenerationError):
    """Raised when a type is requested that has no schema definition."""

    def __init__(self, type_name: str):
        super().__init__(f"unable to find schema definition for {type_name}")
        self.type_name = type_name


class NameNotNormalized(TypeGenerationError):
    """Raised when a caller passes a type name that is not normalized."""

    def __init__(self, type_name: str, expected: str):
        super().__init__(f"{type_name} must be normalized before calling emit_type (expected {expected})")
        self.type_name = type_name
        self.expected = expected


class TypeExcluded(TypeGenerationError):
    """Raised when a type FQN matches one of the exclusion patterns."""

    def __init__(self, fqn: str, pattern: str):
        super().__init__(f"Type {fqn} cannot be added since it matches the exclusion pattern {pattern!r}")
        self.fqn = fqn
        self.pattern = pattern


class InvalidReferenceFormat(TypeGenerationError):
    """Raised for a $ref that is not a local "#/definitions/..." pointer."""

    def __init__(self, ref: object):
        super().__init__(f"invalid $ref {ref!r}, expecting a local reference")
        self.ref = ref


class UnresolvedReference(TypeGenerationError):
    """Raised when a $ref points at a definition that is not registered."""

    def __init__(self, ref: str, lookup: str):
        super().__init__(f'unable to find a definition for the $ref "{lookup}"')
        self.ref = ref
        self.lookup = lookup


class UnsupportedArrayShape(TypeGenerationError):
    """Raised for arrays without a single object-valued "items" schema (e.g. tuples)."""

    def __init__(self, type_name: str, items: object):
        super().__init__(f"unsupported array type for {type_name}: items={items!r}")
        self.type_name = type_name
        self.items = items


class InvalidEnumSchema(TypeGenerationError):
    """Raised when an enum schema is empty or not string-typed."""

    def __init__(self, type_name: str, reason: str):
        super().__init__(f"{type_name} is not a valid enum: {reason}")
        self.type_name = type_name
        self.reason = reason


class NonStringEnumValue(InvalidEnumSchema):
    """Raised when an enum member is not a string."""

    def __init__(self, type_name: str, value: object):
        super().__init__(type_name, f"can only generate enums for string values, got {value!r}")
        self.value = value
