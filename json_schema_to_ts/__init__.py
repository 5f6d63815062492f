"""JSON Schema to TypeScript type generator

Translates JSON Schema definitions into TypeScript declarations
(interfaces, enums, primitive unions, maps and arrays), resolving local
$refs and emitting each named type exactly once.
"""

__version__ = "0.1.0"
__author__ = "François Lagunas"

from .code_buffer import CodeBuffer
from .config import TypeGeneratorConfig
from .errors import (
    InvalidEnumSchema,
    InvalidReferenceFormat,
    NameNotNormalized,
    NonStringEnumValue,
    TypeExcluded,
    TypeGenerationError,
    UnknownType,
    UnresolvedReference,
    UnsupportedArrayShape,
)
from .generator import TypeGenerator

__all__ = [
    "TypeGenerator",
    "TypeGeneratorConfig",
    "CodeBuffer",
    "TypeGenerationError",
    "UnknownType",
    "NameNotNormalized",
    "TypeExcluded",
    "UnresolvedReference",
    "UnsupportedArrayShape",
    "InvalidEnumSchema",
    "NonStringEnumValue",
    "InvalidReferenceFormat",
]
