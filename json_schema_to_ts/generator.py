"""
TypeScript type generator for JSON schemas.

Resolves schema nodes to TypeScript type expressions. Named constructs
(interfaces, enums, unions) are queued on the emission scheduler under their
type name and written once by render(); scalars, arrays and maps are returned
inline.
"""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Callable
from typing import Any

from .code_buffer import CodeBuffer
from .declarations import (
    CustomDeclaration,
    EnumDeclaration,
    EnumMember,
    FieldDeclaration,
    StructDeclaration,
    UnionDeclaration,
)
from .errors import (
    InvalidEnumSchema,
    InvalidReferenceFormat,
    NameNotNormalized,
    NonStringEnumValue,
    TypeExcluded,
    UnknownType,
    UnsupportedArrayShape,
)
from .naming import enum_member_name, normalize_type_name, type_name_from_fqn
from .registry import DEFINITIONS_PREFIX, DefinitionRegistry
from .scheduler import EmissionScheduler
from .schema_kinds import SchemaKind, classify, union_options
from .utils import camel_case

logger = logging.getLogger(__name__)

# Kinds that map to a fixed TypeScript type
SCALAR_TYPES = {
    SchemaKind.DATE: "Date",
    SchemaKind.BOOLEAN: "boolean",
    SchemaKind.ANY: "any",
    SchemaKind.NUMERIC: "number",
    SchemaKind.PLAIN_STRING: "string",
    SchemaKind.FALLBACK: "any",
}

ANY_TYPE = "any"

# Kinds queued as a declaration under their own type name
NAMED_KINDS = {SchemaKind.UNION, SchemaKind.ENUM_STRING, SchemaKind.STRUCT}

EXTENSION_PREFIX = "x-"

_IDENTIFIER = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


class TypeGenerator:
    """
    Generates TypeScript types from JSON schemas.

    Args:
        definitions: Schema definitions used to resolve $refs
        exclude: Regular expressions matched against type FQNs; matching types are not generated
    """

    normalize_type_name = staticmethod(normalize_type_name)

    def __init__(
        self,
        definitions: dict[str, dict[str, Any]] | None = None,
        exclude: list[str] | None = None,
    ):
        self.exclude = list(exclude or [])
        self._exclude_patterns = [re.compile(pattern) for pattern in self.exclude]
        self.registry = DefinitionRegistry(definitions)
        self.scheduler = EmissionScheduler()

        # Resolved expression per definition type name
        self._ref_types: dict[str, str] = {}
        # Definitions currently being resolved, with their kind
        self._resolving_refs: dict[str, SchemaKind] = {}

        self._handlers: dict[SchemaKind, Callable[[str, dict[str, Any], str], str]] = {
            SchemaKind.REF: self._type_for_ref,
            SchemaKind.UNION: self._emit_union,
            SchemaKind.ARRAY: self._type_for_array,
            SchemaKind.ENUM_STRING: self._emit_enum,
            SchemaKind.MAP: self._type_for_map,
            SchemaKind.STRUCT: self._emit_struct,
        }

    def add_definition(self, type_name: str, schema: dict[str, Any]) -> None:
        """
        Register a JSON schema definition for a type name. This does not emit
        the type; the definition is resolved when the type is `$ref`ed.
        """
        self.registry.define(type_name, schema)

    def add_alias(self, from_name: str, to_name: str) -> None:
        """
        Make references to `from_name` resolve as `to_name`. The target must
        either be a definition or be emitted as a custom type.
        """
        self.registry.alias(from_name, to_name)

    def emit_type(self, type_name: str, schema: dict[str, Any] | None = None, fqn: str | None = None) -> str:
        """
        Emit a type based on a JSON schema.

        Args:
            type_name: The (normalized) name of the type
            schema: JSON schema. If not specified, it is looked up from the definitions
            fqn: FQN of the type, used for exclusion and documentation (defaults to `type_name`)

        Returns:
            The resolved type expression (not always the same as `type_name`)
        """
        if schema is None:
            schema = self.registry.get(type_name)
            if schema is None:
                raise UnknownType(type_name)

        # Callers expect a type named `type_name`, so it can't be changed here
        normalized = normalize_type_name(type_name)
        if normalized != type_name:
            raise NameNotNormalized(type_name, normalized)

        if fqn is None:
            fqn = type_name
        if fqn.startswith(DEFINITIONS_PREFIX):
            fqn = fqn[len(DEFINITIONS_PREFIX) :]

        pattern = self._matching_exclusion(fqn)
        if pattern is not None:
            raise TypeExcluded(fqn, pattern)

        kind = classify(schema)
        if kind in SCALAR_TYPES:
            if kind == SchemaKind.FALLBACK:
                logger.debug("%s has no structure that can be typed, using %s", fqn, ANY_TYPE)
            return SCALAR_TYPES[kind]

        if not self._is_definition(type_name, schema, fqn):
            return self._handlers[kind](type_name, schema, fqn)

        # A definition resolves to the same expression whether it is requested
        # directly or through a $ref
        if type_name in self._ref_types:
            return self._ref_types[type_name]

        self._resolving_refs[type_name] = kind
        try:
            resolved = self._handlers[kind](type_name, schema, fqn)
        finally:
            del self._resolving_refs[type_name]

        self._ref_types[type_name] = resolved
        return resolved

    def emit_custom_type(self, type_name: str, emitter: Callable[[CodeBuffer], None]) -> None:
        """
        Register a hand-written declaration. Replaces a queued declaration of
        the same name; does nothing if the type was already rendered.

        Args:
            type_name: The name of the type emitted by `emitter`
            emitter: Called with the code buffer to write the declaration
        """
        self.scheduler.register(CustomDeclaration(name=type_name, fqn=type_name, emitter=emitter), replace=True)

    def render(self, indent: str = "  ") -> str:
        """Render all emitted types to a string."""
        code = CodeBuffer(indent)
        self.render_to_code(code)
        return code.render()

    def render_to_code(self, code: CodeBuffer) -> None:
        """Write all emitted types into an existing code buffer."""
        self.scheduler.drain(code)

    def is_excluded(self, fqn: str) -> bool:
        """True if `fqn` matches one of the exclusion patterns."""
        return self._matching_exclusion(fqn) is not None

    def _is_definition(self, type_name: str, schema: dict[str, Any], fqn: str) -> bool:
        """True if `schema` is the registered definition `fqn`, emitted under its derived name."""
        return self.registry.get(fqn) is schema and normalize_type_name(fqn.split(".")[-1]) == type_name

    def _matching_exclusion(self, fqn: str) -> str | None:
        for pattern in self._exclude_patterns:
            if pattern.search(fqn):
                return pattern.pattern
        return None

    def _type_for_property(self, fqn: str, schema: dict[str, Any], name_seed: str | None = None) -> str:
        subtype = type_name_from_fqn(fqn if name_seed is None else name_seed)
        return self.emit_type(subtype, schema, fqn)

    def _type_for_ref(self, type_name: str, schema: dict[str, Any], fqn: str) -> str:
        ref = schema["$ref"]
        if not isinstance(ref, str) or not ref.startswith(DEFINITIONS_PREFIX):
            raise InvalidReferenceFormat(ref)

        path = ref[len(DEFINITIONS_PREFIX) :]
        if self._matching_exclusion(ref) is not None or self._matching_exclusion(path) is not None:
            logger.debug("%s references excluded type %s, using %s", fqn, path, ANY_TYPE)
            return ANY_TYPE

        ref_type_name = normalize_type_name(path.split(".")[-1])

        if ref_type_name in self._ref_types:
            return self._ref_types[ref_type_name]

        resolving_kind = self._resolving_refs.get(ref_type_name)
        if resolving_kind is not None and resolving_kind not in NAMED_KINDS:
            # Cycle that doesn't go through a named declaration (e.g. a map of itself).
            # A declaration queued under this name would be an item type, not the definition.
            logger.warning("%s is recursive without a named declaration, using %s", ref, ANY_TYPE)
            return ANY_TYPE

        # Already emitted under this name
        if self.scheduler.is_known(ref_type_name):
            return ref_type_name

        return self.emit_type(ref_type_name, self.registry.resolve_ref(ref), ref)

    def _type_for_array(self, type_name: str, schema: dict[str, Any], fqn: str) -> str:
        items = schema.get("items")
        if not isinstance(items, dict):
            raise UnsupportedArrayShape(type_name, items)

        return f"{self._type_for_property(fqn, items, name_seed=type_name)}[]"

    def _type_for_map(self, type_name: str, schema: dict[str, Any], fqn: str) -> str:
        value_type = self._type_for_property(fqn, schema["additionalProperties"], name_seed=type_name)
        return f"{{ [key: string]: {value_type} }}"

    def _emit_union(self, type_name: str, schema: dict[str, Any], fqn: str) -> str:
        if self.scheduler.is_known(type_name):
            return type_name

        options: list[str] = []
        for option in union_options(schema):
            ts_type = "number" if option["type"] == "integer" else option["type"]
            if ts_type not in options:
                options.append(ts_type)

        self.scheduler.register(
            UnionDeclaration(name=type_name, fqn=fqn, description=schema.get("description"), options=options)
        )
        return type_name

    def _emit_enum(self, type_name: str, schema: dict[str, Any], fqn: str) -> str:
        if self.scheduler.is_known(type_name):
            return type_name

        values = schema.get("enum")
        if not isinstance(values, list) or not values:
            raise InvalidEnumSchema(type_name, "definition is not an enum")

        if schema.get("type") != "string":
            raise InvalidEnumSchema(type_name, "can only generate string enums")

        members: list[EnumMember] = []
        used_names: set[str] = set()
        seen_values: set[str] = set()
        for value in values:
            if not isinstance(value, str):
                raise NonStringEnumValue(type_name, value)
            if value in seen_values:
                continue
            seen_values.add(value)

            member_name = enum_member_name(value)
            if member_name in used_names:
                base, suffix = member_name, 2
                while f"{base}_{suffix}" in used_names:
                    suffix += 1
                member_name = f"{base}_{suffix}"
                logger.warning("%s: enum value %r collides with %s, emitted as %s", fqn, value, base, member_name)
            used_names.add(member_name)
            members.append(EnumMember(name=member_name, value=value))

        self.scheduler.register(
            EnumDeclaration(name=type_name, fqn=fqn, description=schema.get("description"), members=members)
        )
        return type_name

    def _emit_struct(self, type_name: str, schema: dict[str, Any], fqn: str) -> str:
        if self.scheduler.is_known(type_name):
            return type_name

        # Queued before resolving fields so that references back to this type terminate
        declaration = StructDeclaration(name=type_name, fqn=fqn, description=schema.get("description"))
        checkpoint = self.scheduler.checkpoint()
        resolved_count = len(self._ref_types)
        self.scheduler.register(declaration)

        try:
            for prop_name, prop_schema in schema["properties"].items():
                if prop_name.startswith(EXTENSION_PREFIX):
                    continue  # extensions are not supported
                declaration.fields.append(self._build_field(prop_name, prop_schema, fqn, schema))
        except Exception:
            # Anything queued for this struct may refer to it
            self.scheduler.rollback(checkpoint)
            self._ref_types = dict(list(self._ref_types.items())[:resolved_count])
            raise

        return type_name

    def _build_field(
        self,
        prop_name: str,
        prop_schema: dict[str, Any],
        struct_fqn: str,
        struct_schema: dict[str, Any],
    ) -> FieldDeclaration:
        name = prop_name

        if name[:1].isupper():
            name = camel_case(name) or name

        # "$ref", "$schema", ...
        if name.startswith("$"):
            name = name[1:]

        property_type = self._type_for_property(f"{struct_fqn}.{name}", prop_schema)

        required = struct_schema.get("required")
        is_required = isinstance(required, list) and prop_name in required

        # Keys that still aren't identifiers are emitted quoted
        emitted_name = name if _IDENTIFIER.match(name) else json.dumps(name)

        return FieldDeclaration(
            name=emitted_name,
            original_name=prop_name,
            type_expr=property_type,
            is_optional=not is_required,
            fqn=f"{struct_fqn}#{prop_name}",
            description=prop_schema.get("description") if isinstance(prop_schema, dict) else None,
        )
