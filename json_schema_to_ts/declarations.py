"""
Declaration work items and their TypeScript rendering.

Builders in the generator produce these nodes; the emission scheduler queues
them by type name and renders each one exactly once. Nodes hold everything
needed to write the declaration, so they can be inspected before rendering.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from dataclasses import dataclass, field

from .code_buffer import CodeBuffer
from .docs import emit_description, escape_comment


@dataclass
class Declaration:
    """Base class for all queued declarations."""

    name: str = ""
    fqn: str = ""
    description: str | None = None


@dataclass
class FieldDeclaration:
    """A field of a struct (TypeScript interface)."""

    name: str = ""  # Emitted field name
    original_name: str = ""  # Property name in the schema
    type_expr: str = ""
    is_optional: bool = True
    fqn: str = ""  # "<structFqn>#<originalName>", for documentation
    description: str | None = None


@dataclass
class StructDeclaration(Declaration):
    """An object schema with properties -> `export interface`."""

    fields: list[FieldDeclaration] = field(default_factory=list)


@dataclass
class EnumMember:
    """A member of a string enum."""

    name: str = ""  # UPPER_SNAKE_CASE identifier
    value: str = ""  # Original literal


@dataclass
class EnumDeclaration(Declaration):
    """A string schema with an enum -> `export enum`."""

    members: list[EnumMember] = field(default_factory=list)


@dataclass
class UnionDeclaration(Declaration):
    """A oneOf/anyOf of primitives -> wrapper class with one factory per option."""

    options: list[str] = field(default_factory=list)  # Distinct TypeScript primitive names


@dataclass
class CustomDeclaration(Declaration):
    """A hand-written declaration, emitted by a caller-supplied function."""

    emitter: Callable[[CodeBuffer], None] | None = None


def _render_struct(decl: StructDeclaration, code: CodeBuffer) -> None:
    emit_description(code, decl.fqn, decl.description)
    code.open_block(f"export interface {decl.name}")

    for f in decl.fields:
        emit_description(code, f.fqn, f.description)
        optional = "?" if f.is_optional else ""
        code.line(f"readonly {f.name}{optional}: {f.type_expr};")
        code.line()

    code.close_block()


def _render_enum(decl: EnumDeclaration, code: CodeBuffer) -> None:
    emit_description(code, decl.fqn, decl.description)
    code.open_block(f"export enum {decl.name}")

    for member in decl.members:
        code.line(f"/** {escape_comment(member.value)} */")
        code.line(f"{member.name} = {json.dumps(member.value, ensure_ascii=False)},")

    code.close_block()


def _render_union(decl: UnionDeclaration, code: CodeBuffer) -> None:
    emit_description(code, decl.fqn, decl.description)
    code.open_block(f"export class {decl.name}")

    for option in decl.options:
        method_name = "from" + option[0].upper() + option[1:]
        code.open_block(f"public static {method_name}(value: {option}): {decl.name}")
        code.line(f"return new {decl.name}(value);")
        code.close_block()

    code.open_block("private constructor(value: any)")
    code.line("Object.defineProperty(this, 'resolve', { value: () => value });")
    code.close_block()

    code.close_block()


def render_declaration(decl: Declaration, code: CodeBuffer) -> None:
    """Write a single declaration into `code`."""
    if isinstance(decl, StructDeclaration):
        _render_struct(decl, code)
    elif isinstance(decl, EnumDeclaration):
        _render_enum(decl, code)
    elif isinstance(decl, UnionDeclaration):
        _render_union(decl, code)
    elif isinstance(decl, CustomDeclaration):
        if decl.emitter is None:
            raise ValueError(f"custom type {decl.name} has no emitter")
        decl.emitter(code)
    else:
        raise ValueError(f"Unsupported declaration: {type(decl).__name__}")
