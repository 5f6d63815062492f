"""
Definition registry for $ref resolution.

Maps definition names to their JSON schema. Registering a name twice
overwrites the previous schema; aliases rely on this.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from .errors import InvalidReferenceFormat, UnresolvedReference

DEFINITIONS_PREFIX = "#/definitions/"


class DefinitionRegistry:
    """Name -> schema lookup table (last write wins)."""

    def __init__(self, definitions: dict[str, dict[str, Any]] | None = None):
        self._definitions: dict[str, dict[str, Any]] = {}
        for name, schema in (definitions or {}).items():
            self.define(name, schema)

    def define(self, name: str, schema: dict[str, Any]) -> None:
        """Register (or replace) the schema for `name`. The schema is not validated here."""
        self._definitions[name] = schema

    def alias(self, from_name: str, to_name: str) -> None:
        """Make references to `from_name` resolve as `to_name`."""
        self.define(from_name, {"$ref": f"{DEFINITIONS_PREFIX}{to_name}"})

    def get(self, name: str) -> dict[str, Any] | None:
        return self._definitions.get(name)

    def resolve_ref(self, ref: Any) -> dict[str, Any]:
        """
        Resolve a local $ref to its schema.

        Args:
            ref: The reference string, e.g. "#/definitions/io.k8s.api.core.v1.Pod"

        Returns:
            The referenced schema

        Raises:
            InvalidReferenceFormat: If `ref` is not a local "#/definitions/" pointer
            UnresolvedReference: If nothing is registered under the referenced name
        """
        if not isinstance(ref, str) or not ref.startswith(DEFINITIONS_PREFIX):
            raise InvalidReferenceFormat(ref)

        lookup = ref[len(DEFINITIONS_PREFIX) :]
        found = self._definitions.get(lookup)
        if found is None:
            raise UnresolvedReference(ref, lookup)

        return found

    def __contains__(self, name: object) -> bool:
        return name in self._definitions

    def __iter__(self) -> Iterator[str]:
        return iter(self._definitions)

    def __len__(self) -> int:
        return len(self._definitions)
