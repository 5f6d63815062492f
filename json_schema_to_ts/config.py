"""
Configuration for the TypeScript type generator.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class TypeGeneratorConfig:
    """Configuration options for code generation."""

    # Regular expressions matched against type FQNs; matching types are not generated
    exclude: list[str] = field(default_factory=list)

    # Definition name -> definition name it should resolve as
    aliases: dict[str, str] = field(default_factory=dict)

    # Definitions to emit (empty = every definition, in schema order)
    emit_types: list[str] = field(default_factory=list)

    # Add generation comment at top of file
    add_generation_comment: bool = True

    # Indentation of generated code
    indent: str = "  "

    @staticmethod
    def from_dict(d: dict) -> TypeGeneratorConfig:
        """Create a config from a dictionary."""
        config = TypeGeneratorConfig()
        for k, v in d.items():
            if hasattr(config, k):
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "exclude": self.exclude,
            "aliases": self.aliases,
            "emit_types": self.emit_types,
            "add_generation_comment": self.add_generation_comment,
            "indent": self.indent,
        }
