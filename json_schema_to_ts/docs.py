"""
JSDoc comment blocks for generated declarations.
"""

from __future__ import annotations

import re

from .code_buffer import CodeBuffer

# "Defaults to X", "Default is X", ...
_DEFAULT_PATTERN = re.compile(r"Defaults?\W+(to|is)\W+(.+)")


def escape_comment(text: str) -> str:
    """Prevent `text` from closing the surrounding /** */ comment."""
    return text.replace("*/", "_/")


def extract_default(description: str) -> str | None:
    """Return X from a "Defaults to X" / "Default is X" description, if any."""
    match = _DEFAULT_PATTERN.search(description)
    return match.group(2) if match else None


def emit_description(
    code: CodeBuffer,
    fqn: str,
    description: str | None = None,
    annotations: dict[str, str] | None = None,
) -> None:
    """
    Write a documentation block for a declaration or a field.

    Args:
        code: The code buffer to write into
        fqn: Schema location, written as the @schema annotation
        description: Free-text description from the schema
        annotations: Extra @key value annotations
    """
    annotations = dict(annotations or {})

    code.line("/**")

    if description:
        description = escape_comment(description)
        default = extract_default(description)

        for text in description.splitlines():
            code.line(f" * {text}".rstrip())
        if default:
            annotations["default"] = default

        code.line(" *")

    annotations["schema"] = escape_comment(fqn)

    for key, value in annotations.items():
        code.line(f" * @{key} {value}")

    code.line(" */")
