"""
Case conversion helpers for JSON Schema to TypeScript generator.
"""

import re

# Regex pattern to split text into words, handling camelCase boundaries
_WORD_PATTERN = re.compile(r"[a-z]+|[A-Z][a-z]*|[0-9]+")

# Same as above, but keeps all-caps acronyms together ("URLPath" -> "URL", "Path")
_ACRONYM_WORD_PATTERN = re.compile(r"[A-Z]+(?![a-z])|[A-Z]?[a-z]+|[0-9]+")


def _normalize_separators(text: str) -> str:
    """Normalize separators (underscores, hyphens, dots) to spaces."""
    return text.replace("_", " ").replace("-", " ").replace(".", " ")


def _split_into_words(text: str) -> list[str]:
    """Split text into words, handling camelCase boundaries."""
    return _WORD_PATTERN.findall(text)


def _capitalize_and_join(words: list[str]) -> str:
    """Capitalize each word and join them together."""
    return "".join(word.capitalize() for word in words if word)


def pascal_case(text: str) -> str:
    """Convert snake_case, camelCase, or space-separated text to PascalCase.

    Examples:
        "first_name" -> "FirstName"
        "actionTemplate" -> "ActionTemplate"
        "first 3 rows" -> "First3Rows"
        "v1" -> "V1"

    Args:
        text: The text to convert (snake_case, camelCase, UPPER_SNAKE_CASE, or space-separated)

    Returns:
        PascalCase string
    """
    if not text:
        return ""
    normalized = _normalize_separators(text)
    words = _split_into_words(normalized)
    return _capitalize_and_join(words)


def camel_case(text: str) -> str:
    """Convert text to camelCase, keeping acronyms as a single word.

    Examples:
        "FooBar" -> "fooBar"
        "ABC" -> "abc"
        "URLPath" -> "urlPath"
        "Foo-Bar" -> "fooBar"
    """
    words = _ACRONYM_WORD_PATTERN.findall(_normalize_separators(text))
    if not words:
        return ""
    return words[0].lower() + _capitalize_and_join(words[1:])


def snake_case(text: str) -> str:
    """Convert text to lower snake_case.

    Examples:
        "notOk" -> "not_ok"
        "HTTPServer" -> "http_server"
        "not-ok" -> "not_ok"
    """
    words = _ACRONYM_WORD_PATTERN.findall(_normalize_separators(text))
    return "_".join(word.lower() for word in words)
