"""
Line-oriented code buffer with block indentation.
"""

from __future__ import annotations


class CodeBuffer:
    """Accumulates lines of source code, tracking the indentation of open blocks."""

    def __init__(self, indent: str = "  "):
        self.indent = indent
        self._lines: list[str] = []
        self._level = 0

    def line(self, text: str = "") -> None:
        """Write a line at the current indentation. Empty lines carry no indentation."""
        if text:
            self._lines.append(self.indent * self._level + text)
        else:
            self._lines.append("")

    def open_block(self, header: str) -> None:
        """Write `header {` and indent the following lines."""
        self.line(f"{header} {{")
        self._level += 1

    def close_block(self, footer: str = "}") -> None:
        if self._level == 0:
            raise ValueError("close_block() called without a matching open_block()")
        self._level -= 1
        self.line(footer)

    def render(self) -> str:
        if not self._lines:
            return ""
        return "\n".join(self._lines) + "\n"
