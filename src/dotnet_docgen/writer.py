"""
Append-only line writer shared by everything that emits generated code.

The doc generator only ever calls ``line()``; indentation is owned by the
surrounding code generator.

Examples:
    >>> writer = CodeWriter()
    >>> writer.line("public class Foo")
    >>> with writer.indented():
    ...     writer.line("/// <summary>Bar</summary>")
    >>> writer.lines
    ['public class Foo', '    /// <summary>Bar</summary>']
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager


class CodeWriter:
    """Accumulates output lines in call order.

    Attributes:
        indent_unit: Text prepended once per indentation level
    """

    def __init__(self, indent_unit: str = "    "):
        self.indent_unit = indent_unit
        self._level = 0
        self._lines: list[str] = []

    def line(self, text: str = "") -> None:
        """Append one physical line; blank lines are never indented."""
        if text:
            self._lines.append(self.indent_unit * self._level + text)
        else:
            self._lines.append("")

    def indent(self) -> None:
        self._level += 1

    def unindent(self) -> None:
        if self._level == 0:
            raise ValueError("unindent() called at indentation level 0")
        self._level -= 1

    @contextmanager
    def indented(self) -> Iterator["CodeWriter"]:
        self.indent()
        try:
            yield self
        finally:
            self.unindent()

    @property
    def lines(self) -> list[str]:
        return list(self._lines)

    @property
    def text(self) -> str:
        """All lines joined, with a trailing newline when non-empty."""
        if not self._lines:
            return ""
        return "\n".join(self._lines) + "\n"

    def __len__(self) -> int:
        return len(self._lines)
