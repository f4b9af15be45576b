"""
Identifier conversion for the C# target.

Parameter names become lowerCamelCase; names that collide with a C#
keyword get the verbatim-identifier prefix ``@`` (``@class``).
"""

from __future__ import annotations

import re

RESERVED_PREFIX = "@"

# C# reserved keywords (contextual keywords are valid identifiers)
RESERVED_KEYWORDS = frozenset({
    "abstract", "as", "base", "bool", "break", "byte", "case", "catch",
    "char", "checked", "class", "const", "continue", "decimal", "default",
    "delegate", "do", "double", "else", "enum", "event", "explicit",
    "extern", "false", "finally", "fixed", "float", "for", "foreach",
    "goto", "if", "implicit", "in", "int", "interface", "internal", "is",
    "lock", "long", "namespace", "new", "null", "object", "operator", "out",
    "override", "params", "private", "protected", "public", "readonly",
    "ref", "return", "sbyte", "sealed", "short", "sizeof", "stackalloc",
    "static", "string", "struct", "switch", "this", "throw", "true", "try",
    "typeof", "uint", "ulong", "unchecked", "unsafe", "ushort", "using",
    "virtual", "void", "volatile", "while",
})

_WORD_SPLIT = re.compile(r"[^0-9A-Za-z]+")


def capitalize_word(word: str) -> str:
    """Uppercase the first letter, leave the rest untouched."""
    return word[:1].upper() + word[1:]


def camel_case(name: str) -> str:
    """``snake_case``, ``kebab-case`` or ``PascalCase`` to ``lowerCamelCase``."""
    words = [w for w in _WORD_SPLIT.split(name) if w]
    if not words:
        return ""
    head = words[0].lower() if words[0].isupper() else words[0][:1].lower() + words[0][1:]
    return head + "".join(capitalize_word(w) for w in words[1:])


class NameUtils:
    """Name conversion helpers used by the doc generator."""

    def convert_parameter_name(self, name: str) -> str:
        converted = camel_case(name)
        if converted in RESERVED_KEYWORDS:
            return RESERVED_PREFIX + converted
        return converted

    def capitalize_word(self, word: str) -> str:
        return capitalize_word(word)
