"""
Doc attribute lines for the remarks section.

Each structured attribute becomes a bold label line followed by a blank
line. The blank line keeps consumers that re-wrap paragraphs from merging
neighbouring attributes into one.

Order:
    default, stability (experimental/deprecated only), see, subclassable,
    then custom tags in insertion order.

Examples:
    >>> render_doc_attributes(Docs(default="0", stability=Stability.DEPRECATED))
    ['**Default**: 0', '', '**Deprecated**: Deprecated', '']
"""

from __future__ import annotations

from dotnet_docgen.model import Docs, Stability
from dotnet_docgen.naming import capitalize_word

# Custom tag whose value carries one trailing space so existing output stays byte-stable
LINK_TAG = "link"

_MENTIONED_STABILITIES = frozenset({Stability.DEPRECATED, Stability.EXPERIMENTAL})


def should_mention_stability(stability: Stability) -> bool:
    """Stable and external are implied; only call out the others."""
    return stability in _MENTIONED_STABILITIES


def attribute_lines(label: str, contents: str) -> list[str]:
    """``**Label**: first line``, remaining lines verbatim, then a blank line."""
    first, *rest = contents.split("\n")
    return [f"**{capitalize_word(label)}**: {first}", *rest, ""]


def render_doc_attributes(docs: Docs) -> list[str]:
    """All attribute lines of ``docs``, in emission order."""
    lines: list[str] = []

    if docs.default:
        lines.extend(attribute_lines("default", docs.default))
    if docs.stability and should_mention_stability(docs.stability):
        stability = capitalize_word(docs.stability.value)
        lines.extend(attribute_lines(stability, stability))
    if docs.see:
        lines.extend(attribute_lines("see", docs.see))
    if docs.subclassable:
        lines.extend(attribute_lines("subclassable", ""))
    for key, value in docs.custom.items():
        extra_space = " " if key == LINK_TAG else ""
        lines.extend(attribute_lines(key, value + extra_space))

    return lines
