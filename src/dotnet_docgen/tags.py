"""
Single XML doc tag rendering.

Turns ``("param", "The value.", {"name": "value"})`` into the physical
lines of ``<param name="value">The value.</param>``. The text is escaped
by the XML serializer; output is never pretty-printed.
"""

from __future__ import annotations

from collections.abc import Mapping
from xml.etree import ElementTree

# Source code inside <code> keeps its leading indentation
CODE_TAG = "code"


def render_xml_tag(
    tag: str,
    content: str,
    attributes: Mapping[str, str] | None = None,
    *,
    allow_empty: bool = False,
) -> list[str]:
    """Render one tag as a list of trimmed physical lines.

    Args:
        tag: Element name
        content: Text content, escaped on serialization
        attributes: Attributes in emission order
        allow_empty: Render ``<tag></tag>`` instead of nothing for empty content

    Returns:
        Lines to emit; empty when ``content`` is empty and ``allow_empty`` is off
    """
    if not content and not allow_empty:
        return []

    element = ElementTree.Element(tag)
    for name, value in (attributes or {}).items():
        element.set(name, value)
    element.text = content

    xml = ElementTree.tostring(element, encoding="unicode", short_empty_elements=False)

    if tag == CODE_TAG:
        return [line.rstrip() for line in xml.split("\n")]
    return [line.strip() for line in xml.split("\n")]
