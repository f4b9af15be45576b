"""
Markdown to C# XML documentation markup.

Python-Markdown turns the text into XHTML; the resulting tree is then
walked and re-rendered in the tag vocabulary understood by C# doc
comments. Raw HTML is not passed through: angle brackets in the text
(``List<string>``, ``<br>``) come out escaped.

Architecture:
    ::

        markdown text
            │  markdown.Markdown(extensions=["fenced_code"]), raw HTML disabled
            ▼
        XHTML fragment ──► ElementTree (wrapped in a synthetic root)
            │
            ▼
        _render_block() per top-level element, joined by blank lines

Mapping:
    ==================  ==========================================
    markdown            XML doc
    ==================  ==========================================
    paragraph           text, blocks separated by one blank line
    ``code``            ``<c>code</c>``
    fenced/indented     ``<code><![CDATA[ ... ]]></code>``
    *em* / **strong**   ``<em>`` / ``<strong>``
    [text](url)         ``<a href="url">text</a>``
    # heading           ``<h1>heading</h1>``
    - item              ``<list type="bullet"><item><description>``
    1. item             ``<list type="number">...``
    ---                 ``<hr />``
    > quote             ``<blockquote>``
    ==================  ==========================================

Examples:
    >>> markdown_to_xml_doc("Use `Foo()` **carefully**.")
    'Use <c>Foo()</c> <strong>carefully</strong>.'
"""

from __future__ import annotations

import html
import re
from html.entities import entitydefs
from xml.etree import ElementTree

import markdown

_INLINE_TAGS = {"em", "strong"}
_BLOCK_TAGS = {"p", "pre", "ul", "ol", "blockquote", "hr", "h1", "h2", "h3", "h4", "h5", "h6"}
_XML_ENTITIES = {"lt", "gt", "amp", "quot", "apos"}
_ENTITY_REF = re.compile(r"&(#?\w+);")
_NUMERIC_REF = re.compile(r"#(?:([0-9]+)|x([0-9a-fA-F]+))")


def markdown_to_xml_doc(source: str) -> str:
    """Convert markdown into C# XML doc markup.

    Args:
        source: Markdown text

    Returns:
        Markup with trailing whitespace removed
    """
    xhtml = _markdown().convert(source)
    root = _parse_fragment(xhtml)

    blocks: list[str] = []
    if root.text and root.text.strip():
        blocks.append(_escape(root.text.strip()))
    for child in root:
        rendered = _render_block(child)
        if rendered:
            blocks.append(rendered)
        if child.tail and child.tail.strip():
            blocks.append(_escape(child.tail.strip()))
    return "\n\n".join(blocks).rstrip()


def _markdown() -> markdown.Markdown:
    md = markdown.Markdown(extensions=["fenced_code"], output_format="xhtml")
    # Raw HTML is treated as text: ``List<string>`` is a type, not a tag
    md.preprocessors.deregister("html_block")
    md.inlinePatterns.deregister("html")
    return md


def _parse_fragment(xhtml: str) -> ElementTree.Element:
    parser = ElementTree.XMLParser()
    # Markdown passes entity references through; HTML names are not XML names
    parser.entity.update(entitydefs)
    parser.feed(f"<root>{_ENTITY_REF.sub(_escape_unknown_entity, xhtml)}</root>")
    return parser.close()


def _escape_unknown_entity(match: re.Match[str]) -> str:
    name = match.group(1)
    numeric = _NUMERIC_REF.fullmatch(name)
    if numeric:
        decimal, hexadecimal = numeric.groups()
        codepoint = int(hexadecimal, 16) if hexadecimal else int(decimal)
        if _is_xml_char(codepoint):
            return match.group(0)
    elif name in _XML_ENTITIES or name in entitydefs:
        return match.group(0)
    return f"&amp;{name};"


def _is_xml_char(codepoint: int) -> bool:
    return (
        codepoint in (0x9, 0xA, 0xD)
        or 0x20 <= codepoint <= 0xD7FF
        or 0xE000 <= codepoint <= 0xFFFD
        or 0x10000 <= codepoint <= 0x10FFFF
    )


def _escape(text: str) -> str:
    return html.escape(text, quote=False)


def _cdata(text: str) -> str:
    return "<![CDATA[\n" + text.replace("]]>", "]]]]><![CDATA[>") + "]]>"


def _render_block(element: ElementTree.Element) -> str:
    tag = element.tag

    if tag == "p":
        return _render_inline(element).strip()

    if tag == "pre":
        code = element.find("code")
        text = code.text if code is not None else element.text
        return f"<code>{_cdata(text or '')}</code>"

    if tag in ("h1", "h2", "h3", "h4", "h5", "h6"):
        return f"<{tag}>{_render_inline(element).strip()}</{tag}>"

    if tag in ("ul", "ol"):
        list_type = "bullet" if tag == "ul" else "number"
        items = "".join(
            f"<item><description>{_render_list_item(item)}</description></item>\n"
            for item in element
            if item.tag == "li"
        )
        return f'<list type="{list_type}">\n{items}</list>'

    if tag == "hr":
        return "<hr />"

    if tag == "blockquote":
        inner = "\n\n".join(filter(None, (_render_block(child) for child in element)))
        return f"<blockquote>\n{inner}\n</blockquote>"

    return _serialize(element)


def _render_list_item(item: ElementTree.Element) -> str:
    if any(child.tag in _BLOCK_TAGS for child in item):
        parts = []
        if item.text and item.text.strip():
            parts.append(_escape(item.text.strip()))
        for child in item:
            parts.append(_render_block(child) if child.tag in _BLOCK_TAGS else _render_element(child))
        return "\n".join(part for part in parts if part)
    return _render_inline(item).strip()


def _render_inline(element: ElementTree.Element) -> str:
    parts = [_escape(element.text or "")]
    for child in element:
        parts.append(_render_element(child))
        parts.append(_escape(child.tail or ""))
    return "".join(parts)


def _render_element(element: ElementTree.Element) -> str:
    tag = element.tag

    if tag == "code":
        return f"<c>{_escape(element.text or '')}</c>"
    if tag in _INLINE_TAGS:
        return f"<{tag}>{_render_inline(element)}</{tag}>"
    if tag == "a":
        href = html.escape(element.get("href", ""))
        return f'<a href="{href}">{_render_inline(element)}</a>'
    if tag == "img":
        alt = html.escape(element.get("alt", ""))
        src = html.escape(element.get("src", ""))
        return f'<img alt="{alt}" src="{src}" />'
    if tag == "br":
        return "<br />"
    return _serialize(element)


def _serialize(element: ElementTree.Element) -> str:
    tail, element.tail = element.tail, None
    try:
        return ElementTree.tostring(element, encoding="unicode")
    finally:
        element.tail = tail


__all__ = ["markdown_to_xml_doc"]
