"""
Remarks section composition.

Free-text remarks (markdown, with embedded samples translated) come first,
then the attribute lines. Leading and trailing blank lines are removed so
the section never opens or closes on an empty line.
"""

from __future__ import annotations

from collections.abc import Callable

from dotnet_docgen.attributes import render_doc_attributes
from dotnet_docgen.markup import markdown_to_xml_doc
from dotnet_docgen.model import ApiLocation, Docs
from dotnet_docgen.samples import SampleTranslatorAdapter

MarkdownConverter = Callable[[str], str]


def trim_blank_lines(lines: list[str]) -> list[str]:
    """Drop leading and trailing empty strings."""
    start, end = 0, len(lines)
    while start < end and lines[start] == "":
        start += 1
    while end > start and lines[end - 1] == "":
        end -= 1
    return lines[start:end]


class RemarksComposer:
    """Build the line sequence that goes between ``<remarks>`` markers.

    Args:
        samples: Adapter used to translate code spans inside the remarks
        converter: Markdown to XML doc converter
    """

    def __init__(
        self,
        samples: SampleTranslatorAdapter,
        converter: MarkdownConverter = markdown_to_xml_doc,
    ):
        self.samples = samples
        self.converter = converter

    def translate_markdown(self, markdown: str, location: ApiLocation) -> list[str]:
        """Translate samples, convert to markup, split into lines."""
        translated = self.converter(self.samples.convert_samples_in_markdown(markdown, location))
        return translated.split("\n")

    def compose(self, docs: Docs, location: ApiLocation) -> list[str]:
        """Remarks lines for ``docs``, possibly empty."""
        lines: list[str] = []

        if docs.remarks:
            lines.extend(self.translate_markdown(docs.remarks, location))
            lines.append("")

        lines.extend(render_doc_attributes(docs))

        return trim_blank_lines(lines)
