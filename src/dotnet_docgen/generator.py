"""
C# documentation comment generator.

Renders the documentation model of one declaration into a ``///`` comment
block on the shared ``CodeWriter``. Called by the code generator once for
every emitted class, interface, method, property and enum.

Example:
    >>> writer = CodeWriter()
    >>> generator = DotNetDocGenerator(writer, IdentityTranslator(), Assembly(name="my-lib"))
    >>> generator.emit_docs(Documentable(docs=Docs(summary="Adds two numbers.")), ApiLocation("my-lib"))
    >>> writer.lines
    ['/// <summary>Adds two numbers.</summary>']
"""

from __future__ import annotations

from collections.abc import Mapping

from dotnet_docgen.config import DocGenSettings
from dotnet_docgen.logging import get_logger
from dotnet_docgen.markup import markdown_to_xml_doc
from dotnet_docgen.model import (
    AnyDocumentable,
    ApiLocation,
    Assembly,
    Docs,
    MethodDoc,
    Parameter,
    render_summary,
)
from dotnet_docgen.naming import RESERVED_PREFIX, NameUtils
from dotnet_docgen.remarks import MarkdownConverter, RemarksComposer
from dotnet_docgen.samples import SampleTranslatorAdapter
from dotnet_docgen.tags import CODE_TAG, render_xml_tag
from dotnet_docgen.translation import TranslationService
from dotnet_docgen.writer import CodeWriter

logger = get_logger(__name__)


class DotNetDocGenerator:
    """Emit XML doc comments for declarations.

    Manifesto:
        Every declaration gets the same shape of comment, in the same
        order, whatever subset of documentation it carries. The generator
        owns the ordering; translation, markdown conversion and line
        accumulation are collaborators it only calls.

    Architecture:
        ```
        emit_docs(entity, location)
              │
              ├──► <summary>          always (may be empty)
              ├──► <param name=..>    MethodDoc only, declaration order
              │     (stop here if entity.docs is None)
              ├──► <returns>
              ├──► <remarks> ... </remarks>
              │         RemarksComposer
              │           ├── markdown ─► samples ─► XML doc lines
              │           └── attribute lines
              └──► <example><code> ... </code></example>
                        SampleTranslatorAdapter.convert_example()
        ```

    Guardrails:
        - Remarks lines are written directly, never through the XML
          serializer: they already contain markup that must not be escaped
        - Translation errors are not caught; the caller decides whether
          a failed sample is fatal

    Tags:
        - generator
        - xml_doc
        - csharp
    """

    def __init__(
        self,
        writer: CodeWriter,
        translator: TranslationService,
        assembly: Assembly,
        *,
        settings: DocGenSettings | None = None,
        nameutils: NameUtils | None = None,
        converter: MarkdownConverter = markdown_to_xml_doc,
    ):
        """Initialize the generator.

        Args:
            writer: Line writer shared with the surrounding code generator
            translator: Sample translation service
            assembly: Assembly whose declarations are documented
            settings: Rendering settings (defaults when omitted)
            nameutils: Identifier conversion helpers
            converter: Markdown to XML doc converter
        """
        self.writer = writer
        self.settings = settings or DocGenSettings()
        self.nameutils = nameutils or NameUtils()
        self.converter = converter
        self.samples = SampleTranslatorAdapter(
            translator,
            assembly,
            language=self.settings.target_language,
            strict=self.settings.strict,
        )
        self.remarks = RemarksComposer(self.samples, converter)

    def emit_docs(self, entity: AnyDocumentable, location: ApiLocation) -> None:
        """Emit the full comment block for one declaration.

        Order: summary, params, returns, remarks, example.
        """
        start = len(self.writer)
        docs = entity.docs

        self._emit_xml_doc("summary", render_summary(docs), allow_empty=True)

        if isinstance(entity, MethodDoc):
            for param in entity.parameters:
                self._emit_xml_doc(
                    "param",
                    _param_summary(param),
                    attributes={"name": self._param_name(param)},
                )

        if docs is not None:
            self._emit_details(docs, location)

        logger.debug("docs_emitted", location=str(location), lines=len(self.writer) - start)

    def emit_markdown_as_remarks(self, markdown: str | None, location: ApiLocation) -> None:
        """Emit a remarks block straight from markdown (module READMEs and the like)."""
        if not markdown:
            return
        self._emit_remarks(self.remarks.translate_markdown(markdown, location))

    def _emit_details(self, docs: Docs, location: ApiLocation) -> None:
        if docs.returns:
            self._emit_xml_doc("returns", docs.returns)

        remarks = self.remarks.compose(docs, location)
        if remarks:
            self._emit_remarks(remarks)

        if docs.example:
            self._comment_line("<example>")
            self._emit_xml_doc(CODE_TAG, self.samples.convert_example(docs.example, location))
            self._comment_line("</example>")

    def _emit_remarks(self, lines: list[str]) -> None:
        self._comment_line("<remarks>")
        for line in lines:
            self._comment_line(line, rstrip=True)
        self._comment_line("</remarks>")

    def _emit_xml_doc(
        self,
        tag: str,
        content: str,
        attributes: Mapping[str, str] | None = None,
        allow_empty: bool = False,
    ) -> None:
        for line in render_xml_tag(tag, content, attributes, allow_empty=allow_empty):
            self._comment_line(line)

    def _comment_line(self, text: str, rstrip: bool = False) -> None:
        line = f"{self.settings.comment_marker} {text}"
        self.writer.line(line.rstrip() if rstrip else line)

    def _param_name(self, param: Parameter) -> str:
        name = self.nameutils.convert_parameter_name(param.name)
        # Verbatim-identifier prefix is for code, not for doc references
        if name.startswith(RESERVED_PREFIX):
            name = name[len(RESERVED_PREFIX):]
        return name


def _param_summary(param: Parameter) -> str:
    if param.docs is None or not param.docs.summary:
        return ""
    return param.docs.summary
