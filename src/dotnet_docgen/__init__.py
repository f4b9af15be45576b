"""
C# XML documentation comment generation.

Renders a language-agnostic documentation model (summary, parameters,
returns, remarks, stability, custom tags, examples) into ``///`` comment
blocks for generated .NET code.

Example:
    >>> from dotnet_docgen import CodeWriter, DotNetDocGenerator, IdentityTranslator
    >>> from dotnet_docgen import ApiLocation, Assembly, Docs, Documentable
    >>> writer = CodeWriter()
    >>> generator = DotNetDocGenerator(writer, IdentityTranslator(), Assembly(name="my-lib"))
    >>> generator.emit_docs(Documentable(docs=Docs(summary="Hello.")), ApiLocation("my-lib"))
    >>> writer.lines
    ['/// <summary>Hello.</summary>']
"""

from dotnet_docgen.config import DocGenSettings
from dotnet_docgen.errors import (
    ConfigError,
    DocGenError,
    ModelLoadError,
    TabletError,
    UntranslatableSampleError,
)
from dotnet_docgen.generator import DotNetDocGenerator
from dotnet_docgen.markup import markdown_to_xml_doc
from dotnet_docgen.model import (
    ApiLocation,
    Assembly,
    Declaration,
    DeclarationKind,
    Docs,
    Documentable,
    MethodDoc,
    Parameter,
    Stability,
)
from dotnet_docgen.translation import (
    IdentityTranslator,
    TabletTranslator,
    TargetLanguage,
    Translation,
    TranslationService,
)
from dotnet_docgen.writer import CodeWriter

__version__ = "0.1.0"

__all__ = [
    "DotNetDocGenerator",
    "CodeWriter",
    "DocGenSettings",
    "markdown_to_xml_doc",
    "ApiLocation",
    "Assembly",
    "Declaration",
    "DeclarationKind",
    "Docs",
    "Documentable",
    "MethodDoc",
    "Parameter",
    "Stability",
    "IdentityTranslator",
    "TabletTranslator",
    "TargetLanguage",
    "Translation",
    "TranslationService",
    "DocGenError",
    "ConfigError",
    "ModelLoadError",
    "TabletError",
    "UntranslatableSampleError",
    "__version__",
]
