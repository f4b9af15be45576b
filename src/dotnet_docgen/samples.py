"""
Adapter between the doc generator and a sample translation service.

Fixes the target dialect and the strictness flag once, so the generator
only ever says "translate this" without knowing either. Failures raised by
the service are not caught here.
"""

from __future__ import annotations

from dotnet_docgen.model import ApiLocation, Assembly, enforces_strict_mode
from dotnet_docgen.translation import TargetLanguage, TranslationService


class SampleTranslatorAdapter:
    """Forward code samples to a ``TranslationService`` for one target dialect.

    Args:
        service: Translation service to call
        assembly: Owning assembly; its metadata decides the strictness flag
        language: Target dialect
        strict: Explicit override of the assembly's strictness flag
    """

    def __init__(
        self,
        service: TranslationService,
        assembly: Assembly,
        language: TargetLanguage = TargetLanguage.CSHARP,
        strict: bool | None = None,
    ):
        self.service = service
        self.language = language
        self.strict = enforces_strict_mode(assembly) if strict is None else strict

    def convert_example(self, source: str, location: ApiLocation) -> str:
        """Translate a standalone example, returning only the source text."""
        translation = self.service.translate_example(location, source, self.language, self.strict)
        return translation.source

    def convert_samples_in_markdown(self, markdown: str, location: ApiLocation) -> str:
        """Translate the code snippets embedded in ``markdown``."""
        return self.service.translate_snippets_in_markdown(location, markdown, self.language, self.strict)
