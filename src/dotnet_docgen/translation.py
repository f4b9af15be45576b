"""
Translation services for code samples.

The generator never translates code itself. It talks to a
``TranslationService``: one call for a standalone example, one for the
fenced snippets embedded in a markdown document. Two implementations ship
with the package:

- ``IdentityTranslator`` returns every sample unchanged.
- ``TabletTranslator`` answers from a "tablet", a YAML or JSON file of
  pre-translated snippets keyed by a hash of their source.

Manifesto:
    Sample translation is expensive and happens ahead of time. Doc
    generation only looks answers up, so the same inputs always render the
    same comments.

Architecture:
    ::

        DotNetDocGenerator
              │
              ▼
        SampleTranslatorAdapter ── (language, strict) ──►  TranslationService
                                                              │
                                         ┌────────────────────┴──────────┐
                                         ▼                               ▼
                                  IdentityTranslator             TabletTranslator
                                                                 (snippet_key → text)

Tablet format:
    ::

        snippets:
          - source: "const x = new Foo();"
            location: "my-lib:Foo"          # optional, most specific wins
            translations:
              csharp: "var x = new Foo();"

Guardrails:
    - A lookup miss is not an error unless strict mode is on
    - Fences with an info string other than ``ts``/``typescript``/empty are
      left alone

Tags:
    translation, samples, rosetta, tablet, docgen
"""

from __future__ import annotations

import hashlib
import re
import textwrap
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Protocol, runtime_checkable

import yaml

from dotnet_docgen.errors import TabletError, UntranslatableSampleError
from dotnet_docgen.logging import get_logger
from dotnet_docgen.model import ApiLocation

logger = get_logger(__name__)

SOURCE_FENCE_LANGUAGES = frozenset({"", "ts", "typescript"})

_FENCED_BLOCK = re.compile(
    r"^(?P<indent>[ \t]*)(?P<fence>`{3,}|~{3,})(?P<info>[^\n`]*)\n"
    r"(?P<body>.*?)\n?"
    r"^(?P=indent)(?P=fence)[ \t]*$",
    re.MULTILINE | re.DOTALL,
)


class TargetLanguage(str, Enum):
    """Languages a sample can be translated into."""

    CSHARP = "csharp"
    JAVA = "java"
    PYTHON = "python"
    GO = "go"


@dataclass(frozen=True)
class Translation:
    """Result of translating one sample.

    Attributes:
        source: Translated source text
        language: Language of ``source``
        did_compile: Whether the translation was verified, None if unknown
        diagnostics: Messages from the translator, informational only
    """

    source: str
    language: TargetLanguage
    did_compile: bool | None = None
    diagnostics: tuple[str, ...] = field(default_factory=tuple)


@runtime_checkable
class TranslationService(Protocol):
    """What the generator needs from a sample translator."""

    def translate_example(
        self,
        location: ApiLocation,
        source: str,
        language: TargetLanguage,
        strict: bool,
    ) -> Translation:
        ...

    def translate_snippets_in_markdown(
        self,
        location: ApiLocation,
        markdown: str,
        language: TargetLanguage,
        strict: bool,
    ) -> str:
        ...


def snippet_key(source: str, length: int = 32) -> str:
    """Deterministic key for a snippet; trailing whitespace is ignored."""
    normalized = "\n".join(line.rstrip() for line in source.strip("\n").splitlines())
    return hashlib.sha256(normalized.encode()).hexdigest()[:length]


class IdentityTranslator:
    """Translation service that returns every sample untouched."""

    def translate_example(
        self,
        location: ApiLocation,
        source: str,
        language: TargetLanguage,
        strict: bool,
    ) -> Translation:
        return Translation(source=source, language=language)

    def translate_snippets_in_markdown(
        self,
        location: ApiLocation,
        markdown: str,
        language: TargetLanguage,
        strict: bool,
    ) -> str:
        return markdown


class TabletTranslator:
    """Translation service backed by a table of pre-translated snippets.

    Lookups try the (location, snippet) pair first and fall back to the
    snippet alone. Results are cached per instance.

    Examples:
        >>> tablet = TabletTranslator()
        >>> tablet.add("foo();", TargetLanguage.CSHARP, "Foo();")
        >>> tablet.translate_example(ApiLocation("lib"), "foo();", TargetLanguage.CSHARP, False).source
        'Foo();'
    """

    def __init__(self) -> None:
        self._entries: dict[tuple[str | None, str, TargetLanguage], str] = {}
        self._cache: dict[tuple[ApiLocation, str, TargetLanguage], str | None] = {}

    @classmethod
    def from_file(cls, path: Path | str) -> "TabletTranslator":
        """Load a tablet from YAML or JSON.

        Raises:
            TabletError: File unreadable or not shaped like a tablet
        """
        path = Path(path)
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise TabletError(f"Cannot read tablet {path}: {e}", path=str(path), cause=e) from e

        tablet = cls()
        tablet.load(data, path=str(path))
        logger.info("tablet_loaded", path=str(path), snippets=len(tablet))
        return tablet

    def load(self, data: Any, path: str | None = None) -> None:
        """Add every snippet of an already-parsed tablet document."""
        if data is None:
            return
        if not isinstance(data, dict) or not isinstance(data.get("snippets", []), list):
            raise TabletError("Tablet must be a mapping with a 'snippets' list", path=path)

        for index, entry in enumerate(data.get("snippets", [])):
            if not isinstance(entry, dict) or not isinstance(entry.get("source"), str):
                raise TabletError(f"Snippet #{index} has no 'source' string", path=path)
            translations = entry.get("translations") or {}
            if not isinstance(translations, dict):
                raise TabletError(f"Snippet #{index} 'translations' must be a mapping", path=path)
            for language, text in translations.items():
                try:
                    target = TargetLanguage(language)
                except ValueError as e:
                    raise TabletError(
                        f"Snippet #{index} has unknown language {language!r}", path=path, cause=e
                    ) from e
                self.add(entry["source"], target, str(text), location=entry.get("location"))

    def add(
        self,
        source: str,
        language: TargetLanguage,
        translation: str,
        location: ApiLocation | str | None = None,
    ) -> None:
        if isinstance(location, str):
            location = ApiLocation.parse(location)
        scope = str(location) if location is not None else None
        self._entries[(scope, snippet_key(source), language)] = translation
        self._cache.clear()

    def lookup(self, location: ApiLocation, source: str, language: TargetLanguage) -> str | None:
        cache_key = (location, source, language)
        if cache_key not in self._cache:
            key = snippet_key(source)
            found = self._entries.get((str(location), key, language))
            if found is None:
                found = self._entries.get((None, key, language))
            self._cache[cache_key] = found
        return self._cache[cache_key]

    def translate_example(
        self,
        location: ApiLocation,
        source: str,
        language: TargetLanguage,
        strict: bool,
    ) -> Translation:
        translated = self.lookup(location, source, language)
        if translated is None:
            if strict:
                raise UntranslatableSampleError(str(location), language.value, source)
            return Translation(source=source, language=language, did_compile=None)
        return Translation(source=translated, language=language, did_compile=True)

    def translate_snippets_in_markdown(
        self,
        location: ApiLocation,
        markdown: str,
        language: TargetLanguage,
        strict: bool,
    ) -> str:
        def replace(match: re.Match[str]) -> str:
            if match.group("info").strip().lower() not in SOURCE_FENCE_LANGUAGES:
                return match.group(0)
            source = textwrap.dedent(match.group("body"))
            translated = self.lookup(location, source, language)
            if translated is None:
                if strict:
                    raise UntranslatableSampleError(str(location), language.value, source)
                return match.group(0)
            indent, fence = match.group("indent"), match.group("fence")
            body = "\n".join(indent + line if line else line for line in translated.rstrip("\n").split("\n"))
            return f"{indent}{fence}{language.value}\n{body}\n{indent}{fence}"

        return _FENCED_BLOCK.sub(replace, markdown)

    def __len__(self) -> int:
        return len(self._entries)


__all__ = [
    "TargetLanguage",
    "Translation",
    "TranslationService",
    "snippet_key",
    "IdentityTranslator",
    "TabletTranslator",
]
