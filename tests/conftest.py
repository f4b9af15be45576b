"""Shared pytest fixtures for dotnet-docgen tests."""

import sys
from pathlib import Path

import pytest
import structlog

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from dotnet_docgen.generator import DotNetDocGenerator
from dotnet_docgen.model import ApiLocation, Assembly
from dotnet_docgen.translation import TargetLanguage, Translation
from dotnet_docgen.writer import CodeWriter


class RecordingTranslator:
    """Translation service double: canned answers, every call recorded."""

    def __init__(self, examples=None, markdown=None, error=None):
        self.examples = examples or {}
        self.markdown = markdown or {}
        self.error = error
        self.calls = []

    def translate_example(self, location, source, language, strict):
        self.calls.append(("example", location, source, language, strict))
        if self.error is not None:
            raise self.error
        return Translation(source=self.examples.get(source, source), language=language)

    def translate_snippets_in_markdown(self, location, markdown, language, strict):
        self.calls.append(("markdown", location, markdown, language, strict))
        if self.error is not None:
            raise self.error
        return self.markdown.get(markdown, markdown)


@pytest.fixture(scope="session")
def fixtures_path():
    """Path to test fixtures."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def location():
    return ApiLocation("my-lib", ("Calculator", "add"))


@pytest.fixture
def assembly():
    return Assembly(name="my-lib", version="1.2.3")


@pytest.fixture
def strict_assembly():
    return Assembly(name="my-lib", metadata={"jsii": {"rosetta": {"strict": True}}})


@pytest.fixture
def translator():
    return RecordingTranslator()


@pytest.fixture
def writer():
    return CodeWriter()


@pytest.fixture
def make_generator(writer, assembly):
    """Factory for a generator writing into the shared ``writer`` fixture."""

    def factory(translator=None, **kwargs):
        return DotNetDocGenerator(
            writer,
            translator if translator is not None else RecordingTranslator(),
            kwargs.pop("assembly", assembly),
            **kwargs,
        )

    return factory


@pytest.fixture
def csharp():
    return TargetLanguage.CSHARP


@pytest.fixture(autouse=True)
def reset_structlog():
    """CLI tests reconfigure structlog onto short-lived streams; undo after each test."""
    yield
    structlog.reset_defaults()
