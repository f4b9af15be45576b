"""Tests for sample translation services."""

import pytest

from dotnet_docgen.errors import TabletError, UntranslatableSampleError
from dotnet_docgen.model import ApiLocation
from dotnet_docgen.translation import (
    IdentityTranslator,
    TabletTranslator,
    TargetLanguage,
    TranslationService,
    snippet_key,
)


@pytest.fixture
def tablet(fixtures_path):
    return TabletTranslator.from_file(fixtures_path / "tablet.yaml")


CLASS_LOCATION = ApiLocation("my-lib", ("Calculator",))
MODULE_LOCATION = ApiLocation("my-lib")


class TestSnippetKey:

    def test_trailing_whitespace_ignored(self):
        assert snippet_key("foo();  \n") == snippet_key("foo();")

    def test_different_sources_differ(self):
        assert snippet_key("foo();") != snippet_key("bar();")

    def test_length(self):
        assert len(snippet_key("foo();")) == 32
        assert len(snippet_key("foo();", length=12)) == 12


class TestIdentityTranslator:

    def test_satisfies_protocol(self):
        assert isinstance(IdentityTranslator(), TranslationService)

    def test_example_passes_through(self, csharp):
        translation = IdentityTranslator().translate_example(MODULE_LOCATION, "foo();", csharp, True)
        assert translation.source == "foo();"
        assert translation.language is csharp

    def test_markdown_passes_through(self, csharp):
        markdown = "```ts\nfoo();\n```"
        assert IdentityTranslator().translate_snippets_in_markdown(MODULE_LOCATION, markdown, csharp, True) == markdown


class TestTabletLoading:

    def test_from_file(self, tablet):
        assert isinstance(tablet, TranslationService)
        assert len(tablet) == 4

    def test_missing_file(self, tmp_path):
        with pytest.raises(TabletError) as exc_info:
            TabletTranslator.from_file(tmp_path / "missing.yaml")
        assert exc_info.value.path.endswith("missing.yaml")

    def test_empty_file_is_an_empty_tablet(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert len(TabletTranslator.from_file(path)) == 0

    def test_json_tablet(self, tmp_path, csharp):
        path = tmp_path / "tablet.json"
        path.write_text('{"snippets": [{"source": "foo();", "translations": {"csharp": "Foo();"}}]}')

        tablet = TabletTranslator.from_file(path)

        assert tablet.translate_example(MODULE_LOCATION, "foo();", csharp, True).source == "Foo();"

    @pytest.mark.parametrize(
        "content, message",
        [
            ("- just\n- a list\n", "mapping"),
            ("snippets: 3\n", "mapping"),
            ("snippets:\n  - translations: {csharp: x}\n", "source"),
            ("snippets:\n  - source: x\n    translations: [x]\n", "translations"),
            ("snippets:\n  - source: x\n    translations: {cobol: x}\n", "cobol"),
        ],
    )
    def test_invalid_shapes(self, tmp_path, content, message):
        path = tmp_path / "bad.yaml"
        path.write_text(content)

        with pytest.raises(TabletError, match=message):
            TabletTranslator.from_file(path)


class TestTabletExamples:

    def test_hit(self, tablet, location, csharp):
        translation = tablet.translate_example(location, "const sum = calc.add(1, 2);\n", csharp, True)

        assert translation.source == "var sum = calc.Add(1, 2);\n"
        assert translation.did_compile is True

    def test_location_entry_wins(self, tablet, csharp):
        assert tablet.translate_example(CLASS_LOCATION, "new Calculator();", csharp, True).source == (
            "new Calculator { };"
        )

    def test_global_entry_elsewhere(self, tablet, csharp):
        assert tablet.translate_example(MODULE_LOCATION, "new Calculator();", csharp, True).source == (
            "new Calculator();"
        )

    def test_other_language(self, tablet):
        translation = tablet.translate_example(CLASS_LOCATION, "new Calculator();", TargetLanguage.JAVA, True)
        assert translation.source == "new Calculator();"

    def test_miss_without_strict_returns_source(self, tablet, csharp):
        translation = tablet.translate_example(MODULE_LOCATION, "unknown();", csharp, False)

        assert translation.source == "unknown();"
        assert translation.did_compile is None

    def test_miss_with_strict_raises(self, tablet, csharp):
        with pytest.raises(UntranslatableSampleError) as exc_info:
            tablet.translate_example(CLASS_LOCATION, "unknown();", csharp, True)

        error = exc_info.value
        assert error.location == "my-lib.Calculator"
        assert error.language == "csharp"
        assert "unknown();" in error.message

    def test_add_after_lookup(self, csharp):
        tablet = TabletTranslator()
        assert tablet.lookup(MODULE_LOCATION, "foo();", csharp) is None

        tablet.add("foo();", csharp, "Foo();")

        assert tablet.lookup(MODULE_LOCATION, "foo();", csharp) == "Foo();"

    def test_add_with_location_string(self, csharp):
        tablet = TabletTranslator()
        tablet.add("foo();", csharp, "Foo();", location="my-lib:Calculator")

        assert tablet.lookup(CLASS_LOCATION, "foo();", csharp) == "Foo();"
        assert tablet.lookup(MODULE_LOCATION, "foo();", csharp) is None


class TestTabletMarkdown:

    def test_typescript_fence_is_translated(self, tablet, csharp):
        markdown = "Intro.\n\n```ts\nnew Calculator();\n```\n\nOutro."

        result = tablet.translate_snippets_in_markdown(MODULE_LOCATION, markdown, csharp, True)

        assert result == "Intro.\n\n```csharp\nnew Calculator();\n```\n\nOutro."

    def test_location_applies_to_fences(self, tablet, csharp):
        markdown = "```\nnew Calculator();\n```"

        result = tablet.translate_snippets_in_markdown(CLASS_LOCATION, markdown, csharp, True)

        assert result == "```csharp\nnew Calculator { };\n```"

    def test_other_languages_left_alone(self, tablet, csharp):
        markdown = "```python\nnew Calculator();\n```"
        assert tablet.translate_snippets_in_markdown(MODULE_LOCATION, markdown, csharp, True) == markdown

    def test_indented_fence(self, tablet, csharp):
        markdown = "- item\n\n  ```ts\n  new Calculator();\n  ```"

        result = tablet.translate_snippets_in_markdown(MODULE_LOCATION, markdown, csharp, True)

        assert result == "- item\n\n  ```csharp\n  new Calculator();\n  ```"

    def test_miss_without_strict_keeps_fence(self, tablet, csharp):
        markdown = "```ts\nunknown();\n```"
        assert tablet.translate_snippets_in_markdown(MODULE_LOCATION, markdown, csharp, False) == markdown

    def test_miss_with_strict_raises(self, tablet, csharp):
        with pytest.raises(UntranslatableSampleError):
            tablet.translate_snippets_in_markdown(MODULE_LOCATION, "```ts\nunknown();\n```", csharp, True)

    def test_markdown_without_fences(self, tablet, csharp):
        assert tablet.translate_snippets_in_markdown(MODULE_LOCATION, "No code.", csharp, True) == "No code."

    def test_readme_fixture(self, tablet, fixtures_path, csharp):
        readme = (fixtures_path / "README.md").read_text()

        result = tablet.translate_snippets_in_markdown(MODULE_LOCATION, readme, csharp, True)

        assert "```csharp\nnew Calculator();\n```" in result
        assert "```ts" not in result
