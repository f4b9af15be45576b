"""Tests for the documentation model."""

import pytest
from pydantic import ValidationError

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
    render_summary,
)


class TestDocs:

    def test_defaults(self):
        docs = Docs()
        assert docs.summary is None
        assert docs.custom == {}

    def test_stability_from_string(self):
        assert Docs(stability="deprecated").stability is Stability.DEPRECATED

    def test_unknown_field_rejected(self):
        with pytest.raises(ValidationError):
            Docs(sumary="typo")

    def test_frozen(self):
        docs = Docs(summary="S.")
        with pytest.raises(ValidationError):
            docs.summary = "Other."

    def test_custom_keeps_insertion_order(self):
        docs = Docs(custom={"zeta": "1", "alpha": "2"})
        assert list(docs.custom) == ["zeta", "alpha"]

    @pytest.mark.parametrize("docs, expected", [(None, ""), (Docs(), ""), (Docs(summary="S."), "S.")])
    def test_render_summary(self, docs, expected):
        assert render_summary(docs) == expected


class TestApiLocation:

    def test_str(self):
        assert str(ApiLocation("my-lib", ("Calculator", "add"))) == "my-lib.Calculator.add"

    def test_parse(self):
        assert ApiLocation.parse("my-lib:Calculator.add") == ApiLocation("my-lib", ("Calculator", "add"))

    def test_parse_module_only(self):
        assert ApiLocation.parse("my-lib") == ApiLocation("my-lib")

    def test_hashable(self):
        assert len({ApiLocation("a", ("B",)), ApiLocation("a", ("B",))}) == 1


class TestAssembly:

    def test_strict_mode(self):
        assembly = Assembly(name="x", metadata={"jsii": {"rosetta": {"strict": True}}})
        assert assembly.enforces_strict_mode() is True

    def test_no_metadata(self):
        assert Assembly(name="x").enforces_strict_mode() is False


class TestDeclaration:

    def test_method_becomes_method_doc(self):
        declaration = Declaration(
            name="Calculator.add",
            kind=DeclarationKind.METHOD,
            module="my-lib",
            docs=Docs(summary="Adds."),
            parameters=[Parameter(name="lhs")],
        )

        documentable = declaration.to_documentable()

        assert isinstance(documentable, MethodDoc)
        assert documentable.parameters[0].name == "lhs"
        assert declaration.location == ApiLocation("my-lib", ("Calculator", "add"))

    def test_initializer_is_callable(self):
        declaration = Declaration(name="Calculator", kind="initializer", module="my-lib")
        assert declaration.is_callable
        assert isinstance(declaration.to_documentable(), MethodDoc)

    def test_property_is_plain_documentable(self):
        declaration = Declaration(name="Calculator.precision", kind="property", module="my-lib")
        documentable = declaration.to_documentable()

        assert type(documentable) is Documentable
        assert documentable.docs is None

    def test_module_location(self):
        declaration = Declaration(name="my-lib", kind="module", module="my-lib", readme="# Hi")
        assert declaration.location == ApiLocation("my-lib")

    def test_unknown_kind_rejected(self):
        with pytest.raises(ValidationError):
            Declaration(name="x", kind="struct", module="my-lib")
