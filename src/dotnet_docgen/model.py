"""
Documentation model consumed by the generator.

A closed set of pydantic models describing what an API element says about
itself: summary, remarks, return value, stability, custom tags, a code
example. Methods are a distinct variant carrying ordered parameters, so the
generator dispatches on type rather than probing for optional fields.

Architecture:
    ::

        Documentable ─── docs: Docs | None
             │
             └── MethodDoc ─── parameters: [Parameter(name, docs)]

        Declaration (name, kind, module, docs, parameters, readme)
             │
             └── to_documentable() ──► Documentable | MethodDoc

        ApiLocation (module, path)   opaque key for sample translation
        Assembly (name, version, metadata) ──► enforces_strict_mode()

Examples:
    >>> docs = Docs(summary="Adds two numbers.", stability=Stability.DEPRECATED)
    >>> MethodDoc(docs=docs, parameters=[Parameter(name="lhs")]).parameters[0].name
    'lhs'
    >>> str(ApiLocation("my-lib", ("Calculator", "add")))
    'my-lib.Calculator.add'

Tags:
    model, pydantic, documentation, docgen
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

from pydantic import BaseModel, ConfigDict, Field


class Stability(str, Enum):
    """Declared maturity level of an API element."""

    STABLE = "stable"
    EXPERIMENTAL = "experimental"
    DEPRECATED = "deprecated"
    EXTERNAL = "external"


class Docs(BaseModel):
    """Structured documentation attached to one API element.

    Attributes:
        summary: First sentence shown in IDE tooltips
        remarks: Free-text markdown, may contain code fences
        returns: Description of the return value
        default: Default value description (properties)
        stability: Maturity level
        see: Reference link
        subclassable: Whether the class is designed to be extended
        example: Source code of a runnable example
        custom: Arbitrary tags, insertion order preserved
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    summary: str | None = None
    remarks: str | None = None
    returns: str | None = None
    default: str | None = None
    stability: Stability | None = None
    see: str | None = None
    subclassable: bool | None = None
    example: str | None = None
    custom: dict[str, str] = Field(default_factory=dict)


class Parameter(BaseModel):
    """One method parameter and its own documentation."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str
    docs: Docs | None = None


class Documentable(BaseModel):
    """Any API element that may carry documentation."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    docs: Docs | None = None


class MethodDoc(Documentable):
    """A method, initializer or callable: documentation plus parameters."""

    parameters: list[Parameter] = Field(default_factory=list)


AnyDocumentable = Union[Documentable, MethodDoc]


def render_summary(docs: Docs | None) -> str:
    """Summary text for an element, or the empty string."""
    if docs is None or not docs.summary:
        return ""
    return docs.summary


@dataclass(frozen=True)
class ApiLocation:
    """Where an API element lives: module plus declaration path.

    The generator never inspects it; it is handed to the translation
    service, which uses it to find pre-translated samples.
    """

    module: str
    path: tuple[str, ...] = ()

    @classmethod
    def parse(cls, value: str) -> "ApiLocation":
        """Parse ``module:Type.member`` (or a bare module name)."""
        module, _, rest = value.partition(":")
        return cls(module, tuple(part for part in rest.split(".") if part))

    def __str__(self) -> str:
        return ".".join((self.module, *self.path))


class Assembly(BaseModel):
    """Package metadata of the library whose declarations are documented."""

    model_config = ConfigDict(extra="ignore")

    name: str
    version: str = "0.0.0"
    metadata: dict[str, Any] = Field(default_factory=dict)

    def enforces_strict_mode(self) -> bool:
        return enforces_strict_mode(self)


def enforces_strict_mode(assembly: Assembly) -> bool:
    """True when ``metadata.jsii.rosetta.strict`` is set to ``true``."""
    jsii = assembly.metadata.get("jsii")
    if not isinstance(jsii, dict):
        return False
    rosetta = jsii.get("rosetta")
    if not isinstance(rosetta, dict):
        return False
    return rosetta.get("strict") is True


class DeclarationKind(str, Enum):
    """Kinds of declarations the generator documents."""

    CLASS = "class"
    INTERFACE = "interface"
    METHOD = "method"
    INITIALIZER = "initializer"
    PROPERTY = "property"
    ENUM = "enum"
    ENUM_MEMBER = "enum_member"
    MODULE = "module"


class Declaration(BaseModel):
    """A named declaration as listed in a declarations file.

    ``readme`` is only meaningful for modules, which have no structured
    docs and are rendered from markdown directly.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str
    kind: DeclarationKind
    module: str
    docs: Docs | None = None
    parameters: list[Parameter] = Field(default_factory=list)
    readme: str | None = None

    @property
    def location(self) -> ApiLocation:
        if self.kind is DeclarationKind.MODULE:
            return ApiLocation(self.module)
        return ApiLocation(self.module, tuple(self.name.split(".")))

    @property
    def is_callable(self) -> bool:
        return self.kind in (DeclarationKind.METHOD, DeclarationKind.INITIALIZER)

    def to_documentable(self) -> AnyDocumentable:
        if self.is_callable:
            return MethodDoc(docs=self.docs, parameters=self.parameters)
        return Documentable(docs=self.docs)


__all__ = [
    "Stability",
    "Docs",
    "Parameter",
    "Documentable",
    "MethodDoc",
    "AnyDocumentable",
    "render_summary",
    "ApiLocation",
    "Assembly",
    "enforces_strict_mode",
    "DeclarationKind",
    "Declaration",
]
