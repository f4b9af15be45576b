"""
Declarations files and batch rendering.

A declarations file lists the API surface of one assembly together with
its documentation. YAML and JSON are both accepted (JSON is read through
the YAML parser).

Example file:
    ::

        assembly:
          name: my-lib
          metadata:
            jsii: {rosetta: {strict: true}}
        declarations:
          - name: Calculator
            kind: class
            module: my-lib
            docs: {summary: "A calculator."}
          - name: Calculator.add
            kind: method
            module: my-lib
            docs: {summary: "Adds two numbers.", returns: "The sum."}
            parameters:
              - {name: lhs, docs: {summary: "Left operand."}}
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from dotnet_docgen.errors import ModelLoadError
from dotnet_docgen.generator import DotNetDocGenerator
from dotnet_docgen.logging import get_logger
from dotnet_docgen.model import Assembly, Declaration, DeclarationKind
from dotnet_docgen.writer import CodeWriter

logger = get_logger(__name__)


class DeclarationsFile(BaseModel):
    """Parsed content of a declarations file."""

    model_config = ConfigDict(extra="forbid")

    assembly: Assembly
    declarations: list[Declaration] = Field(default_factory=list)


def load_declarations(path: Path | str) -> DeclarationsFile:
    """Read and validate a declarations file.

    Args:
        path: YAML or JSON file

    Returns:
        Assembly plus its declarations, in file order

    Raises:
        ModelLoadError: File unreadable or invalid
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ModelLoadError(f"Cannot read declarations file {path}: {e}", path=str(path), cause=e) from e

    if not isinstance(data, dict):
        raise ModelLoadError(f"Declarations file {path} must contain a mapping", path=str(path))

    try:
        loaded = DeclarationsFile.model_validate(data)
    except ValidationError as e:
        raise ModelLoadError(f"Invalid declarations in {path}: {e}", path=str(path), cause=e) from e

    logger.info(
        "declarations_loaded",
        path=str(path),
        assembly=loaded.assembly.name,
        declarations=len(loaded.declarations),
    )
    return loaded


def render_declarations(
    declarations: Iterable[Declaration],
    generator: DotNetDocGenerator,
    writer: CodeWriter,
) -> int:
    """Emit every declaration's comment block followed by a placeholder line.

    Modules carry no structured docs; their ``readme`` is rendered as a
    remarks block instead.

    Returns:
        Number of declarations rendered
    """
    count = 0
    for declaration in declarations:
        if declaration.kind is DeclarationKind.MODULE:
            generator.emit_markdown_as_remarks(declaration.readme, declaration.location)
        else:
            generator.emit_docs(declaration.to_documentable(), declaration.location)
        writer.line(f"// {declaration.kind.value} {declaration.name}")
        writer.line()
        count += 1
    return count
