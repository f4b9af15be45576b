"""
CLI for the documentation generator.

Renders C# XML doc comments from a declarations file, renders a markdown
document as a remarks block, and summarizes which documentation sections a
declarations file carries.

Usage:
    dotnet-docgen render api.yaml --tablet tablet.yaml
    dotnet-docgen render api.yaml --strict --output Docs.cs
    dotnet-docgen remarks README.md --module my-lib
    dotnet-docgen stats api.yaml
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, NoReturn

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from dotnet_docgen import __version__
from dotnet_docgen.config import DocGenSettings
from dotnet_docgen.errors import DocGenError
from dotnet_docgen.generator import DotNetDocGenerator
from dotnet_docgen.loader import load_declarations, render_declarations
from dotnet_docgen.logging import configure_logging, get_logger
from dotnet_docgen.model import ApiLocation, Assembly
from dotnet_docgen.translation import IdentityTranslator, TabletTranslator, TranslationService
from dotnet_docgen.writer import CodeWriter

console = Console()
logger = get_logger(__name__)


def _fail(error: DocGenError) -> NoReturn:
    console.print(f"[bold red]❌ {escape(error.message)}[/bold red]")
    raise SystemExit(1)


def _translator(settings: DocGenSettings) -> TranslationService:
    if settings.tablet_path is None:
        return IdentityTranslator()
    return TabletTranslator.from_file(settings.tablet_path)


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--config", "-c", "config_path",
    type=click.Path(exists=True, dir_okay=False),
    help="YAML settings file.",
)
@click.option("--log-level", default=None, help="Log level (DEBUG, INFO, WARNING, ERROR).")
@click.option("--json-logs/--console-logs", default=None, help="Log format.")
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, log_level: str | None, json_logs: bool | None):
    """Render C# XML documentation comments from documentation models."""
    overrides: dict[str, Any] = {"log_level": log_level, "json_logs": json_logs}
    try:
        if config_path:
            settings = DocGenSettings.from_yaml(config_path, **overrides)
        else:
            settings = DocGenSettings.from_env(**overrides)
    except DocGenError as e:
        _fail(e)

    configure_logging(level=settings.log_level, json_format=settings.json_logs, stream=sys.stderr)
    ctx.obj = settings


@cli.command()
@click.argument("declarations_file", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--tablet", "-t",
    type=click.Path(exists=True, dir_okay=False),
    help="Tablet of pre-translated samples.",
)
@click.option(
    "--strict/--no-strict",
    default=None,
    help="Fail on untranslatable samples (default: assembly metadata decides).",
)
@click.option(
    "--output", "-o",
    type=click.Path(dir_okay=False),
    help="Write comments to this file instead of stdout.",
)
@click.pass_obj
def render(settings: DocGenSettings, declarations_file: str, tablet: str | None, strict: bool | None, output: str | None):
    """Render doc comments for every declaration in DECLARATIONS_FILE.

    Examples:
        dotnet-docgen render api.yaml
        dotnet-docgen render api.yaml -t tablet.yaml --strict -o Docs.cs
    """
    updates: dict[str, Any] = {}
    if tablet:
        updates["tablet_path"] = Path(tablet)
    if strict is not None:
        updates["strict"] = strict
    settings = settings.model_copy(update=updates)

    try:
        loaded = load_declarations(declarations_file)
        writer = CodeWriter()
        generator = DotNetDocGenerator(writer, _translator(settings), loaded.assembly, settings=settings)
        count = render_declarations(loaded.declarations, generator, writer)
    except DocGenError as e:
        _fail(e)

    if output:
        output_path = Path(output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(writer.text, encoding="utf-8")
        console.print(f"✅ Rendered {count} declarations to {escape(str(output_path))}")
    else:
        click.echo(writer.text, nl=False)
    logger.info("render_complete", declarations=count, lines=len(writer))


@cli.command()
@click.argument("markdown_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--module", "-m", default="module", help="Module name used to look up sample translations.")
@click.option(
    "--tablet", "-t",
    type=click.Path(exists=True, dir_okay=False),
    help="Tablet of pre-translated samples.",
)
@click.pass_obj
def remarks(settings: DocGenSettings, markdown_file: str, module: str, tablet: str | None):
    """Render MARKDOWN_FILE as a <remarks> block."""
    if tablet:
        settings = settings.model_copy(update={"tablet_path": Path(tablet)})

    markdown = Path(markdown_file).read_text(encoding="utf-8")
    writer = CodeWriter()
    try:
        generator = DotNetDocGenerator(writer, _translator(settings), Assembly(name=module), settings=settings)
        generator.emit_markdown_as_remarks(markdown, ApiLocation(module))
    except DocGenError as e:
        _fail(e)

    click.echo(writer.text, nl=False)


@cli.command()
@click.argument("declarations_file", type=click.Path(exists=True, dir_okay=False))
def stats(declarations_file: str):
    """Show which documentation sections each declaration carries."""
    try:
        loaded = load_declarations(declarations_file)
    except DocGenError as e:
        _fail(e)

    table = Table(title=f"{escape(loaded.assembly.name)} {escape(loaded.assembly.version)}")
    table.add_column("Declaration", style="cyan")
    table.add_column("Kind")
    for section in ("Summary", "Params", "Returns", "Remarks", "Example"):
        table.add_column(section, justify="center")

    def mark(present: Any) -> str:
        return "✅" if present else "-"

    for decl in loaded.declarations:
        docs = decl.docs
        table.add_row(
            escape(decl.name),
            decl.kind.value,
            mark(docs and docs.summary),
            str(len(decl.parameters)) if decl.is_callable else "-",
            mark(docs and docs.returns),
            mark((docs and docs.remarks) or decl.readme),
            mark(docs and docs.example),
        )

    console.print(table)
    console.print(f"[bold]Total declarations:[/bold] {len(loaded.declarations)}")


def main():
    """Entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
