"""Command-line interface for ctorgen code generation."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING

import click
from rich.console import Console
from rich.table import Table

from ctorgen.generator.driver import generate
from ctorgen.generator.errors import GeneratorError
from ctorgen.generator.interpreter import is_synthetic_oneof_member
from ctorgen.generator.loader import ValidationError, load_file
from ctorgen.generator.options import GeneratorOptions
from ctorgen.generator.types import LongType
from ctorgen.generator.typescript import ClassDeclaration

if TYPE_CHECKING:
    from ctorgen.generator.source import TypescriptFile
    from ctorgen.generator.types import ProtoMessage

_LOG = logging.getLogger(__name__)


@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """Generate constructor-based TypeScript classes from schema descriptors."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _generate(input_file: str, options: GeneratorOptions) -> list[TypescriptFile]:
    try:
        return generate(load_file(input_file), options)
    except (ValidationError, GeneratorError) as e:
        raise click.ClickException(str(e)) from e


@cli.command()
@click.option("--input", "-i", "input_file", required=True, help="Input descriptor set (JSON)")
@click.option("--output", "-o", "output_path", required=True, help="Output directory")
@click.option(
    "--long-type",
    type=click.Choice([t.value for t in LongType]),
    default=LongType.STRING.value,
    show_default=True,
    help="TypeScript type for 64-bit integers without a jstype",
)
@click.option(
    "--oneof-discriminator",
    default="oneofKind",
    show_default=True,
    help="Property name of the tag in oneof unions",
)
def gen(input_file: str, output_path: str, long_type: str, oneof_discriminator: str) -> None:
    """Generate TypeScript files from a descriptor set."""
    options = GeneratorOptions(
        oneof_kind_discriminator=oneof_discriminator,
        normal_long_type=LongType(long_type),
    )
    for source in _generate(input_file, options):
        target = Path(output_path) / source.file_name
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(source.to_source(), encoding="utf-8")
        _LOG.info("Wrote %s", target)
        click.echo(f"Generated {target}")


@cli.command()
@click.option("--input", "-i", "input_file", required=True, help="Input descriptor set (JSON)")
@click.option("--json", "output_json", is_flag=True, help="Output as JSON")
def info(input_file: str, output_json: bool) -> None:
    """Display the classes that would be generated."""
    sources = _generate(input_file, GeneratorOptions())

    rows = []
    for source in sources:
        for message in source.proto_file.all_messages():
            decl = source.declaration(message.type_name)
            if not isinstance(decl, ClassDeclaration):
                continue
            rows.append(
                {
                    "file": source.file_name,
                    "message": message.type_name,
                    "class": decl.name,
                    "parameters": len(decl.parameters),
                    "oneofs": _oneof_names(message),
                }
            )

    if output_json:
        click.echo(json.dumps({"messages": rows}, indent=2))
    else:
        _output_plain(rows)


def _oneof_names(message: ProtoMessage) -> list[str]:
    return [
        o.name
        for o in message.oneofs
        if any(not is_synthetic_oneof_member(f) for f in message.oneof_fields(o))
    ]


def _output_plain(rows: list[dict]) -> None:
    """Output message info using rich text formatting."""
    console = Console()
    console.print("[bold cyan]Messages[/bold cyan]")

    table = Table(show_header=True, box=None, padding=(0, 2, 0, 0))
    table.add_column("Message", style="white")
    table.add_column("Class", style="yellow")
    table.add_column("Params", style="green", justify="right")
    table.add_column("Oneofs", style="dim")
    table.add_column("File", style="dim")

    for row in rows:
        table.add_row(
            row["message"],
            row["class"],
            str(row["parameters"]),
            ", ".join(row["oneofs"]),
            row["file"],
        )

    console.print(table)


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
