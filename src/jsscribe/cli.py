import json
import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from jsscribe import __version__
from jsscribe.config import load_scan_config
from jsscribe.errors import ScribeError
from jsscribe.parsers.javascript_parser import JavaScriptParser
from jsscribe.scout import scout_file
from jsscribe.visitor import find_unknown_kinds

app = typer.Typer(
    help="jsscribe - locate documentable functions and classes in JavaScript",
    no_args_is_help=True,
)

console = Console()


@app.command()
def scan(
    file_path: Path,
    json_output: bool = typer.Option(False, "--json", help="Output results as JSON"),
):
    """List the documentable entities of a JavaScript file.

    Args:
        file_path: Path to the JavaScript file to scan
    """
    try:
        config = load_scan_config()
        entities = scout_file(file_path, config)
    except (FileNotFoundError, ValueError, ScribeError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=2)

    if json_output:
        typer.echo(json.dumps([entity.to_dict() for entity in entities], indent=2))
        return

    table = Table(title=file_path.name)
    table.add_column("Kind")
    table.add_column("Line", justify="right")
    table.add_column("Indent", justify="right")
    table.add_column("Class")
    table.add_column("Header")
    for entity in entities:
        table.add_row(
            entity.kind,
            str(entity.line),
            str(entity.indent),
            entity.enclosing_class or "",
            " ".join(entity.header.split()),
        )
    console.print(table)


@app.command()
def kinds(file_path: Path):
    """Report syntax node kinds the child enumerator does not know about.

    Args:
        file_path: Path to the JavaScript file to inspect
    """
    try:
        source_code = file_path.read_text(encoding="utf8")
        root = JavaScriptParser().parse(source_code)
    except (OSError, ScribeError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    gaps = find_unknown_kinds(root)
    if not gaps:
        typer.echo("All node kinds are covered.")
        return
    for kind, count in gaps.most_common():
        typer.echo(f"{kind}\t{count}")


def _version_callback(value: bool):
    """Show version and exit."""
    if value:
        console.print(f"jsscribe version {__version__}")
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Log debug output"),
):
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
