"""
Show command implementation.

Renders the parsed ``.npmrc`` as Rich tables, JSON or YAML.
"""
import json
from enum import Enum
from pathlib import Path
from typing import Optional

import typer
import yaml
from rich.console import Console
from rich.table import Table

from npmrc.cli.commands import load_or_exit
from npmrc.models import Npmrc
from npmrc.rich_utils.ui_helpers import configure_logging, get_console


class OutputFormat(str, Enum):
    TABLE = "table"
    JSON = "json"
    YAML = "yaml"


def render_tables(console: Console, config: Npmrc) -> None:
    """Print known fields, scopes and remaining keys as tables."""
    settings = Table(title="Settings")
    settings.add_column("Key", style="cyan")
    settings.add_column("Value")
    for key, value in config.to_dict().items():
        if key in ("scopes", "other"):
            continue
        settings.add_row(key, str(value))
    console.print(settings)

    if config.scopes:
        scopes = Table(title="Scopes")
        scopes.add_column("Scope", style="cyan")
        scopes.add_column("Registry")
        for scope in config.scopes:
            scopes.add_row(f"@{scope.name}", scope.registry_url)
        console.print(scopes)

    if config.other:
        other = Table(title="Other keys")
        other.add_column("Key", style="cyan")
        other.add_column("Value")
        for key, value in config.other.items():
            other.add_row(key, value)
        console.print(other)


def show_command(
    npmrc_path: Optional[Path] = typer.Option(None, "--npmrc", help="Read this file instead of ~/.npmrc"),
    output_format: OutputFormat = typer.Option(OutputFormat.TABLE, "-f", "--format", help="Output format"),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Enable debug logging"),
):
    """Show the parsed contents of .npmrc."""
    configure_logging(verbose)
    console = get_console()

    config = load_or_exit(console, npmrc_path)

    if output_format == OutputFormat.JSON:
        typer.echo(json.dumps(config.to_dict(), indent=2))
    elif output_format == OutputFormat.YAML:
        typer.echo(yaml.safe_dump(config.to_dict(), sort_keys=False))
    else:
        render_tables(console, config)
