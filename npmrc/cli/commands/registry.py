"""
Registry command implementation.

Prints the registry URL npm would use for a package.
"""
from pathlib import Path
from typing import Optional

import typer

from npmrc.cli.commands import load_or_exit
from npmrc.rich_utils.ui_helpers import configure_logging, get_console


def registry_command(
    package: str = typer.Argument(..., help="Package name, e.g. lodash or @acme/widget"),
    npmrc_path: Optional[Path] = typer.Option(None, "--npmrc", help="Read this file instead of ~/.npmrc"),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Enable debug logging"),
):
    """Resolve the registry URL used for a package."""
    configure_logging(verbose)
    console = get_console()

    config = load_or_exit(console, npmrc_path)
    registry_url = config.get_registry_for_package(package)
    if registry_url is None:
        console.print(f"No registry configured for {package}", markup=False)
        raise typer.Exit(code=1)

    console.print(registry_url, markup=False, highlight=False)
