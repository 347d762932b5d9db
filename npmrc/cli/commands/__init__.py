"""CLI command implementations."""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from npmrc.exceptions import NpmrcError
from npmrc.models import Npmrc
from npmrc.reader import NpmrcReader

logger = logging.getLogger(__name__)

# Exit code for configuration that cannot be located, read or decoded
EXIT_LOAD_ERROR = 2


def load_or_exit(console: Console, npmrc_path: Optional[Path]) -> Npmrc:
    """Load the configuration, reporting failures and exiting with code 2."""
    reader = NpmrcReader()
    try:
        if npmrc_path is not None:
            return reader.read_path(npmrc_path)
        return reader.read()
    except (NpmrcError, OSError) as e:
        logger.debug("Failed to load npm configuration", exc_info=True)
        console.print(f"❌ Could not load npm configuration: {e}", markup=False)
        raise typer.Exit(code=EXIT_LOAD_ERROR)
