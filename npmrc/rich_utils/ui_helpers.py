import logging
import os
import sys
from typing import Optional, TextIO

from rich.console import Console
from rich.logging import RichHandler

# Any of these being set means output goes to a log, not a person
PLAIN_OUTPUT_VARS = ("CI", "GITHUB_ACTIONS", "NO_COLOR")


def wants_plain_output(stream: Optional[TextIO] = None) -> bool:
    """Check whether output should be uncolored and unwrapped."""
    stream = stream if stream is not None else sys.stdout
    if any(os.getenv(var) is not None for var in PLAIN_OUTPUT_VARS):
        return True
    if os.getenv("TERM") == "dumb":
        return True
    isatty = getattr(stream, "isatty", None)
    return not (isatty and isatty())


def get_console() -> Console:
    """Create a console for stdout, plain when piped or under CI."""
    if wants_plain_output():
        # URLs and keys must survive copy/paste unwrapped
        return Console(force_terminal=False, no_color=True, soft_wrap=True)
    return Console()


def configure_logging(verbose: bool = False) -> None:
    """Route library logging through Rich on stderr."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )
