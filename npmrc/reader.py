"""Locating and reading the user's ``.npmrc``."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Optional, Union

from npmrc.decoder import loads
from npmrc.exceptions import HomeDirectoryNotFoundError, NpmrcDecodeError
from npmrc.models import Npmrc

logger = logging.getLogger(__name__)

NPMRC_FILENAME = ".npmrc"

HomeProvider = Callable[[], Optional[Path]]


def default_home_provider() -> Optional[Path]:
    """Return the current user's home directory, or None if unresolvable."""
    try:
        return Path.home()
    except (RuntimeError, KeyError):
        # no HOME/USERPROFILE and no passwd entry
        return None


class NpmrcReader:
    """Reads ``.npmrc`` from a home directory supplied by ``home_provider``."""

    def __init__(
        self,
        home_provider: Optional[HomeProvider] = None,
        filename: str = NPMRC_FILENAME,
    ):
        self.home_provider = home_provider or default_home_provider
        self.filename = filename

    def locate(self) -> Path:
        """Return the path of the user's ``.npmrc``."""
        home = self.home_provider()
        if home is None:
            raise HomeDirectoryNotFoundError()
        return Path(home) / self.filename

    def read(self) -> Npmrc:
        """
        Read and decode the user's ``.npmrc``.

        Raises:
            HomeDirectoryNotFoundError: the home directory is unknown
            OSError: the file is missing or unreadable
            NpmrcDecodeError: the content is not UTF-8 or does not decode
        """
        return self.read_path(self.locate())

    def read_path(self, path: Union[str, Path]) -> Npmrc:
        """
        Read and decode the ``.npmrc`` at ``path``.

        The file must be UTF-8; a leading byte order mark is dropped.
        """
        path = Path(path)
        logger.debug(f"Reading npm configuration from {path}")
        try:
            text = path.read_text(encoding="utf-8-sig")
        except UnicodeDecodeError as exc:
            raise NpmrcDecodeError(
                f"{path} is not valid UTF-8: {exc.reason} at byte {exc.start}",
            ) from exc
        return loads(text)


def read(home_provider: Optional[HomeProvider] = None) -> Npmrc:
    """Read out ``~/.npmrc`` and return it."""
    return NpmrcReader(home_provider=home_provider).read()


def read_path(path: Union[str, Path]) -> Npmrc:
    """Read out the ``.npmrc`` at ``path`` and return it."""
    return NpmrcReader().read_path(path)
