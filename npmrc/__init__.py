"""
Read npm's ``.npmrc`` file into a typed record.

    import npmrc

    config = npmrc.read()
    config.get_registry_for_package("@acme/widget")
"""

from npmrc.decoder import loads
from npmrc.exceptions import (
    HomeDirectoryNotFoundError,
    NpmrcDecodeError,
    NpmrcError,
)
from npmrc.models import Access, LogLevel, Npmrc, Scope
from npmrc.reader import NpmrcReader, default_home_provider, read, read_path

__all__ = [
    "read",
    "read_path",
    "loads",
    "NpmrcReader",
    "default_home_provider",
    "Npmrc",
    "Scope",
    "Access",
    "LogLevel",
    "NpmrcError",
    "HomeDirectoryNotFoundError",
    "NpmrcDecodeError",
]
