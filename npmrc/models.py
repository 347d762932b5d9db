"""
Data models for a parsed ``.npmrc``.

The record keeps ``access`` and ``loglevel`` as the raw strings found in the
file. ``Access`` and ``LogLevel`` describe the values npm documents; the
``access_level`` and ``log_level`` properties give the typed view without
rejecting values npm may add later.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple


class Access(Enum):
    """npm access levels for published packages"""
    PUBLIC = "public"
    RESTRICTED = "restricted"

    @classmethod
    def from_value(cls, value: str) -> Optional["Access"]:
        """Return the matching level, or None for empty/unknown text."""
        normalized = value.strip().lower()
        for member in cls:
            if member.value == normalized:
                return member
        return None


class LogLevel(Enum):
    """npm log levels, quietest first"""
    SILENT = "silent"
    ERROR = "error"
    WARN = "warn"
    NOTICE = "notice"
    HTTP = "http"
    TIMING = "timing"
    INFO = "info"
    VERBOSE = "verbose"
    SILLY = "silly"

    @classmethod
    def from_value(cls, value: str) -> Optional["LogLevel"]:
        """Return the matching level, or None for empty/unknown text."""
        normalized = value.strip().lower()
        for member in cls:
            if member.value == normalized:
                return member
        return None


@dataclass(frozen=True)
class Scope:
    """A ``@name:registry=<url>`` mapping"""
    name: str
    registry_url: str

    @property
    def prefix(self) -> str:
        return f"@{self.name}/"

    def matches(self, package: str) -> bool:
        """Check whether ``package`` lives under this scope."""
        return package.startswith(self.prefix)


@dataclass(frozen=True)
class Npmrc:
    """Representation of ``.npmrc``."""

    # Access level for publishing scoped packages: "public" or "restricted".
    access: str = ""
    loglevel: str = ""
    progress: bool = False
    # Key ``package-lock``
    package_lock: bool = False
    # Base URL of the default registry
    registry: str = ""
    save: bool = False
    # Keys ``init-author-name`` / ``init-author-email``
    init_author_name: str = ""
    init_author_email: str = ""
    scopes: Tuple[Scope, ...] = ()
    other: Mapping[str, str] = field(default_factory=dict, hash=False)

    def __post_init__(self):
        object.__setattr__(self, "scopes", tuple(self.scopes))
        object.__setattr__(self, "other", MappingProxyType(dict(self.other)))

    @property
    def access_level(self) -> Optional[Access]:
        return Access.from_value(self.access)

    @property
    def log_level(self) -> Optional[LogLevel]:
        return LogLevel.from_value(self.loglevel)

    def get_registry_for_package(self, package: str) -> Optional[str]:
        """
        Resolve the registry URL used to install ``package``.

        The first scope whose ``@name/`` prefixes the package name wins.
        Unscoped packages, and scoped packages without a matching scope,
        fall back to the top-level ``registry``. Returns None when neither
        applies.
        """
        for scope in self.scopes:
            if scope.matches(package):
                return scope.registry_url

        if not self.registry:
            return None
        return self.registry

    def to_dict(self) -> Dict[str, Any]:
        """Plain-data view for JSON/YAML output."""
        return {
            "access": self.access,
            "loglevel": self.loglevel,
            "progress": self.progress,
            "package_lock": self.package_lock,
            "registry": self.registry,
            "save": self.save,
            "init_author_name": self.init_author_name,
            "init_author_email": self.init_author_email,
            "scopes": [
                {"name": scope.name, "registry_url": scope.registry_url}
                for scope in self.scopes
            ],
            "other": dict(self.other),
        }
