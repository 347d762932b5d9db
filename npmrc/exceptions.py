"""
Exceptions raised while loading ``.npmrc``.

File access failures are not wrapped: they surface as the built-in
``OSError`` family raised by the filesystem layer.
"""

from typing import Optional


class NpmrcError(Exception):
    """Base error for npmrc loading."""
    pass


class HomeDirectoryNotFoundError(NpmrcError):
    """The platform could not resolve the user's home directory."""

    def __init__(self, message: str = "User's home directory not found"):
        super().__init__(message)


class NpmrcDecodeError(NpmrcError, ValueError):
    """
    The file content is not valid key/value text, or a typed field holds a
    value that cannot be coerced.
    """

    def __init__(
        self,
        message: str,
        key: Optional[str] = None,
        value: Optional[str] = None,
        line: Optional[int] = None,
    ):
        """
        Initialize NpmrcDecodeError.

        Args:
            message: Human-readable error message
            key: Configuration key being decoded, when known
            value: Raw text that failed to decode, when known
            line: 1-based line number in the source text, when known
        """
        self.message = message
        self.key = key
        self.value = value
        self.line = line

        error_parts = [message]

        if line is not None:
            error_parts.append(f"Line: {line}")

        if key is not None:
            error_parts.append(f"Key: {key}")

        super().__init__(" | ".join(error_parts))
