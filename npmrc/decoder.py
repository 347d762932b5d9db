"""
Decoding of ``.npmrc`` text into an ``Npmrc`` record.

The file is a flat, section-less INI document. It is read into an ordered
key/value map first; the recognized keys are then decoded field by field and
everything else is kept verbatim in ``Npmrc.other``.
"""

import configparser
import logging
from typing import Dict, Mapping, Tuple

from npmrc.exceptions import NpmrcDecodeError
from npmrc.models import Npmrc, Scope

logger = logging.getLogger(__name__)

# Name of the synthetic section wrapping the file body for configparser
_SECTION = "__npmrc__"

# File key -> Npmrc attribute
STRING_FIELDS = {
    "access": "access",
    "loglevel": "loglevel",
    "registry": "registry",
    "init-author-name": "init_author_name",
    "init-author-email": "init_author_email",
}

BOOL_FIELDS = {
    "progress": "progress",
    "package-lock": "package_lock",
    "save": "save",
}


def _build_parser() -> configparser.ConfigParser:
    parser = configparser.ConfigParser(
        delimiters=("=",),
        comment_prefixes=("#", ";"),
        inline_comment_prefixes=None,
        strict=False,
        empty_lines_in_values=False,
        interpolation=None,
        default_section=_SECTION,
    )
    # keep key case, npm keys are case-sensitive
    parser.optionxform = str
    return parser


def parse_ini(text: str) -> Dict[str, str]:
    """
    Parse section-less INI text into an ordered key/value map.

    One ``key=value`` pair per line. ``=`` is the only delimiter, so keys
    such as ``@scope:registry`` or ``//host/:_authToken`` survive intact.
    Lines starting with ``#`` or ``;`` are comments. Leading indentation
    is ignored, so an indented line is a pair of its own. A repeated key keeps
    its first position and its last value.

    Raises:
        NpmrcDecodeError: for lines that are not key/value pairs and for
            ``[section]`` headers.
    """
    # no continuation lines: every line is dedented before parsing
    body = "\n".join(line.strip() for line in text.splitlines())
    parser = _build_parser()
    try:
        parser.read_string(f"[{_SECTION}]\n{body}", source=".npmrc")
    except configparser.ParsingError as exc:
        # account for the synthetic header line
        lineno = exc.errors[0][0] - 1
        lines = text.splitlines()
        line = lines[lineno - 1].strip() if 0 < lineno <= len(lines) else None
        raise NpmrcDecodeError(
            f"Expected 'key=value', got {line!r}",
            value=line,
            line=lineno,
        ) from exc
    except configparser.Error as exc:
        raise NpmrcDecodeError(f"Malformed .npmrc: {exc}") from exc

    sections = parser.sections()
    if sections:
        raise NpmrcDecodeError(
            f"Section headers are not supported: [{sections[0]}]",
            key=sections[0],
        )

    return dict(parser.defaults())


def parse_bool(key: str, text: str) -> bool:
    """Coerce the literal text ``true``/``false`` into a bool."""
    if text == "true":
        return True
    if text == "false":
        return False
    raise NpmrcDecodeError(
        f"Invalid boolean for '{key}': expected \"true\" or \"false\", got {text!r}",
        key=key,
        value=text,
    )


def promote_scopes(other: Mapping[str, str]) -> Tuple[Scope, ...]:
    """
    Build the scope list from ``@``-prefixed keys, in map order.

    ``@acme:registry=https://acme.example/`` becomes
    ``Scope(name="acme", registry_url="https://acme.example/")``.
    """
    scopes = []
    for key, value in other.items():
        if not key.startswith("@"):
            continue

        name = key[1:].split(":", 1)[0]
        if not name:
            logger.debug(f"Skipping scope key with empty name: {key!r}")
            continue

        scopes.append(Scope(name=name, registry_url=value))

    return tuple(scopes)


def decode(values: Mapping[str, str]) -> Npmrc:
    """Decode a raw key/value map into an ``Npmrc`` record."""
    fields = {}
    other = {}

    for key, value in values.items():
        if key in STRING_FIELDS:
            fields[STRING_FIELDS[key]] = value
        elif key in BOOL_FIELDS:
            fields[BOOL_FIELDS[key]] = parse_bool(key, value)
        else:
            other[key] = value

    scopes = promote_scopes(other)
    logger.debug(
        f"Decoded {len(values)} keys: {len(other)} untyped, {len(scopes)} scopes"
    )
    return Npmrc(scopes=scopes, other=other, **fields)


def loads(text: str) -> Npmrc:
    """Parse ``.npmrc`` text into an ``Npmrc`` record."""
    return decode(parse_ini(text))
