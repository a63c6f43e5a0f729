"""Utility functions for azgit."""

import configparser
import re
from collections.abc import Iterable
from collections.abc import Iterator
from pathlib import Path

from .exceptions import ConfigFileError
from .exceptions import ConfigParseError
from .models import GitIdentity

# Section headers can never be empty, so no file section maps onto configparser's
# defaults section and a literal [DEFAULT] is read as an ordinary section.
_NO_DEFAULT_SECTION = ""

# Keys that appear before the first section header are read into this section.
GLOBAL_SECTION = "DEFAULT"

_INLINE_COMMENT = re.compile(r"\s[#;]")


def _new_parser() -> configparser.ConfigParser:
    return configparser.ConfigParser(
        interpolation=None,
        strict=False,
        allow_no_value=True,
        default_section=_NO_DEFAULT_SECTION,
    )


def _normalize_lines(lines: Iterable[str]) -> Iterator[str]:
    """Prepare INI lines for configparser.

    Leading whitespace is dropped so indented keys never read as continuation
    lines, and a global section header is inserted when keys come first.
    """
    started = False
    for line in lines:
        line = line.lstrip()
        if not started and line.strip() and not line.startswith(("#", ";")):
            if not line.startswith("["):
                yield f"[{GLOBAL_SECTION}]\n"
            started = True
        yield line


def _clean_value(value: str | None) -> str:
    if value is None:
        return ""
    if value.startswith('"'):
        end = value.rfind('"')
        if end > 0:
            return value[1:end]
    match = _INLINE_COMMENT.search(value)
    if match:
        return value[: match.start()].rstrip()
    return value


def _quote_value(value: str) -> str:
    if value.startswith('"') or value != value.strip() or _INLINE_COMMENT.search(value):
        return f'"{value}"'
    return value


def read_ini(path: Path) -> dict[str, dict[str, str]]:
    """Read an INI or gitconfig-style file into an ordered mapping.

    Sections keep their declaration order. Keys may be indented freely and
    are lowercased. Keys before the first header belong to the DEFAULT
    section. Double-quoted values are unquoted, unquoted values lose any
    " #" or " ;" inline comment and keys without a value read as empty
    strings. Repeated sections are merged, later values win.

    Args:
        path: File to read

    Returns:
        Mapping of section name -> mapping of key -> value

    Raises:
        ConfigFileError: If the file cannot be opened or read
        ConfigParseError: If the contents are not valid INI text
    """
    parser = _new_parser()
    try:
        with open(path, encoding="utf-8") as f:
            parser.read_file(_normalize_lines(f), source=str(path))
    except OSError as e:
        raise ConfigFileError(f"Failed to read {path}: {e}") from e
    except (configparser.Error, UnicodeDecodeError) as e:
        raise ConfigParseError(f"Failed to parse {path}: {e}") from e

    return {
        section: {key: _clean_value(value) for key, value in parser.items(section, raw=True)}
        for section in parser.sections()
    }


def write_ini(path: Path, sections: dict[str, dict[str, str]]) -> None:
    """Write an ordered mapping of sections to an INI file.

    Values that would not survive read_ini as written are double-quoted.

    Args:
        path: File to write (parent directory must exist)
        sections: Mapping of section name -> mapping of key -> value

    Raises:
        ConfigFileError: If the file cannot be written
    """
    parser = _new_parser()
    parser.read_dict(
        {section: {key: _quote_value(value) for key, value in values.items()} for section, values in sections.items()}
    )
    try:
        with open(path, "w", encoding="utf-8") as f:
            parser.write(f)
    except OSError as e:
        raise ConfigFileError(f"Failed to write configuration to {path}: {e}") from e


def format_identity(section: str, identity: GitIdentity) -> str:
    """Render one identity as a human-readable block.

    The block starts with a newline so consecutive blocks are separated by a
    blank line. Signing Key and GPG Sign lines appear only when set.

    Args:
        section: Section name the identity is stored under
        identity: Identity to render

    Returns:
        Tab-indented block ending in a newline
    """
    block = f"\nIdentity [{section}]:\n"
    block += f"\tName: {identity.name}\n"
    block += f"\tEmail: {identity.email}\n"
    if identity.signing_key:
        block += f"\tSigning Key: {identity.signing_key}\n"
    if identity.gpg_sign:
        block += f"\tGPG Sign: {identity.gpg_sign}\n"
    return block
