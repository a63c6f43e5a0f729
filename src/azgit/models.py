"""Data models for azgit."""

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from .exceptions import ConfigFileError

STORE_DIR_NAME = ".config/azgit"
STORE_FILE_NAME = "config.ini"
GIT_CONFIG_FILE_NAME = ".gitconfig"


@dataclass(frozen=True)
class IdentityPaths:
    """Paths to the files azgit reads and writes.

    Immutable configuration injected into IdentityManager. Defaults are
    resolved once at startup via from_home().

    Attributes:
        store: Path to the azgit identity store (INI)
        git_config: Path to the user's global Git configuration, read only
            during bootstrap
    """

    store: Path
    git_config: Path

    @classmethod
    def from_home(cls, home: Path | str | None = None) -> "IdentityPaths":
        """Build default paths relative to a home directory.

        Args:
            home: Home directory to resolve from (default: current user's home)

        Returns:
            IdentityPaths for <home>/.config/azgit/config.ini and <home>/.gitconfig

        Raises:
            ConfigFileError: If the user's home directory cannot be determined
        """
        if home is None:
            try:
                home = Path.home()
            except (RuntimeError, KeyError) as e:
                raise ConfigFileError(f"Failed to get user's home directory: {e}") from e

        home = Path(home)
        return cls(
            store=home / STORE_DIR_NAME / STORE_FILE_NAME,
            git_config=home / GIT_CONFIG_FILE_NAME,
        )


@dataclass
class GitIdentity:
    """A named bundle of Git author and signing attributes.

    The section name holding the identity is its key and is not stored here.
    """

    name: str = ""
    email: str = ""
    signing_key: str = ""
    gpg_sign: str = ""

    @classmethod
    def from_section(cls, section: Mapping[str, str]) -> "GitIdentity":
        """Read an identity from a store section. Absent keys become empty strings."""
        return cls(
            name=section.get("name", ""),
            email=section.get("email", ""),
            signing_key=section.get("signingkey", ""),
            gpg_sign=section.get("gpgsign", ""),
        )

    @property
    def is_empty(self) -> bool:
        return not self.name and not self.email

    def to_section(self) -> dict[str, str]:
        """Convert to store section keys.

        name and email are always written, even when empty. signingkey and
        gpgsign are written only when set.
        """
        section = {"name": self.name, "email": self.email}
        if self.signing_key:
            section["signingkey"] = self.signing_key
        if self.gpg_sign:
            section["gpgsign"] = self.gpg_sign
        return section
