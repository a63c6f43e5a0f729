"""Identity manager: store bootstrap and identity listing."""

import logging
from collections.abc import Iterator
from typing import TextIO

from .exceptions import ConfigError
from .exceptions import ConfigFileError
from .exceptions import ConfigParseError
from .models import GitIdentity
from .models import IdentityPaths
from .utils import format_identity
from .utils import read_ini
from .utils import write_ini

logger = logging.getLogger(__name__)

DEFAULT_IDENTITY = "default"


class IdentityManager:
    """Manages the azgit identity store.

    The store is an INI file with one section per identity. It is created
    once from the user's global Git configuration and read on every listing.
    Applications inject paths via IdentityPaths.

    Args:
        paths: Locations of the store and the Git global configuration
    """

    def __init__(self, paths: IdentityPaths):
        """Initialize identity manager with injected paths.

        Args:
            paths: IdentityPaths defining where files are located
        """
        self.paths = paths

    # ===== Bootstrap =====

    def is_initialized(self) -> bool:
        """Return True if the store file exists.

        Raises:
            ConfigFileError: If the store path cannot be checked
        """
        try:
            self.paths.store.stat()
        except (FileNotFoundError, NotADirectoryError):
            return False
        except OSError as e:
            raise ConfigFileError(f"Failed to check identity store {self.paths.store}: {e}") from e
        return True

    def ensure_initialized(self) -> bool:
        """Create the store from the Git global configuration if it is missing.

        An existing store is never touched. Otherwise the store directory is
        created and a single "default" identity derived from the Git global
        configuration is written.

        Returns:
            True if the store was created, False if it already existed

        Raises:
            ConfigFileError: If the directory or store cannot be written
            ConfigParseError: If the Git global configuration cannot be read
        """
        if self.is_initialized():
            logger.debug(f"Identity store already exists at {self.paths.store}")
            return False

        store_dir = self.paths.store.parent
        try:
            store_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise ConfigFileError(f"Failed to ensure azgit config directory {store_dir} exists: {e}") from e

        identity = self.fetch_default_identity()

        write_ini(self.paths.store, {DEFAULT_IDENTITY: identity.to_section()})
        logger.info(f"Created identity store at {self.paths.store} with '{DEFAULT_IDENTITY}' identity")
        return True

    def fetch_default_identity(self) -> GitIdentity:
        """Derive an identity from the Git global configuration.

        Reads user.name, user.email, user.signingkey and commit.gpgsign.

        Returns:
            GitIdentity with empty strings for unset values

        Raises:
            ConfigParseError: If the file is missing, unreadable or malformed
        """
        try:
            git_config = read_ini(self.paths.git_config)
        except ConfigError as e:
            raise ConfigParseError(f"Failed to read Git global configuration: {e}") from e

        user = git_config.get("user", {})
        commit = git_config.get("commit", {})
        return GitIdentity(
            name=user.get("name", ""),
            email=user.get("email", ""),
            signing_key=user.get("signingkey", ""),
            gpg_sign=commit.get("gpgsign", ""),
        )

    # ===== Listing =====

    def load_store(self) -> dict[str, dict[str, str]]:
        """Read every section of the store in declaration order.

        Does not bootstrap; callers run ensure_initialized() first.

        Raises:
            ConfigFileError: If the store cannot be read
            ConfigParseError: If the store is malformed
        """
        return read_ini(self.paths.store)

    def iter_identities(self) -> Iterator[tuple[str, GitIdentity]]:
        """Iterate displayable identities in store order.

        The store is loaded eagerly so read errors surface on call. Sections
        with neither name nor email are skipped.

        Returns:
            Iterator of (section name, GitIdentity) pairs
        """
        return self._displayable(self.load_store())

    def list_identities(self, out: TextIO) -> int:
        """Write every displayable identity to out as formatted text.

        Args:
            out: Text stream to write to

        Returns:
            Number of identities written
        """
        identities = self.iter_identities()

        out.write("List of Identities:\n")
        count = 0
        for section, identity in identities:
            out.write(format_identity(section, identity) + "\n")
            count += 1
        return count

    # ===== Private Helpers =====

    @staticmethod
    def _displayable(store: dict[str, dict[str, str]]) -> Iterator[tuple[str, GitIdentity]]:
        for section, values in store.items():
            identity = GitIdentity.from_section(values)
            if identity.is_empty:
                logger.debug(f"Skipping section '{section}' without name or email")
                continue
            yield section, identity
