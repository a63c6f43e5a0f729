"""azgit: manage named Git identity profiles.

Identities live as sections of a per-user INI store (typically
~/.config/azgit/config.ini). On first run the store is seeded with a
"default" identity taken from the user's ~/.gitconfig.

Public API:
    IdentityManager: Bootstraps the store and lists identities
    IdentityPaths: Dataclass defining the store and Git config locations
    GitIdentity: Dataclass for one identity's name, email and signing settings
    format_identity: Render one identity as text
    ConfigError, ConfigFileError, ConfigParseError: Exception types

Example:
    ```python
    import sys

    from azgit import IdentityManager, IdentityPaths

    # Defaults resolved once from the user's home directory
    manager = IdentityManager(IdentityPaths.from_home())

    # No-op when the store already exists
    manager.ensure_initialized()

    manager.list_identities(sys.stdout)
    ```
"""

from .exceptions import ConfigError
from .exceptions import ConfigFileError
from .exceptions import ConfigParseError
from .manager import IdentityManager
from .models import GitIdentity
from .models import IdentityPaths
from .utils import format_identity

__version__ = "0.1.0"

__all__ = [
    "IdentityManager",
    "IdentityPaths",
    "GitIdentity",
    "format_identity",
    "ConfigError",
    "ConfigFileError",
    "ConfigParseError",
]
