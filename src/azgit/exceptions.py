"""Exceptions for azgit."""


class ConfigError(Exception):
    """Base exception for azgit configuration errors."""

    pass


class ConfigFileError(ConfigError):
    """Error creating, reading or writing a configuration file or directory."""

    pass


class ConfigParseError(ConfigError):
    """Error parsing structured configuration text."""

    pass
