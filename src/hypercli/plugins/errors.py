"""Error kinds reported by the plugin commands."""

from __future__ import annotations


class PluginError(Exception):
    """Base class for every failure the CLI reports without a traceback."""

    @property
    def message(self) -> str:
        return str(self)


class UsageError(PluginError):
    """A required argument is missing."""


class ConfigMissingError(PluginError):
    """The configuration file could not be read."""


class ConfigInvalidError(PluginError):
    """A known key of the configuration holds the wrong type."""


class NotFoundError(PluginError):
    """Package missing from the registry, or specifier not installed."""


class AlreadyInstalledError(PluginError):
    pass


class NetworkError(PluginError):
    """Registry or search request failed for a reason other than not-found."""

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class SearchError(NetworkError):
    pass


class PathNotFoundError(PluginError):
    """A path passed to the launcher does not exist."""
