"""Plugins: config store, registry lookups, install/uninstall, search."""

from .errors import (
    AlreadyInstalledError,
    ConfigInvalidError,
    ConfigMissingError,
    NetworkError,
    NotFoundError,
    PathNotFoundError,
    PluginError,
    SearchError,
    UsageError,
)
from .lifecycle import PluginLifecycle
from .models import Result, SearchResultEntry, package_name, registry_path
from .registry import RegistryClient
from .search import SearchService
from .store import ConfigStore

__all__ = [
    "AlreadyInstalledError",
    "ConfigInvalidError",
    "ConfigMissingError",
    "ConfigStore",
    "NetworkError",
    "NotFoundError",
    "PathNotFoundError",
    "PluginError",
    "PluginLifecycle",
    "RegistryClient",
    "Result",
    "SearchError",
    "SearchResultEntry",
    "SearchService",
    "UsageError",
    "package_name",
    "registry_path",
]
