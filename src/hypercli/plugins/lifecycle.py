"""Plugin lifecycle: install, uninstall, list."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Literal

from .errors import (
    AlreadyInstalledError,
    ConfigInvalidError,
    ConfigMissingError,
    NetworkError,
    NotFoundError,
    PluginError,
)
from .models import Result
from .store import LOCAL_PLUGINS_KEY, PLUGINS_KEY

if TYPE_CHECKING:
    from .registry import RegistryClient
    from .store import ConfigStore

logger = logging.getLogger(__name__)

NETWORK_HINT = "Plugin check failed. Check your internet connection or retry later."


class PluginLifecycle:
    def __init__(self, store: ConfigStore, registry: RegistryClient) -> None:
        self.store = store
        self.registry = registry

    def _config_missing(self) -> ConfigMissingError | None:
        if self.store.exists():
            return None
        return ConfigMissingError(f"No Hyper config found at {self.store.path}")

    def install(self, specifier: str, locally: bool = False) -> Result[None, PluginError]:
        """Add *specifier* to ``plugins`` (or ``localPlugins``) and save.

        The registry is consulted before the already-installed check, so a
        network failure wins over AlreadyInstalledError.
        """
        if missing := self._config_missing():
            return Result.failure(missing)

        lookup = self.registry.exists_on_registry(specifier)
        if not lookup.ok:
            error = lookup.error
            if isinstance(error, NetworkError):
                return Result.failure(
                    NetworkError(f"{error.message}\n{NETWORK_HINT}", cause=error.cause)
                )
            return Result.failure(error)

        if self.store.is_installed(specifier, locally):
            return Result.failure(AlreadyInstalledError(f"{specifier} is already installed"))

        key = LOCAL_PLUGINS_KEY if locally else PLUGINS_KEY
        current = self.store.document.get(key)
        if current is not None and not isinstance(current, list):
            return Result.failure(
                ConfigInvalidError(f"\"{key}\" in {self.store.path} must be a list")
            )

        document = dict(self.store.document)
        entries = self.store.get_local_plugins() if locally else self.store.get_plugins()
        document[key] = [*entries, specifier]
        self.store.save(document)
        logger.debug("installed %s into %s", specifier, key)
        return Result.success()

    def uninstall(self, specifier: str) -> Result[None, PluginError]:
        """Drop every exact match of *specifier* from ``plugins``.

        ``localPlugins`` is left alone.
        """
        if missing := self._config_missing():
            return Result.failure(missing)

        if not self.store.is_installed(specifier, locally=False):
            return Result.failure(NotFoundError(f"{specifier} is not installed"))

        document = dict(self.store.document)
        document[PLUGINS_KEY] = [p for p in self.store.get_plugins() if p != specifier]
        self.store.save(document)
        logger.debug("uninstalled %s", specifier)
        return Result.success()

    def list(self) -> str | Literal[False]:
        plugins = self.store.get_plugins()
        if not plugins:
            return False
        return "\n".join(plugins)
