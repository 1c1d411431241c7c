"""Plugin data models: Result, RegistryEntry, SearchResultEntry, package names."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar
from urllib.parse import quote

from .errors import PluginError

T = TypeVar("T")
E = TypeVar("E", bound=PluginError)


@dataclass(frozen=True)
class Result(Generic[T, E]):
    """Either a value or an error, never both."""

    value: T | None = None
    error: E | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T | None = None) -> Result[T, E]:
        return cls(value=value)

    @classmethod
    def failure(cls, error: E) -> Result[T, E]:
        return cls(error=error)


@dataclass(frozen=True)
class SearchResultEntry:
    name: str
    description: str = ""


RegistryEntry = dict[str, Any]


def package_name(specifier: str) -> str:
    """Strip ``#ref`` then ``@version`` from a plugin specifier.

    The version delimiter is the first ``@`` for ``name@1.0`` and the
    second one for ``@scope/name@1.0``.
    """
    name = specifier.split("#", 1)[0]
    start = 1 if name.startswith("@") else 0
    at = name.find("@", start)
    return name if at == -1 else name[:at]


def registry_path(specifier: str) -> str:
    """Package name as used in a registry lookup URL: lowercased, ``/`` as ``%2f``."""
    name = package_name(specifier).lower()
    return quote(name, safe="@").replace("%2F", "%2f")
