"""Settings: env, paths, registry and search endpoints."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_REGISTRY_URL = "https://registry.npmjs.org/"
DEFAULT_SEARCH_API = "https://api.npms.io/v2/search"

_TRUTHY = ("1", "true", "yes", "on")


def default_app_path() -> str:
    """Where the installers put the Hyper executable on each platform."""
    if sys.platform == "darwin":
        return "/Applications/Hyper.app/Contents/MacOS/Hyper"
    if sys.platform == "win32":
        local = os.getenv("LOCALAPPDATA", str(Path.home() / "AppData" / "Local"))
        return str(Path(local) / "Programs" / "Hyper" / "Hyper.exe")
    return "/opt/Hyper/hyper"


@dataclass
class Settings:
    config_path: Path = field(default_factory=lambda: Path.home() / ".hyper.json")
    registry_url: str = DEFAULT_REGISTRY_URL
    search_api_base: str = DEFAULT_SEARCH_API
    app_path: str = field(default_factory=default_app_path)
    app_dir: Path | None = None  # unpacked app resources holding package.json
    cwd: Path = field(default_factory=Path.cwd)
    debug: bool = False

    def __post_init__(self) -> None:
        self.registry_url = normalize_registry_url(self.registry_url)


def normalize_registry_url(url: str) -> str:
    url = url.strip() or DEFAULT_REGISTRY_URL
    return url if url.endswith("/") else url + "/"


def read_npmrc_registry(path: Path) -> str | None:
    """Return the ``registry=`` value of an .npmrc file, if any."""
    if not path.is_file():
        return None
    try:
        lines = path.read_text(encoding="utf-8").splitlines()
    except OSError:
        return None
    for line in lines:
        line = line.strip()
        if not line or line.startswith(("#", ";")):
            continue
        key, sep, val = line.partition("=")
        if sep and key.strip() == "registry":
            return val.strip().strip("'\"") or None
    return None


def discover_registry_url(cwd: Path | None = None) -> str:
    """Registry lookup order: npm env var > ./.npmrc > ~/.npmrc > npmjs.org."""
    env_url = os.getenv("npm_config_registry") or os.getenv("NPM_CONFIG_REGISTRY")
    if env_url:
        return normalize_registry_url(env_url)
    for npmrc in ((cwd or Path.cwd()) / ".npmrc", Path.home() / ".npmrc"):
        url = read_npmrc_registry(npmrc)
        if url:
            return normalize_registry_url(url)
    return DEFAULT_REGISTRY_URL


def load_settings(config_path: str | Path | None = None) -> Settings:
    """Load settings with priority: CLI args > env > .env > defaults."""
    load_dotenv()

    settings = Settings()
    settings.registry_url = discover_registry_url(settings.cwd)

    if env_config := os.getenv("HYPER_CONFIG"):
        settings.config_path = Path(env_config).expanduser()
    if search_api := os.getenv("HYPER_SEARCH_API"):
        settings.search_api_base = search_api
    if app_dir := os.getenv("HYPER_APP_DIR"):
        settings.app_dir = Path(app_dir).expanduser()
    if app_path := os.getenv("HYPER_APP_PATH"):
        settings.app_path = app_path
    settings.debug = os.getenv("HYPER_CLI_DEBUG", "").strip().lower() in _TRUTHY

    if config_path:
        settings.config_path = Path(config_path).expanduser()

    return settings
