"""Tests for settings: defaults, env overrides, registry discovery."""

import os
from pathlib import Path
from unittest.mock import patch

from hypercli.core.config import (
    DEFAULT_REGISTRY_URL,
    Settings,
    default_app_path,
    discover_registry_url,
    load_settings,
    normalize_registry_url,
    read_npmrc_registry,
)

_CLEAN_ENV = {
    "HYPER_CONFIG": "",
    "HYPER_SEARCH_API": "",
    "HYPER_APP_DIR": "",
    "HYPER_APP_PATH": "",
    "HYPER_CLI_DEBUG": "",
    "npm_config_registry": "",
    "NPM_CONFIG_REGISTRY": "",
}


class TestSettingsDefaults:
    def test_default_config_path(self):
        assert Settings().config_path == Path.home() / ".hyper.json"

    def test_default_registry(self):
        assert Settings().registry_url == "https://registry.npmjs.org/"

    def test_registry_gets_trailing_slash(self):
        assert Settings(registry_url="https://r.example.com").registry_url == "https://r.example.com/"


class TestNormalizeRegistryUrl:
    def test_keeps_slash(self):
        assert normalize_registry_url("https://r/") == "https://r/"

    def test_empty_falls_back(self):
        assert normalize_registry_url("  ") == DEFAULT_REGISTRY_URL


class TestNpmrc:
    def test_reads_registry(self, tmp_path):
        npmrc = tmp_path / ".npmrc"
        npmrc.write_text("# comment\nsave-exact=true\nregistry = https://npm.example.com\n")
        assert read_npmrc_registry(npmrc) == "https://npm.example.com"

    def test_ignores_scoped_registry(self, tmp_path):
        npmrc = tmp_path / ".npmrc"
        npmrc.write_text("@acme:registry=https://acme.example.com/\n")
        assert read_npmrc_registry(npmrc) is None

    def test_missing_file(self, tmp_path):
        assert read_npmrc_registry(tmp_path / ".npmrc") is None


class TestDiscoverRegistryUrl:
    def test_env_wins(self, tmp_path):
        (tmp_path / ".npmrc").write_text("registry=https://file.example.com/\n")
        env = {**_CLEAN_ENV, "npm_config_registry": "https://env.example.com"}
        with patch.dict(os.environ, env):
            assert discover_registry_url(tmp_path) == "https://env.example.com/"

    def test_project_npmrc(self, tmp_path):
        (tmp_path / ".npmrc").write_text("registry=https://file.example.com/\n")
        with patch.dict(os.environ, _CLEAN_ENV):
            assert discover_registry_url(tmp_path) == "https://file.example.com/"

    def test_default(self, tmp_path):
        with patch.dict(os.environ, _CLEAN_ENV), patch.object(Path, "home", return_value=tmp_path):
            assert discover_registry_url(tmp_path) == DEFAULT_REGISTRY_URL


class TestLoadSettings:
    def test_env_overrides(self, tmp_path):
        env = {
            **_CLEAN_ENV,
            "HYPER_CONFIG": str(tmp_path / "custom.json"),
            "HYPER_SEARCH_API": "https://search.example.com",
            "HYPER_APP_PATH": "/usr/local/bin/hyper-app",
            "HYPER_APP_DIR": str(tmp_path / "app"),
            "HYPER_CLI_DEBUG": "1",
        }
        with patch.dict(os.environ, env):
            s = load_settings()
        assert s.config_path == tmp_path / "custom.json"
        assert s.search_api_base == "https://search.example.com"
        assert s.app_path == "/usr/local/bin/hyper-app"
        assert s.app_dir == tmp_path / "app"
        assert s.debug is True

    def test_cli_arg_beats_env(self, tmp_path):
        env = {**_CLEAN_ENV, "HYPER_CONFIG": str(tmp_path / "env.json")}
        with patch.dict(os.environ, env):
            s = load_settings(config_path=tmp_path / "arg.json")
        assert s.config_path == tmp_path / "arg.json"

    def test_debug_off_by_default(self):
        with patch.dict(os.environ, _CLEAN_ENV):
            assert load_settings().debug is False


class TestDefaultAppPath:
    def test_macos(self):
        with patch("hypercli.core.config.sys.platform", "darwin"):
            assert default_app_path() == "/Applications/Hyper.app/Contents/MacOS/Hyper"

    def test_windows_uses_localappdata(self, tmp_path):
        with patch("hypercli.core.config.sys.platform", "win32"), patch.dict(
            os.environ, {"LOCALAPPDATA": str(tmp_path)}
        ):
            assert default_app_path() == str(tmp_path / "Programs" / "Hyper" / "Hyper.exe")

    def test_linux(self):
        with patch("hypercli.core.config.sys.platform", "linux"):
            assert default_app_path() == "/opt/Hyper/hyper"

    def test_not_the_console_script(self):
        with patch.dict(os.environ, _CLEAN_ENV), patch("hypercli.core.config.sys.platform", "linux"):
            assert load_settings().app_path == "/opt/Hyper/hyper"
