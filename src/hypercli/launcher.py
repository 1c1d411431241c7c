"""Launch the Hyper GUI, resolve its version, build docs URLs."""

from __future__ import annotations

import json
import logging
import os
import subprocess
import sys
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import TYPE_CHECKING

from .plugins.errors import PathNotFoundError

if TYPE_CHECKING:
    from .core.config import Settings

logger = logging.getLogger(__name__)

DOCS_BASE_URL = "http://ghub.io/"


def build_launch_args(paths: Iterable[str], cwd: Path | None = None) -> list[str]:
    """Absolute path for every path argument; the first missing one raises."""
    base = cwd or Path.cwd()
    args: list[str] = []
    for p in paths:
        resolved = (base / Path(p).expanduser()).resolve()
        if not resolved.exists():
            raise PathNotFoundError(f"{p} does not exist")
        args.append(str(resolved))
    return args


def build_launch_env(verbose: bool = False, base_env: Mapping[str, str] | None = None) -> dict:
    env = dict(os.environ if base_env is None else base_env)
    env["ELECTRON_NO_ATTACH_CONSOLE"] = "true"
    if verbose:
        env["ELECTRON_ENABLE_LOGGING"] = "true"
    env.pop("ELECTRON_RUN_AS_NODE", None)
    return env


def launch(settings: Settings, paths: Iterable[str] = (), verbose: bool = False) -> int:
    """Start the app; verbose waits on it with inherited stdio, otherwise detach."""
    args = build_launch_args(paths, settings.cwd)
    cmd = [settings.app_path, *args]
    env = build_launch_env(verbose)
    logger.debug("launching %s (verbose=%s)", cmd, verbose)

    if verbose:
        return subprocess.run(cmd, env=env).returncode

    kwargs: dict = {}
    if sys.platform == "win32":
        kwargs["creationflags"] = subprocess.DETACHED_PROCESS
    else:
        kwargs["start_new_session"] = True
    subprocess.Popen(
        cmd,
        env=env,
        stdin=subprocess.DEVNULL,
        stdout=subprocess.DEVNULL,
        stderr=subprocess.DEVNULL,
        **kwargs,
    )
    return 0


def app_version(settings: Settings) -> str:
    """Version of the host app: package.json, then ``--version``, else "unknown"."""
    if settings.app_dir is not None:
        pkg = settings.app_dir / "package.json"
        try:
            version = json.loads(pkg.read_text(encoding="utf-8")).get("version")
        except (OSError, json.JSONDecodeError, AttributeError):
            version = None
        if version:
            return str(version)
    try:
        r = subprocess.run(
            [settings.app_path, "--version"],
            capture_output=True,
            text=True,
            timeout=10,
        )
    except (OSError, subprocess.TimeoutExpired):
        return "unknown"
    out = r.stdout.strip()
    return out if r.returncode == 0 and out else "unknown"


def docs_url(name: str) -> str:
    return DOCS_BASE_URL + name
