"""CLI entry point: plugin sub-commands, otherwise launch the Hyper app."""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from . import launcher
from .core.config import Settings, load_settings
from .plugins import (
    ConfigMissingError,
    ConfigStore,
    NetworkError,
    PathNotFoundError,
    PluginError,
    PluginLifecycle,
    RegistryClient,
    SearchService,
    UsageError,
)

console = Console()
err_console = Console(stderr=True)

logger = logging.getLogger("hypercli")


# ── Setup ───────────────────────────────────────────────────────────


def _setup_logging(settings: Settings) -> None:
    if not settings.debug or logger.handlers:
        return
    logger.addHandler(RichHandler(console=err_console, show_path=False))
    logger.setLevel(logging.DEBUG)


def _lifecycle(settings: Settings) -> PluginLifecycle:
    store = ConfigStore(settings.config_path)
    if not store.exists():
        raise ConfigMissingError(
            f"Error! Config file not found: {settings.config_path}\nPlease launch Hyper and retry."
        )
    return PluginLifecycle(store, RegistryClient(settings.registry_url))


def _require_name(args: list[str]) -> str:
    if not args or not args[0].strip():
        raise UsageError("Plugin name is required")
    return args[0]


def _fail(error: PluginError) -> int:
    err_console.print(f"[red]{escape(error.message)}[/red]")
    return 1


# ── Plugin commands ─────────────────────────────────────────────────


def _cmd_install(settings: Settings, args: list[str]) -> int:
    name = _require_name(args)
    lifecycle = _lifecycle(settings)
    with console.status(f"Installing {escape(name)}"):
        result = lifecycle.install(name, locally=False)
    if not result.ok:
        return _fail(result.error)
    console.print(f"[green]{escape(name)} installed successfully![/green]")
    return 0


def _cmd_uninstall(settings: Settings, args: list[str]) -> int:
    name = _require_name(args)
    result = _lifecycle(settings).uninstall(name)
    if not result.ok:
        return _fail(result.error)
    console.print(f"[green]{escape(name)} uninstalled successfully![/green]")
    return 0


def _cmd_list(settings: Settings, args: list[str]) -> int:
    plugins = _lifecycle(settings).list()
    if plugins is False:
        console.print("No plugins installed yet.", style="dim")
    else:
        console.print(escape(plugins))
    return 0


def _print_results(entries) -> int:
    if not entries:
        err_console.print("[red]Your search returned no results[/red]")
        return 1
    table = Table(show_header=True, header_style="bold", box=None)
    table.add_column("name", style="cyan", no_wrap=True)
    table.add_column("description")
    for entry in entries:
        table.add_row(escape(entry.name), escape(entry.description))
    console.print(table)
    return 0


def _cmd_search(settings: Settings, args: list[str]) -> int:
    pattern = " ".join(args).strip()
    service = SearchService(settings.search_api_base)
    with console.status("Searching"):
        entries = service.search(pattern)
    return _print_results(entries)


def _cmd_list_remote(settings: Settings, args: list[str]) -> int:
    service = SearchService(settings.search_api_base)
    with console.status("Searching"):
        entries = service.list_remote()
    return _print_results(entries)


def _cmd_docs(settings: Settings, args: list[str]) -> int:
    name = _require_name(args)
    click.launch(launcher.docs_url(name))
    return 0


def _cmd_version(settings: Settings, args: list[str]) -> int:
    console.print(launcher.app_version(settings))
    return 0


Handler = Callable[[Settings, list[str]], int]

COMMANDS: dict[str, Handler] = {
    "install": _cmd_install,
    "i": _cmd_install,
    "uninstall": _cmd_uninstall,
    "u": _cmd_uninstall,
    "rm": _cmd_uninstall,
    "remove": _cmd_uninstall,
    "list": _cmd_list,
    "ls": _cmd_list,
    "search": _cmd_search,
    "s": _cmd_search,
    "list-remote": _cmd_list_remote,
    "lsr": _cmd_list_remote,
    "ls-remote": _cmd_list_remote,
    "docs": _cmd_docs,
    "d": _cmd_docs,
    "h": _cmd_docs,
    "home": _cmd_docs,
    "version": _cmd_version,
}


def run_command(name: str, args: list[str], settings: Settings | None = None) -> int:
    """Run a plugin sub-command and map known failures to exit code 1."""
    settings = settings or load_settings()
    _setup_logging(settings)
    try:
        return COMMANDS[name](settings, args)
    except PluginError as e:
        if isinstance(e, NetworkError) and e.cause is not None:
            logger.debug("network failure", exc_info=e.cause)
        return _fail(e)


# ── Launch (default command) ────────────────────────────────────────


@click.command(context_settings={"help_option_names": ["--help"]})
@click.argument("paths", nargs=-1)
@click.option("--verbose", "-v", is_flag=True, help="Verbose mode (disabled by default)")
def _click_main(paths: tuple[str, ...], verbose: bool) -> None:
    """Launch Hyper, opening a tab for each PATH."""
    settings = load_settings()
    _setup_logging(settings)
    try:
        code = launcher.launch(settings, paths, verbose)
    except PathNotFoundError as e:
        sys.exit(_fail(e))
    except FileNotFoundError:
        err_console.print(
            f"[red]Hyper executable not found: {escape(settings.app_path)}[/red]\n"
            "Set HYPER_APP_PATH to the installed app."
        )
        sys.exit(1)
    sys.exit(code)


def main():
    """True entry point: intercepts plugin sub-commands before click."""
    if len(sys.argv) > 1 and sys.argv[1] in COMMANDS:
        sys.exit(run_command(sys.argv[1], sys.argv[2:]))
    _click_main()


if __name__ == "__main__":
    main()
