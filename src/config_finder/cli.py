"""CLI adapter for ``config_finder`` built on ``lib_cli_exit_tools``.

Purpose
-------
Expose the directory accumulator on the command line so operators can see
where an application would look for its configuration without writing Python.

Contents
--------
* :data:`CLICK_CONTEXT_SETTINGS` – shared Click settings ensuring ``-h`` works.
* :func:`cli` – root command that wires global traceback handling into
  ``lib_cli_exit_tools``.
* :func:`cli_info` – prints distribution metadata for quick diagnostics.
* :func:`cli_dirs` – prints the accumulated directories as JSON.
* :func:`cli_search` – prints ``path``/``local_path`` candidate pairs as JSON.
* :func:`main` – entry point used by ``console_scripts`` registration.

System Role
-----------
The CLI lives in the outermost layer. It only calls :class:`ConfigDirs`
methods; ``lib_cli_exit_tools`` centralises the exit code strategy so
failures (e.g. a deleted working directory) render consistently.
"""

from __future__ import annotations

import json
import sys
from importlib import metadata
from pathlib import Path
from typing import Any, Callable, Final, Optional, Sequence, TypeVar

import lib_cli_exit_tools
import rich_click as click

from .core import ConfigDirs

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}
_TRACEBACK_SUMMARY_LIMIT: Final[int] = 500
_TRACEBACK_VERBOSE_LIMIT: Final[int] = 10_000

_F = TypeVar("_F", bound=Callable[..., Any])


def _resolve_version() -> str:
    """Return the installed package version, or ``"0.0.0"`` when not installed."""

    try:
        return metadata.version("config_finder")
    except metadata.PackageNotFoundError:
        return "0.0.0"


def _location_options(func: _F) -> _F:
    """Attach the options selecting which locations are accumulated."""

    options = [
        click.option(
            "--path",
            "paths",
            multiple=True,
            type=click.Path(path_type=Path),
            help="Directory to search (``.config`` is appended when missing); repeatable",
        ),
        click.option(
            "--start",
            type=click.Path(path_type=Path),
            default=None,
            help="Walk upwards from this directory, adding each ancestor",
        ),
        click.option(
            "--container",
            type=click.Path(path_type=Path),
            default=None,
            help="Last ancestor included in the --start walk (defaults to the top of --start)",
        ),
        click.option("--cwd/--no-cwd", "with_cwd", default=False, help="Add the current working directory"),
        click.option(
            "--platform-dir/--no-platform-dir",
            "with_platform",
            default=False,
            help="Add $XDG_CONFIG_HOME (or ~/.config), or roaming app data on Windows",
        ),
        click.option("--etc/--no-etc", "with_etc", default=False, help="Add /etc"),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def _accumulate(
    paths: Sequence[Path],
    start: Optional[Path],
    container: Optional[Path],
    with_cwd: bool,
    with_platform: bool,
    with_etc: bool,
) -> ConfigDirs:
    """Build a :class:`ConfigDirs` in the documented order: paths, walk, cwd, platform, etc."""

    dirs = ConfigDirs.empty()
    for path in paths:
        dirs.add_path(path)
    if start is not None:
        dirs.add_all_paths_until(start, container if container is not None else Path(start.anchor or "."))
    if with_cwd:
        dirs.add_current_dir()
    if with_platform:
        dirs.add_platform_config_dir()
    if with_etc:
        dirs.add_root_etc()
    return dirs


@click.group(
    help="Locate configuration files and their local overrides",
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=False,
)
@click.version_option(
    version=_resolve_version(),
    prog_name="config_finder",
    message="config_finder version %(version)s",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool) -> None:
    """Root command configuring traceback handling for all subcommands.

    Side Effects
        Mutates ``lib_cli_exit_tools.config.traceback`` and
        ``lib_cli_exit_tools.config.traceback_force_color``.
    """

    ctx.ensure_object(dict)
    ctx.obj["traceback"] = traceback
    lib_cli_exit_tools.config.traceback = traceback
    lib_cli_exit_tools.config.traceback_force_color = traceback


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print basic distribution metadata so users can confirm installation."""

    try:
        meta = metadata.metadata("config_finder")
    except metadata.PackageNotFoundError:
        click.echo("config_finder (metadata unavailable)")
        return
    click.echo(f"Info for {meta.get('Name', 'config_finder')}:")
    click.echo(f"  Version         : {meta.get('Version', _resolve_version())}")
    click.echo(f"  Requires-Python : {meta.get('Requires-Python', '>=3.10')}")
    summary = meta.get("Summary")
    if summary:
        click.echo(f"  Summary         : {summary}")


@cli.command("dirs", context_settings=CLICK_CONTEXT_SETTINGS)
@_location_options
@click.option("--indent", type=int, default=None, help="Pretty-print JSON output with the provided indent size")
def cli_dirs(
    paths: Sequence[Path],
    start: Optional[Path],
    container: Optional[Path],
    with_cwd: bool,
    with_platform: bool,
    with_etc: bool,
    indent: Optional[int],
) -> None:
    """Print the directories that would be searched, in order.

    Examples
    --------
    >>> from click.testing import CliRunner
    >>> result = CliRunner().invoke(cli, ["dirs", "--path", "repo"])
    >>> json.loads(result.output)
    ['repo/.config']
    """

    dirs = _accumulate(paths, start, container, with_cwd, with_platform, with_etc)
    click.echo(json.dumps([path.as_posix() for path in dirs.paths()], indent=indent))


@cli.command("search", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("app")
@click.argument("base")
@click.option("--ext", default="", help="File extension without the leading dot (may be empty)")
@click.option("--reverse/--no-reverse", default=False, help="List candidates from the last directory first")
@_location_options
@click.option("--indent", type=int, default=None, help="Pretty-print JSON output with the provided indent size")
def cli_search(
    app: str,
    base: str,
    ext: str,
    reverse: bool,
    paths: Sequence[Path],
    start: Optional[Path],
    container: Optional[Path],
    with_cwd: bool,
    with_platform: bool,
    with_etc: bool,
    indent: Optional[int],
) -> None:
    """Print ``APP/BASE.EXT`` and ``APP/BASE.local.EXT`` candidates for each directory.

    Pass an empty string as *APP* to search for *BASE* directly in each
    directory.
    """

    dirs = _accumulate(paths, start, container, with_cwd, with_platform, with_etc)
    candidates = dirs.search(app, base, ext.lstrip("."))
    ordered = reversed(candidates) if reverse else candidates
    payload = [{"path": item.path.as_posix(), "local_path": item.local_path.as_posix()} for item in ordered]
    click.echo(json.dumps(payload, indent=indent))


def main(argv: Optional[Sequence[str]] = None, *, restore_traceback: bool = True) -> int:
    """Execute the CLI with shared exit handling and return the exit code."""

    previous_traceback = getattr(lib_cli_exit_tools.config, "traceback", False)
    previous_force_color = getattr(lib_cli_exit_tools.config, "traceback_force_color", False)
    try:
        try:
            return lib_cli_exit_tools.run_cli(
                cli,
                argv=list(argv) if argv is not None else None,
                prog_name="config_finder",
            )
        except BaseException as exc:  # noqa: BLE001 - funnel through shared printers
            lib_cli_exit_tools.print_exception_message(
                trace_back=lib_cli_exit_tools.config.traceback,
                length_limit=(
                    _TRACEBACK_VERBOSE_LIMIT if lib_cli_exit_tools.config.traceback else _TRACEBACK_SUMMARY_LIMIT
                ),
            )
            return lib_cli_exit_tools.get_system_exit_code(exc)
    finally:
        if restore_traceback:
            lib_cli_exit_tools.config.traceback = previous_traceback
            lib_cli_exit_tools.config.traceback_force_color = previous_force_color


if __name__ == "__main__":  # pragma: no cover - exercised via console entry point
    raise SystemExit(main(sys.argv[1:]))
