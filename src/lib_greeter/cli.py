"""Rich-click command line for the greeter library.

Purpose
-------
Give operators a shell-level way to render greetings, run the guided
walkthrough and inspect package metadata.

Contents
--------
* :func:`cli` - root group with traceback, dotenv and log-level options.
* Subcommands ``info``, ``greet`` and ``demo``.
* :func:`main` - entry point wrapped by :mod:`lib_cli_exit_tools`.

System Role
-----------
Presentation layer: translates flags into :mod:`lib_greeter.config`
settings, calls the façade in :mod:`lib_greeter.lib_greeter` and turns
error-channel failures into click errors.
"""

from __future__ import annotations

import logging
import os
from typing import Sequence

import lib_cli_exit_tools
import rich_click as click
from rich.console import Console
from rich.logging import RichHandler

from . import __init__conf__
from . import config as greeter_config
from . import lib_greeter
from .adapters import RichConsoleAdapter
from .domain import OutputBuffer

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _configure_logging(level: str) -> None:
    """Route the package loggers to a Rich handler on stderr at ``level``."""

    package_logger = logging.getLogger(__init__conf__.name)
    for handler in list(package_logger.handlers):
        if isinstance(handler, RichHandler):
            package_logger.removeHandler(handler)
    package_logger.addHandler(RichHandler(console=Console(stderr=True), show_path=False))
    package_logger.setLevel(level.upper())


def _consume_error() -> str:
    """Return and clear the pending error message."""

    message = lib_greeter.get_last_error()
    lib_greeter.clear_error()
    return message


@click.group(
    help=__init__conf__.title,
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show the full Python traceback on errors.",
)
@click.option(
    "--use-dotenv/--no-use-dotenv",
    default=None,
    help=f"Load LIB_GREETER_* variables from the nearest .env (default: ${greeter_config.DOTENV_ENV_VAR}).",
)
@click.option(
    "--log-level",
    type=click.Choice(_LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Emit library log records at this level to stderr.",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, use_dotenv: bool | None, log_level: str | None) -> None:
    """Root command storing global flags and printing the banner by default."""

    lib_cli_exit_tools.config.traceback = traceback
    lib_cli_exit_tools.config.traceback_force_color = traceback

    env_toggle = os.getenv(greeter_config.DOTENV_ENV_VAR)
    if greeter_config.should_use_dotenv(explicit=use_dotenv, env_value=env_toggle):
        greeter_config.enable_dotenv()

    if log_level is not None:
        _configure_logging(log_level)

    if ctx.invoked_subcommand is None:
        click.echo(lib_greeter.summary_info(), nl=False)


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print resolved metadata so users can inspect installation details."""

    click.echo(lib_greeter.summary_info(), nl=False)


@cli.command("greet", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--name", default=None, help="Name to greet (env: LIB_GREETER_NAME, default: World).")
@click.option("--greeting", default=None, help="Greeting word (env: LIB_GREETER_GREETING, default: Hello).")
@click.option(
    "--uppercase/--no-uppercase",
    default=None,
    help="Render the greeting in upper case (env: LIB_GREETER_UPPERCASE).",
)
@click.option(
    "--buffer-size",
    type=click.IntRange(min=0),
    default=None,
    help="Output capacity including the terminator slot (env: LIB_GREETER_BUFFER_SIZE, default: 128).",
)
def cli_greet(name: str | None, greeting: str | None, uppercase: bool | None, buffer_size: int | None) -> None:
    """Render one greeting; truncation is reported as a warning on stderr."""

    try:
        settings = greeter_config.load_greeter_settings(
            name=name,
            greeting=greeting,
            uppercase=uppercase,
            buffer_size=buffer_size,
        )
    except ValueError as exc:
        raise click.ClickException(str(exc)) from exc

    lib_greeter.clear_error()
    greeter = lib_greeter.create(settings.config)
    if greeter is None:
        raise click.ClickException(_consume_error())
    try:
        buffer = OutputBuffer(settings.buffer_size)
        if lib_greeter.greet(greeter, buffer) < 0:
            raise click.ClickException(_consume_error())
        click.echo(buffer.value)
        kind = lib_greeter.last_error_kind()
        if kind is not None and not kind.is_hard_failure:
            click.echo(f"Warning: {_consume_error()}", err=True)
    finally:
        lib_greeter.destroy(greeter)


@cli.command("demo", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--no-color", is_flag=True, default=False, help="Disable styled output.")
@click.option("--buffer-size", type=click.IntRange(min=1), default=128, show_default=True)
def cli_demo(no_color: bool, buffer_size: int) -> None:
    """Walk through default, custom, uppercase, rename and error scenarios."""

    report = lib_greeter.demo(console=RichConsoleAdapter(no_color=no_color), buffer_size=buffer_size)
    if not report.ok:
        raise click.ClickException("; ".join(report.failures))


def main(argv: Sequence[str] | None = None, *, restore_traceback: bool = True) -> int:
    """Run the CLI through :func:`lib_cli_exit_tools.run_cli`.

    Parameters
    ----------
    argv:
        Optional argument list (defaults to ``sys.argv[1:]``).
    restore_traceback:
        Reset the traceback preferences changed by ``--traceback`` once the
        command finished, so embedding hosts keep their own settings.

    Returns
    -------
    int
        Process exit code.
    """

    previous_traceback = getattr(lib_cli_exit_tools.config, "traceback", False)
    previous_force_color = getattr(lib_cli_exit_tools.config, "traceback_force_color", False)
    try:
        return lib_cli_exit_tools.run_cli(
            cli,
            argv=list(argv) if argv is not None else None,
            prog_name=__init__conf__.shell_command,
        )
    finally:
        if restore_traceback:
            lib_cli_exit_tools.config.traceback = previous_traceback
            lib_cli_exit_tools.config.traceback_force_color = previous_force_color


__all__ = ["cli", "main"]
