"""Click command line for inspecting and demonstrating the terminal logger.

Contents
--------
* :func:`cli` - command group with ``--use-dotenv`` and ``--traceback`` toggles.
* ``info`` / ``demo`` / ``parse-level`` sub-commands.
* :func:`main` - entry point running the group through ``lib_cli_exit_tools``.
"""

from __future__ import annotations

import os
import sys
import time
from typing import Sequence

import click
import lib_cli_exit_tools
from rich.markdown import Markdown

from . import __init__conf__
from . import config as config_module
from .adapters import TerminalLogger
from .domain.levels import parse_level
from .runtime import debug, error, info, warn, with_logger

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}

_DEMO_DOCUMENT = """\
# Release notes

* rendered with **Rich** on terminals
* plain Markdown source on pipes
"""


@click.group(invoke_without_command=True, context_settings=CLICK_CONTEXT_SETTINGS)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option(
    "--use-dotenv/--no-use-dotenv",
    default=None,
    help=f"Load variables from the nearest .env before running (env: {config_module.DOTENV_ENV_VAR}).",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python tracebacks on errors.",
)
@click.pass_context
def cli(ctx: click.Context, use_dotenv: bool | None, traceback: bool) -> None:
    """Inspect micrologging and preview its terminal rendering."""

    lib_cli_exit_tools.config.traceback = traceback
    lib_cli_exit_tools.config.traceback_force_color = traceback
    if config_module.should_use_dotenv(explicit=use_dotenv, env_value=os.getenv(config_module.DOTENV_ENV_VAR)):
        config_module.enable_dotenv()
    if ctx.invoked_subcommand is None:
        click.echo(__init__conf__.summary_info(), nl=False)


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print the package metadata banner."""

    click.echo(__init__conf__.summary_info(), nl=False)


@cli.command("parse-level", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("value")
def cli_parse_level(value: str) -> None:
    """Print the canonical name of VALUE or fail when it is not a level."""

    click.echo(str(parse_level(value)))


@cli.command("demo", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--level", "min_level", default=None, help="Default floor; falls back to MICROLOGGING_LEVEL, then info.")
@click.option("--interactive/--plain", default=None, help="Force rendering mode instead of detecting the terminal.")
@click.option("--width", type=click.IntRange(min=10), default=None, help="Terminal width override.")
@click.option("--steps", type=click.IntRange(min=1), default=5, show_default=True, help="Progress bar updates.")
@click.option("--delay", type=click.FloatRange(min=0.0), default=0.0, show_default=True, help="Seconds between updates.")
def cli_demo(min_level: str | None, interactive: bool | None, width: int | None, steps: int, delay: float) -> None:
    """Emit one event of every kind through a terminal logger on stdout."""

    settings = config_module.settings_from_env()
    logger = TerminalLogger(
        sys.stdout,
        interactive=interactive if interactive is not None else settings.interactive,
        width=width,
    )
    config_module.apply_settings(logger, settings)
    if min_level is not None:
        logger.configure(min_level=min_level)

    with with_logger(logger):
        debug(lambda: "environment keys: " + ", ".join(sorted(os.environ)[:3]))
        info("Starting demo", banner=True)
        info("multi-line message\nsecond line", user="demo", attempt=1)
        info(Markdown(_DEMO_DOCUMENT))
        for step in range(steps + 1):
            info("downloading", progress=step / steps)
            if delay:
                time.sleep(delay)
        for _ in range(3):
            warn("this warning is shown twice", max_repeats=2)
        try:
            raise ValueError("demo failure")
        except ValueError as exc:
            error(("operation failed", exc))


def main(argv: Sequence[str] | None = None) -> int:
    """Run :func:`cli` and return its exit code, restoring traceback settings afterwards."""

    previous_traceback = lib_cli_exit_tools.config.traceback
    previous_force_color = lib_cli_exit_tools.config.traceback_force_color
    try:
        return lib_cli_exit_tools.run_cli(
            cli,
            argv=list(argv) if argv is not None else None,
            prog_name=__init__conf__.shell_command,
        )
    finally:
        lib_cli_exit_tools.config.traceback = previous_traceback
        lib_cli_exit_tools.config.traceback_force_color = previous_force_color


__all__ = ["cli", "main"]
