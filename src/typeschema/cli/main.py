# topmark:header:start
#
#   project      : TypeSchema
#   file         : main.py
#   file_relpath : src/typeschema/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TypeSchema command line.

Group-level options (verbosity, color) are resolved once and stored in
``ctx.obj`` together with the console; the subcommands read them from there.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from typeschema.cli.commands.dump_config import dump_config_command
from typeschema.cli.commands.json_schema import json_schema_command
from typeschema.cli.commands.raml import raml_command
from typeschema.cli.commands.version import version_command
from typeschema.cli.console import ClickConsole
from typeschema.cli.options import (
    CONTEXT_SETTINGS,
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from typeschema.config.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from typeschema.cli.console import ConsoleLike
    from typeschema.config.logging import TypeschemaLogger

logger: TypeschemaLogger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging, color, console) on the Click context.

    Args:
        ctx: Current Click context; will have ``obj`` and ``color`` set.
        verbose: Count of ``-v`` flags.
        quiet: Count of ``-q`` flags.
        color_mode: Explicit color mode from ``--color`` (or ``None``).
        no_color: Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    # Internal logging is driven by the environment only.
    level_env: int | None = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    effective_mode: ColorMode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color: bool = resolve_color_mode(cli_mode=effective_mode)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


@click.group(
    cls=click.Group,
    context_settings=CONTEXT_SETTINGS,
    invoke_without_command=True,
    help="Generate RAML 1.0 types and JSON-Schema documents from Python classes.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Entry point for the TypeSchema CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=ColorMode(color_mode) if color_mode else None,
        no_color=no_color,
    )
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'typeschema raml module:Class' to generate RAML types.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(dump_config_command)

cli.add_command(raml_command)

cli.add_command(json_schema_command)

if __name__ == "__main__":
    cli()
