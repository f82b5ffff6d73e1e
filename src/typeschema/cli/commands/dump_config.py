# topmark:header:start
#
#   project      : TypeSchema
#   file         : dump_config.py
#   file_relpath : src/typeschema/cli/commands/dump_config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TypeSchema `dump-config` command.

Emits the effective configuration as TOML, wrapped between
``# === BEGIN ===`` and ``# === END ===`` markers for easy parsing.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from typeschema.cli.cmd_common import load_config_draft, report_config_diagnostics
from typeschema.cli.options import CONTEXT_SETTINGS, common_config_options
from typeschema.config.logging import get_logger

if TYPE_CHECKING:
    from typeschema.cli.console import ConsoleLike
    from typeschema.config.logging import TypeschemaLogger
    from typeschema.config.model import Config

logger: TypeschemaLogger = get_logger(__name__)


@click.command(
    name="dump-config",
    help="Dump the effective TypeSchema configuration as TOML.",
    context_settings=CONTEXT_SETTINGS,
)
@common_config_options
def dump_config_command(*, no_config: bool, config_paths: tuple[str, ...]) -> None:
    """Print the merged configuration (defaults, discovered and explicit files)."""
    ctx: click.Context = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    config: Config = load_config_draft(no_config=no_config, config_paths=config_paths).freeze()
    report_config_diagnostics(ctx, config)
    logger.trace("Effective config: %s", config)

    console.print("# === BEGIN ===")
    console.print(config.to_toml(), nl=False)
    console.print("# === END ===")
