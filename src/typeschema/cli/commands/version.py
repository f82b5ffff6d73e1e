# topmark:header:start
#
#   project      : TypeSchema
#   file         : version.py
#   file_relpath : src/typeschema/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TypeSchema `version` command."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import click

from typeschema.cli.cli_types import EnumChoiceParam
from typeschema.cli.cmd_common import get_effective_verbosity
from typeschema.constants import TYPESCHEMA_VERSION
from typeschema.core.formats import OutputFormat
from typeschema.core.serializers import build_meta_payload, serialize_json_object

if TYPE_CHECKING:
    from typeschema.cli.console import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of TypeSchema.",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
def version_command(*, output_format: OutputFormat | None = None) -> None:
    """Show the TypeSchema version installed in the current environment."""
    ctx: click.Context = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    fmt: OutputFormat = output_format or OutputFormat.TEXT
    if fmt == OutputFormat.JSON:
        console.print(serialize_json_object(build_meta_payload()))
    elif get_effective_verbosity(ctx) <= logging.INFO:
        console.print(console.styled("TypeSchema version:\n", bold=True, underline=True))
        console.print(f"    {console.styled(TYPESCHEMA_VERSION, bold=True)}")
    else:
        console.print(console.styled(TYPESCHEMA_VERSION, bold=True))
