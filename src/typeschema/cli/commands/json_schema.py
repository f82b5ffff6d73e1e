# topmark:header:start
#
#   project      : TypeSchema
#   file         : json_schema.py
#   file_relpath : src/typeschema/cli/commands/json_schema.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TypeSchema `json-schema` command.

Prints a self-contained JSON-Schema (draft-03) document for a Python class.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from typeschema.cli.cmd_common import load_config_draft, report_config_diagnostics, resolve_descriptor
from typeschema.cli.errors import TypeschemaUnsupportedTypeError
from typeschema.cli.options import CONTEXT_SETTINGS, common_config_options, common_target_options
from typeschema.schema.builder import build_json_schema

if TYPE_CHECKING:
    from typeschema.cli.console import ConsoleLike
    from typeschema.config.model import Config, MutableConfig


@click.command(
    name="json-schema",
    help="Generate a JSON-Schema (draft-03) document for TARGET ('module:QualName').",
    context_settings=CONTEXT_SETTINGS,
)
@common_target_options
@click.option(
    "--indent",
    "indent",
    type=click.IntRange(min=0),
    default=None,
    help="Indentation width (overrides [schema].indent).",
)
@common_config_options
def json_schema_command(
    *,
    target: str,
    array: bool,
    indent: int | None,
    no_config: bool,
    config_paths: tuple[str, ...],
) -> None:
    """Generate a JSON schema for a class.

    Raises:
        TypeschemaUnsupportedTypeError: If the root type has no writable members.
    """
    ctx: click.Context = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    draft: MutableConfig = load_config_draft(no_config=no_config, config_paths=config_paths)
    if indent is not None:
        draft.schema_indent = indent
    config: Config = draft.freeze()
    report_config_diagnostics(ctx, config)

    descriptor = resolve_descriptor(target, array=array, config=config)
    schema: str | None = build_json_schema(descriptor, config=config)
    if schema is None:
        raise TypeschemaUnsupportedTypeError(
            f"No JSON schema for '{target}': the type has no writable members."
        )
    console.print(schema)
