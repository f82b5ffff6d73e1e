# topmark:header:start
#
#   project      : TypeSchema
#   file         : raml.py
#   file_relpath : src/typeschema/cli/commands/raml.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TypeSchema `raml` command.

Prints the RAML 1.0 types of a Python class (``module:QualName``) and of every
type it references, as a RAML library or as a JSON payload.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from typeschema.cli.cli_types import EnumChoiceParam
from typeschema.cli.cmd_common import load_config_draft, report_config_diagnostics, resolve_descriptor
from typeschema.cli.errors import TypeschemaNameExhaustedError, TypeschemaUnsupportedTypeError
from typeschema.cli.options import CONTEXT_SETTINGS, common_config_options, common_target_options
from typeschema.config.logging import get_logger
from typeschema.core.errors import NameExhaustedError
from typeschema.core.formats import TypesFormat
from typeschema.raml.builder import build_raml_types
from typeschema.raml.serializers import serialize_raml_library, serialize_registry_json

if TYPE_CHECKING:
    from typeschema.cli.console import ConsoleLike
    from typeschema.config.logging import TypeschemaLogger
    from typeschema.config.model import Config

logger: TypeschemaLogger = get_logger(__name__)


@click.command(
    name="raml",
    help="Generate RAML 1.0 types for TARGET (a class given as 'module:QualName').",
    context_settings=CONTEXT_SETTINGS,
)
@common_target_options
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(TypesFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in TypesFormat)}).",
)
@common_config_options
def raml_command(
    *,
    target: str,
    array: bool,
    output_format: TypesFormat | None,
    no_config: bool,
    config_paths: tuple[str, ...],
) -> None:
    """Generate RAML types for a class.

    Args:
        target: Import string of the root class.
        array: Describe a list of the root class instead.
        output_format: ``raml`` (default) or ``json``.
        no_config: Skip config discovery in the current directory.
        config_paths: Explicit config files to merge.

    Raises:
        TypeschemaUnsupportedTypeError: If the root type has no representable shape.
        TypeschemaNameExhaustedError: If too many types share one name.
    """
    ctx: click.Context = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    config: Config = load_config_draft(no_config=no_config, config_paths=config_paths).freeze()
    report_config_diagnostics(ctx, config)

    descriptor = resolve_descriptor(target, array=array, config=config)
    try:
        registry, root = build_raml_types(descriptor, config=config)
    except NameExhaustedError as exc:
        raise TypeschemaNameExhaustedError(str(exc)) from exc

    if not root:
        raise TypeschemaUnsupportedTypeError(f"Type '{target}' has no representable shape.")
    logger.debug("Registered %d types for %s (root: %s)", len(registry), target, root)

    fmt: TypesFormat = output_format or TypesFormat.RAML
    if fmt == TypesFormat.JSON:
        console.print(serialize_registry_json(registry, root))
    else:
        console.print(serialize_raml_library(registry), nl=False)
