# topmark:header:start
#
#   project      : TypeSchema
#   file         : cmd_common.py
#   file_relpath : src/typeschema/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Helpers shared by the generator commands.

They translate core exceptions into CLI errors so every command exits with
the same code for the same failure.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any, get_origin

import click

from typeschema.cli.errors import (
    TypeschemaConfigError,
    TypeschemaTargetNotFoundError,
    TypeschemaUnsupportedTypeError,
    TypeschemaUsageError,
)
from typeschema.config.logging import get_logger
from typeschema.config.model import MutableConfig
from typeschema.core.errors import ConfigError, DescriptorError
from typeschema.descriptors.python import PythonDescriptorSource, load_target

if TYPE_CHECKING:
    from collections.abc import Iterable

    from typeschema.cli.console import ConsoleLike
    from typeschema.config.logging import TypeschemaLogger
    from typeschema.config.model import Config
    from typeschema.descriptors.model import TypeDescriptor

logger: TypeschemaLogger = get_logger(__name__)


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output level resolved by the group (WARNING by default)."""
    return int(ctx.obj.get("verbosity_level", logging.WARNING))


def load_config_draft(
    *,
    no_config: bool,
    config_paths: Iterable[str],
) -> MutableConfig:
    """Merge the config layers into a draft (CLI overrides are applied by the caller).

    Raises:
        TypeschemaConfigError: If an explicit ``--config`` file is unusable.
    """
    try:
        return MutableConfig.load_merged(
            anchor=Path.cwd(),
            extra_config_files=[Path(p) for p in config_paths],
            no_config=no_config,
        )
    except ConfigError as exc:
        raise TypeschemaConfigError(str(exc)) from exc


def report_config_diagnostics(ctx: click.Context, config: Config) -> None:
    """Print config diagnostics as warnings unless ``-q`` was given."""
    if get_effective_verbosity(ctx) > logging.WARNING:
        return
    console: ConsoleLike = ctx.obj["console"]
    for diagnostic in config.diagnostics:
        console.warn(diagnostic.level.color(f"[{diagnostic.level.value}] {diagnostic.message}"))


def resolve_descriptor(target: str, *, array: bool, config: Config) -> TypeDescriptor:
    """Import ``target`` and describe it (as a list when ``array`` is set).

    Raises:
        TypeschemaTargetNotFoundError: If the target cannot be imported.
        TypeschemaUsageError: If the target is not a class or type hint.
        TypeschemaConfigError: If a configured result wrapper cannot be imported.
        TypeschemaUnsupportedTypeError: If the type hints of the target cannot
            be resolved.
    """
    try:
        obj: Any = load_target(target)
    except DescriptorError as exc:
        raise TypeschemaTargetNotFoundError(str(exc)) from exc

    if not isinstance(obj, type) and get_origin(obj) is None:
        raise TypeschemaUsageError(f"Target '{target}' is not a class or type hint.")

    try:
        wrappers: tuple[type, ...] = config.load_result_wrappers()
    except DescriptorError as exc:
        raise TypeschemaConfigError(f"Invalid [python].result_wrappers entry: {exc}") from exc

    source = PythonDescriptorSource(wrappers)
    try:
        return source.describe(list[obj] if array else obj)
    except DescriptorError as exc:
        raise TypeschemaUnsupportedTypeError(str(exc)) from exc
