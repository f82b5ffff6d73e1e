# topmark:header:start
#
#   project      : TypeSchema
#   file         : errors.py
#   file_relpath : src/typeschema/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the TypeSchema CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes. Core exceptions
    ([`typeschema.core.errors`][typeschema.core.errors]) are translated into
    them at the command boundary.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no
    console is present in the Click context, they fall back to Click's default
    styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from typeschema.cli.exit_codes import ExitCode


class TypeschemaCliError(click.ClickException):
    """Base class for all TypeSchema CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorized in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx: click.Context | None = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))
                return
        super().show(file)


class TypeschemaUsageError(TypeschemaCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class TypeschemaTargetNotFoundError(TypeschemaCliError):
    """Error when the target module or class cannot be imported."""

    exit_code = ExitCode.TARGET_NOT_FOUND


class TypeschemaUnsupportedTypeError(TypeschemaCliError):
    """Error when the target type yields no output."""

    exit_code = ExitCode.UNSUPPORTED_TYPE


class TypeschemaNameExhaustedError(TypeschemaCliError):
    """Error when too many types share one name."""

    exit_code = ExitCode.NAME_EXHAUSTED


class TypeschemaConfigError(TypeschemaCliError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR
