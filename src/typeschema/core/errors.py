# topmark:header:start
#
#   project      : TypeSchema
#   file         : errors.py
#   file_relpath : src/typeschema/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the TypeSchema core.

Usage:
    Unsupported shapes are never signalled with an exception: the builders
    return an empty name (RAML path) or ``None`` (JSON-Schema path). The
    exceptions below cover the remaining, non-recoverable failures.

    The CLI maps them onto [`typeschema.cli.errors`][typeschema.cli.errors]
    so each one surfaces with a dedicated exit code.
"""

from __future__ import annotations


class TypeschemaError(Exception):
    """Base class for all TypeSchema errors."""


class NameExhaustedError(TypeschemaError):
    """No free registry name could be found for a type.

    Raised when more than the configured number of distinct shapes share one
    base name. This is a configuration-level failure and is never retried.

    Attributes:
        base_name: The base name that could not be made unique.
        attempts: Number of integer suffixes that were tried.
    """

    def __init__(self, base_name: str, attempts: int) -> None:
        super().__init__(
            f"Could not find a unique name for '{base_name}': "
            f"more than {attempts} types share this name."
        )
        self.base_name = base_name
        self.attempts = attempts


class DescriptorError(TypeschemaError):
    """A type descriptor could not be produced (bad import target, malformed shape)."""


class ConfigError(TypeschemaError):
    """A configuration source is missing, unreadable or malformed."""
