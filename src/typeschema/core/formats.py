# topmark:header:start
#
#   project      : TypeSchema
#   file         : formats.py
#   file_relpath : src/typeschema/core/formats.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared output format definitions.

Kept free of Click and console dependencies so any frontend can use the same
format vocabulary.
"""

from __future__ import annotations

from enum import Enum


class OutputFormat(str, Enum):
    """Output format of informational commands (``version``).

    Attributes:
        TEXT: Human-friendly text output; may include ANSI color if enabled.
        JSON: A single JSON document (machine-readable, never colored).
    """

    TEXT = "text"
    JSON = "json"


class TypesFormat(str, Enum):
    """Output format of the ``raml`` command.

    Attributes:
        RAML: A RAML 1.0 library document.
        JSON: The registry as a JSON machine payload (``meta``, ``root``, ``types``).
    """

    RAML = "raml"
    JSON = "json"
