# topmark:header:start
#
#   project      : TypeSchema
#   file         : keys.py
#   file_relpath : src/typeschema/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for TypeSchema configuration.

These names are the external configuration API, as it appears in
``typeschema.toml`` and in ``[tool.typeschema]`` inside ``pyproject.toml``.
Renaming or removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by TypeSchema configuration."""

    # [schema]
    SECTION_SCHEMA: Final[str] = "schema"

    KEY_URI: Final[str] = "uri"
    KEY_INDENT: Final[str] = "indent"

    # [registry]
    SECTION_REGISTRY: Final[str] = "registry"

    KEY_MAX_NAME_ATTEMPTS: Final[str] = "max_name_attempts"

    # [primitives]: arbitrary descriptor name -> keyword entries
    SECTION_PRIMITIVES: Final[str] = "primitives"

    # [patterns]
    SECTION_PATTERNS: Final[str] = "patterns"

    KEY_EMAIL: Final[str] = "email"
    KEY_URL: Final[str] = "url"

    # [python]
    SECTION_PYTHON: Final[str] = "python"

    KEY_RESULT_WRAPPERS: Final[str] = "result_wrappers"

    # ---------------------------- Schema helpers ----------------------------

    ALLOWED_TOP_LEVEL_KEYS: Final[frozenset[str]] = frozenset(
        {
            SECTION_SCHEMA,
            SECTION_REGISTRY,
            SECTION_PRIMITIVES,
            SECTION_PATTERNS,
            SECTION_PYTHON,
        }
    )

    # [primitives] is omitted: its keys are user-defined.
    ALLOWED_SECTION_KEYS: Final[dict[str, frozenset[str]]] = {
        SECTION_SCHEMA: frozenset({KEY_URI, KEY_INDENT}),
        SECTION_REGISTRY: frozenset({KEY_MAX_NAME_ATTEMPTS}),
        SECTION_PATTERNS: frozenset({KEY_EMAIL, KEY_URL}),
        SECTION_PYTHON: frozenset({KEY_RESULT_WRAPPERS}),
    }
