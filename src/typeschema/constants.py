# topmark:header:start
#
#   project      : TypeSchema
#   file         : constants.py
#   file_relpath : src/typeschema/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TypeSchema Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version
from typing import Final

TYPESCHEMA_VERSION: str = get_version("typeschema")

# Name of the environment variable consulted for the internal log level.
LOG_LEVEL_ENV_VAR: Final[str] = "TYPESCHEMA_LOG_LEVEL"

# Config discovery
PYPROJECT_TOML_NAME: Final[str] = "pyproject.toml"
TYPESCHEMA_TOML_NAME: Final[str] = "typeschema.toml"
PYPROJECT_TOOL_SECTION: Final[str] = "typeschema"

# JSON Schema dialect emitted by the JSON-Schema builder.
JSON_SCHEMA_DRAFT_03: Final[str] = "http://json-schema.org/draft-03/schema"
JSON_SCHEMA_INDENT: Final[int] = 2

# RAML library rendering
RAML_LIBRARY_HEADER: Final[str] = "#%RAML 1.0 Library"

# Synthetic property key of a map (dictionary) type.
MAP_PROPERTY_KEY: Final[str] = "[]"

# Suffix appended to the value type name of a dictionary shape.
MAP_NAME_SUFFIX: Final[str] = "Map"

# Prefix prepended to the element type name of an array shape.
LIST_NAME_PREFIX: Final[str] = "ListOf"

# Suffix marking an optional RAML property.
OPTIONAL_PROPERTY_SUFFIX: Final[str] = "?"

# Upper bound of integer suffixes tried when a type name collides.
MAX_UNIQUE_NAME_ATTEMPTS: Final[int] = 1000

# Patterns emitted for the `EmailAddress` and `Url` annotations.
EMAIL_PATTERN: Final[str] = r"[^\s@]+@[^\s@]+\.[^\s@]"
URL_PATTERN: Final[str] = r'^(ftp|http|https)://[^ "]+$'

VALUE_NOT_SET: Final[str] = "<not set>"
