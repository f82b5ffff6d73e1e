# topmark:header:start
#
#   project      : TypeSchema
#   file         : io.py
#   file_relpath : src/typeschema/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML I/O helpers for TypeSchema configuration.

Parsing and rendering use `tomlkit`. Loaders return plain ``dict`` tables.

Two loaders exist:

* [`load_toml_dict`][typeschema.config.io.load_toml_dict] logs errors and
  returns an empty table (used for discovered files);
* [`read_toml_dict`][typeschema.config.io.read_toml_dict] raises
  [`ConfigError`][typeschema.core.errors.ConfigError] (used for files the user
  named explicitly).

The *checked* getters validate the expected shape and record a warning in a
[`DiagnosticLog`][typeschema.core.diagnostics.DiagnosticLog] (and in the log)
instead of failing, so a typo never changes defaulting behavior.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Final, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from typeschema.config.keys import Toml
from typeschema.config.logging import get_logger
from typeschema.constants import (
    EMAIL_PATTERN,
    JSON_SCHEMA_DRAFT_03,
    JSON_SCHEMA_INDENT,
    MAX_UNIQUE_NAME_ATTEMPTS,
    URL_PATTERN,
)
from typeschema.core.errors import ConfigError

if TYPE_CHECKING:
    from pathlib import Path

    from typeschema.config.logging import TypeschemaLogger
    from typeschema.core.diagnostics import DiagnosticLog

logger: TypeschemaLogger = get_logger(__name__)

TomlTable = dict[str, Any]


# --- loading ---


def load_defaults_dict() -> TomlTable:
    """Return the runtime defaults as a new TOML table (no I/O)."""
    return {
        Toml.SECTION_SCHEMA: {
            Toml.KEY_URI: JSON_SCHEMA_DRAFT_03,
            Toml.KEY_INDENT: JSON_SCHEMA_INDENT,
        },
        Toml.SECTION_REGISTRY: {
            Toml.KEY_MAX_NAME_ATTEMPTS: MAX_UNIQUE_NAME_ATTEMPTS,
        },
        Toml.SECTION_PRIMITIVES: {},
        Toml.SECTION_PATTERNS: {
            Toml.KEY_EMAIL: EMAIL_PATTERN,
            Toml.KEY_URL: URL_PATTERN,
        },
        Toml.SECTION_PYTHON: {
            Toml.KEY_RESULT_WRAPPERS: [],
        },
    }


def _parse(text: str) -> TomlTable:
    doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file.

    Notes:
        Errors are logged and an empty dict is returned on failure.
    """
    try:
        return _parse(path.read_text(encoding="utf-8"))
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        return {}
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        return {}


def read_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file the user asked for explicitly.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        return _parse(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e
    except TomlkitParseError as e:
        raise ConfigError(f"Invalid TOML in config file {path}: {e}") from e


# --- rendering ---


def _strip_none_for_toml(value: object) -> object:
    """Remove `None` (which TOML cannot represent) from mappings and lists."""
    if isinstance(value, Mapping):
        m: Mapping[object, object] = cast("Mapping[object, object]", value)
        return {str(k): _strip_none_for_toml(v) for k, v in m.items() if v is not None}
    if isinstance(value, list):
        seq: list[object] = cast("list[object]", value)
        return [_strip_none_for_toml(v) for v in seq if v is not None]
    return value


def to_toml(toml_dict: TomlTable) -> str:
    """Serialize a TOML table to a string."""
    cleaned: Any = _strip_none_for_toml(toml_dict)
    return cast("str", cast("Any", tomlkit).dumps(cleaned))


# --- checked getters ---


def get_table_checked(
    table: TomlTable,
    key: str,
    *,
    diagnostics: DiagnosticLog,
) -> TomlTable:
    """Return the sub-table ``[key]``; a non-table value is reported and ignored."""
    value: Any | None = table.get(key)
    if value is None:
        return {}
    if isinstance(value, dict):
        return cast("TomlTable", value)
    logger.warning("Expected table [%s], got %s: %r", key, type(value).__name__, value)
    diagnostics.add_warning(f"Expected table [{key}], got {type(value).__name__}: {value!r}")
    return {}


def get_string_value_or_none_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
) -> str | None:
    """Return an optional string value, warning when present but not `str`."""
    value: Any | None = table.get(key)
    if value is None or isinstance(value, str):
        return value

    loc: Final[str] = f"{where}.{key}"
    logger.warning("Expected string in %s, got %s: %r", loc, type(value).__name__, value)
    diagnostics.add_warning(f"Expected string in {loc}, got {type(value).__name__}: {value!r}")
    return None


def get_int_value_or_none_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
    minimum: int | None = None,
) -> int | None:
    """Return an optional int value, warning when present but not a (large enough) `int`.

    Notes:
        `bool` is rejected even though it is a subclass of `int`.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None

    loc: Final[str] = f"{where}.{key}"
    if isinstance(value, bool) or not isinstance(value, int):
        logger.warning("Expected int in %s, got %s: %r", loc, type(value).__name__, value)
        diagnostics.add_warning(f"Expected int in {loc}, got {type(value).__name__}: {value!r}")
        return None
    if minimum is not None and value < minimum:
        logger.warning("Value of %s must be >= %d, got %d", loc, minimum, value)
        diagnostics.add_warning(f"Value of {loc} must be >= {minimum}, got {value}")
        return None
    return value


def get_string_list_value_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
) -> list[str] | None:
    """Return a list of strings; non-string entries are reported and dropped.

    Returns:
        None when the key is missing or not a list, else the string entries.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None

    loc: Final[str] = f"{where}.{key}"
    if not isinstance(value, list):
        logger.warning("Expected list in %s, got %s: %r", loc, type(value).__name__, value)
        diagnostics.add_warning(f"Expected list in {loc}, got {type(value).__name__}: {value!r}")
        return None

    out: list[str] = []
    for v in cast("list[Any]", value):
        if isinstance(v, str):
            out.append(v)
        else:
            logger.warning("Ignoring non-string entry in %s: %r", loc, v)
            diagnostics.add_warning(f"Ignoring non-string entry in {loc}: {v!r}")
    return out


def get_string_map_checked(
    table: TomlTable,
    *,
    where: str,
    diagnostics: DiagnosticLog,
) -> dict[str, str]:
    """Return the string-valued entries of ``table``; other entries are reported."""
    out: dict[str, str] = {}
    for key, value in table.items():
        if isinstance(value, str):
            out[key] = value
        else:
            loc: str = f"{where}.{key}"
            logger.warning("Expected string in %s, got %s: %r", loc, type(value).__name__, value)
            diagnostics.add_warning(
                f"Expected string in {loc}, got {type(value).__name__}: {value!r}"
            )
    return out


def check_unknown_keys(data: TomlTable, *, diagnostics: DiagnosticLog) -> None:
    """Report top-level sections and section keys that are not part of the schema."""
    for key, value in data.items():
        if key not in Toml.ALLOWED_TOP_LEVEL_KEYS:
            logger.warning("Unknown config section [%s]", key)
            diagnostics.add_warning(f"Unknown config section [{key}]")
            continue
        allowed: frozenset[str] | None = Toml.ALLOWED_SECTION_KEYS.get(key)
        if allowed is None or not isinstance(value, dict):
            continue
        for sub_key in value:
            if sub_key not in allowed:
                logger.warning("Unknown key %s in [%s]", sub_key, key)
                diagnostics.add_warning(f"Unknown key {sub_key!r} in [{key}]")
