# topmark:header:start
#
#   project      : TypeSchema
#   file         : model.py
#   file_relpath : src/typeschema/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `Config`: an immutable runtime snapshot handed to the builders.
    - `MutableConfig`: a mutable builder used during discovery and merging;
      it can be frozen into `Config` and thawed back for edits.

Layers (lowest -> highest precedence):
    1. Runtime defaults (code, no I/O).
    2. ``pyproject.toml`` ``[tool.typeschema]`` in the anchor directory.
    3. ``typeschema.toml`` in the anchor directory.
    4. Files passed explicitly with ``--config`` (in the order given).
    5. Command-line overrides, applied by the caller on the merged draft.

Unset values are ``None`` on the mutable side so that a later layer only
overrides what it actually sets. `MutableConfig.freeze` fills the gaps with
the defaults.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING

from typeschema.config.io import (
    TomlTable,
    check_unknown_keys,
    get_int_value_or_none_checked,
    get_string_list_value_checked,
    get_string_map_checked,
    get_string_value_or_none_checked,
    get_table_checked,
    load_defaults_dict,
    load_toml_dict,
    read_toml_dict,
    to_toml,
)
from typeschema.config.keys import Toml
from typeschema.config.logging import get_logger
from typeschema.constants import (
    EMAIL_PATTERN,
    JSON_SCHEMA_DRAFT_03,
    JSON_SCHEMA_INDENT,
    MAX_UNIQUE_NAME_ATTEMPTS,
    PYPROJECT_TOML_NAME,
    PYPROJECT_TOOL_SECTION,
    TYPESCHEMA_TOML_NAME,
    URL_PATTERN,
)
from typeschema.core.constraints import PatternSet
from typeschema.core.diagnostics import Diagnostic, DiagnosticLog
from typeschema.core.primitives import PrimitiveMapper
from typeschema.descriptors.python import load_target

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from typeschema.config.logging import TypeschemaLogger

logger: TypeschemaLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration.

    Attributes:
        schema_uri: ``$schema`` value of JSON-Schema documents.
        schema_indent: Indentation width of JSON-Schema documents.
        max_name_attempts: Integer suffixes tried for a colliding type name.
        primitives: Extra or overriding primitive name -> keyword entries.
        email_pattern: Pattern emitted for `EmailAddress`.
        url_pattern: Pattern emitted for `Url`.
        result_wrappers: Import strings of generic result-wrapper classes.
        config_files: Config sources merged into this snapshot.
        diagnostics: Problems found while loading the sources.
    """

    schema_uri: str = JSON_SCHEMA_DRAFT_03
    schema_indent: int = JSON_SCHEMA_INDENT
    max_name_attempts: int = MAX_UNIQUE_NAME_ATTEMPTS
    primitives: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    email_pattern: str = EMAIL_PATTERN
    url_pattern: str = URL_PATTERN
    result_wrappers: tuple[str, ...] = ()
    config_files: tuple[Path | str, ...] = ()
    diagnostics: tuple[Diagnostic, ...] = ()

    def primitive_mapper(self) -> PrimitiveMapper:
        """Return the primitive keyword lookup with the configured overrides."""
        return PrimitiveMapper(self.primitives)

    def pattern_set(self) -> PatternSet:
        return PatternSet(email=self.email_pattern, url=self.url_pattern)

    def load_result_wrappers(self) -> tuple[type, ...]:
        """Import the configured result-wrapper classes.

        Raises:
            DescriptorError: If an import string cannot be resolved.
        """
        return tuple(load_target(target) for target in self.result_wrappers)

    def to_toml_dict(self) -> TomlTable:
        """Convert this snapshot into a TOML-serializable dict (export only)."""
        return {
            Toml.SECTION_SCHEMA: {
                Toml.KEY_URI: self.schema_uri,
                Toml.KEY_INDENT: self.schema_indent,
            },
            Toml.SECTION_REGISTRY: {
                Toml.KEY_MAX_NAME_ATTEMPTS: self.max_name_attempts,
            },
            Toml.SECTION_PRIMITIVES: dict(self.primitives),
            Toml.SECTION_PATTERNS: {
                Toml.KEY_EMAIL: self.email_pattern,
                Toml.KEY_URL: self.url_pattern,
            },
            Toml.SECTION_PYTHON: {
                Toml.KEY_RESULT_WRAPPERS: list(self.result_wrappers),
            },
        }

    def to_toml(self) -> str:
        return to_toml(self.to_toml_dict())

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this frozen config."""
        return MutableConfig(
            schema_uri=self.schema_uri,
            schema_indent=self.schema_indent,
            max_name_attempts=self.max_name_attempts,
            primitives=dict(self.primitives),
            email_pattern=self.email_pattern,
            url_pattern=self.url_pattern,
            result_wrappers=list(self.result_wrappers),
            config_files=list(self.config_files),
            diagnostics=DiagnosticLog.from_iterable(self.diagnostics),
        )


# -------------------------- Mutable builder --------------------------
@dataclass
class MutableConfig:
    """Mutable configuration used during discovery and merging.

    ``None`` means "not set by this layer".
    """

    schema_uri: str | None = None
    schema_indent: int | None = None
    max_name_attempts: int | None = None
    primitives: dict[str, str] = field(default_factory=lambda: {})
    email_pattern: str | None = None
    url_pattern: str | None = None
    result_wrappers: list[str] | None = None
    config_files: list[Path | str] = field(default_factory=lambda: [])
    diagnostics: DiagnosticLog = field(default_factory=DiagnosticLog)

    # ---------------------------- Build/freeze ----------------------------
    def freeze(self) -> Config:
        """Freeze this draft into an immutable `Config`, filling unset values with defaults."""
        defaults = Config()
        return Config(
            schema_uri=self.schema_uri if self.schema_uri is not None else defaults.schema_uri,
            schema_indent=(
                self.schema_indent if self.schema_indent is not None else defaults.schema_indent
            ),
            max_name_attempts=(
                self.max_name_attempts
                if self.max_name_attempts is not None
                else defaults.max_name_attempts
            ),
            primitives=MappingProxyType(dict(self.primitives)),
            email_pattern=(
                self.email_pattern if self.email_pattern is not None else defaults.email_pattern
            ),
            url_pattern=self.url_pattern if self.url_pattern is not None else defaults.url_pattern,
            result_wrappers=tuple(self.result_wrappers or ()),
            config_files=tuple(self.config_files),
            diagnostics=tuple(self.diagnostics),
        )

    # --------------------------- Loaders/parsers --------------------------
    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a draft populated with the runtime defaults."""
        return cls.from_toml_dict(load_defaults_dict())

    @classmethod
    def from_toml_dict(cls, data: TomlTable, config_file: Path | None = None) -> MutableConfig:
        """Create a draft from a parsed TOML table.

        Invalid values are recorded in the draft's diagnostics and left unset.
        """
        diagnostics = DiagnosticLog()
        check_unknown_keys(data, diagnostics=diagnostics)

        schema_tbl: TomlTable = get_table_checked(data, Toml.SECTION_SCHEMA, diagnostics=diagnostics)
        registry_tbl: TomlTable = get_table_checked(
            data, Toml.SECTION_REGISTRY, diagnostics=diagnostics
        )
        primitives_tbl: TomlTable = get_table_checked(
            data, Toml.SECTION_PRIMITIVES, diagnostics=diagnostics
        )
        patterns_tbl: TomlTable = get_table_checked(
            data, Toml.SECTION_PATTERNS, diagnostics=diagnostics
        )
        python_tbl: TomlTable = get_table_checked(data, Toml.SECTION_PYTHON, diagnostics=diagnostics)

        draft = cls(
            schema_uri=get_string_value_or_none_checked(
                schema_tbl, Toml.KEY_URI, where="[schema]", diagnostics=diagnostics
            ),
            schema_indent=get_int_value_or_none_checked(
                schema_tbl, Toml.KEY_INDENT, where="[schema]", diagnostics=diagnostics, minimum=0
            ),
            max_name_attempts=get_int_value_or_none_checked(
                registry_tbl,
                Toml.KEY_MAX_NAME_ATTEMPTS,
                where="[registry]",
                diagnostics=diagnostics,
                minimum=1,
            ),
            primitives=get_string_map_checked(
                primitives_tbl, where="[primitives]", diagnostics=diagnostics
            ),
            email_pattern=get_string_value_or_none_checked(
                patterns_tbl, Toml.KEY_EMAIL, where="[patterns]", diagnostics=diagnostics
            ),
            url_pattern=get_string_value_or_none_checked(
                patterns_tbl, Toml.KEY_URL, where="[patterns]", diagnostics=diagnostics
            ),
            result_wrappers=get_string_list_value_checked(
                python_tbl, Toml.KEY_RESULT_WRAPPERS, where="[python]", diagnostics=diagnostics
            ),
            diagnostics=diagnostics,
        )
        if config_file is not None:
            draft.config_files = [config_file]
        return draft

    @classmethod
    def from_toml_file(cls, path: Path, *, strict: bool = False) -> MutableConfig | None:
        """Load a draft from ``typeschema.toml`` or the ``[tool.typeschema]`` table of ``pyproject.toml``.

        Args:
            path: The TOML file.
            strict: Raise `ConfigError` on unreadable or invalid files instead of
                logging and returning None.

        Returns:
            The draft, or None when the file yields no TypeSchema settings.
        """
        logger.debug("Creating MutableConfig from TOML config: %s", path)
        toml_data: TomlTable = read_toml_dict(path) if strict else load_toml_dict(path)

        if path.name == PYPROJECT_TOML_NAME:
            tool_section: object = toml_data.get("tool", {}).get(PYPROJECT_TOOL_SECTION)
            if not isinstance(tool_section, dict):
                logger.debug("No [tool.%s] section in %s", PYPROJECT_TOOL_SECTION, path)
                return None
            toml_data = tool_section
        elif not toml_data and not strict:
            return None

        return cls.from_toml_dict(toml_data, config_file=path)

    @classmethod
    def discover_config_files(cls, anchor: Path) -> list[Path]:
        """Return the config files of ``anchor`` in merge order.

        ``pyproject.toml`` comes first so that ``typeschema.toml`` in the same
        directory overrides it.
        """
        found: list[Path] = []
        for name in (PYPROJECT_TOML_NAME, TYPESCHEMA_TOML_NAME):
            candidate: Path = anchor / name
            if candidate.is_file():
                found.append(candidate)
        return found

    @classmethod
    def load_merged(
        cls,
        *,
        anchor: Path | None = None,
        extra_config_files: Iterable[Path] | None = None,
        no_config: bool = False,
    ) -> MutableConfig:
        """Discover and merge configuration layers into a draft.

        Args:
            anchor: Directory searched for ``pyproject.toml``/``typeschema.toml``
                (defaults to the current working directory).
            extra_config_files: Explicit files merged last, in the given order.
                These are loaded strictly.
            no_config: Skip discovery in ``anchor``.

        Raises:
            ConfigError: If an explicit config file cannot be read or parsed.
        """
        draft: MutableConfig = cls.from_defaults()

        if not no_config:
            for path in cls.discover_config_files(anchor or Path.cwd()):
                discovered: MutableConfig | None = cls.from_toml_file(path)
                if discovered is not None:
                    draft = draft.merge_with(discovered)

        for extra in extra_config_files or ():
            explicit: MutableConfig | None = cls.from_toml_file(Path(extra), strict=True)
            if explicit is not None:
                draft = draft.merge_with(explicit)

        return draft

    # ------------------------------- Merging -------------------------------
    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new draft where the values set in ``other`` override this draft.

        The ``[primitives]`` tables are merged key-wise.
        """
        diagnostics = DiagnosticLog.from_iterable(self.diagnostics)
        diagnostics.extend(other.diagnostics)
        return MutableConfig(
            schema_uri=other.schema_uri if other.schema_uri is not None else self.schema_uri,
            schema_indent=(
                other.schema_indent if other.schema_indent is not None else self.schema_indent
            ),
            max_name_attempts=(
                other.max_name_attempts
                if other.max_name_attempts is not None
                else self.max_name_attempts
            ),
            primitives={**self.primitives, **other.primitives},
            email_pattern=(
                other.email_pattern if other.email_pattern is not None else self.email_pattern
            ),
            url_pattern=other.url_pattern if other.url_pattern is not None else self.url_pattern,
            result_wrappers=(
                other.result_wrappers
                if other.result_wrappers is not None
                else self.result_wrappers
            ),
            config_files=self.config_files + other.config_files,
            diagnostics=diagnostics,
        )
