# topmark:header:start
#
#   project      : TypeSchema
#   file         : test_config_io.py
#   file_relpath : tests/config/test_config_io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the TOML I/O helpers and checked getters."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
import tomlkit

from typeschema.config.io import (
    check_unknown_keys,
    get_int_value_or_none_checked,
    get_string_list_value_checked,
    get_string_map_checked,
    get_table_checked,
    load_defaults_dict,
    load_toml_dict,
    read_toml_dict,
    to_toml,
)
from typeschema.config.keys import Toml
from typeschema.constants import JSON_SCHEMA_DRAFT_03
from typeschema.core.diagnostics import DiagnosticLevel, DiagnosticLog
from typeschema.core.errors import ConfigError

if TYPE_CHECKING:
    from pathlib import Path


def test_defaults_dict_is_fresh() -> None:
    first = load_defaults_dict()
    first[Toml.SECTION_SCHEMA][Toml.KEY_URI] = "changed"
    assert load_defaults_dict()[Toml.SECTION_SCHEMA][Toml.KEY_URI] == JSON_SCHEMA_DRAFT_03


def test_load_toml_dict_is_lenient(tmp_path: Path) -> None:
    assert load_toml_dict(tmp_path / "missing.toml") == {}
    bad = tmp_path / "bad.toml"
    bad.write_text("[schema\nuri = 1\n", encoding="utf-8")
    assert load_toml_dict(bad) == {}


def test_read_toml_dict_is_strict(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="Cannot read"):
        read_toml_dict(tmp_path / "missing.toml")

    bad = tmp_path / "bad.toml"
    bad.write_text("[schema\nuri = 1\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="Invalid TOML"):
        read_toml_dict(bad)

    good = tmp_path / "good.toml"
    good.write_text('[schema]\nindent = 4\n', encoding="utf-8")
    assert read_toml_dict(good) == {"schema": {"indent": 4}}


def test_to_toml_drops_none_values() -> None:
    text: str = to_toml({"schema": {"uri": None, "indent": 2}, "python": {"result_wrappers": []}})
    assert tomlkit.parse(text).unwrap() == {"schema": {"indent": 2}, "python": {"result_wrappers": []}}


def test_int_getter_rejects_bools_and_small_values() -> None:
    diagnostics = DiagnosticLog()
    table = {"flag": True, "small": 0, "ok": 3, "text": "3"}

    assert get_int_value_or_none_checked(table, "flag", where="[t]", diagnostics=diagnostics) is None
    assert (
        get_int_value_or_none_checked(table, "small", where="[t]", diagnostics=diagnostics, minimum=1)
        is None
    )
    assert get_int_value_or_none_checked(table, "text", where="[t]", diagnostics=diagnostics) is None
    assert get_int_value_or_none_checked(table, "ok", where="[t]", diagnostics=diagnostics) == 3
    assert get_int_value_or_none_checked(table, "absent", where="[t]", diagnostics=diagnostics) is None

    assert len(diagnostics) == 3
    assert all(d.level is DiagnosticLevel.WARNING for d in diagnostics)


def test_list_and_map_getters() -> None:
    diagnostics = DiagnosticLog()

    values = get_string_list_value_checked(
        {"wrappers": ["a:B", 1, "c:D"]}, "wrappers", where="[python]", diagnostics=diagnostics
    )
    assert values == ["a:B", "c:D"]
    assert (
        get_string_list_value_checked({"wrappers": "a:B"}, "wrappers", where="[python]", diagnostics=diagnostics)
        is None
    )
    assert get_string_map_checked({"Money": "number", "Bad": 1}, where="[primitives]", diagnostics=diagnostics) == {
        "Money": "number"
    }
    assert len(diagnostics) == 3


def test_table_getter_and_unknown_keys() -> None:
    diagnostics = DiagnosticLog()
    data = {"schema": "oops", "bogus": {}, "registry": {"max_name_attempts": 5, "typo": 1}}

    assert get_table_checked(data, "schema", diagnostics=diagnostics) == {}
    assert get_table_checked(data, "patterns", diagnostics=diagnostics) == {}
    check_unknown_keys(data, diagnostics=diagnostics)

    messages = [d.message for d in diagnostics]
    assert len(messages) == 3
    assert "Unknown config section [bogus]" in messages
    assert "Unknown key 'typo' in [registry]" in messages
