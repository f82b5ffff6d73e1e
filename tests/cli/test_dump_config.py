# topmark:header:start
#
#   project      : TypeSchema
#   file         : test_dump_config.py
#   file_relpath : tests/cli/test_dump_config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests: the `dump-config` command."""

from __future__ import annotations

from typing import TYPE_CHECKING

import tomlkit

from tests.cli.conftest import assert_SUCCESS, run_cli, run_cli_in
from tests.conftest import mark_cli
from typeschema.constants import JSON_SCHEMA_DRAFT_03

if TYPE_CHECKING:
    from pathlib import Path


def _body(output: str) -> str:
    start: int = output.index("# === BEGIN ===") + len("# === BEGIN ===\n")
    end: int = output.index("# === END ===")
    return output[start:end]


@mark_cli
def test_dump_defaults(isolation: Path) -> None:
    result = run_cli(["dump-config"])

    assert_SUCCESS(result)
    dumped = tomlkit.parse(_body(result.output)).unwrap()
    assert dumped["schema"]["uri"] == JSON_SCHEMA_DRAFT_03
    assert dumped["registry"]["max_name_attempts"] == 1000


@mark_cli
def test_dump_discovered_file(tmp_path: Path) -> None:
    (tmp_path / "typeschema.toml").write_text(
        '[primitives]\nDecimal = "string"\n\n[schema]\nindent = 4\n',
        encoding="utf-8",
    )

    result = run_cli_in(tmp_path, ["dump-config"])

    assert_SUCCESS(result)
    dumped = tomlkit.parse(_body(result.output)).unwrap()
    assert dumped["schema"]["indent"] == 4
    assert dumped["primitives"] == {"Decimal": "string"}


@mark_cli
def test_no_config_skips_discovery(tmp_path: Path) -> None:
    (tmp_path / "typeschema.toml").write_text("[schema]\nindent = 4\n", encoding="utf-8")

    result = run_cli_in(tmp_path, ["dump-config", "--no-config"])

    assert_SUCCESS(result)
    assert tomlkit.parse(_body(result.output)).unwrap()["schema"]["indent"] == 2


@mark_cli
def test_invalid_value_warns_and_keeps_default(tmp_path: Path) -> None:
    (tmp_path / "typeschema.toml").write_text("[schema]\nindent = -3\n", encoding="utf-8")

    result = run_cli_in(tmp_path, ["--no-color", "dump-config"])

    assert_SUCCESS(result)
    assert "[warning]" in result.output
    assert "[schema].indent" in result.output
    assert tomlkit.parse(_body(result.output)).unwrap()["schema"]["indent"] == 2


@mark_cli
def test_quiet_hides_warnings(tmp_path: Path) -> None:
    (tmp_path / "typeschema.toml").write_text("[schema]\nindent = -3\n", encoding="utf-8")

    result = run_cli_in(tmp_path, ["-q", "dump-config"])

    assert_SUCCESS(result)
    assert "[warning]" not in result.output
