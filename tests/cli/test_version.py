# topmark:header:start
#
#   project      : TypeSchema
#   file         : test_version.py
#   file_relpath : tests/cli/test_version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests: the `version` command."""

from __future__ import annotations

import json

from tests.cli.conftest import assert_SUCCESS, run_cli
from tests.conftest import mark_cli
from typeschema.constants import TYPESCHEMA_VERSION


@mark_cli
def test_version_text() -> None:
    result = run_cli(["--no-color", "version"])

    assert_SUCCESS(result)
    assert result.output.strip() == TYPESCHEMA_VERSION


@mark_cli
def test_version_json() -> None:
    result = run_cli(["version", "--format", "json"])

    assert_SUCCESS(result)
    assert json.loads(result.output) == {"tool": "typeschema", "version": TYPESCHEMA_VERSION}


@mark_cli
def test_version_verbose() -> None:
    result = run_cli(["--no-color", "-v", "version"])

    assert_SUCCESS(result)
    assert "TypeSchema version:" in result.output
    assert TYPESCHEMA_VERSION in result.output
