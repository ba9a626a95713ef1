# topmark:header:start
#
#   project      : Hueprint
#   file         : test_cli_version.py
#   file_relpath : tests/cli/test_cli_version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `hueprint version` and the bare group."""

from __future__ import annotations

import json

from hueprint.constants import HUEPRINT_VERSION
from tests.cli.conftest import assert_SUCCESS, run_cli


def test_version_plain() -> None:
    result = run_cli(["--no-color", "version"])
    assert_SUCCESS(result)
    assert result.output.strip() == HUEPRINT_VERSION


def test_version_json() -> None:
    result = run_cli(["version", "--json"])
    assert_SUCCESS(result)
    assert json.loads(result.output) == {"version": HUEPRINT_VERSION}


def test_version_verbose() -> None:
    result = run_cli(["--no-color", "-v", "version"])
    assert_SUCCESS(result)
    assert result.output.splitlines() == ["Hueprint version:", f"    {HUEPRINT_VERSION}"]


def test_group_without_command_prints_hint_and_help() -> None:
    result = run_cli([])
    assert_SUCCESS(result)
    assert result.output.startswith("Hint: use 'hueprint render")
    assert "Commands:" in result.output
