# topmark:header:start
#
#   project      : Hueprint
#   file         : test_cli_options.py
#   file_relpath : tests/cli/test_cli_options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for shared CLI option resolution."""

from __future__ import annotations

import pytest

from hueprint.cli.errors import HueprintUsageError
from hueprint.cli.options import ColorMode, resolve_color_mode, resolve_verbosity
from tests.cli.conftest import assert_USAGE_ERROR, run_cli
from tests.conftest import parametrize


@parametrize(
    "verbose, quiet, expected",
    [(0, 0, 0), (2, 0, 2), (0, 1, -1), (0, 3, -1)],
)
def test_resolve_verbosity(verbose: int, quiet: int, expected: int) -> None:
    assert resolve_verbosity(verbose, quiet) == expected


def test_verbose_and_quiet_conflict() -> None:
    with pytest.raises(HueprintUsageError):
        resolve_verbosity(1, 1)
    assert_USAGE_ERROR(run_cli(["-v", "-q", "version"]))


def test_explicit_modes_win_over_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NO_COLOR", "1")
    assert resolve_color_mode(cli_mode=ColorMode.ALWAYS, stdout_isatty=False) is True
    monkeypatch.setenv("FORCE_COLOR", "1")
    assert resolve_color_mode(cli_mode=ColorMode.NEVER, stdout_isatty=True) is False


@parametrize(
    "env, isatty, expected",
    [
        ({}, True, True),
        ({}, False, False),
        ({"FORCE_COLOR": "1"}, False, True),
        ({"FORCE_COLOR": "0"}, False, False),
        ({"NO_COLOR": ""}, True, False),
        ({"FORCE_COLOR": "1", "NO_COLOR": "1"}, False, True),
    ],
)
def test_auto_mode(
    monkeypatch: pytest.MonkeyPatch, env: dict[str, str], isatty: bool, expected: bool
) -> None:
    for key, value in env.items():
        monkeypatch.setenv(key, value)
    assert resolve_color_mode(cli_mode=ColorMode.AUTO, stdout_isatty=isatty) is expected


def test_unknown_color_choice_is_usage_error() -> None:
    assert_USAGE_ERROR(run_cli(["--color", "sometimes", "version"]))
