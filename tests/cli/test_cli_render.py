# topmark:header:start
#
#   project      : Hueprint
#   file         : test_cli_render.py
#   file_relpath : tests/cli/test_cli_render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `hueprint render`."""

from __future__ import annotations

import io
from typing import TYPE_CHECKING

import pytest

from hueprint.cli.commands.render import decode_args
from hueprint.cli.console import ClickConsole
from tests.cli.conftest import (
    assert_CONFIG_ERROR,
    assert_SUCCESS,
    assert_USAGE_ERROR,
    run_cli,
    run_cli_in,
)

if TYPE_CHECKING:
    from pathlib import Path


def test_render_plain(tmp_path: Path) -> None:
    result = run_cli_in(tmp_path, ["--no-color", "render", "[Hello].red %s", "World"])
    assert_SUCCESS(result)
    assert result.output == "Hello World\n"


def test_render_without_tty_defaults_to_plain(tmp_path: Path) -> None:
    result = run_cli_in(tmp_path, ["render", "*bold* and ~dim~"])
    assert_SUCCESS(result)
    assert result.output == "bold and dim\n"


def test_render_color_always_emits_escapes(tmp_path: Path) -> None:
    result = run_cli_in(tmp_path, ["--color", "always", "render", "[Hi].red"])
    assert_SUCCESS(result)
    assert "\x1b[" in result.output
    assert "Hi" in result.output


def test_render_force_color_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FORCE_COLOR", "1")
    result = run_cli_in(tmp_path, ["render", "[Hi].red"])
    assert_SUCCESS(result)
    assert "\x1b[" in result.output


def test_render_json_args(tmp_path: Path) -> None:
    result = run_cli_in(
        tmp_path,
        ["--no-color", "render", "--json-args", "n=%d obj=%j", "3.7", '{"a": 1}'],
    )
    assert_SUCCESS(result)
    assert result.output == 'n=3 obj={"a":1}\n'


def test_render_extra_args_are_appended(tmp_path: Path) -> None:
    result = run_cli_in(tmp_path, ["--no-color", "render", "a %s", "b", "c"])
    assert_SUCCESS(result)
    assert result.output == "a b c\n"


def test_render_line_layout(tmp_path: Path) -> None:
    (tmp_path / "hueprint.toml").write_text(
        'line_format = "<{status}> {title}: {message}"\ntitle = "svc"\n', encoding="utf-8"
    )
    result = run_cli_in(tmp_path, ["--no-color", "render", "--line", "warning", "disk %s", "full"])
    assert_SUCCESS(result)
    assert result.output == "<warn> svc: disk full\n"


def test_render_line_title_option(tmp_path: Path) -> None:
    (tmp_path / "hueprint.toml").write_text('line_format = "{title} {message}"\n', encoding="utf-8")
    result = run_cli_in(
        tmp_path, ["--no-color", "render", "--line", "info", "--title", "job", "done"]
    )
    assert_SUCCESS(result)
    assert result.output == "job done\n"


def test_render_bad_level_is_usage_error() -> None:
    result = run_cli(["--no-config", "render", "--line", "loud", "x"])
    assert_USAGE_ERROR(result)
    assert "loud" in result.output


def test_render_bad_config_file(tmp_path: Path) -> None:
    bad = tmp_path / "bad.toml"
    bad.write_text("fallback = [\n", encoding="utf-8")
    result = run_cli_in(tmp_path, ["--config", str(bad), "render", "x"])
    assert_CONFIG_ERROR(result)
    assert "Invalid TOML" in result.output


def test_render_no_config_skips_broken_discovery(tmp_path: Path) -> None:
    (tmp_path / "hueprint.toml").write_text("= nope\n", encoding="utf-8")
    assert_CONFIG_ERROR(run_cli_in(tmp_path, ["render", "x"]))
    result = run_cli_in(tmp_path, ["--no-config", "render", "x"])
    assert_SUCCESS(result)
    assert result.output == "x\n"


def test_decode_args() -> None:
    assert decode_args(("1", "x", "[1, 2]"), as_json=True) == [1, "x", [1, 2]]
    assert decode_args(("1",), as_json=False) == ["1"]


def test_render_title_without_line_warns(tmp_path: Path) -> None:
    result = run_cli_in(tmp_path, ["--no-color", "render", "--title", "job", "x"])
    assert_SUCCESS(result)
    assert "Warning: --title only applies together with --line" in result.output
    assert result.output.endswith("x\n")


def test_console_streams() -> None:
    out, err = io.StringIO(), io.StringIO()
    console = ClickConsole(enable_color=False, out=out, err=err)
    console.print("rendered")
    console.warn("careful")
    console.error("broken")
    assert out.getvalue() == "rendered\n"
    assert err.getvalue() == "careful\nbroken\n"
    assert console.styled("plain", bold=True) == "plain"
