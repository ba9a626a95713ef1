# topmark:header:start
#
#   project      : Hueprint
#   file         : test_controller.py
#   file_relpath : tests/rendering/test_controller.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the format controller (`hueprint.rendering.controller`)."""

from __future__ import annotations

import pytest

from hueprint.config.model import MutableRenderConfig
from hueprint.constants import MAX_FORMAT_ROUNDS
from hueprint.rendering.controller import Renderer, apply_kits, render
from hueprint.rendering.kits import format_parser
from tests.conftest import parametrize

RED = "\x1b[38;2;255;0;0m"
YELLOW = "\x1b[38;2;255;255;0m"
BOLD = "\x1b[1m"
RESET = "\x1b[0m"


def test_single_tag_plain_and_colored() -> None:
    assert render(["[Hello].red"], [], True) == "Hello"
    assert f"{RED}Hello{RESET}" in render(["[Hello].red"])


@parametrize(
    "inputs, expected",
    [
        ("plain", "plain"),
        (["Hello %s", "World"], "Hello World"),
        (["%s %d", "One"], "One %d"),
        (["count:", 3], "count: 3"),
        (["a", "b"], "a b"),
        ([{"a": 1}], "{\n  'a': 1\n}"),
        ([1, "two"], "1 two"),
        ([], ""),
        (("a %s", "b"), "a b"),
    ],
)
def test_inputs_to_text(inputs: object, expected: str) -> None:
    assert render(inputs, suppress_color=True) == expected


def test_sprintf_consumes_only_used_arguments() -> None:
    assert render(["%s!", "a", "b", 3], suppress_color=True) == "a! b 3"


def test_circular_json_argument() -> None:
    data: dict[str, object] = {}
    data["self"] = data
    assert render(["x %j", data], suppress_color=True) == "x [Circular]"


def test_markup_inside_substituted_arguments_is_rendered() -> None:
    assert render(["Status: %s", "[ok].red"]) == f"Status: {RED}ok{RESET}"


def test_passes_combine_across_rounds() -> None:
    assert render(["[*Warn*].yellow"]) == f"{YELLOW}{BOLD}Warn{RESET}{RESET}"
    assert render(["[(ab)gd(red,blue)].yellow tail"], suppress_color=True) == "ab tail"


def test_toggling_kit_is_capped_at_max_rounds() -> None:
    calls: list[str] = []

    def toggle(_suppress_color: bool, text: str) -> str:
        calls.append(text)
        return "b" if text == "a" else "a"

    assert render(["a"], [toggle]) == "a"
    assert len(calls) == MAX_FORMAT_ROUNDS == 10


def test_converging_kit_stops_after_first_unchanged_round() -> None:
    calls: list[str] = []

    def strip_x(_suppress_color: bool, text: str) -> str:
        calls.append(text)
        return text.replace("x", "", 1)

    assert render(["xxx"], [strip_x]) == ""
    assert len(calls) == 4


def test_apply_kits_custom_round_cap() -> None:
    assert apply_kits("a", [lambda _nc, t: t + "!"], False, max_rounds=3) == "a!!!"


def test_custom_format_parser_kit() -> None:
    mention = format_parser(r"@(\w+)@", lambda _nc, _whole, name: f"User: [{name}].red")
    assert render(["hi @ada@"], [mention], True) == "hi User: ada"
    assert render(["hi @ada@"], [mention]) == f"hi User: {RED}ada{RESET}"


def test_kit_errors_propagate() -> None:
    def broken(_suppress_color: bool, _text: str) -> str:
        raise RuntimeError("kit failed")

    with pytest.raises(RuntimeError, match="kit failed"):
        render(["x"], [broken])


def test_renderer_uses_config_palette_and_flags() -> None:
    draft = MutableRenderConfig(colors={"brand": "#010203"}, fallback="red")
    renderer = Renderer(draft.freeze())
    assert renderer.render("[x].brand") == f"\x1b[38;2;1;2;3mx{RESET}"
    assert renderer.render("[x].unknown") == f"{RED}x{RESET}"

    draft.disable_colors = True
    assert Renderer(draft.freeze()).render("[x].brand") == "x"
    assert Renderer(draft.freeze()).render("[x].brand", suppress_color=False) != "x"


def test_renderer_config_overrides_and_extra_kits() -> None:
    draft = MutableRenderConfig(overrides={"brand": "<B>"})
    draft.extra_kits.append(lambda _nc, text: text.replace("cat", "dog"))
    renderer = Renderer(draft.freeze())
    assert renderer.render("[cat].brand") == f"<B>dog{RESET}"
    assert len(renderer.kits) == 4


@parametrize(
    "markup, stop",
    [
        ("(ab)gd(#ff0000,#0000ff)", "38"),
        ("(ab)gd(#f00,#00f)", "38"),
        ("(ab)gb(#ff0000,#0000ff)", "48"),
    ],
)
def test_hex_gradient_stops_through_controller(markup: str, stop: str) -> None:
    expected = f"\x1b[{stop};2;255;0;0ma\x1b[{stop};2;128;0;128mb{RESET}"
    assert render([markup]) == expected
    assert render([markup], [], True) == "ab"
