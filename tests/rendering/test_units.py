# topmark:header:start
#
#   project      : Hueprint
#   file         : test_units.py
#   file_relpath : tests/rendering/test_units.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for display-unit splitting (`hueprint.rendering.units`)."""

from __future__ import annotations

from hueprint.rendering.units import DisplayUnit, split_units
from tests.conftest import parametrize


def test_plain_text_is_one_unit_per_character() -> None:
    assert split_units("ab") == [DisplayUnit("a"), DisplayUnit("b")]
    assert split_units("") == []


@parametrize(
    "emoji",
    [
        "\U0001f600",  # grinning face
        "\U0001f1fa\U0001f1f8",  # flag pair
        "\U0001f468\u200d\U0001f469\u200d\U0001f467",  # ZWJ family
        "1\ufe0f\u20e3",  # keycap
        "\U0001f44d\U0001f3fd",  # skin tone modifier
        "\u2764\ufe0f",  # text-default heart with VS16
    ],
)
def test_emoji_sequences_are_atomic(emoji: str) -> None:
    assert split_units(f"a{emoji}b") == [
        DisplayUnit("a"),
        DisplayUnit(emoji, is_emoji=True),
        DisplayUnit("b"),
    ]


def test_text_default_symbol_without_vs16_is_scalar() -> None:
    assert split_units("\u2764") == [DisplayUnit("\u2764")]


def test_units_rejoin_to_original() -> None:
    text = "x\U0001f600y\U0001f1fa\U0001f1f8z"
    assert "".join(unit.text for unit in split_units(text)) == text
