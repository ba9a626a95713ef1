# topmark:header:start
#
#   project      : Hueprint
#   file         : test_color_spec.py
#   file_relpath : tests/palette/test_color_spec.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for `hueprint.palette.color.ColorSpec`."""

from __future__ import annotations

import pytest

from hueprint.palette.color import ColorSpec, rgb, round_half_up
from tests.conftest import parametrize


@parametrize(
    "value, expected",
    [(0.5, 1), (1.5, 2), (2.5, 3), (-0.5, 0), (127.49, 127)],
)
def test_round_half_up_rounds_halves_up(value: float, expected: int) -> None:
    """Halves always round up, unlike Python's banker's rounding."""
    assert round_half_up(value) == expected


def test_channels_are_clamped_and_rounded() -> None:
    spec = ColorSpec(300, -5, 12.5)  # type: ignore[arg-type]
    assert spec.rgb == (255, 0, 13)


def test_escape_foreground_and_background() -> None:
    red = ColorSpec(255, 0, 0)
    assert red.escape == "\x1b[38;2;255;0;0m"
    assert red.as_background().escape == "\x1b[48;2;255;0;0m"
    assert red.as_background(False) is red


def test_hex_roundtrip_forms() -> None:
    assert ColorSpec(255, 0, 0).hex == "#ff0000"
    assert ColorSpec.from_hex("#0f8") == ColorSpec(0, 255, 136)
    assert ColorSpec.from_hex("39FF14") == ColorSpec(57, 255, 20)
    assert ColorSpec.from_hex("#39ff14", background=True) == ColorSpec(57, 255, 20, True)


@parametrize("text", ["", "#", "#12", "#1234", "red", "#gggggg"])
def test_from_hex_rejects_non_hex(text: str) -> None:
    assert ColorSpec.from_hex(text) is None


def test_mix_interpolates_linearly() -> None:
    red = ColorSpec(255, 0, 0)
    blue = ColorSpec(0, 0, 255)
    assert red.mix(blue, 0.0) == red
    assert red.mix(blue, 1.0) == blue
    assert red.mix(blue, 0.5).rgb == (128, 0, 128)


def test_mix_keeps_background_flag_of_start() -> None:
    start = ColorSpec(0, 0, 0, background=True)
    assert start.mix(ColorSpec(255, 255, 255), 0.5).background is True


@parametrize(
    "base, lightness, expected",
    [
        (ColorSpec(255, 0, 0), 50, (255, 0, 0)),
        (ColorSpec(255, 0, 0), 25, (128, 0, 0)),
        (ColorSpec(0, 0, 255), 40, (0, 0, 204)),
        (ColorSpec(0, 255, 0), 0, (0, 0, 0)),
        (ColorSpec(0, 255, 0), 100, (255, 255, 255)),
    ],
)
def test_shade_sets_hls_lightness(
    base: ColorSpec, lightness: int, expected: tuple[int, int, int]
) -> None:
    assert base.shade(lightness).rgb == expected


def test_rgb_helper_builds_escape() -> None:
    assert rgb(57, 255, 20) == "\x1b[38;2;57;255;20m"
    assert rgb(57, 255, 20, background=True) == "\x1b[48;2;57;255;20m"


def test_color_spec_is_frozen() -> None:
    spec = ColorSpec(1, 2, 3)
    with pytest.raises(AttributeError):
        spec.r = 4  # type: ignore[misc]
