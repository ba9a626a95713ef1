# topmark:header:start
#
#   project      : Hueprint
#   file         : test_render_config.py
#   file_relpath : tests/config/test_render_config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `RenderConfig` / `MutableRenderConfig`."""

from __future__ import annotations

import dataclasses
from pathlib import Path

import pytest

from hueprint.config.model import MutableRenderConfig, RenderConfig
from hueprint.core.errors import ConfigError
from hueprint.core.levels import Level
from hueprint.palette.color import ColorSpec
from hueprint.palette.registry import PaletteRegistry
from tests.conftest import parametrize


def test_defaults() -> None:
    config = RenderConfig()
    assert config.fallback == "white"
    assert config.disable_colors is False
    assert config.title == "Hueprint"
    assert config.title_color == "green"
    assert config.line_format == "[{status}] [{hours}:{minutes}:{seconds}].gray {message}"
    assert config.status_color(Level.ERROR) == "red50"
    assert config.status_color(Level.TRACE) == "yellow95"
    assert dict(config.colors) == {}


def test_frozen_config_cannot_be_mutated() -> None:
    config = RenderConfig()
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.fallback = "red"  # type: ignore[misc]
    with pytest.raises(TypeError):
        config.colors["x"] = ColorSpec(0, 0, 0)  # type: ignore[index]


def test_merge_table_and_freeze() -> None:
    draft = MutableRenderConfig()
    draft.merge_table(
        {
            "fallback": "red",
            "disable_colors": True,
            "title": "api",
            "colors": {"ngreen": "#39ff14", "alias": "ngreen"},
            "status": {"warning": "orange"},
            "overrides": {"brand": "<B>"},
        },
        source=Path("hueprint.toml"),
    )
    config = draft.freeze()
    assert config.fallback == "red"
    assert config.disable_colors is True
    assert config.title == "api"
    assert config.colors["ngreen"] == ColorSpec(57, 255, 20)
    assert config.colors["alias"] == ColorSpec(57, 255, 20)
    assert config.status_color(Level.WARN) == "orange"
    assert config.overrides["brand"] == "<B>"
    assert config.sources == (Path("hueprint.toml"),)


def test_thaw_roundtrip() -> None:
    config = MutableRenderConfig(colors={"brand": "#010203"}, title="t").freeze()
    draft = config.thaw()
    draft.title = "u"
    again = draft.freeze()
    assert again.title == "u"
    assert again.colors == config.colors
    assert config.title == "t"


def test_unknown_keys_are_ignored(caplog: pytest.LogCaptureFixture) -> None:
    draft = MutableRenderConfig()
    draft.merge_table({"colour": "red", "root": True})
    assert "colour" in caplog.text
    assert draft.freeze() == RenderConfig()


@parametrize(
    "table, message",
    [
        ({"fallback": 3}, "'fallback' must be of type str"),
        ({"disable_colors": "yes"}, "'disable_colors' must be of type bool"),
        ({"colors": ["red"]}, "'colors' must be of type dict"),
        ({"colors": {"x": 1}}, "'colors.x' must be of type str"),
        ({"status": {"loud": "red"}}, "Unknown level"),
    ],
)
def test_type_errors(table: dict[str, object], message: str) -> None:
    with pytest.raises(ConfigError, match=message):
        MutableRenderConfig().merge_table(table)


@parametrize(
    "colors, message",
    [
        ({"bad-name": "#000000"}, "Invalid color name"),
        ({"bold": "#000000"}, "reserved"),
        ({"brand": "nonsense"}, "Cannot interpret"),
    ],
)
def test_freeze_validates_colors(colors: dict[str, str], message: str) -> None:
    draft = MutableRenderConfig(colors=dict(colors))
    draft.sources.append(Path("conf.toml"))
    with pytest.raises(ConfigError, match=message) as info:
        draft.freeze()
    assert str(info.value).startswith("conf.toml: ")


def test_build_palette_layers_on_registry() -> None:
    PaletteRegistry.register("shared", "#0a0b0c")
    config = MutableRenderConfig(colors={"own": "#010203"}, fallback="red").freeze()
    palette = config.build_palette()
    assert palette.lookup("shared") == ColorSpec(10, 11, 12)
    assert palette.lookup("own") == ColorSpec(1, 2, 3)
    assert palette.fallback == "red"
