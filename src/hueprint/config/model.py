# topmark:header:start
#
#   project      : Hueprint
#   file         : model.py
#   file_relpath : src/hueprint/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Render configuration: immutable `RenderConfig` and its mutable builder.

The split mirrors how configuration is assembled:

- `MutableRenderConfig` is filled from defaults, TOML tables (see
  [`hueprint.config.loaders`][hueprint.config.loaders]) and CLI overrides. It
  performs type checks as values are merged.
- `freeze()` validates color entries and returns a `RenderConfig`, which is
  what the renderer consumes. A frozen config is never mutated; use `thaw()`,
  edit, and `freeze()` again.

TOML layout (top level of ``hueprint.toml`` or ``[tool.hueprint]``):

```toml
fallback = "white"
disable_colors = false
title = "api"
title_color = "cyan"
line_format = "[{status}] {message}"

[colors]        # user palette entries: hex literal or existing color name
ngreen = "#39ff14"

[status]        # level -> palette name for the {status} token
info = "blue60"

[overrides]     # name -> raw escape string, highest precedence
brand = "\\u001b[38;5;208m"
```
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from hueprint.config.logging import get_logger
from hueprint.constants import (
    DEFAULT_FALLBACK_COLOR,
    DEFAULT_LINE_FORMAT,
    DEFAULT_TITLE,
    DEFAULT_TITLE_COLOR,
)
from hueprint.core.errors import ConfigError
from hueprint.core.levels import Level
from hueprint.palette.color import ColorSpec
from hueprint.palette.registry import PaletteRegistry, coerce_color, validate_color_name

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

    from hueprint.config.logging import HueprintLogger
    from hueprint.palette.resolver import Palette
    from hueprint.rendering.kits import FormatKit

logger: HueprintLogger = get_logger(__name__)

_STRING_KEYS: tuple[str, ...] = ("fallback", "title", "title_color", "line_format")
# Consumed by discovery only.
_DISCOVERY_KEYS: tuple[str, ...] = ("root",)
_TABLE_KEYS: tuple[str, ...] = ("colors", "status", "overrides")


def _default_status_colors() -> dict[str, str]:
    return {level.value: level.color for level in Level}


def _frozen(mapping: Mapping[str, Any] | None = None) -> Mapping[str, Any]:
    return MappingProxyType(dict(mapping or {}))


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Immutable render configuration.

    Attributes:
        fallback: Palette name used for unknown colors.
        disable_colors: Render plain text (strip all markup, emit no escapes).
        colors: User palette entries layered over the registry table.
        overrides: Name → raw escape string, taking precedence over the palette.
        extra_kits: Caller kits run after the built-in kits in every round.
        title: Value of the ``{title}`` token in console lines.
        title_color: Palette name used for the title.
        line_format: Console line template.
        status_colors: Level name → palette name for the ``{status}`` token.
        sources: Configuration files merged into this config, in order.
    """

    fallback: str = DEFAULT_FALLBACK_COLOR
    disable_colors: bool = False
    colors: Mapping[str, ColorSpec] = field(default_factory=_frozen)
    overrides: Mapping[str, str] = field(default_factory=_frozen)
    extra_kits: tuple[FormatKit, ...] = ()
    title: str = DEFAULT_TITLE
    title_color: str = DEFAULT_TITLE_COLOR
    line_format: str = DEFAULT_LINE_FORMAT
    status_colors: Mapping[str, str] = field(
        default_factory=lambda: _frozen(_default_status_colors())
    )
    sources: tuple[Path, ...] = ()

    def build_palette(self, base: Palette | None = None) -> Palette:
        """Return a palette with this config's colors, fallback and overrides.

        Args:
            base (Palette | None): Palette to layer onto; defaults to the
                global registry snapshot.

        Returns:
            Palette: The configured palette.
        """
        base = base or PaletteRegistry.palette()
        return base.with_colors(self.colors, fallback=self.fallback, overrides=self.overrides)

    def status_color(self, level: Level) -> str:
        """Return the palette name for `level`'s status token."""
        return self.status_colors.get(level.value, level.color)

    def thaw(self) -> MutableRenderConfig:
        """Return a mutable copy of this config."""
        return MutableRenderConfig(
            fallback=self.fallback,
            disable_colors=self.disable_colors,
            colors=dict(self.colors),
            overrides=dict(self.overrides),
            extra_kits=list(self.extra_kits),
            title=self.title,
            title_color=self.title_color,
            line_format=self.line_format,
            status_colors=dict(self.status_colors),
            sources=list(self.sources),
        )


@dataclass
class MutableRenderConfig:
    """Mutable builder for `RenderConfig`.

    Color values may be given as `ColorSpec`, hex literals or existing color
    names; they are resolved in `freeze()`.
    """

    fallback: str = DEFAULT_FALLBACK_COLOR
    disable_colors: bool = False
    colors: dict[str, ColorSpec | str] = field(default_factory=dict)
    overrides: dict[str, str] = field(default_factory=dict)
    extra_kits: list[FormatKit] = field(default_factory=list)
    title: str = DEFAULT_TITLE
    title_color: str = DEFAULT_TITLE_COLOR
    line_format: str = DEFAULT_LINE_FORMAT
    status_colors: dict[str, str] = field(default_factory=_default_status_colors)
    sources: list[Path] = field(default_factory=list)

    def merge_table(self, table: Mapping[str, Any], *, source: Path | None = None) -> None:
        """Merge a parsed TOML table into this config (later values win).

        Args:
            table (Mapping[str, Any]): Plain dict with the keys documented above.
            source (Path | None): File the table came from, for messages.

        Raises:
            ConfigError: If a known key holds a value of the wrong type, or a
                ``[status]`` key names no level.
        """
        for key, value in table.items():
            if key in _STRING_KEYS:
                setattr(self, key, _expect(value, str, key, source))
            elif key in _DISCOVERY_KEYS:
                continue
            elif key == "disable_colors":
                self.disable_colors = _expect(value, bool, key, source)
            elif key in _TABLE_KEYS:
                entries = _expect(value, dict, key, source)
                for name, entry in entries.items():
                    text = _expect(entry, str, f"{key}.{name}", source)
                    if key == "colors":
                        self.colors[name] = text
                    elif key == "overrides":
                        self.overrides[name] = text
                    else:
                        try:
                            level = Level.parse(name)
                        except ValueError:
                            raise ConfigError(
                                f"Unknown level in [status]: {name!r}", path=source
                            ) from None
                        self.status_colors[level.value] = text
            else:
                logger.warning(
                    "Ignoring unknown configuration key %r (%s)", key, source or "<dict>"
                )
        if source is not None:
            self.sources.append(source)

    def freeze(self) -> RenderConfig:
        """Validate and return an immutable `RenderConfig`.

        Raises:
            ConfigError: If a color name is invalid or a color value cannot be
                interpreted.
        """
        base = dict(PaletteRegistry.as_mapping())
        resolved: dict[str, ColorSpec] = {}
        for name, value in self.colors.items():
            try:
                key = validate_color_name(name)
                spec = coerce_color(value, base={**base, **resolved})
            except ValueError as exc:
                raise ConfigError(
                    str(exc), path=self.sources[-1] if self.sources else None
                ) from exc
            resolved[key] = spec
        return RenderConfig(
            fallback=self.fallback,
            disable_colors=self.disable_colors,
            colors=_frozen(resolved),
            overrides=_frozen(self.overrides),
            extra_kits=tuple(self.extra_kits),
            title=self.title,
            title_color=self.title_color,
            line_format=self.line_format,
            status_colors=_frozen(self.status_colors),
            sources=tuple(self.sources),
        )


def _expect(value: Any, kind: type, key: str, source: Path | None) -> Any:
    if not isinstance(value, kind):
        raise ConfigError(
            f"{key!r} must be of type {kind.__name__}, got {type(value).__name__}",
            path=source,
        )
    return value
