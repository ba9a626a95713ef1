# topmark:header:start
#
#   project      : Hueprint
#   file         : api.py
#   file_relpath : src/hueprint/api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public Hueprint API (stable surface).

This module exposes a **small, typed API** for programs that render styled
text without going through the CLI. Internal modules remain private.

Configuration contract
----------------------
- Functions accepting ``config`` take either a plain **mapping** mirroring the
  TOML shape or a frozen [`RenderConfig`][hueprint.config.model.RenderConfig].
  Mappings are merged over the defaults and frozen before use.
- The global color registry is shared by every call; register colors once at
  startup.

```python
from hueprint import api

api.register_color("ngreen", "#39ff14")
text = api.render(
    ["[Ready].ngreen in %dms", 12],
    config={"overrides": {"brand": "\\x1b[38;5;208m"}},
)
```
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from hueprint.config.model import MutableRenderConfig, RenderConfig
from hueprint.constants import HUEPRINT_VERSION
from hueprint.palette.registry import PaletteRegistry
from hueprint.rendering.controller import Renderer
from hueprint.rendering.gradient import DEFAULT_GRADIENT
from hueprint.rendering.gradient import gradient as _gradient
from hueprint.rendering.kits import FormatKit, format_parser
from hueprint.rendering.layout import format_line
from hueprint.values.inspect import inspect_value
from hueprint.values.sprintf import SprintfResult, sprintf

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from hueprint.palette.color import ColorSpec

__all__: list[str] = [
    "FormatKit",
    "RenderConfig",
    "SprintfResult",
    "format_line",
    "format_parser",
    "gradient",
    "inspect_value",
    "make_config",
    "register_color",
    "render",
    "sprintf",
    "unregister_color",
    "version",
]


def make_config(config: Mapping[str, Any] | RenderConfig | None = None) -> RenderConfig:
    """Normalize `config` into a frozen `RenderConfig`.

    Raises:
        ConfigError: If the mapping holds invalid values.
    """
    if isinstance(config, RenderConfig):
        return config
    draft = MutableRenderConfig()
    if config:
        draft.merge_table(config)
    return draft.freeze()


def render(
    inputs: object,
    extra_kits: Iterable[FormatKit] = (),
    suppress_color: bool | None = None,
    *,
    config: Mapping[str, Any] | RenderConfig | None = None,
) -> str:
    """Render message inputs into one styled string.

    Args:
        inputs (object): Message parts, or a single part.
        extra_kits (Iterable[FormatKit]): Kits run after the built-in ones.
        suppress_color (bool | None): Strip markup; defaults to the config's
            ``disable_colors``.
        config (Mapping[str, Any] | RenderConfig | None): Render configuration.

    Returns:
        str: The rendered text.
    """
    return Renderer(make_config(config)).render(inputs, extra_kits, suppress_color)


def gradient(text: str, colors: str = DEFAULT_GRADIENT, *, background: bool = False) -> str:
    """Render `text` as a gradient over the registry palette."""
    return _gradient(text, colors, background=background)


def register_color(name: str, color: ColorSpec | str, *, replace: bool = False) -> None:
    """Add a named color to the global registry.

    Raises:
        ValueError: If the name is invalid or taken (without `replace`), or the
            color cannot be interpreted.
    """
    PaletteRegistry.register(name, color, replace=replace)


def unregister_color(name: str) -> bool:
    """Remove a user-registered color; returns False if it was not registered."""
    return PaletteRegistry.unregister(name)


def version() -> str:
    """Return the installed Hueprint version."""
    return HUEPRINT_VERSION
