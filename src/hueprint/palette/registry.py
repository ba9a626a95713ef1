# topmark:header:start
#
#   project      : Hueprint
#   file         : registry.py
#   file_relpath : src/hueprint/palette/registry.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Process-wide palette registry (advanced).

Most callers should build a [`Palette`][hueprint.palette.resolver.Palette]
explicitly (or through [`RenderConfig`][hueprint.config.model.RenderConfig]) and
pass it to the renderer. The registry exists for global convenience
registration, e.g. a plugin adding a brand color once at start-up.

Notes:
    * Reads never lock: `palette()` returns the current immutable snapshot.
    * `register()` / `unregister()` are guarded by an `RLock` and perform a
      copy-on-write swap of the table, so concurrent readers either see the old
      or the new table, never a half-updated one.
    * Built-in entries cannot be removed, only shadowed.

Typical usage:
    ```python
    from hueprint.palette import PaletteRegistry, ColorSpec

    PaletteRegistry.register("ngreen", ColorSpec(57, 255, 20))
    try:
        ...
    finally:
        PaletteRegistry.unregister("ngreen")
    ```
"""

from __future__ import annotations

import re
from threading import RLock
from types import MappingProxyType
from typing import TYPE_CHECKING, ClassVar, Final

from hueprint.config.logging import get_logger
from hueprint.palette.color import ColorSpec
from hueprint.palette.resolver import Palette
from hueprint.palette.table import BUILTIN_COLORS, NO_COLOR_NAME, STYLE_CODES

if TYPE_CHECKING:
    from collections.abc import Mapping

    from hueprint.config.logging import HueprintLogger

logger: HueprintLogger = get_logger(__name__)

# Registered names must be usable as `[text].name` tags and must not be
# mistaken for a shade suffix.
VALID_NAME_RE: Final[re.Pattern[str]] = re.compile(r"^[a-z_]+$")

_RESERVED: Final[frozenset[str]] = frozenset({NO_COLOR_NAME, *STYLE_CODES})


def validate_color_name(name: str) -> str:
    """Normalize and validate a color name for registration.

    Args:
        name (str): Proposed color name.

    Returns:
        str: The lower-cased name.

    Raises:
        ValueError: If the name is empty, contains characters other than
            letters and underscores, or is a reserved style name.
    """
    key = name.strip().lower()
    if not VALID_NAME_RE.match(key):
        raise ValueError(f"Invalid color name {name!r}: use letters and underscores only.")
    if key in _RESERVED:
        raise ValueError(f"Color name {name!r} is reserved.")
    return key


def coerce_color(value: ColorSpec | str, *, base: Mapping[str, ColorSpec]) -> ColorSpec:
    """Turn a `ColorSpec`, a hex literal or an existing color name into a `ColorSpec`.

    Raises:
        ValueError: If `value` is a string that is neither a hex literal nor a
            known color name (shade suffixes allowed).
    """
    if isinstance(value, ColorSpec):
        return value
    spec = Palette(base).lookup(value)
    if spec is None:
        raise ValueError(f"Cannot interpret {value!r} as a color.")
    return spec


class PaletteRegistry:
    """Synchronized, copy-on-write registry of user colors layered on the built-ins."""

    _lock: ClassVar[RLock] = RLock()
    _table: ClassVar[Mapping[str, ColorSpec]] = BUILTIN_COLORS
    _palette: ClassVar[Palette | None] = None

    @classmethod
    def as_mapping(cls) -> Mapping[str, ColorSpec]:
        """Return the current read-only table snapshot."""
        return cls._table

    @classmethod
    def names(cls) -> tuple[str, ...]:
        """Return registered color names (sorted)."""
        return tuple(sorted(cls._table))

    @classmethod
    def palette(cls) -> Palette:
        """Return a `Palette` over the current snapshot.

        The instance is cached until the next mutation.
        """
        cached = cls._palette
        if cached is not None:
            return cached
        with cls._lock:
            if cls._palette is None:
                cls._palette = Palette(cls._table)
            return cls._palette

    @classmethod
    def register(cls, name: str, color: ColorSpec | str, *, replace: bool = False) -> None:
        """Register a color under `name`.

        Args:
            name (str): Color name (letters and underscores).
            color (ColorSpec | str): The color, a hex literal, or an existing name.
            replace (bool): Allow replacing an existing entry.

        Raises:
            ValueError: If the name is invalid, already taken (without
                `replace`), or the color cannot be interpreted.
        """
        key = validate_color_name(name)
        with cls._lock:
            current = cls._table
            if key in current and not replace:
                raise ValueError(f"Duplicate color name: {key}")
            spec = coerce_color(color, base=current)
            updated = dict(current)
            updated[key] = spec
            cls._swap(updated)
        logger.debug("Registered color %s = %s", key, spec.hex)

    @classmethod
    def unregister(cls, name: str) -> bool:
        """Remove a user-registered color.

        Returns:
            bool: True if an entry was removed; False if missing or built-in.
        """
        key = name.strip().lower()
        with cls._lock:
            current = cls._table
            if key not in current or key in BUILTIN_COLORS:
                return False
            updated = dict(current)
            del updated[key]
            cls._swap(updated)
        return True

    @classmethod
    def reset(cls) -> None:
        """Drop every user registration (tests)."""
        with cls._lock:
            cls._table = BUILTIN_COLORS
            cls._palette = None

    @classmethod
    def _swap(cls, table: dict[str, ColorSpec]) -> None:
        cls._table = MappingProxyType(table)
        cls._palette = None
