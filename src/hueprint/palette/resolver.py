# topmark:header:start
#
#   project      : Hueprint
#   file         : resolver.py
#   file_relpath : src/hueprint/palette/resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Symbolic color and style name resolution.

A `Palette` maps names to escape sequences. Lookup order for
[`Palette.resolve`][hueprint.palette.resolver.Palette.resolve]:

1. caller overrides (per call, then per palette): name → pre-built escape,
2. ``none`` → empty escape,
3. style names (``bold``, ``italic``, ...) → single-parameter SGR,
4. ``#rrggbb`` / ``#rgb`` literals,
5. color table entries, optionally with a shade suffix (``red50``),
6. the palette's fallback color.

Resolution never raises: an unknown or malformed name degrades to the fallback.
"""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import TYPE_CHECKING, Final

from hueprint.config.logging import get_logger
from hueprint.constants import CSI, DEFAULT_FALLBACK_COLOR, RESET
from hueprint.palette.color import ColorSpec
from hueprint.palette.table import BUILTIN_COLORS, NO_COLOR_NAME, STYLE_CODES

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

    from hueprint.config.logging import HueprintLogger

logger: HueprintLogger = get_logger(__name__)

# Base name plus an optional 1-3 digit shade suffix.
_NAME_RE: Final[re.Pattern[str]] = re.compile(r"^([a-z_]+?)(\d{1,3})?$")

_LAST_RESORT: Final[ColorSpec] = ColorSpec(255, 255, 255)


class Palette:
    """An immutable color table with a fallback color and default overrides.

    Args:
        colors (Mapping[str, ColorSpec] | None): Name → color table. Defaults to
            the built-in table.
        fallback (str): Name used when a lookup fails. Must itself resolve in
            `colors`; otherwise white is used.
        overrides (Mapping[str, str] | None): Name → raw escape string applied
            before any table lookup.
    """

    def __init__(
        self,
        colors: Mapping[str, ColorSpec] | None = None,
        *,
        fallback: str = DEFAULT_FALLBACK_COLOR,
        overrides: Mapping[str, str] | None = None,
    ) -> None:
        table = BUILTIN_COLORS if colors is None else colors
        self._colors: Mapping[str, ColorSpec] = MappingProxyType(
            {name.lower(): spec for name, spec in table.items()}
        )
        self._overrides: Mapping[str, str] = MappingProxyType(dict(overrides or {}))
        self.fallback: str = fallback
        self._fallback_spec: ColorSpec = self.lookup(fallback) or _LAST_RESORT

    def __repr__(self) -> str:
        return f"Palette(colors={len(self._colors)}, fallback={self.fallback!r})"

    @property
    def colors(self) -> Mapping[str, ColorSpec]:
        """Return the read-only color table."""
        return self._colors

    @property
    def overrides(self) -> Mapping[str, str]:
        """Return the read-only default overrides."""
        return self._overrides

    def names(self) -> Iterator[str]:
        """Iterate over table names in sorted order."""
        yield from sorted(self._colors)

    def with_colors(
        self,
        colors: Mapping[str, ColorSpec],
        *,
        fallback: str | None = None,
        overrides: Mapping[str, str] | None = None,
    ) -> Palette:
        """Return a new palette with `colors` layered over this table."""
        merged: dict[str, ColorSpec] = dict(self._colors)
        merged.update({name.lower(): spec for name, spec in colors.items()})
        merged_overrides: dict[str, str] = dict(self._overrides)
        merged_overrides.update(overrides or {})
        return Palette(
            merged,
            fallback=self.fallback if fallback is None else fallback,
            overrides=merged_overrides,
        )

    def lookup(self, name: str, *, background: bool = False) -> ColorSpec | None:
        """Strict color lookup without fallback.

        Args:
            name (str): Table name, optionally with shade suffix, or a hex literal.
            background (bool): Return a background color.

        Returns:
            ColorSpec | None: The color, or None when the name does not resolve.
        """
        key = name.strip().lower()
        if not key:
            return None
        if key.startswith("#"):
            spec = ColorSpec.from_hex(key)
            return spec.as_background(background) if spec else None
        spec = self._colors.get(key)
        if spec is None:
            m = _NAME_RE.match(key)
            if m is None or m.group(2) is None:
                return None
            base = self._colors.get(m.group(1))
            shade = int(m.group(2))
            if base is None or shade > 100:
                return None
            spec = base.shade(shade)
        return spec.as_background(background)

    def color(self, name: str, *, background: bool = False) -> ColorSpec:
        """Return the color for `name`, degrading to the fallback color."""
        spec = self.lookup(name, background=background)
        if spec is None:
            logger.trace("Unknown color %r; using fallback %r", name, self.fallback)
            return self._fallback_spec.as_background(background)
        return spec

    def resolve(
        self,
        name: str,
        overrides: Mapping[str, str] | None = None,
        *,
        background: bool = False,
    ) -> str:
        """Return the escape sequence for a color or style name.

        Args:
            name (str): Color name (``red``, ``blue40``, ``#39ff14``), style name
                (``bold``) or ``none``.
            overrides (Mapping[str, str] | None): Per-call name → escape string
                entries taking precedence over everything else.
            background (bool): Select a background color sequence.

        Returns:
            str: The escape sequence; empty for ``none``.
        """
        for table in (overrides, self._overrides):
            if table:
                if name in table:
                    return table[name]
                if name.lower() in table:
                    return table[name.lower()]
        key = name.strip().lower()
        if key == NO_COLOR_NAME:
            return ""
        code = STYLE_CODES.get(key)
        if code is not None:
            return f"{CSI}{code}m"
        return self.color(key, background=background).escape

    def colorize(
        self,
        name: str,
        text: str,
        overrides: Mapping[str, str] | None = None,
        *,
        background: bool = False,
    ) -> str:
        """Wrap `text` with the escape for `name` and a trailing reset."""
        escape = self.resolve(name, overrides, background=background)
        if not escape:
            return text
        return f"{escape}{text}{RESET}"
