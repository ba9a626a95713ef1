# topmark:header:start
#
#   project      : Hueprint
#   file         : __init__.py
#   file_relpath : src/hueprint/palette/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Palette and color resolution.

Exports:
    - `ColorSpec`, `rgb`: direct color construction.
    - `Palette`: name → escape resolution with fallback and overrides.
    - `PaletteRegistry`: synchronized global registration.
    - `BUILTIN_COLORS`, `STYLE_CODES`: the built-in tables.
"""

from __future__ import annotations

from hueprint.palette.color import ColorSpec, rgb
from hueprint.palette.registry import PaletteRegistry
from hueprint.palette.resolver import Palette
from hueprint.palette.table import BUILTIN_COLORS, STYLE_CODES

__all__ = [
    "BUILTIN_COLORS",
    "STYLE_CODES",
    "ColorSpec",
    "Palette",
    "PaletteRegistry",
    "rgb",
]
