# topmark:header:start
#
#   project      : Hueprint
#   file         : table.py
#   file_relpath : src/hueprint/palette/table.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Built-in color table and SGR style codes.

Any base color name may carry a shade suffix (``red30``, ``gray85``); see
[`ColorSpec.shade`][hueprint.palette.color.ColorSpec.shade].
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Final, Mapping

from hueprint.palette.color import ColorSpec

BUILTIN_COLORS: Final[Mapping[str, ColorSpec]] = MappingProxyType(
    {
        "black": ColorSpec(0, 0, 0),
        "white": ColorSpec(255, 255, 255),
        "gray": ColorSpec(128, 128, 128),
        "grey": ColorSpec(128, 128, 128),
        "silver": ColorSpec(192, 192, 192),
        "red": ColorSpec(255, 0, 0),
        "crimson": ColorSpec(220, 20, 60),
        "orange": ColorSpec(255, 165, 0),
        "gold": ColorSpec(255, 215, 0),
        "yellow": ColorSpec(255, 255, 0),
        "lime": ColorSpec(191, 255, 0),
        "green": ColorSpec(0, 255, 0),
        "teal": ColorSpec(0, 128, 128),
        "cyan": ColorSpec(0, 255, 255),
        "blue": ColorSpec(0, 0, 255),
        "navy": ColorSpec(0, 0, 128),
        "indigo": ColorSpec(75, 0, 130),
        "purple": ColorSpec(160, 32, 240),
        "violet": ColorSpec(238, 130, 238),
        "magenta": ColorSpec(255, 0, 255),
        "pink": ColorSpec(255, 105, 180),
        "brown": ColorSpec(165, 42, 42),
    }
)

# Single-parameter SGR codes.
STYLE_CODES: Final[Mapping[str, int]] = MappingProxyType(
    {
        "reset": 0,
        "bold": 1,
        "dim": 2,
        "italic": 3,
        "underline": 4,
        "blink": 5,
        "reverse": 7,
        "hidden": 8,
        "strikethrough": 9,
    }
)

# Resolves to no escape at all; text is left unstyled.
NO_COLOR_NAME: Final[str] = "none"
