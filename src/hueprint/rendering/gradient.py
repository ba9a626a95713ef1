# topmark:header:start
#
#   project      : Hueprint
#   file         : gradient.py
#   file_relpath : src/hueprint/rendering/gradient.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Gradient rendering for ``(text)gd(colorA,colorB,...)`` spans.

``gd`` colors the foreground, ``gb`` the background. The color list is split on
commas; a single color is duplicated into a flat two-stop gradient. Each scalar
display unit gets its own escape sequence, linearly interpolated between the
two stops of the section it falls in. Emoji are emitted unstyled and do not
advance the interpolation position. One reset closes the span.
"""

from __future__ import annotations

import math
import re
from typing import TYPE_CHECKING, Final

from hueprint.constants import RESET
from hueprint.rendering.kits import format_parser
from hueprint.rendering.units import split_units

if TYPE_CHECKING:
    from collections.abc import Sequence

    from hueprint.palette.color import ColorSpec
    from hueprint.palette.resolver import Palette
    from hueprint.rendering.kits import FormatKit

GRADIENT_RE: Final[re.Pattern[str]] = re.compile(r"\(([^()]+)\)g([db])\((.*?)\)")

DEFAULT_GRADIENT: Final[str] = "red,blue"


def parse_stops(colors: str, palette: Palette, *, background: bool = False) -> list[ColorSpec]:
    """Parse a comma-separated color list into at least two color stops.

    Unknown names resolve to the palette fallback color.
    """
    names = [name.strip() for name in colors.split(",")]
    if len(names) == 1:
        names = names * 2
    return [palette.color(name, background=background) for name in names]


def interpolate_units(text: str, stops: Sequence[ColorSpec]) -> str:
    """Color each scalar unit of `text` along `stops` and append a reset.

    Args:
        text (str): Plain text to color.
        stops (Sequence[ColorSpec]): At least two color stops.

    Returns:
        str: Text with one escape sequence before every scalar unit.
    """
    units = split_units(text)
    scalar_count = sum(1 for unit in units if not unit.is_emoji)
    sections = len(stops) - 1
    section_length = max(1, math.ceil(scalar_count / sections))

    parts: list[str] = []
    position = 0
    for unit in units:
        if unit.is_emoji:
            parts.append(unit.text)
            continue
        index = position // section_length
        factor = (position - index * section_length) / section_length
        start = stops[min(index, sections)]
        end = stops[min(index + 1, sections)]
        parts.append(start.mix(end, factor).escape + unit.text)
        position += 1
    parts.append(RESET)
    return "".join(parts)


def render_gradient(
    suppress_color: bool,
    text: str,
    colors: str,
    palette: Palette,
    *,
    background: bool = False,
) -> str:
    """Render one gradient span; returns `text` unchanged when color is suppressed."""
    if suppress_color:
        return text
    return interpolate_units(text, parse_stops(colors, palette, background=background))


def gradient_kit(palette: Palette) -> FormatKit:
    """Return the kit resolving ``gd`` (foreground) and ``gb`` (background) spans."""

    def _replace(suppress_color: bool, _whole: str, text: str, kind: str, colors: str) -> str:
        return render_gradient(suppress_color, text, colors, palette, background=kind == "b")

    return format_parser(GRADIENT_RE, _replace)


def gradient(
    text: str,
    colors: str = DEFAULT_GRADIENT,
    *,
    background: bool = False,
    palette: Palette | None = None,
) -> str:
    """Render `text` as a gradient without markup.

    Example:
        >>> gradient("Hello", "red,blue").startswith("\\x1b[38;2;255;0;0mH")
        True
    """
    if palette is None:
        from hueprint.palette.registry import PaletteRegistry

        palette = PaletteRegistry.palette()
    return render_gradient(False, text, colors, palette, background=background)
