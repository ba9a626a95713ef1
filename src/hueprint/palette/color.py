# topmark:header:start
#
#   project      : Hueprint
#   file         : color.py
#   file_relpath : src/hueprint/palette/color.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""24-bit color values and their SGR escape sequences.

`ColorSpec` is the single color type used by the palette, the gradient
renderer and the value inspector. Channels are clamped to ``[0, 255]`` on
construction, so any arithmetic performed on colors (mixing, shading) always
yields a valid escape sequence.

Escape format (bit-exact):
    - foreground: ``ESC[38;2;R;G;Bm``
    - background: ``ESC[48;2;R;G;Bm``
"""

from __future__ import annotations

import colorsys
import math
import re
from dataclasses import dataclass, replace
from typing import Final

from hueprint.constants import CSI

_HEX_RE: Final[re.Pattern[str]] = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with halves rounded up (not to even)."""
    return math.floor(value + 0.5)


def _clamp(value: float) -> int:
    return max(0, min(255, round_half_up(value)))


@dataclass(frozen=True)
class ColorSpec:
    """An RGB triple plus a foreground/background flag.

    Attributes:
        r: Red channel (0..255).
        g: Green channel (0..255).
        b: Blue channel (0..255).
        background: Emit a background (``48``) rather than foreground (``38``) sequence.
    """

    r: int
    g: int
    b: int
    background: bool = False

    def __post_init__(self) -> None:
        # Frozen dataclass: normalize channels in place via object.__setattr__.
        object.__setattr__(self, "r", _clamp(self.r))
        object.__setattr__(self, "g", _clamp(self.g))
        object.__setattr__(self, "b", _clamp(self.b))

    @property
    def rgb(self) -> tuple[int, int, int]:
        """Return the channels as a plain tuple."""
        return (self.r, self.g, self.b)

    @property
    def escape(self) -> str:
        """Return the SGR sequence selecting this color."""
        code = "48" if self.background else "38"
        return f"{CSI}{code};2;{self.r};{self.g};{self.b}m"

    @property
    def hex(self) -> str:
        """Return the color as ``#rrggbb``."""
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"

    def as_background(self, background: bool = True) -> ColorSpec:
        """Return a copy targeting the background (or foreground when False)."""
        if self.background == background:
            return self
        return replace(self, background=background)

    def mix(self, other: ColorSpec, factor: float) -> ColorSpec:
        """Linearly interpolate towards `other`.

        Args:
            other (ColorSpec): Target color.
            factor (float): 0.0 returns `self`, 1.0 returns `other`'s channels.

        Returns:
            ColorSpec: The interpolated color, keeping `self.background`.
        """
        return ColorSpec(
            self.r + (other.r - self.r) * factor,  # type: ignore[arg-type]
            self.g + (other.g - self.g) * factor,  # type: ignore[arg-type]
            self.b + (other.b - self.b) * factor,  # type: ignore[arg-type]
            self.background,
        )

    def shade(self, lightness: int) -> ColorSpec:
        """Return the same hue and saturation at the given HLS lightness percent.

        ``shade(50)`` of a fully saturated primary returns the primary itself;
        lower values darken towards black, higher values lighten towards white.
        """
        h, _l, s = colorsys.rgb_to_hls(self.r / 255, self.g / 255, self.b / 255)
        r, g, b = colorsys.hls_to_rgb(h, max(0, min(100, lightness)) / 100, s)
        return ColorSpec(r * 255, g * 255, b * 255, self.background)  # type: ignore[arg-type]

    @classmethod
    def from_hex(cls, text: str, *, background: bool = False) -> ColorSpec | None:
        """Parse ``#rgb`` / ``#rrggbb`` (leading ``#`` optional).

        Returns:
            ColorSpec | None: The parsed color, or None when `text` is not a hex literal.
        """
        m = _HEX_RE.match(text.strip())
        if m is None:
            return None
        digits = m.group(1)
        if len(digits) == 3:
            digits = "".join(ch * 2 for ch in digits)
        return cls(
            int(digits[0:2], 16),
            int(digits[2:4], 16),
            int(digits[4:6], 16),
            background,
        )


def rgb(r: int, g: int, b: int, *, background: bool = False) -> str:
    """Return the escape sequence for a direct RGB color.

    Example:
        >>> rgb(57, 255, 20)
        '\\x1b[38;2;57;255;20m'
    """
    return ColorSpec(r, g, b, background).escape
