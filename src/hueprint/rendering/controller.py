# topmark:header:start
#
#   project      : Hueprint
#   file         : controller.py
#   file_relpath : src/hueprint/rendering/controller.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Format controller: turn message inputs into one rendered string.

Pipeline for one call:

1. If the first input is a string and more inputs follow, it is used as a
   ``%`` template for the rest ([`sprintf`][hueprint.values.sprintf.sprintf]);
   the arguments it consumed are dropped.
2. Remaining strings pass through unchanged; any other value is rendered with
   [`inspect_value`][hueprint.values.inspect.inspect_value].
3. Every segment runs through the kit list (brackets, inline markers,
   gradients, then extra kits) until one full round changes nothing, or
   `MAX_FORMAT_ROUNDS` rounds ran. Hitting the cap is not an error: the text
   of the last round is kept.
4. Segments are joined with single spaces.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from hueprint.config.logging import get_logger
from hueprint.config.model import RenderConfig
from hueprint.constants import MAX_FORMAT_ROUNDS
from hueprint.rendering.kits import builtin_kits
from hueprint.values.inspect import inspect_value
from hueprint.values.sprintf import sprintf

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from hueprint.config.logging import HueprintLogger
    from hueprint.palette.resolver import Palette
    from hueprint.rendering.kits import FormatKit

logger: HueprintLogger = get_logger(__name__)


def as_inputs(inputs: object) -> list[object]:
    """Return `inputs` as a list; anything but a list or tuple becomes one item."""
    if isinstance(inputs, (list, tuple)):
        return list(inputs)
    return [inputs]


def to_segments(inputs: Sequence[object], suppress_color: bool) -> list[str]:
    """Render raw inputs into flat text segments (template substitution included)."""
    remaining = list(inputs)
    segments: list[str] = []
    if len(remaining) > 1 and isinstance(remaining[0], str):
        result = sprintf(remaining[0], remaining[1:], suppress_color=suppress_color)
        segments.append(result.text)
        remaining = remaining[1 + result.consumed :]
    for item in remaining:
        if isinstance(item, str):
            segments.append(item)
        else:
            segments.append(inspect_value(item, suppress_color=suppress_color))
    return segments


def apply_kits(
    text: str,
    kits: Sequence[FormatKit],
    suppress_color: bool,
    *,
    max_rounds: int = MAX_FORMAT_ROUNDS,
) -> str:
    """Run `kits` over `text` until a round changes nothing or `max_rounds` ran.

    Args:
        text (str): Segment to render.
        kits (Sequence[FormatKit]): Kits applied in order within each round.
        suppress_color (bool): Passed through to every kit.
        max_rounds (int): Round cap.

    Returns:
        str: The rendered segment.
    """
    for _ in range(max_rounds):
        changed = False
        for kit in kits:
            updated = kit(suppress_color, text)
            if updated != text:
                changed = True
                text = updated
        if not changed:
            return text
    logger.trace("Round cap (%d) reached; keeping text of the last round", max_rounds)
    return text


class Renderer:
    """Format controller bound to a configuration.

    Args:
        config (RenderConfig | None): Render configuration; defaults apply
            when omitted.
        palette (Palette | None): Base palette; the registry snapshot is used
            when omitted. The config's colors, fallback and overrides are
            layered on top.
    """

    def __init__(
        self,
        config: RenderConfig | None = None,
        *,
        palette: Palette | None = None,
    ) -> None:
        self.config: RenderConfig = config or RenderConfig()
        self.palette: Palette = self.config.build_palette(palette)
        self._kits: tuple[FormatKit, ...] = (
            *builtin_kits(self.palette),
            *self.config.extra_kits,
        )

    def __repr__(self) -> str:
        return f"Renderer(palette={self.palette!r}, kits={len(self._kits)})"

    @property
    def kits(self) -> tuple[FormatKit, ...]:
        """Return the configured kit list (built-ins first)."""
        return self._kits

    def render(
        self,
        inputs: object,
        extra_kits: Iterable[FormatKit] = (),
        suppress_color: bool | None = None,
    ) -> str:
        """Render message inputs into one string.

        Args:
            inputs (object): A list/tuple of message parts, or a single part.
            extra_kits (Iterable[FormatKit]): Kits run after the configured ones.
            suppress_color (bool | None): Strip markup instead of emitting
                escapes; defaults to the config's ``disable_colors``.

        Returns:
            str: The rendered segments joined by single spaces.
        """
        if suppress_color is None:
            suppress_color = self.config.disable_colors
        kits = (*self._kits, *extra_kits)
        segments = to_segments(as_inputs(inputs), suppress_color)
        return " ".join(apply_kits(segment, kits, suppress_color) for segment in segments)


def render(
    inputs: object,
    extra_kits: Iterable[FormatKit] = (),
    suppress_color: bool = False,
    *,
    palette: Palette | None = None,
) -> str:
    """Render `inputs` with the default configuration.

    Example:
        >>> render(["[Hello].red"], [], True)
        'Hello'
        >>> render(["Hello %s", "World"], suppress_color=True)
        'Hello World'
    """
    return Renderer(palette=palette).render(inputs, extra_kits, suppress_color)
