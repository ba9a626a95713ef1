# topmark:header:start
#
#   project      : Hueprint
#   file         : brackets.py
#   file_relpath : src/hueprint/rendering/brackets.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Nested ``[content].color`` / ``[content].color-b`` tag resolution.

Tags nest to any depth, e.g. ``[[Inner].blue Outer].green``. Resolution is
innermost-first and non-recursive:

1. A sweep replaces every tag whose content holds no brackets with a unique
   placeholder and records the rendered fragment in an arena (a list indexed
   by creation order).
2. Sweeps repeat until no tag matches. An outer tag only becomes matchable once
   its children were replaced, so children always precede parents in the arena.
3. The arena is unwound in reverse creation order, each placeholder being
   replaced by its fragment, which re-exposes the children's placeholders for
   the following steps.

Inside an outer span the outer style is re-opened after each child that is
followed by more content, so ``Outer`` above stays green. Unbalanced brackets
never match and are left as literal text.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from hueprint.constants import CSI, RESET
from hueprint.palette.table import STYLE_CODES

if TYPE_CHECKING:
    from collections.abc import Mapping

    from hueprint.palette.resolver import Palette
    from hueprint.rendering.kits import FormatKit

TAG_RE: Final[re.Pattern[str]] = re.compile(r"\[([^\[\]]+)\]\.(\w+)(-b)?")

BOLD: Final[str] = f"{CSI}{STYLE_CODES['bold']}m"

# Private-use characters keep placeholders out of the range of ordinary text.
_PLACEHOLDER_OPEN: Final[str] = "\ue000tag"
_PLACEHOLDER_CLOSE: Final[str] = "\ue001"


@dataclass(frozen=True)
class StyleFragment:
    """A resolved tag recorded during one resolution pass.

    Attributes:
        index: Creation order within the pass.
        placeholder: Token standing in for the fragment in the working text.
        rendered: Final text of the fragment (may contain child placeholders).
    """

    index: int
    placeholder: str
    rendered: str


def _placeholder_prefix(text: str) -> str:
    """Return a placeholder prefix that does not occur anywhere in `text`."""
    prefix = _PLACEHOLDER_OPEN
    while prefix in text:
        prefix += _PLACEHOLDER_OPEN[0]
    return prefix


def resolve_brackets(
    suppress_color: bool,
    text: str,
    palette: Palette,
    overrides: Mapping[str, str] | None = None,
) -> str:
    """Resolve all legacy bracket tags in `text`.

    Args:
        suppress_color (bool): Strip tags to their plain content.
        text (str): Input text.
        palette (Palette): Palette used to resolve color names.
        overrides (Mapping[str, str] | None): Per-call name → escape overrides.

    Returns:
        str: Text with every well-formed tag replaced.
    """
    if "]." not in text:
        return text

    prefix = _placeholder_prefix(text)
    child_re = re.compile(re.escape(prefix) + r"\d+" + re.escape(_PLACEHOLDER_CLOSE))
    arena: list[StyleFragment] = []

    def _render(content: str, name: str, bold: bool) -> str:
        if suppress_color:
            return content
        opening = palette.resolve(name, overrides)
        if bold:
            opening += BOLD
        if not opening:
            return content
        # Re-open the outer style after every nested child that is not last.
        content = child_re.sub(
            lambda m: m.group(0) + opening if m.end() < len(content) else m.group(0),
            content,
        )
        return f"{opening}{content}{RESET}"

    def _capture(match: re.Match[str]) -> str:
        content, name, bold_flag = match.groups()
        index = len(arena)
        placeholder = f"{prefix}{index}{_PLACEHOLDER_CLOSE}"
        arena.append(StyleFragment(index, placeholder, _render(content, name, bold_flag == "-b")))
        return placeholder

    working = text
    while True:
        working, count = TAG_RE.subn(_capture, working)
        if count == 0:
            break

    for fragment in reversed(arena):
        working = working.replace(fragment.placeholder, fragment.rendered, 1)
    return working


def bracket_kit(palette: Palette, overrides: Mapping[str, str] | None = None) -> FormatKit:
    """Return the legacy bracket kit bound to `palette`."""

    def _kit(suppress_color: bool, text: str) -> str:
        return resolve_brackets(suppress_color, text, palette, overrides)

    return _kit
