# topmark:header:start
#
#   project      : Hueprint
#   file         : kits.py
#   file_relpath : src/hueprint/rendering/kits.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Format kits: composable ``(suppress_color, text) -> text`` transforms.

This module defines the `FormatKit` type, the
[`format_parser`][hueprint.rendering.kits.format_parser] factory used to build
regex-driven kits (including caller extensions), and the inline style-marker
pass.

Inline markers (one non-greedy sweep per delimiter, applied in this order):

| Markup | Style |
| --- | --- |
| ``*text*`` | bold |
| ``~text~`` | strikethrough |
| ``-text-`` | italic |
| ``_text_`` | underline |
| ``!text!`` | blink |
| ``#text#`` | reverse |

Nested use of the same delimiter follows shortest-match semantics:
``*a*b*c*`` styles ``a`` and ``c``, leaving ``b`` plain.

Gradient color lists (``)gd(...)`` and ``)gb(...)``) are left untouched, so hex
stops such as ``(ab)gd(#ff0000,#0000ff)`` survive the ``#`` marker.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Callable, Final

from hueprint.constants import CSI, RESET
from hueprint.palette.table import STYLE_CODES

if TYPE_CHECKING:
    from collections.abc import Mapping

    from hueprint.palette.resolver import Palette

FormatKit = Callable[[bool, str], str]
"""A pure transform called as ``kit(suppress_color, text)``."""

# Called with (suppress_color, whole_match, *groups).
ParserCallback = Callable[..., str]

INLINE_MARKERS: Final[tuple[tuple[str, str], ...]] = (
    ("*", "bold"),
    ("~", "strikethrough"),
    ("-", "italic"),
    ("_", "underline"),
    ("!", "blink"),
    ("#", "reverse"),
)


def format_parser(pattern: str | re.Pattern[str], callback: ParserCallback) -> FormatKit:
    """Build a kit that rewrites every match of `pattern` through `callback`.

    Args:
        pattern (str | re.Pattern[str]): Regular expression (compiled or not).
        callback (ParserCallback): Receives ``(suppress_color, whole_match, *groups)``
            and returns the replacement text. Unmatched optional groups are
            passed as ``None``.

    Returns:
        FormatKit: The kit.

    Example:
        >>> mention = format_parser(r"@(\\w+)@", lambda nc, _, name: f"User: {name}")
        >>> mention(False, "@ada@")
        'User: ada'
    """
    regex = re.compile(pattern) if isinstance(pattern, str) else pattern

    def _kit(suppress_color: bool, text: str) -> str:
        return regex.sub(lambda m: callback(suppress_color, m.group(0), *m.groups()), text)

    return _kit


def _marker_pattern(delimiter: str) -> re.Pattern[str]:
    d = re.escape(delimiter)
    return re.compile(rf"({d})(.*?){d}")


_MARKER_PATTERNS: Final[tuple[tuple[re.Pattern[str], str], ...]] = tuple(
    (_marker_pattern(delimiter), f"{CSI}{STYLE_CODES[style]}m")
    for delimiter, style in INLINE_MARKERS
)


# Argument list of a gradient span; kept out of the marker sweep.
_STOP_LIST_RE: Final[re.Pattern[str]] = re.compile(r"\)g[db]\([^()]*\)")
_STASH_OPEN: Final[str] = "\ue002"
_STASH_CLOSE: Final[str] = "\ue003"


def _stash_stop_lists(text: str) -> tuple[str, list[str], str]:
    """Replace gradient color lists with placeholders.

    Returns:
        tuple[str, list[str], str]: The masked text, the stashed lists and the
            placeholder prefix (unique within `text`).
    """
    prefix = _STASH_OPEN
    while prefix in text:
        prefix += _STASH_OPEN
    stash: list[str] = []

    def _stash(m: re.Match[str]) -> str:
        stash.append(m.group(0))
        return f"{prefix}{len(stash) - 1}{_STASH_CLOSE}"

    return _STOP_LIST_RE.sub(_stash, text), stash, prefix


def apply_inline_markers(suppress_color: bool, text: str) -> str:
    """Apply the six inline style markers to `text` in one sweep each.

    With `suppress_color` the delimiters are stripped and only the inner text
    remains; otherwise the inner text is wrapped in the style code and a reset.
    Gradient color lists are restored verbatim afterwards.
    """
    text, stash, prefix = _stash_stop_lists(text)
    for pattern, escape in _MARKER_PATTERNS:
        if suppress_color:
            text = pattern.sub(lambda m: m.group(2), text)
        else:
            text = pattern.sub(lambda m, esc=escape: f"{esc}{m.group(2)}{RESET}", text)
    if stash:
        slot_re = re.compile(re.escape(prefix) + r"(\d+)" + re.escape(_STASH_CLOSE))
        text = slot_re.sub(lambda m: stash[int(m.group(1))], text)
    return text


def builtin_kits(
    palette: Palette,
    overrides: Mapping[str, str] | None = None,
) -> tuple[FormatKit, FormatKit, FormatKit]:
    """Return the built-in kits bound to `palette`, in their fixed order.

    Order: legacy bracket tags, inline markers, gradients.
    """
    from hueprint.rendering.brackets import bracket_kit
    from hueprint.rendering.gradient import gradient_kit

    return (
        bracket_kit(palette, overrides),
        apply_inline_markers,
        gradient_kit(palette),
    )
