# topmark:header:start
#
#   project      : Hueprint
#   file         : units.py
#   file_relpath : src/hueprint/rendering/units.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Split text into display units, keeping emoji sequences atomic.

A display unit is either one scalar character or one emoji grapheme:

- keycaps (digit, ``#`` or ``*`` + optional VS16 + U+20E3),
- regional-indicator flag pairs,
- emoji with optional variation selector, skin-tone modifier and tag
  characters, chained with zero-width joiners (U+200D).

The emoji ranges approximate Unicode's ``Emoji_Presentation`` property plus
text-default pictographs followed by VS16 (U+FE0F), which is what `re` can
express without a Unicode property database.
"""

from __future__ import annotations

import re
from typing import Final, NamedTuple

# Code points that render as emoji by default.
_PRESENTATION: Final[str] = (
    r"\u231a-\u231b\u23e9-\u23ec\u23f0\u23f3\u25fd-\u25fe\u2614-\u2615"
    r"\u2648-\u2653\u267f\u2693\u26a1\u26aa-\u26ab\u26bd-\u26be\u26c4-\u26c5"
    r"\u26ce\u26d4\u26ea\u26f2-\u26f3\u26f5\u26fa\u26fd\u2705\u270a-\u270b"
    r"\u2728\u274c\u274e\u2753-\u2755\u2757\u2795-\u2797\u27b0\u27bf"
    r"\u2b1b-\u2b1c\u2b50\u2b55"
    r"\U0001f004\U0001f0cf\U0001f18e\U0001f191-\U0001f19a\U0001f1e6-\U0001f1ff"
    r"\U0001f201\U0001f21a\U0001f22f\U0001f232-\U0001f236\U0001f238-\U0001f23a"
    r"\U0001f250-\U0001f251\U0001f300-\U0001f64f\U0001f680-\U0001f6ff"
    r"\U0001f7e0-\U0001f7eb\U0001f90c-\U0001f9ff\U0001fa70-\U0001faff"
)

# Pictographs that render as text unless followed by VS16.
_TEXT_DEFAULT: Final[str] = (
    r"\u00a9\u00ae\u203c\u2049\u2122\u2139\u2194-\u21aa\u231a-\u23ff\u24c2"
    r"\u25aa-\u27bf\u2934-\u2935\u2b05-\u2b55\u3030\u303d\u3297\u3299"
)

_VS16: Final[str] = r"\ufe0f"
_ZWJ: Final[str] = r"\u200d"

_ELEMENT: Final[str] = (
    rf"(?:[{_PRESENTATION}]{_VS16}?|[{_TEXT_DEFAULT}]{_VS16})"
    rf"[\U0001f3fb-\U0001f3ff]?{_VS16}?[\U000e0020-\U000e007f]*"
)

EMOJI_RE: Final[re.Pattern[str]] = re.compile(
    rf"[0-9#*]{_VS16}?\u20e3"
    r"|[\U0001f1e6-\U0001f1ff]{2}"
    rf"|{_ELEMENT}(?:{_ZWJ}{_ELEMENT})*"
)


class DisplayUnit(NamedTuple):
    """One rendering atom of a string."""

    text: str
    is_emoji: bool = False


def split_units(text: str) -> list[DisplayUnit]:
    """Partition `text` into display units.

    Args:
        text (str): Input text.

    Returns:
        list[DisplayUnit]: Units in order; ``"".join(u.text for u in units) == text``.
    """
    units: list[DisplayUnit] = []
    pos = 0
    for match in EMOJI_RE.finditer(text):
        units.extend(DisplayUnit(ch) for ch in text[pos : match.start()])
        units.append(DisplayUnit(match.group(0), is_emoji=True))
        pos = match.end()
    units.extend(DisplayUnit(ch) for ch in text[pos:])
    return units
