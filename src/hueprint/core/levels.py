# topmark:header:start
#
#   project      : Hueprint
#   file         : levels.py
#   file_relpath : src/hueprint/core/levels.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Message levels carrying their default status color.

`Level` is a `str` enum whose value is the level name (``"info"``) and which
additionally stores the palette color used for the ``{status}`` token of a
console line. Keeping the color out of ``_value_`` preserves normal Enum
semantics (hashing, equality, ``repr``).

Example:
    ```python
    Level.ERROR.value   # 'error'
    Level.ERROR.color   # 'red50'
    Level("warn")       # Level.WARN
    ```
"""

from __future__ import annotations

from enum import Enum


class Level(str, Enum):
    """Message level with an associated palette color name."""

    _value_: str
    _color: str

    def __new__(cls, text: str, color: str) -> Level:
        """Construct a level member.

        Args:
            text (str): The level name, stored as the enum value.
            color (str): Palette name used for the status token.

        Returns:
            Level: The newly constructed enum member.
        """
        obj: Level = str.__new__(cls, text)
        obj._value_ = text
        obj._color = color
        return obj

    @property
    def color(self) -> str:
        """Return the palette color name associated with this level."""
        return self._color

    ERROR = ("error", "red50")
    WARN = ("warn", "yellow40")
    INFO = ("info", "blue40")
    DEBUG = ("debug", "purple50")
    TRACE = ("trace", "yellow95")
    TXT = ("txt", "none")

    @classmethod
    def parse(cls, text: str) -> Level:
        """Return the level named `text` (case-insensitive; ``warning`` → ``warn``).

        Raises:
            ValueError: If `text` names no level.
        """
        key = text.strip().lower()
        if key == "warning":
            key = "warn"
        return cls(key)
