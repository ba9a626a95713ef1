# topmark:header:start
#
#   project      : Hueprint
#   file         : inspect.py
#   file_relpath : src/hueprint/values/inspect.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Safe structural inspection of arbitrary values.

[`inspect_value`][hueprint.values.inspect.inspect_value] renders any Python
object as readable text for a console line:

- containers (mappings, lists, tuples, sets, deques), dataclasses, named tuples
  and plain objects are expanded one member per line, indented by two spaces;
- depth and sequence length are unbounded (verbosity over truncation);
- reference cycles are replaced by ``[Circular]``;
- scalars are colored (unless suppressed) with the built-in palette;
- no input makes it raise: a failing ``__repr__`` or exhausted recursion
  degrades to a fallback token.
"""

from __future__ import annotations

import dataclasses
import reprlib
from collections import deque
from collections.abc import Mapping
from typing import TYPE_CHECKING, Final

from hueprint.config.logging import get_logger
from hueprint.constants import CIRCULAR_MARKER
from hueprint.palette.resolver import Palette

if TYPE_CHECKING:
    from hueprint.config.logging import HueprintLogger

logger: HueprintLogger = get_logger(__name__)

INDENT: Final[str] = "  "

_PALETTE: Final[Palette] = Palette()

# Token kind → palette name.
_TOKEN_COLORS: Final[dict[str, str]] = {
    "number": "yellow",
    "bool": "yellow",
    "string": "green",
    "none": "bold",
    "name": "cyan",
    "special": "cyan",
}

_SEQUENCE_BRACKETS: Final[dict[type, tuple[str, str]]] = {
    list: ("[", "]"),
    tuple: ("(", ")"),
    set: ("{", "}"),
    frozenset: ("frozenset({", "})"),
    deque: ("deque([", "])"),
}


def safe_repr(value: object) -> str:
    """Return ``repr(value)``, or a placeholder token if ``__repr__`` raises."""
    try:
        return repr(value)
    except Exception as exc:  # noqa: BLE001 - user __repr__ may raise anything
        logger.debug("repr() failed for %s: %s", type(value).__name__, exc)
        return f"<{type(value).__name__} object (repr failed)>"


def safe_str(value: object) -> str:
    """Return ``str(value)``, falling back to `safe_repr` if ``__str__`` raises."""
    try:
        return str(value)
    except Exception as exc:  # noqa: BLE001 - user __str__ may raise anything
        logger.debug("str() failed for %s: %s", type(value).__name__, exc)
        return safe_repr(value)


def _has_custom_repr(value: object) -> bool:
    return type(value).__repr__ is not object.__repr__


class _Inspector:
    """Recursive renderer tracking the ids on the current path for cycle detection."""

    def __init__(self, *, colors: bool) -> None:
        self.colors = colors
        self._path: set[int] = set()

    def paint(self, kind: str, text: str) -> str:
        if not self.colors:
            return text
        return _PALETTE.colorize(_TOKEN_COLORS[kind], text)

    def render(self, value: object, level: int = 0) -> str:
        if value is None:
            return self.paint("none", "None")
        if isinstance(value, bool):
            return self.paint("bool", repr(value))
        if isinstance(value, (int, float, complex)):
            return self.paint("number", safe_repr(value))
        if isinstance(value, (str, bytes, bytearray)):
            return self.paint("string", safe_repr(value))

        marker = id(value)
        if marker in self._path:
            return self.paint("special", CIRCULAR_MARKER)
        self._path.add(marker)
        try:
            return self._render_compound(value, level)
        finally:
            self._path.discard(marker)

    def _render_compound(self, value: object, level: int) -> str:
        if dataclasses.is_dataclass(value) and not isinstance(value, type):
            members = [
                (f.name, getattr(value, f.name, None))
                for f in dataclasses.fields(value)
                if f.repr
            ]
            return self._render_members(type(value).__name__, members, level)
        if isinstance(value, tuple) and hasattr(value, "_fields"):
            members = list(zip(value._fields, value))
            return self._render_members(type(value).__name__, members, level)
        if isinstance(value, Mapping):
            return self._render_mapping(value, level)
        brackets = _bracket_for(value)
        if brackets is not None:
            return self._render_sequence(value, brackets, level)  # type: ignore[arg-type]
        if not _has_custom_repr(value) and not callable(value):
            attrs = getattr(value, "__dict__", None)
            if isinstance(attrs, dict) and attrs:
                return self._render_members(type(value).__name__, list(attrs.items()), level)
        if isinstance(value, type) or callable(value):
            return self.paint("special", safe_repr(value))
        return safe_repr(value)

    def _render_mapping(self, value: Mapping[object, object], level: int) -> str:
        prefix = "" if type(value) is dict else f"{self.paint('name', type(value).__name__)}("
        suffix = "" if type(value) is dict else ")"
        items = list(value.items())
        if not items:
            return f"{prefix}{{}}{suffix}"
        inner = INDENT * (level + 1)
        lines = [
            f"{inner}{self.render(key, level + 1)}: {self.render(item, level + 1)}"
            for key, item in items
        ]
        body = ",\n".join(lines)
        return f"{prefix}{{\n{body}\n{INDENT * level}}}{suffix}"

    def _render_sequence(
        self,
        value: list[object] | tuple[object, ...] | set[object],
        brackets: tuple[str, str],
        level: int,
    ) -> str:
        opening, closing = brackets
        items = list(value)
        if not items:
            if type(value) is set:
                return "set()"
            return f"{opening}{closing}"
        inner = INDENT * (level + 1)
        lines = [f"{inner}{self.render(item, level + 1)}" for item in items]
        trailing = "," if type(value) is tuple and len(items) == 1 else ""
        body = ",\n".join(lines)
        return f"{opening}\n{body}{trailing}\n{INDENT * level}{closing}"

    def _render_members(
        self,
        name: str,
        members: list[tuple[str, object]],
        level: int,
    ) -> str:
        head = self.paint("name", name)
        if not members:
            return f"{head}()"
        inner = INDENT * (level + 1)
        lines = [f"{inner}{key}={self.render(item, level + 1)}" for key, item in members]
        body = ",\n".join(lines)
        return f"{head}(\n{body}\n{INDENT * level})"


def _bracket_for(value: object) -> tuple[str, str] | None:
    for kind, brackets in _SEQUENCE_BRACKETS.items():
        if type(value) is kind:
            return brackets
    for kind, brackets in _SEQUENCE_BRACKETS.items():
        if isinstance(value, kind) and not _has_custom_repr(value):
            return brackets
    return None


def inspect_value(value: object, *, suppress_color: bool = False) -> str:
    """Render an arbitrary value as readable, cycle-safe text.

    Args:
        value (object): Any Python object.
        suppress_color (bool): Emit plain text without escape sequences.

    Returns:
        str: The rendered text. Nested containers span multiple lines.

    Example:
        >>> print(inspect_value({"a": [1, 2]}, suppress_color=True))
        {
          'a': [
            1,
            2
          ]
        }
    """
    try:
        return _Inspector(colors=not suppress_color).render(value)
    except RecursionError:
        logger.debug("Structure too deep to expand; falling back to a bounded repr")
        return reprlib.repr(value)
    except Exception as exc:  # noqa: BLE001 - containers may run arbitrary user code
        logger.debug("Inspection of %s failed: %s", type(value).__name__, exc)
        return safe_repr(value)
