# topmark:header:start
#
#   project      : Hueprint
#   file         : sprintf.py
#   file_relpath : src/hueprint/values/sprintf.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""printf-style template substitution.

Directives (``%`` followed by one character):

| Directive | Rendering |
| --- | --- |
| ``%s`` | ``str(arg)`` |
| ``%d`` | numeric coercion, then floor (``123.99`` → ``123``, ``Decimal("3.7")`` → ``3``) |
| ``%i`` | leading integer prefix of ``str(arg)`` (``"42px"`` → ``42``) |
| ``%f`` | leading float prefix of ``str(arg)`` |
| ``%j`` | compact JSON; ``[Circular]`` for self-referencing structures |
| ``%o`` / ``%O`` | [`inspect_value`][hueprint.values.inspect.inspect_value] |
| ``%%`` | a literal ``%`` (never consumes an argument) |

A directive without a remaining argument, an unknown directive character, or an
argument that cannot be coerced is left verbatim and does not consume.
"""

from __future__ import annotations

import json
import math
import re
from decimal import Decimal
from numbers import Real
from typing import TYPE_CHECKING, Callable, Final, NamedTuple

from hueprint.constants import CIRCULAR_MARKER
from hueprint.values.inspect import inspect_value, safe_str

if TYPE_CHECKING:
    from collections.abc import Sequence

DIRECTIVE_RE: Final[re.Pattern[str]] = re.compile(r"%([a-zA-Z%])")

_INT_PREFIX_RE: Final[re.Pattern[str]] = re.compile(r"^\s*([+-]?\d+)")
_FLOAT_PREFIX_RE: Final[re.Pattern[str]] = re.compile(
    r"^\s*([+-]?(?:inf(?:inity)?|nan|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))",
    re.IGNORECASE,
)

# A converter returns the rendered text, or None if the argument does not fit.
Converter = Callable[[object, bool], "str | None"]


class SprintfResult(NamedTuple):
    """Substituted text and the number of positional arguments it used."""

    text: str
    consumed: int


def _as_number(arg: object) -> float | Real | Decimal | None:
    if isinstance(arg, bool):
        return int(arg)
    if isinstance(arg, (Real, Decimal)):
        return arg
    if isinstance(arg, str):
        text = arg.strip()
        for parse in (int, float):
            try:
                return parse(text)
            except ValueError:
                continue
    return None


def _convert_string(arg: object, _suppress_color: bool) -> str:
    return safe_str(arg)


def _convert_floor(arg: object, _suppress_color: bool) -> str | None:
    number = _as_number(arg)
    if number is None:
        return None
    if isinstance(number, int):
        return str(number)
    try:
        return str(math.floor(number))
    except (ArithmeticError, ValueError):
        # inf, nan and signaling Decimal values have no floor
        return None


def _convert_int(arg: object, _suppress_color: bool) -> str | None:
    m = _INT_PREFIX_RE.match(safe_str(arg))
    if m is None:
        return None
    return str(int(m.group(1)))


def _convert_float(arg: object, _suppress_color: bool) -> str | None:
    m = _FLOAT_PREFIX_RE.match(safe_str(arg))
    if m is None:
        return None
    return str(float(m.group(1)))


def _convert_json(arg: object, _suppress_color: bool) -> str:
    try:
        return json.dumps(arg, separators=(",", ":"), ensure_ascii=False, default=safe_str)
    except ValueError:
        # json raises ValueError("Circular reference detected")
        return CIRCULAR_MARKER
    except (TypeError, RecursionError):
        return safe_str(arg)


def _convert_inspect(arg: object, suppress_color: bool) -> str:
    return inspect_value(arg, suppress_color=suppress_color)


CONVERTERS: Final[dict[str, Converter]] = {
    "s": _convert_string,
    "d": _convert_floor,
    "i": _convert_int,
    "f": _convert_float,
    "j": _convert_json,
    "o": _convert_inspect,
    "O": _convert_inspect,
}


def sprintf(
    template: str,
    args: Sequence[object],
    *,
    suppress_color: bool = False,
) -> SprintfResult:
    """Substitute ``%`` directives in `template` with `args`, left to right.

    Args:
        template (str): Template text.
        args (Sequence[object]): Positional arguments.
        suppress_color (bool): Render ``%o``/``%O`` without escape sequences.

    Returns:
        SprintfResult: The substituted text and how many arguments were consumed,
            so callers can forward the rest as additional values.
    """
    consumed = 0

    def _substitute(match: re.Match[str]) -> str:
        nonlocal consumed
        directive = match.group(1)
        if directive == "%":
            return "%"
        if consumed >= len(args):
            return match.group(0)
        converter = CONVERTERS.get(directive)
        if converter is None:
            return match.group(0)
        rendered = converter(args[consumed], suppress_color)
        if rendered is None:
            return match.group(0)
        consumed += 1
        return rendered

    text = DIRECTIVE_RE.sub(_substitute, template)
    return SprintfResult(text, consumed)


def format_template(template: str, *args: object, suppress_color: bool = False) -> str:
    """Return only the substituted text of [`sprintf`][hueprint.values.sprintf.sprintf].

    Example:
        >>> format_template("Hello %s", "World")
        'Hello World'
    """
    return sprintf(template, args, suppress_color=suppress_color).text
