# topmark:header:start
#
#   project      : Hueprint
#   file         : layout.py
#   file_relpath : src/hueprint/rendering/layout.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Console line layout.

A line template such as ``"[{status}] [{hours}:{minutes}:{seconds}].gray {message}"``
is rendered in this order:

1. The template itself goes through the format controller, so it may use any
   markup.
2. Timer tokens are substituted (zero padded, local time).
3. ``{title}``, ``{status}`` and ``{message}`` are substituted. The message is
   rendered by the controller from the message inputs.

Choosing whether to emit a line, and where to write it, is left to the caller.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from hueprint.core.levels import Level
from hueprint.rendering.controller import Renderer

if TYPE_CHECKING:
    from hueprint.config.model import RenderConfig


def timer_tokens(now: datetime) -> dict[str, str]:
    """Return the timer token values for `now`."""
    return {
        "year": f"{now.year:04d}",
        "month": f"{now.month:02d}",
        "day": f"{now.day:02d}",
        "hours": f"{now.hour:02d}",
        "minutes": f"{now.minute:02d}",
        "seconds": f"{now.second:02d}",
        "milliseconds": f"{now.microsecond // 1000:03d}",
        "timestamp": str(int(now.timestamp() * 1000)),
    }


def _substitute(text: str, values: dict[str, str]) -> str:
    for key, value in values.items():
        token = "{" + key + "}"
        if token in text:
            text = text.replace(token, value)
    return text


def format_line(
    template: str | None = None,
    *,
    level: Level | str = Level.INFO,
    messages: object = (),
    title: str | None = None,
    now: datetime | None = None,
    config: RenderConfig | None = None,
    renderer: Renderer | None = None,
) -> str:
    """Render one console line.

    Args:
        template (str | None): Line template; defaults to the config's
            ``line_format``.
        level (Level | str): Message level, selecting the status color.
        messages (object): Message inputs for ``{message}``, as accepted by
            [`Renderer.render`][hueprint.rendering.controller.Renderer.render].
        title (str | None): Value of ``{title}``; defaults to the config title.
        now (datetime | None): Time used for timer tokens; defaults to now.
        config (RenderConfig | None): Configuration (ignored if `renderer` is
            given).
        renderer (Renderer | None): Renderer to reuse across lines.

    Returns:
        str: The rendered line, without a trailing newline.

    Raises:
        ValueError: If `level` is a string naming no level.
    """
    renderer = renderer or Renderer(config)
    cfg = renderer.config
    lvl = level if isinstance(level, Level) else Level.parse(level)
    disabled = cfg.disable_colors
    palette = renderer.palette

    line = renderer.render(template if template is not None else cfg.line_format)
    line = _substitute(line, timer_tokens(now or datetime.now()))

    title_text = cfg.title if title is None else title
    if disabled:
        status_text = lvl.value
    else:
        title_text = palette.colorize(cfg.title_color, title_text)
        status_text = palette.colorize(cfg.status_color(lvl), palette.colorize("bold", lvl.value))

    # {message} goes last so tokens inside the message are left alone.
    line = _substitute(line, {"title": title_text, "status": status_text})
    if "{message}" in line:
        line = line.replace("{message}", renderer.render(messages))
    return line
