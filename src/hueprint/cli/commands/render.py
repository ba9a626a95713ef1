# topmark:header:start
#
#   project      : Hueprint
#   file         : render.py
#   file_relpath : src/hueprint/cli/commands/render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Hueprint `render` command.

Renders a marked-up template with optional ``%`` arguments and prints the
result. With ``--line LEVEL`` the message is wrapped in the configured console
line layout (status, time, title).

Examples:
    ```sh
    hueprint render "[Deploy].green finished in %dms" 1234
    hueprint render --json-args "payload: %j" '{"ok": true}'
    hueprint render --line warn "(disk almost full)gd(yellow,red)"
    ```
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from hueprint.cli.cmd_common import get_console, get_render_config
from hueprint.cli.options import parse_level
from hueprint.rendering.controller import Renderer
from hueprint.rendering.layout import format_line

if TYPE_CHECKING:
    from hueprint.core.levels import Level


def decode_args(raw: tuple[str, ...], *, as_json: bool) -> list[object]:
    """Return CLI arguments, JSON-decoded where possible when `as_json` is set."""
    if not as_json:
        return list(raw)
    decoded: list[object] = []
    for item in raw:
        try:
            decoded.append(json.loads(item))
        except json.JSONDecodeError:
            decoded.append(item)
    return decoded


@click.command(
    name="render",
    help="Render TEMPLATE (with optional %-ARGS) and print the result.",
)
@click.argument("template")
@click.argument("args", nargs=-1)
@click.option(
    "--json-args",
    "json_args",
    is_flag=True,
    help="Decode each ARG as JSON when possible (numbers, objects, lists...).",
)
@click.option(
    "--line",
    "level",
    default=None,
    callback=parse_level,
    metavar="LEVEL",
    help="Wrap the output in the console line layout for LEVEL (error, warn, info, ...).",
)
@click.option(
    "--title",
    default=None,
    help="Title for the {title} token of the line layout.",
)
@click.pass_context
def render_command(
    ctx: click.Context,
    template: str,
    args: tuple[str, ...],
    *,
    json_args: bool,
    level: Level | None,
    title: str | None,
) -> None:
    """Render a template and print it."""
    console = get_console(ctx)
    renderer = Renderer(get_render_config(ctx))
    inputs = [template, *decode_args(args, as_json=json_args)]

    if level is None:
        if title is not None:
            console.warn("Warning: --title only applies together with --line; ignoring it.")
        console.print(renderer.render(inputs))
    else:
        console.print(format_line(level=level, messages=inputs, title=title, renderer=renderer))
