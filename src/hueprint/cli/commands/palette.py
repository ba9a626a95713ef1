# topmark:header:start
#
#   project      : Hueprint
#   file         : palette.py
#   file_relpath : src/hueprint/cli/commands/palette.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Hueprint `palette` command.

Lists the colors available to templates (built-ins plus configured entries)
with a swatch and hex value. ``--shades`` adds a row of lightness steps per
color.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

import click

from hueprint.cli.cmd_common import get_console, get_effective_verbosity, get_render_config
from hueprint.constants import RESET

if TYPE_CHECKING:
    from hueprint.palette.resolver import Palette

SWATCH: Final[str] = "    "
SHADE_STEPS: Final[tuple[int, ...]] = (10, 20, 30, 40, 50, 60, 70, 80, 90)


def swatch(palette: Palette, name: str, *, color: bool) -> str:
    """Return a background-colored block for `name` (empty without color)."""
    if not color:
        return ""
    return f"{palette.color(name, background=True).escape}{SWATCH}{RESET} "


def palette_lines(palette: Palette, *, color: bool, shades: bool) -> list[str]:
    """Return one listing line per palette color."""
    width = max((len(name) for name in palette.colors), default=0)
    lines: list[str] = []
    for name in palette.names():
        spec = palette.colors[name]
        line = f"{swatch(palette, name, color=color)}{name:<{width}}  {spec.hex}"
        if shades:
            if color:
                steps = "".join(
                    swatch(palette, f"{name}{step}", color=True) for step in SHADE_STEPS
                )
            else:
                steps = " ".join(palette.color(f"{name}{step}").hex for step in SHADE_STEPS)
            line = f"{line}  {steps}"
        lines.append(line.rstrip())
    return lines


@click.command(
    name="palette",
    help="List the available colors.",
)
@click.option(
    "--shades",
    is_flag=True,
    help="Also show lightness steps 10..90 (usable as e.g. 'blue40').",
)
@click.pass_context
def palette_command(ctx: click.Context, *, shades: bool) -> None:
    """List palette colors."""
    console = get_console(ctx)
    config = get_render_config(ctx)
    palette = config.build_palette()
    color = not config.disable_colors

    if get_effective_verbosity(ctx) > 0:
        console.print(console.styled(f"Palette ({len(palette.colors)} colors):", bold=True))
    for line in palette_lines(palette, color=color, shades=shades):
        console.print(line)
