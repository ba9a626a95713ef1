# topmark:header:start
#
#   project      : Hueprint
#   file         : main.py
#   file_relpath : src/hueprint/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Hueprint CLI entry point.

Group-level options are resolved once and placed into ``ctx.obj``:

- ``verbosity_level``: program-output verbosity (``-v`` / ``-q``),
- ``log_level``: internal logging level from ``HUEPRINT_LOG_LEVEL``,
- ``color_enabled``: the resolved color decision,
- ``config_paths`` / ``no_config``: configuration selection,
- ``console``: the output sink used by every subcommand.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from hueprint.cli.commands.palette import palette_command
from hueprint.cli.commands.render import render_command
from hueprint.cli.commands.version import version_command
from hueprint.cli.console import ClickConsole
from hueprint.cli.options import (
    ColorMode,
    common_color_options,
    common_config_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from hueprint.config.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from pathlib import Path

    from hueprint.cli.console import ConsoleLike

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
    config_paths: tuple[Path, ...] = (),
    no_config: bool = False,
) -> None:
    """Initialize shared state (verbosity, logging, color, config, console).

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
        config_paths (tuple[Path, ...]): Explicit configuration files.
        no_config (bool): Skip configuration discovery.
    """
    ctx.ensure_object(dict)

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    level_env = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    effective_color_mode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color = resolve_color_mode(cli_mode=effective_color_mode)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["config_paths"] = tuple(config_paths)
    ctx.obj["no_config"] = no_config

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="Hueprint: render styled text for terminals.",
)
@common_verbose_options
@common_color_options
@common_config_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
    config_paths: tuple[Path, ...],
    no_config: bool,
) -> None:
    """Entry point for the Hueprint CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
        config_paths=config_paths,
        no_config=no_config,
    )
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'hueprint render TEMPLATE [ARGS...]' to render styled text.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(render_command)

cli.add_command(palette_command)

if __name__ == "__main__":
    cli()
