# topmark:header:start
#
#   project      : Hueprint
#   file         : cmd_common.py
#   file_relpath : src/hueprint/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Helpers shared by Hueprint subcommands."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from hueprint.cli.errors import HueprintConfigError
from hueprint.config.loaders import load_config
from hueprint.config.logging import get_logger
from hueprint.core.errors import ConfigError

if TYPE_CHECKING:
    import click

    from hueprint.cli.console import ConsoleLike
    from hueprint.config.logging import HueprintLogger
    from hueprint.config.model import RenderConfig

logger: HueprintLogger = get_logger(__name__)


def get_console(ctx: click.Context) -> ConsoleLike:
    """Return the console stored on the context by the CLI group."""
    ctx.ensure_object(dict)
    return ctx.obj["console"]


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity stored on the context (default 0)."""
    return int(ctx.obj.get("verbosity_level", 0))


def get_render_config(ctx: click.Context) -> RenderConfig:
    """Load the render configuration selected by the group options.

    Explicit ``--config`` files are merged in order; otherwise files are
    discovered from the working directory unless ``--no-config`` was given.
    When color output is disabled, ``disable_colors`` is forced on.

    Raises:
        HueprintConfigError: If a configuration file is unreadable or invalid.
    """
    ctx.ensure_object(dict)
    cached = ctx.obj.get("render_config")
    if cached is not None:
        return cached

    paths: list[Path] | None = list(ctx.obj.get("config_paths") or ()) or None
    if paths is None and ctx.obj.get("no_config"):
        paths = []
    overrides = None if ctx.obj.get("color_enabled", True) else {"disable_colors": True}
    try:
        config = load_config(paths, start=Path.cwd(), overrides=overrides)
    except ConfigError as exc:
        raise HueprintConfigError(str(exc)) from exc

    logger.debug("Render configuration sources: %s", [str(p) for p in config.sources])
    ctx.obj["render_config"] = config
    return config
