# topmark:header:start
#
#   project      : Hueprint
#   file         : version.py
#   file_relpath : src/hueprint/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Hueprint `version` command.

Prints the Hueprint version as installed in the active Python environment.
"""

from __future__ import annotations

import json

import click

from hueprint.cli.cmd_common import get_console, get_effective_verbosity
from hueprint.constants import HUEPRINT_VERSION


@click.command(
    name="version",
    help="Show the current version of Hueprint.",
)
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    help="Print the version as a JSON object.",
)
@click.pass_context
def version_command(ctx: click.Context, *, as_json: bool = False) -> None:
    """Show the current version of Hueprint."""
    console = get_console(ctx)

    if as_json:
        console.print(json.dumps({"version": HUEPRINT_VERSION}))
    elif get_effective_verbosity(ctx) > 0:
        console.print(console.styled("Hueprint version:", bold=True, underline=True))
        console.print(f"    {console.styled(HUEPRINT_VERSION, bold=True)}")
    else:
        console.print(console.styled(HUEPRINT_VERSION, bold=True))
