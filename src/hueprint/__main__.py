# topmark:header:start
#
#   project      : Hueprint
#   file         : __main__.py
#   file_relpath : src/hueprint/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running Hueprint via ``python -m hueprint``.

Equivalent to the ``hueprint`` console script.

Examples:
    Render a template::

        python -m hueprint render "[Hello].red %s" World
"""

from __future__ import annotations

from hueprint.cli.main import cli

if __name__ == "__main__":
    cli()
