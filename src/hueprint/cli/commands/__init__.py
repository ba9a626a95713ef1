# topmark:header:start
#
#   project      : Hueprint
#   file         : __init__.py
#   file_relpath : src/hueprint/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Hueprint CLI subcommands."""

from __future__ import annotations
