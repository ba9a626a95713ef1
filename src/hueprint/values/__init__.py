# topmark:header:start
#
#   project      : Hueprint
#   file         : __init__.py
#   file_relpath : src/hueprint/values/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Value-to-text conversion: template substitution and safe inspection."""

from __future__ import annotations

from hueprint.values.inspect import inspect_value
from hueprint.values.sprintf import SprintfResult, format_template, sprintf

__all__ = [
    "SprintfResult",
    "format_template",
    "inspect_value",
    "sprintf",
]
