# topmark:header:start
#
#   project      : Hueprint
#   file         : __init__.py
#   file_relpath : src/hueprint/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-based command line interface for Hueprint."""

from __future__ import annotations
