# topmark:header:start
#
#   project      : Hueprint
#   file         : __init__.py
#   file_relpath : src/hueprint/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared primitives used across Hueprint layers."""

from __future__ import annotations
