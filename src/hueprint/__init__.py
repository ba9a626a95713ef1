# topmark:header:start
#
#   project      : Hueprint
#   file         : __init__.py
#   file_relpath : src/hueprint/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Hueprint package.

Hueprint renders style-annotated text for terminals: legacy ``[text].color``
tags, inline ``*bold*`` markers, ``(text)gd(red,blue)`` gradients, ``%``
templates and arbitrary Python values become one plain or ANSI-colored string.
The stable programmatic surface lives in [`hueprint.api`][hueprint.api].
"""

from __future__ import annotations
