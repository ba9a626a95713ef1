# topmark:header:start
#
#   project      : Hueprint
#   file         : __init__.py
#   file_relpath : src/hueprint/rendering/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Style passes and the format controller.

Exports:
    - `Renderer`, `render`, `apply_kits`: the format controller.
    - `format_parser`, `FormatKit`: building blocks for custom kits.
    - `gradient`: direct gradient rendering.
    - `format_line`: console line layout.
"""

from __future__ import annotations

from hueprint.rendering.controller import Renderer, apply_kits, render
from hueprint.rendering.gradient import gradient
from hueprint.rendering.kits import FormatKit, apply_inline_markers, format_parser
from hueprint.rendering.layout import format_line

__all__ = [
    "FormatKit",
    "Renderer",
    "apply_inline_markers",
    "apply_kits",
    "format_line",
    "format_parser",
    "gradient",
    "render",
]
