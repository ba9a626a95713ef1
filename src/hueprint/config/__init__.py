# topmark:header:start
#
#   project      : Hueprint
#   file         : __init__.py
#   file_relpath : src/hueprint/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration layer for Hueprint.

Submodules:
    - `hueprint.config.logging`: logger factory and TRACE level.
    - `hueprint.config.model`: `RenderConfig` / `MutableRenderConfig`.
    - `hueprint.config.loaders`: TOML discovery and loading.

Nothing is re-exported here: palette modules import
`hueprint.config.logging`, and the model imports the palette.
"""

from __future__ import annotations
