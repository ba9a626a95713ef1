# topmark:header:start
#
#   project      : Hueprint
#   file         : errors.py
#   file_relpath : src/hueprint/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised outside the rendering core.

The rendering engine itself never raises for malformed input text; every
degraded case has a defined fallback. These exceptions cover the surrounding
layers (configuration loading and validation) and are mapped to CLI errors by
[`hueprint.cli.errors`][hueprint.cli.errors].
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class HueprintError(Exception):
    """Base class for all Hueprint errors."""


class ConfigError(HueprintError):
    """Invalid, malformed or unreadable configuration.

    Attributes:
        path: The configuration file involved, if any.
    """

    def __init__(self, message: str, *, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path

    def __str__(self) -> str:
        base = super().__str__()
        if self.path is None:
            return base
        return f"{self.path}: {base}"
