# topmark:header:start
#
#   project      : Hueprint
#   file         : constants.py
#   file_relpath : src/hueprint/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Hueprint Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version
from typing import Final

HUEPRINT_VERSION: str = get_version("hueprint")

# Control Sequence Introducer; every SGR sequence starts with it.
ESC: Final[str] = "\x1b"
CSI: Final[str] = f"{ESC}["
RESET: Final[str] = f"{CSI}0m"

# Hard cap on fixed-point rounds in the format controller.
MAX_FORMAT_ROUNDS: Final[int] = 10

CIRCULAR_MARKER: Final[str] = "[Circular]"

DEFAULT_FALLBACK_COLOR: Final[str] = "white"
DEFAULT_TITLE: Final[str] = "Hueprint"
DEFAULT_TITLE_COLOR: Final[str] = "green"
DEFAULT_LINE_FORMAT: Final[str] = "[{status}] [{hours}:{minutes}:{seconds}].gray {message}"

# Configuration file discovery
CONFIG_FILE_NAME: Final[str] = "hueprint.toml"
PYPROJECT_FILE_NAME: Final[str] = "pyproject.toml"
PYPROJECT_TOOL_TABLE: Final[str] = "hueprint"

LOG_LEVEL_ENV: Final[str] = "HUEPRINT_LOG_LEVEL"
