# topmark:header:start
#
#   project      : Hueprint
#   file         : exit_codes.py
#   file_relpath : src/hueprint/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Standardized exit codes used by the Hueprint CLI.

Usage:
    ```python
    import subprocess
    from hueprint.cli.exit_codes import ExitCode

    result = subprocess.run(["hueprint", "render", "[ok].green"])
    if result.returncode == ExitCode.CONFIG_ERROR:
        print("Fix hueprint.toml first.")
    ```
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the Hueprint CLI.

    Attributes:
        SUCCESS (int): The command completed.
        FAILURE (int): Generic failure.
        USAGE_ERROR (int): Invalid flags or arguments (Click's own code).
        CONFIG_ERROR (int): Configuration missing, unreadable or invalid
            (``EX_CONFIG`` from sysexits.h).
    """

    SUCCESS = 0
    FAILURE = 1
    USAGE_ERROR = 2
    CONFIG_ERROR = 78
