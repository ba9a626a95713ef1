# topmark:header:start
#
#   project      : Hueprint
#   file         : loaders.py
#   file_relpath : src/hueprint/config/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load Hueprint configuration from TOML files.

Two file kinds are recognized:

- ``hueprint.toml``: settings live in the top-level table.
- ``pyproject.toml``: settings live in ``[tool.hueprint]``; a pyproject file
  without that table contributes nothing.

Parsing is done with `tomlkit` and returned as plain `dict` structures. Unlike
discovery, loading a file the user asked for is strict: unreadable files,
invalid TOML and badly typed values raise
[`ConfigError`][hueprint.core.errors.ConfigError].
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from hueprint.config.logging import get_logger
from hueprint.config.model import MutableRenderConfig
from hueprint.constants import CONFIG_FILE_NAME, PYPROJECT_FILE_NAME, PYPROJECT_TOOL_TABLE
from hueprint.core.errors import ConfigError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from hueprint.config.logging import HueprintLogger
    from hueprint.config.model import RenderConfig

logger: HueprintLogger = get_logger(__name__)

TomlTable = dict[str, Any]


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        TomlTable: The parsed document as plain Python values.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as exc:
        raise ConfigError(f"Cannot read configuration: {exc.strerror or exc}", path=path) from exc
    except TomlkitParseError as exc:
        raise ConfigError(f"Invalid TOML: {exc}", path=path) from exc
    data: Any = doc.unwrap()
    return data if isinstance(data, dict) else {}


def extract_settings(path: Path, data: TomlTable) -> TomlTable | None:
    """Return the Hueprint table of a parsed document, or None if it has none.

    For ``pyproject.toml`` this is ``[tool.hueprint]``; for any other file the
    whole document.
    """
    if path.name != PYPROJECT_FILE_NAME:
        return data
    tool = data.get("tool")
    if not isinstance(tool, dict):
        return None
    table = tool.get(PYPROJECT_TOOL_TABLE)
    return table if isinstance(table, dict) else None


def load_config_file(path: Path, draft: MutableRenderConfig | None = None) -> MutableRenderConfig:
    """Merge one configuration file into `draft` (a fresh draft by default).

    Args:
        path (Path): ``hueprint.toml``, ``pyproject.toml`` or any TOML file
            using the top-level layout.
        draft (MutableRenderConfig | None): Draft to merge into.

    Returns:
        MutableRenderConfig: The updated draft.

    Raises:
        ConfigError: If the file cannot be loaded or holds invalid values.
    """
    draft = draft if draft is not None else MutableRenderConfig()
    settings = extract_settings(path, load_toml_dict(path))
    if settings is None:
        logger.debug("No [tool.%s] table in %s", PYPROJECT_TOOL_TABLE, path)
        return draft
    draft.merge_table(settings, source=path)
    logger.debug("Merged configuration from %s", path)
    return draft


def discover_config(start: Path) -> list[Path]:
    """Return configuration files found by walking upward from `start`.

    Files are returned root-most first so that a later merge lets the nearest
    file win. Within one directory ``pyproject.toml`` precedes
    ``hueprint.toml``. Discovery stops after a directory whose file sets
    ``root = true``.

    Discovery is best effort: files that fail to parse are still returned
    (loading them reports the error) but cannot stop the walk.

    Args:
        start (Path): File or directory where discovery starts.

    Returns:
        list[Path]: Discovered configuration paths.
    """
    per_dir: list[list[Path]] = []
    cur: Path = start.resolve()
    if cur.is_file():
        cur = cur.parent

    while True:
        stop_here = False
        entries: list[Path] = []
        for name in (PYPROJECT_FILE_NAME, CONFIG_FILE_NAME):
            candidate = cur / name
            if not candidate.is_file():
                continue
            try:
                settings = extract_settings(candidate, load_toml_dict(candidate))
            except ConfigError as exc:
                logger.debug("Ignoring parse error during discovery: %s", exc)
                entries.append(candidate)
                continue
            if settings is None:
                continue
            entries.append(candidate)
            logger.debug("Discovered config file: %s", candidate)
            if settings.get("root") is True:
                stop_here = True

        if entries:
            per_dir.append(entries)

        parent = cur.parent
        if parent == cur:
            break
        if stop_here:
            logger.debug("Stopping upward config discovery at %s due to root=true", cur)
            break
        cur = parent

    ordered: list[Path] = []
    for entries in reversed(per_dir):
        ordered.extend(entries)
    return ordered


def load_config(
    paths: Iterable[Path] | None = None,
    *,
    start: Path | None = None,
    overrides: dict[str, Any] | None = None,
) -> RenderConfig:
    """Build a frozen `RenderConfig` from defaults, files and overrides.

    Args:
        paths (Iterable[Path] | None): Explicit files, merged in order. When
            omitted, files are discovered from `start` (default: the current
            working directory).
        start (Path | None): Discovery anchor.
        overrides (dict[str, Any] | None): A final table merged last, using
            the same keys as the TOML files (e.g. ``{"disable_colors": True}``).

    Returns:
        RenderConfig: The validated configuration.

    Raises:
        ConfigError: If a file cannot be loaded or a value is invalid.
    """
    if paths is None:
        paths = discover_config(start or Path.cwd())
    draft = MutableRenderConfig()
    for path in paths:
        load_config_file(path, draft)
    if overrides:
        draft.merge_table(overrides)
    return draft.freeze()
