"""
Locates and reads the settings file.

A settings file is looked up in this order: an explicit path, then
``settings.toml`` / ``settings.json`` in the working directory, then
``settings.toml`` in the per-user config directory. The first hit wins;
files are never merged.
"""

from __future__ import annotations

import json
import logging
import tomllib
from collections.abc import Callable
from pathlib import Path
from typing import Any

from novelupdates.infra import paths

logger = logging.getLogger(__name__)

SETTINGS_FILENAMES = ("settings.toml", "settings.json")


def _read_json(path: Path) -> Any:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ValueError(f"Invalid JSON in {path}: {e}") from e


def _read_toml(path: Path) -> Any:
    try:
        with path.open("rb") as fh:
            return tomllib.load(fh)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ValueError(f"Invalid TOML in {path}: {e}") from e


_READERS: dict[str, Callable[[Path], Any]] = {
    ".json": _read_json,
    ".toml": _read_toml,
}


def find_config_file(config_path: str | Path | None = None) -> Path | None:
    """Return the settings file that would be loaded, or None.

    An explicit ``config_path`` that does not exist yields None; the
    working directory and user directory are only searched when no path
    is given.
    """
    if config_path:
        path = Path(config_path).expanduser().resolve()
        if path.is_file():
            return path
        logger.warning("novelupdates: config file not found: %s", path)
        return None

    cwd = Path.cwd()
    for name in SETTINGS_FILENAMES:
        candidate = cwd / name
        if candidate.is_file():
            return candidate.resolve()

    user_file = paths.SETTING_PATH
    if user_file.is_file():
        return user_file.resolve()
    return None


def read_config_file(path: Path) -> dict[str, Any]:
    """
    Parse one settings file, choosing the format from its suffix.

    Raises:
        ValueError: Unknown suffix, malformed content, or a root value that
            is not a table / object.
    """
    suffix = path.suffix.lower()
    reader = _READERS.get(suffix)
    if reader is None:
        raise ValueError(f"Unsupported config file extension: {suffix}")

    data = reader(path)
    if not isinstance(data, dict):
        raise ValueError(
            f"Config root must be a dict, got {type(data).__name__} in {path}"
        )
    return data


def load_config(config_path: str | Path | None = None) -> dict[str, Any]:
    """
    Find and parse the settings file.

    Args:
        config_path: Explicit settings file; skips the directory lookup.

    Returns:
        The raw settings mapping, ready for :class:`ConfigAdapter`.

    Raises:
        FileNotFoundError: No settings file was found.
        ValueError: The file could not be parsed.
    """
    path = find_config_file(config_path)
    if path is None:
        raise FileNotFoundError(
            f"No settings file found (tried {config_path or SETTINGS_FILENAMES})"
        )

    logger.info("novelupdates: loading settings from %s", path)
    return read_config_file(path)


def copy_default_config(target: Path) -> None:
    """Write the bundled sample settings to ``target``, creating parents."""
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_bytes(paths.DEFAULT_CONFIG_FILE.read_bytes())
