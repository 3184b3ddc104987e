"""
Settings loader — reads meshcheck.yml into the Settings model.

The file is optional.  Without an explicit path, the loader walks up
from the working directory; if nothing is found, defaults apply.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from meshcheck.core.models.settings import Settings

logger = logging.getLogger(__name__)

# Default settings filename
SETTINGS_FILE = "meshcheck.yml"


class ConfigError(Exception):
    """Raised when the settings file is invalid or missing."""


def find_settings_file(start_dir: Path | None = None) -> Path | None:
    """Search for meshcheck.yml starting from the given directory, walking up.

    Args:
        start_dir: Directory to start searching from (default: cwd).

    Returns:
        Path to meshcheck.yml, or None if not found.
    """
    current = (start_dir or Path.cwd()).resolve()

    for _ in range(20):  # safety limit
        candidate = current / SETTINGS_FILE
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break  # filesystem root
        current = parent

    return None


def load_settings(path: Path | None = None, search: bool = True) -> Settings:
    """Load and validate analyzer settings.

    Args:
        path: Explicit path to meshcheck.yml.  Must exist when given.
        search: When ``path`` is None, look for the file upward from cwd.

    Returns:
        Validated Settings (defaults when no file is found).

    Raises:
        ConfigError: If an explicit file is missing, or any file is invalid.
    """
    if path is None:
        path = find_settings_file() if search else None
        if path is None:
            logger.debug("No %s found, using default settings", SETTINGS_FILE)
            return Settings()
    elif not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    logger.debug("Loading settings from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return Settings()

    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    try:
        settings = Settings.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid settings in {path}: {e}") from e

    logger.info("Loaded settings from %s", path)
    return settings
