# Filename: config.py
# Author: Rich Lewis @RichLewis007
# Description: Configuration helpers for persistent user settings. Locates the per-user
#              config and log directories and reads default run options from settings.toml.

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

from platformdirs import PlatformDirs

APP_NAME = "TargetSweeper"
ORG_NAME = "Rich Lewis"

SETTINGS_FILENAME = "settings.toml"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

logger = logging.getLogger(__name__)


class SettingsError(ValueError):
    """Raised when the settings file cannot be read or holds invalid values."""


def app_dirs() -> PlatformDirs:
    return PlatformDirs(appname=APP_NAME, appauthor=ORG_NAME)


def ensure_app_dirs() -> Path:
    # Ensure the configuration directories exist and return the config path.
    dirs = app_dirs()
    config_path = Path(dirs.user_config_dir)
    log_path = Path(dirs.user_log_dir)

    for path in (config_path, log_path):
        path.mkdir(parents=True, exist_ok=True)

    return config_path


def default_settings_path() -> Path:
    return Path(app_dirs().user_config_dir) / SETTINGS_FILENAME


@dataclass(slots=True)
class Settings:
    # Defaults for a sweep; command-line options take precedence.

    concurrency: int = 8
    manifest: str = "Cargo.toml"
    artifact: str = "target"
    use_trash: bool = False
    log_level: str = "INFO"

    def merged(self, **overrides: Any) -> Settings:
        # Return a copy with every non-None override applied.
        return replace(self, **{key: value for key, value in overrides.items() if value is not None})


def load_settings(path: Path | None = None) -> Settings:
    """Read settings from ``path`` (the per-user settings file by default).

    A missing file yields the defaults. Unknown keys are ignored with a
    warning; malformed TOML or a value of the wrong type raises
    :class:`SettingsError`.
    """
    path = path or default_settings_path()
    try:
        with path.open("rb") as handle:
            data = tomllib.load(handle)
    except FileNotFoundError:
        logger.debug("No settings file at %s, using defaults", path)
        return Settings()
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise SettingsError(f"Cannot read settings file {path}: {exc}") from exc

    known = {field.name for field in fields(Settings)}
    for key in sorted(set(data) - known):
        logger.warning("Ignoring unknown setting %r in %s", key, path)

    values = {key: value for key, value in data.items() if key in known}
    _validate(values, path)
    return Settings(**values)


def _validate(values: dict[str, Any], path: Path) -> None:
    # Check types and ranges of the recognised keys.
    concurrency = values.get("concurrency", 1)
    if isinstance(concurrency, bool) or not isinstance(concurrency, int) or concurrency < 1:
        raise SettingsError(f"{path}: concurrency must be a positive integer")

    for key in ("manifest", "artifact"):
        value = values.get(key, "x")
        if not isinstance(value, str) or not value or "/" in value:
            raise SettingsError(f"{path}: {key} must be a plain file name")

    if not isinstance(values.get("use_trash", False), bool):
        raise SettingsError(f"{path}: use_trash must be true or false")

    level = values.get("log_level", "INFO")
    if not isinstance(level, str) or level.upper() not in LOG_LEVELS:
        raise SettingsError(f"{path}: log_level must be one of {', '.join(LOG_LEVELS)}")
    if "log_level" in values:
        values["log_level"] = level.upper()
