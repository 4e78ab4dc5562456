"""
Module: hilite.config

Load editor configuration from a YAML file, falling back to the built-in
defaults whenever the file cannot be read or does not describe a complete
configuration. Loading never raises; callers branch on the returned status.
"""

import os
from typing import Tuple

import yaml

from hilite.config.defaults import default_config
from hilite.config.models import (
    ConfigError,
    ConfigParseError,
    Configuration,
    GeneralSettings,
    LanguageDefinition,
    LoadStatus,
    StatusKind,
    ThemeColors,
)
from hilite.text.logger import get_logger

DEFAULT_PATH = "~/.config/hilite/config.yaml"
CONFIG_PATH_ENV = "HILITE_CONFIG"

logger = get_logger(__name__)


def default_path() -> str:
    return os.environ.get(CONFIG_PATH_ENV) or DEFAULT_PATH


def expand_path(path: str) -> str:
    """Expand `~` and environment variables; keep *path* as-is on failure."""
    try:
        return os.path.expandvars(os.path.expanduser(path))
    except (KeyError, ValueError, OSError):
        return path


def parse(text: str) -> Configuration:
    """Deserialize YAML *text*. Raises ConfigParseError with a diagnostic."""
    try:
        data = yaml.safe_load(text)
    except (yaml.YAMLError, RecursionError) as e:
        # deeply nested documents exhaust the composer's recursion limit
        raise ConfigParseError(str(e) or type(e).__name__) from e
    if data is None:
        raise ConfigParseError("empty configuration")
    return Configuration.from_dict(data)


def load(path: str = DEFAULT_PATH) -> Tuple[Configuration, LoadStatus]:
    """Load the configuration at *path*, or the defaults with a reason."""
    path = expand_path(path)

    try:
        with open(path, "r", encoding="utf-8") as file:
            text = file.read()
    except (OSError, UnicodeDecodeError, ValueError) as e:
        logger.warning(f"Could not read config file {path}: {e}")
        return default_config(), LoadStatus.file_not_found()

    try:
        config = parse(text)
    except ConfigParseError as e:
        logger.error(f"Invalid config file {path}: {e.diagnostic}")
        return default_config(), LoadStatus.parse_error(e.diagnostic)

    logger.debug(f"Loaded config file {path}")
    return config, LoadStatus.success()


def to_dict(config: Configuration) -> dict:
    return config.to_dict()


def dump(config: Configuration) -> str:
    """Serialize *config* to YAML text that `parse` accepts."""
    return yaml.safe_dump(
        config.to_dict(),
        sort_keys=False,
        allow_unicode=True,
        default_flow_style=None,
    )


__all__ = [
    "CONFIG_PATH_ENV",
    "DEFAULT_PATH",
    "ConfigError",
    "ConfigParseError",
    "Configuration",
    "GeneralSettings",
    "LanguageDefinition",
    "LoadStatus",
    "StatusKind",
    "ThemeColors",
    "default_config",
    "default_path",
    "dump",
    "expand_path",
    "load",
    "parse",
    "to_dict",
]
