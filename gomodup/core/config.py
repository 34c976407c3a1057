"""
Configuration management for gomodup.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

from .exceptions import ConfigurationError


CONFIG_ENV_VAR = "GOMODUP_CONFIG"
SPINNER_STYLES = ("line", "dot")

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _normalize_path(path: str) -> str:
    """Expand user and convert to absolute path."""
    return os.path.abspath(os.path.expanduser(path))


def get_default_config_path() -> Path:
    """Get the default configuration file path."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(_normalize_path(override))
    config_home = os.environ.get("XDG_CONFIG_HOME") or os.path.join("~", ".config")
    return Path(_normalize_path(config_home)) / "gomodup" / "config.json"


@dataclass
class AppConfig:
    """Runtime settings for a gomodup session."""
    go_binary: str = "go"
    workdir: Optional[str] = None
    tick_interval: float = 0.1
    spinner: str = "line"
    log_file: Optional[str] = None
    verbose: bool = False

    def validate(self) -> None:
        """Raise ConfigurationError if any value is out of range."""
        if not self.go_binary:
            raise ConfigurationError("go_binary must not be empty")
        if not isinstance(self.tick_interval, (int, float)) or self.tick_interval <= 0:
            raise ConfigurationError(f"tick_interval must be a positive number, got {self.tick_interval!r}")
        if self.spinner not in SPINNER_STYLES:
            raise ConfigurationError(
                f"Unknown spinner style '{self.spinner}'. Available: {', '.join(SPINNER_STYLES)}"
            )
        if self.workdir is not None and not os.path.isdir(_normalize_path(self.workdir)):
            raise ConfigurationError(f"Working directory does not exist: {self.workdir}")

    def merged(self, overrides: Dict[str, Any]) -> AppConfig:
        """Return a copy with every non-None override applied."""
        data = asdict(self)
        for key, value in overrides.items():
            if value is not None and key in data:
                data[key] = value
        return AppConfig(**data)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> AppConfig:
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigurationError(f"Unknown configuration keys: {', '.join(unknown)}")
        return cls(**data)

    @classmethod
    def load_from_file(cls, config_path: str) -> AppConfig:
        """
        Load configuration from a JSON file.

        Args:
            config_path: Path to the config file

        Returns:
            AppConfig with defaults for any missing keys; a missing file
            yields a default configuration.

        Raises:
            ConfigurationError: If the file cannot be read or parsed
        """
        config_path = _normalize_path(config_path)
        if not os.path.exists(config_path):
            return cls()

        try:
            with open(config_path, "r", encoding="utf-8") as handle:
                data = json.load(handle)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigurationError(f"Could not read config {config_path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigurationError(f"Config {config_path} must contain a JSON object")
        return cls.from_dict(data)


def load_config(config_path: Optional[str] = None, **overrides: Any) -> AppConfig:
    """
    Load configuration from file and apply command line overrides.

    Args:
        config_path: Optional path to config file. Uses default if not provided.
        **overrides: Values that take precedence over the file (None is ignored)

    Returns:
        Validated AppConfig
    """
    if config_path is None:
        config_path = str(get_default_config_path())

    config = AppConfig.load_from_file(config_path).merged(overrides)
    config.validate()
    return config


def configure_logging(config: AppConfig) -> None:
    """
    Route log records away from the terminal owned by curses.

    With a log file, records go to that file; otherwise they are dropped.
    """
    if config.log_file:
        logging.basicConfig(
            filename=_normalize_path(config.log_file),
            level=logging.DEBUG if config.verbose else logging.INFO,
            format=LOG_FORMAT,
        )
    else:
        logging.getLogger().addHandler(logging.NullHandler())
