"""Configuration loading for the registrar."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml


class ConfigError(Exception):
    """Raised when configuration is invalid or missing."""


_TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass
class RegistrarConfig:
    """Startup settings for an engine and its front ends.

    Attributes:
        seed: Load the demo courses and students at startup.
        seed_file: YAML file to seed from instead of the built-in demo data.
        log_dir: Directory for the rotating log file. None defers to
            REGISTRAR_LOG_DIR, then "logs".
        log_level: Log level name. None defers to REGISTRAR_LOG_LEVEL, then INFO.
    """

    seed: bool = True
    seed_file: Path | None = None
    log_dir: str | None = None
    log_level: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any], root_path: Path | None = None) -> RegistrarConfig:
        """Create config from a dictionary.

        Args:
            data: Configuration mapping, usually parsed from YAML.
            root_path: Directory that relative seed_file paths resolve against.

        Raises:
            ConfigError: If a field has the wrong type.
        """
        seed = data.get("seed", True)
        if not isinstance(seed, bool):
            raise ConfigError(f"'seed' must be a boolean, got {type(seed).__name__}")

        seed_file = data.get("seed_file")
        seed_path = None
        if seed_file is not None:
            seed_path = Path(seed_file)
            if root_path is not None and not seed_path.is_absolute():
                seed_path = root_path / seed_path

        logging_data = data.get("logging", {}) or {}
        if not isinstance(logging_data, dict):
            raise ConfigError("'logging' must be a mapping")

        log_dir = logging_data.get("dir")
        log_level = logging_data.get("level")
        return cls(
            seed=seed,
            seed_file=seed_path,
            log_dir=str(log_dir) if log_dir is not None else None,
            log_level=str(log_level).upper() if log_level is not None else None,
        )

    @classmethod
    def from_env(cls) -> RegistrarConfig:
        """Create config from REGISTRAR_* environment variables."""
        seed_file = os.environ.get("REGISTRAR_SEED_FILE")
        log_level = os.environ.get("REGISTRAR_LOG_LEVEL")
        return cls(
            seed=os.environ.get("REGISTRAR_SEED", "true").strip().lower() in _TRUE_VALUES,
            seed_file=Path(seed_file) if seed_file else None,
            log_dir=os.environ.get("REGISTRAR_LOG_DIR"),
            log_level=log_level.upper() if log_level else None,
        )


def read_yaml_mapping(path: Path | str) -> dict[str, Any]:
    """Read a YAML file that must contain a mapping.

    Raises:
        ConfigError: If the file is missing, unparsable, or not a mapping.
    """
    path = Path(path)

    if not path.exists():
        raise ConfigError(f"File not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"{path} must contain a YAML mapping, got {type(data).__name__}")

    return data


def load_config(config_path: Path | str) -> RegistrarConfig:
    """Load registrar configuration from a YAML file.

    Raises:
        ConfigError: If the file doesn't exist or is invalid.
    """
    config_path = Path(config_path)
    return RegistrarConfig.from_dict(read_yaml_mapping(config_path), config_path.parent)
