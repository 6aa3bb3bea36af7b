"""
Configuration I/O Module

Provides save/load functionality for MissionConfig objects.
Supports YAML and JSON formats with a versioned schema stamp.

Usage:
    from astromind.config.io import ConfigIO

    config = MissionConfig.create_default(seed=7)
    ConfigIO.save(config, "mission.yaml")

    loaded = ConfigIO.load("mission.yaml")
"""

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Union

import yaml
from pydantic import ValidationError

from astromind.core.error_handling import error_context, with_error_context
from astromind.core.exceptions import ConfigurationError

from .mission_config import MissionConfig
from .models import AppConfig

logger = logging.getLogger(__name__)

CURRENT_CONFIG_VERSION = "1.0.0"

_YAML_SUFFIXES = (".yaml", ".yml")


class ConfigIO:
    """
    Configuration I/O handler for MissionConfig objects.
    """

    @staticmethod
    def _detect_format(file_path: Path, format: str) -> str:
        if format != "auto":
            if format not in ("yaml", "json"):
                raise ConfigurationError(f"Unsupported config format: {format}")
            return format
        if file_path.suffix.lower() in _YAML_SUFFIXES:
            return "yaml"
        if file_path.suffix.lower() == ".json":
            return "json"
        raise ConfigurationError(
            f"Cannot infer config format from extension '{file_path.suffix}'"
        )

    @staticmethod
    def to_dict(config: MissionConfig, include_metadata: bool = True) -> Dict[str, Any]:
        """Convert a MissionConfig to a plain dictionary."""
        data: Dict[str, Any] = {}
        if include_metadata:
            data["version"] = CURRENT_CONFIG_VERSION
            data["saved_at"] = datetime.now(timezone.utc).isoformat()
        data["seed"] = config.seed
        data["app_config"] = config.app_config.model_dump(mode="json")
        return data

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> MissionConfig:
        """
        Build a MissionConfig from a dictionary.

        Raises:
            ConfigurationError: If the data fails validation
        """
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Config root must be a mapping, got {type(data).__name__}"
            )
        version = data.get("version", CURRENT_CONFIG_VERSION)
        if version != CURRENT_CONFIG_VERSION:
            logger.warning(
                "Config version %s differs from current %s; loading anyway",
                version,
                CURRENT_CONFIG_VERSION,
            )
        try:
            app_config = AppConfig.from_dict(data.get("app_config", {}) or {})
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e

        seed = data.get("seed")
        if seed is not None and not isinstance(seed, int):
            raise ConfigurationError(f"Seed must be an integer, got {seed!r}")
        return MissionConfig(app_config=app_config, seed=seed)

    @staticmethod
    @with_error_context("Config save")
    def save(
        config: MissionConfig,
        file_path: Union[str, Path],
        format: str = "auto",
        include_metadata: bool = True,
    ) -> None:
        """
        Save MissionConfig to file.

        Args:
            config: MissionConfig to save
            file_path: Path to output file (.yaml, .yml, or .json)
            format: "yaml", "json", or "auto" to detect from extension
            include_metadata: Include version and timestamp metadata
        """
        file_path = Path(file_path)
        fmt = ConfigIO._detect_format(file_path, format)
        config_dict = ConfigIO.to_dict(config, include_metadata)

        file_path.parent.mkdir(parents=True, exist_ok=True)
        with open(file_path, "w", encoding="utf-8") as f:
            if fmt == "yaml":
                yaml.safe_dump(config_dict, f, default_flow_style=False, sort_keys=False)
            else:
                json.dump(config_dict, f, indent=2, sort_keys=False)

        logger.info(f"Configuration saved to {file_path}")

    @staticmethod
    def load(file_path: Union[str, Path], format: str = "auto") -> MissionConfig:
        """
        Load MissionConfig from file.

        Raises:
            ConfigurationError: If the file is missing, unparsable or invalid
        """
        file_path = Path(file_path)
        if not file_path.exists():
            raise ConfigurationError(f"Config file not found: {file_path}")
        fmt = ConfigIO._detect_format(file_path, format)

        with error_context(f"Reading config file {file_path}"):
            text = file_path.read_text(encoding="utf-8")

        try:
            data = yaml.safe_load(text) if fmt == "yaml" else json.loads(text)
        except (yaml.YAMLError, json.JSONDecodeError) as e:
            raise ConfigurationError(f"Malformed config file {file_path}: {e}") from e

        config = ConfigIO.from_dict(data)
        logger.info(f"Configuration loaded from {file_path}")
        return config
