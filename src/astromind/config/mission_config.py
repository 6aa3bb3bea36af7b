"""
Immutable Mission Configuration Container

Dependency-injection friendly configuration container. Engines receive
one of these (or its AppConfig) explicitly instead of reading mutable
global state.

Usage:
    from astromind.config.mission_config import MissionConfig

    config = MissionConfig.create_default()
    engine = TelemetryEngine(config=config.app_config, seed=config.seed)

    config = MissionConfig.create_with_overrides({
        "pathfinder": {"grid_step": 10.0}
    })
"""

from copy import deepcopy
from dataclasses import dataclass
from typing import Any, Dict, Optional

import numpy as np

from .defaults import create_default_app_config
from .models import AppConfig


@dataclass(frozen=True)
class MissionConfig:
    """
    Immutable configuration container for one console session.

    Attributes:
        app_config: Engine configuration (pathfinder, telemetry, advisory, field, timing)
        seed: Seed for every random generator handed out by this config
            (None draws fresh entropy)
    """

    app_config: AppConfig
    seed: Optional[int] = None

    @classmethod
    def create_default(cls, seed: Optional[int] = None) -> "MissionConfig":
        """Create a default mission configuration."""
        return cls(app_config=create_default_app_config(), seed=seed)

    @classmethod
    def create_with_overrides(
        cls,
        overrides: Dict[str, Dict[str, Any]],
        base_config: Optional["MissionConfig"] = None,
    ) -> "MissionConfig":
        """
        Create configuration with section overrides applied.

        Args:
            overrides: Mapping of section name to field overrides
            base_config: Base configuration (defaults to create_default() if None)

        Returns:
            MissionConfig with overrides applied

        Raises:
            KeyError: If a section name is unknown
            pydantic.ValidationError: If an override fails validation
        """
        if base_config is None:
            base_config = cls.create_default()

        app_config_dict = base_config.app_config.model_dump()
        for section, section_overrides in overrides.items():
            if section not in app_config_dict:
                raise KeyError(f"Unknown configuration section: {section}")
            app_config_dict[section].update(section_overrides)

        return cls(
            app_config=AppConfig.model_validate(app_config_dict),
            seed=base_config.seed,
        )

    def clone(self) -> "MissionConfig":
        """Create a deep copy (AppConfig models are mutable)."""
        return deepcopy(self)

    def make_rng(self) -> np.random.Generator:
        """Create a random generator seeded from this config."""
        return np.random.default_rng(self.seed)
