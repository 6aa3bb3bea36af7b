"""
Configuration Package for the AstroMind Core

Configuration modules:
- constants: Default numbers for every engine
- models: Pydantic models with range checks
- defaults: Default AppConfig factory
- mission_config: Immutable MissionConfig container
- io: JSON/YAML save and load

Usage:
    from astromind.config import MissionConfig

    config = MissionConfig.create_default(seed=42)
    step = config.app_config.pathfinder.grid_step
"""

from .constants import Constants
from .defaults import create_default_app_config
from .io import ConfigIO
from .mission_config import MissionConfig
from .models import (
    AdvisoryThresholds,
    AppConfig,
    FieldParams,
    PathfinderParams,
    TelemetryParams,
    TimingParams,
)

__all__ = [
    "Constants",
    "AppConfig",
    "PathfinderParams",
    "TelemetryParams",
    "AdvisoryThresholds",
    "FieldParams",
    "TimingParams",
    "create_default_app_config",
    "MissionConfig",
    "ConfigIO",
]
