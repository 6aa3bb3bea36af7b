"""
Default Configuration Factory

Provides factory functions to create default configuration objects from
the values in constants.py.
"""

from astromind.config.constants import Constants
from astromind.config.models import (
    AdvisoryThresholds,
    AppConfig,
    FieldParams,
    PathfinderParams,
    TelemetryParams,
    TimingParams,
)


def create_default_app_config() -> AppConfig:
    """
    Create default application configuration.

    Returns:
        AppConfig with default parameters
    """
    pathfinder = PathfinderParams(
        grid_step=Constants.GRID_STEP,
        safety_margin=Constants.SAFETY_MARGIN,
    )

    # Telemetry dynamics keep their model defaults; they are the
    # constants themselves.
    telemetry = TelemetryParams()

    advisory = AdvisoryThresholds(
        fuel_critical=Constants.FUEL_CRITICAL,
        fuel_low=Constants.FUEL_LOW,
        health_degraded=Constants.HEALTH_DEGRADED,
        temperature_high=Constants.TEMPERATURE_HIGH,
        temperature_low=Constants.TEMPERATURE_LOW,
        radiation_high=Constants.RADIATION_HIGH,
        history_size=Constants.ANOMALY_HISTORY_SIZE,
        window=Constants.ANOMALY_WINDOW,
    )

    asteroid_field = FieldParams(
        width=Constants.FIELD_WIDTH,
        height=Constants.FIELD_HEIGHT,
        asteroid_count=Constants.FIELD_ASTEROID_COUNT,
        edge_margin=Constants.FIELD_EDGE_MARGIN,
    )

    timing = TimingParams(
        tick_interval=Constants.TICK_INTERVAL,
    )

    return AppConfig(
        pathfinder=pathfinder,
        telemetry=telemetry,
        advisory=advisory,
        asteroid_field=asteroid_field,
        timing=timing,
    )
