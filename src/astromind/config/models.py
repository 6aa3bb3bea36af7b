"""
Pydantic Configuration Models for the AstroMind Core

Type-safe configuration models with validation, range checks,
and descriptive error messages.
"""

from typing import Any, Dict, Tuple

from pydantic import BaseModel, Field, field_validator, model_validator

from .constants import Constants

Axis3 = Tuple[float, float, float]


class PathfinderParams(BaseModel):
    """A* lattice parameters."""

    grid_step: float = Field(
        Constants.GRID_STEP,
        gt=0,
        description="Lattice spacing in km (must be positive)",
    )
    safety_margin: float = Field(
        Constants.SAFETY_MARGIN,
        ge=0,
        description="Clearance added to every obstacle radius in km",
    )


class TelemetryParams(BaseModel):
    """
    Telemetry engine constants.

    Noise values are full widths: each tick adds U(-0.5, 0.5) * noise.
    """

    velocity_integration_scale: float = Field(
        Constants.VELOCITY_INTEGRATION_SCALE,
        ge=0,
        description="Fraction of velocity added to position per tick",
    )
    position_noise: Axis3 = Field(Constants.POSITION_NOISE)
    velocity_noise: Axis3 = Field(Constants.VELOCITY_NOISE)
    velocity_limits: Axis3 = Field(
        Constants.VELOCITY_LIMITS,
        description="Symmetric velocity cap per axis (x, y, z)",
    )

    fuel_velocity_divisor: float = Field(Constants.FUEL_VELOCITY_DIVISOR, gt=0)
    fuel_idle_burn: float = Field(Constants.FUEL_IDLE_BURN, ge=0)

    temperature_noise: float = Field(Constants.TEMPERATURE_NOISE, ge=0)
    temperature_min: float = Field(Constants.TEMPERATURE_MIN)
    temperature_max: float = Field(Constants.TEMPERATURE_MAX)

    radiation_noise: float = Field(Constants.RADIATION_NOISE, ge=0)
    radiation_min: float = Field(Constants.RADIATION_MIN, ge=0)
    radiation_max: float = Field(Constants.RADIATION_MAX, gt=0)

    battery_noise: float = Field(Constants.BATTERY_NOISE, ge=0)
    solar_high_efficiency: float = Field(Constants.SOLAR_HIGH_EFFICIENCY, gt=0)
    solar_low_efficiency: float = Field(Constants.SOLAR_LOW_EFFICIENCY, gt=0)
    solar_low_probability: float = Field(
        Constants.SOLAR_LOW_PROBABILITY,
        ge=0,
        le=1,
        description="Probability of the low solar efficiency regime per tick",
    )

    health_stress_fuel: float = Field(Constants.HEALTH_STRESS_FUEL, ge=0, le=100)
    health_stress_battery: float = Field(Constants.HEALTH_STRESS_BATTERY, ge=0, le=100)
    health_decay_step: float = Field(Constants.HEALTH_DECAY_STEP, ge=0)
    health_floor: float = Field(Constants.HEALTH_FLOOR, ge=0, le=100)
    health_repair_step: float = Field(Constants.HEALTH_REPAIR_STEP, ge=0)

    status_critical_fuel: float = Field(Constants.STATUS_CRITICAL_FUEL, ge=0, le=100)
    status_critical_health: float = Field(Constants.STATUS_CRITICAL_HEALTH, ge=0, le=100)
    status_maintenance_fuel: float = Field(Constants.STATUS_MAINTENANCE_FUEL, ge=0, le=100)
    status_maintenance_health: float = Field(
        Constants.STATUS_MAINTENANCE_HEALTH, ge=0, le=100
    )

    mission_thrust: Tuple[Tuple[float, float], Tuple[float, float], Tuple[float, float]] = Field(
        Constants.MISSION_THRUST,
        description="(base, spread) of the mission thrust velocity per axis",
    )
    mission_idle_damping: float = Field(
        Constants.MISSION_IDLE_DAMPING,
        ge=0,
        le=1,
        description="Velocity multiplier applied when the mission is deactivated",
    )

    @field_validator("velocity_limits", "position_noise", "velocity_noise")
    @classmethod
    def validate_non_negative_axes(cls, v: Axis3) -> Axis3:
        """Per-axis widths and caps cannot be negative."""
        if any(component < 0 for component in v):
            raise ValueError(f"Per-axis values must be non-negative, got {v}")
        return v

    @model_validator(mode="after")
    def validate_bounds(self) -> "TelemetryParams":
        """Clamp ranges must be ordered and status thresholds nested."""
        if self.temperature_min >= self.temperature_max:
            raise ValueError(
                f"temperature_min ({self.temperature_min}) must be < "
                f"temperature_max ({self.temperature_max})"
            )
        if self.radiation_min >= self.radiation_max:
            raise ValueError(
                f"radiation_min ({self.radiation_min}) must be < "
                f"radiation_max ({self.radiation_max})"
            )
        if self.status_critical_fuel > self.status_maintenance_fuel:
            raise ValueError("status_critical_fuel must not exceed status_maintenance_fuel")
        if self.status_critical_health > self.status_maintenance_health:
            raise ValueError(
                "status_critical_health must not exceed status_maintenance_health"
            )
        return self


class AdvisoryThresholds(BaseModel):
    """Thresholds for recommendation rules and anomaly trends."""

    fuel_critical: float = Field(Constants.FUEL_CRITICAL, ge=0, le=100)
    fuel_low: float = Field(Constants.FUEL_LOW, ge=0, le=100)
    health_degraded: float = Field(Constants.HEALTH_DEGRADED, ge=0, le=100)
    temperature_high: float = Field(Constants.TEMPERATURE_HIGH)
    temperature_low: float = Field(Constants.TEMPERATURE_LOW)
    radiation_high: float = Field(Constants.RADIATION_HIGH, ge=0)

    history_size: int = Field(
        Constants.ANOMALY_HISTORY_SIZE,
        ge=2,
        description="Number of snapshots kept for trend analysis",
    )
    window: int = Field(
        Constants.ANOMALY_WINDOW,
        ge=2,
        description="Number of recent snapshots inspected per observation",
    )
    fuel_drop: float = Field(Constants.ANOMALY_FUEL_DROP, ge=0)
    temperature_spread: float = Field(Constants.ANOMALY_TEMPERATURE_SPREAD, ge=0)
    health_drop: float = Field(Constants.ANOMALY_HEALTH_DROP, ge=0)

    @model_validator(mode="after")
    def validate_ordering(self) -> "AdvisoryThresholds":
        """Critical fuel below low fuel; window fits inside the history."""
        if self.fuel_critical > self.fuel_low:
            raise ValueError(
                f"fuel_critical ({self.fuel_critical}) must be <= fuel_low ({self.fuel_low})"
            )
        if self.temperature_low >= self.temperature_high:
            raise ValueError("temperature_low must be < temperature_high")
        if self.window >= self.history_size:
            raise ValueError(
                f"Anomaly window ({self.window}) must be smaller than "
                f"history size ({self.history_size})"
            )
        return self


class FieldParams(BaseModel):
    """Asteroid field generation parameters."""

    width: float = Field(Constants.FIELD_WIDTH, gt=0)
    height: float = Field(Constants.FIELD_HEIGHT, gt=0)
    asteroid_count: int = Field(Constants.FIELD_ASTEROID_COUNT, ge=0, le=500)
    edge_margin: float = Field(Constants.FIELD_EDGE_MARGIN, ge=0)
    min_radius: float = Field(Constants.ASTEROID_MIN_RADIUS, gt=0)
    max_radius: float = Field(Constants.ASTEROID_MAX_RADIUS, gt=0)

    @model_validator(mode="after")
    def validate_geometry(self) -> "FieldParams":
        """Edge margins must leave room and radius range must be ordered."""
        if self.min_radius > self.max_radius:
            raise ValueError("min_radius must be <= max_radius")
        if 2 * self.edge_margin >= min(self.width, self.height):
            raise ValueError(
                f"edge_margin ({self.edge_margin}) leaves no room in a "
                f"{self.width}x{self.height} field"
            )
        return self


class TimingParams(BaseModel):
    """Cadence of the external tick trigger."""

    tick_interval: float = Field(
        Constants.TICK_INTERVAL,
        gt=0,
        le=3600,
        description="Seconds between telemetry ticks",
    )


class AppConfig(BaseModel):
    """
    Root configuration container.

    Combines all configuration subsections.
    """

    pathfinder: PathfinderParams = Field(default_factory=PathfinderParams)
    telemetry: TelemetryParams = Field(default_factory=TelemetryParams)
    advisory: AdvisoryThresholds = Field(default_factory=AdvisoryThresholds)
    asteroid_field: FieldParams = Field(default_factory=FieldParams)
    timing: TimingParams = Field(default_factory=TimingParams)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary format."""
        return self.model_dump()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AppConfig":
        """Create configuration from dictionary."""
        return cls.model_validate(data)
