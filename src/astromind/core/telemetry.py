"""
Telemetry Data Model

The spacecraft state record mutated by the telemetry engine, and the
discrete status classifier applied after every tick.
"""

import copy
import math
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Tuple

from astromind.config.constants import Constants


class TelemetryStatus(Enum):
    """Operational status of the spacecraft."""

    ACTIVE = "active"
    MAINTENANCE = "maintenance"
    CRITICAL = "critical"


@dataclass
class Vec3:
    """Mutable 3-vector (position in km, velocity in km/h)."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def magnitude(self) -> float:
        return math.sqrt(self.x**2 + self.y**2 + self.z**2)

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def copy(self) -> "Vec3":
        return Vec3(self.x, self.y, self.z)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Telemetry:
    """
    Full state of the spacecraft at one instant.

    Percentages (fuel, battery_level, system_health) are in [0, 100];
    temperature is in deg C and radiation in mSv/h.
    """

    id: str = Constants.SPACECRAFT_ID
    name: str = Constants.SPACECRAFT_NAME
    position: Vec3 = field(default_factory=Vec3)
    velocity: Vec3 = field(default_factory=Vec3)
    fuel: float = Constants.INITIAL_FUEL
    temperature: float = Constants.INITIAL_TEMPERATURE
    radiation: float = Constants.INITIAL_RADIATION
    battery_level: float = Constants.INITIAL_BATTERY
    system_health: float = Constants.INITIAL_SYSTEM_HEALTH
    status: TelemetryStatus = TelemetryStatus.ACTIVE
    last_update: datetime = field(default_factory=utc_now)

    def snapshot(self) -> "Telemetry":
        """Independent deep copy of this record."""
        return copy.deepcopy(self)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "position": self.position.as_tuple(),
            "velocity": self.velocity.as_tuple(),
            "fuel": self.fuel,
            "temperature": self.temperature,
            "radiation": self.radiation,
            "battery_level": self.battery_level,
            "system_health": self.system_health,
            "status": self.status.value,
            "last_update": self.last_update.isoformat(),
        }


def classify_status(
    fuel: float,
    system_health: float,
    critical_fuel: float = Constants.STATUS_CRITICAL_FUEL,
    critical_health: float = Constants.STATUS_CRITICAL_HEALTH,
    maintenance_fuel: float = Constants.STATUS_MAINTENANCE_FUEL,
    maintenance_health: float = Constants.STATUS_MAINTENANCE_HEALTH,
) -> TelemetryStatus:
    """
    Classify spacecraft status from fuel and system health.

    Critical takes precedence over maintenance.
    """
    if fuel < critical_fuel or system_health < critical_health:
        return TelemetryStatus.CRITICAL
    if fuel < maintenance_fuel or system_health < maintenance_health:
        return TelemetryStatus.MAINTENANCE
    return TelemetryStatus.ACTIVE


def clamp(value: float, lower: float, upper: float) -> float:
    return max(lower, min(upper, value))


def make_vec3(values) -> Vec3:
    """Build a Vec3 from any (x, y, z) sequence."""
    x, y, z = values
    return Vec3(float(x), float(y), float(z))
