"""
Mission Planning Heuristics

Fuel prediction and a simple point-to-point mission plan with a launch
window and risk grade. Fuel use is a base burn plus a speed term,
inflated as system health drops.
"""

import logging
import math
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Optional, Sequence, Tuple

from astromind.config.constants import Constants
from astromind.core.telemetry import Telemetry, Vec3, make_vec3

logger = logging.getLogger(__name__)

MISSION_OBJECTIVES = (
    "Navigate to target coordinates",
    "Maintain system integrity",
    "Optimize fuel consumption",
)


class RiskLevel(Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


@dataclass(frozen=True)
class LaunchWindow:
    start: datetime
    end: datetime
    optimal: datetime


@dataclass(frozen=True)
class PlanWaypoint:
    """Trajectory point with its cost bookkeeping."""

    x: float
    y: float
    g: float = 0.0
    h: float = 0.0
    f: float = 0.0


@dataclass(frozen=True)
class MissionPlan:
    id: str
    name: str
    launch_window: LaunchWindow
    trajectory: Tuple[PlanWaypoint, ...]
    fuel_requirement: float
    duration: float  # hours
    risk_level: RiskLevel
    objectives: Tuple[str, ...] = field(default=MISSION_OBJECTIVES)


def predict_fuel_usage(telemetry: Telemetry, mission_duration: float) -> float:
    """
    Predict fuel (percent) burned over ``mission_duration`` hours.

    (base + |v| / 1000) * duration * (2 - health / 100)
    """
    velocity_factor = telemetry.velocity.magnitude() / Constants.PLANNER_VELOCITY_NORMALIZER
    efficiency_factor = telemetry.system_health / 100.0
    return (
        (Constants.PLANNER_BASE_CONSUMPTION + velocity_factor)
        * mission_duration
        * (2.0 - efficiency_factor)
    )


def grade_risk(fuel_requirement: float, available_fuel: float) -> RiskLevel:
    if fuel_requirement > available_fuel * Constants.PLANNER_HIGH_RISK_FRACTION:
        return RiskLevel.HIGH
    if fuel_requirement > available_fuel * Constants.PLANNER_MEDIUM_RISK_FRACTION:
        return RiskLevel.MEDIUM
    return RiskLevel.LOW


def generate_mission_plan(
    start: Sequence[float],
    target: Sequence[float],
    telemetry: Telemetry,
    now: Optional[datetime] = None,
) -> MissionPlan:
    """
    Build a direct mission plan from ``start`` to ``target`` (x, y, z in km).

    Args:
        start: Start position (Vec3 or 3-sequence)
        target: Target position (Vec3 or 3-sequence)
        telemetry: Current spacecraft telemetry
        now: Planning time (defaults to current UTC time)
    """
    now = now or datetime.now(timezone.utc)
    a = start if isinstance(start, Vec3) else make_vec3(start)
    b = target if isinstance(target, Vec3) else make_vec3(target)

    dist = math.sqrt((b.x - a.x) ** 2 + (b.y - a.y) ** 2 + (b.z - a.z) ** 2)
    duration = dist / Constants.PLANNER_SPEED
    fuel_requirement = predict_fuel_usage(telemetry, duration)
    risk = grade_risk(fuel_requirement, telemetry.fuel)

    window = LaunchWindow(
        start=now,
        end=now + timedelta(hours=Constants.LAUNCH_WINDOW_HOURS),
        optimal=now + timedelta(hours=Constants.OPTIMAL_LAUNCH_OFFSET_HOURS),
    )
    plan = MissionPlan(
        id=f"mission-{int(now.timestamp() * 1000)}",
        name=f"Navigation to Target {b.x:.0f}, {b.y:.0f}",
        launch_window=window,
        trajectory=(
            PlanWaypoint(a.x, a.y),
            PlanWaypoint(b.x, b.y, g=dist, f=dist),
        ),
        fuel_requirement=fuel_requirement,
        duration=duration,
        risk_level=risk,
    )
    logger.info(
        "Planned %s: %.0f km, %.2f h, fuel %.2f%%, risk %s",
        plan.id,
        dist,
        duration,
        fuel_requirement,
        risk.value,
    )
    return plan
