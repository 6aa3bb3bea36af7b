"""
Recommendation Engine

Stateless threshold rules over a single telemetry snapshot. Rules run
in a fixed order and each may fire independently, so one snapshot can
produce several advisories. Output keeps rule order; use
``sort_by_priority`` for priority order.

Every recommendation is stamped with the snapshot's ``last_update``, so
analyzing the same snapshot twice yields equal lists.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Iterable, List, Optional

from astromind.config.models import AdvisoryThresholds
from astromind.core.telemetry import Telemetry

logger = logging.getLogger(__name__)


class RecommendationType(Enum):
    NAVIGATION = "navigation"
    FUEL = "fuel"
    MAINTENANCE = "maintenance"
    MISSION = "mission"


class Priority(Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"

    @property
    def rank(self) -> int:
        return _PRIORITY_RANK[self]


_PRIORITY_RANK = {
    Priority.CRITICAL: 0,
    Priority.HIGH: 1,
    Priority.MEDIUM: 2,
    Priority.LOW: 3,
}


class Action:
    """Action tags attached to recommendations."""

    ABORT_MISSION = "ABORT_MISSION"
    OPTIMIZE_TRAJECTORY = "OPTIMIZE_TRAJECTORY"
    RUN_DIAGNOSTICS = "RUN_DIAGNOSTICS"
    THERMAL_REGULATION = "THERMAL_REGULATION"
    AVOID_RADIATION = "AVOID_RADIATION"


@dataclass(frozen=True)
class Recommendation:
    """One advisory for the operator."""

    type: RecommendationType
    priority: Priority
    message: str
    timestamp: datetime
    action: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "type": self.type.value,
            "priority": self.priority.value,
            "message": self.message,
            "action": self.action,
            "timestamp": self.timestamp.isoformat(),
        }


class RecommendationEngine:
    """Evaluate advisory rules against telemetry snapshots."""

    def __init__(self, thresholds: Optional[AdvisoryThresholds] = None):
        self.thresholds = thresholds or AdvisoryThresholds()

    def analyze(self, telemetry: Telemetry) -> List[Recommendation]:
        """
        Evaluate all rules against ``telemetry``.

        Returns:
            Recommendations in rule order (fuel, health, temperature, radiation)
        """
        t = self.thresholds
        stamp = telemetry.last_update
        recommendations: List[Recommendation] = []

        if telemetry.fuel < t.fuel_critical:
            recommendations.append(
                Recommendation(
                    type=RecommendationType.FUEL,
                    priority=Priority.CRITICAL,
                    message=(
                        f"Critical fuel level: {telemetry.fuel:.1f}%. "
                        "Immediate refueling or mission abort required."
                    ),
                    action=Action.ABORT_MISSION,
                    timestamp=stamp,
                )
            )
        elif telemetry.fuel < t.fuel_low:
            recommendations.append(
                Recommendation(
                    type=RecommendationType.FUEL,
                    priority=Priority.HIGH,
                    message=(
                        f"Low fuel warning: {telemetry.fuel:.1f}%. "
                        "Consider fuel-efficient maneuvers."
                    ),
                    action=Action.OPTIMIZE_TRAJECTORY,
                    timestamp=stamp,
                )
            )

        if telemetry.system_health < t.health_degraded:
            recommendations.append(
                Recommendation(
                    type=RecommendationType.MAINTENANCE,
                    priority=Priority.HIGH,
                    message=(
                        f"System health degraded: {telemetry.system_health:.1f}%. "
                        "Diagnostic check recommended."
                    ),
                    action=Action.RUN_DIAGNOSTICS,
                    timestamp=stamp,
                )
            )

        if telemetry.temperature > t.temperature_high or telemetry.temperature < t.temperature_low:
            recommendations.append(
                Recommendation(
                    type=RecommendationType.MAINTENANCE,
                    priority=Priority.MEDIUM,
                    message=(
                        f"Temperature anomaly detected: {telemetry.temperature:.1f}°C. "
                        "Monitor thermal systems."
                    ),
                    action=Action.THERMAL_REGULATION,
                    timestamp=stamp,
                )
            )

        if telemetry.radiation > t.radiation_high:
            recommendations.append(
                Recommendation(
                    type=RecommendationType.NAVIGATION,
                    priority=Priority.HIGH,
                    message=(
                        f"High radiation detected: {telemetry.radiation:.1f} mSv/h. "
                        "Consider course correction."
                    ),
                    action=Action.AVOID_RADIATION,
                    timestamp=stamp,
                )
            )

        if recommendations:
            logger.debug(
                "%d recommendation(s): %s",
                len(recommendations),
                ", ".join(r.action or r.type.value for r in recommendations),
            )
        return recommendations


def analyze_telemetry(
    telemetry: Telemetry, thresholds: Optional[AdvisoryThresholds] = None
) -> List[Recommendation]:
    """Functional form of ``RecommendationEngine(thresholds).analyze(telemetry)``."""
    return RecommendationEngine(thresholds).analyze(telemetry)


def sort_by_priority(recommendations: Iterable[Recommendation]) -> List[Recommendation]:
    """Stable sort, critical first; equal priorities keep rule order."""
    return sorted(recommendations, key=lambda r: r.priority.rank)
