"""
Advisory engines: recommendation rules, anomaly trends, mission planning.
"""

from .anomaly_detection import AnomalyDetector
from .mission_planner import (
    MissionPlan,
    RiskLevel,
    generate_mission_plan,
    predict_fuel_usage,
)
from .recommendations import (
    Action,
    Priority,
    Recommendation,
    RecommendationEngine,
    RecommendationType,
    analyze_telemetry,
    sort_by_priority,
)

__all__ = [
    "AnomalyDetector",
    "MissionPlan",
    "RiskLevel",
    "generate_mission_plan",
    "predict_fuel_usage",
    "Action",
    "Priority",
    "Recommendation",
    "RecommendationEngine",
    "RecommendationType",
    "analyze_telemetry",
    "sort_by_priority",
]
