"""
Telemetry Anomaly Detection

Short-horizon trend checks over recent telemetry. The detector keeps a
bounded FIFO history (100 snapshots by default) and, once it holds more
than one window's worth, inspects the newest window (5 snapshots):

- rapid fuel depletion: oldest fuel - newest fuel exceeds the limit
- temperature instability: max - min temperature exceeds the spread
- system health degradation: oldest health - newest health exceeds the limit
"""

import logging
from collections import deque
from typing import Deque, List, Optional, Tuple

from pydantic import ValidationError

from astromind.config.models import AdvisoryThresholds
from astromind.core.exceptions import ParameterValidationError
from astromind.core.telemetry import Telemetry

logger = logging.getLogger(__name__)

RAPID_FUEL_DEPLETION = "Rapid fuel depletion detected"
TEMPERATURE_INSTABILITY = "Temperature instability detected"
HEALTH_DEGRADATION = "System health degradation detected"


class AnomalyDetector:
    """Stateful trend analysis over a bounded telemetry history."""

    def __init__(
        self,
        thresholds: Optional[AdvisoryThresholds] = None,
        history_size: Optional[int] = None,
        window: Optional[int] = None,
    ):
        thresholds = thresholds or AdvisoryThresholds()
        overrides = {}
        if history_size is not None:
            overrides["history_size"] = history_size
        if window is not None:
            overrides["window"] = window
        if overrides:
            try:
                thresholds = AdvisoryThresholds.model_validate(
                    {**thresholds.model_dump(), **overrides}
                )
            except ValidationError as e:
                raise ParameterValidationError(
                    ", ".join(overrides), overrides, f"invalid anomaly window: {e}"
                ) from e
        self.thresholds = thresholds
        self._history: Deque[Telemetry] = deque(maxlen=self.thresholds.history_size)

    @property
    def history(self) -> Tuple[Telemetry, ...]:
        """Stored snapshots, oldest first."""
        return tuple(self._history)

    @property
    def window(self) -> int:
        return self.thresholds.window

    def reset(self) -> None:
        self._history.clear()

    def observe(self, telemetry: Telemetry) -> List[str]:
        """
        Record a snapshot and report anomalies over the recent window.

        Trends are only evaluated once the history holds more than
        ``window`` snapshots.

        Returns:
            Anomaly descriptions (possibly empty)
        """
        self._history.append(telemetry.snapshot())
        if len(self._history) <= self.window:
            return []

        t = self.thresholds
        recent = list(self._history)[-self.window:]
        oldest, newest = recent[0], recent[-1]
        anomalies: List[str] = []

        if oldest.fuel - newest.fuel > t.fuel_drop:
            anomalies.append(RAPID_FUEL_DEPLETION)

        temperatures = [s.temperature for s in recent]
        if max(temperatures) - min(temperatures) > t.temperature_spread:
            anomalies.append(TEMPERATURE_INSTABILITY)

        if oldest.system_health - newest.system_health > t.health_drop:
            anomalies.append(HEALTH_DEGRADATION)

        if anomalies:
            logger.warning("Anomalies detected: %s", "; ".join(anomalies))
        return anomalies
