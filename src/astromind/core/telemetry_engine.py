"""
Telemetry State Engine

Owns the single live telemetry record of one spacecraft and advances it
one stochastic tick at a time. There is no global instance: callers
create an engine, tick it, and discard it.

Per tick, in order:
    1. position integrates scaled velocity plus bounded noise
    2. velocity gets bounded noise, then is clamped per axis
    3. fuel burns with speed plus an idle rate, floored at 0
    4. temperature noise, clamped
    5. radiation noise, clamped
    6. battery noise scaled by a random solar efficiency regime, clamped
    7. system health decays under fuel/battery stress, otherwise repairs
    8. status is classified from the post-update values

Randomness comes from an injected numpy Generator, so a seeded engine
replays exactly.
"""

import logging
import threading
from datetime import datetime
from typing import Callable, Optional

import numpy as np

from astromind.config.models import AppConfig, TelemetryParams

from .telemetry import Telemetry, TelemetryStatus, clamp, classify_status, utc_now

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


class TelemetryEngine:
    """
    Stochastic telemetry simulator for one spacecraft.

    All mutation happens under one lock, so ``tick`` and
    ``set_mission_active`` may be called from different threads without
    interleaving.
    """

    def __init__(
        self,
        config: Optional[AppConfig] = None,
        rng: Optional[np.random.Generator] = None,
        seed: Optional[int] = None,
        initial: Optional[Telemetry] = None,
        clock: Optional[Clock] = None,
    ):
        """
        Args:
            config: Application config; only its ``telemetry`` section is used
            rng: Random generator; takes precedence over ``seed``
            seed: Seed for a fresh generator when ``rng`` is None
            initial: Starting record (copied); defaults to the nominal spacecraft
            clock: Source of ``last_update`` timestamps
        """
        self.params: TelemetryParams = (config or AppConfig()).telemetry
        self._rng = rng if rng is not None else np.random.default_rng(seed)
        self._clock = clock or utc_now
        self._lock = threading.Lock()
        self._state = initial.snapshot() if initial is not None else Telemetry(last_update=self._clock())
        self._mission_active = False
        self.tick_count = 0

    @property
    def telemetry(self) -> Telemetry:
        """Snapshot of the current record."""
        return self.snapshot()

    @property
    def mission_active(self) -> bool:
        return self._mission_active

    def snapshot(self) -> Telemetry:
        with self._lock:
            return self._state.snapshot()

    def _noise(self, width: float) -> float:
        return (self._rng.random() - 0.5) * width

    def tick(self) -> Telemetry:
        """
        Advance the record by one tick.

        Returns:
            Snapshot of the record after the update
        """
        with self._lock:
            previous_status = self._state.status
            self._advance()
            self.tick_count += 1
            state = self._state

            if state.status != previous_status:
                log = logger.warning if state.status == TelemetryStatus.CRITICAL else logger.info
                log(
                    "Status %s -> %s (fuel=%.1f%%, health=%.1f%%)",
                    previous_status.value,
                    state.status.value,
                    state.fuel,
                    state.system_health,
                )
            logger.debug(
                "Tick %d: fuel=%.2f temp=%.1f rad=%.1f battery=%.1f health=%.1f",
                self.tick_count,
                state.fuel,
                state.temperature,
                state.radiation,
                state.battery_level,
                state.system_health,
            )
            return state.snapshot()

    def _advance(self) -> None:
        p = self.params
        s = self._state
        pos, vel = s.position, s.velocity

        # 1. Position
        pos.x += vel.x * p.velocity_integration_scale + self._noise(p.position_noise[0])
        pos.y += vel.y * p.velocity_integration_scale + self._noise(p.position_noise[1])
        pos.z += vel.z * p.velocity_integration_scale + self._noise(p.position_noise[2])

        # 2. Velocity
        vel.x += self._noise(p.velocity_noise[0])
        vel.y += self._noise(p.velocity_noise[1])
        vel.z += self._noise(p.velocity_noise[2])
        lim_x, lim_y, lim_z = p.velocity_limits
        vel.x = clamp(vel.x, -lim_x, lim_x)
        vel.y = clamp(vel.y, -lim_y, lim_y)
        vel.z = clamp(vel.z, -lim_z, lim_z)

        # 3. Fuel never regenerates
        fuel = s.fuel - vel.magnitude() / p.fuel_velocity_divisor - p.fuel_idle_burn
        s.fuel = clamp(fuel, 0.0, 100.0)

        # 4. Temperature
        s.temperature = clamp(
            s.temperature + self._noise(p.temperature_noise), p.temperature_min, p.temperature_max
        )

        # 5. Radiation
        s.radiation = clamp(
            s.radiation + self._noise(p.radiation_noise), p.radiation_min, p.radiation_max
        )

        # 6. Battery
        solar_efficiency = (
            p.solar_high_efficiency
            if self._rng.random() > p.solar_low_probability
            else p.solar_low_efficiency
        )
        s.battery_level = clamp(
            s.battery_level + self._noise(p.battery_noise) * solar_efficiency, 0.0, 100.0
        )

        # 7. System health
        if s.fuel < p.health_stress_fuel or s.battery_level < p.health_stress_battery:
            s.system_health = max(p.health_floor, s.system_health - p.health_decay_step)
        else:
            s.system_health = min(100.0, s.system_health + p.health_repair_step)
        s.system_health = clamp(s.system_health, 0.0, 100.0)

        # 8. Status
        s.status = classify_status(
            s.fuel,
            s.system_health,
            critical_fuel=p.status_critical_fuel,
            critical_health=p.status_critical_health,
            maintenance_fuel=p.status_maintenance_fuel,
            maintenance_health=p.status_maintenance_health,
        )
        s.last_update = self._clock()

    def set_mission_active(self, active: bool) -> None:
        """
        Toggle the mission.

        Activating applies thrust: each velocity axis is set to
        ``base + U(0, 1) * spread``. Deactivating damps velocity toward
        zero instead of zeroing it.
        """
        with self._lock:
            vel = self._state.velocity
            if active:
                (bx, sx), (by, sy), (bz, sz) = self.params.mission_thrust
                vel.x = bx + self._rng.random() * sx
                vel.y = by + self._rng.random() * sy
                vel.z = bz + self._rng.random() * sz
                lim_x, lim_y, lim_z = self.params.velocity_limits
                vel.x = clamp(vel.x, -lim_x, lim_x)
                vel.y = clamp(vel.y, -lim_y, lim_y)
                vel.z = clamp(vel.z, -lim_z, lim_z)
            else:
                damping = self.params.mission_idle_damping
                vel.x *= damping
                vel.y *= damping
                vel.z *= damping
            self._mission_active = bool(active)
            logger.info(
                "Mission %s; velocity now (%.1f, %.1f, %.1f)",
                "activated" if active else "deactivated",
                vel.x,
                vel.y,
                vel.z,
            )

    def reset(self, initial: Optional[Telemetry] = None) -> None:
        """Replace the live record (nominal spacecraft if ``initial`` is None)."""
        with self._lock:
            self._state = (
                initial.snapshot() if initial is not None else Telemetry(last_update=self._clock())
            )
            self._mission_active = False
            self.tick_count = 0
