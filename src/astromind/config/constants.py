"""
System Constants for the AstroMind Core

Read-only default values for the telemetry engine, advisory rules,
route planner and asteroid field generator. Pydantic models in
models.py take their defaults from here so there is a single source of
truth for every number.

Constant categories:
- Spacecraft identity and initial telemetry
- Telemetry noise scales, clamp bounds and burn rates
- Advisory thresholds and anomaly window
- Pathfinder lattice and asteroid field geometry
- Timing (tick cadence)
"""


class Constants:
    """
    System-wide constants.

    This class contains read-only constants that don't change during execution.
    """

    # ========================================================================
    # SPACECRAFT IDENTITY / INITIAL TELEMETRY
    # ========================================================================

    SPACECRAFT_ID = "astromind-1"
    SPACECRAFT_NAME = "AstroMind Explorer"

    INITIAL_FUEL = 85.0  # %
    INITIAL_TEMPERATURE = 23.0  # deg C
    INITIAL_RADIATION = 150.0  # mSv/h
    INITIAL_BATTERY = 87.0  # %
    INITIAL_SYSTEM_HEALTH = 94.0  # %

    # ========================================================================
    # TELEMETRY DYNAMICS
    # ========================================================================

    VELOCITY_INTEGRATION_SCALE = 0.1
    POSITION_NOISE = (100.0, 100.0, 50.0)  # km, full width per axis
    VELOCITY_NOISE = (10.0, 10.0, 5.0)  # full width per axis
    VELOCITY_LIMITS = (1000.0, 1000.0, 500.0)  # symmetric cap per axis

    FUEL_VELOCITY_DIVISOR = 10000.0
    FUEL_IDLE_BURN = 0.1  # % per tick

    TEMPERATURE_NOISE = 5.0
    TEMPERATURE_MIN = -60.0
    TEMPERATURE_MAX = 100.0

    RADIATION_NOISE = 50.0
    RADIATION_MIN = 0.0
    RADIATION_MAX = 2000.0

    BATTERY_NOISE = 2.0
    SOLAR_HIGH_EFFICIENCY = 1.2
    SOLAR_LOW_EFFICIENCY = 0.8
    SOLAR_LOW_PROBABILITY = 0.3

    HEALTH_STRESS_FUEL = 20.0
    HEALTH_STRESS_BATTERY = 20.0
    HEALTH_DECAY_STEP = 1.0
    HEALTH_FLOOR = 30.0
    HEALTH_REPAIR_STEP = 0.1

    STATUS_CRITICAL_FUEL = 10.0
    STATUS_CRITICAL_HEALTH = 40.0
    STATUS_MAINTENANCE_FUEL = 30.0
    STATUS_MAINTENANCE_HEALTH = 70.0

    # Mission thrust: (base, spread) per axis
    MISSION_THRUST = ((500.0, 200.0), (300.0, 200.0), (100.0, 100.0))
    MISSION_IDLE_DAMPING = 0.1

    # ========================================================================
    # ADVISORY RULES
    # ========================================================================

    FUEL_CRITICAL = 20.0
    FUEL_LOW = 40.0
    HEALTH_DEGRADED = 60.0
    TEMPERATURE_HIGH = 80.0
    TEMPERATURE_LOW = -50.0
    RADIATION_HIGH = 1000.0

    ANOMALY_HISTORY_SIZE = 100
    ANOMALY_WINDOW = 5
    ANOMALY_FUEL_DROP = 10.0
    ANOMALY_TEMPERATURE_SPREAD = 30.0
    ANOMALY_HEALTH_DROP = 15.0

    # Mission planner
    PLANNER_BASE_CONSUMPTION = 0.1  # % per hour
    PLANNER_VELOCITY_NORMALIZER = 1000.0
    PLANNER_SPEED = 10000.0  # km per hour
    PLANNER_HIGH_RISK_FRACTION = 0.8
    PLANNER_MEDIUM_RISK_FRACTION = 0.6
    LAUNCH_WINDOW_HOURS = 24.0
    OPTIMAL_LAUNCH_OFFSET_HOURS = 2.0

    # ========================================================================
    # ROUTE PLANNING
    # ========================================================================

    GRID_STEP = 20.0  # km
    SAFETY_MARGIN = 30.0  # km

    FIELD_WIDTH = 800.0
    FIELD_HEIGHT = 400.0
    FIELD_ASTEROID_COUNT = 15
    FIELD_EDGE_MARGIN = 50.0
    ASTEROID_MIN_RADIUS = 10.0
    ASTEROID_MAX_RADIUS = 30.0

    # ========================================================================
    # TIMING
    # ========================================================================

    TICK_INTERVAL = 2.0  # seconds between telemetry ticks
