"""
Custom Exception Hierarchy for the AstroMind Core

Defines structured exception classes for caller-usage errors across the
planning, telemetry and advisory engines.

Normal outcomes never raise: an unreachable goal yields an empty route
and telemetry values are clamped instead of being allowed to go invalid.
These classes cover the boundary contract only.

Exception categories:
- Configuration errors: Invalid parameters and settings
- Planning errors: Malformed search inputs (points, obstacles, bounds)
- Telemetry errors: Invalid engine state or ticker misuse
- Operation errors: Foreign exceptions wrapped with operation context

See also: error_handling.py for error handling utilities and decorators.
"""

from typing import Any


class AstroMindException(Exception):
    """Base exception for all AstroMind core errors."""

    pass


# ============================================================================
# Configuration Errors
# ============================================================================


class ConfigurationError(AstroMindException):
    """Raised when configuration is invalid or inconsistent."""

    pass


class ParameterValidationError(ConfigurationError):
    """Raised when a parameter fails validation."""

    def __init__(self, parameter_name: str, value: Any, reason: str) -> None:
        message = f"Invalid parameter '{parameter_name}' = {value}: {reason}"
        super().__init__(message)
        self.parameter_name = parameter_name
        self.value = value
        self.reason = reason


# ============================================================================
# Planning Errors
# ============================================================================


class PlanningException(AstroMindException):
    """Base exception for route planning errors."""

    pass


class InvalidObstacleError(PlanningException, ParameterValidationError):
    """Raised when an obstacle definition is malformed."""

    def __init__(self, obstacle_id: str, parameter_name: str, value: Any, reason: str):
        ParameterValidationError.__init__(
            self, f"{obstacle_id}.{parameter_name}", value, reason
        )
        self.obstacle_id = obstacle_id


# ============================================================================
# Telemetry Errors
# ============================================================================


class TelemetryException(AstroMindException):
    """Base exception for telemetry engine errors."""

    pass


class TickerError(TelemetryException):
    """Raised when the periodic ticker is misconfigured."""

    def __init__(self, reason: str):
        super().__init__(f"Telemetry ticker error: {reason}")
        self.reason = reason


# ============================================================================
# Operation / Context Errors
# ============================================================================


class OperationError(AstroMindException):
    """
    Raised when an operation fails and we want to propagate contextual info.

    The error handling utilities wrap arbitrary exceptions in this class
    with the operation name, so callers can tell contextual failures
    apart from other exceptions.
    """

    def __init__(self, operation: str, original_exc: Exception) -> None:
        message = f"{operation} failed: {original_exc}"
        super().__init__(message)
        self.operation = operation
        self.original_exc = original_exc


# ============================================================================
# Utility Functions
# ============================================================================


def format_exception_message(exc: Exception) -> str:
    """
    Format exception message with its type name.

    Args:
        exc: Exception to format

    Returns:
        Formatted error message string
    """
    exc_type = type(exc).__name__
    exc_message = str(exc)
    return f"[{exc_type}] {exc_message}"
