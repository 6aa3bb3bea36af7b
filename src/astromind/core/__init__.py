"""
Core telemetry engine and shared error handling.

Engine classes are imported from their modules
(``astromind.core.telemetry_engine``, ``astromind.core.telemetry_ticker``);
this package exposes the exception hierarchy and handling helpers.
"""

from .error_handling import error_context, with_error_context
from .exceptions import (
    AstroMindException,
    ConfigurationError,
    InvalidObstacleError,
    OperationError,
    ParameterValidationError,
    PlanningException,
    TelemetryException,
    TickerError,
    format_exception_message,
)

__all__ = [
    "AstroMindException",
    "ConfigurationError",
    "ParameterValidationError",
    "PlanningException",
    "InvalidObstacleError",
    "TelemetryException",
    "TickerError",
    "OperationError",
    "format_exception_message",
    "with_error_context",
    "error_context",
]
