"""Shared telemetry: logging setup and OpenTelemetry config."""

from app.shared.telemetry.logging import RequestIDLogFilter, setup_logging
from app.shared.telemetry.telemetry import (
    TelemetryConfig,
    get_telemetry,
    set_telemetry,
)

__all__ = [
    "setup_logging",
    "RequestIDLogFilter",
    "TelemetryConfig",
    "get_telemetry",
    "set_telemetry",
]
