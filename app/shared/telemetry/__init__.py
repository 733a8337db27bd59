"""Shared telemetry: logging setup and per-route timing logs."""

from app.shared.telemetry.logging import setup_logging
from app.shared.telemetry.timing import ApiTimer, create_api_timer

__all__ = [
    "ApiTimer",
    "create_api_timer",
    "setup_logging",
]
