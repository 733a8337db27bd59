"""Per-route timing logs.

Each route creates one ApiTimer and marks phases (e.g. auth_start, auth_done).
When API_TIMING_ENABLED is set, every mark logs one line:

    [api-timing] {"route": "POST /tags/resolve", "event": "auth_done", "elapsed_ms": 3.21, ...}
"""

from __future__ import annotations

import json
import logging
import time
from typing import Any

from app.core.config import get_settings

logger = logging.getLogger(__name__)


class ApiTimer:
    """Elapsed-time marks relative to timer creation. No-op when disabled."""

    def __init__(self, route: str, enabled: bool) -> None:
        self.route = route
        self.enabled = enabled
        self._started_at = time.perf_counter()

    def _log(self, event: str, meta: dict[str, Any]) -> None:
        if not self.enabled:
            return
        elapsed_ms = (time.perf_counter() - self._started_at) * 1000
        payload = {
            "route": self.route,
            "event": event,
            "elapsed_ms": round(elapsed_ms, 2),
            **meta,
        }
        logger.info("[api-timing] %s", json.dumps(payload, default=str))

    def mark(self, event: str, **meta: Any) -> None:
        self._log(event, meta)

    def end(self, **meta: Any) -> None:
        self._log("end", meta)


def create_api_timer(route: str) -> ApiTimer:
    """Return a timer for route; enabled from settings.api_timing_enabled."""
    return ApiTimer(route, enabled=get_settings().api_timing_enabled)
