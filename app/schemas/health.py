"""Liveness payload."""

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Body of GET /api/v1/health. Only process liveness; the auth service and DB are not probed."""

    status: str = "ok"
