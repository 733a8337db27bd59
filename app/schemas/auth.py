"""Auth API schemas: session shape returned by the external auth service."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.core.constants import ADMIN_ROLE


class _AuthServiceModel(BaseModel):
    """Accepts the auth service's camelCase keys as well as snake_case; ignores extras."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class SessionInfo(_AuthServiceModel):
    """Session row as reported by the auth service."""

    id: str
    user_id: str
    expires_at: datetime
    ip_address: str | None = None
    user_agent: str | None = None


class SessionUser(_AuthServiceModel):
    """User attached to a session."""

    id: str
    name: str = ""
    email: str = ""
    role: str = "user"
    image: str | None = None
    email_verified: bool = False

    @property
    def is_admin(self) -> bool:
        return self.role == ADMIN_ROLE


class AuthSession(_AuthServiceModel):
    """Resolved session: GET /auth/session response and session cache value."""

    session: SessionInfo
    user: SessionUser


class IsAdminResponse(BaseModel):
    """Response for GET /auth/is-admin."""

    is_admin: bool = Field(default=False, description="True when the session user has the admin role")
