"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. Session cache and tag search bounds are validated at
load time.
"""

from functools import lru_cache

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from app.core.constants import (
    DEFAULT_SESSION_CACHE_MAX_ENTRIES,
    DEFAULT_SESSION_CACHE_TTL_MS,
    DEFAULT_TAG_SEARCH_LIMIT,
    MAX_TAG_SEARCH_LIMIT,
)


class Settings(BaseSettings):
    """Application settings loaded from environment and .env.

    All settings have defaults. DATABASE_URL may be empty; the SQL
    dependencies then raise SqlNotConfiguredException on first use.
    """

    # App
    app_name: str = "opportunity-hub"
    app_version: str = "1.0.0"
    debug: bool = False

    # Database (SQLAlchemy async + Alembic), e.g. postgresql+asyncpg://...
    database_url: str = ""
    database_echo: bool = False
    # Optional pool overrides (None = use defaults in database.py)
    db_pool_size: int | None = None
    db_max_overflow: int | None = None

    # External auth service (session lookup)
    auth_base_url: str = "http://localhost:3000"
    auth_session_path: str = "/api/auth/get-session"
    auth_request_timeout_seconds: float = 10.0

    # Process-local session cache
    session_cache_ttl_ms: int = DEFAULT_SESSION_CACHE_TTL_MS
    session_cache_max_entries: int = DEFAULT_SESSION_CACHE_MAX_ENTRIES

    # Tag suggestions
    tag_search_default_limit: int = DEFAULT_TAG_SEARCH_LIMIT
    tag_search_max_limit: int = MAX_TAG_SEARCH_LIMIT

    # Per-route timing logs ([api-timing] lines)
    api_timing_enabled: bool = False

    # CORS
    allowed_origins: str = "http://localhost:3000"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def validate_cache_and_limits(self) -> "Settings":
        """Validate session cache bounds and tag search limits."""
        if self.session_cache_ttl_ms <= 0:
            raise ValueError(
                f"SESSION_CACHE_TTL_MS must be positive, got: {self.session_cache_ttl_ms}"
            )
        if self.session_cache_max_entries < 1:
            raise ValueError(
                "SESSION_CACHE_MAX_ENTRIES must be at least 1, "
                f"got: {self.session_cache_max_entries}"
            )
        if not 1 <= self.tag_search_default_limit <= self.tag_search_max_limit:
            raise ValueError(
                "TAG_SEARCH_DEFAULT_LIMIT must be between 1 and TAG_SEARCH_MAX_LIMIT "
                f"({self.tag_search_max_limit}), got: {self.tag_search_default_limit}"
            )
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (singleton)."""
    return Settings()
