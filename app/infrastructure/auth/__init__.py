"""External auth service integration (session lookup)."""

from app.infrastructure.auth.session_provider import HttpSessionProvider, SessionProvider

__all__ = ["HttpSessionProvider", "SessionProvider"]
