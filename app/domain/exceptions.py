"""Domain errors. app.core.exception_handlers turns them into JSON responses
keyed by error_code.
"""

from typing import Any


class OpportunityHubException(Exception):
    """Base for errors raised by the session and tag layers.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, resource_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON error body used by the exception handlers."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class AuthenticationException(OpportunityHubException):
    """Raised when the request carries no valid session."""

    def __init__(self, message: str = "Authentication failed") -> None:
        super().__init__(message, "AUTHENTICATION_ERROR")


class SqlNotConfiguredException(OpportunityHubException):
    """Raised when an operation requires the SQL database but DATABASE_URL is not set."""

    def __init__(self) -> None:
        super().__init__(
            message="This operation requires a SQL database that is not configured.",
            error_code="SERVICE_UNAVAILABLE",
        )


class SessionProviderException(OpportunityHubException):
    """Raised when the external auth service cannot answer a session lookup.

    Covers transport failures, unexpected status codes and payloads that do
    not match the session shape. A 401/403 answer is not an error; it means
    "no session".
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        """Initialize with message and optional upstream status.

        Args:
            message: Description of the failure.
            status_code: HTTP status returned by the auth service, if any.
        """
        details = {"status_code": status_code} if status_code is not None else {}
        super().__init__(message, "SESSION_PROVIDER_ERROR", details)


class TagResolutionException(OpportunityHubException):
    """Raised when tag names cannot be mapped to identifiers after insert and re-fetch."""

    def __init__(self, unresolved: list[str]) -> None:
        super().__init__(
            f"Could not resolve tags: {', '.join(unresolved)}",
            "TAG_RESOLUTION_ERROR",
            {"unresolved": unresolved},
        )
