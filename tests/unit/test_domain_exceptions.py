"""Tests for domain exceptions (error_code, message, details, to_dict)."""

from app.domain.exceptions import (
    AuthenticationException,
    OpportunityHubException,
    SessionProviderException,
    SqlNotConfiguredException,
    TagResolutionException,
)


def test_base_exception_defaults_error_code_to_class_name() -> None:
    exc = OpportunityHubException("Something failed")
    assert exc.message == "Something failed"
    assert exc.error_code == "OpportunityHubException"
    assert exc.details == {}
    assert str(exc) == "Something failed"


def test_to_dict_shape() -> None:
    exc = OpportunityHubException("Oops", error_code="CUSTOM", details={"key": "value"})
    assert exc.to_dict() == {"error": "CUSTOM", "message": "Oops", "details": {"key": "value"}}


def test_authentication_exception() -> None:
    exc = AuthenticationException("Unauthorized")
    assert exc.error_code == "AUTHENTICATION_ERROR"
    assert exc.message == "Unauthorized"
    assert AuthenticationException().message == "Authentication failed"


def test_sql_not_configured_exception() -> None:
    assert SqlNotConfiguredException().error_code == "SERVICE_UNAVAILABLE"


def test_session_provider_exception_status_in_details() -> None:
    """Upstream status is only reported when the auth service answered."""
    assert SessionProviderException("bad", status_code=500).details == {"status_code": 500}
    assert SessionProviderException("unreachable").details == {}
    assert SessionProviderException("bad").error_code == "SESSION_PROVIDER_ERROR"


def test_tag_resolution_exception_lists_unresolved() -> None:
    exc = TagResolutionException(["ghost", "phantom"])
    assert exc.error_code == "TAG_RESOLUTION_ERROR"
    assert exc.details == {"unresolved": ["ghost", "phantom"]}
    assert "ghost, phantom" in exc.message
