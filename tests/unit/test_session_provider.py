"""Unit tests for HttpSessionProvider (status mapping, header forwarding, payload validation)."""

import httpx
import pytest

from app.domain.exceptions import SessionProviderException
from app.infrastructure.auth.session_provider import HttpSessionProvider

SESSION_PAYLOAD = {
    "session": {
        "id": "sess-1",
        "userId": "user-1",
        "expiresAt": "2030-01-01T00:00:00.000Z",
        "token": "ignored",
    },
    "user": {
        "id": "user-1",
        "name": "Asha",
        "email": "asha@example.com",
        "role": "admin",
        "emailVerified": True,
        "fieldInterests": ["design"],
    },
}


def _provider(handler) -> HttpSessionProvider:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return HttpSessionProvider(client, base_url="http://auth.test/", session_path="/api/auth/get-session")


async def test_returns_session_and_forwards_credentials() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=SESSION_PAYLOAD)

    session = await _provider(handler).get_session(
        {"Cookie": "sid=1", "x-forwarded-for": "1.2.3.4", "x-unrelated": "drop"}
    )

    assert session is not None
    assert session.user.id == "user-1"
    assert session.user.is_admin
    assert session.session.user_id == "user-1"
    assert str(seen[0].url) == "http://auth.test/api/auth/get-session"
    assert seen[0].headers["cookie"] == "sid=1"
    assert seen[0].headers["x-forwarded-for"] == "1.2.3.4"
    assert "x-unrelated" not in seen[0].headers


@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(200, json=None),
        httpx.Response(200, content=b""),
        httpx.Response(401),
        httpx.Response(403),
    ],
)
async def test_no_session_answers_return_none(response: httpx.Response) -> None:
    assert await _provider(lambda request: response).get_session({}) is None


async def test_unexpected_status_raises_with_status_code() -> None:
    provider = _provider(lambda request: httpx.Response(500, text="boom"))

    with pytest.raises(SessionProviderException) as exc_info:
        await provider.get_session({"cookie": "sid=1"})

    assert exc_info.value.error_code == "SESSION_PROVIDER_ERROR"
    assert exc_info.value.details == {"status_code": 500}


async def test_transport_error_raises() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(SessionProviderException):
        await _provider(handler).get_session({})


@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(200, content=b"<html>not json</html>"),
        httpx.Response(200, json={"user": {"id": "user-1"}}),
    ],
)
async def test_invalid_payload_raises(response: httpx.Response) -> None:
    with pytest.raises(SessionProviderException):
        await _provider(lambda request: response).get_session({})
