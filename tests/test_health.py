"""Smoke tests for health, landing page and error wiring."""

from httpx import AsyncClient


async def test_health_returns_ok(client: AsyncClient) -> None:
    response = await client.get("/api/v1/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


async def test_root_returns_html_with_app_name(client: AsyncClient) -> None:
    """GET / returns the landing page naming the service."""
    response = await client.get("/")
    assert response.status_code == 200
    assert "text/html" in response.headers.get("content-type", "")
    assert "opportunity-hub" in response.text


async def test_unknown_route_returns_json_error(client: AsyncClient) -> None:
    response = await client.get("/api/v1/does-not-exist")
    assert response.status_code == 404
    assert response.json()["error"] == "HTTP_ERROR"
