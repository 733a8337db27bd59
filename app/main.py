"""ASGI entry point: `uvicorn app.main:app`.

create_app() resolves settings when called, so tests can adjust the
environment (and clear the get_settings cache) before building an app.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse

from app.api.v1 import api_router
from app.core.config import Settings, get_settings
from app.core.exception_handlers import register_exception_handlers
from app.core.lifespan import create_lifespan
from app.pages import render_root_page

API_V1_PREFIX = "/api/v1"


def _cors_origins(settings: Settings) -> list[str]:
    """ALLOWED_ORIGINS is a comma-separated list; blanks are ignored."""
    return [origin.strip() for origin in settings.allowed_origins.split(",") if origin.strip()]


def create_app() -> FastAPI:
    """Build the opportunity-hub API: session-aware auth routes and tag routes."""
    settings = get_settings()
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=create_lifespan,
    )
    register_exception_handlers(app)

    # Session lookups forward the browser's cookie, so credentials must be allowed.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=_cors_origins(settings),
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )
    app.include_router(api_router, prefix=API_V1_PREFIX)

    landing_page = render_root_page(settings.app_name)
    app.add_api_route(
        "/",
        lambda: HTMLResponse(landing_page),
        methods=["GET"],
        response_class=HTMLResponse,
        include_in_schema=False,
    )
    return app


app = create_app()
