"""Mounts the v1 endpoint routers (health, auth, tags) under one APIRouter."""

from fastapi import APIRouter

from app.api.v1.endpoints import auth, health, tags

api_router = APIRouter()

for _prefix, _module in (("/health", health), ("/auth", auth), ("/tags", tags)):
    api_router.include_router(_module.router, prefix=_prefix, tags=[_prefix.strip("/")])
