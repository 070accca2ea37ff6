"""Master API router — mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from avatarforge.api import avatars, color_schemes, generate, health

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(generate.router)
api_router.include_router(avatars.router)
api_router.include_router(color_schemes.router)
