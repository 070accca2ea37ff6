"""Health check."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from avatarforge.dependencies import get_avatar_service
from avatarforge.models.responses import HealthResponse
from avatarforge.services.avatars import AvatarService

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
def health(service: AvatarService = Depends(get_avatar_service)) -> HealthResponse:
    return HealthResponse(
        status="ok",
        version="0.1.0",
        generators_registered=service.renderer.registry.count,
        avatars=service.metadata.count(),
    )
