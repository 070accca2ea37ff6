"""POST /api/v1/generate and /api/v2/generate — create an avatar at all six sizes."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from avatarforge.dependencies import get_avatar_service
from avatarforge.engine.context import GenerationParams
from avatarforge.engine.errors import ValidationError
from avatarforge.models.requests import GenerateRequest, GradientRequest
from avatarforge.models.responses import GenerateResponse
from avatarforge.services.avatars import AvatarService

logger = logging.getLogger(__name__)

router = APIRouter()


def _generate(service: AvatarService, params: GenerationParams) -> GenerateResponse:
    try:
        avatar = service.generate(params)
    except ValidationError as e:
        logger.info("Rejected generate request: %s", e)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    return GenerateResponse(id=avatar.id, created_at=avatar.created_at, type=avatar.type)


@router.post("/v1/generate", response_model=GenerateResponse, status_code=status.HTTP_201_CREATED)
def generate_v1(
    req: GenerateRequest,
    service: AvatarService = Depends(get_avatar_service),
) -> GenerateResponse:
    return _generate(service, req.to_params())


@router.post("/v2/generate", response_model=GenerateResponse, status_code=status.HTTP_201_CREATED)
def generate_v2(
    req: GradientRequest,
    service: AvatarService = Depends(get_avatar_service),
) -> GenerateResponse:
    """Gradient-only generation; ``angle`` is required."""
    return _generate(service, req.to_params())
