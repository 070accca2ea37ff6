"""GET /api/color-schemes — scheme table for one generator variant."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, status

from avatarforge.dependencies import get_avatar_service
from avatarforge.engine.errors import ValidationError
from avatarforge.engine.registry import GeneratorType
from avatarforge.models.responses import ColorSchemeInfo, ColorSchemesResponse
from avatarforge.services.avatars import AvatarService

router = APIRouter()


@router.get("/color-schemes", response_model=ColorSchemesResponse)
def color_schemes(
    type: str | None = Query(default=None, description="pixelize, wave or gradient"),
    service: AvatarService = Depends(get_avatar_service),
) -> ColorSchemesResponse:
    try:
        generator_type = GeneratorType.parse(type)
        schemes = service.color_schemes(generator_type.value)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    return ColorSchemesResponse(
        type=generator_type.value,
        schemes=[ColorSchemeInfo.from_scheme(s) for s in schemes],
    )
