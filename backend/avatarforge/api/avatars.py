"""Stored avatar endpoints — list, fetch one size (optionally filtered), delete."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from avatarforge.dependencies import get_avatar_service
from avatarforge.engine.errors import AvatarNotFound, ValidationError
from avatarforge.models.responses import AvatarListResponse, AvatarSummary, Pagination
from avatarforge.services.avatars import AvatarService
from avatarforge.utils.codec import PNG_CONTENT_TYPE

router = APIRouter()


@router.get("/avatars", response_model=AvatarListResponse)
def list_avatars(
    pick: int = Query(default=10),
    offset: int = Query(default=0),
    service: AvatarService = Depends(get_avatar_service),
) -> AvatarListResponse:
    try:
        page = service.list(pick=pick, offset=offset)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    return AvatarListResponse(
        avatars=[AvatarSummary.from_record(r) for r in page.avatars],
        pagination=Pagination(
            total=page.total,
            offset=page.offset,
            pick=page.pick,
            has_more=page.has_more,
        ),
    )


@router.get("/avatars/{avatar_id}", responses={200: {"content": {PNG_CONTENT_TYPE: {}}}})
def get_avatar(
    avatar_id: str,
    size: int | None = Query(default=None, description="Size exponent 4..9 (16px..512px)"),
    filter: str | None = Query(default=None, description="grayscale, sepia or negative"),
    service: AvatarService = Depends(get_avatar_service),
) -> Response:
    try:
        record, image = service.get_image(avatar_id, size_exponent=size, filter=filter)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    except AvatarNotFound as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e

    return Response(
        content=image,
        media_type=PNG_CONTENT_TYPE,
        headers={
            "X-Avatar-ID": record.id,
            "X-Created-At": record.created_at.isoformat(),
        },
    )


@router.delete("/avatars/{avatar_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_avatar(
    avatar_id: str,
    service: AvatarService = Depends(get_avatar_service),
) -> Response:
    try:
        service.delete(avatar_id)
    except AvatarNotFound as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    return Response(status_code=status.HTTP_204_NO_CONTENT)
