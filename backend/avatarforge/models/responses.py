"""API response models."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from avatarforge.engine.schemes import ColorScheme
from avatarforge.storage.metadata import AvatarRecord


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    generators_registered: int = 0
    avatars: int = 0


class GenerateResponse(BaseModel):
    id: str
    created_at: datetime
    type: str


class AvatarSummary(BaseModel):
    id: str
    created_at: datetime
    type: str
    primary_color: str | None = None
    foreign_color: str | None = None
    color_scheme: str | None = None
    seed: str | None = None
    angle: float | None = None

    @classmethod
    def from_record(cls, record: AvatarRecord) -> AvatarSummary:
        return cls(
            id=record.id,
            created_at=record.created_at,
            type=record.type,
            primary_color=record.primary_color,
            foreign_color=record.foreign_color,
            color_scheme=record.color_scheme,
            seed=record.seed,
            angle=record.angle,
        )


class Pagination(BaseModel):
    total: int
    offset: int
    pick: int
    has_more: bool


class AvatarListResponse(BaseModel):
    avatars: list[AvatarSummary] = Field(default_factory=list)
    pagination: Pagination


class ColorSchemeInfo(BaseModel):
    name: str
    primary_color: str
    foreign_color: str

    @classmethod
    def from_scheme(cls, scheme: ColorScheme) -> ColorSchemeInfo:
        return cls(name=scheme.name, primary_color=scheme.primary_color, foreign_color=scheme.foreign_color)


class ColorSchemesResponse(BaseModel):
    type: str
    schemes: list[ColorSchemeInfo] = Field(default_factory=list)
