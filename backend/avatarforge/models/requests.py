"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from avatarforge.engine.context import GenerationParams
from avatarforge.engine.registry import GeneratorType

# Range checks (seed length, angle bounds) live in engine.validation


class GenerateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    primary_color: str | None = Field(default=None, alias="primaryColor", description="Hex or named color")
    foreign_color: str | None = Field(default=None, alias="foreignColor", description="Hex or named color")
    color_scheme: str | None = Field(default=None, alias="colorScheme", description="Scheme name, overrides colors")
    seed: str | None = Field(default=None, description="Seed for deterministic output (max 32 chars)")
    type: str | None = Field(default=None, description="pixelize, wave or gradient")
    angle: float | None = Field(default=None, description="Gradient angle in degrees, 0..360")

    def to_params(self) -> GenerationParams:
        return GenerationParams(
            primary_color=self.primary_color,
            foreign_color=self.foreign_color,
            color_scheme=self.color_scheme,
            seed=self.seed,
            type=self.type or GeneratorType.PIXELIZE.value,
            angle=self.angle,
        )


class GradientRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    primary_color: str | None = Field(default=None, alias="primaryColor")
    foreign_color: str | None = Field(default=None, alias="foreignColor")
    color_scheme: str | None = Field(default=None, alias="colorScheme")
    angle: float = Field(..., description="Gradient angle in degrees, 0..360")

    def to_params(self) -> GenerationParams:
        return GenerationParams(
            primary_color=self.primary_color,
            foreign_color=self.foreign_color,
            color_scheme=self.color_scheme,
            type=GeneratorType.GRADIENT.value,
            angle=self.angle,
        )
