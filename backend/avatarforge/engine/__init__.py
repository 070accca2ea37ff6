"""avatarforge pattern synthesis engine."""

from avatarforge.engine.context import GenerationParams, Palette, RasterSet, CANONICAL_SIZES
from avatarforge.engine.errors import (
    AvatarError,
    AvatarNotFound,
    RenderCancelled,
    UnsupportedGeneratorType,
    ValidationError,
)
from avatarforge.engine.filters import FilterKind, FilterPipeline, apply_filter
from avatarforge.engine.registry import GeneratorType, get_registry, load_synthesizers, select
from avatarforge.engine.renderer import MultiResolutionRenderer

__all__ = [
    "GenerationParams",
    "Palette",
    "RasterSet",
    "CANONICAL_SIZES",
    "AvatarError",
    "AvatarNotFound",
    "RenderCancelled",
    "UnsupportedGeneratorType",
    "ValidationError",
    "FilterKind",
    "FilterPipeline",
    "apply_filter",
    "GeneratorType",
    "get_registry",
    "load_synthesizers",
    "select",
    "MultiResolutionRenderer",
]
