"""Input validation. Everything here runs before any pixel work."""

from __future__ import annotations

import math

from avatarforge.engine.context import CANONICAL_EXPONENTS, GenerationParams
from avatarforge.engine.errors import ValidationError
from avatarforge.engine.registry import GeneratorType

MAX_SEED_LENGTH = 32

MIN_ANGLE = 0.0
MAX_ANGLE = 360.0

MIN_SIZE_EXPONENT = CANONICAL_EXPONENTS[0]
MAX_SIZE_EXPONENT = CANONICAL_EXPONENTS[-1]


def utf16_length(text: str) -> int:
    """Length in UTF-16 code units; astral characters count twice."""
    return len(text.encode("utf-16-le", "surrogatepass")) // 2


def validate_seed(seed: str | None) -> None:
    if seed is not None and utf16_length(seed) > MAX_SEED_LENGTH:
        raise ValidationError(f"Seed must not exceed {MAX_SEED_LENGTH} characters")


def validate_angle(angle: float | None) -> None:
    if angle is None:
        return
    if isinstance(angle, bool) or not isinstance(angle, (int, float)):
        raise ValidationError("Angle must be a number")
    if math.isnan(angle) or not MIN_ANGLE <= angle <= MAX_ANGLE:
        raise ValidationError(f"Angle must be between {MIN_ANGLE:g} and {MAX_ANGLE:g} degrees")


def validate_params(params: GenerationParams) -> GeneratorType:
    """Check a request and return its generator type."""
    generator_type = GeneratorType.parse(params.type)
    validate_seed(params.seed)
    validate_angle(params.angle)
    return generator_type


def size_for_exponent(exponent: int) -> int:
    """2**exponent for exponent in 4..9."""
    if isinstance(exponent, bool) or not isinstance(exponent, int):
        raise ValidationError("Size must be an integer exponent")
    if not MIN_SIZE_EXPONENT <= exponent <= MAX_SIZE_EXPONENT:
        raise ValidationError(
            f"Size must be between {MIN_SIZE_EXPONENT} and {MAX_SIZE_EXPONENT} "
            f"(2^n where {MIN_SIZE_EXPONENT} <= n <= {MAX_SIZE_EXPONENT})"
        )
    return 2**exponent
