"""Value objects flowing through the engine.

GenerationParams → (validation, selection) → Palette + SeededSequence →
per-size synthesis → RasterSet.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import NamedTuple

import numpy as np
from numpy.typing import NDArray

from avatarforge.engine.colors import (
    DEFAULT_FOREIGN,
    DEFAULT_PRIMARY,
    RGB,
    resolve_color,
)
from avatarforge.engine.errors import ValidationError
from avatarforge.engine.schemes import ColorScheme, find_scheme

# 2**4 .. 2**9
CANONICAL_EXPONENTS = (4, 5, 6, 7, 8, 9)
CANONICAL_SIZES = tuple(2**n for n in CANONICAL_EXPONENTS)


@dataclass(frozen=True)
class GenerationParams:
    """One generation request, consumed synchronously by the renderer."""

    primary_color: str | None = None
    foreign_color: str | None = None
    # Named scheme; overrides both colors when known to the selected variant
    color_scheme: str | None = None
    # ≤32 chars; None means non-deterministic
    seed: str | None = None
    # pixelize | wave | gradient (case-insensitive)
    type: str = "pixelize"
    # Degrees 0..360, gradient only
    angle: float | None = None


class Palette(NamedTuple):
    primary: RGB
    foreign: RGB


def resolve_palette(params: GenerationParams, schemes: tuple[ColorScheme, ...]) -> Palette:
    """Apply scheme override, then defaults, then color resolution."""
    primary = params.primary_color
    foreign = params.foreign_color

    scheme = find_scheme(schemes, params.color_scheme)
    if scheme is not None:
        primary = scheme.primary_color
        foreign = scheme.foreign_color

    return Palette(
        primary=resolve_color(primary or DEFAULT_PRIMARY),
        foreign=resolve_color(foreign or DEFAULT_FOREIGN),
    )


@dataclass(frozen=True)
class RasterSet:
    """Six RGBA buffers keyed by edge size. Read-only once built."""

    images: Mapping[int, NDArray[np.uint8]]

    def __post_init__(self) -> None:
        if set(self.images) != set(CANONICAL_SIZES):
            raise ValueError(
                f"RasterSet needs sizes {CANONICAL_SIZES}, got {tuple(sorted(self.images))}"
            )
        frozen: dict[int, NDArray[np.uint8]] = {}
        for size in CANONICAL_SIZES:
            buf = self.images[size]
            if buf.shape != (size, size, 4) or buf.dtype != np.uint8:
                raise ValueError(f"Buffer for size {size} has shape {buf.shape}/{buf.dtype}")
            buf.setflags(write=False)
            frozen[size] = buf
        object.__setattr__(self, "images", MappingProxyType(frozen))

    def __getitem__(self, size: int) -> NDArray[np.uint8]:
        return self.images[size]

    def __iter__(self) -> Iterator[int]:
        return iter(CANONICAL_SIZES)

    def __len__(self) -> int:
        return len(self.images)

    def for_exponent(self, exponent: int) -> NDArray[np.uint8]:
        if exponent not in CANONICAL_EXPONENTS:
            raise ValidationError(
                f"Size must be between {CANONICAL_EXPONENTS[0]} and {CANONICAL_EXPONENTS[-1]}"
            )
        return self.images[2**exponent]
