"""Common interface of the pattern synthesizers."""

from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np
from numpy.typing import NDArray

from avatarforge.engine.colors import RGB
from avatarforge.engine.context import Palette
from avatarforge.engine.seeded import SeededSequence


class Synthesizer(ABC):
    """Maps pixel coordinates at a given edge size to RGB.

    Instances are built per size from the same starting sequence, hold only
    immutable derived parameters, and may be shared between threads.
    """

    def __init__(
        self,
        palette: Palette,
        sequence: SeededSequence,
        angle: float | None = None,
    ) -> None:
        self.palette = palette

    @abstractmethod
    def shade(
        self,
        xs: NDArray[np.float64],
        ys: NDArray[np.float64],
        size: int,
    ) -> NDArray[np.uint8]:
        """Vectorized shading. Returns ``xs.shape + (3,)`` uint8."""

    def pixel(self, x: int, y: int, size: int) -> RGB:
        rgb = self.shade(np.array([x], dtype=np.float64), np.array([y], dtype=np.float64), size)[0]
        return (int(rgb[0]), int(rgb[1]), int(rgb[2]))

    def _pick(self, mask: NDArray[np.bool_]) -> NDArray[np.uint8]:
        """Two-color select: True → primary, False → foreign."""
        primary = np.asarray(self.palette.primary, dtype=np.uint8)
        foreign = np.asarray(self.palette.foreign, dtype=np.uint8)
        return np.where(mask[..., np.newaxis], primary, foreign).astype(np.uint8)
