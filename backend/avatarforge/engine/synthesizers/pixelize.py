"""Pixelize — mirrored 7×7 identicon grid.

The left half plus the center column (7 × 4 cells) is drawn from the seeded
sequence row by row; columns right of center mirror the left.
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray

from avatarforge.engine.context import Palette
from avatarforge.engine.registry import GeneratorType, synthesizer
from avatarforge.engine.schemes import EXTENDED_SCHEMES
from avatarforge.engine.seeded import SeededSequence
from avatarforge.engine.synthesizers.base import Synthesizer

GRID_SIZE = 7
# Cell is filled when the draw exceeds this
_FILL_THRESHOLD = 0.5


def build_grid(sequence: SeededSequence, grid_size: int = GRID_SIZE) -> NDArray[np.bool_]:
    """Draw the half grid, shape (grid_size, ceil(grid_size / 2))."""
    half = math.ceil(grid_size / 2)
    draws = np.array(sequence.take(grid_size * half), dtype=np.float64)
    return (draws > _FILL_THRESHOLD).reshape(grid_size, half)


def mirror_grid(half: NDArray[np.bool_], grid_size: int = GRID_SIZE) -> NDArray[np.bool_]:
    """Expand the half grid to full width around the center column."""
    cols = np.arange(grid_size)
    source = np.where(cols >= half.shape[1], grid_size - 1 - cols, cols)
    return half[:, source]


@synthesizer(
    type=GeneratorType.PIXELIZE,
    schemes=EXTENDED_SCHEMES,
    description="Symmetric pixel grid identicon",
)
class PixelizeSynthesizer(Synthesizer):
    def __init__(
        self,
        palette: Palette,
        sequence: SeededSequence,
        angle: float | None = None,
        grid_size: int = GRID_SIZE,
    ) -> None:
        super().__init__(palette, sequence, angle)
        self.grid_size = grid_size
        self.grid = mirror_grid(build_grid(sequence, grid_size), grid_size)
        self.grid.setflags(write=False)

    def shade(
        self,
        xs: NDArray[np.float64],
        ys: NDArray[np.float64],
        size: int,
    ) -> NDArray[np.uint8]:
        cell_size = size / self.grid_size
        gx = np.clip(np.floor(xs / cell_size).astype(np.int64), 0, self.grid_size - 1)
        gy = np.clip(np.floor(ys / cell_size).astype(np.int64), 0, self.grid_size - 1)
        return self._pick(self.grid[gy, gx])
