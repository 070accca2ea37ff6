"""Gradient — linear blend from primary to foreign along an angle.

Depends only on the angle and the two colors; the seed is ignored, so equal
colors and angle always give identical output.
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray

from avatarforge.engine.colors import interpolate_array
from avatarforge.engine.context import Palette
from avatarforge.engine.registry import GeneratorType, synthesizer
from avatarforge.engine.schemes import EXTENDED_SCHEMES
from avatarforge.engine.seeded import SeededSequence
from avatarforge.engine.synthesizers.base import Synthesizer

# Top → bottom
DEFAULT_ANGLE = 90.0


@synthesizer(
    type=GeneratorType.GRADIENT,
    schemes=EXTENDED_SCHEMES,
    uses_seed=False,
    description="Linear two-color gradient at a given angle",
)
class GradientSynthesizer(Synthesizer):
    def __init__(
        self,
        palette: Palette,
        sequence: SeededSequence,
        angle: float | None = None,
    ) -> None:
        super().__init__(palette, sequence, angle)
        self.angle = DEFAULT_ANGLE if angle is None else float(angle)
        radians = self.angle * math.pi / 180
        self.direction = (math.cos(radians), math.sin(radians))

    def position(
        self,
        xs: NDArray[np.float64],
        ys: NDArray[np.float64],
        size: int,
    ) -> NDArray[np.float64]:
        """Blend factor t in [0, 1] per pixel."""
        span = max(size - 1, 1)
        nx = (xs / span) * 2 - 1
        ny = (ys / span) * 2 - 1
        t = (nx * self.direction[0] + ny * self.direction[1] + 1) / 2
        return np.clip(t, 0.0, 1.0)

    def shade(
        self,
        xs: NDArray[np.float64],
        ys: NDArray[np.float64],
        size: int,
    ) -> NDArray[np.uint8]:
        return interpolate_array(self.palette.primary, self.palette.foreign, self.position(xs, ys, size))
