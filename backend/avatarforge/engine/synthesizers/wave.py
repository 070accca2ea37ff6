"""Two sine bands plus a radial ripple, thresholded to two colors."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from avatarforge.engine.context import Palette
from avatarforge.engine.registry import GeneratorType, synthesizer
from avatarforge.engine.schemes import BASIC_SCHEMES
from avatarforge.engine.seeded import SeededSequence
from avatarforge.engine.synthesizers.base import Synthesizer

# (low, span) per parameter; value = low + draw * span
_FREQ1 = (0.1, 0.2)    # 0.1 .. 0.3
_FREQ2 = (0.15, 0.25)  # 0.15 .. 0.4
_AMP1 = (0.3, 0.4)     # 0.3 .. 0.7
_AMP2 = (0.2, 0.3)     # 0.2 .. 0.5

# Radial ripple: sin(distance * pi * 4) * 0.3
_RADIAL_PERIODS = 4
_RADIAL_AMP = 0.3


@dataclass(frozen=True)
class WaveParams:
    frequency1: float
    frequency2: float
    amplitude1: float
    amplitude2: float
    phase1: float
    phase2: float

    @classmethod
    def from_sequence(cls, sequence: SeededSequence) -> WaveParams:
        r = sequence.take(6)
        return cls(
            frequency1=_FREQ1[0] + r[0] * _FREQ1[1],
            frequency2=_FREQ2[0] + r[1] * _FREQ2[1],
            amplitude1=_AMP1[0] + r[2] * _AMP1[1],
            amplitude2=_AMP2[0] + r[3] * _AMP2[1],
            phase1=r[4] * math.pi * 2,
            phase2=r[5] * math.pi * 2,
        )


@synthesizer(
    type=GeneratorType.WAVE,
    schemes=BASIC_SCHEMES,
    description="Interfering sine waves with a radial ripple",
)
class WaveSynthesizer(Synthesizer):
    def __init__(
        self,
        palette: Palette,
        sequence: SeededSequence,
        angle: float | None = None,
    ) -> None:
        super().__init__(palette, sequence, angle)
        self.params = WaveParams.from_sequence(sequence)

    def field(
        self,
        xs: NDArray[np.float64],
        ys: NDArray[np.float64],
        size: int,
    ) -> NDArray[np.float64]:
        """Signed pattern value; positive → primary."""
        p = self.params
        nx = xs / size
        ny = ys / size
        wave1 = np.sin(nx * p.frequency1 * math.pi * 2 + p.phase1) * p.amplitude1
        wave2 = np.sin(ny * p.frequency2 * math.pi * 2 + p.phase2) * p.amplitude2
        combined = (wave1 + wave2) / 2
        distance = np.sqrt((nx - 0.5) ** 2 + (ny - 0.5) ** 2)
        radial = np.sin(distance * math.pi * _RADIAL_PERIODS) * _RADIAL_AMP
        return combined + radial

    def shade(
        self,
        xs: NDArray[np.float64],
        ys: NDArray[np.float64],
        size: int,
    ) -> NDArray[np.uint8]:
        return self._pick(self.field(xs, ys, size) > 0)
