"""Vectorized RGB ↔ HSL conversion for (H, W, 3) float arrays in [0, 1]."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

# Below this chroma a pixel is treated as achromatic (hue/saturation 0)
_EPS = 1e-6


def rgb_to_hsl(
    rgb: NDArray[np.float64],
) -> tuple[NDArray[np.float64], NDArray[np.float64], NDArray[np.float64]]:
    """Returns (hue, saturation, lightness), hue in turns [0, 1)."""
    r, g, b = rgb[..., 0], rgb[..., 1], rgb[..., 2]
    maxc = rgb.max(axis=-1)
    minc = rgb.min(axis=-1)
    delta = maxc - minc
    lightness = (maxc + minc) / 2

    chromatic = delta > _EPS
    denom = np.where(lightness <= 0.5, maxc + minc, 2.0 - maxc - minc)
    saturation = np.where(chromatic, delta / np.where(denom > _EPS, denom, 1.0), 0.0)

    safe_delta = np.where(chromatic, delta, 1.0)
    rc = (maxc - r) / safe_delta
    gc = (maxc - g) / safe_delta
    bc = (maxc - b) / safe_delta

    hue = np.where(
        maxc == r,
        bc - gc,
        np.where(maxc == g, 2.0 + rc - bc, 4.0 + gc - rc),
    )
    hue = np.where(chromatic, np.mod(hue / 6.0, 1.0), 0.0)
    return hue, saturation, lightness


def _hue_channel(m1: NDArray[np.float64], m2: NDArray[np.float64], hue: NDArray[np.float64]) -> NDArray[np.float64]:
    hue = np.mod(hue, 1.0)
    return np.select(
        [hue < 1 / 6, hue < 0.5, hue < 2 / 3],
        [m1 + (m2 - m1) * hue * 6.0, m2, m1 + (m2 - m1) * (2 / 3 - hue) * 6.0],
        default=m1,
    )


def hsl_to_rgb(
    hue: NDArray[np.float64],
    saturation: NDArray[np.float64],
    lightness: NDArray[np.float64],
) -> NDArray[np.float64]:
    """Inverse of :func:`rgb_to_hsl`; inputs are clamped to valid ranges."""
    saturation = np.clip(saturation, 0.0, 1.0)
    lightness = np.clip(lightness, 0.0, 1.0)

    m2 = np.where(lightness <= 0.5, lightness * (1.0 + saturation), lightness + saturation - lightness * saturation)
    m1 = 2.0 * lightness - m2

    r = _hue_channel(m1, m2, hue + 1 / 3)
    g = _hue_channel(m1, m2, hue)
    b = _hue_channel(m1, m2, hue - 1 / 3)
    return np.clip(np.stack((r, g, b), axis=-1), 0.0, 1.0)
