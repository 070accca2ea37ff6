"""Read-time image filters over decoded RGBA buffers.

Filters never mutate their input and do not care which synthesizer produced
the buffer. Unknown filter names pass the buffer through unchanged.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Callable

import numpy as np
from numpy.typing import NDArray

from avatarforge.utils.color_space import hsl_to_rgb, rgb_to_hsl

logger = logging.getLogger(__name__)

# ITU-R BT.601 luma weights
_LUMA_WEIGHTS = np.array([0.299, 0.587, 0.114], dtype=np.float64)

# Sepia modulation: +10% lightness, 80% saturation, +30° hue
_SEPIA_BRIGHTNESS = 1.1
_SEPIA_SATURATION = 0.8
_SEPIA_HUE_SHIFT = 30.0 / 360.0

_WHITE = 255.0


class FilterKind(str, enum.Enum):
    GRAYSCALE = "grayscale"
    SEPIA = "sepia"
    NEGATIVE = "negative"

    @classmethod
    def parse(cls, name: FilterKind | str | None) -> FilterKind | None:
        """Lenient lookup; None for empty or unknown names."""
        if name is None or isinstance(name, FilterKind):
            return name
        try:
            return cls(name.strip().lower())
        except ValueError:
            return None


def _to_unit(buf: NDArray[np.uint8]) -> NDArray[np.float64]:
    return buf[..., :3].astype(np.float64) / 255.0


def _from_unit(rgb: NDArray[np.float64], alpha: NDArray[np.uint8]) -> NDArray[np.uint8]:
    out = np.empty(rgb.shape[:-1] + (4,), dtype=np.uint8)
    out[..., :3] = np.clip(np.floor(rgb * 255.0 + 0.5), 0, 255)
    out[..., 3] = alpha
    return out


def grayscale(buf: NDArray[np.uint8]) -> NDArray[np.uint8]:
    luma = buf[..., :3].astype(np.float64) @ _LUMA_WEIGHTS
    gray = np.clip(np.floor(luma + 0.5), 0, 255).astype(np.uint8)
    out = np.empty_like(buf)
    out[..., 0] = gray
    out[..., 1] = gray
    out[..., 2] = gray
    out[..., 3] = buf[..., 3]
    return out


def sepia(buf: NDArray[np.uint8]) -> NDArray[np.uint8]:
    hue, saturation, lightness = rgb_to_hsl(_to_unit(buf))
    rgb = hsl_to_rgb(
        hue + _SEPIA_HUE_SHIFT,
        saturation * _SEPIA_SATURATION,
        lightness * _SEPIA_BRIGHTNESS,
    )
    return _from_unit(rgb, buf[..., 3])


def negative(buf: NDArray[np.uint8]) -> NDArray[np.uint8]:
    # Flatten onto white before inverting
    alpha = buf[..., 3:4].astype(np.float64) / 255.0
    flat = buf[..., :3].astype(np.float64) * alpha + _WHITE * (1.0 - alpha)
    out = np.empty_like(buf)
    out[..., :3] = 255 - np.clip(np.floor(flat + 0.5), 0, 255).astype(np.uint8)
    out[..., 3] = 255
    return out


_FILTERS: dict[FilterKind, Callable[[NDArray[np.uint8]], NDArray[np.uint8]]] = {
    FilterKind.GRAYSCALE: grayscale,
    FilterKind.SEPIA: sepia,
    FilterKind.NEGATIVE: negative,
}


def apply_filter(buf: NDArray[np.uint8], kind: FilterKind | str | None) -> NDArray[np.uint8]:
    """Apply one filter. None or an unrecognized kind returns ``buf`` as is."""
    parsed = FilterKind.parse(kind)
    if parsed is None:
        if kind:
            logger.info("Unknown filter %r, returning image unchanged", kind)
        return buf
    logger.debug("Applying filter: %s", parsed.value)
    return _FILTERS[parsed](buf)


class FilterPipeline:
    """Ordered chain of filter steps; each step consumes the previous output."""

    def __init__(self, steps: list[FilterKind | str] | None = None) -> None:
        self.steps: list[FilterKind | str] = list(steps or [])

    def add_step(self, kind: FilterKind | str) -> FilterPipeline:
        self.steps.append(kind)
        return self

    def process(self, buf: NDArray[np.uint8]) -> NDArray[np.uint8]:
        result = buf
        for step in self.steps:
            result = apply_filter(result, step)
        return result
