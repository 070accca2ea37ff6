"""Color resolution and interpolation.

A color spec is either ``#rrggbb`` (``#`` optional, any case) or one of the
named colors below. Anything that does not parse resolves to the fallback blue.
"""

from __future__ import annotations

import math
import re
from types import MappingProxyType

import numpy as np
from numpy.typing import NDArray

RGB = tuple[int, int, int]

FALLBACK_RGB: RGB = (59, 130, 246)

DEFAULT_PRIMARY = "#3B82F6"
DEFAULT_FOREIGN = "#60A5FA"

_HEX_RE = re.compile(r"^#?([0-9a-f]{2})([0-9a-f]{2})([0-9a-f]{2})$", re.IGNORECASE)

NAMED_COLORS: MappingProxyType[str, str] = MappingProxyType({
    "green": "#22C55E",
    "lightgreen": "#86EFAC",
    "blue": "#3B82F6",
    "lightblue": "#60A5FA",
    "red": "#EF4444",
    "pink": "#F472B6",
    "purple": "#A855F7",
    "violet": "#C084FC",
    "orange": "#F97316",
    "yellow": "#FDE047",
    "teal": "#14B8A6",
    "cyan": "#06B6D4",
    "indigo": "#6366F1",
    "rose": "#F43F5E",
    "emerald": "#10B981",
})


def resolve_color(spec: str | None) -> RGB:
    """Resolve a color spec to (r, g, b). Never raises."""
    if not spec:
        return FALLBACK_RGB
    color = NAMED_COLORS.get(spec.lower(), spec)
    m = _HEX_RE.match(color)
    if m is None:
        return FALLBACK_RGB
    return (int(m.group(1), 16), int(m.group(2), 16), int(m.group(3), 16))


def _round_half_up(v: float) -> int:
    return int(math.floor(v + 0.5))


def _clamp_channel(v: int) -> int:
    return max(0, min(255, v))


def interpolate(a: RGB, b: RGB, t: float) -> RGB:
    """Linear blend a -> b. t=0 gives a, t=1 gives b exactly."""
    return (
        _clamp_channel(_round_half_up(a[0] + (b[0] - a[0]) * t)),
        _clamp_channel(_round_half_up(a[1] + (b[1] - a[1]) * t)),
        _clamp_channel(_round_half_up(a[2] + (b[2] - a[2]) * t)),
    )


def interpolate_array(a: RGB, b: RGB, t: NDArray[np.float64]) -> NDArray[np.uint8]:
    """Vectorized :func:`interpolate` over an array of t values.

    Returns an array of shape ``t.shape + (3,)``.
    """
    start = np.asarray(a, dtype=np.float64)
    delta = np.asarray(b, dtype=np.float64) - start
    mixed = start + delta * np.asarray(t, dtype=np.float64)[..., np.newaxis]
    return np.clip(np.floor(mixed + 0.5), 0, 255).astype(np.uint8)


def to_hex(rgb: RGB) -> str:
    return "#{:02x}{:02x}{:02x}".format(*rgb)
