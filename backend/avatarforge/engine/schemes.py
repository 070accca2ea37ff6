"""Named color schemes.

Each generator variant owns a scheme table assembled from the shared groups
below. Tables are tuples of frozen dataclasses and are never mutated.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ColorScheme:
    name: str
    primary_color: str
    foreign_color: str


BASIC_SCHEMES: tuple[ColorScheme, ...] = (
    ColorScheme("green", "green", "lightgreen"),
    ColorScheme("blue", "blue", "lightblue"),
    ColorScheme("red", "red", "pink"),
    ColorScheme("orange", "orange", "yellow"),
    ColorScheme("purple", "purple", "violet"),
    ColorScheme("teal", "teal", "cyan"),
    ColorScheme("indigo", "indigo", "blue"),
    ColorScheme("pink", "pink", "rose"),
    ColorScheme("emerald", "emerald", "green"),
)

# Palettes offered by the web client
PALETTE_SCHEMES: tuple[ColorScheme, ...] = (
    ColorScheme("default", "#3b82f6", "#ef4444"),
    ColorScheme("monochrome", "#333333", "#666666"),
    ColorScheme("vibrant", "#FF6B35", "#F7931E"),
    ColorScheme("pastel", "#FFB3BA", "#FFDFBA"),
    ColorScheme("ocean", "#0077BE", "#00A8CC"),
    ColorScheme("sunset", "#FF8C42", "#FF6B35"),
    ColorScheme("forest", "#2E8B57", "#32CD32"),
    ColorScheme("royal", "#6A0DAD", "#8A2BE2"),
)

EXTENDED_SCHEMES: tuple[ColorScheme, ...] = BASIC_SCHEMES + PALETTE_SCHEMES


def find_scheme(schemes: tuple[ColorScheme, ...], name: str | None) -> ColorScheme | None:
    """Exact-name lookup. Unknown names return None."""
    if not name:
        return None
    for scheme in schemes:
        if scheme.name == name:
            return scheme
    return None
