"""Renderer configuration."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class RenderConfig:
    """Knobs for one MultiResolutionRenderer."""

    # Threads across the six sizes; 1 renders sequentially
    workers: int = 3
    # Wall-clock budget per render (seconds), checked at row boundaries; None = unbounded
    timeout_s: float | None = None

    # True: the sequence is a pure function of the seed.
    # False: legacy behaviour, seed salted with time + a random draw (not reproducible).
    reproducible_seeds: bool = True
