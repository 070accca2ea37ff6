"""Multi-resolution renderer — runs one synthesizer across the six canonical sizes."""

from __future__ import annotations

import logging
import secrets
import threading
import time
from collections.abc import Callable
from concurrent.futures import FIRST_EXCEPTION, ThreadPoolExecutor, wait

import numpy as np
from numpy.typing import NDArray

from avatarforge.engine.config import RenderConfig
from avatarforge.engine.context import (
    CANONICAL_SIZES,
    GenerationParams,
    Palette,
    RasterSet,
    resolve_palette,
)
from avatarforge.engine.errors import RenderCancelled
from avatarforge.engine.registry import SynthesizerRegistry, SynthesizerSpec, load_synthesizers
from avatarforge.engine.seeded import SeededSequence
from avatarforge.engine.validation import validate_params

logger = logging.getLogger(__name__)

_OPAQUE = 255


class MultiResolutionRenderer:
    """Renders a RasterSet from GenerationParams."""

    def __init__(
        self,
        registry: SynthesizerRegistry | None = None,
        config: RenderConfig | None = None,
    ) -> None:
        self.registry = registry or load_synthesizers()
        self.config = config or RenderConfig()

    def derive_sequence(self, params: GenerationParams) -> SeededSequence:
        """Starting sequence shared by all six sizes of one request."""
        if not params.seed:
            return SeededSequence.from_entropy()
        if self.config.reproducible_seeds:
            return SeededSequence.from_seed(params.seed)
        salted = f"{params.seed}-{int(time.time() * 1000)}-{secrets.SystemRandom().random()}"
        return SeededSequence.from_seed(salted)

    def render(
        self,
        params: GenerationParams,
        cancel: threading.Event | None = None,
    ) -> RasterSet:
        """Validate, select, then synthesize every size.

        Raises ValidationError before any pixel work, RenderCancelled when
        ``cancel`` is set or the timeout passes mid-render.
        """
        start = time.perf_counter()

        validate_params(params)
        spec = self.registry.select(params.type)
        palette = resolve_palette(params, spec.schemes)
        sequence = self.derive_sequence(params)

        stop = threading.Event()
        deadline = (
            time.monotonic() + self.config.timeout_s
            if self.config.timeout_s is not None
            else None
        )

        def should_stop() -> bool:
            if stop.is_set() or (cancel is not None and cancel.is_set()):
                return True
            return deadline is not None and time.monotonic() >= deadline

        logger.info(
            "Renderer: %s avatar, %d sizes queued (%d workers)",
            spec.type.value,
            len(CANONICAL_SIZES),
            self.config.workers,
        )

        if self.config.workers <= 1:
            images = {
                size: self.render_size(spec, palette, sequence, params.angle, size, should_stop)
                for size in CANONICAL_SIZES
            }
        else:
            images = self._render_concurrent(spec, palette, sequence, params.angle, stop, should_stop)

        total = (time.perf_counter() - start) * 1000
        logger.info("Renderer complete: %s in %.0fms", spec.type.value, total)
        return RasterSet(images)

    def _render_concurrent(
        self,
        spec: SynthesizerSpec,
        palette: Palette,
        sequence: SeededSequence,
        angle: float | None,
        stop: threading.Event,
        should_stop: Callable[[], bool],
    ) -> dict[int, NDArray[np.uint8]]:
        workers = min(self.config.workers, len(CANONICAL_SIZES))
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="render") as pool:
            futures = {
                pool.submit(self.render_size, spec, palette, sequence, angle, size, should_stop): size
                for size in CANONICAL_SIZES
            }
            done, pending = wait(futures, return_when=FIRST_EXCEPTION)
            failed = [f for f in done if f.exception() is not None]
            if failed:
                stop.set()
                for f in pending:
                    f.cancel()
                # Partial buffers of the other sizes are dropped with the futures
                raise failed[0].exception()
        return {futures[f]: f.result() for f in futures}

    def render_size(
        self,
        spec: SynthesizerSpec,
        palette: Palette,
        sequence: SeededSequence,
        angle: float | None,
        size: int,
        should_stop: Callable[[], bool] = lambda: False,
    ) -> NDArray[np.uint8]:
        """One size×size RGBA buffer, shaded row-major."""
        t0 = time.perf_counter()
        synth = spec.cls(palette, sequence, angle)

        buf = np.empty((size, size, 4), dtype=np.uint8)
        buf[..., 3] = _OPAQUE
        xs = np.arange(size, dtype=np.float64)
        row_y = np.empty(size, dtype=np.float64)

        for y in range(size):
            if should_stop():
                raise RenderCancelled(f"Render of {spec.type.value} cancelled at {size}px row {y}")
            row_y.fill(y)
            buf[y, :, :3] = synth.shade(xs, row_y, size)

        logger.debug("  %dpx completed in %.1fms", size, (time.perf_counter() - t0) * 1000)
        return buf
