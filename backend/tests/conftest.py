"""Shared test fixtures."""

from __future__ import annotations

import numpy as np
import pytest

from avatarforge.engine.config import RenderConfig
from avatarforge.engine.context import CANONICAL_SIZES, GenerationParams, Palette
from avatarforge.engine.renderer import MultiResolutionRenderer
from avatarforge.services.avatars import AvatarService
from avatarforge.storage.memory import InMemoryStorage
from avatarforge.storage.metadata import MetadataStore

BLACK = (0, 0, 0)
WHITE = (255, 255, 255)

BLACK_WHITE = Palette(primary=BLACK, foreign=WHITE)

# 7x4 half grid with a checkerboard so mirroring is visible
CHECKER_HALF = np.array(
    [[(r + c) % 2 == 0 for c in range(4)] for r in range(7)],
    dtype=bool,
)


def blank_buffers(fill: int = 0) -> dict[int, np.ndarray]:
    return {s: np.full((s, s, 4), fill, dtype=np.uint8) for s in CANONICAL_SIZES}


@pytest.fixture
def renderer() -> MultiResolutionRenderer:
    return MultiResolutionRenderer(config=RenderConfig(workers=3))


@pytest.fixture
def sequential_renderer() -> MultiResolutionRenderer:
    return MultiResolutionRenderer(config=RenderConfig(workers=1))


@pytest.fixture
def seeded_params() -> GenerationParams:
    return GenerationParams(seed="octocat", primary_color="#000000", foreign_color="#ffffff")


@pytest.fixture
def service(tmp_path, renderer) -> AvatarService:
    return AvatarService(
        storage=InMemoryStorage(),
        metadata=MetadataStore(tmp_path / "avatars.jsonl"),
        renderer=renderer,
    )
