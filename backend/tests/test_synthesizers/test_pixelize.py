"""Tests for the mirrored pixel-grid synthesizer."""

import numpy as np

from avatarforge.engine.context import CANONICAL_SIZES
from avatarforge.engine.seeded import SeededSequence
from avatarforge.engine.synthesizers.pixelize import (
    GRID_SIZE,
    PixelizeSynthesizer,
    build_grid,
    mirror_grid,
)
from tests.conftest import BLACK, BLACK_WHITE, CHECKER_HALF, WHITE


def test_build_grid_draws_row_major():
    seq = SeededSequence.from_seed("octocat")
    half = build_grid(seq)
    assert half.shape == (7, 4)
    expected = np.array(seq.take(28)).reshape(7, 4) > 0.5
    assert np.array_equal(half, expected)


def test_mirror_grid_reflects_left_half():
    full = mirror_grid(CHECKER_HALF)
    assert full.shape == (7, 7)
    assert np.array_equal(full[:, :4], CHECKER_HALF)
    assert np.array_equal(full[:, 4], CHECKER_HALF[:, 2])
    assert np.array_equal(full[:, 5], CHECKER_HALF[:, 1])
    assert np.array_equal(full[:, 6], CHECKER_HALF[:, 0])


def test_grid_is_symmetric():
    for seed in ("octocat", "hubot", "a", ""):
        synth = PixelizeSynthesizer(BLACK_WHITE, SeededSequence.from_seed(seed))
        assert np.array_equal(synth.grid, synth.grid[:, ::-1])


def test_grid_is_read_only():
    synth = PixelizeSynthesizer(BLACK_WHITE, SeededSequence.from_seed("octocat"))
    assert not synth.grid.flags.writeable


def test_cell_centers_match_grid_at_every_size():
    synth = PixelizeSynthesizer(BLACK_WHITE, SeededSequence.from_seed("octocat"))
    for size in CANONICAL_SIZES:
        cell = size / GRID_SIZE
        for r in range(GRID_SIZE):
            for c in range(GRID_SIZE):
                color = synth.pixel(int((c + 0.5) * cell), int((r + 0.5) * cell), size)
                assert color == (BLACK if synth.grid[r, c] else WHITE)


def test_same_seed_same_grid():
    a = PixelizeSynthesizer(BLACK_WHITE, SeededSequence.from_seed("same"))
    b = PixelizeSynthesizer(BLACK_WHITE, SeededSequence.from_seed("same"))
    assert np.array_equal(a.grid, b.grid)


def test_only_two_colors():
    synth = PixelizeSynthesizer(BLACK_WHITE, SeededSequence.from_seed("octocat"))
    xs, ys = np.meshgrid(np.arange(64, dtype=float), np.arange(64, dtype=float))
    rgb = synth.shade(xs, ys, 64)
    colors = {tuple(int(v) for v in px) for px in rgb.reshape(-1, 3)}
    assert colors <= {BLACK, WHITE}
