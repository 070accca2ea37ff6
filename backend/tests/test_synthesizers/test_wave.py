"""Tests for the sine-wave synthesizer."""

import math

import numpy as np

from avatarforge.engine.seeded import SeededSequence
from avatarforge.engine.synthesizers.wave import WaveParams, WaveSynthesizer
from tests.conftest import BLACK, BLACK_WHITE, WHITE


def test_params_drawn_in_order():
    seq = SeededSequence.from_seed("octocat")
    r = seq.take(6)
    p = WaveParams.from_sequence(seq)
    assert p.frequency1 == 0.1 + r[0] * 0.2
    assert p.frequency2 == 0.15 + r[1] * 0.25
    assert p.amplitude1 == 0.3 + r[2] * 0.4
    assert p.amplitude2 == 0.2 + r[3] * 0.3
    assert p.phase1 == r[4] * math.pi * 2
    assert p.phase2 == r[5] * math.pi * 2


def test_params_within_ranges():
    for seed in ("a", "b", "octocat", "hubot", "x" * 32):
        p = WaveParams.from_sequence(SeededSequence.from_seed(seed))
        assert 0.1 <= p.frequency1 <= 0.3
        assert 0.15 <= p.frequency2 <= 0.4
        assert 0.3 <= p.amplitude1 <= 0.7
        assert 0.2 <= p.amplitude2 <= 0.5
        assert 0 <= p.phase1 < 2 * math.pi
        assert 0 <= p.phase2 < 2 * math.pi


def test_different_seeds_different_params():
    a = WaveParams.from_sequence(SeededSequence.from_seed("octocat"))
    b = WaveParams.from_sequence(SeededSequence.from_seed("hubot"))
    assert a != b


def test_field_is_scale_invariant():
    synth = WaveSynthesizer(BLACK_WHITE, SeededSequence.from_seed("octocat"))
    fractions = np.array([0.0, 0.25, 0.5, 0.75])
    small = synth.field(fractions * 16, fractions[::-1] * 16, 16)
    large = synth.field(fractions * 512, fractions[::-1] * 512, 512)
    assert np.allclose(small, large)


def test_field_sign_picks_color():
    synth = WaveSynthesizer(BLACK_WHITE, SeededSequence.from_seed("octocat"))
    xs, ys = np.meshgrid(np.arange(32, dtype=float), np.arange(32, dtype=float))
    field = synth.field(xs, ys, 32)
    rgb = synth.shade(xs, ys, 32)
    assert np.array_equal(rgb[field > 0], np.tile(BLACK, ((field > 0).sum(), 1)))
    assert np.array_equal(rgb[field <= 0], np.tile(WHITE, ((field <= 0).sum(), 1)))
