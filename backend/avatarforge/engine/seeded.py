"""Seeded pseudo-random sequence.

A string seed is hashed to a 32-bit signed integer (Java-style rolling hash),
normalized against 2**31 - 1 and used as the start state of a small linear
congruential generator. The generator is an immutable value: ``next()``
returns the drawn value together with the successor state.
"""

from __future__ import annotations

import secrets
from collections.abc import Iterator
from dataclasses import dataclass

# LCG constants (Numerical Recipes "quick and dirty" family)
_LCG_MULTIPLIER = 9301
_LCG_INCREMENT = 49297
_LCG_MODULUS = 233280

_INT32_MAX = 2147483647


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


def string_hash(seed: str) -> int:
    """32-bit signed rolling hash: ``h = h * 31 + unit`` over UTF-16 code units."""
    units = seed.encode("utf-16-le", "surrogatepass")
    h = 0
    for i in range(0, len(units), 2):
        unit = units[i] | (units[i + 1] << 8)
        h = _to_int32((h << 5) - h + unit)
    return h


@dataclass(frozen=True)
class SeededSequence:
    """Immutable LCG state. Sharing one instance between threads is safe."""

    state: float

    @classmethod
    def from_seed(cls, seed: str) -> SeededSequence:
        return cls(abs(string_hash(seed)) / _INT32_MAX)

    @classmethod
    def from_entropy(cls) -> SeededSequence:
        return cls(secrets.SystemRandom().random())

    def next(self) -> tuple[float, SeededSequence]:
        state = (self.state * _LCG_MULTIPLIER + _LCG_INCREMENT) % _LCG_MODULUS
        return state / _LCG_MODULUS, SeededSequence(state)

    def take(self, n: int) -> list[float]:
        values: list[float] = []
        seq = self
        for _ in range(n):
            value, seq = seq.next()
            values.append(value)
        return values

    def __iter__(self) -> Iterator[float]:
        seq = self
        while True:
            value, seq = seq.next()
            yield value
