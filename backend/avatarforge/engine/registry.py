"""Synthesizer registry — every generator variant registers itself via decorator.

Usage:
    @synthesizer(type=GeneratorType.WAVE, schemes=BASIC_SCHEMES, description="...")
    class WaveSynthesizer(Synthesizer):
        def shade(self, xs, ys, size): ...

The set of variants is closed: ``GeneratorType`` lists them all and
``ensure_complete()`` refuses to serve until every member has a registration.
"""

from __future__ import annotations

import enum
import importlib
import logging
import pkgutil
from dataclasses import dataclass
from typing import TYPE_CHECKING

from avatarforge.engine.errors import UnsupportedGeneratorType
from avatarforge.engine.schemes import ColorScheme

if TYPE_CHECKING:
    from avatarforge.engine.synthesizers.base import Synthesizer

logger = logging.getLogger(__name__)

_SYNTHESIZER_PACKAGE = "avatarforge.engine.synthesizers"


class GeneratorType(str, enum.Enum):
    PIXELIZE = "pixelize"
    WAVE = "wave"
    GRADIENT = "gradient"

    @classmethod
    def parse(cls, name: str | None) -> GeneratorType:
        """Case-insensitive lookup; empty means the default (pixelize)."""
        if not name:
            return cls.PIXELIZE
        try:
            return cls(name.strip().lower())
        except ValueError:
            raise UnsupportedGeneratorType(name) from None


@dataclass(frozen=True)
class SynthesizerSpec:
    type: GeneratorType
    cls: type[Synthesizer]
    schemes: tuple[ColorScheme, ...]
    # False when output does not depend on the seed at all
    uses_seed: bool = True
    description: str = ""


class SynthesizerRegistry:
    """Registry of all generator variants."""

    def __init__(self) -> None:
        self._synthesizers: dict[GeneratorType, SynthesizerSpec] = {}

    def register(self, spec: SynthesizerSpec) -> None:
        if spec.type in self._synthesizers:
            raise ValueError(f"Duplicate synthesizer type: {spec.type.value}")
        self._synthesizers[spec.type] = spec
        logger.debug("Registered synthesizer %s (%s)", spec.type.value, spec.cls.__name__)

    def get(self, generator_type: GeneratorType) -> SynthesizerSpec:
        return self._synthesizers[generator_type]

    def all(self) -> list[SynthesizerSpec]:
        return [self._synthesizers[t] for t in GeneratorType if t in self._synthesizers]

    def ensure_complete(self) -> None:
        missing = [t.value for t in GeneratorType if t not in self._synthesizers]
        if missing:
            raise RuntimeError(f"No synthesizer registered for: {', '.join(missing)}")

    def select(self, type_name: str | None) -> SynthesizerSpec:
        """Map a type tag to its synthesizer. Unknown tags raise UnsupportedGeneratorType."""
        generator_type = GeneratorType.parse(type_name)
        try:
            return self._synthesizers[generator_type]
        except KeyError:
            raise UnsupportedGeneratorType(generator_type.value) from None

    @property
    def count(self) -> int:
        return len(self._synthesizers)


# Module-level singleton
_registry = SynthesizerRegistry()


def get_registry() -> SynthesizerRegistry:
    return _registry


def synthesizer(
    *,
    type: GeneratorType,
    schemes: tuple[ColorScheme, ...],
    uses_seed: bool = True,
    description: str = "",
):
    """Class decorator registering a synthesizer variant."""

    def decorator(cls: type[Synthesizer]) -> type[Synthesizer]:
        _registry.register(
            SynthesizerSpec(
                type=type,
                cls=cls,
                schemes=schemes,
                uses_seed=uses_seed,
                description=description,
            )
        )
        return cls

    return decorator


def load_synthesizers() -> SynthesizerRegistry:
    """Import every synthesizer module so the decorators fire."""
    package = importlib.import_module(_SYNTHESIZER_PACKAGE)
    for _, module_name, _ in pkgutil.iter_modules(package.__path__):
        importlib.import_module(f"{_SYNTHESIZER_PACKAGE}.{module_name}")
    _registry.ensure_complete()
    return _registry


def select(type_name: str | None) -> SynthesizerSpec:
    return load_synthesizers().select(type_name)


def color_schemes(type_name: str | None) -> tuple[ColorScheme, ...]:
    """Scheme table of the selected variant."""
    return select(type_name).schemes
