"""Engine error hierarchy.

Bad colors, unknown schemes and unknown filters are not errors: they fall back
silently. Everything here is surfaced to the caller.
"""

from __future__ import annotations


class AvatarError(Exception):
    """Base class for all avatarforge errors."""


class ValidationError(AvatarError):
    """Caller input rejected before any pixel work starts."""


class UnsupportedGeneratorType(ValidationError):
    def __init__(self, type_name: str) -> None:
        self.type_name = type_name
        super().__init__(f"Unsupported generator type: {type_name}")


class AvatarNotFound(AvatarError):
    def __init__(self, avatar_id: str) -> None:
        self.avatar_id = avatar_id
        super().__init__(f"Avatar with ID {avatar_id} not found")


class RenderCancelled(AvatarError):
    """Rendering stopped at a row boundary; partial buffers are discarded."""
