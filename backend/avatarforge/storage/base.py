"""Storage strategy contract for encoded avatar images."""

from __future__ import annotations

from abc import ABC, abstractmethod

from avatarforge.engine.errors import AvatarNotFound


class StorageStrategy(ABC):
    """Persists the six encoded images of one avatar under its id.

    ``load`` and ``delete`` raise AvatarNotFound for unknown ids. I/O errors
    propagate to the caller unchanged.
    """

    @abstractmethod
    def save(self, avatar_id: str, images: dict[int, bytes]) -> str:
        """Store images keyed by edge size; return the storage location."""

    @abstractmethod
    def load(self, avatar_id: str) -> dict[int, bytes]:
        ...

    @abstractmethod
    def delete(self, avatar_id: str) -> None:
        ...

    @abstractmethod
    def exists(self, avatar_id: str) -> bool:
        ...

    def load_size(self, avatar_id: str, size: int) -> bytes:
        """One encoded image. Drivers may override to avoid loading all six."""
        images = self.load(avatar_id)
        if size not in images:
            raise AvatarNotFound(avatar_id)
        return images[size]
