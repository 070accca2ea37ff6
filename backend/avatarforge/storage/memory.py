"""In-process storage, for tests and throwaway deployments."""

from __future__ import annotations

import threading

from avatarforge.engine.errors import AvatarNotFound
from avatarforge.storage.base import StorageStrategy


class InMemoryStorage(StorageStrategy):
    def __init__(self) -> None:
        self._avatars: dict[str, dict[int, bytes]] = {}
        self._lock = threading.Lock()

    def save(self, avatar_id: str, images: dict[int, bytes]) -> str:
        with self._lock:
            self._avatars[avatar_id] = dict(images)
        return f"memory://{avatar_id}"

    def load(self, avatar_id: str) -> dict[int, bytes]:
        with self._lock:
            try:
                return dict(self._avatars[avatar_id])
            except KeyError:
                raise AvatarNotFound(avatar_id) from None

    def delete(self, avatar_id: str) -> None:
        with self._lock:
            if self._avatars.pop(avatar_id, None) is None:
                raise AvatarNotFound(avatar_id)

    def exists(self, avatar_id: str) -> bool:
        with self._lock:
            return avatar_id in self._avatars
