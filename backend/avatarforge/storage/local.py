"""Local filesystem storage: one directory per avatar, one PNG per size."""

from __future__ import annotations

import logging
import re
import shutil
from pathlib import Path

from avatarforge.engine.errors import AvatarNotFound
from avatarforge.storage.base import StorageStrategy

logger = logging.getLogger(__name__)

# Ids become directory names; keep them to a safe alphabet
_SAFE_ID_RE = re.compile(r"^[A-Za-z0-9_-]+$")


class LocalStorage(StorageStrategy):
    def __init__(self, root: Path | str) -> None:
        self.root = Path(root)

    def _avatar_dir(self, avatar_id: str) -> Path:
        if not _SAFE_ID_RE.match(avatar_id):
            raise AvatarNotFound(avatar_id)
        return self.root / avatar_id

    @staticmethod
    def _image_path(avatar_dir: Path, size: int) -> Path:
        return avatar_dir / f"{size}.png"

    def save(self, avatar_id: str, images: dict[int, bytes]) -> str:
        avatar_dir = self._avatar_dir(avatar_id)
        avatar_dir.mkdir(parents=True, exist_ok=True)
        for size, data in images.items():
            self._image_path(avatar_dir, size).write_bytes(data)
        logger.info("Avatar saved to local storage: %s", avatar_dir)
        return str(avatar_dir)

    def load(self, avatar_id: str) -> dict[int, bytes]:
        avatar_dir = self._avatar_dir(avatar_id)
        if not avatar_dir.is_dir():
            raise AvatarNotFound(avatar_id)
        images: dict[int, bytes] = {}
        for path in sorted(avatar_dir.glob("*.png")):
            if path.stem.isdigit():
                images[int(path.stem)] = path.read_bytes()
        logger.debug("Avatar loaded from local storage: %s (%d images)", avatar_dir, len(images))
        return images

    def load_size(self, avatar_id: str, size: int) -> bytes:
        path = self._image_path(self._avatar_dir(avatar_id), size)
        if not path.is_file():
            raise AvatarNotFound(avatar_id)
        return path.read_bytes()

    def delete(self, avatar_id: str) -> None:
        avatar_dir = self._avatar_dir(avatar_id)
        if not avatar_dir.is_dir():
            raise AvatarNotFound(avatar_id)
        shutil.rmtree(avatar_dir)
        logger.info("Avatar deleted from local storage: %s", avatar_dir)

    def exists(self, avatar_id: str) -> bool:
        try:
            return self._avatar_dir(avatar_id).is_dir()
        except AvatarNotFound:
            return False
