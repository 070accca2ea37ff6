"""Avatar metadata — JSONL-backed record store.

One JSON object per line, appended on create and rewritten on delete. Images
themselves live in a StorageStrategy; a record only points at them.
"""

from __future__ import annotations

import json
import logging
import threading
from dataclasses import asdict, dataclass
from datetime import datetime
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


@dataclass
class AvatarRecord:
    """Metadata persisted alongside the stored images."""

    id: str
    created_at: datetime
    type: str = "pixelize"
    primary_color: str | None = None
    foreign_color: str | None = None
    color_scheme: str | None = None
    seed: str | None = None
    angle: float | None = None
    # Where the storage driver put the images
    location: str = ""

    def to_json(self) -> dict[str, Any]:
        data = asdict(self)
        data["created_at"] = self.created_at.isoformat()
        return data

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> AvatarRecord:
        data = dict(data)
        data["created_at"] = datetime.fromisoformat(data["created_at"])
        return cls(**data)


class MetadataStore:
    """JSONL file of AvatarRecords."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self._lock = threading.Lock()

    def _load(self) -> list[AvatarRecord]:
        if not self.path.exists():
            return []
        records: list[AvatarRecord] = []
        with open(self.path, encoding="utf-8") as f:
            for line in f:
                line = line.strip()
                if line:
                    records.append(AvatarRecord.from_json(json.loads(line)))
        return records

    def _save(self, records: list[AvatarRecord]) -> None:
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        with open(tmp, "w", encoding="utf-8") as f:
            for record in records:
                f.write(json.dumps(record.to_json(), ensure_ascii=False) + "\n")
        tmp.replace(self.path)

    def add(self, record: AvatarRecord) -> None:
        with self._lock:
            with open(self.path, "a", encoding="utf-8") as f:
                f.write(json.dumps(record.to_json(), ensure_ascii=False) + "\n")
        logger.info("Recorded metadata for avatar %s", record.id)

    def get(self, avatar_id: str) -> AvatarRecord | None:
        with self._lock:
            for record in self._load():
                if record.id == avatar_id:
                    return record
        return None

    def remove(self, avatar_id: str) -> bool:
        with self._lock:
            records = self._load()
            kept = [r for r in records if r.id != avatar_id]
            if len(kept) == len(records):
                return False
            self._save(kept)
        logger.info("Removed metadata for avatar %s", avatar_id)
        return True

    def list(self, pick: int = 10, offset: int = 0) -> tuple[list[AvatarRecord], int]:
        """Page of records ordered by creation time, plus the total count."""
        with self._lock:
            records = sorted(self._load(), key=lambda r: r.created_at)
        return records[offset : offset + pick], len(records)

    def count(self) -> int:
        with self._lock:
            return len(self._load())
