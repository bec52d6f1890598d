"""Key-value persistence for the mood history log."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List, Sequence

from config import HISTORY_DIR, HISTORY_KEY
from entries import MoodEntry

LOGGER = logging.getLogger(__name__)


class HistoryStoreError(Exception):
    """Persisted history exists but cannot be parsed."""


class HistoryStore:
    """Stores the whole history as one JSON array under a single key.

    Each key maps to ``<storage_dir>/<key>.json``. Writes always replace the
    full array.
    """

    def __init__(self, storage_dir: str | Path = HISTORY_DIR, key: str = HISTORY_KEY) -> None:
        self.storage_dir = Path(storage_dir)
        self.key = key

    @property
    def path(self) -> Path:
        return self.storage_dir / f"{self.key}.json"

    def load(self) -> List[MoodEntry]:
        if not self.path.exists():
            return []
        try:
            raw = self.path.read_text(encoding="utf-8")
            data = json.loads(raw)
            if not isinstance(data, list):
                raise TypeError(f"expected a JSON array, got {type(data).__name__}")
            return [MoodEntry.from_dict(item) for item in data]
        except (ValueError, TypeError, KeyError) as exc:
            LOGGER.error("Stored history at %s is unreadable: %s", self.path, exc)
            raise HistoryStoreError(f"Stored mood history is corrupt ({self.path}): {exc}") from exc

    def save(self, entries: Sequence[MoodEntry]) -> None:
        self.storage_dir.mkdir(parents=True, exist_ok=True)
        payload = [entry.to_dict() for entry in entries]
        self.path.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")
