# storage.py
from __future__ import annotations
import json
import logging
import os
import tempfile
from typing import Dict, Optional

from .config import HIGHSCORE_KEY

logger = logging.getLogger(__name__)


class MemoryStore:
    """Dict-backed key/value store."""

    def __init__(self, data: Optional[Dict[str, str]] = None):
        self.data: Dict[str, str] = dict(data or {})

    def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value


class JsonFileStore:
    """
    String keys and values kept as one JSON object in a file.

    A missing or unreadable file reads as empty; writes go through a temp
    file and `os.replace` so a crash never leaves a half-written store.
    """

    def __init__(self, path: str):
        self.path = path

    def _load(self) -> Dict[str, str]:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            return {}
        except (OSError, json.JSONDecodeError) as exc:
            logger.warning("ignoring unreadable store %s: %s", self.path, exc)
            return {}
        if not isinstance(data, dict):
            logger.warning("ignoring store %s: expected a JSON object", self.path)
            return {}
        return {str(k): str(v) for k, v in data.items()}

    def get(self, key: str) -> Optional[str]:
        return self._load().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._load()
        data[key] = value
        directory = os.path.dirname(os.path.abspath(self.path))
        os.makedirs(directory, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=directory, suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, sort_keys=True)
            os.replace(tmp_path, self.path)
        except OSError:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise


def load_high_score(store) -> int:
    """Stored high score, or 0 when missing or malformed."""
    raw = store.get(HIGHSCORE_KEY)
    if raw is None:
        return 0
    try:
        value = int(raw.strip(), 10)
    except ValueError:
        logger.debug("malformed high score %r, using 0", raw)
        return 0
    return value if value >= 0 else 0


def save_high_score(store, value: int) -> None:
    try:
        store.set(HIGHSCORE_KEY, str(value))
    except OSError as exc:
        logger.warning("could not persist high score %d: %s", value, exc)
