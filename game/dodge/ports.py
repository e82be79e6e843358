"""
Collaborator interfaces injected into the game controller.

The simulation never touches a window, an audio device or the filesystem
directly; it talks to these ports instead so it can run headless.
"""

from __future__ import annotations

import json
import math
import os
import tempfile
from typing import Dict, Optional, Protocol

from .entities import Color


class Renderer(Protocol):
    def clear(self) -> None:
        ...

    def draw_circle(self, x: float, y: float, radius: float, color: Color) -> None:
        ...


class ToneSink(Protocol):
    def play_tone(self, frequency: float, duration: float, volume: float) -> None:
        ...


class KeyValueStore(Protocol):
    def get(self, key: str) -> Optional[str]:
        ...

    def set(self, key: str, value: str) -> None:
        ...


class MemoryStore:
    """In-process key-value store"""

    def __init__(self, data: Optional[Dict[str, str]] = None):
        self.data: Dict[str, str] = dict(data or {})

    def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value


class JsonFileStore:
    """Key-value store backed by a single JSON object on disk.

    A missing, unreadable or malformed file reads as an empty store. The file
    is rewritten in full on every ``set``.
    """

    def __init__(self, path: str, verbose: int = 0):
        self.path = os.path.expanduser(path)
        self.verbose = verbose

    def _load(self) -> Dict[str, str]:
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            if self.verbose > 0:
                print(f"[BestScore] Could not read {self.path}: {e}")
            return {}
        if not isinstance(data, dict):
            return {}
        return {str(k): str(v) for k, v in data.items()}

    def get(self, key: str) -> Optional[str]:
        return self._load().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._load()
        data[key] = value
        directory = os.path.dirname(self.path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        # Write beside the target and swap it in so a failed write keeps the old file
        fd, tmp_path = tempfile.mkstemp(dir=directory or ".", prefix=".bullet-dodge-", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2)
            os.replace(tmp_path, self.path)
        except BaseException:
            os.unlink(tmp_path)
            raise


def parse_score(raw: Optional[str]) -> float:
    """Parse a stored score; anything unusable reads as 0.0"""
    if raw is None:
        return 0.0
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return 0.0
    if math.isnan(value) or math.isinf(value) or value < 0:
        return 0.0
    return value


def load_best(store: KeyValueStore, key: str) -> float:
    return parse_score(store.get(key))


def save_best(store: KeyValueStore, key: str, value: float) -> None:
    store.set(key, repr(float(value)))
