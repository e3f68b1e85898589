# store.py
from __future__ import annotations
import json
import os
from typing import Dict, Protocol


class PersistentStore(Protocol):
    """Integer key/value storage that outlives a play session."""

    def get(self, key: str, default: int = 0) -> int: ...

    def set(self, key: str, value: int) -> None: ...


class MemoryStore:
    """Dict-backed store. Used headless and in tests."""

    def __init__(self, initial: Dict[str, int] | None = None):
        self.data: Dict[str, int] = dict(initial or {})
        self.writes = 0

    def get(self, key: str, default: int = 0) -> int:
        return int(self.data.get(key, default))

    def set(self, key: str, value: int) -> None:
        self.data[key] = int(value)
        self.writes += 1


class JsonFileStore:
    """
    Store backed by a small JSON object on disk, e.g. {"HIGHEST_SCORE": 12}.

    Reads treat a missing or unreadable file as empty. Writes are best-effort:
    an OSError is reported (debug only) and the in-memory value is kept, so a
    read-only disk never interrupts a game.
    """

    def __init__(self, path: str, debug: bool = False):
        self.path = os.path.expanduser(path)
        self.debug = debug
        self.data: Dict[str, int] = self._load()

    def _load(self) -> Dict[str, int]:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                raw = json.load(f)
        except FileNotFoundError:
            return {}
        except (OSError, ValueError) as exc:
            if self.debug:
                print(f"[STORE] Ignoring unreadable {self.path}: {exc}")
            return {}
        if not isinstance(raw, dict):
            return {}
        data = {}
        for key, value in raw.items():
            if isinstance(value, int) and not isinstance(value, bool):
                data[str(key)] = value
        return data

    def get(self, key: str, default: int = 0) -> int:
        return self.data.get(key, default)

    def set(self, key: str, value: int) -> None:
        self.data[key] = int(value)
        try:
            folder = os.path.dirname(self.path)
            if folder:
                os.makedirs(folder, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(self.data, f, indent=2)
        except OSError as exc:
            if self.debug:
                print(f"[STORE] Could not write {self.path}: {exc}")
            return
        if self.debug:
            print(f"[STORE] {key}={value} → {self.path}")
