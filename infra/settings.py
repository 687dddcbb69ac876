# -*- coding: utf-8 -*-
"""Persisted key/value settings used to remember the preferred language."""
from __future__ import annotations

import json
import os
import threading
from typing import Any, Dict, Protocol

from infra.config import SETTINGS_PATH


class SettingsStore(Protocol):
    """Minimal key/value interface the translation store persists through."""

    def get(self, key: str, default: str) -> str: ...

    def set(self, key: str, value: str) -> None: ...


class JsonSettingsStore:
    """Settings kept in a flat JSON object on disk, cached after first read."""

    def __init__(self, path: str = SETTINGS_PATH):
        self.path = path
        self._lock = threading.RLock()
        self._cached: Dict[str, Any] | None = None

    def _load_from_disk(self) -> Dict[str, Any]:
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as fp:
                data = json.load(fp)
        except (OSError, ValueError, TypeError):
            return {}
        if not isinstance(data, dict):
            return {}
        return data

    def _ensure_loaded(self) -> Dict[str, Any]:
        if self._cached is None:
            self._cached = self._load_from_disk()
        return self._cached

    def _write(self, settings: Dict[str, Any]) -> None:
        os.makedirs(os.path.dirname(self.path) or ".", exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as fp:
            json.dump(settings, fp, ensure_ascii=False, indent=2)
        self._cached = dict(settings)

    def get(self, key: str, default: str) -> str:
        with self._lock:
            value = self._ensure_loaded().get(key, default)
            return str(value or default)

    def set(self, key: str, value: str) -> None:
        with self._lock:
            current = dict(self._ensure_loaded())
            current[key] = value
            self._write(current)


class MemorySettingsStore:
    """Process-local store, handy for tests and for running without a settings file."""

    def __init__(self, initial: Dict[str, str] | None = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str, default: str) -> str:
        return self._data.get(key) or default

    def set(self, key: str, value: str) -> None:
        self._data[key] = value


__all__ = [
    "SettingsStore",
    "JsonSettingsStore",
    "MemorySettingsStore",
]
