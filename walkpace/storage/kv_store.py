from __future__ import annotations

import os
import tempfile
from pathlib import Path
from threading import RLock
from typing import Protocol


class KeyValueStorage(Protocol):
    """Interface de stockage cle/valeur (chaines), type localStorage."""

    def get(self, key: str) -> str | None:  # noqa: D401
        ...

    def set(self, key: str, value: str) -> None:
        ...


class InMemoryKeyValueStorage:
    """Stockage en memoire thread-safe (tests, sessions ephemeres)."""

    def __init__(self, initial: dict[str, str] | None = None):
        self._lock = RLock()
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        with self._lock:
            return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        if not isinstance(value, str):
            raise TypeError(f"Valeur chaine attendue, recu {type(value).__name__}")
        with self._lock:
            self._data[key] = value

    def keys(self) -> list[str]:
        with self._lock:
            return list(self._data)


class JsonFileKeyValueStorage:
    """Stockage local: un fichier .json par cle dans un dossier persistant.

    L'ecriture passe par un fichier temporaire puis os.replace(): un lecteur
    voit soit l'ancien contenu, soit le nouveau.
    """

    def __init__(self, directory: str | Path = "./data/profile"):
        self._dir = Path(directory)
        self._dir.mkdir(parents=True, exist_ok=True)
        self._lock = RLock()

    @property
    def directory(self) -> Path:
        return self._dir

    def _path(self, key: str) -> Path:
        safe = "".join(c if c.isalnum() or c in "-_." else "_" for c in key)
        return self._dir / f"{safe}.json"

    def get(self, key: str) -> str | None:
        path = self._path(key)
        with self._lock:
            if not path.exists():
                return None
            return path.read_text(encoding="utf-8")

    def set(self, key: str, value: str) -> None:
        path = self._path(key)
        with self._lock:
            fd, tmp_name = tempfile.mkstemp(dir=self._dir, prefix=f".{path.stem}.", suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    f.write(value)
                os.replace(tmp_name, path)
            except BaseException:
                if os.path.exists(tmp_name):
                    os.remove(tmp_name)
                raise
