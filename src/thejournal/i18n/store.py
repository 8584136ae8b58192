"""Key-value stores for the persisted language preference."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Protocol

from thejournal.errors import PreferenceStoreError

logger = logging.getLogger("thejournal.i18n.store")


class PreferenceStore(Protocol):
    def get(self, key: str) -> str | None:  # pragma: no cover - structural protocol
        """Return the stored value for *key*, or ``None`` when absent."""

    def set(self, key: str, value: str) -> None:  # pragma: no cover - structural protocol
        """Store *value* under *key*, replacing any previous value."""


class MemoryPreferenceStore:
    """Dict-backed store; lives as long as the object does."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._values: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value


class JsonFilePreferenceStore:
    """Preferences kept as a flat JSON object on disk.

    A missing file reads as empty. Unreadable files, malformed JSON and
    failed writes raise :class:`PreferenceStoreError`.
    """

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def get(self, key: str) -> str | None:
        value = self._load().get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        data = self._load()
        data[key] = value
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(data, ensure_ascii=False, indent=2) + "\n", encoding="utf-8")
        except OSError as e:
            raise PreferenceStoreError(f"Failed writing preferences: {self.path}") from e
        logger.debug("stored %s=%s in %s", key, value, self.path)

    def _load(self) -> dict[str, object]:
        try:
            raw = self.path.read_bytes().decode("utf-8")
        except FileNotFoundError:
            return {}
        except OSError as e:
            raise PreferenceStoreError(f"Failed reading preferences: {self.path}") from e
        except UnicodeDecodeError as e:
            raise PreferenceStoreError(f"Preferences are not valid UTF-8: {self.path}") from e

        if not raw.strip():
            return {}

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise PreferenceStoreError(f"Invalid JSON in {self.path}: {e}") from e

        if not isinstance(data, dict):
            raise PreferenceStoreError(f"Expected a JSON object in {self.path}.")
        return data
