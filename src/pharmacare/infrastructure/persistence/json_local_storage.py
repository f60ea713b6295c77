"""JSON-file-backed implementation of LocalStorage.

The whole store is one JSON object of string keys to string values,
rewritten in full on every ``set_item``.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pharmacare.domain.repository.local_storage import LocalStorage

logger = logging.getLogger(__name__)


class JsonLocalStorage(LocalStorage):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- LocalStorage interface -----------------------------------------------

    def get_item(self, key: str) -> str | None:
        value = self._load_raw().get(key)
        if value is not None and not isinstance(value, str):
            logger.warning("Ignoring non-string value for %r in %s", key, self._file_path)
            return None
        return value

    def set_item(self, key: str, value: str) -> None:
        records = self._load_raw()
        records[key] = value
        self._persist_raw(records)

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> dict[str, str]:
        try:
            records = json.loads(self._file_path.read_text(encoding="utf-8"))
        except ValueError:
            # Covers UnicodeDecodeError as well as JSONDecodeError.
            logger.warning("Local storage file %s is corrupt; treating as empty", self._file_path)
            return {}
        if not isinstance(records, dict):
            logger.warning("Local storage file %s is not an object; treating as empty", self._file_path)
            return {}
        return records

    def _persist_raw(self, records: dict[str, str]) -> None:
        self._file_path.write_text(
            json.dumps(records, indent=2, ensure_ascii=False) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("{}", encoding="utf-8")
