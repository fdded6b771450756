"""
File-backed key/value store standing in for browser local storage.

Values are strings, the whole store is one JSON object on disk, and every
write rewrites the file. Good enough for a single demo user.
"""
from __future__ import annotations

import json
import logging
import os
import tempfile
from typing import Dict, Optional


logger = logging.getLogger(__name__)


class LocalStorage:
    """
    Minimal get/set/remove store persisted as a JSON file.

    A missing or unreadable file is treated as an empty store.
    """

    def __init__(self, path: str):
        if not path:
            raise ValueError("storage path cannot be empty")
        self.path = path

    def _read_all(self) -> Dict[str, str]:
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as fh:
                data = json.load(fh)
        except (OSError, json.JSONDecodeError):
            logger.warning("Local storage file %s is unreadable; starting empty", self.path, exc_info=True)
            return {}
        if not isinstance(data, dict):
            logger.warning("Local storage file %s does not hold an object; starting empty", self.path)
            return {}
        return {str(k): str(v) for k, v in data.items()}

    def _write_all(self, data: Dict[str, str]) -> None:
        directory = os.path.dirname(os.path.abspath(self.path))
        os.makedirs(directory, exist_ok=True)
        # Write to a sibling temp file and swap it in so readers never see half a file
        fd, tmp_path = tempfile.mkstemp(dir=directory, suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(data, fh)
            os.replace(tmp_path, self.path)
        except OSError:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise

    def get_item(self, key: str) -> Optional[str]:
        return self._read_all().get(key)

    def set_item(self, key: str, value: str) -> None:
        data = self._read_all()
        data[key] = value
        self._write_all(data)

    def remove_item(self, key: str) -> None:
        data = self._read_all()
        if data.pop(key, None) is not None:
            self._write_all(data)

    def clear(self) -> None:
        self._write_all({})


__all__ = ["LocalStorage"]
