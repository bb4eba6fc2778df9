from __future__ import annotations
import json
import logging
import os
import tempfile
from typing import Any, Dict

from .errors import IOCorruptionError

logger = logging.getLogger(__name__)

FORMAT_TAG = "ejt1"
FORMAT_KEY = "format"
TABLES_KEY = "tables"

class FileStorage:
    """
    Whole-document JSON I/O for databases living under one data directory.
    File layout: <data_path>/<name>.json holding {"format": "ejt1", "tables": {...}}.
    No locking: one writer per file is assumed.
    """
    def __init__(self, data_path: str) -> None:
        self.data_path = data_path
        self._ensure_dir()

    def _ensure_dir(self) -> None:
        if not os.path.isdir(self.data_path):
            os.makedirs(self.data_path, exist_ok=True)
            logger.debug("created data directory %s", self.data_path)

    def database_path(self, name: str) -> str:
        self._ensure_dir()
        return os.path.join(self.data_path, f"{name}.json")

    def exists(self, path: str) -> bool:
        return os.path.isfile(path)

    def read_document(self, path: str) -> Dict[str, Any]:
        """
        Return the table document stored at `path`. A missing file is created empty.
        Bare documents without the format envelope are accepted as-is.
        """
        if not self.exists(path):
            self.write_document(path, {})
            logger.debug("initialized empty database file %s", path)
            return {}
        with open(path, "r", encoding="utf-8") as f:
            try:
                raw = json.load(f)
            except json.JSONDecodeError as e:
                raise IOCorruptionError(f"{path}: invalid JSON: {e}") from e
        return self._unwrap(raw, path)

    def write_document(self, path: str, document: Dict[str, Any]) -> None:
        """
        Serialize the whole document into a temp file next to `path`, then atomically replace `path`.
        """
        envelope = {FORMAT_KEY: FORMAT_TAG, TABLES_KEY: document}
        directory = os.path.dirname(path) or "."
        fd, tmp_path = tempfile.mkstemp(prefix=".tmp-", suffix=".json", dir=directory)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(envelope, f, indent=2, ensure_ascii=False, allow_nan=False)
                f.write("\n")
                f.flush()
                os.fsync(f.fileno())
            self.replace_file(tmp_path, path)
        except BaseException:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise
        logger.debug("wrote %d table(s) to %s", len(document), path)

    def replace_file(self, tmp_path: str, path: str) -> None:
        os.replace(tmp_path, path)

    @staticmethod
    def _unwrap(raw: Any, path: str) -> Dict[str, Any]:
        if not isinstance(raw, dict):
            raise IOCorruptionError(f"{path}: top-level JSON value must be an object")
        if FORMAT_KEY not in raw:
            return raw
        if raw[FORMAT_KEY] != FORMAT_TAG:
            raise IOCorruptionError(f"{path}: unsupported format {raw[FORMAT_KEY]!r}")
        tables = raw.get(TABLES_KEY, {})
        if not isinstance(tables, dict):
            raise IOCorruptionError(f"{path}: 'tables' must be an object")
        return tables
