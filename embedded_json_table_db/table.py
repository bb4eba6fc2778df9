from __future__ import annotations
from collections.abc import Mapping
from typing import Any, Dict, List, Optional

from .errors import IOCorruptionError
from .utils import deep_copy, now_iso

DEFAULT_PRIMARY_KEY = "id"
TIMESTAMP_COLUMNS = ("createdAt", "updatedAt")

class Table:
    """
    One table: metadata, column schema and rows. No persistence and no validation here;
    Database validates columns before construction and records after add_record().

        Table({"name": "string", "age": "number"},
              {"primaryKey": "userId", "createdAt": True, "autoIncrement": True})
    """

    def __init__(self, columns: Mapping[str, str], options: Optional[Mapping[str, Any]] = None) -> None:
        options = options or {}
        self._metadata: Dict[str, Any] = {
            "lastId": 0,
            "primaryKey": options.get("primaryKey") or DEFAULT_PRIMARY_KEY,
            "autoIncrement": bool(options.get("autoIncrement", False)),
            "createdAt": now_iso(),
        }
        self._columns: Dict[str, str] = dict(columns)
        self._data: List[Dict[str, Any]] = []
        for col in TIMESTAMP_COLUMNS:
            if options.get(col):
                self._columns[col] = "date"

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Table":
        """
        Rebuild a working table from a stored table record. The stored record is not aliased.
        """
        if not isinstance(record, Mapping):
            raise IOCorruptionError("table record must be an object")
        metadata = record.get("metadata")
        columns = record.get("columns")
        data = record.get("data")
        if not isinstance(metadata, Mapping) or not isinstance(columns, Mapping) or not isinstance(data, list):
            raise IOCorruptionError("table record must contain metadata, columns and data")
        for key in ("lastId", "primaryKey", "autoIncrement", "createdAt"):
            if key not in metadata:
                raise IOCorruptionError(f"table metadata is missing {key!r}")

        table = cls.__new__(cls)
        table._metadata = deep_copy(dict(metadata))
        table._columns = dict(columns)
        table._data = deep_copy(data)
        return table

    @property
    def columns(self) -> Dict[str, str]:
        return dict(self._columns)

    @property
    def metadata(self) -> Dict[str, Any]:
        return dict(self._metadata)

    @property
    def data(self) -> List[Dict[str, Any]]:
        return deep_copy(self._data)

    @property
    def primary_key(self) -> str:
        return self._metadata["primaryKey"]

    def add_record(self, record: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Append a shallow copy of `record`, stamped with timestamps and an auto-increment key
        where the table asks for them. Returns the stored record.
        """
        new_record = dict(record)
        current_time = now_iso()

        for col in TIMESTAMP_COLUMNS:
            if col in self._columns and col not in new_record:
                new_record[col] = current_time

        pk = self._metadata["primaryKey"]
        if self._metadata["autoIncrement"] and pk not in new_record:
            self._metadata["lastId"] += 1
            new_record[pk] = self._metadata["lastId"]

        self._data.append(new_record)
        return new_record

    def to_record(self) -> Dict[str, Any]:
        return {
            "metadata": dict(self._metadata),
            "columns": dict(self._columns),
            "data": deep_copy(self._data),
        }

    def __len__(self) -> int:
        return len(self._data)
