from __future__ import annotations
from collections.abc import Mapping
from typing import Any, Dict, List, Optional

from .errors import AlreadyExistsError, IOCorruptionError, SchemaError, ValidationError
from .progress import Progress, ProgressCallback
from .schema import (
    canonicalize_columns,
    validate_columns,
    validate_primary_key,
    validate_record,
    validate_table_exists,
)
from .storage import FileStorage
from .table import DEFAULT_PRIMARY_KEY, Table
from .utils import deep_copy

DEFAULT_DB_NAME = "defaultDB"
DEFAULT_DATA_PATH = "data"
DEFAULT_COLUMNS = {"id": "number"}

class Database:
    """
    A named set of tables persisted as one JSON document under `data_path`.

    Every mutation (create_table/insert/drop_table) rewrites the whole file once.
    Reads are served from the in-memory document loaded at construction; changes made
    to the file by anyone else are not seen until a new instance is created.
    There is no locking: two instances on the same file will overwrite each other.
    """

    def __init__(
        self,
        name: str = DEFAULT_DB_NAME,
        data_path: str = DEFAULT_DATA_PATH,
        *,
        on_progress: Optional[ProgressCallback] = None,
    ) -> None:
        self.name = name
        self._fs = FileStorage(data_path)
        self._progress = Progress(on_progress)
        self.path = self._fs.database_path(name)
        self._tables: Dict[str, Dict[str, Any]] = {}
        self._open()

    def _open(self) -> None:
        self._progress.start("open", self.path)
        document = self._fs.read_document(self.path)
        for table_name, record in document.items():
            try:
                Table.from_record(record)
            except IOCorruptionError as e:
                raise IOCorruptionError(f"{self.path}: table {table_name}: {e}") from e
        self._tables = document
        self._progress.done("open", f"{len(self._tables)} table(s)")

    def create_table(
        self,
        name: str,
        columns: Optional[Mapping[str, str]] = None,
        options: Optional[Mapping[str, Any]] = None,
    ) -> Dict[str, Any]:
        """
        Create table `name` with `columns` ({column: "string"|"number"|"boolean"|"date"}).
        options: primaryKey (default "id"), autoIncrement, createdAt, updatedAt.
        All checks run before anything is stored.
        """
        if not isinstance(name, str) or not name:
            raise SchemaError(f"Table name must be a non-empty string, got {name!r}")
        if name in self._tables:
            raise AlreadyExistsError(f"Table {name} already exists.")
        if columns is None:
            columns = DEFAULT_COLUMNS
        options = options or {}

        validate_columns(columns)
        validate_primary_key(columns, options.get("primaryKey") or DEFAULT_PRIMARY_KEY)

        table = Table(canonicalize_columns(columns), options)
        self._commit({**self._tables, name: table.to_record()})
        return table.to_record()

    def insert(self, name: str, record: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Stamp, auto-number and validate `record`, then append it to table `name` and persist.
        A record that fails validation leaves both the document and the file untouched.
        """
        validate_table_exists(self._tables, name)
        if not isinstance(record, Mapping):
            raise ValidationError(f"Record must be a mapping, got {type(record).__name__}")

        table = Table.from_record(self._tables[name])
        new_record = table.add_record(record)
        validate_record(table.columns, new_record)

        self._commit({**self._tables, name: table.to_record()})
        return dict(new_record)

    def get_all(self, name: str) -> Dict[str, Any]:
        validate_table_exists(self._tables, name)
        return deep_copy(self._tables[name])

    def get_table_names(self) -> List[str]:
        return list(self._tables.keys())

    def has_table(self, name: str) -> bool:
        return name in self._tables

    def drop_table(self, name: str) -> bool:
        validate_table_exists(self._tables, name)
        self._commit({k: v for k, v in self._tables.items() if k != name})
        return True

    def _commit(self, document: Dict[str, Dict[str, Any]]) -> None:
        # The in-memory document is swapped only after the file write succeeded
        self._progress.start("save", self.path)
        self._fs.write_document(self.path, document)
        self._tables = document
        self._progress.done("save", f"{len(document)} table(s)")

    def __repr__(self) -> str:
        return f"Database(name={self.name!r}, path={self.path!r}, tables={self.get_table_names()!r})"
