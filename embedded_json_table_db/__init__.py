from .database import Database
from .table import Table
from .storage import FileStorage
from .schema import VALID_TYPES
from .errors import (
    DBError,
    SchemaError,
    AlreadyExistsError,
    NotFoundError,
    ValidationError,
    IOCorruptionError,
)

__all__ = [
    "Database",
    "Table",
    "FileStorage",
    "VALID_TYPES",
    "DBError",
    "SchemaError",
    "AlreadyExistsError",
    "NotFoundError",
    "ValidationError",
    "IOCorruptionError",
]
