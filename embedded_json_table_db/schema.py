from __future__ import annotations
from collections.abc import Mapping
from typing import Any, Dict

from .errors import NotFoundError, SchemaError, ValidationError
from .utils import is_json_value, is_number, parse_iso

VALID_TYPES = ("string", "number", "boolean", "date")

def validate_column_type(name: str, col_type: Any) -> None:
    if not isinstance(col_type, str) or col_type.lower() not in VALID_TYPES:
        raise SchemaError(
            f"Invalid column {name} type: {col_type!r}. Valid types are: {', '.join(VALID_TYPES)}"
        )

def validate_columns(columns: Any) -> None:
    """
    Columns must be a flat mapping {column name: type token}.
    """
    if not isinstance(columns, Mapping):
        raise SchemaError("Columns must be a mapping with column names as keys and data types as values.")
    for name, col_type in columns.items():
        if not isinstance(name, str) or not name:
            raise SchemaError(f"Column name must be a non-empty string, got {name!r}")
        validate_column_type(name, col_type)

def canonicalize_columns(columns: Mapping[str, str]) -> Dict[str, str]:
    return {name: col_type.lower() for name, col_type in columns.items()}

def validate_primary_key(columns: Mapping[str, Any], primary_key: Any) -> None:
    if not isinstance(primary_key, str) or primary_key not in columns:
        raise SchemaError(f"Primary key {primary_key!r} is not defined in columns.")

def validate_table_exists(document: Mapping[str, Any], table_name: str) -> None:
    if table_name not in document:
        raise NotFoundError(f"Table {table_name} does not exist.")

def validate_record(columns: Mapping[str, str], record: Any) -> None:
    """
    Check that every declared column is present in `record` with a value of the declared type.
    Keys that are not declared columns are not type-checked, but every key must be a string
    and every value must be plain JSON so the record reloads unchanged.
    """
    if not isinstance(record, Mapping):
        raise ValidationError(f"Record must be a mapping, got {type(record).__name__}")
    for key, value in record.items():
        if not isinstance(key, str):
            raise ValidationError(f"Record keys must be strings, got {key!r}")
        if not is_json_value(value):
            raise ValidationError(f"Value of {key} is not a JSON value: {value!r}")
    for name, col_type in columns.items():
        if name not in record:
            raise ValidationError(f"Missing column {name} in the record.")
        _validate_value(name, col_type, record[name])

def _validate_value(name: str, col_type: str, value: Any) -> None:
    if col_type == "string":
        if not isinstance(value, str):
            raise ValidationError(f"Column {name} must be a string.")
    elif col_type == "number":
        if not is_number(value):
            raise ValidationError(f"Column {name} must be a number.")
    elif col_type == "boolean":
        if not isinstance(value, bool):
            raise ValidationError(f"Column {name} must be a boolean.")
    elif col_type == "date":
        if not isinstance(value, str):
            raise ValidationError(f"Column {name} must be a valid date.")
        try:
            parse_iso(value)
        except ValueError:
            raise ValidationError(f"Column {name} must be a valid date.") from None
    else:
        raise SchemaError(f"Unknown column type {col_type} for column {name}.")
