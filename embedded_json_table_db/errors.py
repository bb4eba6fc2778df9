from __future__ import annotations

class DBError(Exception):
    """Base class for all errors raised by embedded_json_table_db."""

class SchemaError(DBError):
    """Malformed column declaration, unknown type token or bad primary key."""

class AlreadyExistsError(DBError):
    """Table name collision at creation time."""

class NotFoundError(DBError):
    """Operation addressed a table that is not in the document."""

class ValidationError(DBError):
    """Record does not satisfy its table's column schema."""

class IOCorruptionError(DBError):
    """Persisted document cannot be parsed or has an unexpected shape."""
