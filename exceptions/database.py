"""
Database-related exceptions.
"""

from .base import TechMartException


class DatabaseException(TechMartException):
    """Base exception for store configuration, connection and schema errors."""
    pass


class UnsupportedDatabaseTypeException(DatabaseException):
    """Raised when DB_TYPE names a backend other than SQLite."""

    def __init__(self, db_type: str):
        super().__init__(
            f"Unsupported DB_TYPE '{db_type}': only SQLite is currently supported",
            details={'db_type': db_type}
        )
        self.db_type = db_type


class DatabaseConnectionException(DatabaseException):
    """Raised when the store cannot be opened."""

    def __init__(self, location: str, reason: str):
        super().__init__(
            f"Failed to connect to database {location}: {reason}",
            details={'location': location, 'reason': reason}
        )
        self.location = location
        self.reason = reason


class SchemaMigrationException(DatabaseException):
    """Raised when a table cannot be reconciled with its declared model."""

    def __init__(self, table: str, reason: str):
        super().__init__(
            f"Failed to migrate table '{table}': {reason}",
            details={'table': table, 'reason': reason}
        )
        self.table = table
        self.reason = reason


class StoreNotInitializedException(DatabaseException):
    """Raised when the process-wide store is read before init_db() published it."""

    def __init__(self):
        super().__init__("Database store is not initialized, call init_db() first")


class StoreAlreadyInitializedException(DatabaseException):
    """Raised when a second store is published in the same process."""

    def __init__(self):
        super().__init__("Database store is already initialized for this process")
