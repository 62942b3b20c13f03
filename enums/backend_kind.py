from enum import Enum


class BackendKind(str, Enum):
    """Storage backend family a DB_TYPE resolves to."""
    EMBEDDED_FILE = "embedded-file"  # single-file store next to the process (SQLite)
