from enum import Enum


class DBType(str, Enum):
    """
    Value of the DB_TYPE environment variable.

    Only SQLite is implemented; other relational stores are not supported.
    """
    SQLITE = "sqlite"

    @classmethod
    def from_string(cls, value: str | None) -> 'DBType':
        """
        Convert DB_TYPE to DBType.

        Empty or missing values fall back to SQLITE. Anything else must
        match a member value exactly.

        Raises:
            ValueError: If value is not a known database type
        """
        if value is None or not value.strip():
            return cls.SQLITE
        return cls(value)
