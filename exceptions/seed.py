"""
Seed-related exceptions.
"""

from .base import TechMartException


class SeedException(TechMartException):
    """Base exception for seed data errors."""
    pass


class CredentialSeedException(SeedException):
    """Raised when the demo admin user cannot be hashed or inserted."""

    def __init__(self, username: str, reason: str):
        super().__init__(
            f"Failed to create demo user '{username}': {reason}",
            details={'username': username, 'reason': reason}
        )
        self.username = username
        self.reason = reason


class CatalogSeedException(SeedException):
    """Raised when the item catalog cannot be written."""

    def __init__(self, step: str, reason: str):
        super().__init__(
            f"Failed to seed item catalog ({step}): {reason}",
            details={'step': step, 'reason': reason}
        )
        self.step = step
        self.reason = reason


class InvalidCatalogException(SeedException):
    """Raised when the catalog file is missing, malformed or fails validation."""

    def __init__(self, path: str, reason: str):
        super().__init__(
            f"Invalid catalog file {path}: {reason}",
            details={'path': path, 'reason': reason}
        )
        self.path = path
        self.reason = reason
