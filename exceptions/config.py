"""
Configuration-related exceptions.
"""

from .base import TechMartException


class InvalidSettingException(TechMartException):
    """Raised when an environment setting has a value outside its allowed set."""

    def __init__(self, name: str, value: str, allowed: list[str]):
        super().__init__(
            f"Invalid {name}='{value}', expected one of: {', '.join(allowed)}",
            details={'name': name, 'value': value}
        )
        self.name = name
        self.value = value
        self.allowed = allowed
