"""Configuration error definitions."""

from typing import Any, Iterable


class ConfigError(Exception):
    """Base exception for configuration errors."""
    pass


class InvalidConfigValue(ConfigError):
    """Exception raised when a configuration key holds an unaccepted value."""

    def __init__(self, field: str, value: Any, accepted: Iterable[str]):
        self.field = field
        self.value = value
        self.accepted = tuple(accepted)

        message = (
            f"Invalid value {value!r} for '{field}': "
            f"expected one of {', '.join(self.accepted)}"
        )
        super().__init__(message)
