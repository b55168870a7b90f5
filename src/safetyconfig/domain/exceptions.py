"""Exceptions raised while building safety center configuration objects."""

from enum import Enum


class ValidationReason(str, Enum):
    """Why a single attribute failed validation."""

    MISSING = "missing"
    EMPTY = "empty"
    PROHIBITED = "prohibited"
    INVALID = "invalid"
    OUT_OF_RANGE = "out_of_range"


class ConfigError(Exception):
    """Base class for all configuration errors."""
    pass


class InvalidConfigError(ConfigError, ValueError):
    """Raised when a single attribute fails a presence, format or range check."""

    _MESSAGES = {
        ValidationReason.MISSING: "Required attribute {name} missing",
        ValidationReason.EMPTY: "Attribute {name} may not be empty",
        ValidationReason.PROHIBITED: "Prohibited attribute {name} present",
        ValidationReason.INVALID: "Required attribute {name} invalid",
        ValidationReason.OUT_OF_RANGE: "Attribute {name} invalid",
    }

    def __init__(self, field_name: str, reason: ValidationReason):
        self.field_name = field_name
        self.reason = reason
        super().__init__(self._MESSAGES[reason].format(name=field_name))


class IllegalStateError(ConfigError):
    """Raised when a composition rule spanning several attributes is violated."""
    pass


class InvalidArgumentError(ConfigError, ValueError):
    """Raised when a builder method receives an argument it cannot accept."""
    pass
