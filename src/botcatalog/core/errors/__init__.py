"""
Unified error module.
"""

from .errors import (
    ErrorSeverity,
    BotCatalogError,
    SchemaValidationError,
    PortNotBoundError,
    InvariantViolationError,
    ConfigError,
    Result,
)

__all__ = [
    "ErrorSeverity",
    "BotCatalogError",
    "SchemaValidationError",
    "PortNotBoundError",
    "InvariantViolationError",
    "ConfigError",
    "Result",
]
