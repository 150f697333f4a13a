"""
Core layer: dependency injection, errors, validation and modeling helpers.
"""

from .di import (
    Port,
    create_port,
    Registry,
    current_registry,
    use_registry,
    set_port_adapter,
    use_port,
    reset_di,
)
from .errors import (
    ErrorSeverity,
    BotCatalogError,
    SchemaValidationError,
    PortNotBoundError,
    InvariantViolationError,
    ConfigError,
    Result,
)
from .validation import validate

__all__ = [
    # dependency injection
    "Port",
    "create_port",
    "Registry",
    "current_registry",
    "use_registry",
    "set_port_adapter",
    "use_port",
    "reset_di",
    # errors
    "ErrorSeverity",
    "BotCatalogError",
    "SchemaValidationError",
    "PortNotBoundError",
    "InvariantViolationError",
    "ConfigError",
    "Result",
    # validation
    "validate",
]
