"""
Dependency injection: ports, the binding registry and its resolver.
"""

from .port import Port, create_port
from .registry import (
    Registry,
    current_registry,
    use_registry,
    set_port_adapter,
    use_port,
    reset_di,
)

__all__ = [
    "Port",
    "create_port",
    "Registry",
    "current_registry",
    "use_registry",
    "set_port_adapter",
    "use_port",
    "reset_di",
]
