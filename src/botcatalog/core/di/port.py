"""
Ports: typed identity tokens for capabilities that adapters fulfil.
"""

from __future__ import annotations

from typing import Any, Callable, Generic, Optional, TypeVar

F = TypeVar("F", bound=Callable[..., Any])


class Port(Generic[F]):
    """
    A capability slot.

    ``F`` is the adapter signature and exists for type checkers only. Ports
    compare and hash by identity: two ports with the same signature (or the
    same name) are never interchangeable.
    """

    __slots__ = ("_name",)

    def __init__(self, name: Optional[str] = None) -> None:
        self._name = name

    @property
    def name(self) -> Optional[str]:
        return self._name

    def use(self) -> F:
        """Same as ``use_port(self)``."""
        from .registry import use_port

        return use_port(self)

    def __repr__(self) -> str:
        label = self._name or "anonymous"
        return f"<Port {label} at {id(self):#x}>"


def create_port(name: Optional[str] = None) -> Port[Any]:
    """
    Allocate a fresh port.

    Usage:
        greeting_port: Port[Callable[[str], Awaitable[str]]] = create_port("greeting")
    """
    return Port(name)
