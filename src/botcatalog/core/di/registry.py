"""
Port registry: binds adapters to ports and resolves them at call time.

The module-level helpers act on the *current* registry. By default that is
the process-wide ``Registry.instance()``; ``use_registry`` installs another
one for the current context (thread or asyncio task).
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, Callable, Dict, Iterator, Optional, TypeVar

from botcatalog.core.errors import PortNotBoundError

from .port import Port

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


class Registry:
    _instance: "Registry" | None = None

    def __init__(self) -> None:
        self._adapters: Dict[Port[Any], Callable[..., Any]] = {}

    @classmethod
    def instance(cls) -> "Registry":
        if cls._instance is None:
            cls._instance = Registry()
        return cls._instance

    def bind(self, port: Port[F], adapter: F) -> None:
        """Bind ``adapter`` to ``port``, replacing any previous binding."""
        if not callable(adapter):
            raise TypeError(f"Adapter for {port!r} must be callable, got {type(adapter).__name__}")
        replaced = port in self._adapters
        self._adapters[port] = adapter
        logger.debug("%s adapter for %r", "Replaced" if replaced else "Bound", port)

    def unbind(self, port: Port[Any]) -> None:
        self._adapters.pop(port, None)

    def resolve(self, port: Port[F]) -> F:
        """Return the adapter bound to ``port``."""
        try:
            return self._adapters[port]  # type: ignore[return-value]
        except KeyError:
            raise PortNotBoundError(context={"port": port}) from None

    def is_bound(self, port: Port[Any]) -> bool:
        return port in self._adapters

    def reset(self) -> None:
        """Drop every binding."""
        count = len(self._adapters)
        self._adapters.clear()
        logger.debug("Registry reset, %d binding(s) cleared", count)

    def bindings(self) -> Dict[Port[Any], Callable[..., Any]]:
        return dict(self._adapters)

    def __contains__(self, port: object) -> bool:
        return port in self._adapters

    def __len__(self) -> int:
        return len(self._adapters)


_current: ContextVar[Optional[Registry]] = ContextVar("botcatalog_registry", default=None)


def current_registry() -> Registry:
    # an empty Registry is falsy, so test against None
    registry = _current.get()
    return registry if registry is not None else Registry.instance()


@contextmanager
def use_registry(registry: Optional[Registry] = None) -> Iterator[Registry]:
    """
    Make ``registry`` (a fresh one if omitted) current until the block exits.

    Tasks created inside the block inherit it, since asyncio copies the
    context on task creation.
    """
    registry = registry if registry is not None else Registry()
    token = _current.set(registry)
    try:
        yield registry
    finally:
        _current.reset(token)


def set_port_adapter(port: Port[F], adapter: F) -> None:
    current_registry().bind(port, adapter)


def use_port(port: Port[F]) -> F:
    return current_registry().resolve(port)


def reset_di() -> None:
    current_registry().reset()
