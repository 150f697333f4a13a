"""
Unified errors and a Result wrapper, so callers can branch on expected
failures instead of catching them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Generic, List, TypeVar, Union, cast


class ErrorSeverity(Enum):
    WARNING = "warning"      # caller can continue
    ERROR = "error"          # operation failed
    CRITICAL = "critical"    # wiring/setup bug


@dataclass
class BotCatalogError(Exception):
    message: str
    severity: ErrorSeverity = ErrorSeverity.ERROR
    code: str = "UNKNOWN"
    context: Dict[str, Any] | None = None

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


@dataclass
class SchemaValidationError(BotCatalogError):
    """Input did not satisfy a schema. ``issues`` keeps every message in order."""

    message: str = "Schema validation failed"
    severity: ErrorSeverity = ErrorSeverity.WARNING
    code: str = "VALIDATION_ERROR"
    issues: List[str] = field(default_factory=list)


@dataclass
class PortNotBoundError(BotCatalogError):
    message: str = "No implementation found for the port"
    severity: ErrorSeverity = ErrorSeverity.CRITICAL
    code: str = "PORT_NOT_BOUND"


@dataclass
class InvariantViolationError(BotCatalogError):
    message: str = "Invariant violated"
    code: str = "INVARIANT_VIOLATION"


@dataclass
class ConfigError(BotCatalogError):
    message: str = "Invalid configuration"
    severity: ErrorSeverity = ErrorSeverity.CRITICAL
    code: str = "CONFIG_ERROR"


T = TypeVar("T")
E = TypeVar("E", bound=BotCatalogError)


@dataclass
class Result(Generic[T, E]):
    """Functional result wrapper: either a value or an error, never both."""

    _value: Union[T, E]
    _is_ok: bool

    @classmethod
    def ok(cls, value: T) -> "Result[T, E]":
        return cls(_value=value, _is_ok=True)

    @classmethod
    def err(cls, error: E) -> "Result[T, E]":
        return cls(_value=error, _is_ok=False)

    def is_ok(self) -> bool:
        return self._is_ok

    def unwrap(self) -> T:
        if not self._is_ok:
            raise cast(E, self._value)
        return cast(T, self._value)

    def unwrap_err(self) -> E:
        if self._is_ok:
            raise ValueError("Called unwrap_err() on an ok result")
        return cast(E, self._value)

    def unwrap_or(self, default: T) -> T:
        return cast(T, self._value) if self._is_ok else default

    def map(self, fn) -> "Result[T, E]":
        if self._is_ok:
            return Result.ok(fn(self._value))  # type: ignore[arg-type]
        return self
