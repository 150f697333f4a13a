"""
Domain modeling building blocks: value objects, entities and aggregates.

All three are pydantic models sharing the camelCase wire format. Value
objects are frozen and compare by value. Entities compare by ``id`` and
change state only through ``@action`` methods. Aggregates additionally
declare ``@invariant`` checks that must hold after construction and after
every action.
"""

from __future__ import annotations

import functools
import logging
from datetime import datetime
from typing import Any, Callable, Dict, List, Type, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from botcatalog.core.errors import InvariantViolationError
from botcatalog.core.validation import validate

logger = logging.getLogger(__name__)

M = TypeVar("M", bound="DomainModel")
C = TypeVar("C", bound=Callable[..., Any])

_INVARIANT_MARK = "__botcatalog_invariant__"


class DomainModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    @classmethod
    def create(cls: Type[M], data: Any = None, **fields: Any) -> M:
        """Validate ``data`` (or keyword fields); raises SchemaValidationError."""
        payload = dict(data or {}, **fields)
        return validate(cls, payload).unwrap()

    @property
    def state(self) -> Dict[str, Any]:
        """A detached copy of the current state, keyed by attribute name."""
        return self.model_dump()


class ValueObject(DomainModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


def invariant(method: C) -> C:
    """Mark a method as an invariant check; it raises on violation."""
    setattr(method, _INVARIANT_MARK, True)
    return method


def action(method: C) -> C:
    """
    Wrap a state-changing method.

    The entity is restored to its previous state when the method raises or
    leaves an invariant broken. ``updated_at`` is refreshed only when the
    method actually changed something.
    """

    @functools.wraps(method)
    def wrapper(self: "Entity", *args: Any, **kwargs: Any) -> Any:
        snapshot = self.model_copy(deep=True)
        try:
            result = method(self, *args, **kwargs)
            self.check_invariants()
        except Exception:
            self._restore(snapshot)
            raise
        if self.__dict__ != snapshot.__dict__ and "updated_at" in type(self).model_fields:
            self.updated_at = datetime.now()
        return result

    return wrapper  # type: ignore[return-value]


class Entity(DomainModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, validate_assignment=True)

    id: str

    @classmethod
    def invariants(cls) -> List[Callable[["Entity"], None]]:
        checks: List[Callable[["Entity"], None]] = []
        for klass in reversed(cls.__mro__):
            for member in vars(klass).values():
                if getattr(member, _INVARIANT_MARK, False) and member not in checks:
                    checks.append(member)
        return checks

    def check_invariants(self) -> None:
        for check in self.invariants():
            check(self)

    def _restore(self, snapshot: "Entity") -> None:
        self.__dict__.update(snapshot.__dict__)
        logger.debug("%s %s rolled back", type(self).__name__, self.id)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Entity):
            return NotImplemented
        return type(self) is type(other) and self.id == other.id

    def __hash__(self) -> int:
        return hash((type(self), self.id))


class Aggregate(Entity):
    """Entity that owns a consistency boundary."""

    def model_post_init(self, __context: Any) -> None:
        self.check_invariants()


def violation(message: str) -> InvariantViolationError:
    return InvariantViolationError(message=message)
