"""
Schema validation on top of pydantic.

``validate`` never raises for bad input: it returns ``Result.ok(model)`` or
``Result.err(SchemaValidationError)`` carrying one message per violated rule,
in the order pydantic reports them (field declaration order).

Rule helpers attach human-readable messages to fields. A field built with
``required_text``/``slug_text`` also reports its message when it is missing
altogether; other failures fall back to pydantic's wording prefixed with the
dotted input path.
"""

import inspect
import logging
import re
import uuid
from typing import Annotated, Any, Optional, Sequence, Type, TypeVar, Union, get_args

from pydantic import AfterValidator, BaseModel, Field
from pydantic import ValidationError as PydanticValidationError
from pydantic.fields import FieldInfo
from pydantic_core import PydanticCustomError

from botcatalog.core.errors import Result, SchemaValidationError

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)

RULE_ERROR = "schema_rule"
REQUIRED_MESSAGE_KEY = "required_message"

SLUG_PATTERN = re.compile(r"[a-z0-9-]+")


def _rule_failed(message: str) -> PydanticCustomError:
    return PydanticCustomError(RULE_ERROR, message)


def required_text(message: str) -> Any:
    """A non-empty string; ``message`` is reported when empty or missing."""

    def check(value: str) -> str:
        if len(value) < 1:
            raise _rule_failed(message)
        return value

    return Annotated[str, Field(json_schema_extra={REQUIRED_MESSAGE_KEY: message}), AfterValidator(check)]


def slug_text(message: str) -> Any:
    """A lowercase slug (letters, digits, hyphens)."""

    def check(value: str) -> str:
        if not SLUG_PATTERN.fullmatch(value):
            raise _rule_failed(message)
        return value

    return Annotated[str, Field(json_schema_extra={REQUIRED_MESSAGE_KEY: message}), AfterValidator(check)]


def pattern_text(pattern: str, message: str) -> Any:
    compiled = re.compile(pattern)

    def check(value: str) -> str:
        if not compiled.fullmatch(value):
            raise _rule_failed(message)
        return value

    return Annotated[str, AfterValidator(check)]


def uuid_text(message: str = "Invalid UUID") -> Any:
    def check(value: str) -> str:
        try:
            uuid.UUID(value)
        except ValueError:
            raise _rule_failed(message) from None
        return value

    return Annotated[str, AfterValidator(check)]


def validate(schema: Type[M], data: Any) -> Result[M, SchemaValidationError]:
    try:
        return Result.ok(schema.model_validate(data))
    except PydanticValidationError as exc:
        issues = collect_issues(schema, exc)
        logger.debug("%s rejected input with %d issue(s)", schema.__name__, len(issues))
        return Result.err(
            SchemaValidationError(
                message=f"{schema.__name__} validation failed",
                issues=issues,
                context={"schema": schema.__name__},
            )
        )


def collect_issues(schema: Type[BaseModel], exc: PydanticValidationError) -> list[str]:
    issues = []
    for error in exc.errors():
        loc = error.get("loc", ())
        if error["type"] == RULE_ERROR:
            issues.append(error["msg"])
            continue
        if error["type"] == "missing":
            message = _required_message(schema, loc)
            if message:
                issues.append(message)
                continue
        path = _dotted(loc)
        issues.append(f"{path}: {error['msg']}" if path else error["msg"])
    return issues


def _dotted(loc: Sequence[Union[str, int]]) -> str:
    return ".".join(str(part) for part in loc)


def _required_message(schema: Type[BaseModel], loc: Sequence[Union[str, int]]) -> Optional[str]:
    model: Optional[Type[BaseModel]] = schema
    info: Optional[FieldInfo] = None
    for key in loc:
        if model is None or not isinstance(key, str):
            return None
        info = _find_field(model, key)
        if info is None:
            return None
        model = _nested_model(info.annotation)
    if info is None or not isinstance(info.json_schema_extra, dict):
        return None
    message = info.json_schema_extra.get(REQUIRED_MESSAGE_KEY)
    return message if isinstance(message, str) else None


def _find_field(model: Type[BaseModel], key: str) -> Optional[FieldInfo]:
    for name, info in model.model_fields.items():
        if key == name or key == info.alias:
            return info
    return None


def _nested_model(annotation: Any) -> Optional[Type[BaseModel]]:
    if inspect.isclass(annotation) and issubclass(annotation, BaseModel):
        return annotation
    for arg in get_args(annotation):
        found = _nested_model(arg)
        if found is not None:
            return found
    return None
