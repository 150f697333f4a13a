"""
Ports used by the bot-model use cases.

Data ports reach out to persistence; output ports report the outcome of a
use case to whoever drives it (CLI, API, tests).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Awaitable, Callable, List, Mapping, Union

from botcatalog.core.di import Port, create_port

if TYPE_CHECKING:
    from botcatalog.application.bot_models.schemas import SimpleStoreBotModelInput, StoreBotModelInput


@dataclass(frozen=True)
class BotModelStoredOutput:
    id: str
    name: str
    niche: str


@dataclass(frozen=True)
class BotModelValidationFailedOutput:
    errors: List[str] = field(default_factory=list)
    operation: str = ""


StoreBotModelPayload = Union["StoreBotModelInput", "SimpleStoreBotModelInput"]

StoreBotModel = Callable[[StoreBotModelPayload], Awaitable[Mapping[str, str]]]
BotModelStored = Callable[[BotModelStoredOutput], Awaitable[None]]
BotModelValidationFailed = Callable[[BotModelValidationFailedOutput], Awaitable[None]]

# Data ports
store_bot_model_port: Port[StoreBotModel] = create_port("store_bot_model")

# Output ports
bot_model_stored_out_port: Port[BotModelStored] = create_port("bot_model_stored")
bot_model_validation_failed_out_port: Port[BotModelValidationFailed] = create_port(
    "bot_model_validation_failed"
)
