"""
Store a bot model using the reduced schema, without building domain objects.
"""

from __future__ import annotations

import logging
from typing import Any

from botcatalog.application.ports import (
    BotModelStoredOutput,
    bot_model_stored_out_port,
    store_bot_model_port,
)
from botcatalog.core.di import use_port
from botcatalog.core.validation import validate

from .schemas import SimpleStoreBotModelInput
from .store_bot_model import OPERATION, report_validation_failure

logger = logging.getLogger(__name__)


async def simple_store_bot_model(raw: Any) -> None:
    outcome = validate(SimpleStoreBotModelInput, raw)
    if not outcome.is_ok():
        await report_validation_failure(outcome.unwrap_err(), OPERATION)
        return
    payload = outcome.unwrap()

    store = use_port(store_bot_model_port)
    bot_model_stored = use_port(bot_model_stored_out_port)

    result = await store(payload)

    logger.info("Stored bot model %s (%s)", result["id"], payload.name)
    await bot_model_stored(BotModelStoredOutput(id=result["id"], name=payload.name, niche=payload.niche.name))
