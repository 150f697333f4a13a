"""
Store a bot model.

Flow: validate input -> build domain objects -> store -> notify. Invalid
input is reported through the validation-failed output port and the use
case returns normally; every other error propagates to the caller.
"""

from __future__ import annotations

import logging
from typing import Any
from uuid import uuid4

from botcatalog.application.ports import (
    BotModelStoredOutput,
    BotModelValidationFailedOutput,
    bot_model_stored_out_port,
    bot_model_validation_failed_out_port,
    store_bot_model_port,
)
from botcatalog.core.di import use_port
from botcatalog.core.errors import SchemaValidationError
from botcatalog.core.validation import validate
from botcatalog.domain import BotModel, Niche, TechnicalSpecification

from .schemas import StoreBotModelInput

logger = logging.getLogger(__name__)

OPERATION = "storeBotModel"


async def report_validation_failure(error: SchemaValidationError, operation: str = OPERATION) -> None:
    logger.info("%s rejected: %s", operation, "; ".join(error.issues))
    validation_failed = use_port(bot_model_validation_failed_out_port)
    await validation_failed(BotModelValidationFailedOutput(errors=list(error.issues), operation=operation))


async def store_bot_model(raw: Any) -> None:
    outcome = validate(StoreBotModelInput, raw)
    if not outcome.is_ok():
        await report_validation_failure(outcome.unwrap_err())
        return
    payload = outcome.unwrap()

    store = use_port(store_bot_model_port)
    bot_model_stored = use_port(bot_model_stored_out_port)

    niche = Niche.create(payload.niche.model_dump(exclude_none=True))
    technical_specification = TechnicalSpecification.create(
        payload.technical_specification.model_dump(exclude_none=True)
    )
    bot_model = BotModel.create(
        id=str(uuid4()),
        name=payload.name,
        description=payload.description,
        slug=payload.slug,
        niche=niche,
        technical_specification=technical_specification,
        target_audience=payload.target_audience,
        key_features=payload.key_features,
        use_cases=payload.use_cases,
        pricing_model=payload.pricing_model,
        tags=payload.tags,
    )

    result = await store(payload)

    logger.info("Stored bot model %s (%s)", result["id"], bot_model.name)
    await bot_model_stored(
        BotModelStoredOutput(
            id=result["id"],
            name=bot_model.name,
            niche=bot_model.niche.name,
        )
    )
