from __future__ import annotations

import logging
from typing import Dict, List
from uuid import uuid4

from botcatalog.application.ports.bot_model_ports import StoreBotModelPayload

logger = logging.getLogger(__name__)


class DryRunBotModelStore:
    """Assigns ids without persisting anything; keeps what it was given for inspection."""

    def __init__(self) -> None:
        self.received: List[StoreBotModelPayload] = []

    async def __call__(self, payload: StoreBotModelPayload) -> Dict[str, str]:
        self.received.append(payload)
        bot_model_id = str(uuid4())
        logger.debug("Dry run: would store %s as %s", payload.slug, bot_model_id)
        return {"id": bot_model_id}
