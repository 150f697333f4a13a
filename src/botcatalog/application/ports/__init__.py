from .bot_model_ports import (
    BotModelStored,
    BotModelStoredOutput,
    BotModelValidationFailed,
    BotModelValidationFailedOutput,
    StoreBotModel,
    bot_model_stored_out_port,
    bot_model_validation_failed_out_port,
    store_bot_model_port,
)

__all__ = [
    "BotModelStored",
    "BotModelStoredOutput",
    "BotModelValidationFailed",
    "BotModelValidationFailedOutput",
    "StoreBotModel",
    "bot_model_stored_out_port",
    "bot_model_validation_failed_out_port",
    "store_bot_model_port",
]
