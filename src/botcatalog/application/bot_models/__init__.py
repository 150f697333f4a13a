"""
Bot-model use cases.
"""

from .schemas import (
    NicheInput,
    PerformanceMetricsInput,
    SimpleStoreBotModelInput,
    StoreBotModelInput,
    TechnicalSpecificationInput,
)
from .simple_store_bot_model import simple_store_bot_model
from .store_bot_model import OPERATION, report_validation_failure, store_bot_model

__all__ = [
    "NicheInput",
    "PerformanceMetricsInput",
    "SimpleStoreBotModelInput",
    "StoreBotModelInput",
    "TechnicalSpecificationInput",
    "OPERATION",
    "report_validation_failure",
    "simple_store_bot_model",
    "store_bot_model",
]
