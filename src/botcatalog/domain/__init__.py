"""
Domain layer: bot-model catalog objects.
"""

from .bot_model import BotModel, BotModelStatus, PricingModel
from .email import Email
from .niche import Niche
from .technical_specification import PerformanceMetrics, Scalability, TechnicalSpecification
from .user import User

__all__ = [
    "BotModel",
    "BotModelStatus",
    "PricingModel",
    "Email",
    "Niche",
    "PerformanceMetrics",
    "Scalability",
    "TechnicalSpecification",
    "User",
]
