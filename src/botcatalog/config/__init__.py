from .models import AppConfig, LoggingConfig, UseCaseConfig, load_config

__all__ = [
    "AppConfig",
    "LoggingConfig",
    "UseCaseConfig",
    "load_config",
]
