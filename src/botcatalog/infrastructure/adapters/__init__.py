from .console import ConsoleReporter
from .dry_run import DryRunBotModelStore

__all__ = ["ConsoleReporter", "DryRunBotModelStore"]
