"""
Console output adapters: print use-case outcomes for a human.
"""

from __future__ import annotations

import sys
from typing import List, Optional, TextIO

from botcatalog.application.ports import BotModelStoredOutput, BotModelValidationFailedOutput


class ConsoleReporter:
    """
    Prints outcomes and remembers them, so the caller can pick an exit code.

    Usage:
        reporter = ConsoleReporter()
        set_port_adapter(bot_model_stored_out_port, reporter.bot_model_stored)
        set_port_adapter(bot_model_validation_failed_out_port, reporter.validation_failed)
    """

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._stream = stream
        self.stored: List[BotModelStoredOutput] = []
        self.failures: List[BotModelValidationFailedOutput] = []

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    async def bot_model_stored(self, output: BotModelStoredOutput) -> None:
        self.stored.append(output)
        print(f"Stored bot model {output.name!r} (niche: {output.niche}) with id {output.id}", file=self.stream)

    async def validation_failed(self, output: BotModelValidationFailedOutput) -> None:
        self.failures.append(output)
        print(f"{output.operation} failed validation:", file=self.stream)
        for error in output.errors:
            print(f"  - {error}", file=self.stream)
