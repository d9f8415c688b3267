"""Open-ended log categories, grouped under one subsystem name."""

import logging
import os
from dataclasses import dataclass
from typing import ClassVar

_subsystem = os.getenv("LOGSHELF_SUBSYSTEM", "logshelf")


def subsystem() -> str:
    """Top-level logger name every category hangs under."""
    return _subsystem


def set_subsystem(name: str) -> None:
    global _subsystem
    _subsystem = name


@dataclass(frozen=True)
class LogCategory:
    """A named log category. Use the built-ins or ``LogCategory.custom``."""
    name: str

    UI: ClassVar["LogCategory"]
    IO: ClassVar["LogCategory"]
    CORE: ClassVar["LogCategory"]
    TEST: ClassVar["LogCategory"]
    NETWORK: ClassVar["LogCategory"]
    LIBRARY: ClassVar["LogCategory"]

    @classmethod
    def custom(cls, token: str) -> "LogCategory":
        return cls(token)

    @property
    def logger(self) -> logging.Logger:
        """Standard-library logger for this category, e.g. ``logshelf.Network``."""
        return logging.getLogger(f"{subsystem()}.{self.name}")

    @property
    def printer(self):
        from logshelf.message.printer import CategoryPrinter

        return CategoryPrinter(self)

    def __str__(self) -> str:
        return self.name


LogCategory.UI = LogCategory("UI")
LogCategory.IO = LogCategory("IO")
LogCategory.CORE = LogCategory("Core")
LogCategory.TEST = LogCategory("Test")
LogCategory.NETWORK = LogCategory("Network")
LogCategory.LIBRARY = LogCategory("Library")
