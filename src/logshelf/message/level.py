"""Log levels and their markers."""

import logging
from enum import Enum

NOTICE = 25  # between INFO and WARNING


class LogLevel(str, Enum):
    DEBUG = "Debug"      # debug builds only
    INFO = "Info"        # state changes
    NOTICE = "Notice"    # successful operations
    ERROR = "Error"      # failed operations
    FAULT = "Fault"      # crash-level problems

    @property
    def emoji(self) -> str:
        return _EMOJI[self]

    @property
    def logging_level(self) -> int:
        """Matching standard-library logging level."""
        return _TO_LOGGING[self]

    @classmethod
    def from_logging_level(cls, levelno: int) -> "LogLevel":
        """Map a standard-library level number to the closest LogLevel."""
        if levelno >= logging.CRITICAL:
            return cls.FAULT
        if levelno >= logging.ERROR:
            return cls.ERROR
        if levelno >= NOTICE:
            return cls.NOTICE
        if levelno >= logging.INFO:
            return cls.INFO
        return cls.DEBUG


_EMOJI = {
    LogLevel.DEBUG: "🛠️",
    LogLevel.INFO: "⚙️",
    LogLevel.NOTICE: "☑️",
    LogLevel.ERROR: "❌",
    LogLevel.FAULT: "⚠️",
}

_TO_LOGGING = {
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.INFO: logging.INFO,
    LogLevel.NOTICE: NOTICE,
    LogLevel.ERROR: logging.ERROR,
    LogLevel.FAULT: logging.CRITICAL,
}
