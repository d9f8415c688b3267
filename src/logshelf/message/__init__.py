"""
Message glue around the log store.

Includes:
- LogLevel / LogCategory: the level and category taxonomy
- LogInfo: one log call with its caller location
- format_message and hooks: line formatting and output callbacks
- CategoryPrinter: console printers per category
- log / StoreHandler: bridge to the standard-library logging tree
- install_entry_buffer / fetch_log_entries: read back this process's entries
"""

from .bridge import (
    EntryBuffer,
    LogInfoFormatter,
    StoreHandler,
    fetch_log_entries,
    install_entry_buffer,
    install_store_handler,
    log,
)
from .category import LogCategory, set_subsystem, subsystem
from .format import default_format, format_message, set_formatter, set_output_hook
from .info import LogInfo
from .level import LogLevel
from .printer import CategoryPrinter

__all__ = [
    "CategoryPrinter",
    "EntryBuffer",
    "LogCategory",
    "LogInfo",
    "LogInfoFormatter",
    "LogLevel",
    "StoreHandler",
    "default_format",
    "fetch_log_entries",
    "format_message",
    "install_entry_buffer",
    "install_store_handler",
    "log",
    "set_formatter",
    "set_output_hook",
    "set_subsystem",
    "subsystem",
]
