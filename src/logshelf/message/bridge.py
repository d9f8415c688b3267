"""Bridge between logshelf messages and the standard-library ``logging`` tree.

``log()`` formats a message and hands it to the category's logger under the
subsystem name, the way platform log facilities receive pre-formatted text.
``StoreHandler`` goes the other way: any ``logging`` record, from logshelf or
from third-party code, gets persisted through a LogStore.
``EntryBuffer`` keeps the latest records of this process in memory so they
can be read back with ``fetch_log_entries()``.
"""

import logging
from collections import deque
from typing import Any, Optional

from logshelf.message.category import LogCategory, subsystem
from logshelf.message.format import format_message, output_hook
from logshelf.message.info import LogInfo
from logshelf.message.level import NOTICE, LogLevel
from logshelf.store import LogStore

logging.addLevelName(NOTICE, "NOTICE")


def log(category: LogCategory, level: LogLevel, *items: Any, stacklevel: int = 1) -> str:
    """Format a message, forward it to ``logging`` and run the output hook.

    Returns the formatted line.
    """
    info = LogInfo.capture(category, level, items, stacklevel=stacklevel + 1)
    line = format_message(info)
    category.logger.log(
        level.logging_level, line, extra={"log_info": info}, stacklevel=stacklevel + 1
    )

    hook = output_hook()
    if hook is not None:
        hook(info)
    return line


def info_from_record(record: logging.LogRecord) -> LogInfo:
    """Rebuild a LogInfo from a foreign ``logging`` record."""
    prefix = subsystem() + "."
    name = record.name[len(prefix):] if record.name.startswith(prefix) else record.name
    return LogInfo.build(
        LogCategory.custom(name),
        LogLevel.from_logging_level(record.levelno),
        [record.getMessage()],
        file=record.pathname,
        function=record.funcName,
        line=record.lineno,
    )


class LogInfoFormatter(logging.Formatter):
    """Render records in the logshelf line format.

    Records produced by ``log()`` are already formatted and pass through.
    """

    def format(self, record: logging.LogRecord) -> str:
        if getattr(record, "log_info", None) is not None:
            text = record.getMessage()
        else:
            text = format_message(info_from_record(record))
        if record.exc_info:
            text = f"{text}\n{self.formatException(record.exc_info)}"
        return text


class StoreHandler(logging.Handler):
    """``logging`` handler that appends each record to a LogStore."""

    def __init__(self, store: Optional[LogStore] = None, level: int = logging.NOTSET):
        super().__init__(level)
        self._store = store
        self.setFormatter(LogInfoFormatter())

    @property
    def store(self) -> LogStore:
        if self._store is None:
            from logshelf.shelf import get_store

            self._store = get_store()
        return self._store

    def emit(self, record: logging.LogRecord) -> None:
        try:
            self.store.write(self.format(record))
        except Exception:
            self.handleError(record)


def install_store_handler(
    store: Optional[LogStore] = None,
    level: int = logging.DEBUG,
    logger_name: Optional[str] = None,
) -> StoreHandler:
    """Attach a StoreHandler to the subsystem logger (or ``logger_name``)."""
    logger = logging.getLogger(logger_name if logger_name is not None else subsystem())
    handler = StoreHandler(store, level)
    logger.addHandler(handler)
    if logger.level == logging.NOTSET or logger.level > level:
        logger.setLevel(level)
    return handler


class EntryBuffer(logging.Handler):
    """Keep the most recent records of this process in memory, as LogInfo."""

    def __init__(self, capacity: int = 1000, level: int = logging.NOTSET):
        super().__init__(level)
        self._entries: deque = deque(maxlen=capacity)

    def emit(self, record: logging.LogRecord) -> None:
        try:
            info = getattr(record, "log_info", None) or info_from_record(record)
            self._entries.append(info)
        except Exception:
            self.handleError(record)

    def entries(self) -> list[LogInfo]:
        with self.lock:
            return list(self._entries)


_entry_buffer: Optional[EntryBuffer] = None


def install_entry_buffer(capacity: int = 1000, level: int = logging.DEBUG) -> EntryBuffer:
    """Start capturing the subsystem logger's records. Installs at most once."""
    global _entry_buffer
    if _entry_buffer is None:
        logger = logging.getLogger(subsystem())
        _entry_buffer = EntryBuffer(capacity, level)
        logger.addHandler(_entry_buffer)
        if logger.level == logging.NOTSET or logger.level > level:
            logger.setLevel(level)
    return _entry_buffer


def fetch_log_entries(category: Optional[LogCategory] = None) -> list[LogInfo]:
    """Entries captured since ``install_entry_buffer()``, oldest first.

    Returns [] when no buffer is installed.
    """
    if _entry_buffer is None:
        return []
    entries = _entry_buffer.entries()
    if category is not None:
        entries = [info for info in entries if info.category == category]
    return entries
