"""logshelf: rolling, size- and count-bounded local log files."""

__version__ = "0.1.0"

from logshelf.shelf import (
    close_current_log_file,
    configure,
    get_store,
    log_files,
    read_log_stream,
    read_tail_log,
    set_retention,
    write_log,
)
from logshelf.store import LogStore, RetentionPolicy, StoreConfig, load_config

__all__ = [
    "LogStore",
    "RetentionPolicy",
    "StoreConfig",
    "close_current_log_file",
    "configure",
    "get_store",
    "load_config",
    "log_files",
    "read_log_stream",
    "read_tail_log",
    "set_retention",
    "write_log",
]
