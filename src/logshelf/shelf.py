"""Process-wide default store and the module-level logging API.

The default store is created lazily from ``load_config()`` the first time
it is needed and is drained and closed at interpreter exit.
"""

import atexit
import dataclasses
import threading
from pathlib import Path
from typing import Callable, Optional

from logshelf.store import LogStore, load_config
from logshelf.store.readers import DEFAULT_TAIL_BYTES, Target

_default_store: Optional[LogStore] = None
_default_lock = threading.Lock()


def get_store() -> LogStore:
    """Return the shared store, creating it on first use."""
    global _default_store
    with _default_lock:
        if _default_store is None:
            _default_store = LogStore.from_config(load_config())
            atexit.register(_default_store.shutdown)
        return _default_store


def configure(
    directory: Optional[str] = None,
    config_path: Optional[str] = None,
    max_file_count: Optional[int] = None,
    max_single_file_size: Optional[int] = None,
    carry_over_bytes: Optional[int] = None,
) -> LogStore:
    """Replace the shared store with one built from the given settings.

    The previous store (if any) is drained and shut down first.
    """
    global _default_store
    config = load_config(config_path, directory)
    overrides = {
        key: value
        for key, value in {
            "max_file_count": max_file_count,
            "max_single_file_size": max_single_file_size,
            "carry_over_bytes": carry_over_bytes,
        }.items()
        if value is not None
    }
    if overrides:
        config.policy = dataclasses.replace(config.policy, **overrides)

    store = LogStore.from_config(config)
    with _default_lock:
        previous, _default_store = _default_store, store
    if previous is not None:
        previous.shutdown()
        atexit.unregister(previous.shutdown)
    atexit.register(store.shutdown)
    return store


def set_retention(
    max_file_count: Optional[int] = None,
    max_single_file_size: Optional[int] = None,
) -> None:
    """Change retention on the shared store; applies from the next rotation."""
    store = get_store()
    if max_file_count is not None:
        store.max_file_count = max_file_count
    if max_single_file_size is not None:
        store.max_single_file_size = max_single_file_size


def write_log(message: str) -> None:
    """Append a line to the shared store."""
    get_store().write(message)


def close_current_log_file() -> None:
    """Close the current file; the next write starts a fresh one."""
    get_store().close()


def log_files() -> list[Path]:
    """Log files of the shared store, newest first."""
    return get_store().list_files()


def read_tail_log(target: Target, max_bytes: int = DEFAULT_TAIL_BYTES) -> str:
    return get_store().read_tail(target, max_bytes)


def read_log_stream(target: Target, line_handler: Callable[[str], None]) -> None:
    get_store().read_stream(target, line_handler)
