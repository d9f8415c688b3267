"""
Log storage for logshelf.

Includes:
- LogStore: queued, size- and count-bounded file writer with tail/stream reads
- RetentionPolicy / StoreConfig: retention settings and config loading
- files / readers: directory bookkeeping and read paths used by LogStore
"""

from .config import RetentionPolicy, StoreConfig, load_config
from .log_store import LogStore

__all__ = [
    "LogStore",
    "RetentionPolicy",
    "StoreConfig",
    "load_config",
]
