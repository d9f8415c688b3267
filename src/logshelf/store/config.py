"""Retention policy and store configuration (~/.logshelf/config.yaml)."""

import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml

from logshelf.exceptions import ConfigError

DEFAULT_MAX_FILE_COUNT = 5
DEFAULT_MAX_SINGLE_FILE_SIZE = 1 * 1024 * 1024
DEFAULT_CARRY_OVER_BYTES = 64 * 1024
DEFAULT_QUEUE_SIZE = 10_000

DEFAULT_HOME = Path.home() / ".logshelf"


def _require_int(name: str, value, minimum: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(name, value, "Expected an integer.")
    if value < minimum:
        raise ConfigError(name, value, f"Must be >= {minimum}.")
    return value


@dataclass(frozen=True)
class RetentionPolicy:
    """How many log files to keep and how large each one may grow."""
    max_file_count: int = DEFAULT_MAX_FILE_COUNT
    max_single_file_size: int = DEFAULT_MAX_SINGLE_FILE_SIZE
    carry_over_bytes: int = DEFAULT_CARRY_OVER_BYTES  # 0 starts rotated files empty

    def __post_init__(self) -> None:
        _require_int("max_file_count", self.max_file_count, 1)
        _require_int("max_single_file_size", self.max_single_file_size, 1)
        _require_int("carry_over_bytes", self.carry_over_bytes, 0)

    @property
    def effective_carry_over(self) -> int:
        """Bytes carried into a rotated file, capped so it starts below the size limit."""
        return min(self.carry_over_bytes, self.max_single_file_size // 2)


@dataclass
class StoreConfig:
    """Everything needed to construct a LogStore."""
    directory: Path = DEFAULT_HOME / "logs"
    policy: RetentionPolicy = field(default_factory=RetentionPolicy)
    queue_size: int = DEFAULT_QUEUE_SIZE

    def __post_init__(self) -> None:
        self.directory = Path(self.directory).expanduser()
        _require_int("queue_size", self.queue_size, 1)


def _config_path(path: Optional[str]) -> Path:
    if path:
        return Path(path).expanduser()
    env_path = os.getenv("LOGSHELF_CONFIG")
    if env_path:
        return Path(env_path).expanduser()
    return DEFAULT_HOME / "config.yaml"


def _read_yaml(path: Path) -> dict:
    """Read the `store:` section. Returns empty dict on missing or corrupted files."""
    if not path.exists():
        return {}
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (yaml.YAMLError, OSError) as e:
        print(f"Warning: corrupted {path}, using defaults: {e}", file=sys.stderr)
        return {}
    if not isinstance(data, dict):
        print(f"Warning: {path} is not a mapping, using defaults", file=sys.stderr)
        return {}
    section = data.get("store", {})
    return section if isinstance(section, dict) else {}


def _env_int(name: str) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return None
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(name, raw, "Expected an integer.") from None


def load_config(path: Optional[str] = None, directory: Optional[str] = None) -> StoreConfig:
    """Build a StoreConfig from YAML, then environment, then explicit arguments.

    Later sources win: an explicit ``directory`` beats ``LOGSHELF_DIR``, which
    beats the ``directory`` key of the config file.
    """
    section = _read_yaml(_config_path(path))

    values = {
        "max_file_count": section.get("max_file_count", DEFAULT_MAX_FILE_COUNT),
        "max_single_file_size": section.get("max_single_file_size", DEFAULT_MAX_SINGLE_FILE_SIZE),
        "carry_over_bytes": section.get("carry_over_bytes", DEFAULT_CARRY_OVER_BYTES),
    }
    for key, env_name in (
        ("max_file_count", "LOGSHELF_MAX_FILE_COUNT"),
        ("max_single_file_size", "LOGSHELF_MAX_FILE_SIZE"),
        ("carry_over_bytes", "LOGSHELF_CARRY_OVER_BYTES"),
    ):
        env_value = _env_int(env_name)
        if env_value is not None:
            values[key] = env_value

    log_dir = directory or os.getenv("LOGSHELF_DIR") or section.get("directory")

    return StoreConfig(
        directory=Path(log_dir) if log_dir else DEFAULT_HOME / "logs",
        policy=RetentionPolicy(**values),
        queue_size=section.get("queue_size", DEFAULT_QUEUE_SIZE),
    )
