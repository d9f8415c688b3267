"""Log directory bookkeeping: file naming, listing and retention trim."""

import os
from datetime import datetime, timedelta
from pathlib import Path
from typing import Optional

LOG_SUFFIX = ".log"

# ISO-8601 basic format: no colons, sorts chronologically within one UTC offset
TIMESTAMP_FORMAT = "%Y%m%dT%H%M%S.%f%z"


def ensure_directory(directory: Path) -> Path:
    """Create the log directory if it doesn't exist."""
    directory.mkdir(parents=True, exist_ok=True)
    return directory


def timestamp_name(moment: datetime) -> str:
    """File name for a log opened at ``moment`` (local time zone)."""
    return moment.astimezone().strftime(TIMESTAMP_FORMAT) + LOG_SUFFIX


def parse_timestamp(path: Path) -> Optional[datetime]:
    """Creation time encoded in a log file name, or None for foreign names."""
    if path.suffix != LOG_SUFFIX:
        return None
    try:
        return datetime.strptime(path.stem, TIMESTAMP_FORMAT)
    except ValueError:
        return None


def new_log_path(directory: Path, now: Optional[datetime] = None) -> Path:
    """Pick a fresh, unused path named by the current time.

    Never sorts before an existing log: if the clock stepped back behind the
    newest name in the directory, the new name follows that one instead.
    """
    moment = (now or datetime.now()).astimezone()
    newest = _newest_timestamp(directory)
    if newest is not None and newest >= moment:
        moment = newest + timedelta(microseconds=1)
    path = directory / timestamp_name(moment)
    while path.exists():
        moment += timedelta(microseconds=1)
        path = directory / timestamp_name(moment)
    return path


def _newest_timestamp(directory: Path) -> Optional[datetime]:
    stamps = [s for s in (parse_timestamp(p) for p in list_files(directory)) if s is not None]
    return max(stamps, default=None)


def _creation_time(path: Path) -> float:
    parsed = parse_timestamp(path)
    if parsed is not None:
        return parsed.timestamp()
    try:
        stat = path.stat()
    except OSError:
        return float("-inf")
    return getattr(stat, "st_birthtime", stat.st_mtime)


def list_files(directory: Path) -> list[Path]:
    """List log files, newest first. Returns [] if the directory can't be read."""
    try:
        entries = list(os.scandir(directory))
    except OSError:
        return []

    files = []
    for entry in entries:
        if entry.name.startswith(".") or not entry.name.endswith(LOG_SUFFIX):
            continue
        try:
            if not entry.is_file():
                continue
        except OSError:
            continue
        files.append(Path(entry.path))

    return sorted(files, key=_creation_time, reverse=True)


def trim_files(directory: Path, max_file_count: int, keep: Optional[Path] = None) -> list[Path]:
    """Delete every file beyond the ``max_file_count`` newest. Returns what was removed.

    ``keep`` (the active file) is never deleted and counts toward the limit.
    """
    listed = list_files(directory)
    if keep is not None and keep in listed:
        listed.remove(keep)
        excess = listed[max_file_count - 1:]
    else:
        excess = listed[max_file_count:]
    removed = []
    for path in excess:
        try:
            path.unlink()
            removed.append(path)
        except OSError:
            pass
    return removed


def file_size(path: Path) -> int:
    """Size in bytes, 0 if the file is gone."""
    try:
        return path.stat().st_size
    except OSError:
        return 0
