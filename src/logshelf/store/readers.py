"""Read paths: bounded tail read and streaming line read.

Neither function raises on I/O or decoding problems. A missing file, an
out-of-range index or undecodable text degrades to an empty result.
"""

import os
from pathlib import Path
from typing import Callable, Iterator, Optional, Union

from logshelf.store.files import list_files

DEFAULT_TAIL_BYTES = 64 * 1024
CHUNK_SIZE = 8 * 1024

Target = Union[Path, str, int]


def resolve_target(target: Target, directory: Optional[Path] = None) -> Optional[Path]:
    """Turn a path or a newest-first index into a path.

    Returns None when an index is given without a directory or is out of range.
    """
    if isinstance(target, bool):
        return None
    if isinstance(target, int):
        if directory is None or target < 0:
            return None
        files = list_files(directory)
        if target >= len(files):
            return None
        return files[target]
    return Path(target)


def read_tail(
    target: Target,
    max_bytes: int = DEFAULT_TAIL_BYTES,
    directory: Optional[Path] = None,
) -> str:
    """Read at most the last ``max_bytes`` bytes of a log file as text.

    When the read starts in the middle of a line, that partial first line is
    dropped. The cut happens on bytes before decoding, so a multibyte character split
    by the offset never poisons the rest of the text.
    """
    path = resolve_target(target, directory)
    if path is None:
        return ""

    try:
        f = open(path, "rb")
    except OSError:
        return ""

    with f:
        try:
            size = os.fstat(f.fileno()).st_size
            offset = max(0, size - max(0, max_bytes))
            truncated = False
            if offset > 0:
                f.seek(offset - 1)
                truncated = f.read(1) != b"\n"
            else:
                f.seek(0)
            data = f.read()
        except OSError:
            return ""

    if truncated:
        newline = data.find(b"\n")
        if newline != -1:
            data = data[newline + 1:]

    try:
        return data.decode("utf-8")
    except UnicodeDecodeError:
        return ""


def iter_lines(target: Target, directory: Optional[Path] = None) -> Iterator[str]:
    """Yield each line of a log file in order, reading 8 KiB at a time.

    Lines are yielded without their newline. A trailing fragment without a
    newline is yielded last. Lines that are not valid UTF-8 are skipped.
    """
    path = resolve_target(target, directory)
    if path is None:
        return

    try:
        f = open(path, "rb")
    except OSError:
        return

    with f:
        leftover = b""
        while True:
            try:
                chunk = f.read(CHUNK_SIZE)
            except OSError:
                break
            if not chunk:
                break

            parts = (leftover + chunk).split(b"\n")
            leftover = parts.pop()
            for part in parts:
                line = _decode(part)
                if line is not None:
                    yield line

        if leftover:
            line = _decode(leftover)
            if line is not None:
                yield line


def read_stream(
    target: Target,
    line_handler: Callable[[str], None],
    directory: Optional[Path] = None,
) -> None:
    """Call ``line_handler`` once per line of a log file, as each line is read."""
    for line in iter_lines(target, directory):
        line_handler(line)


def _decode(raw: bytes) -> Optional[str]:
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError:
        return None
