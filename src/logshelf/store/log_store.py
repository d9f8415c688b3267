"""Size- and count-bounded log file store with a single writer thread."""

import dataclasses
import os
import queue
import sys
import threading
from pathlib import Path
from typing import BinaryIO, Callable, Iterator, Optional, Union

from logshelf.store import files, readers
from logshelf.store.config import DEFAULT_QUEUE_SIZE, RetentionPolicy, StoreConfig

_WRITE = "write"
_CLOSE = "close"
_FLUSH = "flush"
_STOP = "stop"


class LogStore:
    """Persist log lines into a rolling set of files.

    ``write`` and ``close`` are queued and applied in order by one background
    thread, so callers never wait on disk I/O. Reads run on the caller's
    thread and may observe a file mid-append or mid-rotation.

    Nothing on the write or read paths raises. A failure to create or append
    to a file sets ``has_logging_error`` and later writes are dropped until
    ``close()`` clears it.
    """

    def __init__(
        self,
        directory: Union[str, Path, None] = None,
        policy: Optional[RetentionPolicy] = None,
        queue_size: int = DEFAULT_QUEUE_SIZE,
    ):
        defaults = StoreConfig(queue_size=queue_size)
        self._directory = Path(directory).expanduser() if directory else defaults.directory
        self._policy = policy or RetentionPolicy()

        # Guards the handle, the policy and the error flag
        self._lock = threading.Lock()
        self._handle: Optional[BinaryIO] = None
        self._active_path: Optional[Path] = None
        self._has_error = False

        self._queue: queue.Queue = queue.Queue(maxsize=defaults.queue_size)
        self._worker: Optional[threading.Thread] = None
        self._worker_lock = threading.Lock()
        self._stopped = False

        self._stats_lock = threading.Lock()
        self._dropped = 0

    @classmethod
    def from_config(cls, config: StoreConfig) -> "LogStore":
        """Create a store from a loaded StoreConfig."""
        return cls(config.directory, config.policy, config.queue_size)

    def __enter__(self) -> "LogStore":
        return self

    def __exit__(self, *exc_info) -> None:
        self.shutdown()

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    @property
    def directory(self) -> Path:
        """The log directory, created on first access."""
        try:
            files.ensure_directory(self._directory)
        except OSError:
            pass
        return self._directory

    @property
    def policy(self) -> RetentionPolicy:
        with self._lock:
            return self._policy

    @policy.setter
    def policy(self, policy: RetentionPolicy) -> None:
        with self._lock:
            self._policy = policy

    @property
    def max_file_count(self) -> int:
        return self.policy.max_file_count

    @max_file_count.setter
    def max_file_count(self, value: int) -> None:
        self._update_policy(max_file_count=value)

    @property
    def max_single_file_size(self) -> int:
        return self.policy.max_single_file_size

    @max_single_file_size.setter
    def max_single_file_size(self, value: int) -> None:
        self._update_policy(max_single_file_size=value)

    def _update_policy(self, **changes) -> None:
        with self._lock:
            self._policy = dataclasses.replace(self._policy, **changes)

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def has_logging_error(self) -> bool:
        with self._lock:
            return self._has_error

    @property
    def active_path(self) -> Optional[Path]:
        """Path of the file currently open for appending, if any."""
        with self._lock:
            return self._active_path

    @property
    def dropped(self) -> int:
        """Messages discarded because the queue was full or the store was shut down."""
        with self._stats_lock:
            return self._dropped

    # ------------------------------------------------------------------
    # Mutations (queued)
    # ------------------------------------------------------------------

    def write(self, message: str) -> None:
        """Queue ``message`` to be appended as one line. Never blocks or raises."""
        try:
            queued = self._enqueue((_WRITE, message), block=False)
        except queue.Full:
            queued = False
        if not queued:
            self._count_drop()

    def close(self) -> None:
        """Close the active file; the next write starts a new one and clears any error."""
        self._enqueue((_CLOSE, None), block=True)

    def flush(self, timeout: Optional[float] = None) -> bool:
        """Wait until everything queued so far has been applied.

        Returns False if ``timeout`` expired first. On a store that is shutting
        down this waits for the writer to finish instead.
        """
        done = threading.Event()
        with self._worker_lock:
            worker = self._worker
            if worker is None or not worker.is_alive():
                return True
            stopped = self._stopped
            if not stopped:
                self._queue.put((_FLUSH, done))

        if stopped:
            worker.join(timeout)
            return not worker.is_alive()
        return done.wait(timeout)

    def shutdown(self, timeout: Optional[float] = None) -> None:
        """Apply pending operations, close the active file and stop the writer."""
        with self._worker_lock:
            if self._stopped:
                return
            self._stopped = True
            worker = self._worker

        if worker is not None and worker.is_alive():
            self._queue.put((_STOP, None))
            worker.join(timeout)
        else:
            with self._lock:
                self._close_handle()

    # ------------------------------------------------------------------
    # Reads (synchronous)
    # ------------------------------------------------------------------

    def list_files(self) -> list[Path]:
        """Log files in the directory, newest first."""
        return files.list_files(self.directory)

    def read_tail(
        self,
        target: readers.Target,
        max_bytes: int = readers.DEFAULT_TAIL_BYTES,
    ) -> str:
        """Last ``max_bytes`` of a file given as a path or newest-first index."""
        return readers.read_tail(target, max_bytes, directory=self.directory)

    def read_stream(self, target: readers.Target, line_handler: Callable[[str], None]) -> None:
        """Feed every line of a file to ``line_handler``, in order."""
        readers.read_stream(target, line_handler, directory=self.directory)

    def iter_lines(self, target: readers.Target) -> Iterator[str]:
        """Lazily iterate the lines of a file."""
        return readers.iter_lines(target, directory=self.directory)

    # ------------------------------------------------------------------
    # Writer thread
    # ------------------------------------------------------------------

    def _enqueue(self, item: tuple, block: bool) -> bool:
        """Start the writer if needed and queue ``item``. False once shut down.

        The stopped check and the put happen under one lock, so nothing is
        queued behind the stop marker and no writer starts after shutdown.
        """
        with self._worker_lock:
            if self._stopped:
                return False
            if self._worker is None or not self._worker.is_alive():
                self._worker = threading.Thread(
                    target=self._run, name="logshelf-writer", daemon=True
                )
                self._worker.start()
            if block:
                self._queue.put(item)
            else:
                self._queue.put_nowait(item)
            return True

    def _run(self) -> None:
        while True:
            op, arg = self._queue.get()
            try:
                if op == _STOP:
                    with self._lock:
                        self._close_handle()
                    return
                if op == _WRITE:
                    with self._lock:
                        self._append(arg)
                elif op == _CLOSE:
                    with self._lock:
                        self._close_handle()
                        self._has_error = False
                elif op == _FLUSH:
                    arg.set()
            except Exception as e:
                _warn(f"log store {op} failed: {e}")
            finally:
                self._queue.task_done()

    def _append(self, message: str) -> None:
        carried = ""
        if self._handle is not None and self._active_size() >= self._policy.max_single_file_size:
            carried = self._rotate()

        if self._handle is None:
            if self._has_error:
                return
            if not self._open_new_file():
                return

        data = f"{carried}{message}\n".encode("utf-8", errors="replace")
        try:
            self._handle.write(data)
            self._handle.flush()
        except OSError as e:
            self._fail(f"cannot write log file {self._active_path}: {e}")

    def _active_size(self) -> int:
        try:
            return os.fstat(self._handle.fileno()).st_size
        except OSError:
            return 0

    def _rotate(self) -> str:
        """Close the full file and return the tail to carry into the next one."""
        closed = self._active_path
        self._close_handle()

        carry = self._policy.effective_carry_over
        if carry <= 0 or closed is None:
            return ""
        tail = readers.read_tail(closed, carry)
        if tail and not tail.endswith("\n"):
            tail += "\n"
        return tail

    def _open_new_file(self) -> bool:
        try:
            files.ensure_directory(self._directory)
            path = files.new_log_path(self._directory)
            handle = open(path, "ab")
        except OSError as e:
            self._fail(f"cannot create log file in {self._directory}: {e}")
            return False

        self._handle = handle
        self._active_path = path
        files.trim_files(self._directory, self._policy.max_file_count, keep=path)
        return True

    def _close_handle(self) -> None:
        if self._handle is not None:
            try:
                self._handle.close()
            except OSError:
                pass
        self._handle = None
        self._active_path = None

    def _fail(self, reason: str) -> None:
        self._has_error = True
        self._close_handle()
        _warn(reason)

    def _count_drop(self) -> None:
        with self._stats_lock:
            self._dropped += 1


def _warn(message: str) -> None:
    print(f"Warning: {message}", file=sys.stderr)
