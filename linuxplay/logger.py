"""An asynchronous, thread-safe logger writing records from a background thread."""

from __future__ import annotations

import atexit
import os
import queue
import sys
import threading
from datetime import datetime
from enum import Enum
from typing import IO, ClassVar

DEFAULT_LOG_FILE = "app.log"


class LogLevel(Enum):
    """Severity of a log record."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"


def format_record(level: LogLevel, message: str) -> str:
    """Format a record as ``timestamp [LEVEL] [Thread id] message``."""
    timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    return f"{timestamp} [{level.value}] [Thread {threading.get_ident()}] {message}"


_STOP = object()


class Logger:
    """Queue records and write them from a single worker thread.

    Records go to the log file, opened for appending; if it cannot be
    opened they go to standard output instead.
    """

    _instance: ClassVar[Logger | None] = None
    _instance_lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(self, path: str | os.PathLike[str] = DEFAULT_LOG_FILE) -> None:
        self._queue: queue.Queue[object] = queue.Queue()
        self._closed = False
        self._close_lock = threading.Lock()
        try:
            self._file: IO[str] | None = open(path, "a", encoding="utf-8")
        except OSError:
            self._file = None
        self._worker = threading.Thread(target=self._run, name="logger-worker", daemon=True)
        self._worker.start()

    @classmethod
    def get_instance(cls) -> Logger:
        """Return the process-wide logger writing to ``app.log``."""
        with cls._instance_lock:
            if cls._instance is None:
                cls._instance = cls()
                atexit.register(cls._instance.close)
            return cls._instance

    def log(self, level: LogLevel, message: str) -> None:
        """Queue a record of ``message`` at ``level``."""
        if self._closed:
            raise RuntimeError("logger is closed")
        self._queue.put(format_record(level, message))

    def flush(self) -> None:
        """Block until every queued record has been written."""
        self._queue.join()

    def close(self) -> None:
        """Write the remaining records, stop the worker and close the file."""
        with self._close_lock:
            if self._closed:
                return
            self._closed = True
        self._queue.put(_STOP)
        self._worker.join()
        if self._file is not None:
            self._file.close()

    def __enter__(self) -> Logger:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _run(self) -> None:
        while True:
            item = self._queue.get()
            try:
                if item is _STOP:
                    return
                stream = self._file if self._file is not None else sys.stdout
                stream.write(f"{item}\n")
                stream.flush()
            finally:
                self._queue.task_done()


def _log_from_thread(thread_id: int) -> None:
    logger = Logger.get_instance()
    logger.log(LogLevel.INFO, f"Thread {thread_id} started.")
    for i in range(5):
        logger.log(LogLevel.DEBUG, f"Thread {thread_id} logging message {i}")
    logger.log(LogLevel.INFO, f"Thread {thread_id} finished.")


def main(argv: list[str] | None = None) -> int:
    """Log from several threads at once into ``app.log``."""
    print(f"Logging example started. Check {DEFAULT_LOG_FILE} for output.")
    logger = Logger.get_instance()
    logger.log(LogLevel.INFO, "Main thread started.")

    threads = [threading.Thread(target=_log_from_thread, args=(i,)) for i in range(5)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    logger.log(LogLevel.INFO, "Main thread finished.")
    logger.flush()
    print("Logging example finished.")
    return 0


if __name__ == "__main__":
    sys.exit(main())