"""CSV-file-backed implementation of OrderLedger.

Row format
----------
The header row is the bare column names joined by commas.  Every order
row wraps each field in double quotes and joins them with commas::

    "2026-10-19T17:02:11.093Z","Alex P","Tigers",...,"40"

Embedded quotes and commas are written as-is, without escaping.

Concurrency
-----------
Each append opens the file, takes ``fcntl.flock(LOCK_EX)``, writes one
line, flushes, and closes.  A process-wide ``threading.Lock`` is held
around the whole append as well, so threadpool workers in one server
and separate server processes on one host never interleave rows.
``fcntl`` is POSIX-only.
"""

from __future__ import annotations

import fcntl
import logging
import os
import threading
from pathlib import Path

from fundraiser.domain.exceptions import PersistenceError
from fundraiser.domain.model.order_record import LEDGER_HEADER, OrderRecord
from fundraiser.domain.repository.order_ledger import OrderLedger

logger = logging.getLogger(__name__)


def format_header() -> str:
    return ",".join(LEDGER_HEADER) + "\n"


def format_row(record: OrderRecord) -> str:
    return ",".join(f'"{value}"' for value in record.to_row()) + "\n"


class CsvOrderLedger(OrderLedger):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._lock = threading.Lock()

    # --- OrderLedger interface ------------------------------------------------

    def ensure_initialized(self) -> None:
        with self._lock:
            try:
                self._file_path.parent.mkdir(parents=True, exist_ok=True)
                created = self._create_with_header()
            except OSError as exc:
                raise PersistenceError(
                    f"Failed to initialize order ledger at {self._file_path}: {exc}"
                ) from exc
        if created:
            logger.info("Created order ledger at %s", self._file_path)

    def append(self, record: OrderRecord) -> None:
        line = format_row(record)
        with self._lock:
            try:
                self._append_line_locked(line)
            except OSError as exc:
                raise PersistenceError(
                    f"Failed to append order for {record.player_name!r} "
                    f"to {self._file_path}: {exc}"
                ) from exc
        logger.debug("ledger: appended order row to %s", self._file_path.name)

    def export_path(self) -> Path:
        return self._file_path

    def count(self) -> int:
        if not self._file_path.exists():
            return 0
        with self._file_path.open("r", encoding="utf-8", newline="") as fh:
            lines = sum(1 for line in fh if line.strip())
        return max(0, lines - 1)

    # --- File helpers ---------------------------------------------------------

    def _create_with_header(self) -> bool:
        # "x" fails if another process created the file first.
        try:
            with self._file_path.open("x", encoding="utf-8", newline="") as fh:
                fh.write(format_header())
        except FileExistsError:
            return False
        return True

    def _append_line_locked(self, line: str) -> None:
        with self._file_path.open("a", encoding="utf-8", newline="") as fh:
            fcntl.flock(fh, fcntl.LOCK_EX)
            try:
                # A ledger removed while the server runs comes back with its header.
                if fh.seek(0, os.SEEK_END) == 0:
                    fh.write(format_header())
                fh.write(line)
                fh.flush()
                os.fsync(fh.fileno())
            finally:
                fcntl.flock(fh, fcntl.LOCK_UN)
