"""Abstract repository for the order ledger.

Defined in the domain layer so the domain never depends on
infrastructure.  The ledger is append-only: there is no update or
delete, and records come back out only as a whole-file export.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

from fundraiser.domain.model.order_record import OrderRecord


class OrderLedger(ABC):

    @abstractmethod
    def ensure_initialized(self) -> None:
        """Create the ledger with its header row if it does not exist yet."""

    @abstractmethod
    def append(self, record: OrderRecord) -> None:
        """Durably append one record.  Raises PersistenceError on failure."""

    @abstractmethod
    def export_path(self) -> Path:
        """Return the location of the ledger for bulk download."""

    @abstractmethod
    def count(self) -> int:
        """Return the number of order rows, excluding the header."""
