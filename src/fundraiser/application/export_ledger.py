"""Application service: Export Ledger use case (query)."""

from __future__ import annotations

from pathlib import Path

from fundraiser.domain.repository.order_ledger import OrderLedger


class ExportLedgerHandler:

    def __init__(self, ledger: OrderLedger) -> None:
        self._ledger = ledger

    def handle(self) -> Path:
        """Return the ledger file, creating it with its header if needed.

        Exporting before the first order yields a header-only file.
        """
        self._ledger.ensure_initialized()
        return self._ledger.export_path()
