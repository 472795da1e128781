"""In-memory fakes for testing.

These implement the same abstract interfaces as the CSV ledger and the
SMTP transport but keep everything in lists. No file I/O, no network.
"""

from __future__ import annotations

from pathlib import Path

from fundraiser.domain.exceptions import PersistenceError, TransportError
from fundraiser.domain.gateway.mail_transport import MailTransport
from fundraiser.domain.model.order_record import OrderRecord
from fundraiser.domain.repository.order_ledger import OrderLedger


class FakeOrderLedger(OrderLedger):

    def __init__(self, fail: bool = False, fail_export: bool = False) -> None:
        self.records: list[OrderRecord] = []
        self.initialized = False
        self.fail = fail
        self.fail_export = fail_export

    def ensure_initialized(self) -> None:
        self.initialized = True

    def append(self, record: OrderRecord) -> None:
        if self.fail:
            raise PersistenceError("Ledger unavailable")
        self.records.append(record)

    def export_path(self) -> Path:
        if self.fail_export:
            raise PersistenceError("Ledger unreadable")
        return Path("orders.csv")

    def count(self) -> int:
        return len(self.records)


class FakeMailTransport(MailTransport):
    """Records messages in memory; can be told to fail for some recipients."""

    def __init__(self, failing_recipients: set[str] | None = None) -> None:
        self.sent: list[dict] = []
        self.failing_recipients = failing_recipients or set()

    def send(self, to: str, subject: str, body: str) -> None:
        if to in self.failing_recipients:
            raise TransportError(f"Relay refused {to}")
        self.sent.append({"to": to, "subject": subject, "body": body})

    def sent_to(self, to: str) -> list[dict]:
        return [message for message in self.sent if message["to"] == to]
