"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from fundraiser.application.export_ledger import ExportLedgerHandler
from fundraiser.application.submit_order import SubmitOrderHandler
from fundraiser.domain.gateway.mail_transport import MailTransport
from fundraiser.domain.model.value_objects import PaymentRecipient, PriceList
from fundraiser.domain.repository.order_ledger import OrderLedger
from fundraiser.infrastructure.config import Settings
from fundraiser.infrastructure.mail.smtp_mail_transport import SmtpMailTransport
from fundraiser.infrastructure.persistence.csv_order_ledger import CsvOrderLedger


def order_ledger(settings: Settings) -> CsvOrderLedger:
    return CsvOrderLedger(settings.ledger.absolute_path)


def mail_transport(settings: Settings) -> SmtpMailTransport:
    mail = settings.mail
    return SmtpMailTransport(
        host=mail.host,
        port=mail.port,
        username=mail.user,
        password=mail.password,
        sender=mail.from_address,
        use_tls=mail.use_tls,
        timeout=mail.timeout_seconds,
    )


def price_list(settings: Settings) -> PriceList:
    return PriceList(
        per_player_line=settings.pricing.price_per_player_line,
        per_business_line=settings.pricing.price_per_business_line,
    )


def payment_recipient(settings: Settings) -> PaymentRecipient:
    return PaymentRecipient(
        handle=settings.payment.recipient_handle,
        base_url=settings.payment.base_url,
    )


def submit_order_handler(
    settings: Settings,
    ledger: OrderLedger,
    mailer: MailTransport | None = None,
) -> SubmitOrderHandler:
    return SubmitOrderHandler(
        ledger=ledger,
        mailer=mailer or mail_transport(settings),
        recipient=payment_recipient(settings),
        operator_address=settings.mail.operator_mailbox,
        sales_address=settings.mail.sales_mailbox,
        prices=price_list(settings),
    )


def export_ledger_handler(ledger: OrderLedger) -> ExportLedgerHandler:
    return ExportLedgerHandler(ledger)
