"""Application service: Submit Order use case.

Orchestrates pricing, the ledger append and the two notification
emails for one submission.  The ledger append is the commit point:
nothing is written or sent before it succeeds, and mail failures after
it are logged rather than reported to the customer.
"""

from __future__ import annotations

import logging

from fundraiser.application.dto import OrderSubmission, SubmissionResultDTO
from fundraiser.application.notifications import (
    ADMIN_SUBJECT,
    CUSTOMER_SUBJECT,
    render_admin_notification,
    render_customer_notification,
)
from fundraiser.domain.exceptions import TransportError, ValidationError
from fundraiser.domain.gateway.mail_transport import MailTransport
from fundraiser.domain.model.order_record import OrderRecord
from fundraiser.domain.model.value_objects import PaymentRecipient, PriceList
from fundraiser.domain.repository.order_ledger import OrderLedger
from fundraiser.domain.service.payment_link import build_payment_link
from fundraiser.domain.service.pricing import compute_total

logger = logging.getLogger(__name__)


class SubmitOrderHandler:

    def __init__(
        self,
        ledger: OrderLedger,
        mailer: MailTransport,
        recipient: PaymentRecipient,
        operator_address: str,
        sales_address: str,
        prices: PriceList | None = None,
    ) -> None:
        self._ledger = ledger
        self._mailer = mailer
        self._recipient = recipient
        self._operator_address = operator_address
        self._sales_address = sales_address
        self._prices = prices or PriceList()

    def handle(self, submission: OrderSubmission) -> SubmissionResultDTO:
        """Record a shirt order and notify the operator and customer.

        Steps:
        1. Reject the order unless the terms were accepted.
        2. Price the order.
        3. Append the record to the ledger (PersistenceError propagates).
        4. Build the payment link and send both emails, best effort.
        """
        if not submission.terms_accepted:
            raise ValidationError("Terms not accepted")

        total = compute_total(
            submission.player_line_count,
            submission.business_design_requested,
            submission.business_line_count,
            self._prices,
        )

        record = OrderRecord.create(
            player_name=submission.player_name,
            team_name=submission.team_name,
            email=submission.email,
            shirt_size=submission.shirt_size,
            player_line_count=submission.player_line_count,
            player_lines=submission.player_lines,
            business_design=submission.business_design,
            business_line_count=submission.business_line_count,
            business_lines=submission.business_lines,
            total_amount=total,
        )
        self._ledger.append(record)
        logger.info(
            "Order recorded for %r (%s): total=%d",
            record.player_name,
            record.team_name,
            total,
        )

        payment_link = build_payment_link(self._recipient, total, record.player_name)

        self._notify(
            self._operator_address,
            ADMIN_SUBJECT,
            render_admin_notification(record, payment_link),
        )
        self._notify(
            record.email,
            CUSTOMER_SUBJECT,
            render_customer_notification(record, payment_link, self._sales_address),
        )

        return SubmissionResultDTO(amount=total, payment_link=payment_link)

    # --- Internal helpers -----------------------------------------------------

    def _notify(self, to: str, subject: str, body: str) -> None:
        if not to:
            logger.warning("No recipient for %r email; skipped.", subject)
            return
        try:
            self._mailer.send(to=to, subject=subject, body=body)
        except TransportError:
            # The order is already in the ledger; a lost email does not undo it.
            logger.warning("Failed to send %r email to %s", subject, to, exc_info=True)
