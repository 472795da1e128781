"""Integration tests for the SubmitOrder use case.

Uses in-memory fakes — no file I/O, no SMTP.
"""

import pytest

from fundraiser.application.dto import OrderSubmission
from fundraiser.application.submit_order import SubmitOrderHandler
from fundraiser.domain.exceptions import PersistenceError, ValidationError
from fundraiser.domain.model.value_objects import PaymentRecipient, PriceList
from tests.fakes import FakeMailTransport, FakeOrderLedger

OPERATOR = "orders@fundraiser.example"
SALES = "sales@fundraiser.example"


def _setup(
    ledger: FakeOrderLedger | None = None,
    mailer: FakeMailTransport | None = None,
    prices: PriceList | None = None,
) -> tuple[SubmitOrderHandler, FakeOrderLedger, FakeMailTransport]:
    ledger = ledger or FakeOrderLedger()
    mailer = mailer or FakeMailTransport()
    handler = SubmitOrderHandler(
        ledger=ledger,
        mailer=mailer,
        recipient=PaymentRecipient("team-fund"),
        operator_address=OPERATOR,
        sales_address=SALES,
        prices=prices,
    )
    return handler, ledger, mailer


def _form(**overrides) -> OrderSubmission:
    data = {
        "terms": True,
        "lineCount": "2",
        "line1": "Alex",
        "line2": "Sam",
        "businessDesign": "no",
        "shirtSize": "M",
        "playerName": "Alex P",
        "teamName": "Tigers",
        "email": "a@example.com",
    }
    data.update(overrides)
    return OrderSubmission.from_form(data)


class TestSubmitOrderHappyPath:

    def test_player_lines_only(self):
        handler, _, _ = _setup()
        result = handler.handle(_form())
        assert result.amount == 40
        assert "amount=40" in result.payment_link
        assert "Fundraiser%20-%20Alex%20P" in result.payment_link

    def test_with_business_design(self):
        handler, _, _ = _setup()
        result = handler.handle(
            _form(businessDesign="yes", businessLines="1", businessLine1="Acme Co")
        )
        assert result.amount == 240

    def test_unparsable_line_count_is_zero(self):
        handler, ledger, _ = _setup()
        result = handler.handle(
            _form(lineCount="abc", businessDesign="yes", businessLines="1")
        )
        assert result.amount == 200
        assert ledger.records[0].player_line_count == 0

    def test_appends_one_record(self):
        handler, ledger, _ = _setup()
        handler.handle(_form())
        assert ledger.count() == 1
        record = ledger.records[0]
        assert record.player_lines == ("Alex", "Sam")
        assert record.total_amount == 40
        assert record.business_design == "no"

    def test_configured_prices(self):
        handler, _, _ = _setup(prices=PriceList(per_player_line=25, per_business_line=100))
        result = handler.handle(_form(businessDesign="yes", businessLines="2"))
        assert result.amount == 2 * 25 + 2 * 100


class TestSubmitOrderNotifications:

    def test_sends_admin_and_customer_copies(self):
        handler, _, mailer = _setup()
        result = handler.handle(_form())

        admin = mailer.sent_to(OPERATOR)
        customer = mailer.sent_to("a@example.com")
        assert [m["subject"] for m in admin] == ["New Shirt Order"]
        assert [m["subject"] for m in customer] == ["Your Shirt Order Confirmation"]
        assert result.payment_link in admin[0]["body"]
        assert result.payment_link in customer[0]["body"]

    def test_logo_reminder_for_business_design(self):
        handler, _, mailer = _setup()
        handler.handle(_form(businessDesign="yes", businessLines="1"))
        assert SALES in mailer.sent_to("a@example.com")[0]["body"]

    def test_admin_failure_still_notifies_customer(self):
        handler, ledger, mailer = _setup(mailer=FakeMailTransport({OPERATOR}))
        result = handler.handle(_form())
        assert result.amount == 40
        assert ledger.count() == 1
        assert len(mailer.sent_to("a@example.com")) == 1

    def test_customer_failure_is_not_surfaced(self, caplog):
        handler, ledger, mailer = _setup(mailer=FakeMailTransport({"a@example.com"}))
        result = handler.handle(_form())
        assert result.amount == 40
        assert ledger.count() == 1
        assert len(mailer.sent_to(OPERATOR)) == 1
        assert "Failed to send" in caplog.text

    def test_blank_customer_email_skips_customer_copy(self):
        handler, _, mailer = _setup()
        handler.handle(_form(email=""))
        assert [m["to"] for m in mailer.sent] == [OPERATOR]


class TestSubmitOrderFailures:

    def test_terms_not_accepted(self):
        handler, ledger, mailer = _setup()
        with pytest.raises(ValidationError, match="Terms not accepted"):
            handler.handle(_form(terms=False))
        assert ledger.count() == 0
        assert mailer.sent == []

    def test_missing_terms_rejected(self):
        handler, ledger, mailer = _setup()
        submission = OrderSubmission.from_form({"lineCount": "1", "email": "a@example.com"})
        with pytest.raises(ValidationError):
            handler.handle(submission)
        assert ledger.count() == 0
        assert mailer.sent == []

    def test_ledger_failure_sends_no_mail(self):
        handler, _, mailer = _setup(ledger=FakeOrderLedger(fail=True))
        with pytest.raises(PersistenceError):
            handler.handle(_form())
        assert mailer.sent == []
