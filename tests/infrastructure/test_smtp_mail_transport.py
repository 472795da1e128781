"""Tests for the SMTP mail transport, with smtplib patched out."""

import smtplib
from unittest.mock import patch

import pytest

from fundraiser.domain.exceptions import TransportError
from fundraiser.infrastructure.mail.smtp_mail_transport import SmtpMailTransport


def _transport(**overrides) -> SmtpMailTransport:
    fields = dict(
        host="smtp.example.org",
        port=587,
        username="fund@example.org",
        password="app-password",
        sender="fund@example.org",
    )
    fields.update(overrides)
    return SmtpMailTransport(**fields)


class TestSmtpMailTransport:

    def test_sends_plain_text_message(self):
        with patch.object(smtplib, "SMTP") as smtp_cls:
            _transport(timeout=3.5).send("a@example.com", "Hello", "Body text")

        smtp_cls.assert_called_once_with("smtp.example.org", 587, timeout=3.5)
        server = smtp_cls.return_value.__enter__.return_value
        server.starttls.assert_called_once()
        server.login.assert_called_once_with("fund@example.org", "app-password")
        message = server.send_message.call_args.args[0]
        assert message["From"] == "fund@example.org"
        assert message["To"] == "a@example.com"
        assert message["Subject"] == "Hello"
        assert message.get_content().strip() == "Body text"

    def test_tls_and_login_are_optional(self):
        with patch.object(smtplib, "SMTP") as smtp_cls:
            _transport(username="", use_tls=False).send("a@example.com", "Hi", "x")

        server = smtp_cls.return_value.__enter__.return_value
        server.starttls.assert_not_called()
        server.login.assert_not_called()
        server.send_message.assert_called_once()

    def test_smtp_error_becomes_transport_error(self):
        with patch.object(smtplib, "SMTP") as smtp_cls:
            server = smtp_cls.return_value.__enter__.return_value
            server.login.side_effect = smtplib.SMTPAuthenticationError(535, b"bad creds")
            with pytest.raises(TransportError, match="a@example.com"):
                _transport().send("a@example.com", "Hi", "x")

    def test_connection_error_becomes_transport_error(self):
        with patch.object(smtplib, "SMTP", side_effect=OSError("unreachable")):
            with pytest.raises(TransportError, match="unreachable"):
                _transport().send("a@example.com", "Hi", "x")

    def test_header_injection_becomes_transport_error(self):
        with patch.object(smtplib, "SMTP") as smtp_cls:
            with pytest.raises(TransportError, match="Failed to send"):
                _transport().send("a@example.com\r\nBcc: x@y.com", "Hi", "x")

        smtp_cls.assert_not_called()
