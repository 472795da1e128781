"""SMTP implementation of MailTransport.

Opens one connection per message, bounded by a socket timeout.
"""

from __future__ import annotations

import logging
import smtplib
from email.errors import MessageError
from email.message import EmailMessage

from fundraiser.domain.exceptions import TransportError
from fundraiser.domain.gateway.mail_transport import MailTransport

logger = logging.getLogger(__name__)


class SmtpMailTransport(MailTransport):

    def __init__(
        self,
        host: str,
        port: int,
        username: str,
        password: str,
        sender: str,
        *,
        use_tls: bool = True,
        timeout: float = 10.0,
    ) -> None:
        self._host = host
        self._port = port
        self._username = username
        self._password = password
        self._sender = sender
        self._use_tls = use_tls
        self._timeout = timeout

    def send(self, to: str, subject: str, body: str) -> None:
        try:
            message = self._build_message(to, subject, body)
            with smtplib.SMTP(self._host, self._port, timeout=self._timeout) as server:
                if self._use_tls:
                    server.starttls()
                if self._username:
                    server.login(self._username, self._password)
                server.send_message(message)
        except (smtplib.SMTPException, OSError, ValueError, MessageError) as exc:
            raise TransportError(
                f"Failed to send {subject!r} to {to} via {self._host}:{self._port}: {exc}"
            ) from exc

        logger.info("Sent %r email to %s", subject, to)

    def _build_message(self, to: str, subject: str, body: str) -> EmailMessage:
        # Header assignment raises ValueError on CR/LF in a value.
        message = EmailMessage()
        message["From"] = self._sender
        message["To"] = to
        message["Subject"] = subject
        message.set_content(body)
        return message
