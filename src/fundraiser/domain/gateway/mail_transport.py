"""Mail transport port — abstract interface for outbound email."""

from __future__ import annotations

from abc import ABC, abstractmethod


class MailTransport(ABC):

    @abstractmethod
    def send(self, to: str, subject: str, body: str) -> None:
        """Send a plain-text email.  Raises TransportError on failure."""
