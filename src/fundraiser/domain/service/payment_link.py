"""Domain service: payment-request links.

The link opens the payment app with recipient, amount and note already
filled in, so the customer only has to confirm.
"""

from __future__ import annotations

from urllib.parse import quote

from fundraiser.domain.model.value_objects import PaymentRecipient

# Same unreserved set as JavaScript's encodeURIComponent (space -> %20).
_URI_COMPONENT_SAFE = "-_.!~*'()"


def payment_note(player_name: str) -> str:
    return f"Fundraiser - {player_name}"


def build_payment_link(
    recipient: PaymentRecipient, amount: int, player_name: str
) -> str:
    """Return the payment-request URL for an order total."""
    note = quote(payment_note(player_name), safe=_URI_COMPONENT_SAFE)
    return (
        f"{recipient.base_url}?txn=pay"
        f"&recipients={recipient.handle}"
        f"&amount={amount}"
        f"&note={note}"
    )
