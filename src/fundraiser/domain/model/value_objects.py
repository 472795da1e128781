"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass

from fundraiser.domain.exceptions import ValidationError

DEFAULT_PRICE_PER_PLAYER_LINE = 20
DEFAULT_PRICE_PER_BUSINESS_LINE = 200


@dataclass(frozen=True)
class PriceList:
    """Unit prices for the two kinds of shirt lines.

    Prices are whole currency units; the fundraiser never charges cents.
    """

    per_player_line: int = DEFAULT_PRICE_PER_PLAYER_LINE
    per_business_line: int = DEFAULT_PRICE_PER_BUSINESS_LINE

    def __post_init__(self) -> None:
        for name in ("per_player_line", "per_business_line"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise ValidationError(
                    f"Price {name} must be an integer, got {type(value).__name__}"
                )
            if value < 0:
                raise ValidationError(f"Price {name} cannot be negative, got {value}")


@dataclass(frozen=True)
class PaymentRecipient:
    """Where customers send money: a handle on a payment service."""

    handle: str
    base_url: str = "https://venmo.com/"

    def __post_init__(self) -> None:
        if not self.handle or not self.handle.strip():
            raise ValidationError("Payment recipient handle is required")
        if not self.base_url or not self.base_url.strip():
            raise ValidationError("Payment base URL is required")
