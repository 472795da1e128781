"""Domain service: Pricing Engine.

Pure computation; callers hand in counts that are already clamped to
non-negative integers.
"""

from __future__ import annotations

from fundraiser.domain.model.value_objects import PriceList


def compute_total(
    player_line_count: int,
    business_design_requested: bool,
    business_line_count: int,
    prices: PriceList | None = None,
) -> int:
    """Return the charge for an order in whole currency units."""
    prices = prices or PriceList()
    business_lines = business_line_count if business_design_requested else 0
    return (
        player_line_count * prices.per_player_line
        + business_lines * prices.per_business_line
    )
