"""Data Transfer Objects — plain containers that cross layer boundaries.

``OrderSubmission.from_form`` is the one place raw form fields are
interpreted.  Numeric fields are read leniently: anything that does not
start with an integer counts as zero instead of being rejected.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from typing import Any, Mapping

from fundraiser.domain.model.order_record import BUSINESS_LINE_SLOTS, PLAYER_LINE_SLOTS

BUSINESS_DESIGN_SENTINEL = "yes"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_ACCEPTED = {"true", "yes", "1", "on"}


def parse_count(value: Any) -> int:
    """Read a line count the way a lenient web form would.

    ``"3"`` and ``"3 lines"`` give 3; ``None``, ``"abc"`` and negative
    numbers give 0.  Never raises.
    """
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return max(0, value)
    if isinstance(value, float):
        return max(0, int(value)) if math.isfinite(value) else 0
    if not isinstance(value, str):
        return 0
    match = _LEADING_INT.match(value)
    if match is None:
        return 0
    try:
        count = int(match.group(1))
    except ValueError:
        # Past the interpreter's digit limit for int().
        return 0
    return max(0, count)


def is_accepted(value: Any) -> bool:
    """True for a checked checkbox or an explicit JSON ``true``."""
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value != 0
    if isinstance(value, str):
        return value.strip().lower() in _ACCEPTED
    return False


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def _collect(data: Mapping[str, Any], prefix: str, count: int, slots: int) -> list[str]:
    """Positional lookup of ``<prefix>1..<prefix>N``; gaps become ""."""
    return [_text(data.get(f"{prefix}{i}")) for i in range(1, min(count, slots) + 1)]


@dataclass(frozen=True)
class OrderSubmission:
    """Input: one shirt order as the customer filled it in."""

    player_name: str
    team_name: str
    email: str
    shirt_size: str
    terms_accepted: bool
    player_line_count: int = 0
    player_lines: list[str] = field(default_factory=list)
    business_design: str | None = None
    business_line_count: int = 0
    business_lines: list[str] = field(default_factory=list)

    @property
    def business_design_requested(self) -> bool:
        return self.business_design == BUSINESS_DESIGN_SENTINEL

    @staticmethod
    def from_form(data: Mapping[str, Any]) -> OrderSubmission:
        """Build a submission from form or JSON fields.

        Only the first 20 player lines and 10 business lines are read;
        those are all the ledger can hold.
        """
        terms = data.get("terms", data.get("termsAccepted"))
        business_design = data.get("businessDesign")
        business_design = None if business_design is None else str(business_design)

        player_line_count = parse_count(data.get("lineCount"))
        if business_design == BUSINESS_DESIGN_SENTINEL:
            business_line_count = parse_count(data.get("businessLines"))
        else:
            business_line_count = 0

        return OrderSubmission(
            player_name=_text(data.get("playerName")),
            team_name=_text(data.get("teamName")),
            email=_text(data.get("email")),
            shirt_size=_text(data.get("shirtSize")),
            terms_accepted=is_accepted(terms),
            player_line_count=player_line_count,
            player_lines=_collect(data, "line", player_line_count, PLAYER_LINE_SLOTS),
            business_design=business_design,
            business_line_count=business_line_count,
            business_lines=_collect(
                data, "businessLine", business_line_count, BUSINESS_LINE_SLOTS
            ),
        )


@dataclass(frozen=True)
class SubmissionResultDTO:
    """Output: what the customer needs to finish paying."""

    amount: int
    payment_link: str
