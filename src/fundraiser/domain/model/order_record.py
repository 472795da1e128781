"""Order Record — the priced, timestamped form of one shirt order.

A record is frozen once built.  Its ledger row is fixed-width: every
record occupies the same number of columns regardless of how many
supporter or business lines were actually bought.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

# ---------------------------------------------------------------------------
# Ledger layout
# ---------------------------------------------------------------------------
PLAYER_LINE_SLOTS = 20
BUSINESS_LINE_SLOTS = 10
BUSINESS_DESIGN_DEFAULT = "No"

LEDGER_HEADER: tuple[str, ...] = (
    "Timestamp",
    "Player Name",
    "Team/Coach",
    "Email",
    "Shirt Size",
    "Number of Player Lines",
    *(f"Player Line {i}" for i in range(1, PLAYER_LINE_SLOTS + 1)),
    "Business Design Purchased",
    "Number of Business Lines",
    *(f"Business Line {i}" for i in range(1, BUSINESS_LINE_SLOTS + 1)),
    "Total Amount",
)

LEDGER_COLUMN_COUNT = len(LEDGER_HEADER)


def _pad(lines: tuple[str, ...], slots: int) -> list[str]:
    padded = list(lines[:slots])
    padded.extend([""] * (slots - len(padded)))
    return padded


@dataclass(frozen=True)
class OrderRecord:
    """One row of the order ledger.

    Use ``OrderRecord.create()`` for new orders; it stamps the record
    with the current UTC time.  The plain constructor exists so tests
    and readers can rebuild a record with a known timestamp.
    """

    player_name: str
    team_name: str
    email: str
    shirt_size: str
    player_line_count: int
    player_lines: tuple[str, ...]
    business_design: str
    business_line_count: int
    business_lines: tuple[str, ...]
    total_amount: int
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def create(
        *,
        player_name: str,
        team_name: str,
        email: str,
        shirt_size: str,
        player_line_count: int,
        player_lines: list[str],
        business_design: str | None,
        business_line_count: int,
        business_lines: list[str],
        total_amount: int,
    ) -> OrderRecord:
        """Build a new record stamped with the current time.

        Counts are the purchased quantities; only the first
        ``PLAYER_LINE_SLOTS`` / ``BUSINESS_LINE_SLOTS`` line texts are kept.
        """
        return OrderRecord(
            player_name=player_name,
            team_name=team_name,
            email=email,
            shirt_size=shirt_size,
            player_line_count=player_line_count,
            player_lines=tuple(player_lines[:PLAYER_LINE_SLOTS]),
            business_design=business_design or BUSINESS_DESIGN_DEFAULT,
            business_line_count=business_line_count,
            business_lines=tuple(business_lines[:BUSINESS_LINE_SLOTS]),
            total_amount=total_amount,
        )

    # --- Computed properties --------------------------------------------------

    @property
    def business_design_requested(self) -> bool:
        return self.business_design == "yes"

    @property
    def timestamp_text(self) -> str:
        """ISO-8601 UTC with millisecond precision and a ``Z`` suffix."""
        stamp = self.timestamp.astimezone(timezone.utc)
        return stamp.isoformat(timespec="milliseconds").replace("+00:00", "Z")

    # --- Serialization --------------------------------------------------------

    def to_row(self) -> list[str]:
        """Return the record as exactly ``LEDGER_COLUMN_COUNT`` text fields."""
        return [
            self.timestamp_text,
            self.player_name,
            self.team_name,
            self.email,
            self.shirt_size,
            str(self.player_line_count),
            *_pad(self.player_lines, PLAYER_LINE_SLOTS),
            self.business_design,
            str(self.business_line_count),
            *_pad(self.business_lines, BUSINESS_LINE_SLOTS),
            str(self.total_amount),
        ]
