"""Domain models for the daily sugar limit."""

from dataclasses import dataclass
from enum import StrEnum

DEFAULT_DAILY_LIMIT = 25.0
HEALTHY_SUGAR_THRESHOLD = 5.0


class SugarStatus(StrEnum):
    """Band of a sugar total relative to the daily limit."""

    UNDER = "under"
    GOOD = "good"
    OVER = "over"


@dataclass(frozen=True)
class SugarSummary:
    """Total, limit and derived display values for a set of foods."""

    total: float
    limit: float
    percentage: float
    status: SugarStatus


@dataclass(frozen=True)
class AdditionCheck:
    """Outcome of evaluating a candidate food against the limit."""

    current_total: float
    projected_total: float
    would_exceed: bool
    warn: bool
