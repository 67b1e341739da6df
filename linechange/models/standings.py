"""Dataclasses describing what the display reads from the timing core."""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class PlayerStanding:
    """Read-only view of a single player's time at one sample instant."""

    id: int
    name: str
    is_active: bool
    accumulating: bool
    current_interval_ms: float
    total_ms: float
    place: int = 0


@dataclass
class RosterSnapshot:
    """Everything a display refresh needs, sampled at a single timestamp."""

    generated_ts: float
    clock_state: str
    running: bool
    elapsed_ms: float
    remaining_ms: Optional[float]
    cap_ms: Optional[float]
    home_score: int
    away_score: int
    standings: List[PlayerStanding] = field(default_factory=list)
    roster: List[PlayerStanding] = field(default_factory=list)
