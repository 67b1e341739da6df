"""
GameState model for the Line Change Timer application.

This module contains the GameState dataclass which owns everything one timed
session needs: the roster in display order, the session clock and the score.
One instance exists per session and is passed explicitly to the services.
"""
from dataclasses import dataclass, field
from typing import List, Optional

from .player import Player
from .score import ScorePair
from .session_clock import SessionClock
from ..utils import DEFAULT_CAP_MIN, minutes_to_ms


def _default_clock() -> SessionClock:
    return SessionClock(cap_ms=minutes_to_ms(DEFAULT_CAP_MIN))


@dataclass
class GameState:
    """
    Represents the complete state of a timed session.

    Attributes:
        roster: Players in creation/display order
        clock: Session clock, which also carries the cap
        score: Home/away score counters
    """
    roster: List[Player] = field(default_factory=list)
    clock: SessionClock = field(default_factory=_default_clock)
    score: ScorePair = field(default_factory=ScorePair)

    @property
    def cap_ms(self) -> Optional[float]:
        return self.clock.cap_ms

    def is_running(self) -> bool:
        return self.clock.running

    def find_player(self, player_id: int) -> Optional[Player]:
        """Look a player up by id, None if not on the roster."""
        for player in self.roster:
            if player.id == player_id:
                return player
        return None

    def player_names(self) -> List[str]:
        return [player.name for player in self.roster]

    def to_json(self) -> dict:
        """
        Convert GameState to JSON-serializable dictionary.

        Only banked values are written; fold running intervals first.
        """
        return {
            "players": [player.to_dict() for player in self.roster],
            "clock": self.clock.to_dict(),
            "score": self.score.to_dict(),
        }

    @staticmethod
    def from_json(data: dict) -> "GameState":
        """
        Create GameState from JSON dictionary.

        Args:
            data: Dictionary with game state data

        Returns:
            New GameState instance
        """
        gs = GameState()
        if "clock" in data:
            gs.clock = SessionClock.from_dict(data.get("clock"))
        gs.score = ScorePair.from_dict(data.get("score"))

        seen_ids = set()
        for pdata in data.get("players", []) or []:
            player = Player.from_dict(pdata)
            if player.id in seen_ids:
                raise ValueError(f"Duplicate player id in saved game: {player.id}")
            seen_ids.add(player.id)
            if gs.cap_ms is not None:
                player.accumulated_ms = min(player.accumulated_ms, gs.cap_ms)
            gs.roster.append(player)
        return gs
