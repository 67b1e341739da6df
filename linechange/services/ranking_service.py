"""Ranking helpers for the Line Change Timer."""

from __future__ import annotations

from typing import List, Optional

from ..models import GameState, PlayerStanding, RosterSnapshot
from ..utils import Clock, now_ms


class RankingService:
    """Derives display orderings from a GameState without touching it.

    Safe to call every display frame: every value is computed from the
    stored anchors at the sample timestamp and nothing is written back.
    """

    def __init__(self, game_state: GameState, clock: Optional[Clock] = None):
        self.game_state = game_state
        self._clock = clock

    def _now(self) -> float:
        if self._clock is not None:
            return self._clock.now()
        return now_ms()

    def standings(self, now: Optional[float] = None) -> List[PlayerStanding]:
        """Return one standing per player in roster order."""
        now = self._now() if now is None else now
        running = self.game_state.clock.running
        cap_ms = self.game_state.cap_ms

        return [
            PlayerStanding(
                id=player.id,
                name=player.name,
                is_active=player.is_active,
                accumulating=player.session_started_at is not None and running,
                current_interval_ms=player.current_interval_ms(now, running),
                total_ms=player.live_total(now, running, cap_ms),
            )
            for player in self.game_state.roster
        ]

    def rank(self, now: Optional[float] = None) -> List[PlayerStanding]:
        """Order players by live total, most time first.

        ``sorted`` is stable with ``reverse=True`` too, so players with equal
        totals keep their roster order.
        """
        return self._place(self.standings(now))

    def snapshot(self, now: Optional[float] = None) -> RosterSnapshot:
        """Sample the whole display payload at one timestamp."""
        now = self._now() if now is None else now
        clock = self.game_state.clock

        roster = self.standings(now)
        ranked = self._place(roster)

        return RosterSnapshot(
            generated_ts=now,
            clock_state=clock.state.value,
            running=clock.running,
            elapsed_ms=clock.elapsed(now),
            remaining_ms=clock.remaining(now),
            cap_ms=clock.cap_ms,
            home_score=self.game_state.score.home,
            away_score=self.game_state.score.away,
            standings=ranked,
            roster=roster,
        )

    @staticmethod
    def _place(standings: List[PlayerStanding]) -> List[PlayerStanding]:
        ranked = sorted(standings, key=lambda s: s.total_ms, reverse=True)
        for place, standing in enumerate(ranked, start=1):
            standing.place = place
        return ranked
