"""Timer service for the Line Change Timer application.

The service is the single owner of every state transition on a GameState.
Each public transition reads the clock once and applies that same timestamp
to the session clock and to every player, so players never drift apart by
the cost of iterating the roster.
"""

from typing import Dict, Iterable, List, Optional, Union

from ..models import ClockState, GameState, Player, Side
from ..utils import (
    Clock, get_logger, minutes_to_ms, now_ms, MAX_CAP_MIN, MIN_CAP_MIN, MS_PER_MINUTE
)

log = get_logger(__name__)


class PlayerNotFoundError(KeyError):
    """Raised when a player id is not on the current roster."""


class TimerService:
    """Service for managing the session clock, the roster and the score."""

    def __init__(self, game_state: GameState, clock: Optional[Clock] = None):
        self.game_state = game_state
        self._clock = clock

    def _now(self) -> float:
        if self._clock is not None:
            return self._clock.now()
        return now_ms()

    # ------------------------------------------------------------------
    # Configuration helpers
    # ------------------------------------------------------------------
    def configure_game(
        self,
        *,
        cap_minutes: Optional[float] = None,
        uncapped: bool = False,
    ) -> None:
        """Set the maximum session duration.

        Raises:
            ValueError: If the session has already started or the cap is outside
                        ``MIN_CAP_MIN``..``MAX_CAP_MIN`` minutes.
        """

        if self.game_state.clock.state is not ClockState.IDLE:
            raise ValueError("Cannot configure timer after the game has started")

        if uncapped:
            cap_ms = None
        elif cap_minutes is None:
            return
        else:
            minutes = float(cap_minutes)
            if not MIN_CAP_MIN <= minutes <= MAX_CAP_MIN:
                raise ValueError(
                    f"Cap must be between {MIN_CAP_MIN} and {MAX_CAP_MIN} minutes"
                )
            cap_ms = minutes_to_ms(minutes)

        self.game_state.clock.cap_ms = cap_ms
        log.info("Session cap set to %s", "none" if cap_ms is None else f"{cap_ms:.0f} ms")

    # ------------------------------------------------------------------
    # Roster lifecycle
    # ------------------------------------------------------------------
    def load_roster(self, names: Iterable[str]) -> List[Player]:
        """Replace the roster with fresh, inactive players.

        Any existing roster is fully reset first so no in-flight interval
        survives into the new one.

        Raises:
            ValueError: If ``names`` is empty.
        """

        names = list(names)
        if not names:
            raise ValueError("Cannot load an empty roster")

        self.reset_game(full=True)
        self.game_state.roster = [
            Player(id=index, name=name) for index, name in enumerate(names)
        ]
        log.info("Loaded roster with %d players", len(names))
        return self.game_state.roster

    def clear_roster(self) -> None:
        """Stop everything, zero all times and scores, and drop the roster."""

        self.reset_game(full=True)
        self.game_state.roster = []
        log.info("Roster cleared")

    # ------------------------------------------------------------------
    # Core timer controls
    # ------------------------------------------------------------------
    def start_game(self) -> bool:
        """Start or resume the session.

        Players already marked active begin accumulating at the same instant
        as the session clock.

        Returns:
            True if the session transitioned to running.
        """

        clock = self.game_state.clock
        if clock.state in (ClockState.RUNNING, ClockState.CAPPED):
            return False

        now = self._now()
        clock.start(now)
        resumed = sum(1 for player in self.game_state.roster if player.resume(now))
        log.info("Game started at %.0f ms elapsed (%d players on)", clock.offset_ms, resumed)
        return True

    def pause_game(self) -> bool:
        """Pause the session and bank every player's running interval.

        Returns:
            True if the session stopped running (paused, or capped when the
            cap had already been passed).
        """

        if not self.game_state.clock.running:
            return False

        self._pause_at(self._now())
        return True

    def reset_game(self, full: bool = False) -> None:
        """Zero all player times and the session clock, keeping the roster.

        Args:
            full: Also zero the score counters.
        """

        clock = self.game_state.clock
        now = self._now()
        if clock.running:
            self._pause_at(now)

        cap_ms = clock.cap_ms
        for player in self.game_state.roster:
            player.fold_and_stop(now, cap_ms)
            player.clear()
        clock.reset()

        if full:
            self.game_state.score.reset()
        log.info("Game reset (%s)", "full" if full else "timers only")

    def toggle_player(self, player_id: int) -> Player:
        """Switch a player on or off under the current session state.

        Once the session is capped, inactive players can no longer be put on,
        but active players can always be taken off.

        Raises:
            PlayerNotFoundError: If no player has ``player_id``.
        """

        player = self.game_state.find_player(player_id)
        if player is None:
            raise PlayerNotFoundError(player_id)

        clock = self.game_state.clock
        now = self._now()
        self._apply_cap(now)

        if clock.capped and not player.is_active:
            log.debug("Ignoring activation of %s after cap", player.name)
            return player

        player.toggle(now, clock.running, clock.cap_ms)
        log.debug("Player %s is now %s", player.name, "on" if player.is_active else "off")
        return player

    def tick_cap_check(self, now: Optional[float] = None) -> bool:
        """Freeze the session once the cap is reached.

        Called from the display refresh loop. Repeated calls after the cap
        are no-ops.

        Returns:
            True only on the call that performed the cap transition.
        """

        if not self.game_state.clock.running:
            return False
        return self._apply_cap(self._now() if now is None else now)

    # ------------------------------------------------------------------
    # Score counters
    # ------------------------------------------------------------------
    def increment_score(self, side: Union[Side, str]) -> int:
        return self.game_state.score.increment(side)

    def decrement_score(self, side: Union[Side, str]) -> int:
        return self.game_state.score.decrement(side)

    # ------------------------------------------------------------------
    # Query helpers
    # ------------------------------------------------------------------
    def is_running(self) -> bool:
        return self.game_state.clock.running

    def clock_state(self) -> ClockState:
        return self.game_state.clock.state

    def get_elapsed_ms(self, now: Optional[float] = None) -> float:
        """Session elapsed time, clamped to the cap."""
        return self.game_state.clock.elapsed(self._now() if now is None else now)

    def get_remaining_ms(self, now: Optional[float] = None) -> Optional[float]:
        """Time left before the cap, or None when the session is uncapped."""
        return self.game_state.clock.remaining(self._now() if now is None else now)

    def get_timer_configuration(self) -> Dict[str, object]:
        """Return the current timer configuration for display purposes."""

        cap_ms = self.game_state.clock.cap_ms
        return {
            "cap_ms": cap_ms,
            "cap_minutes": None if cap_ms is None else cap_ms / MS_PER_MINUTE,
            "uncapped": cap_ms is None,
            "state": self.game_state.clock.state.value,
            "roster_size": len(self.game_state.roster),
        }

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _pause_at(self, now: float) -> None:
        if self._apply_cap(now):
            return

        clock = self.game_state.clock
        clock.pause(now)
        for player in self.game_state.roster:
            player.fold_and_stop(now, clock.cap_ms)
        log.info("Game paused at %.0f ms elapsed", clock.offset_ms)

    def _apply_cap(self, now: float) -> bool:
        clock = self.game_state.clock
        if not clock.running or not clock.is_over_cap(now):
            return False

        # Fold at the moment the cap was crossed, not the (later) poll time.
        cap_at = clock.cap_reached_at()
        fold_at = now if cap_at is None else min(now, cap_at)

        clock.freeze_at_cap()
        for player in self.game_state.roster:
            player.fold_and_stop(fold_at, clock.cap_ms)
        log.info("Session cap of %.0f ms reached; clock frozen", clock.offset_ms)
        return True
