"""
Session clock model for the Line Change Timer application.

The clock is anchored rather than polled: it keeps the elapsed time banked
before the last resume (``offset_ms``) and the timestamp of that resume
(``resumed_at``), and recomputes ``offset + (now - resumed_at)`` on every read.
Missed display ticks therefore never under-count time.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from .player import clamp_to_cap


class ClockState(Enum):
    """Session clock states. CAPPED is terminal until reset."""
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    CAPPED = "capped"


@dataclass
class SessionClock:
    """
    Total elapsed active session time with an optional cap.

    Attributes:
        cap_ms: Maximum session duration in milliseconds, None when uncapped
        state: Current ClockState
        offset_ms: Elapsed time banked before the current resume
        resumed_at: Timestamp of the last resume, None unless running
    """
    cap_ms: Optional[float] = None
    state: ClockState = ClockState.IDLE
    offset_ms: float = 0.0
    resumed_at: Optional[float] = None

    @property
    def running(self) -> bool:
        return self.state is ClockState.RUNNING

    @property
    def capped(self) -> bool:
        return self.state is ClockState.CAPPED

    def start(self, now: float) -> bool:
        """
        Start or resume the clock from IDLE or PAUSED.

        Returns:
            True if the clock transitioned to RUNNING
        """
        if self.state not in (ClockState.IDLE, ClockState.PAUSED):
            return False
        self.resumed_at = now
        self.state = ClockState.RUNNING
        return True

    def pause(self, now: float) -> bool:
        """
        Bank the running interval and pause.

        Returns:
            True if the clock transitioned to PAUSED
        """
        if not self.running:
            return False
        self.offset_ms = self.tick(now)
        self.resumed_at = None
        self.state = ClockState.PAUSED
        return True

    def tick(self, now: float) -> float:
        """
        Project elapsed time at ``now`` without changing any state.

        The value is clamped to the cap; reaching the cap is acted upon by the
        roster owner so that player folding stays in step with the clock.
        """
        elapsed = self.offset_ms
        if self.running and self.resumed_at is not None:
            elapsed += max(0.0, now - self.resumed_at)
        return clamp_to_cap(elapsed, self.cap_ms)

    def elapsed(self, now: float) -> float:
        """Elapsed session time at ``now`` in any state."""
        return self.tick(now)

    def remaining(self, now: float) -> Optional[float]:
        """Time left before the cap, None when uncapped."""
        if self.cap_ms is None:
            return None
        return max(0.0, self.cap_ms - self.tick(now))

    def is_over_cap(self, now: float) -> bool:
        return self.cap_ms is not None and self.tick(now) >= self.cap_ms

    def cap_reached_at(self) -> Optional[float]:
        """Exact timestamp at which the running interval reaches the cap."""
        if not self.running or self.cap_ms is None or self.resumed_at is None:
            return None
        return self.resumed_at + max(0.0, self.cap_ms - self.offset_ms)

    def freeze_at_cap(self) -> None:
        """Clamp elapsed to the cap and enter the terminal CAPPED state."""
        if self.cap_ms is not None:
            self.offset_ms = self.cap_ms
        self.resumed_at = None
        self.state = ClockState.CAPPED

    def reset(self) -> None:
        """Return to IDLE with zero elapsed time. Valid from any state."""
        self.offset_ms = 0.0
        self.resumed_at = None
        self.state = ClockState.IDLE

    def to_dict(self) -> Dict[str, Any]:
        return {
            "state": self.state.value,
            "offset_ms": self.offset_ms,
            "cap_ms": self.cap_ms,
        }

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> 'SessionClock':
        """
        Rebuild a clock from saved data.

        Anchors do not survive a save, so a clock saved while running comes
        back PAUSED, and one saved at the cap comes back CAPPED.
        """
        if not data:
            return cls()
        cap = data.get("cap_ms")
        cap_ms = float(cap) if cap is not None else None
        try:
            state = ClockState(data.get("state", ClockState.IDLE.value))
        except ValueError:
            state = ClockState.IDLE
        if state is ClockState.RUNNING:
            state = ClockState.PAUSED

        clock = cls(cap_ms=cap_ms, state=state)
        clock.offset_ms = clamp_to_cap(float(data.get("offset_ms", 0) or 0), cap_ms)
        if cap_ms is not None and clock.offset_ms >= cap_ms and state is not ClockState.IDLE:
            clock.state = ClockState.CAPPED
        elif clock.state is ClockState.CAPPED:
            # Saved as capped but short of the cap
            clock.state = ClockState.PAUSED if clock.offset_ms > 0 else ClockState.IDLE
        return clock
