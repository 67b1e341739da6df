"""
Player model for the Line Change Timer application.

This module contains the Player dataclass which tracks a single roster member's
on-ice time. A player only accumulates time while it is active *and* the
session clock is running; every transition that breaks either condition folds
the in-flight interval into ``accumulated_ms`` first.
"""
from dataclasses import dataclass
from typing import Any, Dict, Optional


def clamp_to_cap(value_ms: float, cap_ms: Optional[float]) -> float:
    """Clamp a duration to ``[0, cap_ms]``; no upper bound when uncapped."""
    value_ms = max(0.0, value_ms)
    if cap_ms is not None:
        return min(value_ms, cap_ms)
    return value_ms


@dataclass
class Player:
    """
    Represents a roster member with an independent active-time accumulator.

    Attributes:
        id: Stable identifier assigned when the roster is created
        name: Display label, fixed once the roster is loaded
        is_active: Whether the player is currently "on"
        session_started_at: Timestamp (ms) the current interval began, None
            unless the player is active and the session clock is running
        accumulated_ms: Banked time from completed intervals, never above cap
    """
    id: int
    name: str
    is_active: bool = False
    session_started_at: Optional[float] = None
    accumulated_ms: float = 0.0

    def activate(self, now: float, running: bool) -> None:
        """
        Mark the player as on. Starts accumulating only if the session runs.

        Args:
            now: Transition timestamp in milliseconds
            running: Whether the session clock is currently running
        """
        if self.is_active:
            return
        self.is_active = True
        self.session_started_at = now if running else None

    def deactivate(self, now: float, cap_ms: Optional[float] = None) -> None:
        """
        Mark the player as off, banking any in-flight interval.

        Args:
            now: Transition timestamp in milliseconds
            cap_ms: Accounting cap applied while folding
        """
        if not self.is_active:
            return
        self._fold(now, cap_ms)
        self.is_active = False

    def toggle(self, now: float, running: bool, cap_ms: Optional[float] = None) -> bool:
        """
        Flip the player's active flag under the current session state.

        Returns:
            The new value of ``is_active``
        """
        if self.is_active:
            self.deactivate(now, cap_ms)
        else:
            self.activate(now, running)
        return self.is_active

    def resume(self, now: float) -> bool:
        """
        Start accumulating for an already-active player when the session starts.

        Returns:
            True if a new interval was anchored at ``now``
        """
        if self.is_active and self.session_started_at is None:
            self.session_started_at = now
            return True
        return False

    def fold_and_stop(self, now: float, cap_ms: Optional[float] = None) -> None:
        """Bank the in-flight interval without changing ``is_active``."""
        self._fold(now, cap_ms)

    def current_interval_ms(self, now: float, running: bool) -> float:
        """
        Time spent in the current interval; zero if not accumulating.

        Args:
            now: Sample timestamp in milliseconds
            running: Whether the session clock is currently running
        """
        if self.is_active and running and self.session_started_at is not None:
            return max(0.0, now - self.session_started_at)
        return 0.0

    def live_total(self, now: float, running: bool, cap_ms: Optional[float] = None) -> float:
        """Banked plus in-flight time, clamped to cap. Never mutates."""
        return clamp_to_cap(
            self.accumulated_ms + self.current_interval_ms(now, running), cap_ms
        )

    def clear(self) -> None:
        """Zero the accumulator and take the player off."""
        self.is_active = False
        self.session_started_at = None
        self.accumulated_ms = 0.0

    def _fold(self, now: float, cap_ms: Optional[float]) -> None:
        if self.session_started_at is not None:
            elapsed = max(0.0, now - self.session_started_at)
            self.accumulated_ms = clamp_to_cap(self.accumulated_ms + elapsed, cap_ms)
        self.session_started_at = None

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert player to dictionary for JSON serialization.

        The in-flight anchor is never included; callers fold first.
        """
        return {
            "id": self.id,
            "name": self.name,
            "is_active": self.is_active,
            "accumulated_ms": self.accumulated_ms,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Player':
        """
        Create player from dictionary for JSON deserialization.

        Args:
            data: Dictionary representation of player

        Returns:
            Player instance with no in-flight interval
        """
        return cls(
            id=int(data["id"]),
            name=str(data["name"]),
            is_active=bool(data.get("is_active", False)),
            accumulated_ms=max(0.0, float(data.get("accumulated_ms", 0) or 0)),
        )
