"""
Models package for the Line Change Timer.

This package contains the core data models used throughout the application.
"""
from .player import Player, clamp_to_cap
from .session_clock import ClockState, SessionClock
from .score import ScorePair, Side
from .game_state import GameState
from .standings import PlayerStanding, RosterSnapshot

__all__ = [
    "Player", "clamp_to_cap", "ClockState", "SessionClock", "ScorePair", "Side",
    "GameState", "PlayerStanding", "RosterSnapshot"
]
