"""
Services package for the Line Change Timer.

This package contains service classes that handle business logic.
"""
from .timer_service import TimerService, PlayerNotFoundError
from .ranking_service import RankingService
from .player_service import PlayerService, PlayerValidationError, parse_player_names
from .persistence_service import NameStore, PersistenceService
from .service_factory import ServiceFactory

__all__ = [
    "TimerService", "PlayerNotFoundError", "RankingService",
    "PlayerService", "PlayerValidationError", "parse_player_names",
    "NameStore", "PersistenceService", "ServiceFactory"
]
