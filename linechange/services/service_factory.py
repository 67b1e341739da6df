"""
Service factory for wiring services to one GameState.

Every service created for a session shares the same clock source, so the
display and the transitions sample time the same way.
"""
from typing import Optional

from ..models import GameState
from ..utils import Clock
from .persistence_service import NameStore, PersistenceService
from .player_service import PlayerService
from .ranking_service import RankingService
from .timer_service import TimerService


class ServiceFactory:
    """
    Factory for creating service instances with their dependencies injected.
    """

    def __init__(self, clock: Optional[Clock] = None):
        """
        Initialize factory.

        Args:
            clock: Clock source shared by every service; None uses ``now_ms``
        """
        self.clock = clock
        self._persistence_service: Optional[PersistenceService] = None
        self._player_service: Optional[PlayerService] = None

    def create_timer_service(self, game_state: GameState) -> TimerService:
        """
        Create TimerService instance.

        Args:
            game_state: Game state to manage

        Returns:
            Configured TimerService instance
        """
        return TimerService(game_state, clock=self.clock)

    def create_ranking_service(self, game_state: GameState) -> RankingService:
        return RankingService(game_state, clock=self.clock)

    def create_name_store(self, file_path: str) -> NameStore:
        return NameStore(file_path)

    def create_complete_service_suite(self, game_state: GameState) -> dict:
        """
        Create a complete suite of services for one game state.

        Args:
            game_state: Game state for the services

        Returns:
            Dictionary containing all configured services
        """
        return {
            'timer': self.create_timer_service(game_state),
            'ranking': self.create_ranking_service(game_state),
            'player': self._get_player_service(),
            'persistence': self._get_persistence_service(),
        }

    def _get_persistence_service(self) -> PersistenceService:
        """Get singleton persistence service."""
        if self._persistence_service is None:
            self._persistence_service = PersistenceService()
        return self._persistence_service

    def _get_player_service(self) -> PlayerService:
        """Get singleton player service."""
        if self._player_service is None:
            self._player_service = PlayerService()
        return self._player_service
