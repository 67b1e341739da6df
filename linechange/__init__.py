"""
Line Change Timer

Tracks each player's time on the ice (or field) during a capped game session,
with start/pause/reset controls, per-player on/off toggling, a ranking of
players by time played and a simple home/away score.

The timing core lives in ``models`` and ``services``; ``ui`` provides the
Flask web server the browser interface polls.
"""
from .models import ClockState, GameState, Player, ScorePair, SessionClock
from .services import PersistenceService, RankingService, TimerService
from .ui import create_app, run_web_app
from .utils import APP_TITLE, fmt_duration, now_ms

__version__ = "1.0.0"

__all__ = [
    "ClockState", "GameState", "Player", "ScorePair", "SessionClock",
    "PersistenceService", "RankingService", "TimerService",
    "create_app", "run_web_app", "APP_TITLE", "fmt_duration", "now_ms"
]
