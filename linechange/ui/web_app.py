"""
Web application module for the Line Change Timer.

This module contains the Flask web server that serves the HTML interface and
provides the JSON API the browser polls. ``GET /api/state`` is the display
refresh path: it runs the cap check and returns the ranked roster sampled at
a single timestamp.
"""
import os
from dataclasses import asdict
from typing import Any, Dict, Mapping, Optional

from flask import Flask, jsonify, request, send_from_directory

from ..config import Config
from ..models import GameState, PlayerStanding, RosterSnapshot, SessionClock
from ..services import (
    PlayerNotFoundError, PlayerValidationError, ServiceFactory
)
from ..utils import (
    SystemClock, configure_logging, fmt_duration, get_logger, minutes_to_ms
)

log = get_logger(__name__)


class WebAppState:
    """
    State holder for one running web application.

    Owns the session's GameState and the services bound to it. Each Flask
    app gets its own instance; nothing lives at module level.
    """

    def __init__(self, config: Mapping[str, Any], clock=None):
        self.config = config
        self.clock = clock or SystemClock()
        self.service_factory = ServiceFactory(clock=self.clock)

        cap_minutes = float(config.get("CAP_MINUTES") or 0)
        cap_ms = minutes_to_ms(cap_minutes) if cap_minutes > 0 else None
        ceiling_minutes = config.get("DISPLAY_CEILING_MINUTES")
        self.display_ceiling_ms = minutes_to_ms(ceiling_minutes) if ceiling_minutes else None

        self.game_state = GameState(clock=SessionClock(cap_ms=cap_ms))
        self.name_store = self.service_factory.create_name_store(config.get("NAMES_FILE"))
        self.reset_services()
        self.restore_saved_names()

    def reset_services(self) -> None:
        """Bind fresh services to the current game state."""
        services = self.service_factory.create_complete_service_suite(self.game_state)
        self.timer_service = services['timer']
        self.ranking_service = services['ranking']
        self.player_service = services['player']
        self.persistence_service = services['persistence']

    def replace_game_state(self, game_state: GameState) -> None:
        self.game_state = game_state
        self.reset_services()

    def restore_saved_names(self) -> None:
        """Load the roster remembered from the previous run, if any."""
        stored = self.name_store.load_names()
        if not stored:
            return
        try:
            names = self.player_service.names_from_input(stored)
        except PlayerValidationError as e:
            log.warning("Not restoring saved player names: %s", e)
            return
        self.timer_service.load_roster(names)
        log.info("Restored %d saved player names", len(names))

    def now(self) -> float:
        return self.clock.now()


def _standing_payload(standing: PlayerStanding, ceiling_ms: Optional[float]) -> Dict[str, Any]:
    data = asdict(standing)
    data["total_display"] = fmt_duration(standing.total_ms, ceiling_ms)
    data["current_display"] = fmt_duration(standing.current_interval_ms, ceiling_ms)
    return data


def _build_timer_data(snapshot: RosterSnapshot, ceiling_ms: Optional[float]) -> Dict[str, Any]:
    return {
        "state": snapshot.clock_state,
        "running": snapshot.running,
        "elapsed_ms": snapshot.elapsed_ms,
        "elapsed_display": fmt_duration(snapshot.elapsed_ms, ceiling_ms),
        "remaining_ms": snapshot.remaining_ms,
        "remaining_display": (
            fmt_duration(snapshot.remaining_ms, ceiling_ms)
            if snapshot.remaining_ms is not None else None
        ),
        "cap_ms": snapshot.cap_ms,
    }


def create_app(
    config_class: type = Config,
    app_state: Optional[WebAppState] = None,
    static_folder: Optional[str] = None,
) -> Flask:
    """
    Create and configure the Flask application with API endpoints.

    Args:
        config_class: Configuration object loaded into ``app.config``
        app_state: Pre-built state (tests inject one with a fake clock)
        static_folder: Directory to serve index.html from; defaults to config

    Returns:
        Configured Flask application instance
    """
    static_folder = os.path.abspath(static_folder or config_class.STATIC_FOLDER)
    app = Flask(__name__, static_folder=static_folder, static_url_path="")
    app.config.from_object(config_class)

    state = app_state or WebAppState(app.config)
    app.extensions["linechange"] = state

    def _json_body() -> dict:
        data = request.get_json(silent=True)
        return data if isinstance(data, dict) else {}

    @app.route("/")
    def index():
        """Serve the main HTML interface."""
        response = send_from_directory(static_folder, "index.html")
        response.headers['Cache-Control'] = 'no-cache, no-store, must-revalidate'
        return response

    # ==================== Display Refresh ==================== #

    @app.route("/api/state", methods=["GET"])
    def get_state():
        """Run the cap check and return everything the display needs."""
        try:
            now = state.now()
            capped_now = state.timer_service.tick_cap_check(now)
            snapshot = state.ranking_service.snapshot(now)
            ceiling = state.display_ceiling_ms

            return jsonify({
                "success": True,
                "capped_now": capped_now,
                "game_state": _build_timer_data(snapshot, ceiling),
                "players": [_standing_payload(s, ceiling) for s in snapshot.roster],
                "standings": [_standing_payload(s, ceiling) for s in snapshot.standings],
                "score": {"home": snapshot.home_score, "away": snapshot.away_score},
                "refresh_ms": app.config.get("REFRESH_MS"),
            })
        except Exception as e:
            log.exception("Failed to build state")
            return jsonify({"success": False, "error": str(e)}), 500

    # ==================== Timer Controls ==================== #

    @app.route("/api/timer/start", methods=["POST"])
    def start_timer():
        """Start or resume the game timer."""
        try:
            changed = state.timer_service.start_game()
            return jsonify({"success": True, "changed": changed,
                            "state": state.timer_service.clock_state().value})
        except Exception as e:
            log.exception("Failed to start timer")
            return jsonify({"success": False, "error": str(e)}), 500

    @app.route("/api/timer/pause", methods=["POST"])
    def pause_timer():
        """Pause the game timer."""
        try:
            changed = state.timer_service.pause_game()
            return jsonify({"success": True, "changed": changed,
                            "state": state.timer_service.clock_state().value})
        except Exception as e:
            log.exception("Failed to pause timer")
            return jsonify({"success": False, "error": str(e)}), 500

    @app.route("/api/timer/reset", methods=["POST"])
    def reset_timer():
        """Reset all timers; ``{"full": true}`` also clears the score."""
        try:
            full = _json_body().get("full", False)
            if not isinstance(full, bool):
                return jsonify({"success": False, "error": "full must be true or false"}), 400
            state.timer_service.reset_game(full=full)
            return jsonify({"success": True, "full": full})
        except Exception as e:
            log.exception("Failed to reset timer")
            return jsonify({"success": False, "error": str(e)}), 500

    @app.route("/api/timer/configure", methods=["POST"])
    def configure_timer():
        """Set the session cap; ``{"cap_minutes": null}`` removes it."""
        try:
            data = _json_body()
            if "cap_minutes" not in data:
                return jsonify({"success": False, "error": "cap_minutes is required"}), 400
            cap_minutes = data.get("cap_minutes")
            state.timer_service.configure_game(
                cap_minutes=cap_minutes, uncapped=cap_minutes is None
            )
            return jsonify({"success": True,
                            "configuration": state.timer_service.get_timer_configuration()})
        except (TypeError, ValueError) as e:
            return jsonify({"success": False, "error": str(e)}), 400
        except Exception as e:
            log.exception("Failed to configure timer")
            return jsonify({"success": False, "error": str(e)}), 500

    # ==================== Roster & Players ==================== #

    @app.route("/api/roster", methods=["POST"])
    def load_roster():
        """Replace the roster from ``{"names": "A, B"}`` or a list of names."""
        try:
            names = state.player_service.names_from_input(_json_body().get("names"))
            players = state.timer_service.load_roster(names)
            state.name_store.save_names(names)
            return jsonify({
                "success": True,
                "message": f"Roster updated with {len(players)} players",
                "players": [player.to_dict() for player in players],
            })
        except PlayerValidationError as e:
            return jsonify({"success": False, "error": str(e)}), 400
        except Exception as e:
            log.exception("Failed to load roster")
            return jsonify({"success": False, "error": str(e)}), 500

    @app.route("/api/roster", methods=["DELETE"])
    def clear_roster():
        """Drop the roster, all times, the score and the remembered names."""
        try:
            state.timer_service.clear_roster()
            state.name_store.clear()
            return jsonify({"success": True, "message": "Roster cleared"})
        except Exception as e:
            log.exception("Failed to clear roster")
            return jsonify({"success": False, "error": str(e)}), 500

    @app.route("/api/players/<int:player_id>/toggle", methods=["POST"])
    def toggle_player(player_id: int):
        """Put a player on, or take them off."""
        try:
            player = state.timer_service.toggle_player(player_id)
            return jsonify({"success": True, "player": player.to_dict()})
        except PlayerNotFoundError:
            return jsonify({"success": False, "error": f"Player {player_id} not found"}), 404
        except Exception as e:
            log.exception("Failed to toggle player %s", player_id)
            return jsonify({"success": False, "error": str(e)}), 500

    # ==================== Score ==================== #

    @app.route("/api/score/<side>/<action>", methods=["POST"])
    def change_score(side: str, action: str):
        """Increment or decrement the home or away counter."""
        try:
            if action == "increment":
                value = state.timer_service.increment_score(side)
            elif action == "decrement":
                value = state.timer_service.decrement_score(side)
            else:
                return jsonify({"success": False, "error": f"Unknown action: {action}"}), 404
            return jsonify({"success": True, "side": side, "value": value,
                            "score": state.game_state.score.to_dict()})
        except ValueError as e:
            return jsonify({"success": False, "error": str(e)}), 400
        except Exception as e:
            log.exception("Failed to change score")
            return jsonify({"success": False, "error": str(e)}), 500

    # ==================== Save / Load ==================== #

    @app.route("/api/save", methods=["GET"])
    def export_game():
        """Return the current game for client-side saving."""
        try:
            data = state.persistence_service.serialize_game_state(state.game_state, state.now())
            return jsonify({"success": True, "data": data})
        except Exception as e:
            log.exception("Failed to export game")
            return jsonify({"success": False, "error": str(e)}), 500

    @app.route("/api/save", methods=["POST"])
    def save_game():
        """Write the current game to the save directory."""
        path = state.persistence_service.auto_save(
            state.game_state, app.config.get("SAVE_DIR"), now=state.now()
        )
        if path is None:
            return jsonify({"success": False, "error": "Unable to write save file"}), 500
        return jsonify({"success": True, "filename": os.path.basename(path)})

    @app.route("/api/saves", methods=["GET"])
    def list_saves():
        saves = state.persistence_service.get_recent_saves(app.config.get("SAVE_DIR"))
        return jsonify({
            "success": True,
            "saves": [{"filename": name, "modified": mtime} for name, mtime in saves],
        })

    @app.route("/api/load", methods=["POST"])
    def load_game():
        """Load a game from ``{"game_data": {...}}`` or ``{"filename": "..."}``."""
        try:
            data = _json_body()
            if data.get("game_data"):
                game_state = state.persistence_service.deserialize_game_state(data["game_data"])
            elif data.get("filename"):
                file_path = os.path.join(
                    app.config.get("SAVE_DIR"), os.path.basename(data["filename"])
                )
                game_state = state.persistence_service.load_game_from_file(file_path)
            else:
                return jsonify({"success": False, "error": "No game data provided"}), 400

            state.replace_game_state(game_state)
            if game_state.roster:
                state.name_store.save_names(game_state.player_names())
            return jsonify({"success": True, "message": "Game state loaded successfully"})
        except FileNotFoundError as e:
            return jsonify({"success": False, "error": str(e)}), 404
        except ValueError as e:
            return jsonify({"success": False, "error": str(e)}), 400
        except Exception as e:
            log.exception("Failed to load game")
            return jsonify({"success": False, "error": str(e)}), 500

    return app


def run_web_app(
    host: Optional[str] = None,
    port: Optional[int] = None,
    static_folder: Optional[str] = None,
    config_class: type = Config,
) -> None:
    """
    Run the web application.

    Args:
        host: Host address to bind to (default from config: localhost only)
        port: Port number to listen on
        static_folder: Directory containing index.html and assets
        config_class: Configuration object
    """
    configure_logging(config_class.LOG_LEVEL, config_class.LOG_DIR or None)
    app = create_app(config_class, static_folder=static_folder)
    # Transitions assume one request at a time
    app.run(
        host=host or config_class.HOST,
        port=port or config_class.PORT,
        debug=False,
        threaded=False,
    )
