"""
Persistence service for the Line Change Timer application.

This module handles saving and loading game state to/from JSON files, and a
small JSON key-value file that remembers the last roster names between runs.
"""
import copy
import json
import os
from datetime import datetime
from typing import List, Optional, Tuple

from ..models import GameState
from ..utils import APP_TITLE, NAMES_STORE_KEY, get_logger, now_ms
from .timer_service import TimerService

log = get_logger(__name__)

SAVE_FORMAT_VERSION = 1
SAVE_FILE_PREFIX = "game_autosave_"


class _FrozenClock:
    """Clock that always reports the same instant."""

    def __init__(self, ts: float):
        self._ts = ts

    def now(self) -> float:
        return self._ts


class PersistenceService:
    """
    Service for persisting game state to JSON.

    Only banked values are written. A running game is folded on a copy so the
    live session keeps running untouched, and the saved clock comes back
    paused: monotonic anchors mean nothing in another process.
    """

    @staticmethod
    def serialize_game_state(game_state: GameState, now: Optional[float] = None) -> dict:
        """
        Create a snapshot of game state suitable for saving.

        Args:
            game_state: Current game state
            now: Fold timestamp in milliseconds, defaults to the current time

        Returns:
            Dictionary suitable for JSON serialization
        """
        temp = copy.deepcopy(game_state)
        if temp.clock.running:
            TimerService(temp, _FrozenClock(now_ms() if now is None else now)).pause_game()

        data = temp.to_json()
        data["meta"] = {
            "app": APP_TITLE,
            "version": SAVE_FORMAT_VERSION,
            "saved_at": datetime.now().isoformat(timespec="seconds"),
        }
        return data

    @staticmethod
    def deserialize_game_state(data: dict) -> GameState:
        """
        Rebuild game state from saved data.

        Raises:
            ValueError: If the data is not a saved game
        """
        if not isinstance(data, dict) or "players" not in data:
            raise ValueError("Invalid game data: missing 'players' field")
        try:
            return GameState.from_json(data)
        except (KeyError, TypeError) as e:
            raise ValueError(f"Invalid game data: {e}") from e

    @staticmethod
    def save_game_to_file(game_state: GameState, file_path: str, now: Optional[float] = None) -> None:
        """
        Write a game snapshot as indented JSON, creating parent directories.

        Raises:
            OSError: If the file cannot be written
        """
        snapshot = PersistenceService.serialize_game_state(game_state, now)
        _ensure_parent_dir(file_path)
        with open(file_path, "w", encoding="utf-8") as f:
            json.dump(snapshot, f, indent=2)
        log.info("Saved game to %s", file_path)

    @staticmethod
    def load_game_from_file(file_path: str) -> GameState:
        """
        Read a saved game back.

        Raises:
            FileNotFoundError: No save at ``file_path``
            ValueError: The file is not valid JSON or not a saved game
        """
        if not os.path.isfile(file_path):
            raise FileNotFoundError(f"No saved game at {file_path}")

        with open(file_path, "r", encoding="utf-8") as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise ValueError(f"Saved game is not valid JSON: {e}") from e

        return PersistenceService.deserialize_game_state(data)

    @staticmethod
    def auto_save(
        game_state: GameState, auto_save_dir: str = "autosave", now: Optional[float] = None
    ) -> Optional[str]:
        """
        Save under ``game_autosave_<timestamp>.json`` in ``auto_save_dir``.

        Returns:
            Path of the new file, or None when it could not be written
        """
        stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        file_path = os.path.join(auto_save_dir, f"{SAVE_FILE_PREFIX}{stamp}.json")
        try:
            PersistenceService.save_game_to_file(game_state, file_path, now)
        except OSError as e:
            log.warning("Auto-save to %s failed: %s", file_path, e)
            return None
        return file_path

    @staticmethod
    def get_recent_saves(save_dir: str = ".", limit: int = 10) -> List[Tuple[str, float]]:
        """List ``(filename, mtime)`` for JSON saves in ``save_dir``, newest first."""
        if not os.path.isdir(save_dir):
            return []

        try:
            with os.scandir(save_dir) as entries:
                saves = [
                    (entry.name, entry.stat().st_mtime)
                    for entry in entries
                    if entry.is_file() and entry.name.endswith(".json")
                ]
        except OSError as e:
            log.warning("Could not list saves in %s: %s", save_dir, e)
            return []

        saves.sort(key=lambda item: item[1], reverse=True)
        return saves[:limit]


def _ensure_parent_dir(file_path: str) -> None:
    directory = os.path.dirname(file_path)
    if directory:
        os.makedirs(directory, exist_ok=True)


class NameStore:
    """
    JSON key-value file remembering the last roster names.

    A missing or unreadable file behaves like an empty store.
    """

    def __init__(self, file_path: str, key: str = NAMES_STORE_KEY):
        self.file_path = file_path
        self.key = key

    def _read_all(self) -> dict:
        if not os.path.exists(self.file_path):
            return {}
        try:
            with open(self.file_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            log.warning("Ignoring unreadable name store %s: %s", self.file_path, e)
            return {}
        return data if isinstance(data, dict) else {}

    def _write_all(self, data: dict) -> None:
        _ensure_parent_dir(self.file_path)
        with open(self.file_path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)

    def load_names(self) -> List[str]:
        """Return the stored names, or an empty list."""
        names = self._read_all().get(self.key) or []
        if not isinstance(names, list):
            return []
        return [str(name) for name in names if str(name).strip()]

    def save_names(self, names: List[str]) -> None:
        data = self._read_all()
        data[self.key] = list(names)
        self._write_all(data)

    def clear(self) -> None:
        data = self._read_all()
        if self.key in data:
            del data[self.key]
            self._write_all(data)
