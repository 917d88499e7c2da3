"""
Game Store

Concurrency-safe, in-memory keyed storage for game records. The store knows
nothing about game rules: it saves, loads and deletes records by ID.
"""

import copy
import threading
from contextlib import contextmanager
from typing import Dict, Iterator, Optional

from ..errors import GameNotFoundError, InvalidIdError
from ..models.game import Game
from ..utils.game_logger import game_logger


class ReadWriteLock:
    """
    Reader/writer lock built on a condition variable.

    Any number of readers may hold the lock together; a writer holds it
    alone. Waiting writers block new readers so writes are not starved.
    """

    def __init__(self):
        self._condition = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0

    @contextmanager
    def read_locked(self) -> Iterator[None]:
        with self._condition:
            while self._writer or self._writers_waiting:
                self._condition.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._condition:
                self._readers -= 1
                if self._readers == 0:
                    self._condition.notify_all()

    @contextmanager
    def write_locked(self) -> Iterator[None]:
        with self._condition:
            self._writers_waiting += 1
            try:
                while self._writer or self._readers:
                    self._condition.wait()
            finally:
                self._writers_waiting -= 1
            self._writer = True
        try:
            yield
        finally:
            with self._condition:
                self._writer = False
                self._condition.notify_all()


class GameStore:
    """
    In-memory store mapping game IDs to game records.

    Records are copied on the way in and on the way out, so a caller only
    changes stored state by saving.
    """

    def __init__(self):
        self._lock = ReadWriteLock()
        self._games: Dict[str, Game] = {}

    def save(self, game_id: str, record: Game) -> None:
        """
        Persists a record under the given ID.

        An existing record with the same ID is overwritten.

        Raises:
            InvalidIdError: If the ID is empty or blank
        """
        _validate_id(game_id)
        record = copy.deepcopy(record)

        with self._lock.write_locked():
            self._games[game_id] = record

    def load(self, game_id: str) -> Optional[Game]:
        """
        Returns the record saved under the given ID, or None if there is none.

        Raises:
            InvalidIdError: If the ID is empty or blank
        """
        _validate_id(game_id)

        with self._lock.read_locked():
            record = self._games.get(game_id)

        return copy.deepcopy(record)

    def exists(self, game_id: str) -> bool:
        """
        Returns True if a record is saved under the given ID.

        Raises:
            InvalidIdError: If the ID is empty or blank
        """
        _validate_id(game_id)

        with self._lock.read_locked():
            return game_id in self._games

    def delete(self, game_id: str) -> None:
        """
        Removes the record saved under the given ID.

        Raises:
            InvalidIdError: If the ID is empty or blank
            GameNotFoundError: If nothing is saved under the ID
        """
        _validate_id(game_id)

        with self._lock.write_locked():
            if game_id not in self._games:
                raise GameNotFoundError(game_id)
            del self._games[game_id]

    def purge_all(self) -> None:
        """Removes every record from the store."""
        with self._lock.write_locked():
            purged = len(self._games)
            self._games.clear()

        game_logger.logger.info(f"Game store purged ({purged} games removed)")

    def count(self) -> int:
        """Number of records currently stored."""
        with self._lock.read_locked():
            return len(self._games)


def _validate_id(game_id: str) -> None:
    if not isinstance(game_id, str) or not game_id.strip():
        raise InvalidIdError(game_id)


# Process-wide default store, created on first use
_game_store: Optional[GameStore] = None
_game_store_lock = threading.Lock()


def get_game_store() -> GameStore:
    """Get the shared game store, creating it exactly once."""
    global _game_store
    if _game_store is None:
        with _game_store_lock:
            if _game_store is None:
                _game_store = GameStore()
    return _game_store


def reset_game_store() -> None:
    """Discard the shared game store so the next access creates a new one."""
    global _game_store
    with _game_store_lock:
        _game_store = None
