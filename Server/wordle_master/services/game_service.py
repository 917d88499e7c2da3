"""
Game Service

Contains the core game logic: game creation, the guess/resign lifecycle,
and the status and turn reports returned to callers.
"""

import json
import threading
import uuid
from contextlib import contextmanager
from typing import Any, Dict, Iterator

from ..config.game_settings import WORD_LENGTH, MAX_ATTEMPTS
from ..errors import (
    GameFinishedError,
    GameNotFoundError,
    InvalidWordError,
    OutOfTurnsError,
)
from ..models.game import Attempt, Game, GameStatus
from ..utils.game_logger import game_logger
from .dictionary_service import WordDictionary
from .game_store import GameStore
from .scoring import score_word


class GameService:
    """
    Core game service managing game sessions.

    This class handles:
    - Game creation with a random or caller-supplied secret word
    - Guess validation and scoring
    - The game state machine (InPlay -> Won / Lost / Resigned)
    - Persisting every change to the game store

    Guesses and resignations for one game are serialized by a per-game lock,
    so concurrent requests for the same game cannot drop an attempt.
    """

    def __init__(self,
                 store: GameStore,
                 dictionary: WordDictionary,
                 word_length: int = WORD_LENGTH,
                 max_attempts: int = MAX_ATTEMPTS):
        self.store = store
        self.dictionary = dictionary
        self.word_length = word_length
        self.max_attempts = max_attempts
        self._game_locks: Dict[str, threading.Lock] = {}
        self._game_locks_guard = threading.Lock()

    def create(self, secret_word: str = "") -> Game:
        """
        Creates and stores a new game.

        Args:
            secret_word: Word to guess; a random dictionary word when empty

        Returns:
            The new game

        Raises:
            InvalidWordError: If the supplied secret word is not acceptable
            DictionaryUninitializedError: If no random word can be generated
        """
        if not secret_word:
            secret_word = self.dictionary.generate_word()

        game = Game(
            id=str(uuid.uuid4()),
            secret_word=self._validate_word(secret_word),
        )
        self.store.save(game.id, game)

        game_logger.log_game_event(game.id, 'game_created', word_length=self.word_length)
        return game

    def retrieve(self, game_id: str) -> Game:
        """
        Loads a game from the store.

        Raises:
            InvalidIdError: If the ID is empty
            GameNotFoundError: If no game record exists for the ID
        """
        record = self.store.load(game_id)
        if not isinstance(record, Game):
            raise GameNotFoundError(game_id)
        return record

    def play(self, game_id: str, try_word: str) -> Dict[str, Any]:
        """
        Scores a guess and advances the game.

        Args:
            game_id: Unique game identifier
            try_word: The guessed word

        Returns:
            Turn report for this guess

        Raises:
            GameNotFoundError: If the game does not exist
            GameFinishedError: If the game is no longer in play
            OutOfTurnsError: If every attempt has already been used (a GameFinishedError)
            InvalidWordError: If the guess is not an acceptable word
        """
        with self._locked_game(game_id) as game:
            if not game.is_in_play:
                if game.status == GameStatus.LOST and len(game.attempts) >= self.max_attempts:
                    raise OutOfTurnsError(game_id, self.max_attempts)
                raise GameFinishedError(game_id, game.status.value)

            if len(game.attempts) >= self.max_attempts:
                game.status = GameStatus.LOST
                self.store.save(game.id, game)
                game_logger.log_game_event(game.id, 'out_of_turns', attempts_used=len(game.attempts))
                raise OutOfTurnsError(game_id, self.max_attempts)

            normalized = self._validate_word(try_word)

            attempt = Attempt(try_word=normalized, is_valid_word=True)
            attempt.hints = score_word(normalized, game.secret_word)
            if len(attempt.hints) != self.word_length:
                raise RuntimeError(f"Scoring produced {len(attempt.hints)} hints for a {self.word_length}-letter word")
            game.attempts.append(attempt)

            if attempt.is_winner():
                game.status = GameStatus.WON
                game_logger.log_game_event(game.id, 'game_won', attempts_used=len(game.attempts))
            elif len(game.attempts) >= self.max_attempts:
                game.status = GameStatus.LOST
                game_logger.log_game_event(game.id, 'game_lost', attempts_used=len(game.attempts))

            self.store.save(game.id, game)

            return self.turn_report(game, attempt)

    def resign(self, game_id: str) -> Dict[str, Any]:
        """
        Ends the game at the player's request. Resigning twice is allowed.

        Returns:
            Status report for the game
        """
        with self._locked_game(game_id) as game:
            game.status = GameStatus.RESIGNED
            self.store.save(game.id, game)

        game_logger.log_game_event(game.id, 'game_resigned', attempts_used=len(game.attempts))
        return self.status_report(game)

    def delete(self, game_id: str) -> None:
        """
        Removes a game from the store once no guess on it is in progress.

        Raises:
            InvalidIdError: If the ID is empty
            GameNotFoundError: If the game does not exist
        """
        with self._locked_game(game_id):
            self.store.delete(game_id)

        game_logger.log_game_event(game_id, 'game_deleted')

    def describe(self, game_id: str) -> Dict[str, Any]:
        """Returns the full game representation, secret word included."""
        return self._to_json_object(self.retrieve(game_id).to_dict())

    def status_report(self, game: Game) -> Dict[str, Any]:
        """
        Builds the status summary for a game.

        The WinningAttempt field is only present for won games.
        """
        report = {
            "GameStatus": game.status.value,
            "AttemptsUsed": len(game.attempts)
        }
        if game.status == GameStatus.WON:
            report["WinningAttempt"] = len(game.attempts)

        return self._to_json_object(report)

    def turn_report(self, game: Game, attempt: Attempt) -> Dict[str, Any]:
        """Builds the status summary merged with the fields of one attempt."""
        report = self.status_report(game)
        if not report:
            return {}

        attempt_report = self._to_json_object(attempt.to_dict())
        if not attempt_report:
            return {}

        report.update(attempt_report)
        return report

    def _validate_word(self, word: str) -> str:
        """Normalizes a word and checks its length and dictionary membership."""
        if not isinstance(word, str):
            raise InvalidWordError(str(word), "Word must be a string")

        normalized = word.lower()
        if len(normalized) != self.word_length:
            raise InvalidWordError(word, f"Word must be exactly {self.word_length} letters")

        if not self.dictionary.is_word_valid(normalized):
            raise InvalidWordError(word, "Word not in word list")

        return normalized

    @contextmanager
    def _locked_game(self, game_id: str) -> Iterator[Game]:
        """
        Holds the per-game lock and yields the stored game.

        Locks are only created for games present in the store, and a lock is
        dropped once its game is gone.
        """
        if not self.store.exists(game_id):
            raise GameNotFoundError(game_id)

        try:
            with self._lock_for(game_id):
                yield self.retrieve(game_id)
        finally:
            if not self.store.exists(game_id):
                self.forget_game(game_id)

    def _lock_for(self, game_id: str) -> threading.Lock:
        with self._game_locks_guard:
            lock = self._game_locks.get(game_id)
            if lock is None:
                lock = self._game_locks[game_id] = threading.Lock()
            return lock

    def forget_game(self, game_id: str) -> None:
        """Drops the per-game lock of a game removed from the store."""
        with self._game_locks_guard:
            self._game_locks.pop(game_id, None)

    def forget_all_games(self) -> None:
        """Drops every per-game lock after the store has been purged."""
        with self._game_locks_guard:
            self._game_locks.clear()

    @staticmethod
    def _to_json_object(data: Dict[str, Any]) -> Dict[str, Any]:
        """Round-trips a report through JSON; any failure yields an empty report."""
        try:
            return json.loads(json.dumps(data))
        except (TypeError, ValueError) as e:
            game_logger.logger.error(f"Failed to serialize report: {e}")
            return {}
