"""
Error Definitions

Exception hierarchy shared by the game store, the word dictionary and the
game service. Controllers translate these into HTTP responses.
"""

from typing import Optional


class WordleError(Exception):
    """Base exception for all Wordle Master errors."""
    pass


class InvalidIdError(WordleError):
    """Raised when a store operation is given an empty or blank game ID."""

    def __init__(self, game_id: Optional[str] = None):
        self.game_id = game_id
        super().__init__("Invalid game ID")


class GameNotFoundError(WordleError):
    """Raised when no well-formed game exists for the given ID."""

    def __init__(self, game_id: str):
        self.game_id = game_id
        super().__init__(f"Game '{game_id}' not found")


class InvalidWordError(WordleError):
    """Raised when a word fails length or dictionary validation."""

    def __init__(self, word: str, reason: str = "Word not in word list"):
        self.word = word
        self.reason = reason
        super().__init__(f"Invalid word '{word}': {reason}")


class GameFinishedError(WordleError):
    """Raised when a guess is submitted to a game that is no longer in play."""

    def __init__(self, game_id: str, status: str, message: Optional[str] = None):
        self.game_id = game_id
        self.status = status
        super().__init__(message or f"Game is finished ({status})")


class OutOfTurnsError(GameFinishedError):
    """Raised when a guess is submitted after the attempt budget is spent."""

    def __init__(self, game_id: str, max_attempts: int):
        self.max_attempts = max_attempts
        super().__init__(game_id, "Lost", f"Out of turns (maximum {max_attempts} attempts)")


class DictionaryUninitializedError(WordleError):
    """Raised when the word dictionary is unloaded or holds no usable words."""

    def __init__(self, message: str = "Word dictionary is empty or not initialized"):
        super().__init__(message)
